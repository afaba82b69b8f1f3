"""
rng – Injectable random sources for team generation.

Every stochastic step of the pipeline (weighted draws, off-habitat spice,
level-within-range draws) goes through an object with ``random()`` and
``randint(a, b)``.  Production uses one process-wide ``random.Random``;
``Gen3Random`` drives the same interface from the Gen 3 LCRNG so a team can
be reproduced from a 32-bit seed, exactly the way the games derive their
encounters from the boot seed.
"""

from __future__ import annotations

import os
import random
from typing import Optional, Protocol


# ── Gen 3 LCRNG Constants ──────────────────────────────────────────────────

LCRNG_MULT = 0x41C64E6D
LCRNG_ADD = 0x00006073


def lcrng_next(seed: int) -> int:
    """Advance the LCRNG by one step."""
    return (seed * LCRNG_MULT + LCRNG_ADD) & 0xFFFF_FFFF


def lcrng_high16(seed: int) -> int:
    """Extract the high 16 bits (the 'random number')."""
    return (seed >> 16) & 0xFFFF


# ── Random sources ─────────────────────────────────────────────────────────

class RandomSource(Protocol):
    """What the generator needs from an RNG."""

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


class Gen3Random(random.Random):
    """
    ``random.Random`` driven by the Gen 3 LCRNG.

    Each call consumes high16 outputs of successive LCRNG frames, so the
    whole ``random.Random`` API (randint, choice, shuffle ...) becomes
    reproducible from the 32-bit seed.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._state = 0
        self.frames = 0
        super().__init__(seed)

    def seed(self, a=None, version: int = 2) -> None:
        if a is None:
            a = int.from_bytes(os.urandom(4), "little")
        elif not isinstance(a, int):
            raise TypeError(f"Gen3Random seeds must be integers, got {type(a).__name__}")
        self._state = a & 0xFFFF_FFFF
        self.frames = 0
        self.gauss_next = None

    @property
    def state(self) -> int:
        return self._state

    def next16(self) -> int:
        """Advance one frame and return its 16-bit random number."""
        self._state = lcrng_next(self._state)
        self.frames += 1
        return lcrng_high16(self._state)

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        value = 0
        bits = 0
        while bits < k:
            value = (value << 16) | self.next16()
            bits += 16
        return value >> (bits - k)

    def random(self) -> float:
        return self.getrandbits(53) / (1 << 53)

    def getstate(self):
        return (self._state, self.frames)

    def setstate(self, state) -> None:
        self._state, self.frames = state[0] & 0xFFFF_FFFF, state[1]

    def __repr__(self) -> str:
        return f"Gen3Random(state=0x{self._state:08X}, frames={self.frames})"


_DEFAULT_RNG = random.Random()


def default_rng() -> random.Random:
    """The process-wide RNG used when a caller does not inject one."""
    return _DEFAULT_RNG
