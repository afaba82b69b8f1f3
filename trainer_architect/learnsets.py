"""
learnsets – Level-up learnsets and the lookup used by the moveset resolver.

A ``Learnset`` is an ascending sequence of ``(level, moves)`` pairs.  The
same level may appear more than once; order within a level is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

AUTHENTIC = "authentic"
LEGACY = "legacy"


@dataclass(frozen=True)
class Learnset:
    species_id: int
    entries: Tuple[Tuple[int, Tuple[str, ...]], ...]
    source: str = AUTHENTIC

    def __post_init__(self) -> None:
        previous = 0
        for level, _moves in self.entries:
            if level < previous:
                raise ValueError(
                    f"Learnset for #{self.species_id} is not ascending at level {level}")
            previous = level

    def moves_up_to(self, level: int) -> List[str]:
        """Unique moves unlocked at or below *level*, in first-unlock order."""
        seen: Dict[str, None] = {}
        for threshold, moves in self.entries:
            if threshold > level:
                break
            for move in moves:
                seen.setdefault(move, None)
        return list(seen)

    def recent(self, level: int, count: int = 4) -> List[str]:
        """The *count* most recently unlocked moves."""
        return self.moves_up_to(level)[-count:]

    def mixed(self, level: int, count: int = 4) -> List[str]:
        """Half early moves, half recent ones: how rank-and-file trainers fight."""
        moves = self.moves_up_to(level)
        if len(moves) <= count:
            return moves
        early = count // 2
        return moves[:early] + moves[-(count - early):]

    def __len__(self) -> int:
        return len(self.entries)


class LearnsetBook:
    """Authentic learnsets first, legacy movesets as the alternate source."""

    def __init__(
        self,
        authentic: Optional[Mapping[int, Learnset]] = None,
        legacy: Optional[Mapping[int, Learnset]] = None,
    ) -> None:
        self._authentic: Dict[int, Learnset] = dict(authentic or {})
        self._legacy: Dict[int, Learnset] = dict(legacy or {})

    def authentic(self, species_id: int) -> Optional[Learnset]:
        return self._authentic.get(species_id)

    def legacy(self, species_id: int) -> Optional[Learnset]:
        return self._legacy.get(species_id)

    def sources_for(self, species_id: int) -> Iterable[Learnset]:
        for table in (self._authentic, self._legacy):
            learnset = table.get(species_id)
            if learnset is not None:
                yield learnset

    def __contains__(self, species_id: object) -> bool:
        return species_id in self._authentic or species_id in self._legacy

    def __len__(self) -> int:
        return len(set(self._authentic) | set(self._legacy))
