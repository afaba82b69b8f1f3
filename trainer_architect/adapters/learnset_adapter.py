"""
learnset_adapter – Converts learnset source shapes into ``Learnset`` objects.

Supported shapes:
  • compact strings  ``"1:Tackle,Growl|7:Leech Seed|10:Vine Whip"``
  • per-level dicts  ``{1: ["Tackle", "Growl"], 7: ["Leech Seed"]}``
  • level lists      ``[{"level": 1, "moves": ["Tackle"]}, {"level": 7, "move": "Leech Seed"}]``
  • legacy entries   ``{"name": ..., "movesets": {level: [moves]}}``

All of them are sorted by level (stable, so same-level order survives).
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from trainer_architect.learnsets import AUTHENTIC, LEGACY, Learnset, LearnsetBook

logger = logging.getLogger(__name__)

_Pairs = List[Tuple[int, Tuple[str, ...]]]


def _finish(species_id: int, pairs: _Pairs, source: str) -> Learnset:
    pairs.sort(key=lambda p: p[0])
    return Learnset(species_id, tuple(pairs), source)


def parse_compact(species_id: int, text: str, source: str = AUTHENTIC) -> Learnset:
    pairs: _Pairs = []
    for chunk in text.split("|"):
        chunk = chunk.strip()
        if not chunk:
            continue
        level, _, moves = chunk.partition(":")
        names = tuple(m.strip() for m in moves.split(",") if m.strip())
        if names:
            pairs.append((int(level), names))
    return _finish(species_id, pairs, source)


def from_level_map(species_id: int, mapping: Mapping[Union[int, str], Sequence[str]],
                   source: str = LEGACY) -> Learnset:
    pairs: _Pairs = []
    for level, moves in mapping.items():
        if isinstance(moves, str):
            moves = [moves]
        names = tuple(m for m in moves if m)
        if names:
            pairs.append((int(level), names))
    return _finish(species_id, pairs, source)


def from_level_list(species_id: int, rows: Iterable[Mapping], source: str = LEGACY) -> Learnset:
    pairs: _Pairs = []
    for row in rows:
        moves = row.get("moves") or ([row["move"]] if row.get("move") else [])
        if moves:
            pairs.append((int(row.get("level", 1)), tuple(moves)))
    return _finish(species_id, pairs, source)


def from_legacy_entry(species_id: int, entry: Mapping) -> Learnset:
    movesets = entry.get("movesets") or entry.get("moves") or {}
    if isinstance(movesets, Mapping):
        return from_level_map(species_id, movesets, LEGACY)
    return from_level_list(species_id, movesets, LEGACY)


def load_learnsets(compact: Mapping[int, str], legacy: Optional[Mapping[int, Mapping]] = None) -> LearnsetBook:
    """Parse both tables; rows that fail to parse are logged and skipped."""
    authentic: Dict[int, Learnset] = {}
    for species_id, text in compact.items():
        try:
            authentic[species_id] = parse_compact(species_id, text)
        except ValueError as exc:
            logger.warning("Skipping learnset for #%d: %s", species_id, exc)
    alternates: Dict[int, Learnset] = {}
    for species_id, entry in (legacy or {}).items():
        try:
            alternates[species_id] = from_legacy_entry(species_id, entry)
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping legacy moveset for #%d: %s", species_id, exc)
    logger.info("Loaded %d authentic and %d legacy learnsets", len(authentic), len(alternates))
    return LearnsetBook(authentic, alternates)


def build_default_learnsets() -> LearnsetBook:
    from trainer_architect import learnset_tables

    return load_learnsets(learnset_tables.AUTHENTIC_LEARNSETS, learnset_tables.LEGACY_MOVESETS)
