"""
encounter_adapter – Reads encounter-classification rows.

Rows look like ``{"biomes": ["ROUTE_GRASS", "FOREST"], "tier": "common"}``
with an optional ``"exclude": True``.  The ``"starter"`` tier is not a
rarity: it marks the gift starters, whose rarity is then derived from BST.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from trainer_architect.species import Tier

logger = logging.getLogger(__name__)

_TIER_NAMES = {t.value: t for t in Tier}


@dataclass(frozen=True)
class EncounterInfo:
    dex: int
    habitat_tags: Tuple[str, ...] = ()
    tier: Optional[Tier] = None
    starter: bool = False
    exclude: bool = False


def parse_encounter_row(dex: int, row: Mapping) -> EncounterInfo:
    biomes = row.get("biomes") or ()
    if isinstance(biomes, str):
        biomes = (biomes,)
    raw_tier = str(row.get("tier") or "").strip().lower()
    starter = raw_tier == "starter"
    tier = _TIER_NAMES.get(raw_tier)
    if raw_tier and tier is None and not starter:
        logger.warning("Unknown encounter tier %r for #%d ignored", raw_tier, dex)
    return EncounterInfo(
        dex=dex,
        habitat_tags=tuple(biomes),
        tier=tier,
        starter=starter,
        exclude=bool(row.get("exclude", False)),
    )
