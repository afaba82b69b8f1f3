"""
habitats – Coarse habitat vocabulary and the tag/location mapping tables.

Three kinds of input end up as the same coarse ``Habitat``:

  • fine-grained encounter tags from the encounter table (``ROUTE_GRASS``,
    ``WATER_FISH`` ...) via ``HABITAT_MAP``
  • free-form habitat names supplied by callers ("Ocean", "Volcano" ...)
    via ``HABITAT_ALIASES``
  • FR/LG + Emerald location names ("Petalburg Woods", "Route 111 (desert)")
    via the ordered ``LOCATION_KEYWORDS`` table
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Habitat(str, Enum):
    GRASSLAND = "Grassland"
    FOREST = "Forest"
    CAVE = "Cave"
    WATER = "Water"
    MOUNTAIN = "Mountain"
    DESERT = "Desert"
    URBAN = "Urban"
    RUINS = "Ruins"


ALL_HABITATS: FrozenSet[Habitat] = frozenset(Habitat)

# ── Encounter tags ───────────────────────────────────────────────────────────
HABITAT_MAP: Dict[str, Habitat] = {
    "ROUTE_GRASS": Habitat.GRASSLAND,
    "SAFARI_ZONE": Habitat.GRASSLAND,
    "FOREST": Habitat.FOREST,
    "CAVE": Habitat.CAVE,
    "WATER_SURF": Habitat.WATER,
    "WATER_FISH": Habitat.WATER,
    "MOUNTAIN": Habitat.MOUNTAIN,
    "DESERT": Habitat.DESERT,
    "POWER_PLANT": Habitat.URBAN,
    "RARE_SPECIAL": Habitat.URBAN,
}

HABITAT_ALIASES: Dict[str, Habitat] = {
    "ocean": Habitat.WATER,
    "sea": Habitat.WATER,
    "beach": Habitat.WATER,
    "lake": Habitat.WATER,
    "river": Habitat.WATER,
    "swamp": Habitat.WATER,
    "underwater": Habitat.WATER,
    "plains": Habitat.GRASSLAND,
    "route": Habitat.GRASSLAND,
    "meadow": Habitat.GRASSLAND,
    "field": Habitat.GRASSLAND,
    "safari": Habitat.GRASSLAND,
    "woods": Habitat.FOREST,
    "jungle": Habitat.FOREST,
    "underground": Habitat.CAVE,
    "tunnel": Habitat.CAVE,
    "cavern": Habitat.CAVE,
    "ice": Habitat.CAVE,
    "volcano": Habitat.MOUNTAIN,
    "volcanic": Habitat.MOUNTAIN,
    "snow": Habitat.MOUNTAIN,
    "canyon": Habitat.MOUNTAIN,
    "sand": Habitat.DESERT,
    "city": Habitat.URBAN,
    "town": Habitat.URBAN,
    "industrial": Habitat.URBAN,
    "power plant": Habitat.URBAN,
    "tower": Habitat.RUINS,
    "tomb": Habitat.RUINS,
    "ancient": Habitat.RUINS,
}

_COARSE_LOOKUP = {h.value.lower(): h for h in Habitat}


def normalize_habitat(tag: str) -> Optional[Habitat]:
    """Fold any known habitat spelling into a coarse ``Habitat``."""
    if isinstance(tag, Habitat):
        return tag
    if not isinstance(tag, str) or not tag.strip():
        return None
    key = tag.strip()
    if key.upper() in HABITAT_MAP:
        return HABITAT_MAP[key.upper()]
    lowered = key.lower()
    return _COARSE_LOOKUP.get(lowered) or HABITAT_ALIASES.get(lowered)


# ── Location names ───────────────────────────────────────────────────────────
# First match wins.  A ``None`` habitat marks locations that say nothing about
# where the species lives (gifts, trades, events).
LOCATION_KEYWORDS: Tuple[Tuple[str, Optional[Habitat]], ...] = (
    ("(starter)", None),
    ("in-game trade", None),
    ("event only", None),
    ("roaming", None),
    ("battle frontier", None),
    ("steven's house", None),
    ("lab (", None),
    ("fossil", None),
    ("underwater", Habitat.WATER),
    ("water", Habitat.WATER),
    ("super rod", Habitat.WATER),
    ("beach", Habitat.WATER),
    ("route 119 (6 specific tiles)", Habitat.WATER),
    ("(desert)", Habitat.DESERT),
    ("desert ruins", Habitat.RUINS),
    ("ruins", Habitat.RUINS),
    ("tomb", Habitat.RUINS),
    ("tanoby", Habitat.RUINS),
    ("pokemon tower", Habitat.RUINS),
    ("sky pillar", Habitat.RUINS),
    ("forest", Habitat.FOREST),
    ("woods", Habitat.FOREST),
    ("pattern bush", Habitat.FOREST),
    ("cave", Habitat.CAVE),
    ("tunnel", Habitat.CAVE),
    ("victory road", Habitat.CAVE),
    ("mt. moon", Habitat.CAVE),
    ("seafoam", Habitat.CAVE),
    ("meteor falls", Habitat.CAVE),
    ("navel rock", Habitat.CAVE),
    ("mt.", Habitat.MOUNTAIN),
    ("fiery path", Habitat.MOUNTAIN),
    ("kindle road", Habitat.MOUNTAIN),
    ("jagged pass", Habitat.MOUNTAIN),
    ("canyon", Habitat.MOUNTAIN),
    ("cape brink", Habitat.MOUNTAIN),
    ("power plant", Habitat.URBAN),
    ("mansion", Habitat.URBAN),
    ("game corner", Habitat.URBAN),
    ("silph", Habitat.URBAN),
    ("hideout", Habitat.URBAN),
    ("institute", Habitat.URBAN),
    ("city", Habitat.URBAN),
    ("town", Habitat.URBAN),
    ("island", Habitat.WATER),
    ("safari zone", Habitat.GRASSLAND),
    ("route", Habitat.GRASSLAND),
)

OBTAIN_HABITATS: Dict[str, Habitat] = {
    "FISHING": Habitat.WATER,
    "SURF": Habitat.WATER,
    "SAFARI": Habitat.GRASSLAND,
    "GAME_CORNER": Habitat.URBAN,
}


def habitat_for_location(location: str) -> Optional[Habitat]:
    """Coarse habitat of a location name, or None when it carries no signal."""
    lowered = location.lower()
    for keyword, habitat in LOCATION_KEYWORDS:
        if keyword in lowered:
            return habitat
    logger.debug("No habitat keyword in location %r", location)
    return None


def habitats_from_sources(
    encounter_tags: Iterable[str] = (),
    locations: Iterable[str] = (),
    obtain_methods: Iterable[str] = (),
) -> FrozenSet[Habitat]:
    found = set()
    for tag in encounter_tags:
        habitat = normalize_habitat(tag)
        if habitat is None:
            logger.warning("Unknown encounter tag %r ignored", tag)
        else:
            found.add(habitat)
    for location in locations:
        habitat = habitat_for_location(location)
        if habitat is not None:
            found.add(habitat)
    for method in obtain_methods:
        habitat = OBTAIN_HABITATS.get(method.upper())
        if habitat is not None:
            found.add(habitat)
    return frozenset(found)


# ── Type-derived fallback ────────────────────────────────────────────────────
HABITAT_COMMON_TYPES: Dict[Habitat, Tuple[str, ...]] = {
    Habitat.GRASSLAND: ("Normal", "Flying", "Bug", "Grass"),
    Habitat.FOREST: ("Bug", "Grass", "Flying", "Poison"),
    Habitat.CAVE: ("Rock", "Ground", "Steel", "Dark", "Ice"),
    Habitat.WATER: ("Water",),
    Habitat.MOUNTAIN: ("Rock", "Ground", "Fire", "Steel", "Fighting", "Dragon"),
    Habitat.DESERT: ("Ground", "Rock", "Steel"),
    Habitat.URBAN: ("Electric", "Steel", "Poison"),
    Habitat.RUINS: ("Psychic", "Ghost"),
}


def habitats_for_types(types: Iterable[str]) -> FrozenSet[Habitat]:
    """Habitats whose common types include the species' primary type, else any type."""
    types = list(types)
    for candidates in (types[:1], types):
        found = frozenset(h for h, common in HABITAT_COMMON_TYPES.items()
                          if any(t in common for t in candidates))
        if found:
            return found
    return frozenset({Habitat.GRASSLAND})


def parse_habitats(tags: Iterable[str]) -> Tuple[List[Habitat], List[str]]:
    """Split *tags* into recognised habitats (deduplicated, in order) and unknown tags."""
    known: List[Habitat] = []
    unknown: List[str] = []
    for tag in tags:
        habitat = normalize_habitat(tag)
        if habitat is None:
            unknown.append(tag)
        elif habitat not in known:
            known.append(habitat)
    return known, unknown
