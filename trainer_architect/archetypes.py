"""
archetypes – Trainer archetype policies.

An archetype decides what a trainer class may field: type restrictions,
team-size range, how far its species may evolve, which BST band it draws
from, where it lives, and how its movesets are picked.  The bundled table
follows the Gen 3 NPC trainer patterns; callers can pass their own records
or camelCase policy dicts (``TrainerArchetype.from_mapping``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

from trainer_architect.config import MAX_LEVEL, MAX_TEAM_SIZE
from trainer_architect.errors import ConfigurationError
from trainer_architect.habitats import Habitat, normalize_habitat
from trainer_architect.species import Tier
from trainer_architect.type_chart import normalize_type

logger = logging.getLogger(__name__)

MOVESET_POLICIES = ("recent", "mixed")
MAX_STAGE = 3


@dataclass(frozen=True)
class TrainerArchetype:
    name: str
    required_types: Tuple[str, ...] = ()
    preferred_types: Tuple[str, ...] = ()
    team_size_range: Tuple[int, int] = (2, 4)
    max_stage: int = MAX_STAGE
    min_evolution_level: int = 0
    bst_range: Tuple[int, int] = (0, 800)
    allow_exotic_early: bool = True
    preferred_habitats: Tuple[Habitat, ...] = (Habitat.GRASSLAND,)
    incompatible_habitats: FrozenSet[Habitat] = field(default_factory=frozenset)
    preferred_tiers: Tuple[Tier, ...] = ()
    allow_legendary: bool = False
    allow_pseudo_legendary: bool = False
    allow_starters: bool = False
    level_offset: int = 0
    ace_at_max: bool = False
    moveset_policy: str = "recent"

    def __post_init__(self) -> None:
        problems = self.problems()
        if problems:
            raise ConfigurationError(f"Malformed archetype {self.name!r}: " + "; ".join(problems))

    def problems(self) -> list:
        found = []
        if not self.name:
            found.append("empty name")
        if len(self.team_size_range) != 2 or len(self.bst_range) != 2:
            return found + ["ranges must be (min, max) pairs"]
        lo, hi = self.team_size_range
        if not (1 <= lo <= hi <= MAX_TEAM_SIZE):
            found.append(f"team size range {self.team_size_range} outside 1-{MAX_TEAM_SIZE}")
        if not 1 <= self.max_stage <= MAX_STAGE:
            found.append(f"max stage {self.max_stage} outside 1-{MAX_STAGE}")
        if not 0 <= self.min_evolution_level <= MAX_LEVEL:
            found.append(f"min evolution level {self.min_evolution_level} out of range")
        bst_lo, bst_hi = self.bst_range
        if bst_lo < 0 or bst_lo > bst_hi:
            found.append(f"BST range {self.bst_range} is inverted")
        for t in self.required_types + self.preferred_types:
            if normalize_type(t) != t:
                found.append(f"unknown type {t!r}")
        if not self.preferred_habitats:
            found.append("no preferred habitats")
        for h in tuple(self.preferred_habitats) + tuple(self.incompatible_habitats):
            if not isinstance(h, Habitat):
                found.append(f"unknown habitat {h!r}")
        for tier in self.preferred_tiers:
            if not isinstance(tier, Tier):
                found.append(f"unknown tier {tier!r}")
        if self.moveset_policy not in MOVESET_POLICIES:
            found.append(f"moveset policy {self.moveset_policy!r} not in {MOVESET_POLICIES}")
        return found

    @property
    def key(self) -> str:
        return archetype_key(self.name)

    @classmethod
    def from_mapping(cls, data: Mapping) -> "TrainerArchetype":
        """Build from a policy dict in snake_case or the camelCase table format."""
        def pick(*names, default=None):
            for n in names:
                if n in data and data[n] is not None:
                    return data[n]
            return default

        name = pick("name", "trainerClass", "trainer_class", default="")
        avoid = pick("avoidSpecialEvolutions", "avoid_special_evolutions")
        allow_exotic = (not avoid) if avoid is not None else bool(pick("allow_exotic_early", default=True))
        try:
            stage = pick("max_stage", "maxStage")
            if stage is None:
                stage = _STAGE_WORDS.get(str(pick("evolutionStage", "evolution_stage", default="")), MAX_STAGE)
                if pick("excludeEvolved", "exclude_evolved", default=False):
                    stage = 1
            return cls(
                name=name,
                required_types=_types(pick("required_types", "requiredTypes", default=())),
                preferred_types=_types(pick("preferred_types", "preferredTypes", default=())),
                team_size_range=tuple(pick("team_size_range", "teamSizeRange", default=(2, 4))),
                max_stage=int(stage),
                min_evolution_level=int(pick("min_evolution_level", "minLevelForEvolution", default=0)),
                bst_range=_bst_range(data),
                allow_exotic_early=allow_exotic,
                preferred_habitats=_habitats(pick("preferred_habitats", "preferredBiomes",
                                                  default=("Grassland",))),
                incompatible_habitats=frozenset(_habitats(pick("incompatible_habitats",
                                                               "incompatibleBiomes", default=()))),
                preferred_tiers=tuple(_tier(t) for t in pick("preferred_tiers", "preferredTiers", default=())),
                allow_legendary=bool(pick("allow_legendary", "allowLegendaries",
                                          default=not pick("excludeLegendaries", default=True))),
                allow_pseudo_legendary=bool(pick("allow_pseudo_legendary", "allowPseudoLegendaries",
                                                 "allowPseudoLegendary", default=False)),
                allow_starters=bool(pick("allow_starters", "allowStarters", default=False)),
                level_offset=int(pick("level_offset", "levelOffset", default=0)),
                ace_at_max=bool(pick("ace_at_max", "aceAtMax", default=False)),
                moveset_policy=str(pick("moveset_policy", "movesetPolicy", default="recent")),
            )
        except ConfigurationError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Malformed archetype {name!r}: {exc}") from exc


_STAGE_WORDS = {"basic": 1, "evolved": 2, "mixed": 2, "fully_evolved": 3}


def _types(values: Iterable[str]) -> Tuple[str, ...]:
    # unknown names pass through unchanged so validation can report them
    return tuple(normalize_type(v) or v for v in values)


def _habitats(values: Iterable[str]) -> Tuple[Habitat, ...]:
    found = []
    for v in values:
        habitat = normalize_habitat(v)
        if habitat is None:
            logger.debug("Archetype habitat %r not recognised, skipped", v)
        elif habitat not in found:
            found.append(habitat)
    return tuple(found)


def _tier(value: Union[str, Tier]) -> Tier:
    try:
        return Tier(value)
    except ValueError:
        raise ConfigurationError(f"Unknown tier {value!r}") from None


def _bst_range(data: Mapping) -> Tuple[int, int]:
    for key in ("bst_range", "baseStatRange"):
        if data.get(key):
            lo, hi = data[key]
            return int(lo), int(hi)
    return int(data.get("minBST", 0)), int(data.get("maxBST", 800))


def archetype_key(name: str) -> str:
    return name.strip().lower().replace("-", " ").replace(" ", "_")


# ── Bundled archetypes ───────────────────────────────────────────────────────

_COMMON = (Tier.COMMON, Tier.UNCOMMON)
_STRONG = (Tier.UNCOMMON, Tier.RARE)

ARCHETYPES: Dict[str, TrainerArchetype] = {a.key: a for a in (
    TrainerArchetype(
        "Youngster", preferred_types=("Normal", "Fighting"), team_size_range=(2, 3),
        max_stage=1, bst_range=(180, 420), allow_exotic_early=False,
        preferred_habitats=(Habitat.GRASSLAND,), preferred_tiers=_COMMON,
        moveset_policy="mixed"),
    TrainerArchetype(
        "Lass", preferred_types=("Normal", "Psychic"), team_size_range=(2, 3),
        max_stage=1, bst_range=(180, 420), allow_exotic_early=False,
        preferred_habitats=(Habitat.GRASSLAND, Habitat.URBAN), preferred_tiers=_COMMON,
        moveset_policy="mixed"),
    TrainerArchetype(
        "Bug Catcher", required_types=("Bug",), team_size_range=(2, 4),
        max_stage=2, bst_range=(180, 400), allow_exotic_early=False,
        preferred_habitats=(Habitat.FOREST, Habitat.GRASSLAND),
        incompatible_habitats=frozenset({Habitat.WATER}), preferred_tiers=_COMMON,
        moveset_policy="mixed"),
    TrainerArchetype(
        "Camper", team_size_range=(2, 4), max_stage=2, bst_range=(200, 450),
        allow_exotic_early=False,
        preferred_habitats=(Habitat.GRASSLAND, Habitat.FOREST, Habitat.CAVE),
        preferred_tiers=(Tier.COMMON, Tier.UNCOMMON, Tier.RARE), moveset_policy="mixed"),
    TrainerArchetype(
        "Picnicker", preferred_types=("Grass", "Normal"), team_size_range=(2, 4),
        max_stage=2, bst_range=(200, 450), allow_exotic_early=False,
        preferred_habitats=(Habitat.GRASSLAND, Habitat.FOREST),
        preferred_tiers=(Tier.COMMON, Tier.UNCOMMON, Tier.RARE), moveset_policy="mixed"),
    TrainerArchetype(
        "Hiker", preferred_types=("Rock", "Ground", "Fighting"), team_size_range=(2, 4),
        max_stage=3, bst_range=(250, 500),
        preferred_habitats=(Habitat.MOUNTAIN, Habitat.CAVE, Habitat.DESERT),
        incompatible_habitats=frozenset({Habitat.WATER}), preferred_tiers=_STRONG),
    TrainerArchetype(
        "Swimmer", required_types=("Water",), team_size_range=(2, 5), max_stage=3,
        bst_range=(200, 500), preferred_habitats=(Habitat.WATER,),
        incompatible_habitats=frozenset({Habitat.DESERT, Habitat.MOUNTAIN, Habitat.CAVE}),
        preferred_tiers=_STRONG),
    TrainerArchetype(
        "Fisherman", required_types=("Water",), team_size_range=(2, 5), max_stage=2,
        bst_range=(150, 540), allow_exotic_early=False, preferred_habitats=(Habitat.WATER,),
        incompatible_habitats=frozenset({Habitat.DESERT, Habitat.MOUNTAIN}),
        preferred_tiers=_COMMON, moveset_policy="mixed"),
    TrainerArchetype(
        "Sailor", preferred_types=("Water", "Fighting"), team_size_range=(2, 4),
        max_stage=3, bst_range=(250, 500),
        preferred_habitats=(Habitat.WATER, Habitat.GRASSLAND),
        incompatible_habitats=frozenset({Habitat.CAVE, Habitat.MOUNTAIN}),
        preferred_tiers=_STRONG),
    TrainerArchetype(
        "Psychic", required_types=("Psychic",), team_size_range=(2, 4), max_stage=3,
        bst_range=(180, 520),
        preferred_habitats=(Habitat.URBAN, Habitat.RUINS, Habitat.GRASSLAND, Habitat.FOREST),
        preferred_tiers=_STRONG),
    TrainerArchetype(
        "Ace Trainer", team_size_range=(4, 6), max_stage=3, min_evolution_level=16,
        bst_range=(300, 600),
        preferred_habitats=(Habitat.URBAN, Habitat.GRASSLAND, Habitat.MOUNTAIN, Habitat.FOREST),
        preferred_tiers=_STRONG),
    TrainerArchetype(
        "Gym Leader", team_size_range=(3, 6), max_stage=3, bst_range=(300, 620),
        preferred_habitats=(Habitat.URBAN, Habitat.GRASSLAND, Habitat.CAVE,
                            Habitat.MOUNTAIN, Habitat.WATER),
        preferred_tiers=_STRONG, allow_pseudo_legendary=True, level_offset=1,
        ace_at_max=True),
    TrainerArchetype(
        "Elite Four", team_size_range=(4, 6), max_stage=3, bst_range=(400, 700),
        preferred_habitats=(Habitat.URBAN, Habitat.CAVE, Habitat.MOUNTAIN, Habitat.WATER),
        preferred_tiers=(Tier.RARE,), allow_pseudo_legendary=True, level_offset=2,
        ace_at_max=True),
    TrainerArchetype(
        "Champion", team_size_range=(5, 6), max_stage=3, bst_range=(450, 720),
        preferred_habitats=(Habitat.URBAN, Habitat.GRASSLAND, Habitat.CAVE,
                            Habitat.MOUNTAIN, Habitat.WATER),
        preferred_tiers=(Tier.RARE,), allow_pseudo_legendary=True, allow_starters=True,
        level_offset=2, ace_at_max=True),
)}


def get_archetype(value: Union[str, TrainerArchetype, Mapping],
                  table: Optional[Mapping[str, TrainerArchetype]] = None) -> TrainerArchetype:
    """Resolve an archetype name, record or policy dict."""
    if isinstance(value, TrainerArchetype):
        return value
    if isinstance(value, Mapping):
        return TrainerArchetype.from_mapping(value)
    table = ARCHETYPES if table is None else table
    if isinstance(value, str):
        archetype = table.get(archetype_key(value))
        if archetype is not None:
            return archetype
    raise ConfigurationError(f"Unknown trainer archetype: {value!r}")
