"""
Global configuration for trainer-architect.
All tunable parameters and the curated constant tables live here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Dict, List, Mapping, Optional, Tuple

from trainer_architect.errors import ConfigurationError

logger = logging.getLogger(__name__)

# ── Team shape ───────────────────────────────────────────────────────────────
MAX_TEAM_SIZE = 6
MIN_LEVEL = 1
MAX_LEVEL = 100

# ── Evolution walks ──────────────────────────────────────────────────────────
HOP_LIMIT = 10

# Minimum level at which a non-LEVEL evolution is considered plausible.
METHOD_MIN_LEVELS: Dict[str, int] = {
    "STONE": 20,
    "FRIENDSHIP": 20,
    "TRADE": 25,
    "OTHER": 25,
}

# Used for archetypes that do not allow exotic evolutions early on.
CONSERVATIVE_METHOD_MIN_LEVELS: Dict[str, int] = {
    "STONE": 25,
    "FRIENDSHIP": 30,
    "TRADE": 30,
    "OTHER": 30,
}

# Evolved form (dex) → minimum level, overriding the method threshold.
EVOLUTION_LEVEL_OVERRIDES: Dict[int, int] = {
    65: 35,    # Alakazam
    68: 40,    # Machamp
    76: 35,    # Golem
    94: 35,    # Gengar
    208: 45,   # Steelix
    205: 30,   # Forretress
    169: 25,   # Crobat
}

# ── Selection ────────────────────────────────────────────────────────────────
SPICE_PROBABILITY = 0.1       # chance of drawing from outside the habitat
DIVERSITY_PENALTY = 0.4       # weight multiplier for a repeated primary type
COVERAGE_GAP_BONUS = 1.25     # weight multiplier for answering a coverage group
MAX_REPLACEMENT_SUGGESTIONS = 3

# Threat type → types that answer it.
COVERAGE_GROUPS: Dict[str, Tuple[str, ...]] = {
    "Water": ("Electric", "Grass"),
    "Electric": ("Ground",),
    "Grass": ("Fire", "Ice", "Bug", "Flying", "Poison"),
    "Rock": ("Water", "Grass", "Fighting", "Ground", "Steel"),
    "Ground": ("Water", "Grass", "Ice"),
    "Fighting": ("Flying", "Psychic"),
}

# ── Generation scopes ────────────────────────────────────────────────────────
GENERATION_SCOPES: Dict[str, Tuple[Tuple[int, int], ...]] = {
    "gen1": ((1, 151),),
    "gen2": ((152, 251),),
    "gen3": ((252, 386),),
    "gen1-2": ((1, 251),),
    "gen1-3": ((1, 386),),
    "all": ((1, 386),),
}
DEFAULT_SCOPE = "gen1-3"

# Early-route species that every region can field.
SAFE_SPECIES: Dict[str, Tuple[int, ...]] = {
    "gen1": (16, 19, 10, 13, 21, 52),        # Pidgey Rattata Caterpie Weedle Spearow Meowth
    "gen2": (161, 163, 165, 167, 187, 194),  # Sentret Hoothoot Ledyba Spinarak Hoppip Wooper
    "gen3": (261, 263, 265, 276, 278, 293),  # Poochyena Zigzagoon Wurmple Taillow Wingull Whismur
}
_SCOPE_GENERATIONS: Dict[str, Tuple[str, ...]] = {
    "gen1": ("gen1",),
    "gen2": ("gen2",),
    "gen3": ("gen3",),
    "gen1-2": ("gen1", "gen2"),
    "gen1-3": ("gen1", "gen2", "gen3"),
    "all": ("gen1", "gen2", "gen3"),
}


def scope_ranges(scope: str) -> Tuple[Tuple[int, int], ...]:
    """Return the inclusive dex ranges of *scope*."""
    try:
        return GENERATION_SCOPES[scope.lower()]
    except (KeyError, AttributeError):
        raise ConfigurationError(f"Unknown generation scope: {scope!r}") from None


def safe_species_for_scope(scope: str) -> List[int]:
    """Curated fallback species for *scope*, earliest generation first."""
    scope_ranges(scope)
    ids: List[int] = []
    for gen in _SCOPE_GENERATIONS[scope.lower()]:
        ids.extend(SAFE_SPECIES[gen])
    return ids


# ── Settings ─────────────────────────────────────────────────────────────────

DEFAULT_SETTINGS: dict = {
    "spice_probability": SPICE_PROBABILITY,
    "diversity_penalty": DIVERSITY_PENALTY,
    "coverage_gap_bonus": COVERAGE_GAP_BONUS,
    "hop_limit": HOP_LIMIT,
    "max_team_size": MAX_TEAM_SIZE,
    "max_replacement_suggestions": MAX_REPLACEMENT_SUGGESTIONS,
    "method_min_levels": METHOD_MIN_LEVELS,
    "conservative_method_min_levels": CONSERVATIVE_METHOD_MIN_LEVELS,
    "evolution_level_overrides": EVOLUTION_LEVEL_OVERRIDES,
}


@dataclass(frozen=True)
class GeneratorSettings:
    spice_probability: float = SPICE_PROBABILITY
    diversity_penalty: float = DIVERSITY_PENALTY
    coverage_gap_bonus: float = COVERAGE_GAP_BONUS
    hop_limit: int = HOP_LIMIT
    max_team_size: int = MAX_TEAM_SIZE
    max_replacement_suggestions: int = MAX_REPLACEMENT_SUGGESTIONS
    method_min_levels: Dict[str, int] = field(
        default_factory=lambda: dict(METHOD_MIN_LEVELS))
    conservative_method_min_levels: Dict[str, int] = field(
        default_factory=lambda: dict(CONSERVATIVE_METHOD_MIN_LEVELS))
    evolution_level_overrides: Dict[int, int] = field(
        default_factory=lambda: dict(EVOLUTION_LEVEL_OVERRIDES))

    def __post_init__(self) -> None:
        if not 0.0 <= self.spice_probability <= 1.0:
            raise ConfigurationError(
                f"spice_probability must be in [0, 1], got {self.spice_probability}")
        if self.diversity_penalty <= 0 or self.coverage_gap_bonus <= 0:
            raise ConfigurationError("Weight multipliers must be positive")
        if self.hop_limit < 1:
            raise ConfigurationError(f"hop_limit must be >= 1, got {self.hop_limit}")
        if not 1 <= self.max_team_size <= MAX_TEAM_SIZE:
            raise ConfigurationError(
                f"max_team_size must be in [1, {MAX_TEAM_SIZE}], got {self.max_team_size}")
        if self.max_replacement_suggestions < 0:
            raise ConfigurationError("max_replacement_suggestions must be >= 0")
        for table in (self.method_min_levels, self.conservative_method_min_levels):
            missing = set(METHOD_MIN_LEVELS) - set(table)
            if missing:
                raise ConfigurationError(
                    f"Method threshold table missing: {', '.join(sorted(missing))}")
            for method, level in table.items():
                if not MIN_LEVEL <= level <= MAX_LEVEL:
                    raise ConfigurationError(
                        f"Threshold for {method} out of range: {level}")

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_settings(overrides: Optional[Mapping[str, object]] = None) -> GeneratorSettings:
    """Merge *overrides* over ``DEFAULT_SETTINGS`` and validate the result."""
    overrides = dict(overrides or {})
    unknown = set(overrides) - set(DEFAULT_SETTINGS)
    if unknown:
        raise ConfigurationError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
    merged = {**DEFAULT_SETTINGS, **overrides}
    # Partial threshold tables only replace the methods they name.
    for key in ("method_min_levels", "conservative_method_min_levels",
                "evolution_level_overrides"):
        if key in overrides:
            if not isinstance(overrides[key], Mapping):
                raise ConfigurationError(f"{key} must be a mapping")
            merged[key] = {**DEFAULT_SETTINGS[key], **overrides[key]}
        else:
            merged[key] = dict(DEFAULT_SETTINGS[key])
    if overrides:
        logger.debug("Settings overrides: %s", sorted(overrides))
    return GeneratorSettings(**merged)
