"""
selection – Weighted stochastic pick of one species per team slot.

The weight of a candidate is the product of:

  • tier appropriateness for the trainer's average level
  • closeness of its BST to the expected curve for that level
  • archetype / battle-style type affinity
  • a bonus when it answers a still-open coverage group
  • a penalty when its primary type is already on the team

One cumulative-sum draw picks the winner.  Empty pools fall back to the
curated safe species of the requested generation scope.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

from trainer_architect.archetypes import TrainerArchetype
from trainer_architect.candidate_index import CandidateIndex
from trainer_architect.config import (
    COVERAGE_GROUPS,
    GeneratorSettings,
    safe_species_for_scope,
    scope_ranges,
)
from trainer_architect.difficulty import DIFFICULTY_PROFILES, Difficulty
from trainer_architect.errors import ConfigurationError, EmptyCandidatePoolWarning
from trainer_architect.rng import RandomSource
from trainer_architect.species import SpeciesRecord, SpeciesRepository, Tier

logger = logging.getLogger(__name__)

# ── Battle styles ────────────────────────────────────────────────────────────
BATTLE_STYLES: Dict[str, Tuple[str, ...]] = {
    "Balanced": (),
    "Aggressive": ("Fire", "Fighting", "Dragon", "Dark"),
    "Defensive": ("Steel", "Rock", "Water", "Normal"),
    "Speedy": ("Electric", "Flying", "Psychic"),
    "Tricky": ("Ghost", "Psychic", "Dark", "Poison"),
}


def style_types(style: Optional[str]) -> Tuple[str, ...]:
    if style is None:
        return ()
    for name, types in BATTLE_STYLES.items():
        if name.lower() == str(style).strip().lower():
            return types
    raise ConfigurationError(
        f"Unknown battle style {style!r}; expected one of {', '.join(BATTLE_STYLES)}")


# ── Weight components ────────────────────────────────────────────────────────

def tier_weight(tier: Tier, average_level: float, archetype: TrainerArchetype) -> float:
    if tier is Tier.COMMON:
        weight = 3.0 if average_level <= 15 else 2.0
    elif tier is Tier.UNCOMMON:
        weight = 2.0 if average_level <= 30 else 2.5
    elif tier is Tier.RARE:
        weight = 2.0 if average_level >= 25 else 0.5
    else:
        weight = 0.25
    if tier in archetype.preferred_tiers:
        weight *= 1.5
    return weight


def expected_bst(average_level: float, difficulty: Difficulty) -> float:
    lo, hi = DIFFICULTY_PROFILES[difficulty].bst_range
    expected = min(300 + 5 * average_level, 600)
    return max(lo, min(hi, expected))


def bst_weight(bst: int, average_level: float, difficulty: Difficulty) -> float:
    diff = abs(bst - expected_bst(average_level, difficulty))
    if diff <= 50:
        return 1.5
    if diff <= 100:
        return 1.0
    return 0.3


def open_coverage_groups(team_types: Set[str]) -> List[str]:
    """Threats that no type on the team answers yet."""
    return [threat for threat, answers in COVERAGE_GROUPS.items()
            if not team_types.intersection(answers)]


# ── Selection state ──────────────────────────────────────────────────────────

@dataclass
class SelectionContext:
    """What the engine needs to know about the team built so far."""
    archetype: TrainerArchetype
    difficulty: Difficulty
    average_level: float
    scope: str
    style_types: Tuple[str, ...] = ()
    used_ids: Set[int] = field(default_factory=set)
    used_primary_types: Set[str] = field(default_factory=set)
    team_types: Set[str] = field(default_factory=set)

    def record(self, record: SpeciesRecord, *also_used: int) -> None:
        self.used_ids.add(record.id)
        self.used_ids.update(also_used)
        self.used_primary_types.add(record.primary_type)
        self.team_types.update(record.types)


@dataclass(frozen=True)
class Selection:
    species_id: int
    weight: float = 0.0
    spice: bool = False
    fallback: bool = False
    warning: Optional[EmptyCandidatePoolWarning] = None


class SelectionEngine:
    """
    Draws team members from candidate pools.

    *projected_bst* maps a candidate id to the BST of the form it will be
    fielded as; without it the candidate's own BST is scored.
    """

    def __init__(self, repository: SpeciesRepository, index: CandidateIndex,
                 settings: Optional[GeneratorSettings] = None) -> None:
        self.repository = repository
        self.index = index
        self.settings = settings or GeneratorSettings()

    def weight(self, species_id: int, ctx: SelectionContext,
               projected_bst: Optional[Callable[[int], int]] = None) -> float:
        record = self.repository.require(species_id)
        bst = projected_bst(species_id) if projected_bst is not None else record.bst
        weight = tier_weight(record.tier, ctx.average_level, ctx.archetype)
        weight *= bst_weight(bst, ctx.average_level, ctx.difficulty)
        types = set(record.types)
        if types.intersection(ctx.archetype.preferred_types):
            weight *= 1.5
        if types.intersection(ctx.style_types):
            weight *= 1.25
        for threat in open_coverage_groups(ctx.team_types):
            if types.intersection(COVERAGE_GROUPS[threat]):
                weight *= self.settings.coverage_gap_bonus
                break
        if record.primary_type in ctx.used_primary_types:
            weight *= self.settings.diversity_penalty
        return weight

    def draw(self, candidates: Sequence[int], weights: Sequence[float], rng: RandomSource) -> int:
        """One weighted draw over the cumulative weights."""
        cumulative = list(accumulate(weights))
        total = cumulative[-1] if cumulative else 0.0
        if total <= 0:
            return candidates[rng.randint(0, len(candidates) - 1)]
        slot = bisect_right(cumulative, rng.random() * total)
        return candidates[min(slot, len(candidates) - 1)]

    def select(
        self,
        pool: Sequence[int],
        ctx: SelectionContext,
        rng: RandomSource,
        off_pool: Sequence[int] = (),
        projected_bst: Optional[Callable[[int], int]] = None,
    ) -> Selection:
        """Pick one species from *pool*, or from the safe list when it is empty."""
        if not pool:
            return self.fallback(ctx, rng)

        candidates = [i for i in pool if i not in ctx.used_ids] or list(pool)
        spice = False
        if off_pool and rng.random() < self.settings.spice_probability:
            off = [i for i in off_pool if i not in ctx.used_ids]
            if off:
                candidates = off
                spice = True

        weights = [self.weight(i, ctx, projected_bst) for i in candidates]
        picked = self.draw(candidates, weights, rng)
        chosen_weight = weights[candidates.index(picked)]
        logger.debug("Picked #%d from %d candidates (weight %.2f%s)", picked, len(candidates),
                     chosen_weight, ", off-habitat" if spice else "")
        return Selection(picked, chosen_weight, spice=spice)

    # ── Fallback ─────────────────────────────────────────────────────────

    def safe_pool(self, scope: str) -> List[int]:
        """Safe species present in the repository, else the weakest in-scope species."""
        safe = [i for i in safe_species_for_scope(scope) if i in self.repository]
        if safe:
            return safe
        ranges = scope_ranges(scope)
        in_scope = [r for r in self.repository if any(lo <= r.id <= hi for lo, hi in ranges)]
        in_scope.sort(key=lambda r: (r.bst, r.id))
        return [r.id for r in in_scope[:6]]

    def fallback(self, ctx: SelectionContext, rng: RandomSource) -> Selection:
        safe = self.safe_pool(ctx.scope)
        if not safe:
            raise ConfigurationError(f"Scope {ctx.scope!r} has no species to fall back on")
        choices = [i for i in safe if i not in ctx.used_ids] or safe
        picked = choices[rng.randint(0, len(choices) - 1)]
        warning = EmptyCandidatePoolWarning(
            f"No candidates matched; using safe species #{picked} for scope {ctx.scope}",
            scope=ctx.scope, species_id=picked)
        logger.warning("%s", warning.message)
        return Selection(picked, fallback=True, warning=warning)
