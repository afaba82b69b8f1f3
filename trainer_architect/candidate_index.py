"""
candidate_index – Precomputed lookup of selectable species.

Built once over a ``SpeciesRepository``.  Every query is a chain of set
intersections/subtractions over the per-habitat and per-type id sets plus a
bisect slice of the sorted id list for the generation scope, so the order
the filters are listed in never changes the result.
"""

from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from trainer_architect.config import DEFAULT_SCOPE, scope_ranges
from trainer_architect.habitats import Habitat
from trainer_architect.species import SpeciesRepository, Tier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateQuery:
    """
    Filters for one candidate lookup.  Empty tuples mean "no filter".

    ``required_types`` and ``preferred_types`` both keep species carrying
    at least one of the listed types.
    """
    habitats: Tuple[Habitat, ...] = ()
    scope: str = DEFAULT_SCOPE
    required_types: Tuple[str, ...] = ()
    preferred_types: Tuple[str, ...] = ()
    tiers: Tuple[Tier, ...] = ()
    bst_range: Optional[Tuple[int, int]] = None
    allow_legendary: bool = False
    allow_pseudo_legendary: bool = False
    allow_starters: bool = False
    exclude_ids: FrozenSet[int] = field(default_factory=frozenset)

    def but(self, **changes) -> "CandidateQuery":
        return replace(self, **changes)


class CandidateIndex:
    """Habitat / type / scope indices over the non-excluded species."""

    def __init__(self, repository: SpeciesRepository,
                 pseudo_legendary_ids: Optional[Iterable[int]] = None) -> None:
        if pseudo_legendary_ids is None:
            from trainer_architect.pokedex_tables import PSEUDO_LEGENDARY_IDS
            pseudo_legendary_ids = PSEUDO_LEGENDARY_IDS
        self.repository = repository

        by_habitat: Dict[Habitat, Set[int]] = {h: set() for h in Habitat}
        by_type: Dict[str, Set[int]] = {}
        by_tier: Dict[Tier, Set[int]] = {t: set() for t in Tier}
        ids: List[int] = []
        legendary: Set[int] = set()
        starters: Set[int] = set()
        for record in repository:
            if record.excluded:
                continue
            ids.append(record.id)
            for habitat in record.habitats:
                by_habitat[habitat].add(record.id)
            for t in record.types:
                by_type.setdefault(t, set()).add(record.id)
            by_tier[record.tier].add(record.id)
            if record.legendary:
                legendary.add(record.id)
            if record.starter:
                starters.add(record.id)

        self._ids: Tuple[int, ...] = tuple(ids)
        self._all: FrozenSet[int] = frozenset(ids)
        self._by_habitat = {h: frozenset(s) for h, s in by_habitat.items()}
        self._by_type = {t: frozenset(s) for t, s in by_type.items()}
        self._by_tier = {t: frozenset(s) for t, s in by_tier.items()}
        self._legendary = frozenset(legendary)
        self._starters = frozenset(starters)
        self._pseudo = frozenset(i for i in pseudo_legendary_ids if i in self._all)
        logger.info("Candidate index: %d selectable species across %d habitats",
                    len(self._ids), sum(1 for s in self._by_habitat.values() if s))

    # ── Primitive sets ───────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, species_id: object) -> bool:
        return species_id in self._all

    @property
    def pseudo_legendary_ids(self) -> FrozenSet[int]:
        return self._pseudo

    def in_habitat(self, habitat: Habitat) -> FrozenSet[int]:
        return self._by_habitat.get(habitat, frozenset())

    def of_type(self, type_name: str) -> FrozenSet[int]:
        return self._by_type.get(type_name, frozenset())

    def in_scope(self, scope: str) -> FrozenSet[int]:
        """Selectable ids inside *scope*, sliced out of the sorted id list."""
        found: Set[int] = set()
        for lo, hi in scope_ranges(scope):
            start = bisect_left(self._ids, lo)
            stop = bisect_right(self._ids, hi)
            found.update(self._ids[start:stop])
        return frozenset(found)

    def scope_size(self, scope: str) -> int:
        return len(self.in_scope(scope))

    # ── Queries ──────────────────────────────────────────────────────────

    def _any_type(self, types: Iterable[str]) -> FrozenSet[int]:
        found: Set[int] = set()
        for t in types:
            found |= self.of_type(t)
        return frozenset(found)

    def _policy_filtered(self, pool: FrozenSet[int], query: CandidateQuery) -> FrozenSet[int]:
        pool = pool & self.in_scope(query.scope)
        if query.required_types:
            pool &= self._any_type(query.required_types)
        if query.preferred_types:
            pool &= self._any_type(query.preferred_types)
        if query.tiers:
            tiered: Set[int] = set()
            for tier in query.tiers:
                tiered |= self._by_tier.get(tier, frozenset())
            pool &= tiered
        if query.bst_range is not None:
            lo, hi = query.bst_range
            pool = frozenset(i for i in pool if lo <= self.repository.require(i).bst <= hi)
        if not query.allow_legendary:
            pool -= self._legendary
        if not query.allow_pseudo_legendary:
            pool -= self._pseudo
        if not query.allow_starters:
            pool -= self._starters
        return pool - query.exclude_ids

    def _habitat_pool(self, habitats: Iterable[Habitat]) -> FrozenSet[int]:
        habitats = tuple(habitats)
        if not habitats:
            return self._all
        found: Set[int] = set()
        for habitat in habitats:
            found |= self.in_habitat(habitat)
        return frozenset(found)

    def query(self, query: CandidateQuery) -> List[int]:
        """Sorted ids matching every filter of *query*; may be empty."""
        result = sorted(self._policy_filtered(self._habitat_pool(query.habitats), query))
        logger.debug("Query %s/%s → %d candidates",
                     ",".join(h.value for h in query.habitats) or "*", query.scope, len(result))
        return result

    def off_habitat(self, query: CandidateQuery) -> List[int]:
        """Species outside the query's habitats that pass every other filter."""
        if not query.habitats:
            return []
        outside = self._all - self._habitat_pool(query.habitats)
        return sorted(self._policy_filtered(outside, query))
