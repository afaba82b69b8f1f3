"""
evolution_resolver – Picks the evolution stage a trainer would plausibly field.

Resolution runs in two bounded walks over the repository's evolution graph:

  1. demotion – step back while the edge into the current form needs a
     higher level than the trainer's, then keep stepping back while the
     form sits above the archetype's stage cap; the walk never leaves the
     generation scope, and a form it cannot bring down inside the scope
     is reported as out of reach
  2. promotion – follow primary edges forward while the level clears the
     edge's threshold and the archetype still allows the next stage

Non-LEVEL edges (stones, trades, friendship, the rest) get a minimum level
from the method threshold tables, overridden per evolved form.  A walk that
exceeds the hop limit or loops returns the species untouched together with
an ``EvolutionChainIntegrityWarning``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

from trainer_architect.archetypes import TrainerArchetype
from trainer_architect.config import GeneratorSettings, scope_ranges
from trainer_architect.errors import EvolutionChainIntegrityWarning
from trainer_architect.species import EvoMethod, EvolutionEdge, SpeciesRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvolutionResolution:
    species_id: int
    original_id: int
    evolved: bool = False
    demoted: bool = False
    path: Tuple[int, ...] = ()
    warning: Optional[EvolutionChainIntegrityWarning] = None
    reachable: bool = True

    @property
    def changed(self) -> bool:
        return self.species_id != self.original_id

    def to_dict(self) -> dict:
        data = {
            "species_id": self.species_id,
            "original_id": self.original_id,
            "evolved": self.evolved,
            "demoted": self.demoted,
            "path": list(self.path),
            "reachable": self.reachable,
        }
        if self.warning is not None:
            data["warning"] = self.warning.to_dict()
        return data


def _in_ranges(species_id: int, ranges: Optional[Tuple[Tuple[int, int], ...]]) -> bool:
    return ranges is None or any(lo <= species_id <= hi for lo, hi in ranges)


class _ChainBroken(Exception):
    def __init__(self, reason: str, walked: List[int]) -> None:
        super().__init__(reason)
        self.reason = reason
        self.walked = walked


class EvolutionResolver:
    def __init__(self, repository: SpeciesRepository,
                 settings: Optional[GeneratorSettings] = None) -> None:
        self.repository = repository
        self.settings = settings or GeneratorSettings()

    # ── Thresholds ───────────────────────────────────────────────────────

    def edge_min_level(self, edge: EvolutionEdge, archetype: TrainerArchetype) -> int:
        """Lowest level at which *edge* is considered plausible for *archetype*."""
        override = self.settings.evolution_level_overrides.get(edge.target_id)
        if override is not None:
            return override
        if edge.level is not None:
            return edge.level
        table = (self.settings.method_min_levels if archetype.allow_exotic_early
                 else self.settings.conservative_method_min_levels)
        method = edge.method if edge.method is not EvoMethod.LEVEL else EvoMethod.OTHER
        return table[method.value]

    def min_level_for(self, species_id: int, archetype: TrainerArchetype) -> int:
        """Minimum level of *species_id* itself (1 for base forms)."""
        edge = self.repository.incoming_edge(species_id)
        if edge is None:
            return 1
        return self.edge_min_level(edge, archetype)

    # ── Walks ────────────────────────────────────────────────────────────

    def _demote(self, species_id: int, level: int, archetype: TrainerArchetype,
                scope_ids: Optional[Tuple[Tuple[int, int], ...]] = None) -> Tuple[int, bool]:
        """Walk back to a fieldable form; the flag is False when the scope blocks the walk."""
        repo = self.repository
        limit = self.settings.hop_limit
        current = species_id
        walked = [current]
        while True:
            pre = repo.pre_evolution(current)
            if pre is None:
                break
            too_low = self.min_level_for(current, archetype) > level
            too_far = repo.stage(current) > archetype.max_stage
            # Babies are never fielded in place of their evolution.
            if not (too_low or too_far) or (pre.baby and not too_far):
                break
            if not _in_ranges(pre.id, scope_ids):
                return current, False
            if pre.id in walked:
                raise _ChainBroken(f"cycle at #{pre.id}", walked)
            if len(walked) > limit:
                raise _ChainBroken(f"hop limit {limit} exceeded", walked)
            current = pre.id
            walked.append(current)
        return current, True

    def _promote(self, species_id: int, level: int, archetype: TrainerArchetype,
                 scope_ids: Optional[Tuple[Tuple[int, int], ...]],
                 forbidden: FrozenSet[int]) -> List[int]:
        repo = self.repository
        limit = self.settings.hop_limit
        path = [species_id]
        while True:
            edge = repo.require(path[-1]).evolution
            if edge is None or edge.target_id not in repo:
                break
            target = edge.target_id
            if repo.stage(target) > archetype.max_stage:
                break
            if not _in_ranges(target, scope_ids):
                break
            if target in forbidden:
                break
            if level < max(self.edge_min_level(edge, archetype), archetype.min_evolution_level):
                break
            if target in path:
                raise _ChainBroken(f"cycle at #{target}", path)
            if len(path) > limit:
                raise _ChainBroken(f"hop limit {limit} exceeded", path)
            path.append(target)
        return path

    def demote_for_level(self, species_id: int, level: int, archetype: TrainerArchetype) -> int:
        """Run only the demotion pass; broken chains leave the species as-is."""
        try:
            return self._demote(species_id, level, archetype)[0]
        except _ChainBroken:
            return species_id

    def resolve(
        self,
        species_id: int,
        level: int,
        archetype: TrainerArchetype,
        scope: Optional[str] = None,
        forbidden: Iterable[int] = (),
    ) -> EvolutionResolution:
        """
        Resolve *species_id* to the form fielded at *level* by *archetype*.

        *scope* keeps both walks inside a generation range and *forbidden*
        names forms the walk may not promote into (pseudo-legendaries for
        archetypes that do not allow them).  When the scope stops demotion
        short of a plausible form, the species comes back unchanged with
        ``reachable`` set to False.
        """
        self.repository.require(species_id)
        ranges = scope_ranges(scope) if scope is not None else None
        try:
            base, reachable = self._demote(species_id, level, archetype, ranges)
            path = self._promote(base, level, archetype, ranges, frozenset(forbidden))
        except _ChainBroken as exc:
            warning = EvolutionChainIntegrityWarning(
                f"Evolution chain of #{species_id} is malformed ({exc.reason}); left unresolved",
                species_id=species_id, walked=list(exc.walked))
            logger.warning("%s", warning.message)
            return EvolutionResolution(species_id, species_id, path=(species_id,), warning=warning)

        if not reachable:
            logger.debug("#%d has no plausible form at Lv%d inside %s", species_id, level, scope)
            return EvolutionResolution(species_id, species_id, path=(species_id,), reachable=False)

        resolved = path[-1]
        result = EvolutionResolution(
            species_id=resolved,
            original_id=species_id,
            evolved=len(path) > 1 and resolved != species_id,
            demoted=base != species_id,
            path=tuple(path),
        )
        if result.changed:
            logger.debug("Resolved #%d → #%d at Lv%d (%s)", species_id, resolved, level,
                         " → ".join(str(i) for i in path))
        return result
