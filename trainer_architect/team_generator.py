"""
team_generator – End-to-end trainer team assembly.

``TeamGenerator.generate`` runs one ``GenerationRequest`` through the whole
pipeline:

  validate → reconcile habitats → size the team → per slot:
  select → resolve evolution → pick moves → analyze coverage

Everything the generator reads (repository, index, learnsets, archetypes)
is built once and injected; a request only writes to its own local state,
so independent requests can share one generator.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple, Union

from trainer_architect.archetypes import TrainerArchetype, get_archetype
from trainer_architect.candidate_index import CandidateIndex, CandidateQuery
from trainer_architect.config import (
    DEFAULT_SCOPE,
    MAX_LEVEL,
    MIN_LEVEL,
    GeneratorSettings,
    scope_ranges,
)
from trainer_architect.coverage import CoverageAnalyzer, CoverageReport
from trainer_architect.difficulty import (
    DIFFICULTY_PROFILES,
    Difficulty,
    DifficultyAssessment,
    assess_difficulty,
    parse_difficulty,
)
from trainer_architect.errors import (
    ConfigurationError,
    HabitatReconciliationNotice,
    TrainerArchitectNotice,
)
from trainer_architect.evolution_resolver import EvolutionResolution, EvolutionResolver
from trainer_architect.habitats import Habitat, parse_habitats
from trainer_architect.learnsets import LearnsetBook
from trainer_architect.moveset import MovesetResolver
from trainer_architect.rng import RandomSource, default_rng
from trainer_architect.selection import SelectionContext, SelectionEngine, style_types
from trainer_architect.species import BaseStats, SpeciesRecord, SpeciesRepository

logger = logging.getLogger(__name__)

DUPLICATE_RETRIES = 5


# ── Request / result records ─────────────────────────────────────────────────

@dataclass(frozen=True)
class GenerationRequest:
    habitats: Union[str, Tuple[str, ...]]
    level_min: int
    level_max: int
    archetype: Union[str, TrainerArchetype, Mapping] = "Youngster"
    difficulty: Union[str, Difficulty] = "Auto"
    team_size: Optional[int] = None
    scope: str = DEFAULT_SCOPE
    battle_style: Optional[str] = None

    @property
    def habitat_tags(self) -> Tuple[str, ...]:
        if isinstance(self.habitats, str):
            return (self.habitats,)
        return tuple(self.habitats)

    @property
    def average_level(self) -> float:
        return (self.level_min + self.level_max) / 2

    def to_dict(self) -> dict:
        if isinstance(self.archetype, TrainerArchetype):
            archetype = self.archetype.name
        elif isinstance(self.archetype, Mapping):
            archetype = dict(self.archetype)
        else:
            archetype = self.archetype
        difficulty = self.difficulty.value if isinstance(self.difficulty, Difficulty) else self.difficulty
        return {
            "habitats": [h.value if isinstance(h, Habitat) else h for h in self.habitat_tags],
            "level_min": self.level_min,
            "level_max": self.level_max,
            "archetype": archetype,
            "difficulty": difficulty,
            "team_size": self.team_size,
            "scope": self.scope,
            "battle_style": self.battle_style,
        }


@dataclass
class Provenance:
    original_species_id: int
    evolved: bool = False
    demoted: bool = False
    evolution_path: Tuple[int, ...] = ()
    safe_species_fallback: bool = False
    off_habitat: bool = False
    moveset_source: str = ""
    moveset_fallback: bool = False
    notices: List[TrainerArchitectNotice] = field(default_factory=list)

    @property
    def fallback_flags(self) -> List[str]:
        flags = []
        if self.safe_species_fallback:
            flags.append("safe_species")
        if self.moveset_fallback:
            flags.append("moveset")
        if any(n.code == "evolution_chain_integrity" for n in self.notices):
            flags.append("evolution_unresolved")
        return flags

    def to_dict(self) -> dict:
        return {
            "original_species_id": self.original_species_id,
            "evolved": self.evolved,
            "demoted": self.demoted,
            "evolution_path": list(self.evolution_path),
            "off_habitat": self.off_habitat,
            "moveset_source": self.moveset_source,
            "fallbacks": self.fallback_flags,
            "notices": [n.to_dict() for n in self.notices],
        }


@dataclass
class TeamMember:
    species: SpeciesRecord
    level: int
    moves: Tuple[str, ...]
    ability: Optional[str]
    role: str
    provenance: Provenance

    def to_dict(self) -> dict:
        return {
            "species_id": self.species.id,
            "species": self.species.name,
            "types": list(self.species.types),
            "level": self.level,
            "moves": list(self.moves),
            "ability": self.ability,
            "role": self.role,
            "bst": self.species.bst,
            "provenance": self.provenance.to_dict(),
        }


@dataclass
class GeneratedTeam:
    members: List[TeamMember]
    request: GenerationRequest
    archetype: TrainerArchetype
    difficulty: Difficulty
    habitats: Tuple[Habitat, ...]
    team_size_range: Tuple[int, int]
    coverage: Optional[CoverageReport] = None
    notices: List[TrainerArchitectNotice] = field(default_factory=list)

    @property
    def species_ids(self) -> List[int]:
        return [m.species.id for m in self.members]

    @property
    def all_notices(self) -> List[TrainerArchitectNotice]:
        found = list(self.notices)
        for member in self.members:
            found.extend(member.provenance.notices)
        return found

    def to_dict(self) -> dict:
        return {
            "request": self.request.to_dict(),
            "trainer_class": self.archetype.name,
            "difficulty": self.difficulty.value,
            "habitats": [h.value for h in self.habitats],
            "team_size": len(self.members),
            "team_size_range": list(self.team_size_range),
            "members": [m.to_dict() for m in self.members],
            "coverage": self.coverage.to_dict() if self.coverage is not None else None,
            "notices": [n.to_dict() for n in self.notices],
        }


# ── Helpers ──────────────────────────────────────────────────────────────────

def compute_team_size(
    archetype: TrainerArchetype,
    average_level: float,
    difficulty: Difficulty,
    override: Optional[int] = None,
    cap: int = 6,
) -> Tuple[int, Tuple[int, int]]:
    """Return ``(size, (min, max))``; an override fixes both."""
    if override is not None:
        return override, (override, override)
    lo, hi = archetype.team_size_range
    mid = math.ceil((lo + hi) / 2)
    if average_level <= 10:
        size = lo
    elif average_level <= 15:
        size = mid
    elif average_level <= 25:
        size = max(mid, 3)
    elif average_level <= 40:
        size = max(3, hi)
    elif average_level <= 55:
        size = max(4, hi)
    else:
        size = max(5, hi)
    size += DIFFICULTY_PROFILES[difficulty].team_size_mod
    size = max(lo, min(hi, size))
    effective = (min(lo, cap), min(hi, cap))
    return min(size, cap), effective


def role_for(stats: BaseStats) -> str:
    """Battle role from the stat spread."""
    offense = max(stats.attack, stats.sp_attack)
    bulk = stats.defense + stats.sp_defense
    physical = stats.attack >= stats.sp_attack
    if stats.speed >= 90 and offense >= 95:
        return "Physical Sweeper" if physical else "Special Sweeper"
    if bulk >= 180 and offense < 100:
        return "Tank"
    if bulk >= 160 and stats.speed < 70:
        return "Wall"
    if offense >= 110:
        return "Physical Attacker" if physical else "Special Attacker"
    return "Balanced"


def reconcile_habitats(
    habitats: Sequence[Habitat], archetype: TrainerArchetype
) -> Tuple[Tuple[Habitat, ...], Optional[HabitatReconciliationNotice]]:
    """Drop habitats the archetype cannot live in, widening when none remain."""
    kept = tuple(h for h in habitats if h not in archetype.incompatible_habitats)
    if len(kept) == len(habitats):
        return kept, None
    dropped = [h.value for h in habitats if h not in kept]
    if not kept:
        kept = tuple(h for h in archetype.preferred_habitats
                     if h not in archetype.incompatible_habitats)
        if not kept:
            kept = (Habitat.GRASSLAND, Habitat.FOREST)
    notice = HabitatReconciliationNotice(
        f"{archetype.name} does not fit {', '.join(dropped)}; using {', '.join(h.value for h in kept)}",
        dropped=dropped, habitats=[h.value for h in kept])
    logger.info("%s", notice.message)
    return kept, notice


def _draw_levels(request: GenerationRequest, archetype: TrainerArchetype, size: int,
                 rng: RandomSource) -> List[int]:
    lo, hi = request.level_min, request.level_max
    levels = sorted(
        max(lo, min(hi, rng.randint(lo, hi) + archetype.level_offset)) for _ in range(size))
    if archetype.ace_at_max and levels:
        levels[-1] = hi
    return levels


# ── Generator ────────────────────────────────────────────────────────────────

class TeamGenerator:
    """
    Builds trainer teams from injected, read-only data.

    *rng* is the default random source; ``generate`` also accepts one per
    call.  Without either the process-wide ``default_rng()`` is used.
    """

    def __init__(
        self,
        repository: SpeciesRepository,
        learnsets: Optional[LearnsetBook] = None,
        settings: Optional[GeneratorSettings] = None,
        rng: Optional[RandomSource] = None,
        archetypes: Optional[Mapping[str, TrainerArchetype]] = None,
        index: Optional[CandidateIndex] = None,
    ) -> None:
        self.repository = repository
        self.settings = settings or GeneratorSettings()
        self.index = index or CandidateIndex(repository)
        self.learnsets = learnsets if learnsets is not None else LearnsetBook()
        self.rng = rng
        self.archetypes = archetypes
        self.resolver = EvolutionResolver(repository, self.settings)
        self.selector = SelectionEngine(repository, self.index, self.settings)
        self.movesets = MovesetResolver(self.learnsets)
        self.coverage = CoverageAnalyzer(self.index, self.settings)

    @classmethod
    def with_defaults(cls, **kwargs) -> "TeamGenerator":
        """Generator over the bundled Gen 1-3 tables."""
        from trainer_architect.adapters.learnset_adapter import build_default_learnsets
        from trainer_architect.adapters.pokedex_adapter import build_default_repository

        settings = kwargs.pop("settings", None) or GeneratorSettings()
        repository = build_default_repository(hop_limit=settings.hop_limit)
        return cls(repository, build_default_learnsets(), settings=settings, **kwargs)

    # ── Validation ───────────────────────────────────────────────────────

    def validate(self, request: GenerationRequest) -> Tuple[TrainerArchetype, Difficulty, List[Habitat]]:
        """Reject malformed requests before any selection work."""
        lo, hi = request.level_min, request.level_max
        if not isinstance(lo, int) or not isinstance(hi, int):
            raise ConfigurationError(f"Levels must be integers, got {lo!r}/{hi!r}")
        if lo > hi:
            raise ConfigurationError(f"level_min {lo} is greater than level_max {hi}")
        if lo < MIN_LEVEL or hi > MAX_LEVEL:
            raise ConfigurationError(f"Levels must lie in [{MIN_LEVEL}, {MAX_LEVEL}], got [{lo}, {hi}]")
        if request.team_size is not None and not (
                isinstance(request.team_size, int)
                and 1 <= request.team_size <= self.settings.max_team_size):
            raise ConfigurationError(
                f"team_size override must be 1-{self.settings.max_team_size}, got {request.team_size!r}")

        archetype = get_archetype(request.archetype, self.archetypes)
        difficulty = parse_difficulty(request.difficulty, request.average_level)
        scope_ranges(request.scope)
        if not self.selector.safe_pool(request.scope):
            raise ConfigurationError(f"Scope {request.scope!r} has no species in the repository")
        style_types(request.battle_style)

        habitats, unknown = parse_habitats(request.habitat_tags)
        if unknown:
            raise ConfigurationError(f"Unknown habitat(s): {', '.join(map(str, unknown))}")
        if not habitats:
            raise ConfigurationError("At least one habitat is required")
        return archetype, difficulty, habitats

    # ── Pipeline ─────────────────────────────────────────────────────────

    def generate(self, request: GenerationRequest, rng: Optional[RandomSource] = None) -> GeneratedTeam:
        archetype, difficulty, requested = self.validate(request)
        rng = rng or self.rng or default_rng()
        notices: List[TrainerArchitectNotice] = []

        habitats, notice = reconcile_habitats(requested, archetype)
        if notice is not None:
            notices.append(notice)

        size, size_range = compute_team_size(
            archetype, request.average_level, difficulty, request.team_size,
            self.settings.max_team_size)

        query = CandidateQuery(
            habitats=habitats,
            scope=request.scope,
            required_types=archetype.required_types,
            bst_range=archetype.bst_range,
            allow_legendary=archetype.allow_legendary,
            allow_pseudo_legendary=archetype.allow_pseudo_legendary,
            allow_starters=archetype.allow_starters,
        )
        pool = self.index.query(query)
        if not pool:
            relaxed = query.but(bst_range=None)
            pool = self.index.query(relaxed)
            if pool:
                logger.debug("BST band %s emptied the pool; dropped it", archetype.bst_range)
                query = relaxed
        off_pool = self.index.off_habitat(query) if pool else []
        forbidden = () if archetype.allow_pseudo_legendary else self.index.pseudo_legendary_ids

        logger.info("Generating %s team: %d member(s), Lv%d-%d, %s, %s, %d candidates",
                    archetype.name, size, request.level_min, request.level_max,
                    difficulty.value, "/".join(h.value for h in habitats), len(pool))

        ctx = SelectionContext(
            archetype=archetype,
            difficulty=difficulty,
            average_level=request.average_level,
            scope=request.scope,
            style_types=style_types(request.battle_style),
        )
        members: List[TeamMember] = []
        for level in _draw_levels(request, archetype, size, rng):
            taken = {m.species.id for m in members}
            members.append(self._fill_slot(level, pool, off_pool, ctx, archetype, request.scope,
                                           forbidden, taken, rng, request.battle_style))

        coverage = self.coverage.analyze([m.species for m in members], difficulty, query)
        team = GeneratedTeam(
            members=members,
            request=request,
            archetype=archetype,
            difficulty=difficulty,
            habitats=tuple(habitats),
            team_size_range=size_range,
            coverage=coverage,
            notices=notices,
        )
        logger.info("Generated %s team: %s (grade %s)", archetype.name,
                    ", ".join(f"{m.species.name} Lv{m.level}" for m in members), coverage.grade)
        return team

    def _fill_slot(self, level: int, pool: Sequence[int], off_pool: Sequence[int],
                   ctx: SelectionContext, archetype: TrainerArchetype, scope: str,
                   forbidden: Iterable[int], taken: Set[int], rng: RandomSource,
                   style: Optional[str] = None) -> TeamMember:
        resolutions: Dict[int, EvolutionResolution] = {}

        def resolve(species_id: int) -> EvolutionResolution:
            if species_id not in resolutions:
                resolutions[species_id] = self.resolver.resolve(
                    species_id, level, archetype, scope, forbidden)
            return resolutions[species_id]

        def projected(species_id: int) -> int:
            return self.repository.require(resolve(species_id).species_id).bst

        # forms that cannot be brought down to this level inside the scope sit the slot out
        slot_pool = [i for i in pool if resolve(i).reachable]
        slot_off_pool = [i for i in off_pool if resolve(i).reachable]
        if len(slot_pool) < len(pool):
            logger.debug("%d candidate(s) out of reach at Lv%d in %s", len(pool) - len(slot_pool),
                         level, scope)

        for attempt in range(DUPLICATE_RETRIES):
            selection = self.selector.select(slot_pool, ctx, rng, slot_off_pool, projected)
            resolution = resolve(selection.species_id)
            if resolution.species_id not in taken or attempt == DUPLICATE_RETRIES - 1:
                break
            # the pick evolves into a form already on the team
            ctx.used_ids.add(selection.species_id)

        species = self.repository.require(resolution.species_id)
        moveset = self.movesets.resolve(species, level, archetype.moveset_policy, style)
        provenance = Provenance(
            original_species_id=selection.species_id,
            evolved=resolution.evolved,
            demoted=resolution.demoted,
            evolution_path=resolution.path,
            safe_species_fallback=selection.fallback,
            off_habitat=selection.spice,
            moveset_source=moveset.source,
            moveset_fallback=moveset.fallback,
            notices=[n for n in (selection.warning, resolution.warning, moveset.notice) if n is not None],
        )
        ctx.record(species, selection.species_id)
        return TeamMember(
            species=species,
            level=level,
            moves=moveset.moves,
            ability=species.primary_ability,
            role=role_for(species.base_stats),
            provenance=provenance,
        )

    def assess(self, team: GeneratedTeam) -> DifficultyAssessment:
        return assess_difficulty(team, self.resolver)


def generate_team(
    repository: SpeciesRepository,
    learnsets: Optional[LearnsetBook] = None,
    rng: Optional[RandomSource] = None,
    **request_fields,
) -> GeneratedTeam:
    """One-shot convenience wrapper around ``TeamGenerator.generate``."""
    return TeamGenerator(repository, learnsets).generate(GenerationRequest(**request_fields), rng)
