"""
pokedex_adapter – Normalizes species source tables into a SpeciesRepository.

Source tables come in several shapes:
  • compact rows ``(dex, name, types, (hp, atk, def, spa, spd, spe), abilities)``
  • Pokédex entries keyed by dex with camelCase stats and a nested
    ``evolutionData {evolves_to, evolution_level, evolution_method}`` block
  • evolution rows ``(from, to, method, requirement)`` using the game's
    method spelling (``TRADE_ITEM``, ``LEVEL_SILCOON``, ``FRIENDSHIP_DAY`` ...)
  • encounter rows and location rows that only contribute habitats / tiers

``PokedexBuilder`` collects any mix of them and ``build()`` produces the
immutable repository.  Malformed rows are dropped with a warning rather than
guessed at.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Set, Tuple, Union

from trainer_architect.adapters.encounter_adapter import EncounterInfo, parse_encounter_row
from trainer_architect.config import HOP_LIMIT
from trainer_architect.habitats import Habitat, habitats_for_types, habitats_from_sources
from trainer_architect.species import (
    BaseStats,
    EvoMethod,
    EvolutionEdge,
    SpeciesRecord,
    SpeciesRepository,
    Tier,
)
from trainer_architect.type_chart import normalize_type

logger = logging.getLogger(__name__)


# ── Field normalization ──────────────────────────────────────────────────────

_STAT_KEYS: Dict[str, str] = {
    "hp": "hp",
    "attack": "attack",
    "atk": "attack",
    "defense": "defense",
    "def": "defense",
    "specialattack": "sp_attack",
    "spattack": "sp_attack",
    "spatk": "sp_attack",
    "spa": "sp_attack",
    "specialdefense": "sp_defense",
    "spdefense": "sp_defense",
    "spdef": "sp_defense",
    "spd": "sp_defense",
    "speed": "speed",
    "spe": "speed",
}
_STAT_ORDER = ("hp", "attack", "defense", "sp_attack", "sp_defense", "speed")


def normalize_stats(raw: Union[Sequence[int], Mapping[str, int]]) -> BaseStats:
    """Accept a 6-sequence or a dict in camelCase / snake_case / short form."""
    if isinstance(raw, Mapping):
        values: Dict[str, int] = {}
        for key, value in raw.items():
            canonical = _STAT_KEYS.get(re.sub(r"[\s_\-.]", "", str(key)).lower())
            if canonical is None:
                raise ValueError(f"Unknown stat key {key!r}")
            values[canonical] = int(value)
        missing = [k for k in _STAT_ORDER if k not in values]
        if missing:
            raise ValueError(f"Missing stats: {', '.join(missing)}")
        return BaseStats(**values)
    seq = list(raw)
    if len(seq) != 6:
        raise ValueError(f"Expected 6 base stats, got {len(seq)}")
    return BaseStats(*(int(v) for v in seq))


_METHOD_ALIASES: Dict[str, EvoMethod] = {
    "level": EvoMethod.LEVEL,
    "level up": EvoMethod.LEVEL,
    "stone": EvoMethod.STONE,
    "use item": EvoMethod.STONE,
    "item": EvoMethod.STONE,
    "trade": EvoMethod.TRADE,
    "trade item": EvoMethod.TRADE,
    "trade with item": EvoMethod.TRADE,
    "friendship": EvoMethod.FRIENDSHIP,
    "happiness": EvoMethod.FRIENDSHIP,
}


def normalize_method(raw: str) -> EvoMethod:
    """
    Fold a source method name into the five canonical methods.

    ``LEVEL_*`` variants (Silcoon/Cascoon, Tyrogue's stat checks, Nincada)
    are still level evolutions; ``TRADE_ITEM`` is a trade; day/night
    friendship is friendship; anything else (Feebas' beauty) is OTHER.
    """
    key = str(raw).strip().replace("_", " ").lower()
    if key in _METHOD_ALIASES:
        return _METHOD_ALIASES[key]
    for prefix, method in (("level", EvoMethod.LEVEL), ("trade", EvoMethod.TRADE),
                           ("friendship", EvoMethod.FRIENDSHIP),
                           ("happiness", EvoMethod.FRIENDSHIP)):
        if key.startswith(prefix):
            return method
    if key.endswith("stone"):
        return EvoMethod.STONE
    logger.debug("Evolution method %r mapped to OTHER", raw)
    return EvoMethod.OTHER


def normalize_requirement(method: EvoMethod, raw: object) -> Optional[Union[int, str]]:
    if raw is None or raw == "":
        return None
    if method is EvoMethod.LEVEL:
        return int(raw)
    if isinstance(raw, str):
        return " ".join(w.capitalize() for w in raw.replace("_", " ").split())
    return raw  # type: ignore[return-value]


def _is_placeholder(name: str, types: Sequence[str], stats: BaseStats) -> bool:
    lowered = name.strip().lower()
    return (not lowered or lowered.startswith("placeholder") or lowered.startswith("???")
            or not types or stats.total == 0)


# ── Builder ──────────────────────────────────────────────────────────────────

@dataclass
class _PendingSpecies:
    dex: int
    name: str
    types: Tuple[str, ...]
    stats: BaseStats
    abilities: Tuple[str, ...]
    habitat_tags: List[str]
    legendary: bool = False


EdgeTarget = Union[int, str]  # dex number, or a name to resolve at build time


class PokedexBuilder:
    """Accumulates source rows, then builds an immutable ``SpeciesRepository``."""

    def __init__(self, hop_limit: int = HOP_LIMIT) -> None:
        self.hop_limit = hop_limit
        self._species: Dict[int, _PendingSpecies] = {}
        self._edges: Dict[int, List[Tuple[EdgeTarget, EvoMethod, Optional[Union[int, str]]]]] = {}
        self._encounters: Dict[int, EncounterInfo] = {}
        self._locations: Dict[int, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {}
        self._babies: Set[int] = set()
        self._legendary: Set[int] = set()
        self.dropped: List[int] = []

    # ── Sources ──────────────────────────────────────────────────────────

    def add_species_rows(self, rows: Iterable[Sequence]) -> "PokedexBuilder":
        for row in rows:
            try:
                dex, name, types, stats, abilities = row
                self._add_species(int(dex), name, types, normalize_stats(stats), abilities)
            except (TypeError, ValueError) as exc:
                logger.warning("Dropping species row %r: %s", row[:2] if row else row, exc)
        return self

    def add_pokedex_entries(self, entries: Mapping[int, Mapping]) -> "PokedexBuilder":
        """Entries shaped like ``{name, types, baseStats, abilities, evolutionData, biomes, legendary}``."""
        for dex, entry in entries.items():
            try:
                stats = normalize_stats(entry.get("baseStats") or entry.get("base_stats") or {})
                self._add_species(int(dex), entry.get("name", ""), entry.get("types", ()),
                                  stats, entry.get("abilities", ()),
                                  habitat_tags=entry.get("biomes", ()),
                                  legendary=bool(entry.get("legendary", False)))
            except (TypeError, ValueError) as exc:
                logger.warning("Dropping Pokédex entry #%s: %s", dex, exc)
                continue
            evo = entry.get("evolutionData") or entry.get("evolution_data") or {}
            target = evo.get("evolves_to") or evo.get("evolvesTo")
            if target:
                method = normalize_method(evo.get("evolution_method")
                                          or evo.get("evolutionMethod") or "level")
                requirement = (evo.get("evolution_level") or evo.get("evolutionLevel")
                               or evo.get("evolution_item") or evo.get("evolutionItem"))
                self._add_edge(int(dex), target, method, requirement)
        return self

    def add_evolution_rows(self, rows: Iterable[Sequence]) -> "PokedexBuilder":
        for source, target, method, requirement in rows:
            self._add_edge(int(source), target, normalize_method(method), requirement)
        return self

    def add_encounter_rows(self, rows: Mapping[int, Mapping]) -> "PokedexBuilder":
        for dex, row in rows.items():
            self._encounters[int(dex)] = parse_encounter_row(int(dex), row)
        return self

    def add_location_rows(self, rows: Mapping[int, Tuple[Sequence[str], Sequence[str]]]) -> "PokedexBuilder":
        for dex, (obtain, locations) in rows.items():
            self._locations[int(dex)] = (tuple(obtain), tuple(locations))
        return self

    def mark_babies(self, ids: Iterable[int]) -> "PokedexBuilder":
        self._babies.update(ids)
        return self

    def mark_legendary(self, ids: Iterable[int]) -> "PokedexBuilder":
        self._legendary.update(ids)
        return self

    def _add_species(self, dex: int, name: str, types: Sequence[str], stats: BaseStats,
                     abilities: Sequence[str], habitat_tags: Sequence[str] = (),
                     legendary: bool = False) -> None:
        canonical: List[str] = []
        for t in types:
            norm = normalize_type(t)
            if norm is None:
                raise ValueError(f"Unknown type {t!r}")
            if norm not in canonical:
                canonical.append(norm)
        if len(canonical) > 2:
            raise ValueError(f"Too many types: {canonical}")
        if _is_placeholder(name, canonical, stats):
            self.dropped.append(dex)
            logger.warning("Dropping placeholder species #%d %r", dex, name)
            return
        self._species[dex] = _PendingSpecies(
            dex=dex,
            name=name.strip(),
            types=tuple(canonical),
            stats=stats,
            abilities=tuple(a for a in abilities if a),
            habitat_tags=list(habitat_tags),
            legendary=legendary,
        )

    def _add_edge(self, source: int, target: EdgeTarget, method: EvoMethod, requirement: object) -> None:
        try:
            req = normalize_requirement(method, requirement)
        except (TypeError, ValueError):
            logger.warning("Bad requirement %r on #%d → %s, dropping edge", requirement, source, target)
            return
        self._edges.setdefault(source, []).append((target, method, req))

    # ── Build ────────────────────────────────────────────────────────────

    def build(self) -> SpeciesRepository:
        names = {p.name.lower(): p.dex for p in self._species.values()}
        edges: Dict[int, Tuple[EvolutionEdge, ...]] = {}
        excluded: Set[int] = set()

        for source, raw_edges in self._edges.items():
            if source not in self._species:
                continue
            kept: List[EvolutionEdge] = []
            for target, method, req in raw_edges:
                target_id = names.get(target.lower()) if isinstance(target, str) else int(target)
                if target_id == source:
                    logger.warning("Self-referential evolution on #%d removed; species excluded", source)
                    excluded.add(source)
                    continue
                if target_id is None or target_id not in self._species:
                    logger.warning("Evolution #%d → %r points at unknown species, removed", source, target)
                    excluded.add(source)
                    continue
                kept.append(EvolutionEdge(target_id, method, req))
            edges[source] = tuple(kept)

        parents: Dict[int, int] = {}
        for source in sorted(edges):
            for edge in edges[source]:
                parents.setdefault(edge.target_id, source)

        def family_root(dex: int) -> int:
            seen = {dex}
            while dex in parents and len(seen) <= self.hop_limit:
                dex = parents[dex]
                if dex in seen:
                    break
                seen.add(dex)
            return dex

        direct: Dict[int, FrozenSet[Habitat]] = {}
        for dex, pending in self._species.items():
            encounter = self._encounters.get(dex)
            obtain, locations = self._locations.get(dex, ((), ()))
            tags = list(pending.habitat_tags) + list(encounter.habitat_tags if encounter else ())
            direct[dex] = habitats_from_sources(tags, locations, obtain)

        families: Dict[int, Set[Habitat]] = {}
        for dex, found in direct.items():
            families.setdefault(family_root(dex), set()).update(found)

        starters = {dex for dex, enc in self._encounters.items() if enc.starter}
        starter_roots = {family_root(d) for d in starters}
        # starters and legendaries have their own policies; other flagged rows are out
        excluded.update(dex for dex, enc in self._encounters.items()
                        if enc.exclude and not enc.starter and enc.tier is not Tier.LEGENDARY
                        and dex in self._species)

        records: List[SpeciesRecord] = []
        for dex in sorted(self._species):
            pending = self._species[dex]
            root = family_root(dex)
            habitats = direct[dex] or frozenset(families.get(root, ())) or habitats_for_types(pending.types)
            legendary = pending.legendary or dex in self._legendary
            encounter = self._encounters.get(dex)
            records.append(SpeciesRecord(
                id=dex,
                name=pending.name,
                types=pending.types,
                base_stats=pending.stats,
                abilities=pending.abilities,
                habitats=habitats,
                tier=_resolve_tier(pending.stats.total, legendary, encounter),
                legendary=legendary,
                evolutions=edges.get(dex, ()),
                baby=dex in self._babies,
                starter=root in starter_roots,
                excluded=dex in excluded,
            ))
        logger.info("Built %d species (%d dropped, %d excluded)",
                    len(records), len(self.dropped), len(excluded))
        return SpeciesRepository(records, hop_limit=self.hop_limit)


def _resolve_tier(bst: int, legendary: bool, encounter: Optional[EncounterInfo]) -> Tier:
    if legendary:
        return Tier.LEGENDARY
    if encounter is not None and encounter.tier is not None:
        return encounter.tier
    return tier_for_bst(bst)


def tier_for_bst(bst: int) -> Tier:
    if bst <= 300:
        return Tier.COMMON
    if bst <= 450:
        return Tier.UNCOMMON
    return Tier.RARE


def build_default_repository(hop_limit: int = HOP_LIMIT) -> SpeciesRepository:
    """Build the repository from the bundled Gen 1-3 tables."""
    from trainer_architect import encounter_tables, pokedex_tables

    return (
        PokedexBuilder(hop_limit=hop_limit)
        .add_species_rows(pokedex_tables.SPECIES_ROWS)
        .add_evolution_rows(pokedex_tables.EVOLUTION_ROWS)
        .add_location_rows(pokedex_tables.LOCATION_ROWS)
        .add_encounter_rows(encounter_tables.ENCOUNTER_ROWS)
        .mark_babies(pokedex_tables.BABY_IDS)
        .mark_legendary(pokedex_tables.LEGENDARY_IDS)
        .build()
    )
