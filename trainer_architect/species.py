"""
species – Species records and the immutable Species Repository.

The repository is built once (see ``adapters.pokedex_adapter``) and then only
read.  Evolution chains are never stored; they are derived on demand by
walking the edges, and every walk is bounded by the hop limit so malformed
data can never hang a request.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from trainer_architect.config import HOP_LIMIT
from trainer_architect.errors import ConfigurationError
from trainer_architect.habitats import Habitat

logger = logging.getLogger(__name__)


class EvoMethod(str, Enum):
    LEVEL = "LEVEL"
    STONE = "STONE"
    TRADE = "TRADE"
    FRIENDSHIP = "FRIENDSHIP"
    OTHER = "OTHER"


class Tier(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"


@dataclass(frozen=True, slots=True)
class BaseStats:
    hp: int
    attack: int
    defense: int
    sp_attack: int
    sp_defense: int
    speed: int

    @property
    def total(self) -> int:
        return (self.hp + self.attack + self.defense
                + self.sp_attack + self.sp_defense + self.speed)

    def as_dict(self) -> Dict[str, int]:
        return {
            "hp": self.hp,
            "attack": self.attack,
            "defense": self.defense,
            "sp_attack": self.sp_attack,
            "sp_defense": self.sp_defense,
            "speed": self.speed,
        }


@dataclass(frozen=True, slots=True)
class EvolutionEdge:
    target_id: int
    method: EvoMethod
    requirement: Optional[Union[int, str]] = None  # level for LEVEL, item name for STONE

    @property
    def level(self) -> Optional[int]:
        if self.method is EvoMethod.LEVEL and isinstance(self.requirement, int):
            return self.requirement
        return None


@dataclass(frozen=True)
class SpeciesRecord:
    id: int
    name: str
    types: Tuple[str, ...]
    base_stats: BaseStats
    abilities: Tuple[str, ...] = ()
    habitats: FrozenSet[Habitat] = field(default_factory=frozenset)
    tier: Tier = Tier.COMMON
    legendary: bool = False
    evolutions: Tuple[EvolutionEdge, ...] = ()
    baby: bool = False
    starter: bool = False
    excluded: bool = False

    @property
    def primary_type(self) -> str:
        return self.types[0]

    @property
    def bst(self) -> int:
        return self.base_stats.total

    @property
    def evolution(self) -> Optional[EvolutionEdge]:
        """The primary evolution edge (first listed), if any."""
        return self.evolutions[0] if self.evolutions else None

    @property
    def primary_ability(self) -> Optional[str]:
        return self.abilities[0] if self.abilities else None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "types": list(self.types),
            "base_stats": self.base_stats.as_dict(),
            "bst": self.bst,
            "abilities": list(self.abilities),
            "habitats": sorted(h.value for h in self.habitats),
            "tier": self.tier.value,
            "legendary": self.legendary,
        }

    def __repr__(self) -> str:
        return f"<SpeciesRecord #{self.id:03d} {self.name} {'/'.join(self.types)}>"


class SpeciesRepository:
    """Read-only lookup over a fixed set of ``SpeciesRecord`` objects."""

    def __init__(self, records: Iterable[SpeciesRecord], hop_limit: int = HOP_LIMIT) -> None:
        self._records: Dict[int, SpeciesRecord] = {}
        for record in records:
            if record.id in self._records:
                raise ConfigurationError(f"Duplicate species id {record.id}")
            self._records[record.id] = record
        self._ids: Tuple[int, ...] = tuple(sorted(self._records))
        self._by_name = {r.name.lower(): r.id for r in self._records.values()}
        self.hop_limit = hop_limit

        # target → (source, edge); first source in dex order wins
        self._incoming: Dict[int, Tuple[int, EvolutionEdge]] = {}
        for sid in self._ids:
            for edge in self._records[sid].evolutions:
                self._incoming.setdefault(edge.target_id, (sid, edge))

        # stage per species, never written after construction
        self._stages: Dict[int, int] = {sid: self._compute_stage(sid) for sid in self._ids}
        logger.info("Species repository ready: %d species", len(self._records))

    # ── Lookups ──────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SpeciesRecord]:
        return (self._records[i] for i in self._ids)

    def __contains__(self, species_id: object) -> bool:
        return species_id in self._records

    @property
    def ids(self) -> Tuple[int, ...]:
        return self._ids

    def get(self, species_id: int) -> Optional[SpeciesRecord]:
        return self._records.get(species_id)

    def require(self, species_id: int) -> SpeciesRecord:
        try:
            return self._records[species_id]
        except KeyError:
            raise KeyError(f"Unknown species id: {species_id}") from None

    def by_name(self, name: str) -> Optional[SpeciesRecord]:
        """Case-insensitive lookup by species name."""
        sid = self._by_name.get(name.strip().lower())
        return self._records[sid] if sid is not None else None

    # ── Evolution graph ──────────────────────────────────────────────────

    def pre_evolution(self, species_id: int) -> Optional[SpeciesRecord]:
        entry = self._incoming.get(species_id)
        return self._records.get(entry[0]) if entry else None

    def incoming_edge(self, species_id: int) -> Optional[EvolutionEdge]:
        """The edge that evolves the pre-evolution into *species_id*."""
        entry = self._incoming.get(species_id)
        return entry[1] if entry else None

    def ancestry(self, species_id: int, hop_limit: Optional[int] = None) -> Tuple[List[int], bool]:
        """
        Walk back from *species_id* to its base form.

        Returns ``(ids, complete)`` where *ids* starts at *species_id*.
        *complete* is False when the walk hit the hop limit or revisited a
        species; *ids* then holds what was walked so far.
        """
        limit = self.hop_limit if hop_limit is None else hop_limit
        ids = [species_id]
        seen = {species_id}
        current = species_id
        while current in self._incoming:
            if len(ids) > limit:
                return ids, False
            current = self._incoming[current][0]
            if current in seen:
                return ids, False
            seen.add(current)
            ids.append(current)
        return ids, True

    def base_form(self, species_id: int) -> int:
        ids, _ = self.ancestry(species_id)
        return ids[-1]

    def stage(self, species_id: int) -> int:
        """
        Evolution stage, 1 = first form of the line.

        Baby forms do not push their evolutions up a stage: Pichu and
        Pikachu are both stage 1, Raichu is stage 2.
        """
        stage = self._stages.get(species_id)
        return stage if stage is not None else self._compute_stage(species_id)

    def _compute_stage(self, species_id: int) -> int:
        ids, _ = self.ancestry(species_id)
        ancestors = [self._records[i] for i in ids[1:] if i in self._records]
        stage = 1 + sum(1 for r in ancestors if not r.baby)
        record = self._records.get(species_id)
        if record is not None and record.baby:
            stage = 1
        return stage

    def chain(self, species_id: int) -> List[int]:
        """
        Every member of *species_id*'s evolution family, base form first.

        Branches are walked breadth-first in edge order.
        """
        base = self.base_form(species_id)
        order: List[int] = []
        seen = set()
        queue = deque([base])
        while queue and len(order) <= self.hop_limit * 4:
            current = queue.popleft()
            if current in seen or current not in self._records:
                continue
            seen.add(current)
            order.append(current)
            for edge in self._records[current].evolutions:
                queue.append(edge.target_id)
        return order

    def is_final_form(self, species_id: int) -> bool:
        record = self._records.get(species_id)
        return record is not None and not record.evolutions
