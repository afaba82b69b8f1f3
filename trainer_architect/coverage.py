"""
coverage – Offensive/defensive type coverage of a finished team.

Offense counts the defending types some member hits super-effectively with
a same-type attack.  Defense nets, per attacking type, the members weak to
it against the members resisting it; a type most of the team is weak to is
a critical weakness.  The letter grade is measured against the difficulty's
coverage standard, and with a ``CandidateIndex`` the analyzer can propose
in-habitat replacements that close a specific gap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from trainer_architect.candidate_index import CandidateIndex, CandidateQuery
from trainer_architect.config import GeneratorSettings
from trainer_architect.difficulty import DIFFICULTY_PROFILES, Difficulty, letter_grade
from trainer_architect.species import SpeciesRecord
from trainer_architect.type_chart import (
    TYPE_CHART,
    TYPES,
    effectiveness,
    resistances,
    super_effective_targets,
    weaknesses,
)

logger = logging.getLogger(__name__)

OFFENSIVE_GAP = "offensive_gap"
CRITICAL_WEAKNESS = "critical_weakness"


@dataclass(frozen=True)
class ReplacementSuggestion:
    reason: str
    gap_type: str
    candidate_id: int
    candidate_name: str
    replace_slot: int
    replace_name: str

    def to_dict(self) -> dict:
        return {
            "reason": self.reason,
            "gap_type": self.gap_type,
            "candidate": {"id": self.candidate_id, "name": self.candidate_name},
            "replace": {"slot": self.replace_slot, "name": self.replace_name},
        }


@dataclass
class CoverageReport:
    difficulty: Difficulty
    covered_types: List[str]
    missing_types: List[str]
    offensive_coverage: float
    weakness_counts: Dict[str, int]
    resistance_counts: Dict[str, int]
    critical_weaknesses: List[str]
    score: float
    grade: str
    suggestions: List[str] = field(default_factory=list)
    replacements: List[ReplacementSuggestion] = field(default_factory=list)

    @property
    def defensive_profile(self) -> Dict[str, int]:
        """Net weakness per attacking type; positive means more members are weak than resist."""
        return {t: self.weakness_counts[t] - self.resistance_counts[t] for t in TYPES}

    def to_dict(self) -> dict:
        return {
            "difficulty": self.difficulty.value,
            "offensive_coverage": round(self.offensive_coverage, 1),
            "covered_types": list(self.covered_types),
            "missing_types": list(self.missing_types),
            "defensive_profile": self.defensive_profile,
            "critical_weaknesses": list(self.critical_weaknesses),
            "score": round(self.score, 1),
            "grade": self.grade,
            "suggestions": list(self.suggestions),
            "replacements": [r.to_dict() for r in self.replacements],
        }


def offensive_types(team_types: Sequence[Sequence[str]]) -> Set[str]:
    covered: Set[str] = set()
    for types in team_types:
        for attack in types:
            covered.update(super_effective_targets(attack))
    return covered


def coverage_score(coverage: float, avg_weaknesses: float, critical: int,
                   difficulty: Difficulty) -> float:
    profile = DIFFICULTY_PROFILES[difficulty]
    offense = min(coverage / profile.min_coverage, 1.0) * 50
    excess = max(0, critical - profile.max_critical)
    defense = max(0.0, 50 - 10 * avg_weaknesses - 10 * excess)
    return offense + defense


class CoverageAnalyzer:
    def __init__(self, index: Optional[CandidateIndex] = None,
                 settings: Optional[GeneratorSettings] = None) -> None:
        self.index = index
        self.settings = settings or GeneratorSettings()

    def analyze_types(self, team_types: Sequence[Sequence[str]],
                      difficulty: Difficulty) -> CoverageReport:
        """Grade a bare list of typings (one entry per member)."""
        n = len(team_types)
        covered = offensive_types(team_types)
        coverage = len(covered) / len(TYPES) * 100

        weak = {t: 0 for t in TYPES}
        resist = {t: 0 for t in TYPES}
        total_weak = 0
        for types in team_types:
            for t in weaknesses(types):
                weak[t] += 1
                total_weak += 1
            for t in resistances(types):
                resist[t] += 1
        critical = [t for t in TYPES if n and 2 * weak[t] > n]

        avg_weak = total_weak / n if n else 0.0
        score = coverage_score(coverage, avg_weak, len(critical), difficulty) if n else 0.0
        report = CoverageReport(
            difficulty=difficulty,
            covered_types=[t for t in TYPES if t in covered],
            missing_types=[t for t in TYPES if t not in covered],
            offensive_coverage=coverage,
            weakness_counts=weak,
            resistance_counts=resist,
            critical_weaknesses=critical,
            score=score,
            grade=letter_grade(score, difficulty) if n else "F",
        )
        report.suggestions = self._suggestions(report, n)
        return report

    def analyze(
        self,
        members: Sequence[SpeciesRecord],
        difficulty: Difficulty,
        query: Optional[CandidateQuery] = None,
    ) -> CoverageReport:
        """
        Grade *members*; with an index and a *query* also propose replacements
        drawn from the query's habitats and scope.
        """
        report = self.analyze_types([m.types for m in members], difficulty)
        if self.index is not None and query is not None and members:
            report.replacements = self.replacements(members, report, query)
        logger.info("Coverage %.1f%%, %d critical weakness(es), grade %s",
                    report.offensive_coverage, len(report.critical_weaknesses), report.grade)
        return report

    # ── Suggestions ──────────────────────────────────────────────────────

    def _suggestions(self, report: CoverageReport, n: int) -> List[str]:
        if not n:
            return ["Team is empty"]
        profile = DIFFICULTY_PROFILES[report.difficulty]
        hints = []
        if report.offensive_coverage < profile.min_coverage:
            attackers = _best_attackers(report.missing_types)
            hints.append(
                f"Offensive coverage {report.offensive_coverage:.0f}% is below the "
                f"{profile.min_coverage:.0f}% target; add {' or '.join(attackers)} attackers")
        for t in report.critical_weaknesses:
            hints.append(
                f"{report.weakness_counts[t]}/{n} members are weak to {t}; add a {t} resist")
        if len(report.critical_weaknesses) > profile.max_critical:
            hints.append(
                f"{len(report.critical_weaknesses)} critical weaknesses exceed the "
                f"{report.difficulty.value} limit of {profile.max_critical}")
        return hints

    def replacements(self, members: Sequence[SpeciesRecord], report: CoverageReport,
                     query: CandidateQuery) -> List[ReplacementSuggestion]:
        limit = self.settings.max_replacement_suggestions
        team_ids = frozenset(m.id for m in members)
        base = query.but(exclude_ids=query.exclude_ids | team_ids, preferred_types=())
        average_bst = sum(m.bst for m in members) / len(members)
        found: List[ReplacementSuggestion] = []
        proposed: Set[int] = set()

        for weak_type in report.critical_weaknesses:
            if len(found) >= limit:
                break
            pool = [i for i in self.index.query(base) if i not in proposed
                    and effectiveness(weak_type, self.index.repository.require(i).types) < 1.0]
            slot = _weakest(members, lambda m: effectiveness(weak_type, m.types) > 1.0)
            pick = self._closest(pool, average_bst)
            if pick is not None and slot is not None:
                found.append(self._suggestion(CRITICAL_WEAKNESS, weak_type, pick, slot, members))
                proposed.add(pick.id)

        for missing in report.missing_types:
            if len(found) >= limit:
                break
            attackers = tuple(t for t in TYPES if TYPE_CHART[t].get(missing, 1.0) > 1.0)
            if not attackers:
                continue
            pool = [i for i in self.index.query(base.but(preferred_types=attackers))
                    if i not in proposed]
            slot = _weakest(members, _shares_primary(members))
            pick = self._closest(pool, average_bst)
            if pick is not None and slot is not None:
                found.append(self._suggestion(OFFENSIVE_GAP, missing, pick, slot, members))
                proposed.add(pick.id)
        return found

    def _closest(self, pool: Sequence[int], average_bst: float) -> Optional[SpeciesRecord]:
        if not pool:
            return None
        records = [self.index.repository.require(i) for i in pool]
        return min(records, key=lambda r: (abs(r.bst - average_bst), r.id))

    @staticmethod
    def _suggestion(reason: str, gap: str, pick: SpeciesRecord, slot: int,
                    members: Sequence[SpeciesRecord]) -> ReplacementSuggestion:
        return ReplacementSuggestion(reason, gap, pick.id, pick.name, slot, members[slot].name)


def _best_attackers(missing: Sequence[str], limit: int = 2) -> List[str]:
    ranked = sorted(TYPES, key=lambda t: -sum(1 for m in missing if TYPE_CHART[t].get(m, 1.0) > 1.0))
    return ranked[:limit]


def _shares_primary(members: Sequence[SpeciesRecord]):
    counts: Dict[str, int] = {}
    for m in members:
        counts[m.primary_type] = counts.get(m.primary_type, 0) + 1
    if max(counts.values()) > 1:
        return lambda m: counts[m.primary_type] > 1
    return lambda m: True


def _weakest(members: Sequence[SpeciesRecord], predicate) -> Optional[int]:
    """Slot of the lowest-BST member matching *predicate*."""
    slots: List[Tuple[int, int]] = [(m.bst, i) for i, m in enumerate(members) if predicate(m)]
    return min(slots)[1] if slots else None
