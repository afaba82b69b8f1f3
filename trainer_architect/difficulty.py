"""
difficulty – Difficulty tiers and post-hoc difficulty assessment.

Each tier carries the BST band the scoring curve is clamped into, the team
size bonus, the coverage standard the analyzer grades against, and the
criteria ``assess_difficulty`` checks a finished team with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Union

from trainer_architect.errors import ConfigurationError

if TYPE_CHECKING:
    from trainer_architect.evolution_resolver import EvolutionResolver
    from trainer_architect.team_generator import GeneratedTeam

logger = logging.getLogger(__name__)

AUTO = "Auto"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    EXPERT = "Expert"


@dataclass(frozen=True)
class DifficultyProfile:
    bst_range: Tuple[int, int]
    team_size_mod: int
    min_coverage: float          # offensive coverage % the grade is measured against
    max_critical: int            # critical weaknesses tolerated
    grade_shift: int             # added to every letter-grade cutoff
    average_bst: Tuple[Optional[int], Optional[int]]
    min_evolution_score: float
    min_grade: Optional[str] = None


DIFFICULTY_PROFILES: Dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile(
        bst_range=(150, 400), team_size_mod=0, min_coverage=30, max_critical=4,
        grade_shift=-10, average_bst=(None, 450), min_evolution_score=80),
    Difficulty.MEDIUM: DifficultyProfile(
        bst_range=(300, 520), team_size_mod=0, min_coverage=40, max_critical=3,
        grade_shift=0, average_bst=(400, 520), min_evolution_score=85),
    Difficulty.HARD: DifficultyProfile(
        bst_range=(380, 580), team_size_mod=1, min_coverage=55, max_critical=2,
        grade_shift=5, average_bst=(480, 580), min_evolution_score=90, min_grade="C"),
    Difficulty.EXPERT: DifficultyProfile(
        bst_range=(480, 720), team_size_mod=2, min_coverage=70, max_critical=1,
        grade_shift=10, average_bst=(520, None), min_evolution_score=95, min_grade="B"),
}

GRADE_CUTOFFS: Tuple[Tuple[str, int], ...] = (
    ("S", 85), ("A", 75), ("B", 65), ("C", 55), ("D", 45),
)
GRADE_ORDER = ("S", "A", "B", "C", "D", "F")


def auto_difficulty(average_level: float) -> Difficulty:
    if average_level <= 15:
        return Difficulty.EASY
    if average_level <= 30:
        return Difficulty.MEDIUM
    if average_level <= 45:
        return Difficulty.HARD
    return Difficulty.EXPERT


def parse_difficulty(value: Union[str, Difficulty], average_level: float = 0) -> Difficulty:
    """Resolve a difficulty name; ``"Auto"`` picks one from the level band."""
    if isinstance(value, Difficulty):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key == AUTO.lower():
            return auto_difficulty(average_level)
        for difficulty in Difficulty:
            if difficulty.value.lower() == key:
                return difficulty
    raise ConfigurationError(f"Unknown difficulty: {value!r}")


def letter_grade(score: float, difficulty: Difficulty) -> str:
    shift = DIFFICULTY_PROFILES[difficulty].grade_shift
    for grade, cutoff in GRADE_CUTOFFS:
        if score >= cutoff + shift:
            return grade
    return "F"


def grade_at_least(grade: str, floor: str) -> bool:
    return GRADE_ORDER.index(grade) <= GRADE_ORDER.index(floor)


# ── Assessment ───────────────────────────────────────────────────────────────

@dataclass
class DifficultyAssessment:
    difficulty: Difficulty
    average_bst: int
    bst_min: int
    bst_max: int
    distribution: Dict[str, int]
    team_size: int
    evolution_score: float
    evolution_issues: List[dict] = field(default_factory=list)
    violations: List[str] = field(default_factory=list)

    @property
    def meets_criteria(self) -> bool:
        return not self.violations

    def to_dict(self) -> dict:
        return {
            "difficulty": self.difficulty.value,
            "average_bst": self.average_bst,
            "bst_range": [self.bst_min, self.bst_max],
            "distribution": dict(self.distribution),
            "team_size": self.team_size,
            "evolution_score": round(self.evolution_score, 1),
            "evolution_issues": list(self.evolution_issues),
            "violations": list(self.violations),
            "meets_criteria": self.meets_criteria,
        }


def bst_distribution(bsts: List[int]) -> Dict[str, int]:
    return {
        "weak": sum(1 for b in bsts if b < 400),
        "average": sum(1 for b in bsts if 400 <= b < 500),
        "strong": sum(1 for b in bsts if 500 <= b < 600),
        "elite": sum(1 for b in bsts if b >= 600),
    }


def assess_difficulty(team: "GeneratedTeam", resolver: "EvolutionResolver") -> DifficultyAssessment:
    """
    Check a finished team against its difficulty's criteria.

    Evolution appropriateness re-runs the resolver's demotion pass: a member
    that would be demoted at its own level is over-evolved.
    """
    difficulty = team.difficulty
    profile = DIFFICULTY_PROFILES[difficulty]
    bsts = [m.species.bst for m in team.members]
    if not bsts:
        raise ConfigurationError("Cannot assess an empty team")

    issues = []
    for slot, member in enumerate(team.members, start=1):
        expected = resolver.demote_for_level(member.species.id, member.level, team.archetype)
        if expected != member.species.id:
            issues.append({
                "slot": slot,
                "species": member.species.name,
                "level": member.level,
                "should_be": resolver.repository.require(expected).name,
                "issue": "Over-evolved for level",
            })
    evolution_score = (len(bsts) - len(issues)) / len(bsts) * 100

    average = round(sum(bsts) / len(bsts))
    violations: List[str] = []
    lo, hi = profile.average_bst
    if lo is not None and average < lo:
        violations.append(f"BST too low: {average} < {lo}")
    if hi is not None and average > hi:
        violations.append(f"BST too high: {average} > {hi}")
    if evolution_score < profile.min_evolution_score:
        violations.append(
            f"Evolution issues: {evolution_score:.0f}% < {profile.min_evolution_score:.0f}%")
    coverage = team.coverage
    if coverage is not None:
        if len(coverage.critical_weaknesses) > profile.max_critical:
            violations.append(
                f"Too many critical weaknesses: {len(coverage.critical_weaknesses)} > {profile.max_critical}")
        if profile.min_grade and not grade_at_least(coverage.grade, profile.min_grade):
            violations.append(f"Coverage grade {coverage.grade} below {profile.min_grade}")

    assessment = DifficultyAssessment(
        difficulty=difficulty,
        average_bst=average,
        bst_min=min(bsts),
        bst_max=max(bsts),
        distribution=bst_distribution(bsts),
        team_size=len(bsts),
        evolution_score=evolution_score,
        evolution_issues=issues,
        violations=violations,
    )
    logger.info("Difficulty check (%s): %s", difficulty.value,
                "ok" if assessment.meets_criteria else "; ".join(violations))
    return assessment
