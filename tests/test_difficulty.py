"""Unit tests for trainer_architect.difficulty – tiers, grading and team assessment."""
import pytest
from trainer_architect.archetypes import ARCHETYPES
from trainer_architect.difficulty import (
    DIFFICULTY_PROFILES,
    Difficulty,
    assess_difficulty,
    auto_difficulty,
    bst_distribution,
    grade_at_least,
    letter_grade,
    parse_difficulty,
)
from trainer_architect.errors import ConfigurationError
from trainer_architect.evolution_resolver import EvolutionResolver
from trainer_architect.team_generator import (
    GeneratedTeam,
    GenerationRequest,
    Provenance,
    TeamMember,
)


class TestTiers:
    @pytest.mark.parametrize("level,expected", [
        (5, Difficulty.EASY), (15, Difficulty.EASY), (16, Difficulty.MEDIUM),
        (30, Difficulty.MEDIUM), (45, Difficulty.HARD), (46, Difficulty.EXPERT),
    ])
    def test_auto(self, level, expected):
        assert auto_difficulty(level) is expected

    def test_parse(self):
        assert parse_difficulty("hard") is Difficulty.HARD
        assert parse_difficulty(Difficulty.EASY) is Difficulty.EASY
        assert parse_difficulty("Auto", 50) is Difficulty.EXPERT

    def test_parse_unknown(self):
        with pytest.raises(ConfigurationError, match="Unknown difficulty"):
            parse_difficulty("Nightmare")

    def test_profiles_escalate(self):
        tiers = list(Difficulty)
        for easier, harder in zip(tiers, tiers[1:]):
            assert DIFFICULTY_PROFILES[easier].min_coverage < DIFFICULTY_PROFILES[harder].min_coverage
            assert DIFFICULTY_PROFILES[easier].max_critical > DIFFICULTY_PROFILES[harder].max_critical


class TestGrades:
    def test_letter_grade_shifts(self):
        assert letter_grade(80, Difficulty.MEDIUM) == "A"
        assert letter_grade(80, Difficulty.EXPERT) == "B"
        assert letter_grade(40, Difficulty.EASY) == "D"
        assert letter_grade(10, Difficulty.EASY) == "F"

    def test_grade_at_least(self):
        assert grade_at_least("A", "C")
        assert grade_at_least("C", "C")
        assert not grade_at_least("D", "C")

    def test_bst_distribution(self):
        assert bst_distribution([300, 450, 520, 600, 680]) == {
            "weak": 1, "average": 1, "strong": 1, "elite": 2}


def _member(repository, species_id, level):
    species = repository.require(species_id)
    return TeamMember(species=species, level=level, moves=("Tackle",), ability=None,
                      role="Balanced", provenance=Provenance(original_species_id=species_id))


def _team(members, difficulty, archetype="hiker"):
    return GeneratedTeam(
        members=members,
        request=GenerationRequest("Grassland", 20, 20),
        archetype=ARCHETYPES[archetype],
        difficulty=difficulty,
        habitats=(),
        team_size_range=(1, 6),
    )


class TestAssessment:
    def test_over_evolved_member(self, repository):
        resolver = EvolutionResolver(repository)
        team = _team([_member(repository, 65, 20)], Difficulty.EASY)
        assessment = assess_difficulty(team, resolver)
        assert assessment.evolution_score == 0
        assert assessment.evolution_issues[0]["should_be"] == "Kadabra"
        assert "BST too high: 490 > 450" in assessment.violations
        assert not assessment.meets_criteria

    def test_clean_team(self, repository):
        resolver = EvolutionResolver(repository)
        team = _team([_member(repository, 64, 30), _member(repository, 42, 30)], Difficulty.MEDIUM)
        assessment = assess_difficulty(team, resolver)
        assert assessment.evolution_issues == []
        assert assessment.average_bst == round((400 + 455) / 2)
        assert assessment.meets_criteria

    def test_empty_team(self, repository):
        with pytest.raises(ConfigurationError):
            assess_difficulty(_team([], Difficulty.EASY), EvolutionResolver(repository))

    def test_to_dict(self, repository):
        team = _team([_member(repository, 64, 30)], Difficulty.MEDIUM)
        data = assess_difficulty(team, EvolutionResolver(repository)).to_dict()
        assert data["difficulty"] == "Medium"
        assert data["bst_range"] == [400, 400]
        assert data["meets_criteria"] is True
