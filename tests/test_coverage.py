"""Unit tests for trainer_architect.coverage – team type coverage and grading."""
import json

import pytest
from conftest import make_species
from trainer_architect.candidate_index import CandidateQuery
from trainer_architect.coverage import (
    CRITICAL_WEAKNESS,
    OFFENSIVE_GAP,
    CoverageAnalyzer,
    coverage_score,
    offensive_types,
)
from trainer_architect.difficulty import Difficulty
from trainer_architect.habitats import Habitat
from trainer_architect.type_chart import TYPES, TYPE_CHART, effectiveness

WATER_TEAM = [("Water",)] * 4
FULL_COVERAGE = [("Ground",), ("Ice",), ("Fighting",), ("Ghost",), ("Flying",), ("Electric",)]


@pytest.fixture
def analyzer():
    return CoverageAnalyzer()


class TestOffense:
    def test_water_only(self):
        assert offensive_types(WATER_TEAM) == {"Fire", "Ground", "Rock"}

    def test_full_coverage(self, analyzer):
        report = analyzer.analyze_types(FULL_COVERAGE, Difficulty.MEDIUM)
        assert report.offensive_coverage == pytest.approx(100.0)
        assert report.missing_types == []

    def test_adding_members_never_lowers_coverage(self, analyzer):
        team = []
        previous = 0.0
        for typing in [("Normal",), ("Water",), ("Grass", "Poison"), ("Fire",), ("Ground",)]:
            team.append(typing)
            coverage = analyzer.analyze_types(team, Difficulty.HARD).offensive_coverage
            assert coverage >= previous
            previous = coverage


class TestMonoWaterTeam:
    def test_expert_grade(self, analyzer):
        report = analyzer.analyze_types(WATER_TEAM, Difficulty.EXPERT)
        assert report.offensive_coverage == pytest.approx(3 / 17 * 100)
        assert report.critical_weaknesses == ["Electric", "Grass"]
        assert report.score == pytest.approx(3 / 17 * 100 / 70 * 50 + 20)
        assert report.grade == "F"

    def test_defensive_profile(self, analyzer):
        profile = analyzer.analyze_types(WATER_TEAM, Difficulty.EXPERT).defensive_profile
        assert profile["Electric"] == 4
        assert profile["Fire"] == -4
        assert profile["Normal"] == 0

    def test_suggestions(self, analyzer):
        hints = analyzer.analyze_types(WATER_TEAM, Difficulty.EXPERT).suggestions
        assert "below the 70% target" in hints[0]
        assert any("weak to Electric" in h for h in hints)
        assert "exceed the Expert limit of 1" in hints[-1]

    def test_to_dict_is_json(self, analyzer):
        data = analyzer.analyze_types(WATER_TEAM, Difficulty.EXPERT).to_dict()
        assert json.loads(json.dumps(data))["grade"] == "F"


class TestScoring:
    def test_coverage_score_caps_offense(self):
        assert coverage_score(100, 0, 0, Difficulty.MEDIUM) == pytest.approx(100)

    def test_excess_critical_penalised(self):
        assert coverage_score(40, 1, 5, Difficulty.MEDIUM) == pytest.approx(50 + 50 - 10 - 20)

    def test_same_score_grades_lower_at_higher_difficulty(self, analyzer):
        team = [("Fire",), ("Water",), ("Grass",)]
        easy = analyzer.analyze_types(team, Difficulty.EASY).grade
        expert = analyzer.analyze_types(team, Difficulty.EXPERT).grade
        order = "SABCDF"
        assert order.index(easy) <= order.index(expert)

    def test_empty_team(self, analyzer):
        report = analyzer.analyze_types([], Difficulty.MEDIUM)
        assert report.grade == "F"
        assert report.score == 0.0
        assert report.suggestions == ["Team is empty"]


class TestReplacements:
    def test_without_index(self, analyzer):
        members = [make_species(i, f"Fish{i}", ("Water",)) for i in range(1, 5)]
        assert analyzer.analyze(members, Difficulty.EXPERT, CandidateQuery()).replacements == []

    def test_proposals_close_gaps(self, repository, index):
        members = [repository.require(i) for i in (129, 118, 60, 116)]
        analyzer = CoverageAnalyzer(index)
        query = CandidateQuery(habitats=(Habitat.WATER,))
        report = analyzer.analyze(members, Difficulty.EXPERT, query)

        assert 1 <= len(report.replacements) <= 3
        proposed = [r.candidate_id for r in report.replacements]
        assert len(set(proposed)) == len(proposed)
        for repl in report.replacements:
            candidate = repository.require(repl.candidate_id)
            assert repl.candidate_id not in (129, 118, 60, 116)
            assert members[repl.replace_slot].name == repl.replace_name
            if repl.reason == CRITICAL_WEAKNESS:
                assert effectiveness(repl.gap_type, candidate.types) < 1.0
            else:
                assert repl.reason == OFFENSIVE_GAP
                assert any(TYPE_CHART[t].get(repl.gap_type, 1.0) > 1.0 for t in candidate.types)

    def test_critical_weakness_first(self, repository, index):
        members = [repository.require(i) for i in (129, 118, 60, 116)]
        report = CoverageAnalyzer(index).analyze(members, Difficulty.EXPERT,
                                                 CandidateQuery(habitats=(Habitat.WATER,)))
        first = report.replacements[0]
        assert first.reason == CRITICAL_WEAKNESS
        assert first.gap_type == "Electric"
        assert first.replace_name == "Magikarp"

    def test_types_constant(self):
        assert len(TYPES) == 17
