"""Unit tests for trainer_architect.type_chart – Gen 3 type effectiveness."""
from trainer_architect.type_chart import (
    TYPE_CHART, TYPES, effectiveness, normalize_type, resistances,
    super_effective_targets, weaknesses,
)


class TestChart:
    def test_seventeen_types(self):
        assert len(TYPES) == 17
        assert "Fairy" not in TYPES

    def test_every_type_has_a_row(self):
        assert set(TYPE_CHART) == set(TYPES)

    def test_rows_only_name_canonical_types(self):
        for row in TYPE_CHART.values():
            assert set(row) <= set(TYPES)

    def test_steel_resists_ghost_and_dark(self):
        assert effectiveness("Ghost", ["Steel"]) == 0.5
        assert effectiveness("Dark", ["Steel"]) == 0.5


class TestEffectiveness:
    def test_neutral(self):
        assert effectiveness("Normal", ["Water"]) == 1.0

    def test_dual_type_stacks(self):
        assert effectiveness("Water", ["Rock", "Ground"]) == 4.0

    def test_immunity(self):
        assert effectiveness("Electric", ["Water", "Ground"]) == 0.0

    def test_super_effective_targets(self):
        assert set(super_effective_targets("Water")) == {"Fire", "Ground", "Rock"}


class TestProfiles:
    def test_water_weaknesses(self):
        assert set(weaknesses(["Water"])) == {"Electric", "Grass"}

    def test_immunity_counts_as_resistance(self):
        assert "Ground" in resistances(["Flying"])

    def test_dual_type_cancels(self):
        # Water/Ground: Grass is 4x, Electric is 0x
        assert weaknesses(["Water", "Ground"]) == ["Grass"]


class TestNormalize:
    def test_case_insensitive(self):
        assert normalize_type("fIRE") == "Fire"

    def test_unknown(self):
        assert normalize_type("Fairy") is None
        assert normalize_type(None) is None
