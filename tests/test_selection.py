"""Unit tests for trainer_architect.selection – weighted species selection."""
import pytest
from conftest import make_species
from trainer_architect.archetypes import ARCHETYPES
from trainer_architect.candidate_index import CandidateIndex
from trainer_architect.config import GeneratorSettings
from trainer_architect.difficulty import Difficulty
from trainer_architect.errors import ConfigurationError, EmptyCandidatePoolWarning
from trainer_architect.selection import (
    SelectionContext,
    SelectionEngine,
    bst_weight,
    expected_bst,
    open_coverage_groups,
    style_types,
    tier_weight,
)
from trainer_architect.species import SpeciesRepository, Tier

CAMPER = ARCHETYPES["camper"]
HIKER = ARCHETYPES["hiker"]
YOUNGSTER = ARCHETYPES["youngster"]

# Types that already answer every coverage group
CLOSED = {"Electric", "Ground", "Fire", "Water", "Flying"}


class ScriptedRng:
    """Replays fixed ``random()`` values; ``randint`` returns its lower bound."""

    def __init__(self, *values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)

    def randint(self, a, b):
        return a


@pytest.fixture
def engine(line_repository):
    return SelectionEngine(line_repository, CandidateIndex(line_repository, pseudo_legendary_ids=()))


def _ctx(archetype=CAMPER, **kwargs):
    kwargs.setdefault("difficulty", Difficulty.MEDIUM)
    kwargs.setdefault("average_level", 21)
    kwargs.setdefault("scope", "gen3")
    return SelectionContext(archetype=archetype, **kwargs)


class TestWeightComponents:
    def test_style_types(self):
        assert style_types(None) == ()
        assert style_types("speedy") == ("Electric", "Flying", "Psychic")

    def test_unknown_style(self):
        with pytest.raises(ConfigurationError, match="battle style"):
            style_types("Chaotic")

    def test_tier_weight(self):
        assert tier_weight(Tier.COMMON, 10, YOUNGSTER) == pytest.approx(4.5)
        assert tier_weight(Tier.RARE, 10, CAMPER) == pytest.approx(0.75)
        assert tier_weight(Tier.RARE, 30, HIKER) == pytest.approx(3.0)
        assert tier_weight(Tier.LEGENDARY, 50, HIKER) == pytest.approx(0.25)

    def test_expected_bst_clamped_to_difficulty(self):
        assert expected_bst(10, Difficulty.EASY) == 350
        assert expected_bst(80, Difficulty.MEDIUM) == 520
        assert expected_bst(1, Difficulty.EXPERT) == 480

    def test_bst_weight(self):
        assert bst_weight(350, 10, Difficulty.EASY) == 1.5
        assert bst_weight(260, 10, Difficulty.EASY) == 1.0
        assert bst_weight(200, 10, Difficulty.EASY) == 0.3

    def test_open_coverage_groups(self):
        assert len(open_coverage_groups(set())) == 6
        assert open_coverage_groups({"Ground", "Water", "Fire", "Flying"}) == ["Water"]
        assert open_coverage_groups(CLOSED) == []


class TestWeight:
    def test_preferred_type(self, engine):
        # Pebble: common (2.0), BST 300 far from 405 (0.3), Rock preferred (1.5)
        ctx = _ctx(HIKER, team_types=set(CLOSED))
        assert engine.weight(255, ctx) == pytest.approx(0.9)

    def test_coverage_gap_bonus_applied_once(self, engine):
        open_ctx = _ctx()
        closed_ctx = _ctx(team_types=set(CLOSED))
        assert engine.weight(252, closed_ctx) == pytest.approx(3.0)
        assert engine.weight(252, open_ctx) == pytest.approx(3.75)

    def test_diversity_penalty(self, engine):
        base = engine.weight(263, _ctx(team_types=set(CLOSED)))
        repeated = engine.weight(263, _ctx(team_types=set(CLOSED), used_primary_types={"Normal"}))
        assert repeated == pytest.approx(base * 0.4)

    def test_style_bonus(self, engine):
        base = engine.weight(276, _ctx(team_types=set(CLOSED)))
        styled = engine.weight(276, _ctx(team_types=set(CLOSED), style_types=("Flying",)))
        assert styled == pytest.approx(base * 1.25)

    def test_projected_bst(self, engine):
        ctx = _ctx(team_types=set(CLOSED))
        # Sprout (310) scored as its 410 evolution lands on the curve
        assert engine.weight(252, ctx, lambda i: 410) > engine.weight(252, ctx)


class TestDraw:
    def test_cumulative_draw(self, engine):
        assert engine.draw([1, 2, 3], [1.0, 1.0, 1.0], ScriptedRng(0.0)) == 1
        assert engine.draw([1, 2, 3], [1.0, 1.0, 1.0], ScriptedRng(0.99)) == 3

    def test_zero_weights_skipped(self, engine):
        assert engine.draw([1, 2, 3], [0.0, 1.0, 0.0], ScriptedRng(0.5)) == 2

    def test_all_zero_falls_back_to_uniform(self, engine):
        assert engine.draw([7, 8], [0.0, 0.0], ScriptedRng()) == 7


class TestSelect:
    def test_prefers_unused(self, engine, seeded_rng):
        ctx = _ctx(used_ids={261})
        for _ in range(10):
            assert engine.select([261, 263], ctx, seeded_rng).species_id == 263

    def test_repeats_when_everything_used(self, engine, seeded_rng):
        ctx = _ctx(used_ids={261})
        assert engine.select([261], ctx, seeded_rng).species_id == 261

    def test_spice_draws_off_habitat(self, engine):
        selection = engine.select([261, 263], _ctx(), ScriptedRng(0.0, 0.0), off_pool=[10])
        assert selection.species_id == 10
        assert selection.spice

    def test_no_spice_roll_without_off_pool(self, engine):
        selection = engine.select([261], _ctx(), ScriptedRng(0.5))
        assert selection.species_id == 261
        assert not selection.spice

    def test_empty_pool_uses_safe_species(self, engine, seeded_rng):
        selection = engine.select([], _ctx(), seeded_rng)
        assert selection.fallback
        assert selection.species_id in (261, 263, 265, 276)
        assert isinstance(selection.warning, EmptyCandidatePoolWarning)

    def test_fallback_prefers_unused(self, engine):
        ctx = _ctx(used_ids={261, 263, 265})
        assert engine.fallback(ctx, ScriptedRng()).species_id == 276


class TestSafePool:
    def test_present_safe_species(self, engine):
        assert engine.safe_pool("gen3") == [261, 263, 265, 276]
        assert engine.safe_pool("gen1") == [10]

    def test_weakest_in_scope_when_no_safe_species(self):
        repo = SpeciesRepository([
            make_species(i, f"Mon{i}", stats=(30 + 10 * i,) * 6) for i in range(1, 9)
        ])
        engine = SelectionEngine(repo, CandidateIndex(repo, pseudo_legendary_ids=()))
        assert engine.safe_pool("gen1") == [1, 2, 3, 4, 5, 6]

    def test_empty_scope_raises(self, engine, seeded_rng):
        with pytest.raises(ConfigurationError):
            engine.fallback(_ctx(scope="gen2"), seeded_rng)

    def test_spice_probability_setting(self, line_repository):
        engine = SelectionEngine(line_repository, CandidateIndex(line_repository, pseudo_legendary_ids=()),
                                 GeneratorSettings(spice_probability=0.0))
        selection = engine.select([261], _ctx(), ScriptedRng(0.0, 0.0), off_pool=[10])
        assert selection.species_id == 261
