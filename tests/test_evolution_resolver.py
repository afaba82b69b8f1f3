"""Unit tests for trainer_architect.evolution_resolver – level-appropriate evolution stages."""
import pytest
from conftest import make_species
from trainer_architect.archetypes import ARCHETYPES
from trainer_architect.config import EVOLUTION_LEVEL_OVERRIDES
from trainer_architect.errors import EvolutionChainIntegrityWarning
from trainer_architect.evolution_resolver import EvolutionResolver
from trainer_architect.species import EvoMethod, EvolutionEdge, SpeciesRepository

CAMPER = ARCHETYPES["camper"]
HIKER = ARCHETYPES["hiker"]
YOUNGSTER = ARCHETYPES["youngster"]
ACE = ARCHETYPES["ace_trainer"]
GYM = ARCHETYPES["gym_leader"]


@pytest.fixture(scope="module")
def resolver(repository):
    return EvolutionResolver(repository)


class TestThresholds:
    def test_level_edge(self, resolver):
        assert resolver.edge_min_level(EvolutionEdge(2, EvoMethod.LEVEL, 16), HIKER) == 16

    def test_override_wins(self, resolver):
        assert resolver.edge_min_level(EvolutionEdge(65, EvoMethod.TRADE), HIKER) == 35

    def test_method_tables(self, resolver):
        edge = EvolutionEdge(500, EvoMethod.TRADE)
        assert resolver.edge_min_level(edge, HIKER) == 25
        assert resolver.edge_min_level(edge, YOUNGSTER) == 30

    def test_level_edge_without_level(self, resolver):
        assert resolver.edge_min_level(EvolutionEdge(500, EvoMethod.LEVEL), HIKER) == 25

    def test_base_form_min_level(self, resolver):
        assert resolver.min_level_for(63, HIKER) == 1
        assert resolver.min_level_for(64, HIKER) == 16


class TestKadabraLine:
    def test_camper_keeps_kadabra(self, resolver):
        result = resolver.resolve(64, 20, CAMPER)
        assert result.species_id == 64
        assert not result.evolved

    def test_trade_threshold_blocks_early_alakazam(self, resolver):
        assert resolver.resolve(64, 20, HIKER).species_id == 64

    @pytest.mark.parametrize("archetype", [HIKER, ACE])
    def test_alakazam_at_forty(self, resolver, archetype):
        result = resolver.resolve(64, 40, archetype)
        assert result.species_id == 65
        assert result.evolved
        assert result.path == (64, 65)

    def test_full_promotion(self, resolver):
        assert resolver.resolve(63, 40, ACE).path == (63, 64, 65)

    def test_demotion_below_threshold(self, resolver):
        result = resolver.resolve(65, 20, HIKER)
        assert result.species_id == 64
        assert result.demoted
        assert not result.evolved

    def test_stage_cap_demotes(self, resolver):
        result = resolver.resolve(64, 50, YOUNGSTER)
        assert result.species_id == 63
        assert result.demoted


class TestWalkLimits:
    def test_baby_not_fielded_for_evolution(self, resolver):
        assert resolver.resolve(25, 5, YOUNGSTER).species_id == 25

    def test_baby_promotes(self, resolver):
        assert resolver.resolve(172, 40, HIKER).path == (172, 25, 26)

    def test_scope_stops_promotion(self, resolver):
        assert resolver.resolve(41, 40, HIKER, scope="gen1").species_id == 42
        assert resolver.resolve(41, 40, HIKER, scope="gen1-3").species_id == 169

    def test_forbidden_target(self, resolver):
        assert resolver.resolve(147, 60, GYM).species_id == 149
        assert resolver.resolve(147, 60, GYM, forbidden={149}).species_id == 148

    def test_min_evolution_level(self, resolver):
        # Caterpie evolves at 7, Ace Trainers hold evolutions back to 16
        assert resolver.resolve(10, 8, ACE).species_id == 10
        assert resolver.resolve(10, 8, HIKER).species_id == 11

    def test_unknown_species(self, resolver):
        with pytest.raises(KeyError):
            resolver.resolve(9999, 10, HIKER)

    def test_demote_for_level(self, resolver):
        assert resolver.demote_for_level(65, 20, HIKER) == 64
        assert resolver.demote_for_level(63, 20, HIKER) == 63


class TestScopedDemotion:
    def test_steelix_out_of_reach_in_gen2(self, resolver):
        result = resolver.resolve(208, 30, HIKER, scope="gen2")
        assert result.species_id == 208
        assert not result.reachable
        assert not result.demoted

    def test_unscoped_steelix_demotes_to_onix(self, resolver):
        result = resolver.resolve(208, 30, HIKER)
        assert result.species_id == 95
        assert result.reachable

    def test_steelix_reachable_at_threshold(self, resolver):
        result = resolver.resolve(208, 45, HIKER, scope="gen2")
        assert result.species_id == 208
        assert result.reachable

    @pytest.mark.parametrize("species_id, level, archetype", [
        (196, 12, YOUNGSTER),   # Espeon, stage cap
        (169, 20, HIKER),       # Crobat, below override
    ])
    def test_stage_cap_blocked_by_scope(self, resolver, species_id, level, archetype):
        assert not resolver.resolve(species_id, level, archetype, scope="gen2").reachable
        assert resolver.resolve(species_id, level, archetype, scope="gen1-2").reachable

    def test_demotion_inside_scope_still_runs(self, resolver):
        result = resolver.resolve(65, 20, HIKER, scope="gen1")
        assert result.species_id == 64
        assert result.reachable

    @pytest.mark.parametrize("scope, bounds", [("gen1", (1, 151)), ("gen2", (152, 251)),
                                               ("gen3", (252, 386))])
    @pytest.mark.parametrize("level", [10, 25, 40])
    def test_reachable_results_stay_in_scope(self, repository, resolver, scope, bounds, level):
        lo, hi = bounds
        for species_id in repository.ids:
            if not lo <= species_id <= hi:
                continue
            result = resolver.resolve(species_id, level, HIKER, scope=scope)
            assert lo <= result.species_id <= hi, species_id
            if result.reachable:
                assert repository.stage(result.species_id) <= HIKER.max_stage


class TestBrokenChains:
    def test_cycle_returns_original_with_warning(self):
        repo = SpeciesRepository([
            make_species(1, "Ouro", evolutions=[(2, EvoMethod.LEVEL, 5)]),
            make_species(2, "Boros", evolutions=[(1, EvoMethod.LEVEL, 5)]),
        ])
        result = EvolutionResolver(repo).resolve(1, 50, GYM)
        assert result.species_id == 1
        assert not result.evolved
        assert isinstance(result.warning, EvolutionChainIntegrityWarning)
        assert result.to_dict()["warning"]["code"] == "evolution_chain_integrity"

    def test_missing_target_stops_walk(self):
        repo = SpeciesRepository([make_species(1, "Stub", evolutions=[(2, EvoMethod.LEVEL, 5)])])
        result = EvolutionResolver(repo).resolve(1, 50, GYM)
        assert result.species_id == 1
        assert result.warning is None


class TestProperties:
    def test_level_requirements_respected(self, repository, resolver):
        for record in repository:
            edge = record.evolution
            if edge is None or edge.level is None or edge.target_id in EVOLUTION_LEVEL_OVERRIDES:
                continue
            if edge.level < 2:
                continue
            result = resolver.resolve(record.id, edge.level - 1, GYM)
            assert edge.target_id not in result.path, record.name

    def test_level_requirement_met_evolves(self, repository, resolver):
        for record in repository:
            edge = record.evolution
            if edge is None or edge.level is None or edge.target_id not in repository:
                continue
            if repository.stage(edge.target_id) > GYM.max_stage:
                continue
            level = max(resolver.edge_min_level(edge, GYM), resolver.min_level_for(record.id, GYM))
            result = resolver.resolve(record.id, level, GYM)
            assert edge.target_id in result.path, record.name

    @pytest.mark.parametrize("archetype", [YOUNGSTER, CAMPER, HIKER, ACE, GYM])
    @pytest.mark.parametrize("level", [5, 18, 30, 45, 70])
    def test_idempotent(self, repository, resolver, archetype, level):
        for species_id in repository.ids[::7]:
            first = resolver.resolve(species_id, level, archetype)
            again = resolver.resolve(first.species_id, level, archetype)
            assert again.species_id == first.species_id, species_id

    def test_stage_cap_holds(self, repository, resolver):
        for species_id in repository.ids[::3]:
            result = resolver.resolve(species_id, 60, CAMPER)
            assert repository.stage(result.species_id) <= CAMPER.max_stage

    def test_to_dict(self, resolver):
        data = resolver.resolve(64, 40, HIKER).to_dict()
        assert data == {"species_id": 65, "original_id": 64, "evolved": True,
                        "demoted": False, "path": [64, 65], "reachable": True}
