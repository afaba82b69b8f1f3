"""Unit tests for trainer_architect.candidate_index – indexed candidate lookups."""
import pytest
from conftest import make_species
from trainer_architect.candidate_index import CandidateIndex, CandidateQuery
from trainer_architect.errors import ConfigurationError
from trainer_architect.habitats import Habitat
from trainer_architect.species import SpeciesRepository, Tier


@pytest.fixture
def line_index(line_repository):
    return CandidateIndex(line_repository, pseudo_legendary_ids=(254, 999))


GRASS = CandidateQuery(habitats=(Habitat.GRASSLAND,))


class TestPrimitiveSets:
    def test_size(self, line_index):
        assert len(line_index) == 10
        assert 252 in line_index

    def test_pseudo_ids_limited_to_repository(self, line_index):
        assert line_index.pseudo_legendary_ids == frozenset({254})

    def test_in_habitat(self, line_index):
        assert line_index.in_habitat(Habitat.FOREST) == frozenset({10})
        assert line_index.in_habitat(Habitat.DESERT) == frozenset()

    def test_of_type(self, line_index):
        assert line_index.of_type("Normal") == frozenset({263, 276})
        assert line_index.of_type("Ice") == frozenset()

    def test_in_scope(self, line_index):
        assert line_index.in_scope("gen1") == frozenset({10})
        assert line_index.scope_size("gen3") == 9
        assert line_index.scope_size("gen2") == 0

    def test_unknown_scope(self, line_index):
        with pytest.raises(ConfigurationError):
            line_index.in_scope("gen9")

    def test_excluded_species_not_indexed(self):
        repo = SpeciesRepository([
            make_species(1, "Kept"),
            make_species(2, "Gone", excluded=True),
        ])
        index = CandidateIndex(repo, pseudo_legendary_ids=())
        assert 2 not in index
        assert index.query(CandidateQuery()) == [1]


class TestQuery:
    def test_habitat(self, line_index):
        assert line_index.query(GRASS) == [252, 253, 255, 256, 261, 263, 265, 276]

    def test_pseudo_allowed(self, line_index):
        assert 254 in line_index.query(GRASS.but(allow_pseudo_legendary=True))

    def test_empty_habitat_scope_intersection(self, line_index):
        assert line_index.query(CandidateQuery(habitats=(Habitat.FOREST,), scope="gen3")) == []

    def test_no_habitats_means_everywhere(self, line_index):
        assert line_index.query(CandidateQuery(required_types=("Bug",))) == [10, 265]

    def test_types_match_any(self, line_index):
        assert line_index.query(GRASS.but(required_types=("Rock", "Dark"))) == [255, 256, 261]

    def test_required_and_preferred_combine(self, line_index):
        query = GRASS.but(required_types=("Normal",), preferred_types=("Flying",))
        assert line_index.query(query) == [276]

    def test_bst_range(self, line_index):
        assert line_index.query(GRASS.but(bst_range=(200, 320))) == [252, 255, 261, 263, 276]

    def test_tiers(self, line_index):
        query = GRASS.but(tiers=(Tier.RARE,), allow_pseudo_legendary=True)
        assert line_index.query(query) == [254, 256]

    def test_exclude_ids(self, line_index):
        assert 261 not in line_index.query(GRASS.but(exclude_ids=frozenset({261})))

    def test_legendary_and_starter_flags(self):
        repo = SpeciesRepository([
            make_species(1, "Plain"),
            make_species(2, "Myth", legendary=True, tier=Tier.LEGENDARY),
            make_species(3, "Gift", starter=True),
        ])
        index = CandidateIndex(repo, pseudo_legendary_ids=())
        assert index.query(CandidateQuery()) == [1]
        assert index.query(CandidateQuery(allow_legendary=True)) == [1, 2]
        assert index.query(CandidateQuery(allow_starters=True)) == [1, 3]

    def test_off_habitat(self, line_index):
        assert line_index.off_habitat(GRASS) == [10]
        assert line_index.off_habitat(CandidateQuery()) == []

    def test_off_habitat_respects_filters(self, line_index):
        assert line_index.off_habitat(GRASS.but(scope="gen3")) == []


class TestBundledIndex:
    def test_restricted_species_filtered(self, index):
        pool = index.query(CandidateQuery())
        assert 150 not in pool
        assert 1 not in pool

    def test_pseudo_final_forms_filtered(self, index):
        pool = index.query(CandidateQuery())
        assert 149 not in pool
        assert 147 in pool

    def test_water_pool(self, index, repository):
        pool = index.query(CandidateQuery(habitats=(Habitat.WATER,), required_types=("Water",)))
        assert pool
        assert all("Water" in repository.require(i).types for i in pool)

    @pytest.mark.parametrize("habitat,types,scope", [
        (Habitat.FOREST, ("Bug",), "gen1"),
        (Habitat.CAVE, ("Rock", "Ground"), "gen1-3"),
        (Habitat.WATER, ("Water",), "gen3"),
        (Habitat.GRASSLAND, ("Normal", "Flying"), "gen2"),
    ])
    def test_filters_are_plain_intersections(self, index, habitat, types, scope):
        combined = set(index.query(CandidateQuery(habitats=(habitat,), required_types=types,
                                                  scope=scope)))
        by_habitat = set(index.query(CandidateQuery(habitats=(habitat,), scope=scope)))
        by_type = set(index.query(CandidateQuery(required_types=types, scope=scope)))
        assert combined == by_habitat & by_type
