"""Unit tests for trainer_architect.species – records and the Species Repository."""
import copy

import pytest
from conftest import make_species
from trainer_architect.errors import ConfigurationError
from trainer_architect.rng import Gen3Random
from trainer_architect.species import EvoMethod, SpeciesRepository, Tier
from trainer_architect.team_generator import generate_team


class TestDefaultRepository:
    def test_size(self, repository):
        assert len(repository) == 386
        assert list(repository.ids) == list(range(1, 387))

    def test_lookup_by_id(self, repository):
        pikachu = repository.get(25)
        assert pikachu.name == "Pikachu"
        assert pikachu.types == ("Electric",)
        assert pikachu.primary_ability == "Static"

    def test_lookup_missing(self, repository):
        assert repository.get(0) is None
        assert repository.get(999) is None
        with pytest.raises(KeyError):
            repository.require(999)

    def test_by_name_case_insensitive(self, repository):
        assert repository.by_name("kadabra").id == 64
        assert repository.by_name("NotAPokemon") is None

    def test_bst(self, repository):
        assert repository.require(65).bst == 490

    def test_every_record_has_habitats(self, repository):
        for record in repository:
            assert record.habitats, f"#{record.id} has no habitats"

    def test_legendaries_flagged(self, repository):
        mewtwo = repository.require(150)
        assert mewtwo.legendary
        assert mewtwo.tier is Tier.LEGENDARY

    def test_starter_family_flagged(self, repository):
        assert repository.require(1).starter
        assert repository.require(3).starter
        assert not repository.require(16).starter


class TestEvolutionGraph:
    def test_primary_edge(self, repository):
        edge = repository.require(64).evolution
        assert edge.target_id == 65
        assert edge.method is EvoMethod.TRADE

    def test_game_method_spellings_normalized(self, repository):
        assert repository.require(265).evolution.method is EvoMethod.LEVEL
        assert repository.require(265).evolution.level == 7
        assert repository.require(95).evolution.method is EvoMethod.TRADE
        assert repository.require(349).evolution.method is EvoMethod.OTHER

    def test_branching(self, repository):
        targets = [e.target_id for e in repository.require(133).evolutions]
        assert targets[:3] == [134, 135, 136]
        assert len(targets) == 5

    def test_pre_evolution(self, repository):
        assert repository.pre_evolution(65).id == 64
        assert repository.pre_evolution(63) is None

    def test_stages(self, repository):
        assert [repository.stage(i) for i in (63, 64, 65)] == [1, 2, 3]

    def test_babies_do_not_add_a_stage(self, repository):
        assert repository.stage(172) == 1
        assert repository.stage(25) == 1
        assert repository.stage(26) == 2
        assert repository.stage(106) == 1

    def test_chain_base_first(self, repository):
        assert repository.chain(65) == [63, 64, 65]
        chain = repository.chain(267)
        assert chain[0] == 265
        assert set(chain) == {265, 266, 267, 268, 269}

    def test_final_form(self, repository):
        assert repository.is_final_form(65)
        assert not repository.is_final_form(64)


class TestHandBuiltRepository:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(ConfigurationError):
            SpeciesRepository([make_species(1, "A"), make_species(1, "B")])

    def test_cycle_detected_by_ancestry(self):
        repo = SpeciesRepository([
            make_species(1, "A", evolutions=[(2, EvoMethod.LEVEL, 10)]),
            make_species(2, "B", evolutions=[(1, EvoMethod.LEVEL, 20)]),
        ])
        ids, complete = repo.ancestry(2)
        assert not complete
        assert len(ids) <= repo.hop_limit + 1

    def test_long_chain_hits_hop_limit(self):
        records = [make_species(i, f"S{i}", evolutions=[(i + 1, EvoMethod.LEVEL, i)])
                   for i in range(1, 15)]
        records.append(make_species(15, "S15"))
        repo = SpeciesRepository(records, hop_limit=5)
        ids, complete = repo.ancestry(15)
        assert not complete

    def test_to_dict(self):
        record = make_species(7, "Squirt", ("Water",))
        data = record.to_dict()
        assert data["types"] == ["Water"]
        assert data["bst"] == 300
        assert data["habitats"] == ["Grassland"]

    def test_stage_of_form_missing_from_repository(self):
        repo = SpeciesRepository([make_species(1, "Stub", evolutions=[(2, EvoMethod.LEVEL, 5)])])
        assert repo.stage(1) == 1
        assert repo.stage(2) == 2

    def test_generation_leaves_repository_untouched(self, line_repository):
        before = copy.deepcopy(vars(line_repository))
        for seed in range(3):
            generate_team(line_repository, rng=Gen3Random(seed), habitats="Grassland",
                          level_min=30, level_max=40, archetype="Hiker")
        assert vars(line_repository) == before
