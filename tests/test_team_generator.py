"""Unit tests for trainer_architect.team_generator – end-to-end team assembly."""
import json

import pytest
from conftest import make_species
from trainer_architect.archetypes import ARCHETYPES
from trainer_architect.config import GENERATION_SCOPES, SAFE_SPECIES
from trainer_architect.difficulty import Difficulty
from trainer_architect.errors import (
    ConfigurationError,
    EmptyCandidatePoolWarning,
    HabitatReconciliationNotice,
)
from trainer_architect.habitats import Habitat
from trainer_architect.learnsets import Learnset, LearnsetBook
from trainer_architect.pokedex_tables import LEGENDARY_IDS, PSEUDO_LEGENDARY_IDS
from trainer_architect.rng import Gen3Random
from trainer_architect.species import BaseStats, EvoMethod, SpeciesRepository, Tier
from trainer_architect.team_generator import (
    GenerationRequest,
    TeamGenerator,
    _draw_levels,
    compute_team_size,
    generate_team,
    reconcile_habitats,
    role_for,
)


class TestTeamSize:
    def test_low_level_uses_minimum(self):
        assert compute_team_size(ARCHETYPES["youngster"], 5, Difficulty.EASY) == (2, (2, 3))

    def test_mid_level(self):
        assert compute_team_size(ARCHETYPES["camper"], 20, Difficulty.MEDIUM)[0] == 3

    def test_difficulty_bonus_clamped(self):
        assert compute_team_size(ARCHETYPES["ace_trainer"], 50, Difficulty.EXPERT)[0] == 6

    def test_override(self):
        assert compute_team_size(ARCHETYPES["youngster"], 5, Difficulty.EASY, override=5) == (5, (5, 5))

    def test_cap(self):
        size, size_range = compute_team_size(ARCHETYPES["champion"], 60, Difficulty.EXPERT, cap=4)
        assert size == 4
        assert size_range == (4, 4)


class TestRoles:
    @pytest.mark.parametrize("stats,role", [
        ((55, 50, 45, 135, 85, 120), "Special Sweeper"),
        ((65, 130, 60, 50, 50, 100), "Physical Sweeper"),
        ((100, 80, 100, 50, 90, 40), "Tank"),
        ((55, 95, 115, 45, 45, 35), "Wall"),
        ((90, 130, 80, 65, 60, 55), "Physical Attacker"),
        ((50, 50, 50, 50, 50, 50), "Balanced"),
    ])
    def test_role_for(self, stats, role):
        assert role_for(BaseStats(*stats)) == role


class TestHabitatReconciliation:
    def test_compatible_unchanged(self):
        kept, notice = reconcile_habitats([Habitat.WATER], ARCHETYPES["youngster"])
        assert kept == (Habitat.WATER,)
        assert notice is None

    def test_partial_drop(self):
        kept, notice = reconcile_habitats([Habitat.WATER, Habitat.FOREST], ARCHETYPES["bug_catcher"])
        assert kept == (Habitat.FOREST,)
        assert notice.details["dropped"] == ["Water"]

    def test_widened_to_preferred(self):
        kept, notice = reconcile_habitats([Habitat.WATER], ARCHETYPES["bug_catcher"])
        assert kept == (Habitat.FOREST, Habitat.GRASSLAND)
        assert isinstance(notice, HabitatReconciliationNotice)


class TestLevels:
    def test_sorted_and_clamped(self, seeded_rng):
        request = GenerationRequest("Grassland", 10, 14)
        levels = _draw_levels(request, ARCHETYPES["elite_four"], 6, seeded_rng)
        assert levels == sorted(levels)
        assert all(10 <= lv <= 14 for lv in levels)
        assert levels[-1] == 14


class TestValidation:
    @pytest.mark.parametrize("fields", [
        {"level_min": 20, "level_max": 10},
        {"level_min": 0},
        {"level_max": 101},
        {"level_min": "5"},
        {"team_size": 0},
        {"team_size": 7},
        {"archetype": "Pirate"},
        {"archetype": {"name": "Broken", "teamSizeRange": [5, 2]}},
        {"difficulty": "Nightmare"},
        {"scope": "gen9"},
        {"battle_style": "Chaotic"},
        {"habitats": "Moon"},
        {"habitats": ()},
    ])
    def test_rejected_before_selection(self, generator, fields):
        base = {"habitats": "Forest", "level_min": 10, "level_max": 12}
        base.update(fields)
        with pytest.raises(ConfigurationError):
            generator.generate(GenerationRequest(**base), Gen3Random(1))

    def test_empty_scope_in_repository(self, line_repository):
        with pytest.raises(ConfigurationError, match="no species"):
            TeamGenerator(line_repository).validate(GenerationRequest("Forest", 5, 5, scope="gen2"))


class TestSafeSpeciesFallback:
    def test_empty_habitat_scope_pool(self, line_repository, seeded_rng):
        generator = TeamGenerator(line_repository)
        request = GenerationRequest("Forest", 20, 22, archetype="Camper", team_size=4, scope="gen3")
        team = generator.generate(request, seeded_rng)

        assert len(team.members) == 4
        for member in team.members:
            prov = member.provenance
            assert prov.original_species_id in SAFE_SPECIES["gen3"]
            assert prov.safe_species_fallback
            assert "safe_species" in prov.fallback_flags
            assert any(isinstance(n, EmptyCandidatePoolWarning) for n in prov.notices)
        assert len(set(team.species_ids)) == 4

    def test_bst_band_relaxed_before_fallback(self):
        repo = SpeciesRepository([make_species(300, "Brute", stats=(90,) * 6)])
        team = generate_team(repo, rng=Gen3Random(7), habitats="Grassland",
                             level_min=5, level_max=5, team_size=1)
        assert team.species_ids == [300]
        assert not team.members[0].provenance.safe_species_fallback


class TestScopeBoundaries:
    @staticmethod
    def _repo():
        return SpeciesRepository([
            make_species(95, "Onix", ("Rock", "Ground"), (35, 45, 160, 30, 45, 70),
                         habitats=(Habitat.CAVE,), evolutions=[(208, EvoMethod.TRADE, None)]),
            make_species(208, "Steelix", ("Steel", "Ground"), (75, 85, 200, 55, 65, 30),
                         habitats=(Habitat.CAVE,), tier=Tier.RARE),
            make_species(161, "Sentret", ("Normal",), (35, 46, 34, 35, 45, 20)),
        ])

    def test_unreachable_evolved_form_sits_out(self):
        team = generate_team(self._repo(), rng=Gen3Random(3), habitats="Cave", level_min=20,
                             level_max=20, archetype="Hiker", team_size=1, scope="gen2")
        assert team.species_ids == [161]
        assert team.members[0].provenance.safe_species_fallback

    def test_reachable_evolved_form_kept(self):
        team = generate_team(self._repo(), rng=Gen3Random(3), habitats="Cave", level_min=50,
                             level_max=50, archetype="Hiker", team_size=1, scope="gen2")
        assert team.species_ids == [208]
        assert not team.members[0].provenance.demoted


class TestBattleStyleMoves:
    @pytest.mark.parametrize("style,expected", [
        ("Aggressive", ("Tackle", "Ember", "Flame Wheel", "Flamethrower")),
        ("Defensive", ("Harden", "Leer", "Protect", "Withdraw")),
        (None, ("Tackle", "Growl", "Withdraw", "Flamethrower")),
    ])
    def test_style_reaches_movesets(self, style, expected):
        repo = SpeciesRepository([make_species(58, "Cinder", ("Fire",))])
        book = LearnsetBook({58: Learnset(58, (
            (1, ("Tackle", "Growl")), (5, ("Harden",)), (9, ("Ember",)), (13, ("Leer",)),
            (17, ("Protect",)), (21, ("Flame Wheel",)), (25, ("Withdraw",)),
            (29, ("Flamethrower",)),
        ))})
        team = generate_team(repo, book, rng=Gen3Random(1), habitats="Grassland", level_min=30,
                             level_max=30, archetype="Camper", team_size=1, battle_style=style)
        assert team.members[0].moves == expected


class TestDuplicates:
    @pytest.mark.parametrize("seed", range(8))
    def test_evolved_duplicates_redrawn(self, seed):
        repo = SpeciesRepository([
            make_species(252, "Sprout", ("Grass",), (40, 45, 35, 65, 55, 70),
                         evolutions=[(253, EvoMethod.LEVEL, 16)]),
            make_species(253, "Sapling", ("Grass",), (50, 65, 45, 85, 65, 95)),
            make_species(261, "Poochyena", ("Dark",), (35, 55, 35, 30, 30, 35)),
        ])
        team = generate_team(repo, rng=Gen3Random(seed), habitats="Grassland",
                             level_min=40, level_max=40, archetype="Camper", team_size=2)
        assert sorted(team.species_ids) == [253, 261]


class TestGeneratedTeams:
    def test_bug_catcher_in_water(self, generator, seeded_rng):
        team = generator.generate(GenerationRequest("Water", 10, 12, archetype="Bug Catcher"), seeded_rng)
        assert team.habitats == (Habitat.FOREST, Habitat.GRASSLAND)
        assert any(isinstance(n, HabitatReconciliationNotice) for n in team.notices)
        assert all("Bug" in m.species.types for m in team.members)

    def test_gym_leader_ace(self, generator, seeded_rng):
        team = generator.generate(
            GenerationRequest(("Cave", "Mountain"), 38, 42, archetype="Gym Leader", difficulty="Hard"),
            seeded_rng)
        assert team.members[-1].level == 42
        assert team.difficulty is Difficulty.HARD

    def test_seed_reproducible(self, generator):
        request = GenerationRequest("Forest", 14, 18, archetype="Camper")
        first = generator.generate(request, Gen3Random(0xBEEF))
        second = generator.generate(request, Gen3Random(0xBEEF))
        assert first.to_dict() == second.to_dict()

    def test_to_dict_is_json(self, generator, seeded_rng):
        team = generator.generate(GenerationRequest("Cave", 25, 30, archetype="Hiker"), seeded_rng)
        data = json.loads(json.dumps(team.to_dict()))
        assert data["trainer_class"] == "Hiker"
        assert data["team_size"] == len(team.members)
        assert data["coverage"]["grade"] in "SABCDF"

    def test_assess(self, generator, seeded_rng):
        team = generator.generate(GenerationRequest("Grassland", 8, 10), seeded_rng)
        assessment = generator.assess(team)
        assert assessment.team_size == len(team.members)
        assert assessment.difficulty is Difficulty.EASY

    def test_injected_rng_used_by_default(self, repository, learnsets, index):
        request = GenerationRequest("Grassland", 20, 25, archetype="Picnicker")
        one = TeamGenerator(repository, learnsets, rng=Gen3Random(42), index=index).generate(request)
        two = TeamGenerator(repository, learnsets, rng=Gen3Random(42), index=index).generate(request)
        assert one.species_ids == two.species_ids


REQUESTS = [
    GenerationRequest("Grassland", 3, 6),
    GenerationRequest("Forest", 12, 15, archetype="Bug Catcher"),
    GenerationRequest("Water", 20, 28, archetype="Swimmer", battle_style="Defensive"),
    GenerationRequest("Cave", 30, 34, archetype="Hiker", scope="gen1"),
    GenerationRequest("Urban", 35, 40, archetype="Psychic", scope="gen2"),
    GenerationRequest(("Mountain", "Cave"), 45, 50, archetype="Ace Trainer", difficulty="Expert"),
    GenerationRequest("Water", 55, 60, archetype="Elite Four", scope="gen3"),
    GenerationRequest("Grassland", 1, 1, archetype="Lass", team_size=6),
    GenerationRequest(("Cave", "Mountain"), 18, 22, archetype="Hiker", scope="gen2"),
    GenerationRequest(("Urban", "Grassland"), 10, 14, archetype="Youngster", scope="gen2"),
]


class TestInvariants:
    @pytest.mark.parametrize("request_", REQUESTS)
    @pytest.mark.parametrize("seed", [1, 0x5EED, 0xDEADBEEF])
    def test_team_invariants(self, generator, repository, request_, seed):
        team = generator.generate(request_, Gen3Random(seed))
        archetype = team.archetype
        lo, hi = team.team_size_range
        assert lo <= len(team.members) <= hi <= 6
        assert [m.level for m in team.members] == sorted(m.level for m in team.members)
        for member in team.members:
            assert request_.level_min <= member.level <= request_.level_max
            assert 1 <= len(member.moves) <= 4
            assert len(set(member.moves)) == len(member.moves)
            assert repository.stage(member.species.id) <= archetype.max_stage
            assert member.species.id not in LEGENDARY_IDS
            if not archetype.allow_pseudo_legendary:
                assert member.species.id not in PSEUDO_LEGENDARY_IDS
            assert member.ability == member.species.primary_ability
            assert any(start <= member.species.id <= end
                       for start, end in GENERATION_SCOPES[request_.scope]), member.species.name
