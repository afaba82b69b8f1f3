"""Unit tests for trainer_architect.archetypes – trainer archetype policies."""
import pytest
from trainer_architect.archetypes import (
    ARCHETYPES, TrainerArchetype, archetype_key, get_archetype,
)
from trainer_architect.errors import ConfigurationError
from trainer_architect.habitats import Habitat
from trainer_architect.species import Tier


class TestBundledTable:
    def test_keys_match_names(self):
        for key, archetype in ARCHETYPES.items():
            assert key == archetype_key(archetype.name)

    def test_ranges_are_sane(self):
        for archetype in ARCHETYPES.values():
            lo, hi = archetype.team_size_range
            assert 1 <= lo <= hi <= 6
            assert 1 <= archetype.max_stage <= 3

    def test_basic_archetype(self):
        youngster = ARCHETYPES["youngster"]
        assert youngster.max_stage == 1
        assert not youngster.allow_exotic_early
        assert youngster.moveset_policy == "mixed"

    def test_bug_catcher_avoids_water(self):
        assert Habitat.WATER in ARCHETYPES["bug_catcher"].incompatible_habitats
        assert ARCHETYPES["bug_catcher"].required_types == ("Bug",)


class TestLookup:
    def test_by_display_name(self):
        assert get_archetype("Gym Leader") is ARCHETYPES["gym_leader"]

    def test_by_key(self):
        assert get_archetype("ace_trainer").name == "Ace Trainer"

    def test_record_passthrough(self):
        record = ARCHETYPES["hiker"]
        assert get_archetype(record) is record

    def test_unknown(self):
        with pytest.raises(ConfigurationError, match="Unknown trainer archetype"):
            get_archetype("Pirate")

    def test_custom_table(self):
        custom = TrainerArchetype("Pirate", team_size_range=(1, 2))
        assert get_archetype("pirate", {"pirate": custom}) is custom


class TestValidation:
    @pytest.mark.parametrize("kwargs", [
        {"team_size_range": (0, 3)},
        {"team_size_range": (4, 2)},
        {"team_size_range": (2, 7)},
        {"max_stage": 4},
        {"bst_range": (500, 300)},
        {"required_types": ("Fairy",)},
        {"preferred_habitats": ()},
        {"moveset_policy": "random"},
        {"team_size_range": (1, 2, 3)},
    ])
    def test_malformed(self, kwargs):
        with pytest.raises(ConfigurationError, match="Malformed archetype"):
            TrainerArchetype("Broken", **kwargs)

    def test_empty_name(self):
        with pytest.raises(ConfigurationError):
            TrainerArchetype("")


class TestFromMapping:
    def test_camel_case_policy(self):
        archetype = TrainerArchetype.from_mapping({
            "trainerClass": "Kindler",
            "preferredTypes": ["fire"],
            "teamSizeRange": [2, 3],
            "evolutionStage": "basic",
            "avoidSpecialEvolutions": True,
            "preferredBiomes": ["Volcano", "MOUNTAIN"],
            "baseStatRange": [200, 450],
            "preferredTiers": ["common"],
        })
        assert archetype.preferred_types == ("Fire",)
        assert archetype.max_stage == 1
        assert not archetype.allow_exotic_early
        assert archetype.preferred_habitats == (Habitat.MOUNTAIN,)
        assert archetype.bst_range == (200, 450)
        assert archetype.preferred_tiers == (Tier.COMMON,)

    def test_exclude_evolved(self):
        archetype = TrainerArchetype.from_mapping({"name": "Tot", "excludeEvolved": True})
        assert archetype.max_stage == 1

    def test_min_max_bst_keys(self):
        archetype = TrainerArchetype.from_mapping({"name": "X", "minBST": 250, "maxBST": 400})
        assert archetype.bst_range == (250, 400)

    def test_bad_values_become_configuration_errors(self):
        with pytest.raises(ConfigurationError):
            TrainerArchetype.from_mapping({"name": "X", "maxStage": "lots"})

    def test_unknown_type_reported(self):
        with pytest.raises(ConfigurationError, match="unknown type"):
            TrainerArchetype.from_mapping({"name": "X", "requiredTypes": ["Sound"]})

    def test_mapping_through_get_archetype(self):
        archetype = get_archetype({"name": "Diver", "requiredTypes": ["Water"]})
        assert archetype.required_types == ("Water",)
