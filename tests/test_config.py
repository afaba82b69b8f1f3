"""Unit tests for trainer_architect.config – tunables, scopes and settings merge."""
import pytest
from trainer_architect.config import (
    DEFAULT_SETTINGS, METHOD_MIN_LEVELS, SAFE_SPECIES,
    GeneratorSettings, load_settings, safe_species_for_scope, scope_ranges,
)
from trainer_architect.errors import ConfigurationError


class TestScopes:
    def test_single_generation(self):
        assert scope_ranges("gen3") == ((252, 386),)

    def test_case_insensitive(self):
        assert scope_ranges("GEN1") == ((1, 151),)

    def test_unknown_scope(self):
        with pytest.raises(ConfigurationError):
            scope_ranges("gen9")

    def test_safe_species_single(self):
        assert safe_species_for_scope("gen3") == list(SAFE_SPECIES["gen3"])

    def test_safe_species_concatenated(self):
        ids = safe_species_for_scope("gen1-2")
        assert ids == list(SAFE_SPECIES["gen1"]) + list(SAFE_SPECIES["gen2"])

    def test_safe_species_unknown_scope(self):
        with pytest.raises(ConfigurationError):
            safe_species_for_scope("kanto")


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.spice_probability == DEFAULT_SETTINGS["spice_probability"]
        assert settings.hop_limit == 10
        assert settings.method_min_levels == METHOD_MIN_LEVELS

    def test_override_scalar(self):
        assert load_settings({"spice_probability": 0.0}).spice_probability == 0.0

    def test_partial_threshold_table(self):
        settings = load_settings({"method_min_levels": {"TRADE": 40}})
        assert settings.method_min_levels["TRADE"] == 40
        assert settings.method_min_levels["STONE"] == METHOD_MIN_LEVELS["STONE"]

    def test_override_does_not_mutate_defaults(self):
        load_settings({"evolution_level_overrides": {64: 30}})
        assert 64 not in DEFAULT_SETTINGS["evolution_level_overrides"]

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown setting"):
            load_settings({"spicyness": 1})

    def test_table_must_be_mapping(self):
        with pytest.raises(ConfigurationError):
            load_settings({"method_min_levels": [20, 20]})

    @pytest.mark.parametrize("overrides", [
        {"spice_probability": 1.5},
        {"diversity_penalty": 0},
        {"hop_limit": 0},
        {"max_team_size": 7},
        {"max_replacement_suggestions": -1},
        {"method_min_levels": {"STONE": 0}},
    ])
    def test_out_of_range(self, overrides):
        with pytest.raises(ConfigurationError):
            load_settings(overrides)


class TestGeneratorSettings:
    def test_is_frozen(self):
        settings = GeneratorSettings()
        with pytest.raises(AttributeError):
            settings.hop_limit = 3

    def test_to_dict_keys_match_defaults(self):
        assert set(GeneratorSettings().to_dict()) == set(DEFAULT_SETTINGS)

    def test_missing_method_rejected(self):
        with pytest.raises(ConfigurationError, match="missing"):
            GeneratorSettings(method_min_levels={"STONE": 20})
