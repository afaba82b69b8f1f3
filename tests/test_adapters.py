"""Unit tests for trainer_architect.adapters – source-table normalization."""
import pytest
from trainer_architect.adapters.encounter_adapter import parse_encounter_row
from trainer_architect.adapters.learnset_adapter import (
    from_legacy_entry, from_level_list, from_level_map, load_learnsets, parse_compact,
)
from trainer_architect.adapters.pokedex_adapter import (
    PokedexBuilder, normalize_method, normalize_stats, tier_for_bst,
)
from trainer_architect.habitats import Habitat
from trainer_architect.learnsets import AUTHENTIC, LEGACY
from trainer_architect.species import BaseStats, EvoMethod, Tier


class TestStats:
    def test_sequence(self):
        assert normalize_stats([1, 2, 3, 4, 5, 6]) == BaseStats(1, 2, 3, 4, 5, 6)

    def test_camel_case(self):
        stats = normalize_stats({"hp": 45, "attack": 49, "defense": 49,
                                 "specialAttack": 65, "specialDefense": 65, "speed": 45})
        assert stats.sp_attack == 65
        assert stats.total == 318

    def test_short_keys(self):
        stats = normalize_stats({"hp": 1, "atk": 2, "def": 3, "spa": 4, "spd": 5, "spe": 6})
        assert stats == BaseStats(1, 2, 3, 4, 5, 6)

    def test_missing_stat(self):
        with pytest.raises(ValueError, match="Missing"):
            normalize_stats({"hp": 1})

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            normalize_stats([1, 2, 3])


class TestMethods:
    @pytest.mark.parametrize("raw, expected", [
        ("LEVEL", EvoMethod.LEVEL),
        ("LEVEL_SILCOON", EvoMethod.LEVEL),
        ("TRADE_ITEM", EvoMethod.TRADE),
        ("trade with item", EvoMethod.TRADE),
        ("FRIENDSHIP_DAY", EvoMethod.FRIENDSHIP),
        ("happiness", EvoMethod.FRIENDSHIP),
        ("Water Stone", EvoMethod.STONE),
        ("STONE", EvoMethod.STONE),
        ("BEAUTY", EvoMethod.OTHER),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_method(raw) is expected

    def test_tier_for_bst(self):
        assert tier_for_bst(300) is Tier.COMMON
        assert tier_for_bst(450) is Tier.UNCOMMON
        assert tier_for_bst(451) is Tier.RARE


class TestEncounterRows:
    def test_plain_row(self):
        info = parse_encounter_row(16, {"biomes": ["ROUTE_GRASS"], "tier": "common"})
        assert info.tier is Tier.COMMON
        assert not info.starter

    def test_starter_is_not_a_tier(self):
        info = parse_encounter_row(1, {"biomes": ["FOREST"], "tier": "starter", "exclude": True})
        assert info.starter
        assert info.tier is None
        assert info.exclude


class TestPokedexBuilder:
    def _rows(self):
        return [
            (1, "Seedling", ("Grass",), (45, 49, 49, 65, 65, 45), ("Overgrow",)),
            (2, "Bloom", ("Grass", "Poison"), (60, 62, 63, 80, 80, 60), ("Overgrow",)),
        ]

    def test_basic_build(self):
        repo = (PokedexBuilder()
                .add_species_rows(self._rows())
                .add_evolution_rows([(1, 2, "LEVEL", 16)])
                .add_encounter_rows({1: {"biomes": ["FOREST"], "tier": "common"}})
                .build())
        assert len(repo) == 2
        assert repo.require(1).evolution.level == 16
        assert repo.require(1).habitats == {Habitat.FOREST}
        # no direct source: inherits the family's habitats
        assert repo.require(2).habitats == {Habitat.FOREST}
        assert repo.require(2).tier is Tier.UNCOMMON

    def test_placeholder_dropped(self):
        builder = PokedexBuilder().add_species_rows(
            self._rows() + [(3, "Placeholder", ("Normal",), (0, 0, 0, 0, 0, 0), ())])
        repo = builder.build()
        assert 3 not in repo
        assert builder.dropped == [3]

    def test_unknown_type_row_dropped(self):
        repo = PokedexBuilder().add_species_rows(
            [(9, "Sprite", ("Fairy",), (50, 50, 50, 50, 50, 50), ())]).build()
        assert len(repo) == 0

    def test_self_reference_excluded(self):
        repo = (PokedexBuilder()
                .add_species_rows(self._rows())
                .add_evolution_rows([(1, 1, "LEVEL", 16)])
                .build())
        assert repo.require(1).evolutions == ()
        assert repo.require(1).excluded

    def test_unknown_target_excluded(self):
        repo = (PokedexBuilder()
                .add_species_rows(self._rows())
                .add_evolution_rows([(2, 99, "STONE", "Leaf Stone")])
                .build())
        assert repo.require(2).excluded

    def test_camel_case_entries_with_name_targets(self):
        entries = {
            10: {"name": "Larva", "types": ["Bug"],
                 "baseStats": {"hp": 45, "attack": 30, "defense": 35,
                               "specialAttack": 20, "specialDefense": 20, "speed": 45},
                 "abilities": ["Shield Dust"], "biomes": ["FOREST"],
                 "evolutionData": {"evolves_to": "Pupa", "evolution_level": 7,
                                   "evolution_method": "level"}},
            11: {"name": "Pupa", "types": ["Bug"],
                 "baseStats": {"hp": 50, "attack": 20, "defense": 55,
                               "specialAttack": 25, "specialDefense": 25, "speed": 30},
                 "abilities": ["Shed Skin"]},
        }
        repo = PokedexBuilder().add_pokedex_entries(entries).build()
        edge = repo.require(10).evolution
        assert edge.target_id == 11
        assert edge.level == 7

    def test_habitats_from_types_as_last_resort(self):
        repo = PokedexBuilder().add_species_rows(
            [(5, "Puddle", ("Water",), (50, 50, 50, 50, 50, 50), ())]).build()
        assert repo.require(5).habitats == {Habitat.WATER}

    def test_exclude_flag_on_regular_species(self):
        repo = (PokedexBuilder()
                .add_species_rows(self._rows())
                .add_encounter_rows({2: {"biomes": ["FOREST"], "tier": "rare", "exclude": True}})
                .build())
        assert repo.require(2).excluded
        assert not repo.require(1).excluded


class TestLearnsetAdapters:
    def test_compact(self):
        learnset = parse_compact(1, "1:Tackle,Growl|7:Leech Seed|10:Vine Whip")
        assert learnset.entries[0] == (1, ("Tackle", "Growl"))
        assert learnset.source == AUTHENTIC

    def test_level_map_sorted(self):
        learnset = from_level_map(1, {"10": ["Ember"], 1: "Scratch"})
        assert [lvl for lvl, _ in learnset.entries] == [1, 10]
        assert learnset.source == LEGACY

    def test_level_list(self):
        learnset = from_level_list(1, [{"level": 5, "move": "Bite"}, {"level": 1, "moves": ["Tackle"]}])
        assert learnset.moves_up_to(5) == ["Tackle", "Bite"]

    def test_legacy_entry(self):
        learnset = from_legacy_entry(270, {"name": "Lotad", "movesets": {1: ["Astonish"], 3: ["Growl"]}})
        assert learnset.moves_up_to(3) == ["Astonish", "Growl"]

    def test_bad_rows_skipped(self):
        book = load_learnsets({1: "1:Tackle", 2: "x:Broken"})
        assert 1 in book
        assert 2 not in book

    def test_default_tables_cover_every_species(self, learnsets):
        for dex in range(1, 387):
            assert dex in learnsets, f"#{dex} has no learnset"
