"""Unit tests for trainer_architect.habitats – habitat vocabulary and mappings."""
from trainer_architect.habitats import (
    Habitat, habitat_for_location, habitats_for_types, habitats_from_sources,
    normalize_habitat, parse_habitats,
)


class TestNormalize:
    def test_coarse_names(self):
        assert normalize_habitat("forest") is Habitat.FOREST
        assert normalize_habitat("Grassland") is Habitat.GRASSLAND

    def test_encounter_tags(self):
        assert normalize_habitat("ROUTE_GRASS") is Habitat.GRASSLAND
        assert normalize_habitat("WATER_FISH") is Habitat.WATER

    def test_aliases(self):
        assert normalize_habitat("Ocean") is Habitat.WATER
        assert normalize_habitat("volcano") is Habitat.MOUNTAIN

    def test_passthrough(self):
        assert normalize_habitat(Habitat.RUINS) is Habitat.RUINS

    def test_unknown(self):
        assert normalize_habitat("Moon") is None
        assert normalize_habitat("") is None


class TestLocations:
    def test_keyword_match(self):
        assert habitat_for_location("Petalburg Woods") is Habitat.FOREST
        assert habitat_for_location("Route 111 (desert)") is Habitat.DESERT

    def test_first_match_wins(self):
        # "route" alone would be grassland
        assert habitat_for_location("Route 119 (6 specific tiles)") is Habitat.WATER

    def test_gift_locations_carry_no_signal(self):
        assert habitat_for_location("Littleroot Town (starter)") is None

    def test_sources_are_unioned(self):
        found = habitats_from_sources(["CAVE"], ["Viridian Forest"], ["FISHING"])
        assert found == {Habitat.CAVE, Habitat.FOREST, Habitat.WATER}

    def test_unknown_tags_are_ignored(self):
        assert habitats_from_sources(["NOT_A_TAG"]) == frozenset()


class TestTypeFallback:
    def test_primary_type_first(self):
        assert habitats_for_types(["Water", "Flying"]) == {Habitat.WATER}

    def test_default_grassland(self):
        assert habitats_for_types([]) == {Habitat.GRASSLAND}


class TestParse:
    def test_split_known_and_unknown(self):
        known, unknown = parse_habitats(["Forest", "woods", "Moon", "Cave"])
        assert known == [Habitat.FOREST, Habitat.CAVE]
        assert unknown == ["Moon"]
