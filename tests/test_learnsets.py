"""Unit tests for trainer_architect.learnsets – learnset queries and the learnset book."""
import pytest
from trainer_architect.learnsets import AUTHENTIC, LEGACY, Learnset, LearnsetBook


def _bulbasaur():
    return Learnset(1, (
        (1, ("Tackle", "Growl")),
        (7, ("Leech Seed",)),
        (10, ("Vine Whip",)),
        (15, ("Poison Powder",)),
        (15, ("Sleep Powder",)),
        (20, ("Razor Leaf",)),
    ))


class TestLearnset:
    def test_descending_levels_rejected(self):
        with pytest.raises(ValueError, match="not ascending"):
            Learnset(1, ((10, ("Ember",)), (5, ("Scratch",))))

    def test_repeated_level_allowed(self):
        assert len(_bulbasaur()) == 6

    def test_moves_up_to(self):
        assert _bulbasaur().moves_up_to(7) == ["Tackle", "Growl", "Leech Seed"]

    def test_moves_up_to_before_first_entry(self):
        assert Learnset(1, ((5, ("Ember",)),)).moves_up_to(1) == []

    def test_relearned_move_keeps_first_unlock(self):
        learnset = Learnset(64, ((1, ("Teleport", "Kinesis")), (16, ("Kinesis",)), (18, ("Confusion",))))
        assert learnset.moves_up_to(20) == ["Teleport", "Kinesis", "Confusion"]

    def test_recent(self):
        assert _bulbasaur().recent(15) == ["Leech Seed", "Vine Whip", "Poison Powder", "Sleep Powder"]

    def test_mixed(self):
        assert _bulbasaur().mixed(15) == ["Tackle", "Growl", "Poison Powder", "Sleep Powder"]

    def test_mixed_short_list(self):
        assert _bulbasaur().mixed(7) == ["Tackle", "Growl", "Leech Seed"]


class TestLearnsetBook:
    def test_authentic_before_legacy(self):
        authentic = Learnset(1, ((1, ("Tackle",)),), AUTHENTIC)
        legacy = Learnset(1, ((1, ("Pound",)),), LEGACY)
        book = LearnsetBook({1: authentic}, {1: legacy})
        assert list(book.sources_for(1)) == [authentic, legacy]

    def test_legacy_only(self, learnsets):
        assert learnsets.authentic(270) is None
        assert learnsets.legacy(270).source == LEGACY

    def test_empty_book(self):
        book = LearnsetBook()
        assert 1 not in book
        assert list(book.sources_for(1)) == []
        assert len(book) == 0
