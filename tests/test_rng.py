"""Unit tests for trainer_architect.rng – LCRNG helpers and injectable random sources."""
import random

import pytest
from trainer_architect.rng import (
    LCRNG_ADD, LCRNG_MULT, Gen3Random, default_rng, lcrng_high16, lcrng_next,
)


class TestLCRNG:
    def test_next_from_zero(self):
        assert lcrng_next(0) == LCRNG_ADD

    def test_next_known_value(self):
        assert lcrng_next(1) == (LCRNG_MULT + LCRNG_ADD) & 0xFFFF_FFFF

    def test_frames_track_repeated_next(self):
        rng = Gen3Random(0x12345678)
        manual = 0x12345678
        for _ in range(10):
            manual = lcrng_next(manual)
            rng.next16()
        assert rng.state == manual
        assert rng.frames == 10

    def test_high16(self):
        assert lcrng_high16(0xABCD1234) == 0xABCD


class TestGen3Random:
    def test_is_a_random_subclass(self):
        assert isinstance(Gen3Random(1), random.Random)

    def test_next16_follows_lcrng(self):
        rng = Gen3Random(0x1234)
        expected = lcrng_next(0x1234)
        assert rng.next16() == lcrng_high16(expected)
        assert rng.state == expected
        assert rng.frames == 1

    def test_same_seed_same_sequence(self):
        a = Gen3Random(0x5EED)
        b = Gen3Random(0x5EED)
        assert [a.randint(1, 100) for _ in range(20)] == [b.randint(1, 100) for _ in range(20)]

    def test_different_seeds_differ(self):
        a = Gen3Random(1)
        b = Gen3Random(2)
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_random_in_unit_interval(self):
        rng = Gen3Random(0xBEEF)
        for _ in range(200):
            value = rng.random()
            assert 0.0 <= value < 1.0

    def test_randint_bounds(self):
        rng = Gen3Random(42)
        values = {rng.randint(3, 7) for _ in range(300)}
        assert values <= {3, 4, 5, 6, 7}
        assert len(values) == 5

    def test_state_round_trip(self):
        rng = Gen3Random(99)
        rng.random()
        saved = rng.getstate()
        first = [rng.random() for _ in range(3)]
        rng.setstate(saved)
        assert [rng.random() for _ in range(3)] == first

    def test_reseed_resets_frames(self):
        rng = Gen3Random(7)
        rng.random()
        rng.seed(7)
        assert rng.frames == 0
        assert rng.state == 7

    def test_seed_is_masked_to_32_bits(self):
        assert Gen3Random(0x1_0000_0001).state == 1

    def test_rejects_non_integer_seed(self):
        with pytest.raises(TypeError):
            Gen3Random("seed")


class TestDefaultRng:
    def test_process_wide_instance(self):
        assert default_rng() is default_rng()
        assert isinstance(default_rng(), random.Random)
