"""Tests for deterministic catalog sampling."""

import os
import subprocess
import sys
from pathlib import Path

import numpy as np
import pytest

from src.data.catalog import get_all_cities, get_random_city_sample
from src.data.sampling import (
    DEFAULT_SAMPLE_SEED,
    DeterministicSampler,
    InvalidSampleSizeError,
    seeded_permutation,
    validate_sample_size,
)


class TestSeededPermutation:
    """Tests for the fixed permutation."""

    def test_is_permutation(self):
        """Test every position appears exactly once."""
        order = seeded_permutation(50, seed=1)
        assert sorted(order) == list(range(50))

    def test_same_seed_same_order(self):
        """Test the ordering depends only on size and seed."""
        assert seeded_permutation(100, seed=3) == seeded_permutation(100, seed=3)

    def test_different_seed_different_order(self):
        """Test a different seed reshuffles."""
        assert seeded_permutation(100, seed=3) != seeded_permutation(100, seed=4)

    @pytest.mark.parametrize("size", [0, 1])
    def test_trivial_sizes(self, size):
        """Test empty and single-element permutations."""
        assert seeded_permutation(size, seed=9) == tuple(range(size))


class TestDeterministicSampler:
    """Tests for DeterministicSampler."""

    def test_sample_ten(self):
        """Test a sample of ten is unique and repeatable."""
        sample = get_random_city_sample(10)
        second_sample = get_random_city_sample(10)

        assert len(sample) == 10
        assert len({city.id for city in sample}) == 10
        assert sample == second_sample

    def test_repeated_calls_identical(self):
        """Test many calls yield identical sequences."""
        first = get_random_city_sample(25)
        for _ in range(20):
            assert get_random_city_sample(25) == first

    def test_sample_is_shuffled(self):
        """Test the sample is not just the head of the catalog."""
        assert get_random_city_sample(10) != list(get_all_cities()[:10])

    def test_smaller_sample_is_prefix(self):
        """Test samples of different sizes share one ordering."""
        assert get_random_city_sample(5) == get_random_city_sample(40)[:5]

    def test_zero(self):
        """Test n=0 returns an empty list."""
        assert get_random_city_sample(0) == []

    def test_over_request_returns_full_dataset(self):
        """Test n above the dataset size is clamped."""
        cities = get_all_cities()
        sample = get_random_city_sample(len(cities) + 50)

        assert len(sample) == len(cities)
        assert len({city.id for city in sample}) == len(cities)
        assert set(sample) == set(cities)

    @pytest.mark.parametrize("n", [-1, -100, 2.5, 10.0, "10", None, True, [3]])
    def test_invalid_sizes(self, n):
        """Test invalid sizes raise without returning a partial result."""
        with pytest.raises(InvalidSampleSizeError):
            get_random_city_sample(n)

    def test_invalid_size_is_value_error(self):
        """Test callers can catch the error as ValueError."""
        with pytest.raises(ValueError):
            validate_sample_size(-1)

    def test_numpy_integer_accepted(self):
        """Test integer-like numpy scalars are accepted."""
        assert get_random_city_sample(np.int64(3)) == get_random_city_sample(3)

    def test_independent_of_cache(self, small_records, fresh_cache):
        """Test a fresh cache reproduces the same sample."""
        cached = DeterministicSampler(small_records, seed=7)
        uncached = DeterministicSampler(small_records, seed=7, cache=fresh_cache)

        assert uncached.sample(5) == cached.sample(5)
        assert fresh_cache.get((7, 5)) == cached.permutation()

    def test_custom_records(self, small_records):
        """Test sampling a small record set."""
        sampler = DeterministicSampler(small_records, seed=7)
        sample = sampler.sample(10)

        assert len(sample) == 5
        assert set(sample) == set(small_records)
        assert sampler.sample(3) == sample[:3]

    def test_cache_clear_recomputes_same_order(self, small_records, fresh_cache):
        """Test clearing the cache does not change the permutation."""
        sampler = DeterministicSampler(small_records, seed=7, cache=fresh_cache)
        before = sampler.permutation()

        fresh_cache.clear()
        assert fresh_cache.get((7, 5)) is None
        assert sampler.permutation() == before

    def test_default_seed_is_fixed(self, small_records):
        """Test samplers default to the built-in seed."""
        assert DeterministicSampler(small_records).seed == DEFAULT_SAMPLE_SEED


class TestSampleAcrossProcesses:
    """Tests that samples do not depend on the process environment."""

    SCRIPT = (
        "from src.data.catalog import get_random_city_sample; "
        "print(','.join(city.id for city in get_random_city_sample(5)))"
    )

    def run_sample(self, **env_overrides):
        """Sample ids printed by a fresh interpreter."""
        root = Path(__file__).resolve().parents[1]
        env = dict(os.environ, PYTHONPATH=str(root), LOG_LEVEL="WARNING")
        env.update(env_overrides)
        result = subprocess.run(
            [sys.executable, "-c", self.SCRIPT],
            cwd=root,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip().splitlines()[-1]

    def test_matches_in_process_sample(self):
        """Test a separate process produces the same sample."""
        expected = ",".join(city.id for city in get_random_city_sample(5))
        assert self.run_sample() == expected

    def test_seed_environment_variable_ignored(self):
        """Test a seed-like environment variable cannot reshuffle samples."""
        assert self.run_sample(CATALOG_SAMPLE_SEED="1") == self.run_sample()
