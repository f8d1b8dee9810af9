"""Deterministic, duplicate-free sampling of the city catalog."""

import numbers
from typing import List, Sequence, Tuple

import numpy as np

from src.data.models import CityRecord
from src.utils.cache import MemoryCache, permutation_cache
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

# Baked-in permutation seed. Changing it reshuffles every sample.
DEFAULT_SAMPLE_SEED = 20241013


class InvalidSampleSizeError(ValueError):
    """Sample size is not a non-negative integer."""


def seeded_permutation(size: int, seed: int) -> Tuple[int, ...]:
    """
    Fisher-Yates shuffle of range(size) driven by a fixed-seed generator.

    Args:
        size: Number of positions to shuffle
        seed: Generator seed; the same seed always yields the same ordering

    Returns:
        Tuple of shuffled positions
    """
    rng = np.random.Generator(np.random.PCG64(seed))
    order = list(range(size))
    # Walk from the end, swapping each slot with a uniformly drawn earlier one.
    for i in range(size - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        order[i], order[j] = order[j], order[i]
    return tuple(order)


def validate_sample_size(n) -> int:
    """Return n as an int, or raise InvalidSampleSizeError."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidSampleSizeError(
            f"Sample size must be an integer, got {type(n).__name__}: {n!r}"
        )
    if n < 0:
        raise InvalidSampleSizeError(f"Sample size must be non-negative, got {n}")
    return int(n)


class DeterministicSampler:
    """Take prefixes of one fixed permutation of a record sequence."""

    def __init__(
        self,
        records: Sequence[CityRecord],
        seed: int = None,
        cache: MemoryCache = None,
    ):
        """
        Initialize sampler.

        Args:
            records: Ordered, immutable record sequence to sample from
            seed: Permutation seed (default: DEFAULT_SAMPLE_SEED)
            cache: Permutation cache (default: process-wide permutation cache)
        """
        self.records = tuple(records)
        self.seed = DEFAULT_SAMPLE_SEED if seed is None else seed
        self.cache = cache or permutation_cache

    def permutation(self) -> Tuple[int, ...]:
        """Fixed ordering of dataset positions used for every sample."""
        key = (self.seed, len(self.records))
        return self.cache.get_or_compute(
            key, lambda: seeded_permutation(len(self.records), self.seed)
        )

    def sample(self, n) -> List[CityRecord]:
        """
        Select n distinct records, identical on every call with the same n.

        Args:
            n: Requested sample size; clamped to the dataset size

        Returns:
            List of min(n, len(records)) records in permutation order

        Raises:
            InvalidSampleSizeError: If n is not a non-negative integer
        """
        size = min(validate_sample_size(n), len(self.records))
        positions = self.permutation()[:size]
        logger.debug(f"Sampled {size} of {len(self.records)} cities (seed={self.seed})")
        return [self.records[i] for i in positions]
