"""
Uniform integer range sampling for reproducible test-data generation.

This module wraps a numpy random Generator behind a tiny interface: "give me a
uniformly distributed integer in [low, high)". Every date sampling function
reduces its constraint to such an epoch-day interval and delegates here.

The key insight: injecting the sampler (instead of reaching for a module-level
random state) makes generated fixtures reproducible. Seed a sampler in a test,
pass it through, and the same inputs always yield the same dates.
"""

import threading
from typing import Optional

import numpy as np

from src.config.settings import get_settings

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


class RangeSampler:
    """
    Uniform int64 sampler over half-open intervals.

    **Conceptual**: A RangeSampler answers "pick a whole number between low
    (inclusive) and high (exclusive), each equally likely". It is backed by
    numpy's default bit generator (PCG64), which is fast, statistically sound
    and can be seeded for deterministic runs.

    **Overflow**: numpy computes the span of the interval in unsigned 64-bit
    arithmetic, so the full signed range [INT64_MIN, INT64_MAX) can be sampled
    without the bias of a naive `high - low` that overflows.

    **Concurrency**: numpy Generators serialize draws on the lock of their bit
    generator, so one sampler may be shared across threads.

    **Usage**:
        sampler = RangeSampler(seed=42)
        day = sampler.sample_between(0, 365)  # 0 <= day < 365
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize a sampler.

        Args:
            seed: Seed for the underlying generator. None draws fresh entropy
                  from the operating system (non-deterministic).
        """
        self.seed = seed
        self._generator = np.random.default_rng(seed)

    def sample_between(self, low_inclusive: int, high_exclusive: int) -> int:
        """
        Draw a uniformly distributed integer from [low_inclusive, high_exclusive).

        Args:
            low_inclusive: Lowest value that may be returned.
            high_exclusive: One past the highest value that may be returned.

        Returns:
            A Python int within the interval.

        Raises:
            ValueError: If the interval is empty or leaves the int64 range.
        """
        if low_inclusive >= high_exclusive:
            raise ValueError(
                f"low_inclusive must be less than high_exclusive, "
                f"got: [{low_inclusive}, {high_exclusive})"
            )
        if low_inclusive < INT64_MIN or high_exclusive - 1 > INT64_MAX:
            raise ValueError(
                f"Range [{low_inclusive}, {high_exclusive}) does not fit in a signed 64-bit integer"
            )

        # endpoint=True on (high - 1) keeps high == INT64_MAX + 1 representable
        value = self._generator.integers(
            low_inclusive, high_exclusive - 1, dtype=np.int64, endpoint=True
        )
        return int(value)


_default_sampler: Optional[RangeSampler] = None
_default_sampler_lock = threading.Lock()


def get_default_sampler() -> RangeSampler:
    """
    Get the process-wide sampler, creating it on first use.

    The sampler is seeded from DATEJUGGLER_SEED when that setting is present,
    otherwise it draws fresh OS entropy.

    Returns:
        Shared RangeSampler instance.
    """
    global _default_sampler

    if _default_sampler is None:
        with _default_sampler_lock:
            # Re-check: another thread may have won the race
            if _default_sampler is None:
                _default_sampler = RangeSampler(seed=get_settings().seed)

    return _default_sampler


def reset_default_sampler() -> None:
    """Drop the process-wide sampler so the next access re-reads settings (for testing)."""
    global _default_sampler
    with _default_sampler_lock:
        _default_sampler = None


def get_seeded_sampler(seed: int) -> RangeSampler:
    """
    Factory for a deterministic sampler.

    **Usage**:
        sampler = get_seeded_sampler(1234)
        random_date(sampler=sampler)  # same result on every run

    Args:
        seed: Seed for the generator.

    Returns:
        RangeSampler seeded with `seed`.
    """
    return RangeSampler(seed=seed)
