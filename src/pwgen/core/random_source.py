"""Bounded pseudo-random source and unbiased index sampling.

Not suitable for secrets: uniformity holds only as far as the underlying
generator is uniform.
"""

import random
from typing import Protocol

RAW_BITS = 31
RAW_MAX = (1 << RAW_BITS) - 1


class BoundedSource(Protocol):
    max_value: int

    def raw(self) -> int:
        """Return an integer uniformly distributed on [0, max_value]."""
        ...


class SeededSource:
    """A ``random.Random`` seeded exactly once, at construction.

    There is no way to reseed an instance; build a new one instead.
    """

    max_value = RAW_MAX

    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an int, got {type(seed).__name__}")
        self.seed = seed
        self._rng = random.Random(seed)

    def raw(self) -> int:
        return self._rng.getrandbits(RAW_BITS)


def sample_below(source: BoundedSource, upper_bound: int) -> int:
    """Return an integer uniformly distributed on [0, upper_bound).

    Draws falling at or above the largest multiple of ``upper_bound`` that
    fits in the source range are rejected, so every remainder is equally
    likely.
    """
    max_value = source.max_value
    if isinstance(upper_bound, bool) or not 0 < upper_bound <= max_value + 1:
        raise ValueError(
            f"upper_bound must be in [1, {max_value + 1}], got {upper_bound}"
        )
    reject_bound = max_value - (max_value % upper_bound)
    if reject_bound == 0:
        # upper_bound spans the whole source range
        return source.raw()
    while True:
        r = source.raw()
        if r < reject_bound:
            return r % upper_bound
