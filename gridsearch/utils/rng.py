"""Seeded random number generator for reproducible wall layouts."""

import random
from typing import Optional


class SeededRNG:
    """Seeded random number generator for reproducible results."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        """Get the current seed."""
        return self._seed

    def sample(self, population, k: int):
        """Choose k unique random elements from the population."""
        return self._rng.sample(population, k)


# Global instance for convenience
default_rng = SeededRNG()

