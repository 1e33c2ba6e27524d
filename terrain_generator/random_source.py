# terrain_generator/random_source.py

"""
================================================================================
RANDOM SOURCE
================================================================================
A thin wrapper around a seeded NumPy Generator. One instance is created per
generation run and passed explicitly to every stage that needs randomness,
so there is no hidden global random state.

Data Contract:
---------------
- Inputs: an integer seed, or None to draw fresh entropy from the OS.
- Outputs: NumPy arrays of random draws.
- Invariants: two instances built from the same seed produce the same
  sequence of draws for the same sequence of calls.
================================================================================
"""

import numpy as np


class RandomSource:
    """A single seeded pseudo-random stream shared by all pipeline stages."""

    def __init__(self, seed: int = None):
        if seed is None:
            # Resolve the seed now so that it can be logged and replayed.
            seed = int(np.random.SeedSequence().generate_state(1)[0])
        self.seed = int(seed)
        self._rng = np.random.default_rng(self.seed)

    def coin_flips(self, n: int) -> np.ndarray:
        """Returns n fair coin flips as a boolean array."""
        return self._rng.integers(0, 2, size=n).astype(bool)

    def choices(self, n: int, k: int) -> np.ndarray:
        """Returns n indices drawn uniformly from range(k)."""
        return self._rng.integers(0, k, size=n)

    def integers(self, low: int, high: int, size=None):
        """Uniform integers in [low, high)."""
        return self._rng.integers(low, high, size=size)

    def uniform(self, low: float, high: float, size=None):
        """Uniform floats in [low, high)."""
        return self._rng.uniform(low, high, size=size)

    def __repr__(self):
        return f"RandomSource(seed={self.seed})"
