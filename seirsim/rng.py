"""Random number source used by the simulation."""

from __future__ import annotations

import numpy as np


class RandomSource:
    """Random draws from a seedable generator; no seed means fresh entropy."""

    def __init__(self, seed: int | None = None) -> None:
        self._generator = np.random.default_rng(seed)

    def rand_int(self, low: int, high: int) -> int:
        """Return a uniform integer in [low, high]."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return int(self._generator.integers(low, high, endpoint=True))

    def rand_double(self) -> float:
        """Return a uniform float in [0, 1)."""
        return float(self._generator.random())

    def binomial(self, n: int, p: float) -> int:
        """Return a binomial draw with n trials and success probability p."""
        if n < 0:
            raise ValueError(f"number of trials must be non-negative, got {n}")
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {p}")
        return int(self._generator.binomial(n, p))

    def exponential(self, lam: float) -> float:
        """Return an exponential draw with rate lam."""
        if not lam > 0.0:
            raise ValueError(f"rate must be positive, got {lam}")
        return float(self._generator.exponential(1.0 / lam))