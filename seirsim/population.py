"""Per-age-group state of one regional population."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

AGE_GROUPS = 18
MAX_INDIVIDUALS = 70000


class Population:
    """State arrays of a population, one row per age group.

    The compartment arrays hold remaining days per individual slot;
    the susceptible count of each age group lives in column 0.
    """

    def __init__(self, age_distribution: Sequence[int] | None = None) -> None:
        shape = (AGE_GROUPS, MAX_INDIVIDUALS)
        self.age_distribution: tuple[int, ...] = ()
        self.susceptible = np.zeros(shape)
        self.exposed1 = np.zeros(shape)
        self.exposed2 = np.zeros(shape)
        self.asymptomatic = np.zeros(shape)
        self.infected = np.zeros(shape)
        self.recovered = np.zeros(AGE_GROUPS)
        self.flag = np.full(shape, -1, dtype=np.int64)
        if age_distribution is not None:
            self.initialize(age_distribution)

    def initialize(self, age_distribution: Sequence[int]) -> None:
        """Set the age distribution and reset the state to match it."""
        distribution = tuple(int(count) for count in age_distribution)
        if len(distribution) != AGE_GROUPS:
            raise ValueError(
                f"age distribution needs {AGE_GROUPS} groups, got {len(distribution)}"
            )
        self.age_distribution = distribution
        self.reset()

    def reset(self) -> None:
        """Clear every compartment and make the whole population susceptible."""
        if not self.age_distribution:
            raise ValueError("population has no age distribution")
        for array in (
            self.susceptible,
            self.exposed1,
            self.exposed2,
            self.asymptomatic,
            self.infected,
            self.recovered,
        ):
            array.fill(0.0)
        self.flag.fill(-1)
        self.susceptible[:, 0] = self.age_distribution

    def total_infected(self) -> float:
        """Sum of the symptomatic infectious state over all age groups."""
        return float(self.infected.sum())