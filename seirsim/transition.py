"""Daily state transitions of the SEIR compartments."""

from __future__ import annotations

import numpy as np

from .config import Config
from .population import AGE_GROUPS, MAX_INDIVIDUALS, Population
from .rng import RandomSource

_LAST_SLOT = MAX_INDIVIDUALS - 1
_INFECTIOUS_DURATION = 5.0


def age_susceptibility(age_group: int) -> float:
    """Relative susceptibility of an age group."""
    if not 0 <= age_group < AGE_GROUPS:
        raise ValueError(f"age group must be within [0, {AGE_GROUPS - 1}], got {age_group}")
    if age_group <= 2:
        return 0.58
    if age_group <= 12:
        return 1.0
    return 1.65


def _countdown(row: np.ndarray) -> np.ndarray:
    """Decrement the positive slots of a row; return the slots that hit zero."""
    active = row > 0.0
    row[active] -= 1.0
    return np.flatnonzero(active & (row == 0.0))


def _place(row: np.ndarray, value: float, rng: RandomSource) -> bool:
    """Put ``value`` into a random slot of ``row`` if that slot is free."""
    idx = rng.rand_int(0, MAX_INDIVIDUALS - 2)
    if row[idx] == 0.0:
        row[idx] = value
        return True
    return False


def _force_of_infection(population: Population, config: Config) -> float:
    return float(
        np.sum(
            config.gamma_e2 * population.exposed2[:, _LAST_SLOT]
            + config.gamma_ia * population.asymptomatic[:, _LAST_SLOT]
            + population.infected[:, _LAST_SLOT]
        )
    )


def step(population: Population, config: Config, day: int, rng: RandomSource) -> None:
    """Advance every age group of ``population`` by one day."""
    infectious = _force_of_infection(population, config)
    beta = config.beta_a
    for group in range(AGE_GROUPS):
        exposed1 = population.exposed1[group, :_LAST_SLOT]
        exposed2 = population.exposed2[group, :_LAST_SLOT]
        asymptomatic = population.asymptomatic[group, :_LAST_SLOT]
        infected = population.infected[group, :_LAST_SLOT]
        flags = population.flag[group]

        # S -> E1
        s_count = int(population.susceptible[group, 0])
        new_exposed = rng.binomial(
            s_count, beta * infectious * age_susceptibility(group)
        )
        population.susceptible[group, 0] -= new_exposed
        for _ in range(new_exposed):
            idx = rng.rand_int(0, MAX_INDIVIDUALS - 2)
            if exposed1[idx] == 0.0:
                exposed1[idx] = config.exposed_period + 1.0
                flags[idx] = 1

        # E1 -> E2 (symptomatic) or Ia (asymptomatic)
        for slot in _countdown(exposed1):
            if flags[slot] == 1:
                _place(exposed2, config.psy_period + 1.0, rng)
            else:
                _place(asymptomatic, _INFECTIOUS_DURATION + 1.0, rng)
            flags[slot] = -1

        # E2 -> I
        for _ in _countdown(exposed2):
            _place(infected, _INFECTIOUS_DURATION + 1.0, rng)

        # Ia -> R and I -> R
        population.recovered[group] += len(_countdown(asymptomatic))
        population.recovered[group] += len(_countdown(infected))