import numpy as np
import pytest

from seirsim.config import Config, DEFAULT_AGE_DISTRIBUTION_A
from seirsim.population import MAX_INDIVIDUALS, Population
from seirsim.rng import RandomSource
from seirsim.transition import age_susceptibility, step


@pytest.fixture
def population():
    return Population(DEFAULT_AGE_DISTRIBUTION_A)


@pytest.mark.parametrize(
    "group, expected",
    [(0, 0.58), (2, 0.58), (3, 1.0), (12, 1.0), (13, 1.65), (17, 1.65)],
)
def test_age_susceptibility(group, expected):
    assert age_susceptibility(group) == expected


@pytest.mark.parametrize("group", [-1, 18])
def test_age_susceptibility_out_of_range(group):
    with pytest.raises(ValueError):
        age_susceptibility(group)


def test_no_infectious_means_no_change(population):
    step(population, Config(), 0, RandomSource(1))
    assert list(population.susceptible[:, 0]) == list(DEFAULT_AGE_DISTRIBUTION_A)
    assert population.exposed1.sum() == 0.0
    assert population.recovered.sum() == 0.0


def test_symptomatic_exposed_moves_to_presymptomatic(population):
    config = Config()
    population.exposed1[0, 5] = 2.0
    population.flag[0, 5] = 1
    rng = RandomSource(7)
    step(population, config, 0, rng)
    assert population.exposed1[0, 5] == 1.0
    step(population, config, 1, rng)
    assert population.exposed1[0, 5] == 0.0
    assert population.flag[0, 5] == -1
    placed = population.exposed2[0][population.exposed2[0] > 0]
    assert list(placed) == [config.psy_period]


def test_unflagged_exposed_moves_to_asymptomatic(population):
    population.exposed1[4, 9] = 1.0
    step(population, Config(), 0, RandomSource(3))
    assert population.flag[4, 9] == -1
    assert np.count_nonzero(population.asymptomatic[4]) == 1
    assert population.asymptomatic[4].sum() == 5.0


def test_recoveries_counted(population):
    population.asymptomatic[1, 0] = 1.0
    population.infected[1, 2] = 1.0
    population.infected[1, 3] = 2.0
    step(population, Config(), 0, RandomSource(0))
    assert population.recovered[1] == 2.0
    assert population.infected[1, 3] == 1.0


def test_infection_moves_susceptible_to_exposed(population):
    config = Config(beta_a=0.5)
    population.infected[0, MAX_INDIVIDUALS - 1] = 1.0
    step(population, config, 0, RandomSource(11))
    lost = DEFAULT_AGE_DISTRIBUTION_A[0] - population.susceptible[0, 0]
    assert lost > 0
    slots = population.exposed1[0][population.exposed1[0] > 0]
    assert 0 < len(slots) <= lost
    assert set(slots) == {config.exposed_period}
    assert population.infected[0, MAX_INDIVIDUALS - 1] == 1.0


def test_probability_above_one_raises(population):
    population.infected[0, MAX_INDIVIDUALS - 1] = 1.0
    with pytest.raises(ValueError):
        step(population, Config(beta_a=1.0), 0, RandomSource(0))