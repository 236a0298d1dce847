import pytest

from seirsim.rng import RandomSource


def test_same_seed_same_sequence():
    first = RandomSource(42)
    second = RandomSource(42)
    a = [first.rand_int(0, 100) for _ in range(20)] + [first.rand_double()]
    b = [second.rand_int(0, 100) for _ in range(20)] + [second.rand_double()]
    assert a == b


def test_rand_int_within_inclusive_bounds():
    rng = RandomSource(1)
    draws = {rng.rand_int(0, 2) for _ in range(300)}
    assert draws == {0, 1, 2}


def test_rand_int_single_value():
    rng = RandomSource(3)
    assert rng.rand_int(7, 7) == 7


def test_rand_int_empty_range():
    with pytest.raises(ValueError):
        RandomSource(3).rand_int(5, 4)


def test_rand_double_in_unit_interval():
    rng = RandomSource(5)
    assert all(0.0 <= rng.rand_double() < 1.0 for _ in range(1000))


@pytest.mark.parametrize("n", [0, 1, 10, 1000])
def test_binomial_edge_probabilities(n):
    rng = RandomSource(9)
    assert rng.binomial(n, 0.0) == 0
    assert rng.binomial(n, 1.0) == n


def test_binomial_within_range():
    rng = RandomSource(11)
    assert all(0 <= rng.binomial(20, 0.3) <= 20 for _ in range(200))


@pytest.mark.parametrize("n, p", [(-1, 0.5), (5, -0.1), (5, 1.5)])
def test_binomial_invalid(n, p):
    with pytest.raises(ValueError):
        RandomSource(0).binomial(n, p)


def test_exponential_positive():
    rng = RandomSource(13)
    assert all(rng.exponential(2.0) >= 0.0 for _ in range(200))


@pytest.mark.parametrize("lam", [0.0, -1.0])
def test_exponential_invalid(lam):
    with pytest.raises(ValueError):
        RandomSource(0).exponential(lam)