"""Movement of individuals between two regional populations."""

from __future__ import annotations

from .population import Population


def migrate(pop_a: Population, pop_b: Population, migration_rate: float) -> None:
    """Exchange a fraction of the susceptible and recovered of each age group.

    Each population sends ``migration_rate`` of its susceptible count and of
    its recovered count to the other one. The other compartments stay put.
    """
    s_a = pop_a.susceptible[:, 0].copy()
    s_b = pop_b.susceptible[:, 0].copy()
    a_can_go = s_a * migration_rate
    b_can_go = s_b * migration_rate
    pop_a.susceptible[:, 0] = s_a - a_can_go + b_can_go
    pop_b.susceptible[:, 0] = s_b - b_can_go + a_can_go

    r_a = pop_a.recovered.copy()
    r_b = pop_b.recovered.copy()
    a_r_can_go = r_a * migration_rate
    b_r_can_go = r_b * migration_rate
    pop_a.recovered[:] = r_a - a_r_can_go + b_r_can_go
    pop_b.recovered[:] = r_b - b_r_can_go + a_r_can_go