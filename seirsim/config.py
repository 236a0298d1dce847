"""Model parameters for the two-region SEIR simulation."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

DEFAULT_AGE_DISTRIBUTION_A: tuple[int, ...] = (
    5078, 4845, 5825, 7419, 7828, 5867, 6279, 10068, 10079,
    7662, 5406, 7067, 5490, 4080, 2967, 1985, 1051, 1004,
)
DEFAULT_AGE_DISTRIBUTION_B: tuple[int, ...] = (
    5191, 4215, 4413, 7982, 9531, 7234, 6885, 8552, 9975,
    9011, 6621, 6396, 4866, 3323, 2455, 1804, 830, 715,
)


@dataclass
class Config:
    """Parameters of the epidemic model, with sensible defaults."""

    migration_rate: float = 0.0
    beta_a: float = 0.042943
    beta_b: float = 0.0417751
    gamma_e2: float = 1.0
    gamma_ia: float = 0.5
    gamma_i: float = 0.2
    exposed_period: float = 3.0
    psy_period: float = 2.0
    age_distribution_a: list[int] = field(
        default_factory=lambda: list(DEFAULT_AGE_DISTRIBUTION_A)
    )
    age_distribution_b: list[int] = field(
        default_factory=lambda: list(DEFAULT_AGE_DISTRIBUTION_B)
    )

    def load(self) -> Config:
        """Set every parameter to its default value and return self."""
        defaults = Config.__new__(Config)
        Config.__init__(defaults)
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))
        return self