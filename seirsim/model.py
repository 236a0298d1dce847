"""Two-region SEIR simulation driver and command-line entry point."""

from __future__ import annotations

import argparse
from pathlib import Path

from .config import Config
from .csvio import PathType, write_csv
from .migration import migrate
from .population import Population
from .rng import RandomSource
from .transition import step

EPOCHS = 30
DAYS = 365


class SEIRModel:
    """Repeated stochastic simulation of two coupled regional populations."""

    def __init__(
        self,
        config: Config | None = None,
        rng: RandomSource | None = None,
        epochs: int = EPOCHS,
        days: int = DAYS,
    ) -> None:
        if epochs < 0:
            raise ValueError(f"epochs must be non-negative, got {epochs}")
        if days < 0:
            raise ValueError(f"days must be non-negative, got {days}")
        self.config = config if config is not None else Config()
        self.rng = rng if rng is not None else RandomSource()
        self.epochs = epochs
        self.days = days
        self.population_a = Population()
        self.population_b = Population()
        self.results_a: list[list[float]] = []
        self.results_b: list[list[float]] = []

    def initialize(self) -> None:
        """Set up both populations from the configured age distributions."""
        self.population_a.initialize(self.config.age_distribution_a)
        self.population_b.initialize(self.config.age_distribution_b)

    def run(self) -> None:
        """Run every epoch, recording the daily infected totals of both regions."""
        if not (self.population_a.age_distribution and self.population_b.age_distribution):
            raise RuntimeError("model is not initialized; call initialize() first")
        self.results_a = []
        self.results_b = []
        for epoch in range(1, self.epochs + 1):
            self.population_a.reset()
            self.population_b.reset()
            daily_a: list[float] = []
            daily_b: list[float] = []
            for day in range(self.days):
                migrate(self.population_a, self.population_b, self.config.migration_rate)
                step(self.population_a, self.config, day, self.rng)
                step(self.population_b, self.config, day, self.rng)
                daily_a.append(self.population_a.total_infected())
                daily_b.append(self.population_b.total_infected())
            self.results_a.append(daily_a)
            self.results_b.append(daily_b)
            print(f"Epoch {epoch}/{self.epochs} completed.")

    def export_results(self, directory: PathType | None = None) -> tuple[Path, Path]:
        """Write the results to results_A.csv and results_B.csv; return their paths."""
        base = Path(directory) if directory is not None else Path.cwd()
        path_a = base / "results_A.csv"
        path_b = base / "results_B.csv"
        write_csv(path_a, self.results_a)
        write_csv(path_b, self.results_b)
        print("Results exported to results_A.csv and results_B.csv")
        return path_a, path_b


def main(argv: list[str] | None = None) -> int:
    """Run the simulation and export its results."""
    parser = argparse.ArgumentParser(description="Two-region SEIR epidemic simulation.")
    parser.add_argument("--epochs", type=int, default=EPOCHS, help="number of epochs")
    parser.add_argument("--days", type=int, default=DAYS, help="days per epoch")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--output-dir", type=Path, default=None, help="directory for the result files"
    )
    args = parser.parse_args(argv)

    model = SEIRModel(
        rng=RandomSource(args.seed), epochs=args.epochs, days=args.days
    )
    model.initialize()
    model.run()
    model.export_results(args.output_dir)
    print("Simulation completed successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())