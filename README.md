# seirsim

A stochastic, age-structured SEIR epidemic simulation of two regions (A and B)
that exchange people through migration.

Each region has 18 age groups. Individuals move through these compartments:

- **S**: susceptible
- **E1 / E2**: exposed, then pre-symptomatic infectious
- **Ia**: asymptomatic infectious
- **I**: symptomatic infectious
- **R**: recovered

Time advances in whole days. Each day runs in this order:

1. A share of the susceptible and recovered people of each age group moves
   between the two regions.
2. Each region goes through one transition step.

A default run is 30 epochs of 365 days. Every epoch starts again from the
initial state. For each day, the run records the number of symptomatic
infectious people in each region.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
seirsim [--epochs N] [--days N] [--seed N] [--output-dir DIR]
```

| Option | Default | Meaning |
| --- | --- | --- |
| `--epochs` | 30 | number of epochs |
| `--days` | 365 | days per epoch |
| `--seed` | fresh entropy | seed for the random source |
| `--output-dir` | current directory | where the result files are written |

The command runs the simulation with the default parameters and prints a line
after each epoch. It then writes `results_A.csv` and `results_B.csv`. Each file
has one row per epoch and one column per day, and each value is written with
six significant digits.

The same program also runs with `python -m seirsim.model`.

## Library use

```python
from seirsim.config import Config
from seirsim.rng import RandomSource
from seirsim.model import SEIRModel

config = Config()
config.migration_rate = 0.01

model = SEIRModel(config, RandomSource(seed=42), epochs=2, days=30)
model.initialize()
model.run()
path_a, path_b = model.export_results(".")
```

`SEIRModel.run()` raises `RuntimeError` if `initialize()` has not been called
first. After a run, the daily totals are in `model.results_a` and
`model.results_b`.

The building blocks can also be used on their own:

- `seirsim.config.Config` is a dataclass that holds the model parameters and the
  two age distributions. `load()` puts every field back to its default value.
- `seirsim.population.Population` holds the compartment state of one region as
  numpy arrays, with one row per age group.
  - `initialize(age_distribution)` takes exactly 18 counts.
  - `reset()` makes the whole population susceptible again.
  - `total_infected()` returns the current symptomatic count.
- `seirsim.migration.migrate(pop_a, pop_b, migration_rate)` exchanges
  susceptible and recovered people between two regions. The other compartments
  stay where they are.
- `seirsim.transition.step(population, config, day, rng)` advances a region by
  one day. The infection rate it uses is `config.beta_a`.
- `seirsim.transition.age_susceptibility(age_group)` gives the relative
  susceptibility of an age group:
  - 0.58 for groups 0–2
  - 1.0 for groups 3–12
  - 1.65 for groups 13–17
- `seirsim.rng.RandomSource(seed=None)` is a random source built on numpy's
  generator. Without a seed it draws fresh entropy. It provides `rand_int`,
  `rand_double`, `binomial` and `exponential`, and raises `ValueError` on
  invalid arguments.
- `seirsim.csvio.read_csv(path)` reads a numeric matrix from CSV. It skips empty
  cells and empty rows.
- `seirsim.csvio.write_csv(path, data)` writes a numeric matrix as CSV.

## Limitations

The parameters `beta_b` and `gamma_i` are stored in `Config`, but the transition
step does not use them. The `day` argument of `step` does not change what it
does. Parameters can only be set from Python; there is no configuration file.