[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seirsim"
version = "0.1.0"
description = "Stochastic age-structured SEIR epidemic simulation of two migrating populations"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["epidemiology", "seir", "simulation", "stochastic", "migration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
seirsim = "seirsim.model:main"

[tool.hatch.build.targets.wheel]
packages = ["seirsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
