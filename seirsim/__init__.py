"""Stochastic age-structured SEIR epidemic simulation of two migrating populations."""

__version__ = "0.1.0"