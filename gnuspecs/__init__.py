"""Chainable builders for gnuplot option and command strings."""

__version__ = "0.1.0"