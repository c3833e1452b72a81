"""Solvers for a season of grid, parsing and search puzzles, one module per day."""

__version__ = "0.1.0"