"""Solvers for small algorithmic puzzles on binary trees, arrays and strings."""

__version__ = "0.1.0"