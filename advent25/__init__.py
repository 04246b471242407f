"""Solvers for nine days of holiday programming puzzles, with a command-line runner."""

__version__ = "0.1.0"