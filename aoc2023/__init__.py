"""Solutions to the 2023 Advent of Code puzzles, days 1 to 15, one module per day."""

__version__ = "0.1.0"