"""Solutions to the 2016 Advent of Code puzzles, one module per covered day."""

__version__ = "1.0.0"