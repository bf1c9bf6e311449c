"""Elves in a circle stealing presents until one is left."""

from typing import Tuple


def _check(n: int) -> None:
    if n < 1:
        raise ValueError(f"there must be at least one elf, got {n}")


def winner_next(n: int) -> int:
    """Return the winning elf when each elf steals from the elf to its left."""
    _check(n)
    remainder = n - (1 << (n.bit_length() - 1))
    return 2 * remainder + 1


def winner_across(n: int) -> int:
    """Return the winning elf when each elf steals from the elf across the circle."""
    _check(n)
    power = 1
    while power * 3 < n:
        power *= 3
    return n - power


def solve(text: str) -> Tuple[int, int]:
    """Return both winners for the number of elves in the text."""
    n = int(text.strip())
    return winner_next(n), winner_across(n)