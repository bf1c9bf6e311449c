"""Rows of safe tiles and traps, each row derived from the one before."""

from typing import Tuple

ROWS_PART1 = 40
ROWS_PART2 = 400_000

TRAP = "^"
SAFE = "."


def load(row: str) -> int:
    """Turn a row of tiles into a bit mask, bit x set where tile x is a trap."""
    bits = 0
    for x, tile in enumerate(row):
        if tile == TRAP:
            bits |= 1 << x
        elif tile != SAFE:
            raise ValueError(f"unknown tile {tile!r} at position {x}")
    return bits


def store(row: int, width: int) -> str:
    """Turn a bit mask back into a row of tiles of the given width."""
    return "".join(TRAP if row >> x & 1 else SAFE for x in range(width))


def next_row(row: int, width: int) -> int:
    """Return the next row: a tile is a trap when exactly one of its two neighbours was."""
    mask = (1 << width) - 1
    row &= mask
    return ((row << 1) ^ (row >> 1)) & mask


def count_safe(text: str, rows: int) -> int:
    """Count the safe tiles in the first rows starting from the row in the text."""
    first = text.strip()
    if not first:
        raise ValueError("the first row is empty")
    if rows < 0:
        raise ValueError("the number of rows cannot be negative")
    width = len(first)
    row = load(first)
    total = 0
    for _ in range(rows):
        total += width - row.bit_count()
        row = next_row(row, width)
    return total


def solve(text: str) -> Tuple[int, int]:
    """Return the safe tile counts over 40 rows and over 400000 rows."""
    return count_safe(text, ROWS_PART1), count_safe(text, ROWS_PART2)