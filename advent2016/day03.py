"""Counting possible triangles, by rows and by columns."""

from typing import Sequence, Tuple

Triangle = Tuple[int, int, int]


def is_valid(sides: Sequence[int]) -> bool:
    """Return whether every two sides together are longer than the third."""
    a, b, c = sides
    return a + b > c and a + c > b and b + c > a


def _parse_row(line: str) -> Triangle:
    sides = line.split()
    if len(sides) < 3:
        raise ValueError(f"expected three sides in {line!r}")
    a, b, c = (int(side) for side in sides[:3])
    return a, b, c


def solve(text: str) -> Tuple[int, int]:
    """Count valid triangles read by rows, then read down columns in groups of three rows."""
    triangles = [_parse_row(line) for line in text.strip().splitlines()]
    by_rows = sum(1 for triangle in triangles if is_valid(triangle))
    chunks = zip(*[iter(triangles)] * 3)
    by_columns = sum(1 for chunk in chunks for column in zip(*chunk) if is_valid(column))
    return by_rows, by_columns