"""Paths through a 4x4 vault whose doors are decided by MD5 hashes."""

import hashlib
from collections import deque
from typing import Iterator, Tuple

SIZE = 4
VAULT = (SIZE - 1, SIZE - 1)

_OPEN = frozenset("bcdef")
# Order matches the first four hex digits of the hash.
_DIRECTIONS = (("U", 0, -1), ("D", 0, 1), ("L", -1, 0), ("R", 1, 0))


def _moves(passcode: str, path: str, x: int, y: int) -> Iterator[Tuple[str, int, int]]:
    digest = hashlib.md5((passcode + path).encode()).hexdigest()
    for (step, dx, dy), door in zip(_DIRECTIONS, digest):
        nx, ny = x + dx, y + dy
        if 0 <= nx < SIZE and 0 <= ny < SIZE and door in _OPEN:
            yield path + step, nx, ny


def _paths_to_vault(passcode: str) -> Iterator[str]:
    """Yield every path reaching the vault, shortest first."""
    frontier = deque([("", 0, 0)])
    while frontier:
        path, x, y = frontier.popleft()
        if (x, y) == VAULT:
            yield path
            continue
        frontier.extend(_moves(passcode, path, x, y))


def shortest_path(passcode: str) -> str:
    """Return the shortest sequence of moves that reaches the vault."""
    for path in _paths_to_vault(passcode):
        return path
    raise ValueError(f"no path reaches the vault for passcode {passcode!r}")


def longest_path_length(passcode: str) -> int:
    """Return the length of the longest path that ends at the vault."""
    longest = max((len(path) for path in _paths_to_vault(passcode)), default=None)
    if longest is None:
        raise ValueError(f"no path reaches the vault for passcode {passcode!r}")
    return longest


def solve(text: str) -> Tuple[str, int]:
    """Return the shortest path and the longest path length for the passcode."""
    passcode = text.strip()
    return shortest_path(passcode), longest_path_length(passcode)