"""Navigating the cubicle maze defined by a designer's number."""

from collections import deque
from typing import Iterator, Tuple

Position = Tuple[int, int]

START: Position = (1, 1)
PART1_TARGET: Position = (31, 39)
PART2_STEPS = 50

# Coordinates are kept within a byte each.
_BOUND = 256


def is_wall(designer_number: int, x: int, y: int) -> bool:
    """Return whether the cell at (x, y) is a wall."""
    n = x * x + 3 * x + 2 * x * y + y + y * y + designer_number
    return n.bit_count() % 2 != 0


def _neighbours(designer_number: int, position: Position) -> Iterator[Position]:
    x, y = position
    for nx, ny in ((x + 1, y), (x, y + 1), (x - 1, y), (x, y - 1)):
        if 0 <= nx < _BOUND and 0 <= ny < _BOUND and not is_wall(designer_number, nx, ny):
            yield nx, ny


def shortest_path(designer_number: int, target: Position) -> int:
    """Return the fewest steps from the start to the target."""
    target = tuple(target)
    if target == START:
        return 0
    seen = {START}
    frontier = deque([(START, 0)])
    while frontier:
        position, depth = frontier.popleft()
        for neighbour in _neighbours(designer_number, position):
            if neighbour == target:
                return depth + 1
            if neighbour not in seen:
                seen.add(neighbour)
                frontier.append((neighbour, depth + 1))
    raise ValueError(f"target {target!r} is unreachable")


def reachable_within(designer_number: int, steps: int) -> int:
    """Count the cells reachable from the start in at most the given number of steps."""
    seen = {START}
    frontier = deque([(START, 0)])
    while frontier:
        position, depth = frontier.popleft()
        if depth >= steps:
            continue
        for neighbour in _neighbours(designer_number, position):
            if neighbour not in seen:
                seen.add(neighbour)
                frontier.append((neighbour, depth + 1))
    return len(seen)


def solve(text: str) -> Tuple[int, int]:
    """Return the steps to (31, 39) and the cells reachable in 50 steps."""
    designer_number = int(text.strip())
    return (
        shortest_path(designer_number, PART1_TARGET),
        reachable_within(designer_number, PART2_STEPS),
    )