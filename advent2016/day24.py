"""Shortest route through a duct map visiting every numbered location."""

from collections import deque
from itertools import pairwise, permutations
from typing import Dict, FrozenSet, Tuple

Position = Tuple[int, int]

_DIGITS = "0123456789"


def parse_map(text: str) -> Tuple[FrozenSet[Position], Dict[int, Position]]:
    """Return the wall cells and the position of each numbered location."""
    walls = set()
    points: Dict[int, Position] = {}
    for y, row in enumerate(text.splitlines()):
        for x, cell in enumerate(row):
            if cell == "#":
                walls.add((x, y))
            elif cell in _DIGITS:
                label = int(cell)
                if label in points:
                    raise ValueError(f"location {label} appears more than once")
                points[label] = (x, y)
    return frozenset(walls), points


def pairwise_distances(
    walls: FrozenSet[Position], points: Dict[int, Position]
) -> Dict[Tuple[int, int], int]:
    """Return the shortest walking distance between every ordered pair of locations."""
    cells = set(walls) | set(points.values())
    if not cells:
        return {}
    min_x = min(x for x, _ in cells)
    max_x = max(x for x, _ in cells)
    min_y = min(y for _, y in cells)
    max_y = max(y for _, y in cells)

    def reach(start: Position) -> Dict[Position, int]:
        seen = {start: 0}
        frontier = deque([start])
        while frontier:
            x, y = frontier.popleft()
            for step in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                sx, sy = step
                if (
                    min_x <= sx <= max_x
                    and min_y <= sy <= max_y
                    and step not in walls
                    and step not in seen
                ):
                    seen[step] = seen[x, y] + 1
                    frontier.append(step)
        return seen

    distances: Dict[Tuple[int, int], int] = {}
    for label, start in points.items():
        reached = reach(start)
        for other, position in points.items():
            if position not in reached:
                raise ValueError(f"location {other} cannot be reached from location {label}")
            distances[label, other] = reached[position]
    return distances


def solve(text: str) -> Tuple[int, int]:
    """Return the shortest route from 0 visiting every location, and the same returning to 0."""
    walls, points = parse_map(text)
    labels = sorted(points)
    if labels != list(range(len(labels))) or not labels:
        raise ValueError("locations must be numbered from 0 without gaps")
    distances = pairwise_distances(walls, points)

    best_open = best_closed = None
    for order in permutations(labels[1:]):
        route = (0,) + order
        length = sum(distances[step] for step in pairwise(route))
        closed = length + distances[route[-1], 0]
        best_open = length if best_open is None else min(best_open, length)
        best_closed = closed if best_closed is None else min(best_closed, closed)
    return best_open, best_closed