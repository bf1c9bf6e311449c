"""Moving data through a grid of storage nodes to reach the top-left node."""

import heapq
import re
from dataclasses import dataclass
from itertools import count
from typing import Dict, Iterator, List, Sequence, Tuple

Position = Tuple[int, int]
_State = Tuple[Position, Position]

GOAL: Position = (0, 0)
WALL_THRESHOLD = 99

_NODE = re.compile(r"/dev/grid/node-x(\d+)-y(\d+)\s+(\d+)T\s+(\d+)T")
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Node:
    x: int
    y: int
    size: int
    used: int

    @property
    def pos(self) -> Position:
        return self.x, self.y

    @property
    def is_wall(self) -> bool:
        """Nodes this large are too full to take part in moving data."""
        return self.size > WALL_THRESHOLD


def parse_node(line: str) -> Node:
    """Parse one line of the df listing."""
    match = _NODE.match(line.strip())
    if match is None:
        raise ValueError(f"malformed node line {line!r}")
    x, y, size, used = (int(group) for group in match.groups())
    return Node(x, y, size, used)


def _empty_node(nodes: Sequence[Node]) -> Node:
    for node in nodes:
        if node.used == 0:
            return node
    raise ValueError("no node is empty")


def count_viable_pairs(nodes: Sequence[Node]) -> int:
    """Count the non-empty nodes whose data would fit in the empty node."""
    empty = _empty_node(nodes)
    return sum(1 for node in nodes if node.used != 0 and node.used < empty.size)


def _heuristic(state: _State) -> int:
    (tx, ty), (ex, ey) = state
    return abs(tx - GOAL[0]) + abs(ty - GOAL[1]) + abs(tx - ex) + abs(ty - ey)


def _successors(state: _State, grid: Dict[Position, Node]) -> Iterator[_State]:
    target, (ex, ey) = state
    for dy, dx in _STEPS:
        step = (ex + dx, ey + dy)
        node = grid.get(step)
        if node is None or node.is_wall:
            continue
        yield ((ex, ey) if step == target else target), step


def min_moves(nodes: Sequence[Node]) -> int:
    """Fewest moves of the empty node that bring the top-right data to the top-left node."""
    grid = {node.pos: node for node in nodes}
    if not grid:
        raise ValueError("no nodes given")
    width = max(x for x, _ in grid) + 1
    height = max(y for _, y in grid) + 1
    if len(grid) != width * height:
        raise ValueError("the grid is missing nodes")

    start: _State = ((width - 1, 0), _empty_node(nodes).pos)
    best: Dict[_State, int] = {start: 0}
    tie = count()
    heap: List[Tuple[int, int, int, _State]] = [(_heuristic(start), 0, next(tie), start)]
    while heap:
        _, negative_cost, _, state = heapq.heappop(heap)
        cost = -negative_cost
        if state[0] == GOAL:
            return cost
        if cost > best[state]:
            continue
        for successor in _successors(state, grid):
            new_cost = cost + 1
            if new_cost < best.get(successor, new_cost + 1):
                best[successor] = new_cost
                heapq.heappush(
                    heap, (new_cost + _heuristic(successor), -new_cost, next(tie), successor)
                )
    raise ValueError("the data cannot be brought to the goal")


def solve(text: str) -> Tuple[int, int]:
    """Return the viable node count and the fewest moves to reach the goal."""
    nodes = [parse_node(line) for line in text.splitlines()[2:] if line.strip()]
    return count_viable_pairs(nodes), min_moves(nodes)