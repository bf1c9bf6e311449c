"""Carrying generators and microchips to the top floor with a two-item elevator."""

import re
from collections import deque
from dataclasses import dataclass, replace
from itertools import combinations
from typing import Dict, FrozenSet, Iterator, Sequence, Tuple

FLOORS = 4
EXTRA_ELEMENTS = ("elerium", "dilithium")

_ITEM = re.compile(r"([a-z]+)(-compatible)? (microchip|generator)")

_GENERATOR = 0
_MICROCHIP = 1

# Elevator floor plus one (generator floor, microchip floor) pair per element,
# sorted so that states differing only by element names compare equal.
_State = Tuple[int, Tuple[Tuple[int, int], ...]]


@dataclass(frozen=True)
class Floor:
    """The generators and microchips on one floor, by element name."""

    generators: FrozenSet[str] = frozenset()
    microchips: FrozenSet[str] = frozenset()

    def with_pair(self, element: str) -> "Floor":
        """Return this floor with a generator and microchip of the element added."""
        return replace(
            self,
            generators=self.generators | {element},
            microchips=self.microchips | {element},
        )

    @property
    def is_safe(self) -> bool:
        """No microchip is fried: no generators, or every chip has its own generator."""
        return not self.generators or self.microchips <= self.generators


def parse_floors(text: str) -> Tuple[Floor, ...]:
    """Read one floor description per line, bottom floor first."""
    floors = []
    for line in text.splitlines()[:FLOORS]:
        generators = set()
        microchips = set()
        for match in _ITEM.finditer(line):
            if match.group(3) == "microchip":
                microchips.add(match.group(1))
            else:
                generators.add(match.group(1))
        floors.append(Floor(frozenset(generators), frozenset(microchips)))
    floors.extend(Floor() for _ in range(FLOORS - len(floors)))
    return tuple(floors)


def _initial_state(floors: Sequence[Floor]) -> _State:
    generator_floor: Dict[str, int] = {}
    microchip_floor: Dict[str, int] = {}
    for level, floor in enumerate(floors):
        for element in floor.generators:
            if element in generator_floor:
                raise ValueError(f"more than one {element} generator")
            generator_floor[element] = level
        for element in floor.microchips:
            if element in microchip_floor:
                raise ValueError(f"more than one {element} microchip")
            microchip_floor[element] = level
    unpaired = set(generator_floor) ^ set(microchip_floor)
    if unpaired:
        raise ValueError(f"elements without both items: {', '.join(sorted(unpaired))}")
    pairs = tuple(sorted((generator_floor[e], microchip_floor[e]) for e in generator_floor))
    return 0, pairs


def _floor_is_safe(pairs: Tuple[Tuple[int, int], ...], level: int) -> bool:
    if not any(generator == level for generator, _ in pairs):
        return True
    return all(generator == level for generator, chip in pairs if chip == level)


def _successors(state: _State, floor_count: int) -> Iterator[_State]:
    elevator, pairs = state
    items = [
        (index, kind)
        for index, pair in enumerate(pairs)
        for kind in (_GENERATOR, _MICROCHIP)
        if pair[kind] == elevator
    ]
    loads = [(item,) for item in items] + list(combinations(items, 2))
    for target in (elevator - 1, elevator + 1):
        if not 0 <= target < floor_count:
            continue
        for load in loads:
            moved = [list(pair) for pair in pairs]
            for index, kind in load:
                moved[index][kind] = target
            new_pairs = tuple(sorted((g, c) for g, c in moved))
            if _floor_is_safe(new_pairs, elevator) and _floor_is_safe(new_pairs, target):
                yield target, new_pairs


def min_steps(floors: Sequence[Floor]) -> int:
    """Return the fewest elevator trips that bring every item to the top floor."""
    if not floors:
        raise ValueError("there must be at least one floor")
    start = _initial_state(floors)
    top = len(floors) - 1
    goal: _State = (top, tuple((top, top) for _ in start[1]))
    if start == goal:
        return 0
    seen = {start}
    frontier = deque([(start, 0)])
    while frontier:
        state, depth = frontier.popleft()
        for successor in _successors(state, len(floors)):
            if successor == goal:
                return depth + 1
            if successor not in seen:
                seen.add(successor)
                frontier.append((successor, depth + 1))
    raise ValueError("no sequence of moves brings everything to the top floor")


def solve(text: str) -> Tuple[int, int]:
    """Return the steps for the described floors, then with two more pairs on the first floor."""
    floors = parse_floors(text)
    part1 = min_steps(floors)
    first = floors[0]
    for element in EXTRA_ELEMENTS:
        first = first.with_pair(element)
    part2 = min_steps((first,) + floors[1:])
    return part1, part2