"""Walking a taxicab grid by turn-and-step instructions."""

from typing import Iterator, Tuple

Position = Tuple[int, int]

# North, east, south, west; turning right moves forward through this tuple.
_HEADINGS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _walk(text: str) -> Iterator[Position]:
    """Yield every block visited, one step at a time."""
    facing = 0
    x = y = 0
    for instruction in text.strip().split(", "):
        turn, count = instruction[:1], instruction[1:]
        if turn == "R":
            facing = (facing + 1) % len(_HEADINGS)
        elif turn == "L":
            facing = (facing - 1) % len(_HEADINGS)
        else:
            raise ValueError(f"unknown turn in instruction {instruction!r}")
        try:
            steps = int(count)
        except ValueError:
            raise ValueError(f"bad step count in instruction {instruction!r}") from None
        if steps < 0:
            raise ValueError(f"negative step count in instruction {instruction!r}")
        dx, dy = _HEADINGS[facing]
        for _ in range(steps):
            x += dx
            y += dy
            yield x, y


def solve(text: str) -> Tuple[int, int]:
    """Return the distance to the final block and to the first block visited twice."""
    visited = set()
    first_repeat = None
    last = None
    for position in _walk(text):
        if first_repeat is None:
            if position in visited:
                first_repeat = position
            else:
                visited.add(position)
        last = position
    if first_repeat is None or last is None:
        raise ValueError("no location is visited twice")
    return abs(last[0]) + abs(last[1]), abs(first_repeat[0]) + abs(first_repeat[1])