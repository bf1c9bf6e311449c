"""Scrambling passwords with a list of string operations."""

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

PLAIN = "abcdefgh"
SCRAMBLED = "fbgdceah"


def _rotate_left(buf: List[str], steps: int) -> None:
    if not 0 <= steps <= len(buf):
        raise ValueError(f"cannot rotate {len(buf)} letters by {steps} steps")
    buf[:] = buf[steps:] + buf[:steps]


def _rotate_right(buf: List[str], steps: int) -> None:
    if not 0 <= steps <= len(buf):
        raise ValueError(f"cannot rotate {len(buf)} letters by {steps} steps")
    _rotate_left(buf, len(buf) - steps)


@dataclass(frozen=True)
class _SwapPositions:
    x: int
    y: int

    def apply(self, buf: List[str]) -> None:
        buf[self.x], buf[self.y] = buf[self.y], buf[self.x]


@dataclass(frozen=True)
class _SwapLetters:
    x: str
    y: str

    def apply(self, buf: List[str]) -> None:
        i, j = buf.index(self.x), buf.index(self.y)
        buf[i], buf[j] = buf[j], buf[i]


@dataclass(frozen=True)
class _RotateLeft:
    steps: int

    def apply(self, buf: List[str]) -> None:
        _rotate_left(buf, self.steps)


@dataclass(frozen=True)
class _RotateRight:
    steps: int

    def apply(self, buf: List[str]) -> None:
        _rotate_right(buf, self.steps)


@dataclass(frozen=True)
class _RotateBasedOnPosition:
    letter: str

    def apply(self, buf: List[str]) -> None:
        i = buf.index(self.letter)
        steps = 1 + i + (1 if i >= 4 else 0)
        _rotate_right(buf, steps % len(buf))


@dataclass(frozen=True)
class _Reverse:
    x: int
    y: int

    def apply(self, buf: List[str]) -> None:
        if self.x < 0 or self.y >= len(buf) or self.x > self.y + 1:
            raise ValueError(f"cannot reverse positions {self.x} through {self.y}")
        buf[self.x:self.y + 1] = buf[self.x:self.y + 1][::-1]


@dataclass(frozen=True)
class _Move:
    x: int
    y: int

    def apply(self, buf: List[str]) -> None:
        letter = buf.pop(self.x)
        if not 0 <= self.y <= len(buf):
            raise ValueError(f"cannot move a letter to position {self.y}")
        buf.insert(self.y, letter)


Operation = Union[
    _SwapPositions, _SwapLetters, _RotateLeft, _RotateRight,
    _RotateBasedOnPosition, _Reverse, _Move,
]


def parse_operation(line: str) -> Operation:
    """Parse one scrambling instruction."""
    match line.split():
        case ["swap", "position", x, *_, y]:
            return _SwapPositions(int(x), int(y))
        case ["swap", "letter", x, *_, y]:
            return _SwapLetters(x[0], y[0])
        case ["rotate", "left", steps, *_]:
            return _RotateLeft(int(steps))
        case ["rotate", "right", steps, *_]:
            return _RotateRight(int(steps))
        case ["rotate", "based", *_, letter]:
            return _RotateBasedOnPosition(letter[0])
        case ["reverse", _, x, *_, y]:
            return _Reverse(int(x), int(y))
        case ["move", _, x, *_, y]:
            return _Move(int(x), int(y))
    raise ValueError(f"unknown operation {line!r}")


def apply_operations(operations: Iterable[Operation], password: str) -> str:
    """Apply the operations in order to the password and return the result."""
    buf = list(password)
    for operation in operations:
        operation.apply(buf)
    return "".join(buf)


def _unscramble(operations: List[Operation], scrambled: str) -> str:
    """Find the password that scrambles to the given one by following its cycle."""
    state = scrambled
    seen = {state}
    while True:
        following = apply_operations(operations, state)
        if following == scrambled:
            return state
        if following in seen:
            raise ValueError(f"no password scrambles to {scrambled!r}")
        seen.add(following)
        state = following


def solve(text: str) -> Tuple[str, str]:
    """Return 'abcdefgh' scrambled, and the password that scrambles to 'fbgdceah'."""
    operations = [parse_operation(line) for line in text.splitlines() if line.strip()]
    return apply_operations(operations, PLAIN), _unscramble(operations, SCRAMBLED)