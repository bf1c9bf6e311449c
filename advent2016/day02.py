"""Bathroom keypad codes."""

from typing import Sequence, Tuple

KEYPAD_SQUARE = ("123", "456", "789")
KEYPAD_DIAMOND = ("  1  ", " 234 ", "56789", " ABC ", "  D  ")

_MOVES = {"U": (0, -1), "D": (0, 1), "L": (-1, 0), "R": (1, 0)}


def _is_key(keypad: Sequence[str], x: int, y: int) -> bool:
    return 0 <= y < len(keypad) and 0 <= x < len(keypad[y]) and keypad[y][x] != " "


def decode(text: str, keypad: Sequence[str], start: Tuple[int, int]) -> str:
    """Follow each line of moves on the keypad and collect the key it ends on."""
    x, y = start
    if not _is_key(keypad, x, y):
        raise ValueError(f"start position {start!r} is not on a key")
    code = []
    for line in text.strip().splitlines():
        for ch in line:
            move = _MOVES.get(ch)
            if move is None:
                continue
            nx, ny = x + move[0], y + move[1]
            if _is_key(keypad, nx, ny):
                x, y = nx, ny
        code.append(keypad[y][x])
    return "".join(code)


def solve(text: str) -> Tuple[str, str]:
    """Return the codes for the square keypad and the diamond keypad."""
    return decode(text, KEYPAD_SQUARE, (1, 1)), decode(text, KEYPAD_DIAMOND, (0, 2))