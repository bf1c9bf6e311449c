"""Lengths of data compressed with (AxB) repeat markers."""

from typing import Tuple


def _read_marker(data: str, start: int) -> Tuple[int, int, int]:
    """Parse the marker opening at start; return (chars, repeats, index after it)."""
    try:
        cross = data.index("x", start)
        close = data.index(")", cross + 1)
        chars = int(data[start + 1:cross])
        repeats = int(data[cross + 1:close])
    except ValueError:
        raise ValueError(f"malformed marker at position {start}") from None
    return chars, repeats, close + 1


def part1_length(data: str) -> int:
    """Decompressed length where markers inside repeated data are not expanded."""
    length = 0
    i = 0
    while i < len(data):
        if data[i] == "(":
            chars, repeats, after = _read_marker(data, i)
            length += chars * repeats
            i = after + chars
        else:
            length += 1
            i += 1
    return length


def part2_length(data: str) -> int:
    """Decompressed length where markers inside repeated data are expanded too."""
    length = 0
    i = 0
    while i < len(data):
        if data[i] == "(":
            chars, repeats, after = _read_marker(data, i)
            end = after + chars
            if end > len(data):
                raise ValueError(f"marker at position {i} runs past the end of the data")
            length += part2_length(data[after:end]) * repeats
            i = end
        else:
            length += 1
            i += 1
    return length


def solve(text: str) -> Tuple[int, int]:
    """Return both decompressed lengths of the stripped text."""
    data = text.strip()
    return part1_length(data), part2_length(data)