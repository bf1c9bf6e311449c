"""Finding addresses not covered by a blacklist of ranges."""

from typing import Iterable, Iterator, List, Tuple

ADDRESS_SPACE = 1 << 32

Range = Tuple[int, int]


def _parse(text: str) -> Iterator[Range]:
    for line in text.splitlines():
        if not line.strip():
            continue
        low, sep, high = line.partition("-")
        if not sep:
            raise ValueError(f"malformed range {line!r}")
        yield int(low), int(high)


def merge_ranges(ranges: Iterable[Range]) -> List[Range]:
    """Merge inclusive ranges that overlap or touch into a sorted, disjoint list."""
    merged: List[Range] = []
    for low, high in sorted(ranges):
        if low > high:
            raise ValueError(f"range {low}-{high} ends before it starts")
        if merged and low <= merged[-1][1] + 1:
            if high > merged[-1][1]:
                merged[-1] = (merged[-1][0], high)
        else:
            merged.append((low, high))
    return merged


def solve(text: str) -> Tuple[int, int]:
    """Return the lowest allowed address and how many addresses are allowed."""
    merged = merge_ranges(_parse(text))
    if not merged:
        raise ValueError("no ranges given")
    lowest = 0 if merged[0][0] > 0 else merged[0][1] + 1
    if lowest >= ADDRESS_SPACE:
        raise ValueError("every address is blocked")
    allowed = ADDRESS_SPACE - sum(high - low + 1 for low, high in merged)
    return lowest, allowed