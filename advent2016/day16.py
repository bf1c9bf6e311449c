"""Dragon-curve disk filling and its checksum."""

from typing import Tuple

TARGET_LEN_PART1 = 272
TARGET_LEN_PART2 = 35_651_584

_FLIP = str.maketrans("01", "10")


def _check_binary(data: str) -> None:
    if data.strip("01"):
        raise ValueError("data must contain only '0' and '1'")


def dragon_step(data: str) -> str:
    """Return data, a '0', then data reversed with every bit flipped."""
    _check_binary(data)
    return data + "0" + data[::-1].translate(_FLIP)


def checksum(data: str) -> str:
    """Pair up characters ('1' for a match) until the length is odd."""
    _check_binary(data)
    if not data:
        raise ValueError("cannot checksum empty data")
    if len(data) % 2:
        return data
    # Repeated pairing over a block of 2**k characters yields '1' exactly
    # when the block holds an even number of ones.
    block = len(data) & -len(data)
    return "".join(
        "1" if data.count("1", start, start + block) % 2 == 0 else "0"
        for start in range(0, len(data), block)
    )


def fill_and_checksum(seed: str, length: int) -> str:
    """Grow the seed with dragon steps to the length, truncate, and checksum it."""
    state = seed
    while len(state) < length:
        state = dragon_step(state)
    return checksum(state[:length])


def solve(text: str) -> Tuple[str, str]:
    """Return the checksums for both disk sizes."""
    seed = text.strip()
    return fill_and_checksum(seed, TARGET_LEN_PART1), fill_and_checksum(seed, TARGET_LEN_PART2)