"""Balance bots passing microchips to each other and to output bins."""

from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

Destination = Tuple[str, int]
_WATCHED_BINS = (0, 1, 2)


def _parse(text: str):
    rules: Dict[int, Tuple[Destination, Destination]] = {}
    hands: Dict[int, List[int]] = defaultdict(list)
    for line in text.splitlines():
        parts = line.split(" ")
        try:
            if line.startswith("bot"):
                low = (parts[5], int(parts[6]))
                high = (parts[10], int(parts[11]))
                for kind, _ in (low, high):
                    if kind not in ("bot", "output"):
                        raise ValueError(f"unknown destination {kind!r}")
                rules[int(parts[1])] = (low, high)
            else:
                _give(hands, int(parts[5]), int(parts[1]))
        except IndexError:
            raise ValueError(f"malformed line {line!r}") from None
    return rules, hands


def _give(hands: Dict[int, List[int]], bot: int, chip: int) -> None:
    if len(hands[bot]) >= 2:
        raise ValueError(f"bot {bot} already holds two chips")
    hands[bot].append(chip)


def solve(text: str, watched: Sequence[int] = (17, 61)) -> Tuple[int, int]:
    """Return the bot that compares the watched chips and the product of outputs 0, 1 and 2.

    The simulation stops as soon as the first three outputs each hold a chip.
    """
    low_target, high_target = sorted(watched)
    rules, hands = _parse(text)
    bins: Dict[int, int] = {}
    comparer = 0

    while not all(n in bins for n in _WATCHED_BINS):
        ready = [bot for bot, chips in hands.items() if len(chips) == 2]
        if not ready:
            raise ValueError("no bot is holding two chips")
        bot = min(ready)
        if bot not in rules:
            raise ValueError(f"bot {bot} has no instructions")
        low, high = sorted(hands[bot])
        hands[bot] = []
        for (kind, target), chip in zip(rules[bot], (low, high)):
            if kind == "bot":
                _give(hands, target, chip)
            elif target in _WATCHED_BINS:
                bins.setdefault(target, chip)
        if (low, high) == (low_target, high_target):
            comparer = bot

    product = 1
    for n in _WATCHED_BINS:
        product *= bins[n]
    return comparer, product