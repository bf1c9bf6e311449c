import pytest

from advent2016 import day17
from advent2016.day17 import longest_path_length, shortest_path, solve

_STEPS = {"U": (0, -1), "D": (0, 1), "L": (-1, 0), "R": (1, 0)}


def _end_of(path):
    x = y = 0
    for step in path:
        dx, dy = _STEPS[step]
        x, y = x + dx, y + dy
        assert 0 <= x < day17.SIZE and 0 <= y < day17.SIZE
    return x, y


def test_shortest_example():
    assert shortest_path("ihgpwlah") == "DDRRRD"


def test_shortest_second_example():
    assert shortest_path("kglvqrro") == "DDUDRLRRUDRD"


def test_longest_example():
    assert longest_path_length("ihgpwlah") == 370


@pytest.mark.parametrize("passcode", ["ihgpwlah", "kglvqrro", "ulqzkmiv"])
def test_shortest_path_ends_in_vault(passcode):
    assert _end_of(shortest_path(passcode)) == day17.VAULT


@pytest.mark.parametrize("passcode", ["ihgpwlah", "kglvqrro", "ulqzkmiv"])
def test_shortest_not_longer_than_longest(passcode):
    assert len(shortest_path(passcode)) <= longest_path_length(passcode)


def test_dead_end_passcode_raises():
    with pytest.raises(ValueError):
        shortest_path("hijkl")
    with pytest.raises(ValueError):
        longest_path_length("hijkl")


def test_solve_strips_and_combines():
    assert solve("kglvqrro\n") == (shortest_path("kglvqrro"), longest_path_length("kglvqrro"))