import pytest

from advent2016.day10 import solve

EXAMPLE = """\
value 5 goes to bot 2
bot 2 gives low to bot 1 and high to bot 0
value 3 goes to bot 1
bot 1 gives low to output 1 and high to bot 0
bot 0 gives low to output 2 and high to output 0
value 2 goes to bot 2
"""


def test_worked_example():
    assert solve(EXAMPLE, (2, 5)) == (2, 30)


def test_other_comparison():
    assert solve(EXAMPLE, (2, 3))[0] == 1


def test_watched_order_does_not_matter():
    assert solve(EXAMPLE, (3, 2)) == solve(EXAMPLE, (2, 3))


def test_output_product_independent_of_watched_pair():
    assert solve(EXAMPLE, (2, 5))[1] == solve(EXAMPLE, (3, 5))[1]


def test_stuck_simulation_raises():
    text = "bot 0 gives low to output 0 and high to output 1\nvalue 1 goes to bot 0\n"
    with pytest.raises(ValueError):
        solve(text)


def test_unknown_destination_raises():
    with pytest.raises(ValueError):
        solve("bot 0 gives low to shelf 0 and high to output 1\n")


def test_third_chip_raises():
    text = "value 1 goes to bot 0\nvalue 2 goes to bot 0\nvalue 3 goes to bot 0\n"
    with pytest.raises(ValueError):
        solve(text)


def test_blank_line_raises():
    with pytest.raises(ValueError):
        solve("\n")