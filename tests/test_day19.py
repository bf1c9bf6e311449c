import pytest

from advent2016.day19 import solve, winner_across, winner_next


def test_winner_next_example():
    assert winner_next(5) == 3


def test_winner_across_example():
    assert winner_across(5) == 2


@pytest.mark.parametrize("k", range(0, 20))
def test_power_of_two_first_elf_wins(k):
    assert winner_next(2 ** k) == 1


@pytest.mark.parametrize("n", range(1, 300))
def test_winner_next_is_odd_and_in_circle(n):
    winner = winner_next(n)
    assert winner % 2 == 1
    assert winner <= n


@pytest.mark.parametrize("n", range(2, 300))
def test_winner_across_is_in_circle(n):
    assert 1 <= winner_across(n) <= n


@pytest.mark.parametrize("n", [0, -3])
def test_no_elves_raises(n):
    with pytest.raises(ValueError):
        winner_next(n)
    with pytest.raises(ValueError):
        winner_across(n)


def test_solve_combines_both():
    assert solve("3014387\n") == (winner_next(3014387), winner_across(3014387))


def test_solve_rejects_non_number():
    with pytest.raises(ValueError):
        solve("many elves")