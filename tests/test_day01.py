import pytest

from advent2016.day01 import solve


def test_worked_example():
    assert solve("R8, R4, R4, R8") == (8, 4)


def test_trailing_whitespace_is_ignored():
    assert solve("R8, R4, R4, R8\n") == solve("R8, R4, R4, R8")


def test_mirrored_route_gives_same_distances():
    assert solve("L8, L4, L4, L8") == solve("R8, R4, R4, R8")


def test_repeat_distance_never_exceeds_path_bound():
    first_total, first_repeat = solve("R8, R4, R4, R8, L2, L10")
    assert first_repeat <= 8 + 4 + 4 + 8
    assert first_total >= 0


def test_route_without_repeat_raises():
    with pytest.raises(ValueError):
        solve("R2, L3")


def test_unknown_turn_raises():
    with pytest.raises(ValueError):
        solve("X3, R4")


def test_bad_count_raises():
    with pytest.raises(ValueError):
        solve("Rx, L4")