import pytest

from advent2016 import day11
from advent2016.day11 import Floor, min_steps, parse_floors, solve

EXAMPLE = (
    "The first floor contains a hydrogen-compatible microchip and a lithium-compatible microchip.\n"
    "The second floor contains a hydrogen generator.\n"
    "The third floor contains a lithium generator.\n"
    "The fourth floor contains nothing relevant.\n"
)

RENAMED = EXAMPLE.replace("hydrogen", "cobalt").replace("lithium", "thulium")

SINGLE_PAIR = (
    "The first floor contains a hydrogen generator and a hydrogen-compatible microchip.\n"
    "The second floor contains nothing relevant.\n"
    "The third floor contains nothing relevant.\n"
    "The fourth floor contains nothing relevant.\n"
)


def test_parse_example():
    floors = parse_floors(EXAMPLE)
    assert len(floors) == day11.FLOORS
    assert floors[0].microchips == frozenset({"hydrogen", "lithium"})
    assert floors[0].generators == frozenset()
    assert floors[1].generators == frozenset({"hydrogen"})
    assert floors[2].generators == frozenset({"lithium"})
    assert floors[3] == Floor()


def test_parse_pads_missing_floors():
    floors = parse_floors("The first floor contains a cobalt generator and a cobalt-compatible microchip.")
    assert len(floors) == day11.FLOORS
    assert floors[0] == Floor(frozenset({"cobalt"}), frozenset({"cobalt"}))
    assert all(floor == Floor() for floor in floors[1:])


def test_example_min_steps():
    assert min_steps(parse_floors(EXAMPLE)) == 11


def test_element_names_do_not_matter():
    assert min_steps(parse_floors(RENAMED)) == min_steps(parse_floors(EXAMPLE))


def test_unpaired_element_is_rejected():
    floors = (Floor(microchips=frozenset({"hydrogen"})), Floor(), Floor(), Floor())
    with pytest.raises(ValueError):
        min_steps(floors)


def test_no_items_cannot_reach_top():
    with pytest.raises(ValueError):
        min_steps((Floor(), Floor(), Floor(), Floor()))


def test_floor_safety():
    assert Floor(microchips=frozenset({"b"})).is_safe
    assert not Floor(generators=frozenset({"a"}), microchips=frozenset({"b"})).is_safe
    assert Floor(generators=frozenset({"a", "b"}), microchips=frozenset({"b"})).is_safe


def test_with_pair_adds_both_items():
    floor = Floor().with_pair("elerium")
    assert floor.generators == frozenset({"elerium"})
    assert floor.microchips == frozenset({"elerium"})


def test_solve_parts_are_consistent():
    part1, part2 = solve(SINGLE_PAIR)
    assert part1 == min_steps(parse_floors(SINGLE_PAIR))
    assert part2 > part1