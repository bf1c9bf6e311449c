import pytest

from advent2016.day23 import parse_program, run, solve

EXAMPLE = """\
cpy 2 a
tgl a
tgl a
tgl a
cpy 1 a
dec a
dec a
"""

MULTIPLY = """\
cpy 4 b
cpy 5 d
cpy b c
inc a
dec c
jnz c -2
dec d
jnz d -5
"""

MULTIPLY_UNRECOGNISED = """\
cpy 4 b
cpy 5 d
cpy b c
inc a
cpy 7 3
dec c
jnz c -3
dec d
jnz d -6
"""

ADD = """\
cpy 6 b
dec b
inc a
jnz b -2
"""

ADD_UNRECOGNISED = """\
cpy 6 b
dec b
cpy 7 3
inc a
jnz b -3
"""


def test_worked_example():
    assert run(parse_program(EXAMPLE))[0] == 3


def test_solve_example():
    assert solve(EXAMPLE) == (3, 3)


def test_multiplication_loop_matches_plain_execution():
    fast = run(parse_program(MULTIPLY))
    slow = run(parse_program(MULTIPLY_UNRECOGNISED))
    assert fast == slow
    assert fast[2] == 0 and fast[3] == 0


def test_addition_loop_matches_plain_execution():
    fast = run(parse_program(ADD), (1, 0, 0, 0))
    slow = run(parse_program(ADD_UNRECOGNISED), (1, 0, 0, 0))
    assert fast == slow
    assert fast[1] == 0


def test_run_leaves_program_unchanged():
    program = parse_program(EXAMPLE)
    first = run(program)
    assert program == parse_program(EXAMPLE)
    assert run(program) == first


def test_toggle_out_of_range_is_ignored():
    assert run(parse_program("tgl 5\ninc a")) == [1, 0, 0, 0]


def test_toggled_copy_to_integer_is_skipped():
    assert run(parse_program("jnz 1 2\ncpy 5 b\ntgl -1\ninc a"), (0, 9, 0, 0))[1] == 9


def test_negative_jump_halts():
    assert run(parse_program("inc a\njnz 1 -5\ninc a")) == [1, 0, 0, 0]


def test_unknown_instruction_raises():
    with pytest.raises(ValueError):
        parse_program("mul a b")


def test_unknown_register_raises():
    with pytest.raises(ValueError):
        parse_program("inc e")