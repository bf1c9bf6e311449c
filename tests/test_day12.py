import pytest

from advent2016.day12 import Instruction, Opcode, parse_program, run, solve

EXAMPLE = "cpy 41 a\ninc a\ninc a\ndec a\njnz a 2\ndec a\n"


def test_parse_instruction():
    assert parse_program("cpy 41 a") == [Instruction(Opcode.CPY, (41, "a"))]


def test_worked_example():
    assert run(parse_program(EXAMPLE))[0] == 42


def test_copy_sets_register():
    assert run(parse_program("cpy 41 b"))[1] == 41


def test_backward_jump_loops():
    registers = run(parse_program("cpy 3 b\ninc a\ndec b\njnz b -2"))
    assert registers[0] == 3
    assert registers[1] == 0


def test_jump_before_start_halts():
    registers = run(parse_program("jnz 1 -5\ninc a"))
    assert registers == [0, 0, 0, 0]


def test_solve_uses_c_register():
    assert solve("jnz c 2\ninc a\ninc a\n") == (2, 1)


def test_run_does_not_mutate_input():
    start = [0, 0, 0, 0]
    run(parse_program("inc a"), start)
    assert start == [0, 0, 0, 0]


def test_unknown_opcode_raises():
    with pytest.raises(ValueError):
        parse_program("mul a b")


def test_missing_operand_raises():
    with pytest.raises(ValueError):
        parse_program("cpy 1")


def test_copy_to_integer_raises():
    with pytest.raises(ValueError):
        run(parse_program("cpy 1 2"))


def test_wrong_register_count_raises():
    with pytest.raises(ValueError):
        run(parse_program("inc a"), [0, 0])