"""An assembunny interpreter with cpy, inc, dec and jnz."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple, Union

REGISTERS = "abcd"
_REGISTER_INDEX = {name: i for i, name in enumerate(REGISTERS)}

Operand = Union[int, str]


class Opcode(Enum):
    CPY = "cpy"
    INC = "inc"
    DEC = "dec"
    JNZ = "jnz"


_ARITY = {Opcode.CPY: 2, Opcode.INC: 1, Opcode.DEC: 1, Opcode.JNZ: 2}


@dataclass(frozen=True)
class Instruction:
    opcode: Opcode
    operands: Tuple[Operand, ...]


def _parse_operand(token: str) -> Operand:
    if len(token) == 1 and token.isascii() and token.isalpha():
        if token not in _REGISTER_INDEX:
            raise ValueError(f"unknown register {token!r}")
        return token
    return int(token)


def parse_program(text: str) -> List[Instruction]:
    """Parse one instruction per non-empty line."""
    program = []
    for line in text.splitlines():
        if not line:
            continue
        parts = line.split()
        try:
            opcode = Opcode(parts[0])
        except (ValueError, IndexError):
            raise ValueError(f"unknown instruction: {line!r}") from None
        arity = _ARITY[opcode]
        if len(parts) < arity + 1:
            raise ValueError(f"missing operand in {line!r}")
        operands = tuple(_parse_operand(token) for token in parts[1:arity + 1])
        program.append(Instruction(opcode, operands))
    return program


def run(program: Sequence[Instruction], registers: Sequence[int] = (0, 0, 0, 0)) -> List[int]:
    """Run the program from the given registers and return the final registers."""
    regs = list(registers)
    if len(regs) != len(REGISTERS):
        raise ValueError(f"expected {len(REGISTERS)} registers, got {len(regs)}")

    def value(operand: Operand) -> int:
        return regs[_REGISTER_INDEX[operand]] if isinstance(operand, str) else operand

    def target(operand: Operand) -> int:
        if not isinstance(operand, str):
            raise ValueError("destination must be a register")
        return _REGISTER_INDEX[operand]

    pc = 0
    while 0 <= pc < len(program):
        instruction = program[pc]
        match instruction.opcode, instruction.operands:
            case Opcode.CPY, (src, dst):
                regs[target(dst)] = value(src)
            case Opcode.INC, (dst,):
                regs[target(dst)] += 1
            case Opcode.DEC, (dst,):
                regs[target(dst)] -= 1
            case Opcode.JNZ, (cond, offset):
                if value(cond) != 0:
                    pc += value(offset)
                    continue
        pc += 1
    return regs


def solve(text: str) -> Tuple[int, int]:
    """Return register a after running with c = 0 and with c = 1."""
    program = parse_program(text)
    return run(program, (0, 0, 0, 0))[0], run(program, (0, 0, 1, 0))[0]