"""An assembunny interpreter with self-modifying tgl instructions."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, MutableSequence, Optional, Sequence, Tuple, Union

REGISTERS = "abcd"
_REGISTER_INDEX = {name: i for i, name in enumerate(REGISTERS)}

Operand = Union[int, str]


class Opcode(Enum):
    CPY = "cpy"
    INC = "inc"
    DEC = "dec"
    JNZ = "jnz"
    TGL = "tgl"


_ARITY = {Opcode.CPY: 2, Opcode.INC: 1, Opcode.DEC: 1, Opcode.JNZ: 2, Opcode.TGL: 1}
_TOGGLED = {
    Opcode.CPY: Opcode.JNZ,
    Opcode.JNZ: Opcode.CPY,
    Opcode.INC: Opcode.DEC,
    Opcode.DEC: Opcode.INC,
    Opcode.TGL: Opcode.INC,
}


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


def _add_loop(window: Sequence[Instruction]) -> Optional[Tuple[str, str]]:
    """Recognise inc/dec/jnz -2 in either order; return (target, counter)."""
    if len(window) < 3:
        return None
    first, second, jump = window[:3]
    if jump.opcode is not Opcode.JNZ or jump.operands[1] != -2:
        return None
    kinds = {first.opcode: first.operands[0], second.opcode: second.operands[0]}
    if set(kinds) != {Opcode.INC, Opcode.DEC}:
        return None
    target, counter = kinds[Opcode.INC], kinds[Opcode.DEC]
    if not isinstance(target, str) or not isinstance(counter, str):
        return None
    if counter != jump.operands[0] or target == counter:
        return None
    return target, counter


def _shortcut(code: Sequence[Instruction], pc: int, regs: List[int]) -> int:
    """Execute a recognised addition or multiplication loop at once.

    Returns the number of instructions skipped, or 0 if nothing was recognised.
    """
    window = code[pc:pc + 6]
    if len(window) == 6 and window[0].opcode is Opcode.CPY:
        src, inner = window[0].operands
        loop = _add_loop(window[1:4])
        dec_outer, jump_outer = window[4], window[5]
        if (
            loop is not None
            and loop[1] == inner
            and dec_outer.opcode is Opcode.DEC
            and jump_outer.opcode is Opcode.JNZ
            and jump_outer.operands == (dec_outer.operands[0], -5)
            and isinstance(dec_outer.operands[0], str)
        ):
            target, outer = loop[0], dec_outer.operands[0]
            if len({target, inner, outer}) == 3 and src not in (target, inner, outer):
                times = regs[_REGISTER_INDEX[src]] if isinstance(src, str) else src
                rounds = regs[_REGISTER_INDEX[outer]]
                if times > 0 and rounds > 0:
                    regs[_REGISTER_INDEX[target]] += times * rounds
                    regs[_REGISTER_INDEX[inner]] = 0
                    regs[_REGISTER_INDEX[outer]] = 0
                    return 6

    loop = _add_loop(code[pc:pc + 3])
    if loop is not None:
        target, counter = loop
        n = regs[_REGISTER_INDEX[counter]]
        if n > 0:
            regs[_REGISTER_INDEX[target]] += n
            regs[_REGISTER_INDEX[counter]] = 0
            return 3
    return 0


def run(program: Sequence[Instruction], registers: Sequence[int] = (0, 0, 0, 0)) -> List[int]:
    """Run a copy of the program from the given registers and return the final registers."""
    code: MutableSequence[Instruction] = list(program)
    regs = list(registers)
    if len(regs) != len(REGISTERS):
        raise ValueError(f"expected {len(REGISTERS)} registers, got {len(regs)}")

    def value(operand: Operand) -> int:
        return regs[_REGISTER_INDEX[operand]] if isinstance(operand, str) else operand

    pc = 0
    while 0 <= pc < len(code):
        skipped = _shortcut(code, pc, regs)
        if skipped:
            pc += skipped
            continue
        instruction = code[pc]
        match instruction.opcode, instruction.operands:
            case Opcode.CPY, (src, dst):
                if isinstance(dst, str):
                    regs[_REGISTER_INDEX[dst]] = value(src)
            case Opcode.INC, (dst,):
                if isinstance(dst, str):
                    regs[_REGISTER_INDEX[dst]] += 1
            case Opcode.DEC, (dst,):
                if isinstance(dst, str):
                    regs[_REGISTER_INDEX[dst]] -= 1
            case Opcode.JNZ, (cond, offset):
                if value(cond) != 0:
                    pc += value(offset)
                    continue
            case Opcode.TGL, (offset,):
                target = pc + value(offset)
                if 0 <= target < len(code):
                    toggled = code[target]
                    code[target] = replace(toggled, opcode=_TOGGLED[toggled.opcode])
        pc += 1
    return regs


def solve(text: str) -> Tuple[int, int]:
    """Return register a after running with a = 7 and with a = 12."""
    program = parse_program(text)
    return run(program, (7, 0, 0, 0))[0], run(program, (12, 0, 0, 0))[0]