"""Search for the register value that makes a 3-bit program print itself."""

from collections.abc import Sequence

_SEARCH_LIMIT = 10_000_000_000
_WORD_BITS = 64


def parse_program(text: str) -> tuple[list[int], list[int]]:
    """Return the register values and the program from the puzzle text."""
    registers: list[int] = []
    program: list[int] = []
    reading_program = False
    for line in text.splitlines():
        if not reading_program:
            if line == "":
                reading_program = True
                continue
            _, separator, value = line.partition(": ")
            if not separator:
                raise ValueError(f"missing ': ' in register line {line!r}")
            registers.append(int(value))
        else:
            _, separator, values = line.partition(": ")
            if not separator:
                raise ValueError(f"missing ': ' in program line {line!r}")
            program.extend(int(value) for value in values.split(","))
    return registers, program


def _combo(operand: int, a: int, b: int, c: int) -> int:
    if operand == 7:
        raise ValueError("combo operand 7 is reserved")
    if operand <= 3:
        return operand
    return {4: a, 5: b, 6: c}.get(operand, 0)


def _divide(value: int, operand: int) -> int:
    if operand >= _WORD_BITS:
        raise ZeroDivisionError("division by a power of two beyond the word size")
    return value >> operand


def _outputs_itself(candidate: int, program: Sequence[int]) -> bool:
    a, b, c = candidate, 0, 0
    output: list[int] = []
    pointer = 1
    while pointer < len(program):
        if a < candidate or len(output) > len(program):
            break
        literal = program[pointer]
        operand = _combo(literal, a, b, c)
        opcode = program[pointer - 1]
        if opcode == 0:
            a = _divide(a, operand)
        elif opcode == 1:
            b ^= literal
        elif opcode == 2:
            b = operand % 8
        elif opcode == 3:
            if a != 0:
                pointer = literal - 1
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            output.append(operand % 8)
        elif opcode == 6:
            b = _divide(a, operand)
        elif opcode == 7:
            c = _divide(a, operand)
        pointer += 2
    return output == list(program)


def run_computer(registers: Sequence[int], program: Sequence[int]) -> int:
    """Return the smallest A for which the program outputs exactly itself.

    Every candidate starts with A set to the candidate and B and C cleared, so
    only the number of ``registers`` matters. A run stops early once A drops
    below the candidate or the output grows longer than the program.
    """
    if len(registers) != 3:
        raise ValueError("the computer has exactly three registers")
    for candidate in range(_SEARCH_LIMIT):
        if _outputs_itself(candidate, program):
            return candidate
    raise RuntimeError("couldn't find output")