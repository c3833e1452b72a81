"""Find operator sequences that make equations reach their targets."""

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce
from itertools import product
from pathlib import Path

OPERATORS = ("*", "+", "||")


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "*":
        return left * right
    if operator == "+":
        return left + right
    if operator == "||":
        return int(f"{left}{right}")
    raise ValueError(f"operator not programmed: {operator!r}")


@dataclass(frozen=True)
class Equation:
    """A target value and the numbers to combine, evaluated left to right."""

    target: int
    numbers: tuple[int, ...]
    valid_operators: tuple[str, ...] = OPERATORS

    def _evaluate(self, operators: Sequence[str]) -> int:
        pairs = zip(operators, self.numbers[1:])
        return reduce(lambda total, pair: _apply(pair[0], total, pair[1]), pairs, self.numbers[0])

    def find_operators(self) -> list[tuple[str, ...]]:
        """Return every operator sequence that evaluates to the target."""
        if not self.numbers:
            raise ValueError("an equation needs at least one number")
        return [
            operators
            for operators in product(self.valid_operators, repeat=len(self.numbers) - 1)
            if self._evaluate(operators) == self.target
        ]


def parse_equations(text: str) -> list[Equation]:
    """Parse lines of the form ``target: n1 n2 ...``."""
    equations = []
    for line in text.splitlines():
        target, separator, operands = line.partition(": ")
        if not separator:
            raise ValueError(f"missing ': ' in line {line!r}")
        equations.append(Equation(int(target), tuple(int(n) for n in operands.split(" "))))
    return equations


def calibration_total(text: str) -> int:
    """Sum the targets of all equations that some operators can satisfy."""
    return sum(eq.target for eq in parse_equations(text) if eq.find_operators())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Total the solvable calibration equations.")
    parser.add_argument("path", nargs="?", default="prod_input.txt")
    args = parser.parse_args(argv)
    print(calibration_total(Path(args.path).read_text()))
    return 0