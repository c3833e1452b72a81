"""Find the fewest tokens that move a claw machine onto its prize."""

import argparse
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

_BUTTON_X = re.compile(r"X([+-]\d+)")
_BUTTON_Y = re.compile(r"Y([+-]\d+)")
_PRIZE_X = re.compile(r"X=(\d+)")
_PRIZE_Y = re.compile(r"Y=(\d+)")

_MAX_PRESSES = 200
_COST_A = 3
_COST_B = 1


@dataclass(frozen=True)
class Machine:
    """The moves of buttons A and B and the prize location, as (x, y)."""

    a: tuple[int, int] = (0, 0)
    b: tuple[int, int] = (0, 0)
    prize: tuple[int, int] = (0, 0)


def _number(pattern: re.Pattern[str], text: str) -> int:
    match = pattern.search(text)
    if match is None:
        raise ValueError(f"no value matching {pattern.pattern!r} in {text!r}")
    return int(match.group(1))


def parse_machines(text: str) -> list[Machine]:
    """Parse "Button A", "Button B" and "Prize" lines; each prize ends a machine."""
    machines = []
    a = b = (0, 0)
    for line in text.splitlines():
        label, _, rest = line.partition(":")
        if label == "Button A":
            a = (_number(_BUTTON_X, rest), _number(_BUTTON_Y, rest))
        elif label == "Button B":
            b = (_number(_BUTTON_X, rest), _number(_BUTTON_Y, rest))
        elif label == "Prize":
            prize = (_number(_PRIZE_X, rest), _number(_PRIZE_Y, rest))
            machines.append(Machine(a, b, prize))
            a = b = (0, 0)
    return machines


def _cheapest_by_search(machine: Machine) -> int | None:
    (ax, ay), (bx, by) = machine.a, machine.b
    best = None
    for presses in range(1, _MAX_PRESSES + 1):
        for press_a in range(presses + 1):
            press_b = presses - press_a
            if (press_a * ax + press_b * bx, press_a * ay + press_b * by) == machine.prize:
                cost = _COST_A * press_a + _COST_B * press_b
                if best is None or cost < best:
                    best = cost
    return best


def brute_force_cost(machines: Iterable[Machine]) -> int:
    """Sum the cheapest winning costs, trying up to 200 presses per machine."""
    return sum(
        cost for cost in map(_cheapest_by_search, machines) if cost is not None
    )


def _truncating_div(numerator: int, denominator: int) -> int:
    if denominator == 0:
        raise ZeroDivisionError("button moves give parallel lines")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _cost_by_intersection(machine: Machine) -> int | None:
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    a1, b1, c1 = ax, -ay, 0
    a2, b2, c2 = bx, -by, bx * px - by * py
    x = _truncating_div(b1 * c2 - b2 * c1, a1 * b2 - a2 * b1)
    if ax == 0 or bx == 0 or x % ax or (px - x) % bx:
        return None
    return _COST_A * (x // ax) + _COST_B * ((px - x) // bx)


def intersection_cost(machines: Iterable[Machine]) -> int:
    """Sum costs found from the crossing point of the two button lines.

    A machine counts only when both press counts come out whole.
    Raises ZeroDivisionError when a machine's lines never cross.
    """
    return sum(
        cost for cost in map(_cost_by_intersection, machines) if cost is not None
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cost of winning claw machine prizes.")
    parser.add_argument("--search", default="part1/prod_input.txt")
    parser.add_argument("--intersection", default="part2/test_input.txt")
    args = parser.parse_args(argv)
    print(brute_force_cost(parse_machines(Path(args.search).read_text())))
    print(intersection_cost(parse_machines(Path(args.intersection).read_text())))
    return 0