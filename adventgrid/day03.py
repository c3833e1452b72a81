"""Sum the enabled multiplication instructions found in corrupted memory."""

import argparse
import re
from collections.abc import Iterator
from pathlib import Path

_INSTRUCTION = re.compile(r"do\(\)|don't\(\)|mul\(([0-9]+),([0-9]+)\)")


def enabled_products(text: str) -> Iterator[tuple[int, int]]:
    """Yield the operands of every ``mul`` that is enabled when it is reached.

    ``do()`` enables and ``don't()`` disables the instructions that follow;
    everything starts enabled.
    """
    enabled = True
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            yield int(match.group(1)), int(match.group(2))


def total_of_products(text: str) -> int:
    """Return the sum of the products of all enabled ``mul`` instructions."""
    return sum(left * right for left, right in enabled_products(text))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum enabled mul() instructions.")
    parser.add_argument("path", nargs="?", default="prod.txt")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    print(text)
    print(total_of_products(text))
    return 0