"""Check and repair page orderings against "before|after" rules."""

import argparse
from collections.abc import Sequence
from pathlib import Path

Rules = dict[int, list[int]]


def parse_input(text: str) -> tuple[Rules, list[list[int]]]:
    """Split the text at its first blank line into ordering rules and page lists."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        return {}, []
    rules: Rules = {}
    for line in lines[:blank]:
        before, after, *_ = (int(part) for part in line.split("|"))
        rules.setdefault(before, []).append(after)
    pages = [[int(part) for part in line.split(",")] for line in lines[blank + 1 :]]
    return rules, pages


def is_valid(rules: Rules, page: Sequence[int]) -> bool:
    """Return whether no page appears after a page that must follow it."""
    for position, number in enumerate(page):
        for later in rules.get(number, ()):
            if later in page and page.index(later) < position:
                return False
    return True


def _bubble_pass(rules: Rules, page: list[int]) -> list[int]:
    page = page[::-1]
    for i in range(len(page) - 1):
        for rule in rules.get(page[i], ()):
            if rule not in page:
                continue
            incorrect = page.index(rule)
            if incorrect > i:
                page.insert(i, page.pop(incorrect))
    return page[::-1]


def fix_order(rules: Rules, page: Sequence[int]) -> list[int]:
    """Return the page list reordered until it satisfies the rules."""
    fixed = list(page)
    while not is_valid(rules, fixed):
        fixed = _bubble_pass(rules, fixed)
    return fixed


def middle_page_sums(text: str) -> tuple[int, int]:
    """Sum the middle pages of valid lists, and of invalid lists once fixed."""
    rules, pages = parse_input(text)
    ordered = 0
    repaired = 0
    for page in pages:
        middle = (len(page) - 1) // 2
        if is_valid(rules, page):
            ordered += page[middle]
        else:
            repaired += fix_order(rules, page)[middle]
    return ordered, repaired


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate and repair page orderings.")
    parser.add_argument("path", nargs="?", default="prod_input.txt")
    args = parser.parse_args(argv)
    part1, part2 = middle_page_sums(Path(args.path).read_text())
    print(f"Part 1: {part1}")
    print(f"Part 2: {part2}")
    return 0