"""Count the stones produced by repeatedly blinking at a row of numbered stones."""

import argparse
from collections import Counter
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path


def parse_stones(text: str) -> list[int]:
    """Parse whitespace-separated stone numbers."""
    return [int(part) for part in text.split()]


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def _check_iterations(iterations: int) -> None:
    if iterations < 0:
        raise ValueError("iterations must not be negative")


def count_stones_linked(stones: Iterable[int], iterations: int) -> int:
    """Count stones by rewriting the whole row on every blink."""
    _check_iterations(iterations)
    row = list(stones)
    for _ in range(iterations):
        row = [new for stone in row for new in _blink(stone)]
    return len(row)


def count_stones_tally(stones: Iterable[int], iterations: int) -> int:
    """Count stones by tracking how many stones carry each number."""
    _check_iterations(iterations)
    tally = Counter(stones)
    for _ in range(iterations):
        following: Counter[int] = Counter()
        for stone, amount in tally.items():
            for new in _blink(stone):
                following[new] += amount
        tally = following
    return sum(tally.values())


@lru_cache(maxsize=None)
def _descendants(iterations: int, stone: int) -> int:
    if iterations == 0:
        return 1
    return sum(_descendants(iterations - 1, new) for new in _blink(stone))


def count_stones_memo(stones: Iterable[int], iterations: int) -> int:
    """Count stones by memoised recursion on (blinks left, stone)."""
    _check_iterations(iterations)
    return sum(_descendants(iterations, stone) for stone in stones)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count stones after blinking.")
    parser.add_argument("path", nargs="?", default="part2/prod_input.txt")
    parser.add_argument("--blinks", type=int, default=75)
    args = parser.parse_args(argv)
    stones = parse_stones(Path(args.path).read_text())
    print(count_stones_memo(stones, args.blinks))
    return 0