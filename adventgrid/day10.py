"""Count hiking trails climbing from height 0 to height 9 on a topographic map."""

import argparse
from pathlib import Path

Grid = list[list[int]]

DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_DIGITS = frozenset("0123456789")
_PEAK = 9


def text_to_grid(text: str) -> tuple[Grid, list[tuple[int, int]]]:
    """Return the height grid and the (x, y) of every height-0 trailhead.

    Characters that are not digits are read as height 0.
    """
    grid: Grid = []
    trailheads: list[tuple[int, int]] = []
    for y, row in enumerate(text.splitlines()):
        heights = [int(char) if char in _DIGITS else 0 for char in row]
        trailheads.extend((x, y) for x, height in enumerate(heights) if height == 0)
        grid.append(heights)
    return grid, trailheads


def _count_trails(grid: Grid, x: int, y: int, height: int) -> int:
    if height == _PEAK:
        return 1
    total = 0
    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]) and grid[ny][nx] == height + 1:
            total += _count_trails(grid, nx, ny, height + 1)
    return total


def trail_score(text: str) -> int:
    """Sum, over all trailheads, the number of distinct trails reaching a 9."""
    grid, trailheads = text_to_grid(text)
    return sum(_count_trails(grid, x, y, 0) for x, y in trailheads)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score the hiking trails on a map.")
    parser.add_argument("path", nargs="?", default="puzzle/challenge_input.txt")
    args = parser.parse_args(argv)
    print(trail_score(Path(args.path).read_text()))
    return 0