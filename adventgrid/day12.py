"""Price the fencing of garden plots: area times perimeter for every region."""

import argparse
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass
class Square:
    """One garden plot: its plant, the region it belongs to and its fence count."""

    value: str
    region: int = 0
    perims: int = 0


def parse_garden(text: str) -> list[list[Square]]:
    """Return the garden as rows of unassigned squares.

    Every row takes the width of the first one; a shorter row is an error.
    """
    lines = text.splitlines()
    if not lines:
        return []
    width = len(lines[0])
    for number, line in enumerate(lines):
        if len(line) < width:
            raise ValueError(f"row {number} is shorter than the first row")
    return [[Square(char) for char in line[:width]] for line in lines]


def _fill_region(grid: list[list[Square]], row: int, col: int, region: int) -> None:
    height, width = len(grid), len(grid[0])
    grid[row][col].region = region
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        square = grid[r][c]
        for d_row, d_col in _DIRECTIONS:
            n_row, n_col = r + d_row, c + d_col
            if not (0 <= n_row < height and 0 <= n_col < width):
                square.perims += 1
                continue
            neighbour = grid[n_row][n_col]
            if neighbour.value != square.value:
                square.perims += 1
            elif neighbour.region == 0:
                neighbour.region = region
                pending.append((n_row, n_col))


def make_fields(grid: list[list[Square]]) -> tuple[dict[int, int], dict[int, int]]:
    """Assign a region id to every square and count fences.

    Region ids start at 1 in reading order. Returns the perimeter and the area
    of every region, keyed by region id. The squares are updated in place.
    """
    region = 0
    for row, squares in enumerate(grid):
        for col, square in enumerate(squares):
            if square.region == 0:
                region += 1
                _fill_region(grid, row, col, region)
    areas: Counter[int] = Counter()
    perimeters: Counter[int] = Counter()
    for squares in grid:
        for square in squares:
            areas[square.region] += 1
            perimeters[square.region] += square.perims
    return dict(perimeters), dict(areas)


def fencing_price(text: str) -> int:
    """Return the sum over all regions of area times perimeter."""
    perimeters, areas = make_fields(parse_garden(text))
    return sum(perimeters[region] * area for region, area in areas.items())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Price the fencing of garden regions.")
    parser.add_argument(
        "paths", nargs="*", default=["part1/test_input.txt", "part1/prod_input.txt"]
    )
    args = parser.parse_args(argv)
    for path in args.paths:
        print(fencing_price(Path(path).read_text()))
    return 0