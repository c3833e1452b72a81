"""Push boxes around a warehouse and score where they end up."""

import argparse
from collections.abc import Iterable, Mapping
from pathlib import Path

Position = tuple[int, int]
Move = tuple[int, int]

WALL = "#"
BOX = "O"
ROBOT = "@"

_MOVES: dict[str, Move] = {
    "<": (0, -1),
    "v": (1, 0),
    ">": (0, 1),
    "^": (-1, 0),
}


def _add(position: Position, move: Move) -> Position:
    return position[0] + move[0], position[1] + move[1]


def parse_warehouse(text: str) -> tuple[Position, dict[Position, str], list[Move]]:
    """Return the robot's (row, col), the walls and boxes, and the list of moves.

    The map ends at the first blank line; every line after it holds moves.
    Characters in the move lines other than ``<v>^`` are ignored.
    """
    grid: dict[Position, str] = {}
    movements: list[Move] = []
    location: Position | None = None
    reading_moves = False
    row = 0
    for line in text.splitlines():
        if line == "":
            reading_moves = True
        if reading_moves:
            movements.extend(_MOVES[char] for char in line if char in _MOVES)
            continue
        for col, char in enumerate(line):
            if char == ROBOT:
                location = (row, col)
            elif char in (WALL, BOX):
                grid[(row, col)] = char
        row += 1
    if location is None:
        raise ValueError("no robot in the warehouse")
    return location, grid, movements


def run_simulation(
    location: Position, grid: Mapping[Position, str], movements: Iterable[Move]
) -> int:
    """Apply every move, pushing lines of boxes unless a wall stops them.

    Returns the GPS score of the boxes afterwards; ``grid`` is not changed.
    """
    cells = dict(grid)
    for move in movements:
        ahead = _add(location, move)
        while cells.get(ahead) == BOX:
            ahead = _add(ahead, move)
        if cells.get(ahead) == WALL:
            continue
        location = _add(location, move)
        if cells.get(location) == BOX:
            del cells[location]
            cells[ahead] = BOX
    return gps_score(cells)


def gps_score(grid: Mapping[Position, str]) -> int:
    """Sum 100 times the row plus the column of every box."""
    return sum(100 * row + col for (row, col), cell in grid.items() if cell == BOX)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate the warehouse robot.")
    parser.add_argument("path", nargs="?", default="part1/prod_input.txt")
    args = parser.parse_args(argv)
    location, grid, movements = parse_warehouse(Path(args.path).read_text())
    print(run_simulation(location, grid, movements))
    return 0