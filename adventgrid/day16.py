"""Find the cheapest way through a maze where turning costs far more than stepping."""

import argparse
import heapq
from collections.abc import Collection
from itertools import count
from pathlib import Path

Position = tuple[int, int]

# Row/column offsets; the reindeer starts facing the first one (east).
DIRECTIONS: tuple[Position, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
STEP_COST = 1
TURN_STEP_COST = 1001


def parse_maze(text: str) -> tuple[Position, set[Position], Position]:
    """Return the start, the wall cells and the finish as (row, col)."""
    walls: set[Position] = set()
    start: Position = (-1, -1)
    finish: Position = (-1, -1)
    for row, line in enumerate(text.splitlines()):
        for col, char in enumerate(line):
            if char == "#":
                walls.add((row, col))
            elif char == "S":
                start = (row, col)
            elif char == "E":
                finish = (row, col)
    return start, walls, finish


def solve_maze(start: Position, walls: Collection[Position], finish: Position) -> int:
    """Return the lowest score from ``start`` (facing east) to ``finish``.

    Stepping forward costs 1; turning a quarter left or right and stepping
    costs 1001. Raises ValueError when the finish cannot be reached.
    """
    tie = count()
    queue = [(0, next(tie), start, 0)]
    best: dict[tuple[Position, int], int] = {}
    while queue:
        score, _, location, direction = heapq.heappop(queue)
        if location == finish:
            return score
        state = (location, direction)
        known = best.get(state)
        if known is not None and known <= score:
            continue
        best[state] = score
        for turn, cost in ((0, STEP_COST), (-1, TURN_STEP_COST), (1, TURN_STEP_COST)):
            heading = (direction + turn) % len(DIRECTIONS)
            d_row, d_col = DIRECTIONS[heading]
            ahead = (location[0] + d_row, location[1] + d_col)
            if ahead not in walls:
                heapq.heappush(queue, (score + cost, next(tie), ahead, heading))
    raise ValueError("the finish cannot be reached")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score the cheapest path through a maze.")
    parser.add_argument("path", nargs="?", default="part1/prod_input.txt")
    args = parser.parse_args(argv)
    start, walls, finish = parse_maze(Path(args.path).read_text())
    print(solve_maze(start, walls, finish))
    return 0