"""Find shortest routes across a memory grid as bytes fall onto it."""

import argparse
from collections import deque
from collections.abc import Callable, Sequence
from pathlib import Path

Position = tuple[int, int]

START: Position = (0, 0)
FINISH: Position = (70, 70)
DIRECTIONS: tuple[Position, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def parse_bytes(text: str) -> tuple[Position, list[Position], Position]:
    """Return the start, the falling byte positions in order, and the finish."""
    walls = []
    for line in text.splitlines():
        parts = line.split(",")
        if len(parts) < 2:
            raise ValueError(f"expected 'x,y' in line {line!r}")
        walls.append((int(parts[0]), int(parts[1])))
    return START, walls, FINISH


def _fall_times(walls: Sequence[Position]) -> dict[Position, int]:
    times: dict[Position, int] = {}
    for index, wall in enumerate(walls):
        times.setdefault(wall, index)
    return times


def _search(
    start: Position,
    finish: Position,
    walls: Sequence[Position],
    fallen: Callable[[int], int],
) -> int:
    times = _fall_times(walls)
    queue = deque([(start, 0)])
    visited: set[Position] = set()
    while queue:
        location, score = queue.popleft()
        if location == finish:
            return score
        if location in visited:
            continue
        limit = fallen(score)
        for dx, dy in DIRECTIONS:
            x, y = location[0] + dx, location[1] + dy
            if not (0 <= x <= finish[0] and 0 <= y <= finish[1]):
                continue
            if times.get((x, y), limit) < limit:
                continue
            queue.append(((x, y), score + 1))
            visited.add(location)
    raise ValueError("no route to the finish")


def shortest_route(
    start: Position, finish: Position, walls: Sequence[Position], count: int
) -> int:
    """Return the fewest steps to the finish once the first ``count`` bytes have fallen."""
    if not 0 <= count <= len(walls):
        raise ValueError(f"count must be between 0 and {len(walls)}")
    return _search(start, finish, walls, lambda _: count)


def interesting_shortest_route(
    start: Position, finish: Position, walls: Sequence[Position]
) -> int:
    """Return the fewest steps when one byte falls per step taken.

    A cell is blocked for a step taken from a path of length n when it is
    among the first n bytes.
    """
    return _search(start, finish, walls, lambda score: score)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Route across the corrupted memory grid.")
    parser.add_argument("path", nargs="?", default="part1/prod_input.txt")
    parser.add_argument("--count", type=int, default=1024)
    args = parser.parse_args(argv)
    start, walls, finish = parse_bytes(Path(args.path).read_text())
    print(shortest_route(start, finish, walls, args.count))
    print(interesting_shortest_route(start, finish, walls))
    return 0