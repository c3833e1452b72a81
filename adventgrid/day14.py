"""Move robots around a wrapping grid and score how they spread over its quadrants."""

import argparse
import math
import re
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

Size = tuple[int, int]

_FIELD = re.compile(r"[=,]([-\d]+)")
_SEPARATOR = "--------------------"


@dataclass(frozen=True)
class Robot:
    """A robot's starting (x, y) and its velocity per second."""

    start: tuple[int, int]
    velocity: tuple[int, int]

    def position_after(self, seconds: int, size: Size) -> tuple[int, int]:
        """Return where the robot stands after ``seconds`` on a wrapping grid."""
        (sx, sy), (vx, vy) = self.start, self.velocity
        width, height = size
        return (sx + seconds * vx) % width, (sy + seconds * vy) % height


def parse_robots(text: str) -> list[Robot]:
    """Parse lines like ``p=0,4 v=3,-3``."""
    robots = []
    for line in text.splitlines():
        fields = _FIELD.findall(line)[:4]
        if len(fields) < 4:
            raise ValueError(f"expected position and velocity in {line!r}")
        px, py, vx, vy = (int(field) for field in fields)
        robots.append(Robot((px, py), (vx, vy)))
    return robots


def _locations(robots: Iterable[Robot], seconds: int, size: Size) -> Counter[tuple[int, int]]:
    return Counter(robot.position_after(seconds, size) for robot in robots)


def safety_score(locations: Mapping[tuple[int, int], int], size: Size) -> int:
    """Multiply the robot counts of the four quadrants, ignoring the middle lines."""
    width, height = size
    half_w, half_h = width // 2, height // 2
    quadrants = [0, 0, 0, 0]
    for (x, y), amount in locations.items():
        if not (0 <= x < width and 0 <= y < height):
            continue
        if x < half_w:
            col = 0
        elif x >= width - half_w:
            col = 1
        else:
            continue
        if y < half_h:
            row = 0
        elif y >= height - half_h:
            row = 1
        else:
            continue
        quadrants[row * 2 + col] += amount
    return math.prod(quadrants)


def render_robots(locations: Mapping[tuple[int, int], int], size: Size) -> str:
    """Draw the grid with each cell's robot count, or '.' where there is none."""
    width, height = size
    return "\n".join(
        "".join(
            str(locations[(x, y)]) if locations.get((x, y), 0) > 0 else "."
            for x in range(width)
        )
        for y in range(height)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show robots moving around the grid.")
    parser.add_argument("path", nargs="?", default="part1/test_input.txt")
    parser.add_argument("--frames", type=int, default=1000)
    parser.add_argument("--width", type=int, default=101)
    parser.add_argument("--height", type=int, default=103)
    args = parser.parse_args(argv)
    size = (args.width, args.height)
    robots = parse_robots(Path(args.path).read_text())
    locations: Counter[tuple[int, int]] = Counter()
    for seconds in range(args.frames):
        locations = _locations(robots, seconds, size)
        print(render_robots(locations, size))
        print(_SEPARATOR)
        print(f"Seconds: {seconds}")
    print(safety_score(locations, size))
    return 0