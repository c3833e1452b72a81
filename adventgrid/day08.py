"""Count the antinodes produced by same-frequency antennas on a grid."""

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Tower:
    """An antenna at an (x, y) grid location with a single-character frequency."""

    location: tuple[int, int]
    frequency: str

    def find_antinodes(self, towers: Sequence["Tower"], grid: Sequence[str]) -> list[tuple[int, int]]:
        """Return this tower's location plus every in-grid point stepping away
        from each other tower of the same frequency."""
        antinodes = []
        x, y = self.location
        for other in towers:
            if other == self or other.frequency != self.frequency:
                continue
            dx, dy = x - other.location[0], y - other.location[1]
            antinodes.append(self.location)
            width, height = len(grid[0]), len(grid)
            ax, ay = x + dx, y + dy
            while 0 <= ax < width and 0 <= ay < height:
                antinodes.append((ax, ay))
                ax, ay = ax + dx, ay + dy
        return antinodes


def parse_towers(text: str) -> tuple[list[Tower], list[str]]:
    """Return every non-'.' cell as a tower, together with the grid rows."""
    rows = text.splitlines()
    towers = [
        Tower((x, y), char)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char != "."
    ]
    return towers, rows


def count_antinodes(text: str) -> int:
    """Return the number of distinct antinode locations in the grid."""
    towers, grid = parse_towers(text)
    return len({point for tower in towers for point in tower.find_antinodes(towers, grid)})


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count antenna antinodes.")
    parser.add_argument("path", nargs="?", default="prod_input.txt")
    args = parser.parse_args(argv)
    print(count_antinodes(Path(args.path).read_text()))
    return 0