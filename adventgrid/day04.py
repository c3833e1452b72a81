"""Word search: straight-line words and crossed ``MAS`` patterns."""

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DIRECTIONS = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)

_X_PATTERNS = ("MMSS", "SMMS", "SSMM", "MSSM")


@dataclass(frozen=True)
class WordMatch:
    """Row/column of the first and last letter of a found word."""

    start: tuple[int, int]
    finish: tuple[int, int]


def _in_bounds(rows: Sequence[str], row: int, col: int) -> bool:
    return 0 <= row < len(rows) and 0 <= col < len(rows[row])


def _spells(rows: Sequence[str], word: str, row: int, col: int, d_row: int, d_col: int) -> bool:
    for step, letter in enumerate(word):
        r, c = row + d_row * step, col + d_col * step
        if not _in_bounds(rows, r, c) or rows[r][c] != letter:
            return False
    return True


def find_words(rows: Sequence[str], words: Iterable[str]) -> list[WordMatch]:
    """Find every occurrence of each word in any of the eight directions."""
    matches = []
    for word in words:
        if not word:
            raise ValueError("search words must not be empty")
        last = len(word) - 1
        for row, line in enumerate(rows):
            for col in range(len(line)):
                for d_row, d_col in DIRECTIONS:
                    if _spells(rows, word, row, col, d_row, d_col):
                        matches.append(
                            WordMatch((row, col), (row + d_row * last, col + d_col * last))
                        )
    return matches


def find_x_mas(rows: Sequence[str]) -> list[tuple[int, int]]:
    """Return the centres of every pair of ``MAS`` crossing on an ``A``."""
    centres = []
    for row in range(1, len(rows) - 1):
        for col in range(1, len(rows[row]) - 1):
            if rows[row][col] != "A":
                continue
            diagonals = (
                rows[row + 1][col + 1]
                + rows[row + 1][col - 1]
                + rows[row - 1][col - 1]
                + rows[row - 1][col + 1]
            )
            if diagonals in _X_PATTERNS:
                centres.append((row, col))
    return centres


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count XMAS and X-MAS in a word search.")
    parser.add_argument("path", nargs="?", default="prod.txt")
    args = parser.parse_args(argv)
    rows = Path(args.path).read_text().splitlines()
    print(len(find_words(rows, ["XMAS"])))
    print(len(find_x_mas(rows)))
    return 0