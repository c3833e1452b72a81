"""Compact a disk map by moving whole files left and compute its checksum."""

import argparse
from collections.abc import Sequence
from pathlib import Path

FREE = -1
_DIGITS = frozenset("0123456789")


def build_disk(text: str) -> list[int]:
    """Expand a dense disk map into block ids, ``FREE`` marking empty blocks.

    Characters that are not digits count as zero-length entries.
    """
    disk: list[int] = []
    file_id = 0
    for position, char in enumerate(text):
        size = int(char) if char in _DIGITS else 0
        if position % 2 == 0:
            disk.extend([file_id] * size)
            file_id += 1
        else:
            disk.extend([FREE] * size)
    return disk


def _last_file_id(disk: Sequence[int]) -> int:
    return next((block for block in reversed(disk) if block != FREE), FREE)


def _free_run(disk: Sequence[int], length: int) -> int | None:
    run_start = None
    for index, block in enumerate(disk):
        if block != FREE:
            run_start = None
            continue
        if run_start is None:
            run_start = index
        if index - run_start + 1 == length:
            return run_start
    return None


def defrag_disk(disk: Sequence[int]) -> list[int]:
    """Move each file, highest id first, into the leftmost free span that fits."""
    blocks = list(disk)
    for file_id in range(_last_file_id(blocks), -1, -1):
        if file_id not in blocks:
            continue
        start = blocks.index(file_id)
        end = len(blocks) - blocks[::-1].index(file_id)
        length = end - start
        free = _free_run(blocks, length)
        if free is not None and free < start:
            blocks[free : free + length], blocks[start:end] = (
                blocks[start:end],
                blocks[free : free + length],
            )
    return blocks


def checksum(disk: Sequence[int]) -> int:
    """Sum position times file id over all occupied blocks."""
    return sum(position * block for position, block in enumerate(disk) if block >= 0)


def render_disk(disk: Sequence[int]) -> str:
    """Render the disk with '.' for free blocks and the file id otherwise."""
    return "".join("." if block == FREE else str(block) for block in disk)


def solve(text: str) -> int:
    """Return the checksum of the compacted disk described by ``text``."""
    return checksum(defrag_disk(build_disk(text)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compact a disk map and print its checksum.")
    parser.add_argument("path", nargs="?", default="puzzle/challenge_input.txt")
    args = parser.parse_args(argv)
    print(solve(Path(args.path).read_text()))
    return 0