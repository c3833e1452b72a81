# adventgrid

Solvers for a season of daily programming puzzles: instruction scanning,
word searches, page ordering, guard patrols, operator search, antenna
antinodes, disk compaction, trail finding, stone splitting, garden
fencing, claw machines, robot swarms, warehouse boxes, reindeer mazes,
a small three-bit computer and a falling-byte maze.

Each day lives in its own module (`adventgrid.day03` to `adventgrid.day18`;
there is no day 1 or day 2) and exposes plain functions that take the
puzzle text and return results. Lines may end in `\n` or `\r\n`.
The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Each command reads a puzzle input file and prints its answer. When the
path is left out, a default relative path is used.

```
adventgrid-day03 input.txt          # prints the input, then the sum of enabled mul() products
adventgrid-day04 input.txt          # XMAS count, then X-MAS count
adventgrid-day05 input.txt          # "Part 1: ..." and "Part 2: ..."
adventgrid-day06 input.txt          # squares walked, loop obstructions, and the patrol map
adventgrid-day07 input.txt
adventgrid-day08 input.txt
adventgrid-day09 input.txt
adventgrid-day10 input.txt
adventgrid-day11 input.txt --blinks 75
adventgrid-day12 first.txt second.txt   # one price per file
adventgrid-day13 --search a.txt --intersection b.txt
adventgrid-day14 input.txt --frames 1000 --width 101 --height 103
adventgrid-day15 input.txt
adventgrid-day16 input.txt
adventgrid-day18 input.txt --count 1024
```

`adventgrid-day13` prints two totals: the brute-force cost for the
`--search` file and the line-intersection cost for the `--intersection`
file. `adventgrid-day14` draws the grid for every second from 0 up to
`--frames`, then prints the safety score of the last frame.
`adventgrid-day18` prints the shortest route after `--count` bytes, then the
route when one byte falls per step.

## Using the library

```python
from adventgrid import day03, day11

text = open("input.txt").read()
print(day03.total_of_products(text))

stones = day11.parse_stones("125 17")
print(day11.count_stones_memo(stones, 25))  # 55312
```

Some days offer more than one approach to the same question. Day 11 counts
stones with `count_stones_linked`, `count_stones_tally` and
`count_stones_memo`, which give the same answer at very different speeds.
Day 13 offers `brute_force_cost` (up to 200 presses per machine) and
`intersection_cost`, which raises `ZeroDivisionError` when a machine's
button lines never cross.

Searches that cannot succeed raise: `day16.solve_maze` and the day 18
route functions raise `ValueError` when the finish is unreachable, and
`day17.run_computer` raises `RuntimeError` when no register value is found.

## What it does not do

- Day 17 has no command; call `day17.parse_program` and
  `day17.run_computer` directly. `run_computer` is a plain search over
  candidate values of register A and can take a very long time on real
  inputs.
- Day 12 prices fences by perimeter only; there is no pricing by number
  of sides.
- Day 15 handles single-width boxes only.