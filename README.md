# advent2024

Solutions to all twenty-five puzzles of the 2024 Advent of Code calendar,
written in plain Python with no third-party dependencies. Python 3.10 or
later is required.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Every day has its own command, `advent2024-day01` through `advent2024-day25`.
Each takes one optional argument, the path to that day's puzzle input. Without
it, the command reads `inputs/day1.txt`, `inputs/day2.txt`, ... `inputs/day25.txt`
relative to the current directory.

```
advent2024-day01
advent2024-day17 path/to/my-input.txt
```

Each command prints the answer to part one and then part two. A few print
more:

- `advent2024-day14` prints the part-one safety factor, then the tick at which
  the robots form the picture followed by a drawing of the room at that tick.
- `advent2024-day17` prints the program's output, then every register A value
  that makes the program print itself, one per line, smallest first.
- `advent2024-day21` first prints, for each code, its sequence length with two
  intermediate robots and its numeric part, then the two totals.
- `advent2024-day25` prints only part one.

## Library use

Each day lives in its own module, `advent2024.day01` to `advent2024.day25`.
The modules expose `part_one(text)` and `part_two(text)` (day 25 has only
`part_one`), which take the full puzzle input as a string and return the
answer. Most answers are integers; these are not:

- `day17.part_one` returns the output as a comma-separated string, and
  `day17.part_two` returns a sorted list of every matching register A value.
- `day18.part_two` returns the blocking byte's position as `"x,y"`.
- `day23.part_two` and `day24.part_two` return comma-separated names.

```python
from pathlib import Path

from advent2024 import day01, day11

text = Path("inputs/day1.txt").read_text()
print(day01.part_one(text), day01.part_two(text))

print(day11.count_stones(125, 25))
```

A few puzzles depend on sizes that differ between the worked examples and
the real inputs; for those the extra parameters can be passed explicitly:

- `day14.part_one(text, width, height, ticks)`: the robots' room size and
  the number of seconds to simulate (defaults 101, 103 and 100).
- `day18.part_one(text, size, count)` and `day18.part_two(text, size)`: the
  memory grid size and how many bytes have fallen (defaults 71 and 1024).
- `day20.part_one(text, saving)` and
  `day20.part_two(text, saving, cheat_distance)`: the minimum saving a cheat
  must achieve and how far a cheat may go (defaults 100 and 20).
- `day21.complexities(text, robots)` and `day21.sequence_length(code, robots)`:
  the number of directional keypads between you and the door.

Other helpers: `day01.parse_lists`, `day02.is_safe`,
`day02.is_safe_with_dampener`, `day05.parse`, `day05.is_ordered`,
`day07.can_solve`, `day13.Machine` and `day13.parse_machines`, `day14.Robot`
and `day14.parse_robots`, `day17.parse` and `day17.run_program`,
`day19.Trie`, `day22.advance` and `day22.prices`, `day23.parse_edges`,
`day24.Gate` and `day24.Wire`, and `day25.parse_schematics`.

Malformed input raises `ValueError` where the puzzle's format is checked.

## What it does not do

The package holds no puzzle inputs and does not download them; supply your
own input files. Day 14's part two assumes the full-size room and looks for
the picture by counting robots on two fixed rows, so it only works on real
puzzle inputs. Day 24's part two assumes the circuit is a ripple-carry adder
with its outputs swapped in pairs.