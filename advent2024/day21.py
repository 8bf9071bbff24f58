"""Day 21: shortest keypresses through a chain of keypad robots."""

from __future__ import annotations

import argparse
import math
from functools import lru_cache
from pathlib import Path

Point = tuple[int, int]

# Both keypads share a coordinate system: the activate key sits at the origin
# and the gap two columns to its left.
_ACTIVATE: Point = (0, 0)
_GAP: Point = (-2, 0)
_RIGHT: Point = (0, -1)
_LEFT: Point = (-2, -1)
_DOWN: Point = (-1, -1)
_UP: Point = (-1, 0)

_NUMERIC = {
    "A": (0, 0),
    "0": (-1, 0),
    "1": (-2, 1),
    "2": (-1, 1),
    "3": (0, 1),
    "4": (-2, 2),
    "5": (-1, 2),
    "6": (0, 2),
    "7": (-2, 3),
    "8": (-1, 3),
    "9": (0, 3),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@lru_cache(maxsize=None)
def _expand(from_pos: Point, to_pos: Point, outer_pos: Point, steps: int) -> float:
    """Fewest human presses to move a robot from from_pos to to_pos and press it.

    outer_pos is where the robot controlling this one currently points, and steps
    is the number of keypad layers above this one.
    """
    if from_pos == _GAP:
        return math.inf
    if steps == 0:
        return 1
    if from_pos == to_pos:
        return _expand(outer_pos, _ACTIVATE, _ACTIVATE, steps - 1)
    dx = to_pos[0] - from_pos[0]
    dy = to_pos[1] - from_pos[1]
    best = math.inf
    if dx:
        key = _RIGHT if dx > 0 else _LEFT
        best = min(
            best,
            _expand(outer_pos, key, _ACTIVATE, steps - 1)
            + _expand((from_pos[0] + _sign(dx), from_pos[1]), to_pos, key, steps),
        )
    if dy:
        key = _UP if dy > 0 else _DOWN
        best = min(
            best,
            _expand(outer_pos, key, _ACTIVATE, steps - 1)
            + _expand((from_pos[0], from_pos[1] + _sign(dy)), to_pos, key, steps),
        )
    return best


def sequence_length(code: str, robots: int) -> int:
    """Human presses needed to type the code through the given number of keypad robots."""
    if robots < 0:
        raise ValueError("the number of robots must not be negative")
    previous = _ACTIVATE
    total = 0
    for char in code:
        try:
            target = _NUMERIC[char]
        except KeyError:
            raise ValueError(f"unknown keypad key {char!r}") from None
        total += _expand(previous, target, _ACTIVATE, robots + 1)
        previous = target
    return int(total)


def complexities(text: str, robots: int) -> list[int]:
    """Complexity of each code: its sequence length times its numeric part."""
    return [
        sequence_length(line, robots) * int(line[:-1]) for line in text.splitlines()
    ]


def part_one(text: str) -> int:
    """Sum of complexities with two intermediate robots."""
    return sum(complexities(text, 2))


def part_two(text: str) -> int:
    """Sum of complexities with twenty-five intermediate robots."""
    return sum(complexities(text, 25))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 21: Keypad Conundrum")
    parser.add_argument("input", nargs="?", default="inputs/day21.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    for line in text.splitlines():
        print(f"{sequence_length(line, 2)}, {int(line[:-1])}")
    print(part_one(text))
    print(part_two(text))