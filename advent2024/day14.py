"""Day 14: predict the motion of security robots."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from dataclasses import dataclass
from math import prod
from pathlib import Path

WIDTH = 101
HEIGHT = 103
TICKS = 100

_TREE_ROWS = (44, 76)
_TREE_MIN_ROBOTS = 30

_PATTERN = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")


@dataclass(frozen=True)
class Robot:
    """A robot's starting position and velocity."""

    px: int
    py: int
    vx: int
    vy: int

    def position_at(self, ticks: int, width: int = WIDTH, height: int = HEIGHT) -> tuple[int, int]:
        """Position after the given number of ticks, wrapping around the area."""
        return (self.px + ticks * self.vx) % width, (self.py + ticks * self.vy) % height


def parse_robots(text: str) -> list[Robot]:
    """Parse one robot per line."""
    robots = []
    for line in text.splitlines():
        match = _PATTERN.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"unrecognised robot: {line!r}")
        robots.append(Robot(*(int(value) for value in match.groups())))
    return robots


def part_one(text: str, width: int = WIDTH, height: int = HEIGHT, ticks: int = TICKS) -> int:
    """Safety factor: the product of robot counts in the four quadrants."""
    mid_x, mid_y = width // 2, height // 2
    quadrants: Counter[tuple[bool, bool]] = Counter()
    for robot in parse_robots(text):
        x, y = robot.position_at(ticks, width, height)
        if x != mid_x and y != mid_y:
            quadrants[(x > mid_x, y > mid_y)] += 1
    return prod(
        quadrants[key] for key in ((False, False), (True, False), (False, True), (True, True))
    )


def _occupied(robots: list[Robot], ticks: int) -> set[tuple[int, int]]:
    return {robot.position_at(ticks) for robot in robots}


def _is_christmas_tree(occupied: set[tuple[int, int]]) -> bool:
    rows = Counter(y for _, y in occupied)
    return all(rows[row] > _TREE_MIN_ROBOTS for row in _TREE_ROWS)


def _render(occupied: set[tuple[int, int]]) -> str:
    return "".join(
        "".join("#" if (x, y) in occupied else " " for x in range(WIDTH)) + "\n"
        for y in range(HEIGHT)
    )


def part_two(text: str) -> int:
    """First tick at which the robots draw the Christmas tree."""
    robots = parse_robots(text)
    for ticks in range(WIDTH * HEIGHT):
        if _is_christmas_tree(_occupied(robots, ticks)):
            return ticks
    raise ValueError("the robots never form the picture")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 14: Restroom Redoubt")
    parser.add_argument("input", nargs="?", default="inputs/day14.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    ticks = part_two(text)
    print(f"{ticks}\n{_render(_occupied(parse_robots(text), ticks))}")