"""Day 6: follow the patrolling guard."""

from __future__ import annotations

import argparse
from pathlib import Path

Point = tuple[int, int]


def _parse(text: str) -> tuple[set[Point], Point, Point]:
    walls: set[Point] = set()
    start = (0, 0)
    lines = text.splitlines()
    for y, line in enumerate(lines):
        for x, cell in enumerate(line):
            if cell == "^":
                start = (x, y)
            elif cell == "#":
                walls.add((x, y))
    return walls, start, (len(lines[0]), len(lines))


def _in_bounds(pos: Point, size: Point) -> bool:
    return 0 <= pos[0] < size[0] and 0 <= pos[1] < size[1]


def _patrol(walls: set[Point], start: Point, size: Point) -> set[Point]:
    visited: set[Point] = set()
    pos, direction = start, (0, -1)
    while _in_bounds(pos, size):
        visited.add(pos)
        ahead = (pos[0] + direction[0], pos[1] + direction[1])
        if ahead in walls:
            direction = (-direction[1], direction[0])
        else:
            pos = ahead
    return visited


def _loops(walls: set[Point], start: Point, size: Point) -> bool:
    seen: set[tuple[Point, Point]] = set()
    pos, direction = start, (0, -1)
    while _in_bounds(pos, size):
        state = (pos, direction)
        if state in seen:
            return True
        seen.add(state)
        ahead = (pos[0] + direction[0], pos[1] + direction[1])
        if ahead in walls:
            direction = (-direction[1], direction[0])
        else:
            pos = ahead
    return False


def part_one(text: str) -> int:
    """Number of distinct positions the guard visits."""
    walls, start, size = _parse(text)
    return len(_patrol(walls, start, size))


def part_two(text: str) -> int:
    """Number of single obstruction positions that trap the guard in a loop."""
    walls, start, size = _parse(text)
    candidates = _patrol(walls, start, size) - {start}
    return sum(1 for spot in candidates if _loops(walls | {spot}, start, size))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 6: Guard Gallivant")
    parser.add_argument("input", nargs="?", default="inputs/day6.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))