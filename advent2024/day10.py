"""Day 10: score and rate hiking trails on a topographic map."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Iterator

Point = tuple[int, int]

_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _parse(text: str) -> list[list[int]]:
    try:
        return [[int(char) for char in line] for line in text.splitlines()]
    except ValueError as exc:
        raise ValueError(f"map holds a non-digit cell: {exc}") from None


def _neighbours(x: int, y: int, width: int, height: int) -> Iterator[Point]:
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            yield nx, ny


def _trail_ends(grid: list[list[int]], start: Point) -> Counter[Point]:
    """Map each reachable summit to the number of distinct trails leading to it."""
    width, height = len(grid[0]), len(grid)
    frontier: Counter[Point] = Counter({start: 1})
    for level in range(grid[start[1]][start[0]] + 1, 10):
        following: Counter[Point] = Counter()
        for (x, y), routes in frontier.items():
            for nx, ny in _neighbours(x, y, width, height):
                if grid[ny][nx] == level:
                    following[(nx, ny)] += routes
        frontier = following
    return frontier


def _trailheads(grid: list[list[int]]) -> Iterator[Point]:
    for y, row in enumerate(grid):
        for x, height in enumerate(row):
            if height == 0:
                yield x, y


def part_one(text: str) -> int:
    """Sum of trailhead scores: the number of summits each trailhead reaches."""
    grid = _parse(text)
    return sum(len(_trail_ends(grid, head)) for head in _trailheads(grid))


def part_two(text: str) -> int:
    """Sum of trailhead ratings: the number of distinct trails from each trailhead."""
    grid = _parse(text)
    return sum(sum(_trail_ends(grid, head).values()) for head in _trailheads(grid))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 10: Hoof It")
    parser.add_argument("input", nargs="?", default="inputs/day10.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))