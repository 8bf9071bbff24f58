"""Day 12: price the fencing around garden regions."""

from __future__ import annotations

import argparse
from collections import defaultdict
from itertools import pairwise
from pathlib import Path
from typing import Iterator

Point = tuple[int, int]

_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def _regions(grid: list[str]) -> Iterator[set[Point]]:
    """Yield each connected region of equal plants as a set of cells."""
    seen: set[Point] = set()
    for y, row in enumerate(grid):
        for x, plant in enumerate(row):
            if (x, y) in seen:
                continue
            region: set[Point] = set()
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                if (cx, cy) in region:
                    continue
                region.add((cx, cy))
                for dx, dy in _DIRECTIONS:
                    nx, ny = cx + dx, cy + dy
                    if (
                        0 <= ny < len(grid)
                        and 0 <= nx < len(grid[ny])
                        and grid[ny][nx] == plant
                        and (nx, ny) not in region
                    ):
                        stack.append((nx, ny))
            seen |= region
            yield region


def _boundary(region: set[Point]) -> Iterator[tuple[Point, Point]]:
    """Yield (cell, direction) for every fence segment around the region."""
    for x, y in region:
        for dx, dy in _DIRECTIONS:
            if (x + dx, y + dy) not in region:
                yield (x, y), (dx, dy)


def _sides(region: set[Point]) -> int:
    lines: dict[tuple[int, int, int], list[int]] = defaultdict(list)
    for (x, y), (dx, dy) in _boundary(region):
        if dx:
            lines[(dx, dy, x)].append(y)
        else:
            lines[(dx, dy, y)].append(x)
    return sum(
        1 + sum(1 for a, b in pairwise(sorted(positions)) if a + 1 != b)
        for positions in lines.values()
    )


def part_one(text: str) -> int:
    """Total price using area times perimeter."""
    grid = text.splitlines()
    return sum(
        len(region) * sum(1 for _ in _boundary(region)) for region in _regions(grid)
    )


def part_two(text: str) -> int:
    """Total price using area times number of straight sides."""
    grid = text.splitlines()
    return sum(len(region) * _sides(region) for region in _regions(grid))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 12: Garden Groups")
    parser.add_argument("input", nargs="?", default="inputs/day12.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))