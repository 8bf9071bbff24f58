"""Day 20: count shortcuts through the race track."""

from __future__ import annotations

import argparse
from collections import deque
from pathlib import Path

Point = tuple[int, int]

REQUIRED_SAVING = 100
CHEAT_DISTANCE = 20

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_CELLS = set("#.SE")


def _parse(text: str) -> tuple[list[str], Point]:
    grid = text.splitlines()
    end: Point | None = None
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell not in _CELLS:
                raise ValueError(f"unknown track cell {cell!r}")
            if cell == "E":
                end = (x, y)
    if end is None:
        raise ValueError("track has no end")
    return grid, end


def _distances(grid: list[str], end: Point) -> dict[Point, int]:
    """Distance from every reachable open cell to the end."""
    distances = {end: 0}
    queue = deque([end])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if (
                0 <= ny < len(grid)
                and 0 <= nx < len(grid[ny])
                and grid[ny][nx] != "#"
                and (nx, ny) not in distances
            ):
                distances[(nx, ny)] = distances[(x, y)] + 1
                queue.append((nx, ny))
    return distances


def part_one(text: str, saving: int = REQUIRED_SAVING) -> int:
    """Number of single-wall cheats that save at least the given time."""
    grid, end = _parse(text)
    distances = _distances(grid, end)
    height, width = len(grid), len(grid[0])
    cheats = 0
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if grid[y][x] != "#":
                continue
            for a, b in (((x - 1, y), (x + 1, y)), ((x, y - 1), (x, y + 1))):
                if (
                    a in distances
                    and b in distances
                    and abs(distances[a] - distances[b]) >= saving + 2
                ):
                    cheats += 1
    return cheats


def part_two(
    text: str, saving: int = REQUIRED_SAVING, cheat_distance: int = CHEAT_DISTANCE
) -> int:
    """Number of cheats up to cheat_distance long that save at least the given time."""
    grid, end = _parse(text)
    distances = _distances(grid, end)
    height, width = len(grid), len(grid[0])

    def interior(x: int, y: int) -> bool:
        return 1 <= x < width - 1 and 1 <= y < height - 1

    cheats = 0
    for (x, y), base in distances.items():
        if not interior(x, y):
            continue
        for dx in range(-cheat_distance, cheat_distance + 1):
            remaining = cheat_distance - abs(dx)
            for dy in range(-remaining, remaining + 1):
                nx, ny = x + dx, y + dy
                if not interior(nx, ny):
                    continue
                other = distances.get((nx, ny))
                if other is not None and other >= base + abs(dx) + abs(dy) + saving:
                    cheats += 1
    return cheats


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 20: Race Condition")
    parser.add_argument("input", nargs="?", default="inputs/day20.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))