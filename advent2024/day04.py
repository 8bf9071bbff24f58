"""Day 4: word search for XMAS."""

from __future__ import annotations

import argparse
from pathlib import Path

_DIRECTIONS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


def _grid(text: str) -> list[str]:
    return text.splitlines()


def _spells_mas(grid: list[str], x: int, y: int, dx: int, dy: int) -> bool:
    width, height = len(grid[0]), len(grid)
    for step, letter in enumerate("MAS", start=1):
        nx, ny = x + dx * step, y + dy * step
        if not (0 <= nx < width and 0 <= ny < height) or grid[ny][nx] != letter:
            return False
    return True


def part_one(text: str) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    grid = _grid(text)
    return sum(
        1
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell == "X"
        for dx, dy in _DIRECTIONS
        if _spells_mas(grid, x, y, dx, dy)
    )


def part_two(text: str) -> int:
    """Occurrences of two MAS strings crossing in an X."""
    grid = _grid(text)
    width, height = len(grid[0]), len(grid)
    pairs = ({"M", "S"},)
    count = 0
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if grid[y][x] != "A":
                continue
            diagonal = {grid[y - 1][x - 1], grid[y + 1][x + 1]}
            anti = {grid[y - 1][x + 1], grid[y + 1][x - 1]}
            if diagonal in pairs and anti in pairs:
                count += 1
    return count


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 4: Ceres Search")
    parser.add_argument("input", nargs="?", default="inputs/day4.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))