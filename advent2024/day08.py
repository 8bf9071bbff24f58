"""Day 8: antinodes of resonant antennas."""

from __future__ import annotations

import argparse
from collections import defaultdict
from itertools import combinations, count
from pathlib import Path

Point = tuple[int, int]


def _parse(text: str) -> tuple[dict[str, set[Point]], int, int]:
    antennas: dict[str, set[Point]] = defaultdict(set)
    lines = text.splitlines()
    for y, line in enumerate(lines):
        for x, cell in enumerate(line):
            if cell != ".":
                antennas[cell].add((x, y))
    width = len(lines[0]) if lines else 0
    return antennas, width, len(lines)


def part_one(text: str) -> int:
    """Antinodes at twice the distance from each antenna pair."""
    antennas, width, height = _parse(text)
    antinodes: set[Point] = set()
    for positions in antennas.values():
        for (x0, y0), (x1, y1) in combinations(positions, 2):
            dx, dy = x1 - x0, y1 - y0
            for ax, ay in ((x1 + dx, y1 + dy), (x0 - dx, y0 - dy)):
                if 0 <= ax < width and 0 <= ay < height:
                    antinodes.add((ax, ay))
    return len(antinodes)


def part_two(text: str) -> int:
    """Antinodes at every grid position in line with an antenna pair."""
    antennas, width, height = _parse(text)
    antinodes: set[Point] = set()
    for positions in antennas.values():
        for (x0, y0), (x1, y1) in combinations(positions, 2):
            dx, dy = x1 - x0, y1 - y0
            for (bx, by), (sx, sy) in (((x1, y1), (dx, dy)), ((x0, y0), (-dx, -dy))):
                for i in count():
                    ax, ay = bx + sx * i, by + sy * i
                    if not (0 <= ax < width and 0 <= ay < height):
                        break
                    antinodes.add((ax, ay))
    return len(antinodes)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 8: Resonant Collinearity")
    parser.add_argument("input", nargs="?", default="inputs/day8.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))