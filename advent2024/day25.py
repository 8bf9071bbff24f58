"""Day 25: count lock and key pairs that fit together."""

from __future__ import annotations

import argparse
from itertools import product
from pathlib import Path

MAX_HEIGHT = 5


def _heights(block: str) -> list[int]:
    heights: list[int] = []
    for line in block.splitlines():
        for x, char in enumerate(line):
            if char == "#":
                if len(heights) <= x:
                    heights.extend([-1] * (x + 1 - len(heights)))
                heights[x] += 1
    return heights


def parse_schematics(text: str) -> tuple[list[list[int]], list[list[int]]]:
    """Column heights of every lock and every key, as (locks, keys)."""
    locks: list[list[int]] = []
    keys: list[list[int]] = []
    for block in text.split("\n\n"):
        (locks if block.startswith("#") else keys).append(_heights(block))
    return locks, keys


def part_one(text: str) -> int:
    """Number of key and lock pairs whose columns never overlap."""
    locks, keys = parse_schematics(text)
    return sum(
        1
        for key, lock in product(keys, locks)
        if all(k + l <= MAX_HEIGHT for k, l in zip(key, lock))
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 25: Code Chronicle")
    parser.add_argument("input", nargs="?", default="inputs/day25.txt", type=Path)
    args = parser.parse_args(argv)
    print(part_one(args.input.read_text()))