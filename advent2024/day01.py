"""Day 1: compare two location lists."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split the input into its left and right columns of numbers."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        first, second = line.split()
        left.append(int(first))
        right.append(int(second))
    return left, right


def part_one(text: str) -> int:
    """Total distance between the sorted lists."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(text: str) -> int:
    """Similarity score: each left number times its count in the right list."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(a * counts[a] for a in left)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 1: Historian Hysteria")
    parser.add_argument("input", nargs="?", default="inputs/day1.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))