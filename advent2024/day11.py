"""Day 11: count stones that split and multiply as you blink."""

from __future__ import annotations

import argparse
from functools import lru_cache
from pathlib import Path


@lru_cache(maxsize=None)
def _count(stone: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    if stone == 0:
        return _count(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return _count(int(digits[:half]), blinks - 1) + _count(int(digits[half:]), blinks - 1)
    return _count(stone * 2024, blinks - 1)


def count_stones(stone: int, blinks: int) -> int:
    """Number of stones a single stone becomes after the given number of blinks."""
    if stone < 0:
        raise ValueError("stones carry non-negative numbers")
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    return _count(stone, blinks)


def _stones(text: str) -> list[int]:
    stones = [int(token) for token in text.split()]
    if any(stone < 0 for stone in stones):
        raise ValueError("stones carry non-negative numbers")
    return stones


def part_one(text: str) -> int:
    """Number of stones after 25 blinks."""
    return sum(count_stones(stone, 25) for stone in _stones(text))


def part_two(text: str) -> int:
    """Number of stones after 75 blinks."""
    return sum(count_stones(stone, 75) for stone in _stones(text))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 11: Plutonian Pebbles")
    parser.add_argument("input", nargs="?", default="inputs/day11.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))