"""Day 2: check reactor reports for safety."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence


def _steps_ok(levels: Sequence[int]) -> bool:
    return all(1 <= b - a <= 3 for a, b in zip(levels, levels[1:]))


def is_safe(levels: Sequence[int]) -> bool:
    """True if the levels strictly rise or fall by 1 to 3 at every step."""
    return _steps_ok(levels) or _steps_ok(list(reversed(levels)))


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """True if removing some single level makes the report safe."""
    levels = list(levels)
    return any(is_safe(levels[:i] + levels[i + 1 :]) for i in range(len(levels)))


def _reports(text: str) -> list[list[int]]:
    return [[int(item) for item in line.split()] for line in text.splitlines()]


def part_one(text: str) -> int:
    """Number of safe reports."""
    return sum(1 for report in _reports(text) if is_safe(report))


def part_two(text: str) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(1 for report in _reports(text) if is_safe_with_dampener(report))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 2: Red-Nosed Reports")
    parser.add_argument("input", nargs="?", default="inputs/day2.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))