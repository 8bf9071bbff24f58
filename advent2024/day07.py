"""Day 7: find operators that make calibration equations true."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence


def can_solve(target: int, values: Sequence[int], concatenate: bool) -> bool:
    """True if the values, combined left to right, can reach the target."""

    def search(current: int, rest: Sequence[int]) -> bool:
        if not rest:
            return current == target
        value, tail = rest[0], rest[1:]
        if search(current + value, tail) or search(current * value, tail):
            return True
        return concatenate and search(int(f"{current}{value}"), tail)

    return search(0, list(values))


def _equations(text: str) -> list[tuple[int, list[int]]]:
    equations = []
    for line in text.splitlines():
        result, values = line.split(": ")
        equations.append((int(result), [int(v) for v in values.split(" ")]))
    return equations


def part_one(text: str) -> int:
    """Sum of targets reachable with addition and multiplication."""
    return sum(t for t, vs in _equations(text) if can_solve(t, vs, False))


def part_two(text: str) -> int:
    """Sum of targets reachable when concatenation is allowed as well."""
    return sum(t for t, vs in _equations(text) if can_solve(t, vs, True))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 7: Bridge Repair")
    parser.add_argument("input", nargs="?", default="inputs/day7.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))