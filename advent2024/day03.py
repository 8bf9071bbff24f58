"""Day 3: add up the multiplications in corrupted memory."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION = re.compile(r"do\(\)|don't\(\)|mul\(([0-9]+),([0-9]+)\)")


def part_one(text: str) -> int:
    """Sum of every mul(a,b) product."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part_two(text: str) -> int:
    """Sum of products, honouring do() and don't() switches."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 3: Mull It Over")
    parser.add_argument("input", nargs="?", default="inputs/day3.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))