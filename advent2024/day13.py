"""Day 13: cheapest button presses to win each claw machine prize."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

PRIZE_OFFSET = 10_000_000_000_000

_PATTERN = re.compile(
    r"Button A: X\+(-?\d+), Y\+(-?\d+)\n"
    r"Button B: X\+(-?\d+), Y\+(-?\d+)\n"
    r"Prize: X=(-?\d+), Y=(-?\d+)"
)


@dataclass(frozen=True)
class Machine:
    """A claw machine: two buttons' movements and the prize location."""

    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int

    def cost(self, offset: int = 0) -> int | None:
        """Tokens needed to reach the prize (shifted by offset), or None if unreachable."""
        det = self.bx * self.ay - self.by * self.ax
        if det == 0:
            raise ValueError("button movements are parallel")
        cx, cy = self.px + offset, self.py + offset
        a_num = cx * self.by - cy * self.bx
        b_num = cx * self.ay - cy * self.ax
        if a_num % det or b_num % det:
            return None
        a = a_num // -det
        b = b_num // det
        if a < 0 or b < 0:
            return None
        return a * 3 + b


def parse_machines(text: str) -> list[Machine]:
    """Parse the blank-line separated machine descriptions."""
    machines = []
    for block in text.strip().split("\n\n"):
        match = _PATTERN.fullmatch(block.strip())
        if match is None:
            raise ValueError(f"unrecognised machine description: {block!r}")
        machines.append(Machine(*(int(value) for value in match.groups())))
    return machines


def _total(text: str, offset: int) -> int:
    return sum(
        cost for machine in parse_machines(text) if (cost := machine.cost(offset)) is not None
    )


def part_one(text: str) -> int:
    """Fewest tokens to win every winnable prize."""
    return _total(text, 0)


def part_two(text: str) -> int:
    """Fewest tokens with every prize moved far away."""
    return _total(text, PRIZE_OFFSET)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 13: Claw Contraption")
    parser.add_argument("input", nargs="?", default="inputs/day13.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))