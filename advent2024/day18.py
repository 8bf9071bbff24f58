"""Day 18: escape a memory grid as bytes fall into it."""

from __future__ import annotations

import argparse
from bisect import bisect_left
from collections import deque
from pathlib import Path

Point = tuple[int, int]

SIZE = 71
BYTES = 1024

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _parse(text: str) -> list[Point]:
    coords = []
    for line in text.splitlines():
        if not line.strip():
            continue
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"unrecognised byte position: {line!r}")
        coords.append((int(x), int(y)))
    return coords


def _shortest(walls: set[Point], size: int) -> int | None:
    goal = (size - 1, size - 1)
    queue = deque([((0, 0), 0)])
    seen = {(0, 0)}
    while queue:
        (x, y), steps = queue.popleft()
        if (x, y) == goal:
            return steps
        for dx, dy in _STEPS:
            nxt = (x + dx, y + dy)
            if 0 <= nxt[0] < size and 0 <= nxt[1] < size and nxt not in walls and nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, steps + 1))
    return None


def part_one(text: str, size: int = SIZE, count: int = BYTES) -> int:
    """Fewest steps to the exit once the first count bytes have fallen."""
    steps = _shortest(set(_parse(text)[:count]), size)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part_two(text: str, size: int = SIZE) -> str:
    """Position "x,y" of the first byte that cuts the exit off."""
    coords = _parse(text)

    def blocked(index: int) -> bool:
        return _shortest(set(coords[: index + 1]), size) is None

    index = bisect_left(range(len(coords)), True, key=blocked)
    if index == len(coords):
        raise ValueError("no byte cuts off the exit")
    x, y = coords[index]
    return f"{x},{y}"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 18: RAM Run")
    parser.add_argument("input", nargs="?", default="inputs/day18.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))