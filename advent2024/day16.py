"""Day 16: cheapest routes through the reindeer maze."""

from __future__ import annotations

import argparse
import heapq
from itertools import count
from pathlib import Path
from typing import Iterator

Point = tuple[int, int]
State = tuple[int, int, int]

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_TURN_COST = 1000
_STEP_COST = 1


def _parse(text: str) -> tuple[set[Point], Point, Point]:
    open_cells: set[Point] = set()
    start: Point | None = None
    end: Point | None = None
    for y, line in enumerate(text.splitlines()):
        for x, cell in enumerate(line):
            if cell == "#":
                continue
            if cell not in ".SE":
                raise ValueError(f"unknown maze cell {cell!r}")
            open_cells.add((x, y))
            if cell == "S":
                start = (x, y)
            elif cell == "E":
                end = (x, y)
    if start is None or end is None:
        raise ValueError("maze needs both a start and an end")
    return open_cells, start, end


def _successors(state: State, score: int) -> Iterator[tuple[int, State]]:
    x, y, direction = state
    yield score + _TURN_COST, (x, y, (direction + 1) % 4)
    yield score + _TURN_COST, (x, y, (direction + 3) % 4)
    dx, dy = _DIRECTIONS[direction]
    yield score + _STEP_COST, (x + dx, y + dy, direction)


def part_one(text: str) -> int:
    """Lowest score of any route from start to end, facing east at the start."""
    open_cells, start, end = _parse(text)
    heap: list[tuple[int, State]] = [(0, (start[0], start[1], 0))]
    seen: set[State] = set()
    while heap:
        score, state = heapq.heappop(heap)
        if state[:2] not in open_cells or state in seen:
            continue
        seen.add(state)
        if state[:2] == end:
            return score
        for item in _successors(state, score):
            heapq.heappush(heap, item)
    raise ValueError("the end cannot be reached")


def part_two(text: str) -> int:
    """Number of tiles that lie on at least one best route."""
    open_cells, start, end = _parse(text)
    order = count()
    heap: list[tuple[int, int, State, State | None]] = [
        (0, next(order), (start[0], start[1], 0), None)
    ]
    best_scores: dict[State, int] = {}
    previous: dict[State, set[State]] = {}
    best: int | None = None

    while heap:
        score, _, state, prev = heapq.heappop(heap)
        if state[:2] not in open_cells:
            continue
        if best is not None and score > best:
            break
        known = best_scores.get(state)
        if known is not None:
            if score == known and prev is not None:
                previous[state].add(prev)
            continue
        best_scores[state] = score
        previous[state] = set() if prev is None else {prev}
        if state[:2] == end:
            best = score
            continue
        for next_score, next_state in _successors(state, score):
            heapq.heappush(heap, (next_score, next(order), next_state, state))

    if best is None:
        raise ValueError("the end cannot be reached")

    stack = [s for s, sc in best_scores.items() if s[:2] == end and sc == best]
    seen: set[State] = set()
    cells: set[Point] = set()
    while stack:
        state = stack.pop()
        if state in seen:
            continue
        seen.add(state)
        cells.add(state[:2])
        stack.extend(previous[state])
    return len(cells)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 16: Reindeer Maze")
    parser.add_argument("input", nargs="?", default="inputs/day16.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))