"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import argparse
from pathlib import Path

Point = tuple[int, int]

_MOVES = {"^": (0, -1), "v": (0, 1), "<": (-1, 0), ">": (1, 0)}

_WALL = "#"
_EMPTY = "."
_BOX = "O"
_ROBOT = "@"
_BOX_LEFT = "["
_BOX_RIGHT = "]"

_WIDE = {
    _WALL: (_WALL, _WALL),
    _EMPTY: (_EMPTY, _EMPTY),
    _BOX: (_BOX_LEFT, _BOX_RIGHT),
    _ROBOT: (_EMPTY, _EMPTY),
}


def _split(text: str) -> tuple[list[str], list[Point]]:
    grid_text, sep, moves_text = text.partition("\n\n")
    if not sep:
        raise ValueError("input has no blank line between map and moves")
    rows = grid_text.splitlines()
    for row in rows:
        unknown = set(row) - _WIDE.keys()
        if unknown:
            raise ValueError(f"unknown map cells: {''.join(sorted(unknown))}")
    return rows, [_MOVES[char] for char in moves_text if char in _MOVES]


def _find_robot(rows: list[str]) -> Point:
    for y, row in enumerate(rows):
        x = row.find(_ROBOT)
        if x >= 0:
            return x, y
    return 0, 0


def _cell(grid: list[list[str]], x: int, y: int) -> str:
    if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
        raise ValueError("the robot left the warehouse")
    return grid[y][x]


def _gps_sum(grid: list[list[str]], box: str) -> int:
    return sum(
        100 * y + x for y, row in enumerate(grid) for x, cell in enumerate(row) if cell == box
    )


def part_one(text: str) -> int:
    """Sum of box GPS coordinates after all moves."""
    rows, moves = _split(text)
    x, y = _find_robot(rows)
    grid = [[_EMPTY if cell == _ROBOT else cell for cell in row] for row in rows]
    for dx, dy in moves:
        cx, cy = x, y
        while True:
            cx, cy = cx + dx, cy + dy
            cell = _cell(grid, cx, cy)
            if cell == _WALL:
                break
            if cell == _EMPTY:
                grid[cy][cx] = _BOX
                x, y = x + dx, y + dy
                grid[y][x] = _EMPTY
                break
    return _gps_sum(grid, _BOX)


def _push(grid: list[list[str]], pos: Point, direction: Point, dry_run: bool) -> bool:
    """Move whatever is at pos one step, pushing boxes ahead; report success."""
    x, y = pos
    dx, dy = direction
    nx, ny = x + dx, y + dy
    cell = _cell(grid, nx, ny)
    if cell == _WALL:
        moved = False
    elif cell == _EMPTY:
        moved = True
    else:
        moved = _push(grid, (nx, ny), direction, dry_run)
        if dy != 0:
            partner = nx + 1 if cell == _BOX_LEFT else nx - 1
            moved = moved and _push(grid, (partner, ny), direction, dry_run)
    if moved and not dry_run:
        grid[ny][nx] = grid[y][x]
        grid[y][x] = _EMPTY
    return moved


def part_two(text: str) -> int:
    """Sum of box GPS coordinates in the double-width warehouse."""
    rows, moves = _split(text)
    x, y = _find_robot(rows)
    pos = (x * 2, y)
    grid = [[half for cell in row for half in _WIDE[cell]] for row in rows]
    for direction in moves:
        if _push(grid, pos, direction, True):
            _push(grid, pos, direction, False)
            pos = (pos[0] + direction[0], pos[1] + direction[1])
    return _gps_sum(grid, _BOX_LEFT)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 15: Warehouse Woes")
    parser.add_argument("input", nargs="?", default="inputs/day15.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))