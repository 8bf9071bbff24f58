"""Day 9: compact a disk map and compute its checksum."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass
class _File:
    offset: int
    size: int
    id: int


@dataclass
class _Gap:
    offset: int
    size: int


def part_one(text: str) -> int:
    """Checksum after moving blocks one at a time into the leftmost free space."""
    blocks: list[int | None] = []
    for i, char in enumerate(text.strip()):
        blocks.extend([i // 2 if i % 2 == 0 else None] * int(char))

    left, right = 0, len(blocks) - 1
    while right > left:
        if blocks[left] is not None:
            left += 1
        elif blocks[right] is None:
            right -= 1
        else:
            blocks[left], blocks[right] = blocks[right], blocks[left]

    used = (block for block in blocks if block is not None)
    return sum(position * file_id for position, file_id in enumerate(used))


def part_two(text: str) -> int:
    """Checksum after moving whole files into the leftmost gap that fits."""
    files: list[_File] = []
    gaps: list[_Gap] = []
    offset = 0
    for i, char in enumerate(text.strip()):
        size = int(char)
        if i % 2 == 0:
            files.append(_File(offset, size, i // 2))
        else:
            gaps.append(_Gap(offset, size))
        offset += size

    for file in reversed(files):
        for gap in gaps:
            if gap.offset > file.offset:
                break
            if gap.size >= file.size:
                file.offset = gap.offset
                gap.offset += file.size
                gap.size -= file.size
                break

    return sum(
        (file.offset + step) * file.id for file in files for step in range(file.size)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 9: Disk Fragmenter")
    parser.add_argument("input", nargs="?", default="inputs/day9.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))