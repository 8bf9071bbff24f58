"""Day 19: arrange towels into requested designs."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


@dataclass
class Trie:
    """Prefix tree of towel patterns."""

    children: dict[str, Trie] = field(default_factory=dict)
    is_leaf: bool = False

    def insert(self, pattern: str) -> None:
        """Add a towel pattern."""
        node = self
        for char in pattern:
            node = node.children.setdefault(char, Trie())
        node.is_leaf = True

    def count_arrangements(self, pattern: str) -> int:
        """Number of ways to build the pattern from the stored towels."""

        @lru_cache(maxsize=None)
        def ways(start: int) -> int:
            if start == len(pattern):
                return 1
            total = 0
            node: Trie | None = self
            for index in range(start, len(pattern)):
                node = node.children.get(pattern[index])
                if node is None:
                    break
                if node.is_leaf:
                    total += ways(index + 1)
            return total

        return ways(0)


def _parse(text: str) -> tuple[Trie, list[str]]:
    towels_text, sep, designs_text = text.partition("\n\n")
    if not sep:
        raise ValueError("input has no blank line between towels and designs")
    trie = Trie()
    for towel in towels_text.strip().split(", "):
        trie.insert(towel)
    designs = [line.strip() for line in designs_text.splitlines() if line.strip()]
    return trie, designs


def part_one(text: str) -> int:
    """Number of designs that can be made at all."""
    trie, designs = _parse(text)
    return sum(1 for design in designs if trie.count_arrangements(design) > 0)


def part_two(text: str) -> int:
    """Total number of ways to make every design."""
    trie, designs = _parse(text)
    return sum(trie.count_arrangements(design) for design in designs)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 19: Linen Layout")
    parser.add_argument("input", nargs="?", default="inputs/day19.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))