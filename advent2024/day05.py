"""Day 5: page ordering rules for print updates."""

from __future__ import annotations

import argparse
from functools import cmp_to_key
from pathlib import Path

Rule = tuple[int, int]


def parse(text: str) -> tuple[list[Rule], list[list[int]]]:
    """Split the input into ordering rules and updates."""
    rules_text, sep, updates_text = text.partition("\n\n")
    if not sep:
        raise ValueError("input has no blank line between rules and updates")
    rules = []
    for line in rules_text.splitlines():
        before, after = line.split("|")
        rules.append((int(before), int(after)))
    updates = [[int(page) for page in line.split(",")] for line in updates_text.splitlines()]
    return rules, updates


def is_ordered(update: list[int], rules: list[Rule]) -> bool:
    """True if no rule applying to both of its pages is broken by the update."""
    positions = {page: i for i, page in reversed(list(enumerate(update)))}
    return all(
        positions[a] < positions[b]
        for a, b in rules
        if a in positions and b in positions
    )


def part_one(text: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = parse(text)
    return sum(u[len(u) // 2] for u in updates if is_ordered(u, rules))


def part_two(text: str) -> int:
    """Sum of middle pages of incorrectly ordered updates after reordering them."""
    rules, updates = parse(text)
    rule_set = set(rules)

    def compare(a: int, b: int) -> int:
        if (a, b) in rule_set:
            return -1
        if (b, a) in rule_set:
            return 1
        return 0

    total = 0
    for update in updates:
        if is_ordered(update, rules):
            continue
        fixed = sorted(update, key=cmp_to_key(compare))
        total += fixed[len(fixed) // 2]
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 5: Print Queue")
    parser.add_argument("input", nargs="?", default="inputs/day5.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))