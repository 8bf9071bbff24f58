"""Day 22: pseudorandom secret numbers and banana prices."""

from __future__ import annotations

import argparse
from collections import Counter
from itertools import islice, pairwise
from pathlib import Path
from typing import Iterator

ROUNDS = 2000

_PRUNE = 16777216


def advance(secret: int) -> int:
    """The next secret number."""
    secret = (secret ^ (secret * 64)) % _PRUNE
    secret = (secret ^ (secret // 32)) % _PRUNE
    secret = (secret ^ (secret * 2048)) % _PRUNE
    return secret


def prices(secret: int) -> Iterator[int]:
    """Endless prices offered by a buyer: the last digit of each secret, starting with the first."""
    while True:
        yield secret % 10
        secret = advance(secret)


def _secrets(text: str) -> list[int]:
    return [int(line) for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    """Sum of every buyer's secret after 2000 rounds."""
    total = 0
    for secret in _secrets(text):
        for _ in range(ROUNDS):
            secret = advance(secret)
        total += secret
    return total


def part_two(text: str) -> int:
    """Most bananas obtainable with one sequence of four price changes."""
    totals: Counter[tuple[int, int, int, int]] = Counter()
    for secret in _secrets(text):
        offered = list(islice(prices(secret), ROUNDS + 1))
        changes = [b - a for a, b in pairwise(offered)]
        windows = zip(changes, changes[1:], changes[2:], changes[3:])
        seen: set[tuple[int, int, int, int]] = set()
        for window, price in zip(windows, offered[4:]):
            if window not in seen:
                seen.add(window)
                totals[window] += price
    if not totals:
        raise ValueError("no buyers to sell to")
    return max(totals.values())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 22: Monkey Market")
    parser.add_argument("input", nargs="?", default="inputs/day22.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))