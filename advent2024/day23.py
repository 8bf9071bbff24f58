"""Day 23: find groups of interconnected computers at the LAN party."""

from __future__ import annotations

import argparse
from collections import defaultdict
from itertools import combinations
from pathlib import Path

Clique = frozenset[str]


def parse_edges(text: str) -> dict[str, set[str]]:
    """Map each computer to the set of computers it is connected to."""
    edges: dict[str, set[str]] = defaultdict(set)
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        a, sep, b = line.partition("-")
        if not sep or not a or not b:
            raise ValueError(f"unrecognised connection: {line!r}")
        edges[a].add(b)
        edges[b].add(a)
    return dict(edges)


def part_one(text: str) -> int:
    """Number of triangles that include a computer whose name starts with t."""
    edges = parse_edges(text)
    triangles = {
        frozenset((a, b, c))
        for a, neighbours in edges.items()
        for b, c in combinations(sorted(neighbours), 2)
        if c in edges[b]
    }
    return sum(1 for triangle in triangles if any(n.startswith("t") for n in triangle))


def _grow(edges: dict[str, set[str]], cliques: set[Clique]) -> set[Clique]:
    grown: set[Clique] = set()
    for clique in cliques:
        common = set.intersection(*(edges[node] for node in clique)) - clique
        for node in common:
            grown.add(clique | {node})
    return grown


def part_two(text: str) -> str:
    """Password: the members of the largest clique, sorted and comma separated."""
    edges = parse_edges(text)
    cliques: set[Clique] = {
        frozenset((a, b)) for a, neighbours in edges.items() for b in neighbours
    }
    while len(cliques) > 1:
        cliques = _grow(edges, cliques)
    return ",".join(sorted(next(iter(cliques), frozenset())))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 23: LAN Party")
    parser.add_argument("input", nargs="?", default="inputs/day23.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))