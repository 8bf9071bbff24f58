from math import comb

import pytest

from advent2024.day23 import parse_edges, part_one, part_two

EXAMPLE = "\n".join(
    [
        "kh-tc", "qp-kh", "de-cg", "ka-co", "yn-aq", "qp-ub", "cg-tb", "vc-aq",
        "tb-ka", "wh-tc", "yn-cg", "kh-ub", "ta-co", "de-co", "tc-td", "tb-wq",
        "wh-td", "ta-ka", "td-qp", "aq-cg", "wq-ub", "ub-vc", "de-ta", "wq-aq",
        "wq-vc", "wh-yn", "ka-de", "kh-ta", "co-tc", "wh-qp", "tb-vc", "td-yn",
    ]
)

COMPLETE_FOUR = "ta-tb\nta-tc\nta-td\ntb-tc\ntb-td\ntc-td\n"


def test_part_one_example():
    assert part_one(EXAMPLE) == 7


def test_part_two_example():
    assert part_two(EXAMPLE) == "co,de,ka,ta"


def test_edges_are_symmetric():
    edges = parse_edges(EXAMPLE)
    assert all(a in edges[b] for a, neighbours in edges.items() for b in neighbours)


def test_edges_hold_every_connection():
    edges = parse_edges("a-b\nb-c\n")
    assert edges == {"a": {"b"}, "b": {"a", "c"}, "c": {"b"}}


def test_complete_graph_triangles():
    assert part_one(COMPLETE_FOUR) == comb(4, 3)


def test_complete_graph_is_one_clique():
    assert part_two(COMPLETE_FOUR) == "ta,tb,tc,td"


def test_triangle_password():
    assert part_two("c-a\nb-c\na-b\n") == "a,b,c"


def test_triangle_without_t_is_not_counted():
    assert part_one("a-b\nb-c\nc-a\n") == 0


def test_malformed_line_is_rejected():
    with pytest.raises(ValueError):
        parse_edges("ab\n")