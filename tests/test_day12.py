import pytest

from advent2024.day12 import part_one, part_two

SMALL = """\
AAAA
BBCD
BBCC
EEEC
"""

LARGE = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""


def _transpose(text):
    return "\n".join("".join(column) for column in zip(*text.splitlines()))


def test_part_one_small_example():
    assert part_one(SMALL) == 140


def test_part_two_small_example():
    assert part_two(SMALL) == 80


def test_part_one_large_example():
    assert part_one(LARGE) == 1930


@pytest.mark.parametrize("text", [SMALL, LARGE])
def test_sides_never_exceed_perimeter(text):
    assert part_two(text) <= part_one(text)


@pytest.mark.parametrize("text", [SMALL, LARGE])
def test_transposition_keeps_price(text):
    assert part_one(_transpose(text)) == part_one(text)
    assert part_two(_transpose(text)) == part_two(text)


def test_separate_regions_of_same_plant_priced_separately():
    assert part_one("ABA") == part_one("A") * 2 + part_one("B")
    assert part_two("ABA") == part_two("A") * 2 + part_two("B")