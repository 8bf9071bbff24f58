import pytest

from advent2024.day10 import part_one, part_two

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 36


def test_part_two_example():
    assert part_two(EXAMPLE) == 81


def test_rating_never_below_score():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


def test_single_straight_trail():
    assert part_one("0123456789") == part_two("0123456789") == 1


def test_direction_of_trail_does_not_matter():
    assert part_one("9876543210") == part_one("0123456789")
    assert part_two("9876543210") == part_two("0123456789")


def test_no_trailheads():
    assert part_one("123\n456") == 0
    assert part_two("123\n456") == 0


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        part_one("01.3\n4567")