import pytest

from advent2024.day18 import part_one, part_two

EXAMPLE = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_part_one_example():
    assert part_one(EXAMPLE, size=7, count=12) == 22


def test_part_two_example():
    assert part_two(EXAMPLE, size=7) == "6,1"


def test_empty_grid_takes_manhattan_distance():
    size = 5
    assert part_one("", size=size, count=0) == 2 * (size - 1)


def test_path_never_shorter_than_manhattan_distance():
    assert part_one(EXAMPLE, size=7, count=12) >= 2 * (7 - 1)


def test_blocked_start_raises():
    with pytest.raises(ValueError):
        part_one("0,1\n1,0\n", size=3, count=2)


def test_part_two_without_blocking_byte_raises():
    with pytest.raises(ValueError):
        part_two("1,1\n", size=3)


def test_part_two_answer_is_an_input_line():
    answer = part_two(EXAMPLE, size=7)
    assert answer in EXAMPLE.splitlines()


def test_part_two_agrees_with_part_one():
    answer = part_two(EXAMPLE, size=7)
    index = EXAMPLE.splitlines().index(answer)
    assert part_one(EXAMPLE, size=7, count=index) >= 2 * (7 - 1)
    with pytest.raises(ValueError):
        part_one(EXAMPLE, size=7, count=index + 1)


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part_one("5 4\n", size=7, count=1)