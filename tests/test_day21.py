import pytest

from advent2024.day21 import complexities, part_one, part_two, sequence_length

EXAMPLE = "029A\n980A\n179A\n456A\n379A\n"


def test_part_one_example():
    assert part_one(EXAMPLE) == 126384


def test_sequence_length_example():
    assert sequence_length("029A", 2) == 68


def test_direct_keypad_example():
    assert sequence_length("029A", 0) == 12


@pytest.mark.parametrize("robots", [0, 2, 25])
def test_pressing_activate_only(robots):
    assert sequence_length("A", robots) == 1


@pytest.mark.parametrize("code", ["029A", "980A", "379A"])
def test_more_robots_need_more_presses(code):
    assert sequence_length(code, 3) > sequence_length(code, 2)


def test_complexities_sum_to_part_one():
    assert sum(complexities(EXAMPLE, 2)) == part_one(EXAMPLE)


def test_complexities_use_numeric_part():
    assert complexities("029A", 2) == [sequence_length("029A", 2) * 29]


def test_part_two_exceeds_part_one():
    assert part_two(EXAMPLE) > part_one(EXAMPLE)


def test_unknown_key_is_rejected():
    with pytest.raises(ValueError):
        sequence_length("12X", 2)


def test_negative_robots_rejected():
    with pytest.raises(ValueError):
        sequence_length("029A", -1)