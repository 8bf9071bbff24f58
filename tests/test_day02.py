import pytest

from advent2024.day02 import (
    is_safe,
    is_safe_with_dampener,
    main,
    part_one,
    part_two,
)

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


@pytest.mark.parametrize(
    "levels, safe",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_safe(levels, safe):
    assert is_safe(levels) is safe


@pytest.mark.parametrize(
    "levels, safe",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], True),
        ([8, 6, 4, 4, 1], True),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_safe_with_dampener(levels, safe):
    assert is_safe_with_dampener(levels) is safe


def test_examples():
    assert part_one(EXAMPLE) == 2
    assert part_two(EXAMPLE) == 4


def test_safety_is_direction_independent():
    levels = [1, 3, 6, 7, 9]
    assert is_safe(levels) == is_safe(levels[::-1])


def test_dampener_never_loses_safe_reports():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


def test_non_numeric_raises():
    with pytest.raises(ValueError):
        part_one("1 2 x\n")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.split() == [
        str(part_one(EXAMPLE)),
        str(part_two(EXAMPLE)),
    ]