import pytest

from advent2024.day07 import can_solve, main, part_one, part_two

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_examples():
    assert part_one(EXAMPLE) == 3749
    assert part_two(EXAMPLE) == 11387


@pytest.mark.parametrize(
    "target, values, with_concat, expected",
    [
        (190, [10, 19], False, True),
        (3267, [81, 40, 27], False, True),
        (292, [11, 6, 16, 20], False, True),
        (83, [17, 5], False, False),
        (156, [15, 6], False, False),
        (156, [15, 6], True, True),
        (7290, [6, 8, 6, 15], True, True),
        (192, [17, 8, 14], True, True),
        (21037, [9, 7, 18, 13], True, False),
    ],
)
def test_can_solve(target, values, with_concat, expected):
    assert can_solve(target, values, with_concat) is expected


def test_concatenation_only_adds_solutions():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part_one("190 10 19\n")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.split() == [
        str(part_one(EXAMPLE)),
        str(part_two(EXAMPLE)),
    ]