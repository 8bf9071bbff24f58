import pytest

from advent2024.day01 import main, parse_lists, part_one, part_two

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_lists_columns():
    left, right = parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_part_one_example():
    assert part_one(EXAMPLE) == 11


def test_part_two_example():
    assert part_two(EXAMPLE) == 31


def test_part_one_symmetric_under_column_swap():
    swapped = "\n".join(
        f"{b}   {a}" for a, b in (line.split() for line in EXAMPLE.splitlines())
    )
    assert part_one(swapped) == part_one(EXAMPLE)


def test_identical_columns_have_zero_distance():
    text = "5   5\n7   7\n"
    assert part_one(text) == 0


def test_bad_line_raises():
    with pytest.raises(ValueError):
        parse_lists("1 2 3\n")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    lines = capsys.readouterr().out.split()
    assert lines == [str(part_one(EXAMPLE)), str(part_two(EXAMPLE))]