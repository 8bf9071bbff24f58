import pytest

from advent2024.day09 import main, part_one, part_two

EXAMPLE = "2333133121414131402\n"


def test_part_one_example():
    assert part_one(EXAMPLE) == 1928


def test_part_two_example():
    assert part_two(EXAMPLE) == 2858


def test_no_gaps_means_nothing_moves():
    assert part_one("90909") == part_two("90909")


def test_single_file_at_start_has_zero_checksum():
    assert part_one("5") == 0
    assert part_two("5") == 0


def test_whitespace_is_ignored():
    assert part_one("  " + EXAMPLE + "\n") == part_one(EXAMPLE)


def test_non_digit_raises():
    with pytest.raises(ValueError):
        part_one("12a4")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.split() == [
        str(part_one(EXAMPLE)),
        str(part_two(EXAMPLE)),
    ]