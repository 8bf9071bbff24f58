from itertools import islice

import pytest

from advent2024.day22 import advance, part_one, part_two, prices


def test_advance_example():
    assert advance(123) == 15887950


def test_part_one_example():
    assert part_one("1\n10\n100\n2024\n") == 37327623


def test_part_two_example():
    assert part_two("1\n2\n3\n2024\n") == 23


@pytest.mark.parametrize("secret", [0, 1, 123, 16777215, 10**12])
def test_advance_stays_in_range(secret):
    assert 0 <= advance(secret) < 2**24


def test_prices_follow_secrets():
    secrets = [123]
    for _ in range(9):
        secrets.append(advance(secrets[-1]))
    assert list(islice(prices(123), 10)) == [s % 10 for s in secrets]


def test_part_one_adds_buyers():
    assert part_one("1\n10") == part_one("1") + part_one("10")


@pytest.mark.parametrize("secret", [1, 2, 2024])
def test_single_buyer_at_most_top_price(secret):
    assert 0 <= part_two(str(secret)) <= 9


def test_part_two_without_buyers():
    with pytest.raises(ValueError):
        part_two("")