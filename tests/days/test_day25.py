import pytest

from aoc2022.days import day25


def test_part_one(example):
    assert day25.part_one(example(25)) == "2=-1=0"


def test_part_two(example):
    assert day25.part_two(example(25)) is None


@pytest.mark.parametrize(
    "number, snafu",
    [
        (1, "1"),
        (3, "1="),
        (8, "2="),
        (2022, "1=11-2"),
        (12345, "1-0---0"),
        (314159265, "1121-1110-1=0"),
    ],
)
def test_int_to_snafu(number, snafu):
    assert day25.int_to_snafu(number) == snafu
    assert day25.snafu_to_int(snafu) == number


def test_invalid_digit():
    with pytest.raises(ValueError, match="Invalid SNAFU digit"):
        day25.snafu_to_int("12x")
