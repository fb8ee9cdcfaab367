import pytest

from aoc2022.days import day13


def test_part_one(example):
    assert day13.part_one(example(13)) == 13


def test_part_two(example):
    assert day13.part_two(example(13)) == 140


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ([1, 1, 3, 1, 1], [1, 1, 5, 1, 1], -1),
        ([[1], [2, 3, 4]], [[1], 4], -1),
        ([9], [[8, 7, 6]], 1),
        ([7, 7, 7, 7], [7, 7, 7], 1),
        ([[[]]], [[]], 1),
        ([3], [3], 0),
    ],
)
def test_compare(left, right, expected):
    assert day13.compare(left, right) == expected


def test_invalid_packet():
    with pytest.raises(ValueError):
        day13.parse_packet("[1,2")
