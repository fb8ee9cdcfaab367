import pytest

from aoc2022.days import day09

SHORT_EXAMPLE = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2\n"


def test_part_one(example):
    assert day09.part_one(example(9)) == 88


def test_part_two(example):
    assert day09.part_two(example(9)) == 36


def test_short_example():
    assert day09.part_one(SHORT_EXAMPLE) == 13
    assert day09.part_two(SHORT_EXAMPLE) == 1


def test_invalid_direction():
    with pytest.raises(ValueError):
        day09.Move.parse("X 3")
