import pytest

from aoc2022.days import day14


def test_part_one(example):
    assert day14.part_one(example(14)) == 24


def test_part_two(example):
    assert day14.part_two(example(14)) == 93


def test_diagonal_rock():
    with pytest.raises(ValueError, match="not a straight line"):
        day14.part_one("498,4 -> 500,6\n")
