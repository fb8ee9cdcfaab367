import pytest

from aoc2022.days import day03


def test_part_one(example):
    assert day03.part_one(example(3)) == 157


def test_part_two(example):
    assert day03.part_two(example(3)) == 70


def test_priority():
    assert day03.priority("a") == 1
    assert day03.priority("z") == 26
    assert day03.priority("A") == 27
    assert day03.priority("Z") == 52


def test_odd_sized_rucksack():
    with pytest.raises(ValueError):
        day03.part_one("abc\n")
