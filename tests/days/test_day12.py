import pytest

from aoc2022.days import day12


def test_part_one(example):
    assert day12.part_one(example(12)) == 31


def test_part_two(example):
    assert day12.part_two(example(12)) == 29


def test_unreachable():
    assert day12.part_one("SazE\n") is None


def test_missing_end():
    with pytest.raises(ValueError, match="Missing end"):
        day12.parse("Sab\n")


def test_two_starts():
    with pytest.raises(ValueError, match="Multiple starting"):
        day12.parse("SSE\n")
