import pytest

from aoc2022.days import day16


def test_part_one(example):
    assert day16.part_one(example(16)) == 1651


def test_part_two(example):
    assert day16.part_two(example(16)) == 1707


def test_distances(example):
    valves = day16.parse(example(16))
    dist = day16.distances_from(valves, "AA")
    assert dist["DD"] == 1
    assert dist["JJ"] == 2
    assert dist["HH"] == 5


def test_unknown_tunnel():
    with pytest.raises(ValueError, match="unknown valve"):
        day16.parse("Valve AA has flow rate=0; tunnel leads to valve ZZ\n")
