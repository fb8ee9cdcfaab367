import pytest

from aoc2022.days import day19


def test_part_one(example):
    assert day19.part_one(example(19)) == 33


def test_part_two(example):
    assert day19.part_two(example(19)) == 56 * 62


def test_parse_wrapped_blueprint():
    text = """Blueprint 1:
  Each ore robot costs 4 ore.
  Each clay robot costs 2 ore.
  Each obsidian robot costs 3 ore and 14 clay.
  Each geode robot costs 2 ore and 7 obsidian.
"""
    (blueprint,) = day19.parse(text)
    assert blueprint.id == 1
    assert blueprint.costs[day19.OBSIDIAN] == (3, 14, 0)
    assert blueprint.max_spend == (4, 14, 7)


def test_single_blueprint_geodes(example):
    first, second = day19.parse(example(19))
    assert day19.max_geodes(first, 24) == 9
    assert day19.max_geodes(second, 24) == 12


def test_malformed_blueprint():
    with pytest.raises(ValueError):
        day19.parse("Blueprint 1: Each ore robot costs 4 ore.\n")
