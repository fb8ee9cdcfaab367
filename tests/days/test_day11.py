import pytest

from aoc2022.days import day11


def test_part_one(example):
    assert day11.part_one(example(11)) == 10605


def test_part_two(example):
    assert day11.part_two(example(11)) == 2_713_310_158


def test_parse_monkey(example):
    monkeys = day11.parse(example(11))
    assert len(monkeys) == 4
    assert monkeys[0].items == [79, 98]
    assert monkeys[2].inspect(3) == 9
    assert monkeys[0].target(23 * 2) == 2
    assert monkeys[0].target(24) == 3


def test_missing_field():
    block = ["Monkey 0:", "  Starting items: 1", "  Operation: new = old * 2"]
    with pytest.raises(ValueError):
        day11.parse_monkey(block)
