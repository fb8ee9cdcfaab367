from aoc2022.days import day18


def test_part_one(example):
    assert day18.part_one(example(18)) == 64


def test_part_two(example):
    assert day18.part_two(example(18)) == 58


def test_two_cubes():
    assert day18.part_one("1,1,1\n2,1,1\n") == 10
