from aoc2022.days import day08


def test_part_one(example):
    assert day08.part_one(example(8)) == 21


def test_part_two(example):
    assert day08.part_two(example(8)) == 8


def test_viewing_distance_counts_blocking_tree():
    assert day08.viewing_distance(5, [3, 5, 3]) == 2
    assert day08.viewing_distance(5, [1, 2]) == 2
    assert day08.viewing_distance(5, []) == 0
