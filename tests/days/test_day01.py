from aoc2022.days import day01


def test_part_one(example):
    assert day01.part_one(example(1)) == 24_000


def test_part_two(example):
    assert day01.part_two(example(1)) == 45_000


def test_groups_are_summed():
    assert day01.parse("1\n2\n\n10\n") == [3, 10]


def test_top_three_not_last_three():
    text = "9\n\n8\n\n7\n\n1\n\n2\n\n3\n"
    assert day01.part_two(text) == 24
