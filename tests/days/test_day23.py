from aoc2022.days import day23

SMALL = """.....
..##.
..#..
.....
..##.
.....
"""


def test_part_one(example):
    assert day23.part_one(example(23)) == 110


def test_part_two(example):
    assert day23.part_two(example(23)) == 20


def test_small_example_settles():
    elves = day23.parse(SMALL)
    for round_index in range(3):
        elves = day23.spread(elves, round_index)
    assert elves == {(2, 0), (4, 1), (0, 2), (4, 3), (2, 5)}
