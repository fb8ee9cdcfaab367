from aoc2022.days import day05


def test_part_one(example):
    assert day05.part_one(example(5)) == "CMZ"


def test_part_two(example):
    assert day05.part_two(example(5)) == "MCD"


def test_stacks_bottom_to_top(example):
    stacks, moves = day05.parse(example(5))
    assert stacks == [["Z", "N"], ["M", "C", "D"], ["P"]]
    assert moves[0] == day05.Move(1, 2, 1)


def test_trailing_spaces_stripped():
    text = "    [D]\n[N] [C]\n[Z] [M] [P]\n 1   2   3\n\nmove 1 from 2 to 3\n"
    assert day05.part_one(text) == "NCD"
