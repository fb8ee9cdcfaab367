import pytest

from aoc2022.days import day10

CRT = """##..##..##..##..##..##..##..##..##..##..
###...###...###...###...###...###...###.
####....####....####....####....####....
#####.....#####.....#####.....#####.....
######......######......######......####
#######.......#######.......#######....."""


def test_part_one(example):
    assert day10.part_one(example(10)) == 13140


def test_part_two(example):
    assert day10.part_two(example(10)) == CRT


def test_register_during_cycle():
    values = list(day10.register_values(day10.parse("noop\naddx 3\naddx -5\n")))
    assert values == [1, 1, 1, 4, 4]


@pytest.mark.parametrize(
    "line, message",
    [
        ("jmp 3", "Invalid instruction"),
        ("addx", "Insufficient arguments"),
        ("addx x", "could not parse"),
    ],
)
def test_bad_instructions(line, message):
    with pytest.raises(ValueError, match=message):
        day10.Instruction.parse(line)


def test_too_few_cycles():
    with pytest.raises(RuntimeError):
        day10.part_one("noop\n")
