import pytest

from aoc2022.days import day22
from aoc2022.grid import Point


def test_part_one(example):
    assert day22.part_one(example(22)) == 6032


def test_part_two(example):
    assert day22.part_two(example(22)) == 5031


def test_parse_path(example):
    board, path = day22.parse(example(22))
    assert (board.width, board.height) == (16, 12)
    assert path == [10, "R", 5, "L", 5, "R", 10, "L", 4, "R", 5, "L", 5]


def test_cube_edge_wraps(example):
    board, _ = day22.parse(example(22))
    cube = day22.Cube(board)
    assert cube.side == 4
    # walking east off face 4 lands on face 6, heading south
    assert cube.step(Point(11, 5), day22.EAST) == (Point(14, 8), day22.SOUTH)
    # and walking down off face 5 comes up the bottom of face 2, heading north
    assert cube.step(Point(10, 11), day22.SOUTH) == (Point(1, 7), day22.NORTH)


def test_every_cube_step_reverses(example):
    board, _ = day22.parse(example(22))
    cube = day22.Cube(board)
    for tile in cube.position:
        for facing in range(4):
            ahead, heading = cube.step(tile, facing)
            back, _ = cube.step(ahead, (heading + 2) % 4)
            assert back == tile


def test_not_a_cube():
    with pytest.raises(ValueError):
        day22.part_two("...\n\n1\n")
