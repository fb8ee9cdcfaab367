import pytest

from aoc2022.days import day02
from aoc2022.days.day02 import Move, Outcome


def test_part_one(example):
    assert day02.part_one(example(2)) == 15


def test_part_two(example):
    assert day02.part_two(example(2)) == 12


def test_outcomes():
    assert Move.ROCK.outcome_with(Move.SCISSORS) == Outcome.WIN
    assert Move.ROCK.outcome_with(Move.PAPER) == Outcome.LOSS
    assert Move.PAPER.outcome_with(Move.PAPER) == Outcome.DRAW


def test_move_for_outcome():
    assert day02.our_move_for(Move.ROCK, Outcome.WIN) == Move.PAPER
    assert day02.our_move_for(Move.SCISSORS, Outcome.LOSS) == Move.PAPER


def test_unknown_key():
    with pytest.raises(ValueError, match="Invalid move key"):
        day02.part_one("A Q\n")
