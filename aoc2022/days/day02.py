"""
Day 2: Rock Paper Scissors.

In part one the second column is our move; in part two it is the outcome we
need, and we pick whichever move produces it.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple


class Move(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @classmethod
    def from_key(cls, key: str) -> "Move":
        moves = {
            "A": cls.ROCK, "X": cls.ROCK,
            "B": cls.PAPER, "Y": cls.PAPER,
            "C": cls.SCISSORS, "Z": cls.SCISSORS,
        }
        if key not in moves:
            raise ValueError(f"Invalid move key: {key!r}")
        return moves[key]

    @property
    def score(self) -> int:
        return self.value

    def beats(self) -> "Move":
        """The move this one defeats."""
        return {
            Move.ROCK: Move.SCISSORS,
            Move.PAPER: Move.ROCK,
            Move.SCISSORS: Move.PAPER,
        }[self]

    def outcome_with(self, other: "Move") -> "Outcome":
        if self == other:
            return Outcome.DRAW
        return Outcome.WIN if self.beats() == other else Outcome.LOSS


class Outcome(Enum):
    LOSS = 0
    DRAW = 3
    WIN = 6

    @classmethod
    def from_key(cls, key: str) -> "Outcome":
        outcomes = {"X": cls.LOSS, "Y": cls.DRAW, "Z": cls.WIN}
        if key not in outcomes:
            raise ValueError(f"Invalid outcome key: {key!r}")
        return outcomes[key]

    @property
    def score(self) -> int:
        return self.value


def parse(text: str) -> List[Tuple[str, str]]:
    rounds = []
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Invalid round: {line!r}")
        rounds.append((parts[0], parts[1]))
    return rounds


def our_move_for(them: Move, desired: Outcome) -> Move:
    for move in Move:
        if move.outcome_with(them) == desired:
            return move
    raise RuntimeError(f"No move gives {desired.name} against {them.name}")


def part_one(text: str) -> int:
    total = 0
    for them_key, us_key in parse(text):
        them, us = Move.from_key(them_key), Move.from_key(us_key)
        total += us.score + us.outcome_with(them).score
    return total


def part_two(text: str) -> int:
    total = 0
    for them_key, outcome_key in parse(text):
        them, desired = Move.from_key(them_key), Outcome.from_key(outcome_key)
        total += our_move_for(them, desired).score + desired.score
    return total
