"""
Day 9: Rope Bridge.

Each knot chases the one in front of it: whenever it falls more than one
cell behind it takes a single step (diagonal if needed) towards it. The head
starts at the origin and y grows downwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

logger = logging.getLogger(__name__)

Knot = Tuple[int, int]

DIRECTIONS: Dict[str, Knot] = {
    "U": (0, -1),
    "D": (0, 1),
    "L": (-1, 0),
    "R": (1, 0),
}

WINDOW_SIZE = 20


@dataclass
class Move:
    direction: str
    steps: int

    @classmethod
    def parse(cls, line: str) -> "Move":
        parts = line.split()
        if len(parts) != 2 or parts[0] not in DIRECTIONS:
            raise ValueError(f"Invalid move: {line!r}")
        try:
            return cls(parts[0], int(parts[1]))
        except ValueError:
            raise ValueError(f"Invalid step count: {line!r}")

    def __str__(self) -> str:
        return f"{self.direction} {self.steps}"


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


class Rope:
    def __init__(self, knots: int):
        if knots < 2:
            raise ValueError("A rope needs at least a head and a tail")
        self.knots: List[Knot] = [(0, 0)] * knots
        self.tail_visits: Set[Knot] = {(0, 0)}

    @property
    def head(self) -> Knot:
        return self.knots[0]

    @property
    def tail(self) -> Knot:
        return self.knots[-1]

    def step(self, direction: str) -> None:
        dx, dy = DIRECTIONS[direction]
        hx, hy = self.knots[0]
        self.knots[0] = (hx + dx, hy + dy)

        for i in range(1, len(self.knots)):
            (lx, ly), (kx, ky) = self.knots[i - 1], self.knots[i]
            dx, dy = lx - kx, ly - ky
            if abs(dx) <= 1 and abs(dy) <= 1:
                # touching; nothing further down the rope moves either
                break
            self.knots[i] = (kx + _sign(dx), ky + _sign(dy))

        self.tail_visits.add(self.knots[-1])

    def apply(self, move: Move) -> None:
        for _ in range(move.steps):
            self.step(move.direction)

    def render_around(self, centre: Knot) -> str:
        """Picture of the rope in a window around `centre`."""
        size = max(WINDOW_SIZE, len(self.knots))
        positions = {}
        for i in reversed(range(len(self.knots))):
            positions[self.knots[i]] = str(i)
        positions[self.tail] = "T"
        positions[self.head] = "H"

        cx, cy = centre
        rows = []
        for y in range(cy - size, cy + size + 1):
            row = []
            for x in range(cx - size, cx + size + 1):
                if (x, y) in positions:
                    row.append(positions[(x, y)])
                elif (x, y) in self.tail_visits:
                    row.append("#")
                else:
                    row.append(".")
            rows.append("".join(row))
        return "\n".join(rows) + f"\ntail visits: {len(self.tail_visits)}"


def parse(text: str) -> List[Move]:
    return [Move.parse(line) for line in text.splitlines() if line.strip()]


def simulate(text: str, knots: int) -> int:
    rope = Rope(knots)
    for move in parse(text):
        rope.apply(move)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s\n%s", move, rope.render_around(rope.head))
    return len(rope.tail_visits)


def part_one(text: str) -> int:
    return simulate(text, 2)


def part_two(text: str) -> int:
    return simulate(text, 10)
