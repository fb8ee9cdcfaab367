"""
Day 24: Blizzard Basin.

Blizzards move in straight lines and wrap within the walls, so whether a cell
is covered at minute ``t`` follows directly from the starting map. The search
keeps the set of every cell the expedition could be in at each minute.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Set, Tuple

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

MOVES = [(0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)]

# a search that has not reached the goal after this many minutes never will
MAX_MINUTES = 100_000


@dataclass
class Valley:
    """The inside of the walls; rows and columns are 0-based within them."""

    width: int
    height: int
    rows: List[str]

    @property
    def start(self) -> Cell:
        return (0, -1)

    @property
    def end(self) -> Cell:
        return (self.width - 1, self.height)

    def is_clear(self, cell: Cell, t: int) -> bool:
        x, y = cell
        if cell in (self.start, self.end):
            return True
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        w, h = self.width, self.height
        # look back along each line for the blizzard that would be here now
        return not (
            self.rows[y][(x - t) % w] == ">"
            or self.rows[y][(x + t) % w] == "<"
            or self.rows[(y - t) % h][x] == "v"
            or self.rows[(y + t) % h][x] == "^"
        )


def parse(text: str) -> Valley:
    lines = [line.strip() for line in text.strip().splitlines()]
    if len(lines) < 3:
        raise ValueError("Valley must have walls above and below")
    inner = [line[1:-1] for line in lines[1:-1]]
    width = len(inner[0])
    for row in inner:
        if len(row) != width:
            raise ValueError("Valley rows are of unequal length")
        for ch in row:
            if ch not in ".<>^v":
                raise ValueError(f"Invalid valley tile: {ch!r}")
    if lines[0][1] != "." or lines[-1][-2] != ".":
        raise ValueError("Entrance must be top-left and exit bottom-right")
    return Valley(width, len(inner), inner)


def crossing(valley: Valley, source: Cell, target: Cell, t: int) -> int:
    """Minute at which ``target`` is first reached, leaving ``source`` at ``t``."""
    frontier: Set[Cell] = {source}
    while target not in frontier:
        if t >= MAX_MINUTES:
            raise RuntimeError(f"No route from {source} to {target}")
        t += 1
        frontier = {
            (x + dx, y + dy)
            for x, y in frontier
            for dx, dy in MOVES
            if valley.is_clear((x + dx, y + dy), t)
        }
        if not frontier:
            raise RuntimeError(f"Expedition trapped at minute {t}")
    logger.debug("Reached %s at minute %d", target, t)
    return t


def part_one(text: str) -> int:
    valley = parse(text)
    return crossing(valley, valley.start, valley.end, 0)


def part_two(text: str) -> int:
    valley = parse(text)
    t = crossing(valley, valley.start, valley.end, 0)
    t = crossing(valley, valley.end, valley.start, t)
    return crossing(valley, valley.start, valley.end, t)
