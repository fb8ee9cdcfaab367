"""
Day 17: Pyroclastic Flow.

Rocks are dropped into a seven-wide chamber one at a time. The tower grows in
a repeating pattern once the rock shape, jet position and the shape of the
tower's surface line up again; that cycle is used to skip ahead.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Set, Tuple

logger = logging.getLogger(__name__)

WIDTH = 7
SPAWN_X = 2
SPAWN_GAP = 3
MAX_SIMULATED = 100_000

Shape = Tuple[Tuple[int, int], ...]

# offsets from the bottom-left corner, y grows upwards
ROCKS: List[Shape] = [
    ((0, 0), (1, 0), (2, 0), (3, 0)),
    ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),
    ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 0), (1, 0), (0, 1), (1, 1)),
]


def parse(text: str) -> List[int]:
    jets = []
    for ch in text.strip():
        if ch == "<":
            jets.append(-1)
        elif ch == ">":
            jets.append(1)
        else:
            raise ValueError(f"Invalid jet: {ch!r}")
    if not jets:
        raise ValueError("No jets in input")
    return jets


class Chamber:
    def __init__(self, jets: List[int]):
        self.jets = jets
        self.jet = 0
        self.dropped = 0
        self.cells: Set[Tuple[int, int]] = set()
        self.tops = [0] * WIDTH

    @property
    def height(self) -> int:
        return max(self.tops)

    def fits(self, shape: Shape, x: int, y: int) -> bool:
        for dx, dy in shape:
            cx, cy = x + dx, y + dy
            if not 0 <= cx < WIDTH or cy < 0 or (cx, cy) in self.cells:
                return False
        return True

    def drop(self) -> None:
        shape = ROCKS[self.dropped % len(ROCKS)]
        x, y = SPAWN_X, self.height + SPAWN_GAP
        while True:
            push = self.jets[self.jet]
            self.jet = (self.jet + 1) % len(self.jets)
            if self.fits(shape, x + push, y):
                x += push
            if not self.fits(shape, x, y - 1):
                break
            y -= 1

        for dx, dy in shape:
            self.cells.add((x + dx, y + dy))
            self.tops[x + dx] = max(self.tops[x + dx], y + dy + 1)
        self.dropped += 1

    def state(self) -> Tuple[int, int, Tuple[int, ...]]:
        """Rock index, jet index and the depth of each column below the top."""
        height = self.height
        return (
            self.dropped % len(ROCKS),
            self.jet,
            tuple(height - top for top in self.tops),
        )

    def render(self, rows: int = 20) -> str:
        height = self.height
        lines = []
        for y in range(height - 1, max(height - rows, 0) - 1, -1):
            row = "".join("#" if (x, y) in self.cells else "." for x in range(WIDTH))
            lines.append(f"|{row}|")
        return "\n".join(lines)


def tower_height(jets: List[int], rocks: int) -> int:
    chamber = Chamber(jets)
    heights = [0]
    seen: Dict[Tuple[int, int, Tuple[int, ...]], int] = {}

    while chamber.dropped < rocks:
        if chamber.dropped >= MAX_SIMULATED:
            raise RuntimeError(f"No cycle found within {MAX_SIMULATED} rocks")

        state = chamber.state()
        if state in seen:
            start = seen[state]
            period = chamber.dropped - start
            gain = chamber.height - heights[start]
            cycles, rest = divmod(rocks - chamber.dropped, period)
            logger.debug(
                "Cycle of %d rocks (+%d height) from rock %d; skipping %d cycles",
                period, gain, start, cycles,
            )
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Top of the tower:\n%s", chamber.render())
            return chamber.height + cycles * gain + heights[start + rest] - heights[start]
        seen[state] = chamber.dropped

        chamber.drop()
        heights.append(chamber.height)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Top of the tower:\n%s", chamber.render())
    return chamber.height


def part_one(text: str) -> int:
    return tower_height(parse(text), 2022)


def part_two(text: str) -> int:
    return tower_height(parse(text), 1_000_000_000_000)
