"""
Day 14: Regolith Reservoir.

The whole cave is modelled as a Grid and sand is simulated grain by grain,
only writing to the grid when a grain comes to rest.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..grid import Grid, Point

logger = logging.getLogger(__name__)

SPIGOT = Point(500, 0)


class Space(Enum):
    AIR = "."
    ROCK = "#"
    SAND = "o"

    def __str__(self) -> str:
        return self.value


Path = List[Point]


def parse(text: str) -> List[Path]:
    return [
        [Point.parse(p.strip()) for p in line.split("->")]
        for line in text.splitlines()
        if line.strip()
    ]


def draw_cave(paths: List[Path], with_floor: bool) -> Tuple[Grid[Space], Callable[[int, int], Point]]:
    """
    Lay the rock paths onto a grid just large enough for the sand.
    Returns the grid and a function mapping cave coordinates to grid points.
    """
    points = [p for path in paths for p in path] + [SPIGOT]
    min_x = min(p.x for p in points)
    max_x = max(p.x for p in points)
    max_y = max(p.y for p in points)

    if with_floor:
        # sand piles into a triangle no wider than the floor depth either side
        max_y += 2
        min_x = min(min_x, SPIGOT.x - max_y - 1)
        max_x = max(max_x, SPIGOT.x + max_y + 1)

    grid = Grid(max_x - min_x + 1, max_y + 1, Space.AIR)

    def make_point(x: int, y: int) -> Point:
        return Point(x - min_x, y)

    if with_floor:
        for x in range(grid.width):
            grid[Point(x, max_y)] = Space.ROCK

    for path in paths:
        for frm, to in zip(path, path[1:]):
            if frm == to or (frm.x != to.x and frm.y != to.y):
                raise ValueError(f"Rock segment {frm} -> {to} is not a straight line")
            for x in range(min(frm.x, to.x), max(frm.x, to.x) + 1):
                for y in range(min(frm.y, to.y), max(frm.y, to.y) + 1):
                    grid[make_point(x, y)] = Space.ROCK

    return grid, make_point


def add_grain(grid: Grid[Space], source: Point) -> Optional[Point]:
    """Drop one grain; returns where it settles, or None if the source is blocked or it falls out."""
    if grid[source] != Space.AIR:
        return None

    sand = source
    while True:
        for dx in (0, -1, 1):
            candidate = Point(sand.x + dx, sand.y + 1)
            if not grid.in_bounds(candidate):
                # flows out of the cave into the abyss
                return None
            if grid[candidate] == Space.AIR:
                sand = candidate
                break
        else:
            grid[sand] = Space.SAND
            return sand


def pour(text: str, with_floor: bool) -> int:
    grid, make_point = draw_cave(parse(text), with_floor)
    source = make_point(SPIGOT.x, SPIGOT.y)
    grains = 0
    while add_grain(grid, source) is not None:
        grains += 1

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Cave after %d grains:\n%s", grains, grid.render())
    return grains


def part_one(text: str) -> int:
    return pour(text, with_floor=False)


def part_two(text: str) -> int:
    return pour(text, with_floor=True)
