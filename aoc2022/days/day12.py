"""
Day 12: Hill Climbing Algorithm.

A* over the height map with a Manhattan-distance heuristic to the summit.
Every step costs 1; the search accepts several start cells so part two can
seed it with every lowest square at once.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..grid import Grid, Point


@dataclass
class HeightMap:
    heights: Grid[int]
    start: Point
    end: Point

    def can_move(self, frm: Point, to: Point) -> bool:
        # any drop is fine, climbing at most one level
        return self.heights[to] - self.heights[frm] <= 1


def elevation(ch: str) -> int:
    if ch == "S":
        ch = "a"
    elif ch == "E":
        ch = "z"
    if not "a" <= ch <= "z":
        raise ValueError(f"Invalid elevation: {ch!r}")
    return ord(ch) - ord("a")


def parse(text: str) -> HeightMap:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len({len(line) for line in lines}) > 1:
        raise ValueError("Map lines are of unequal length")

    start: Optional[Point] = None
    end: Optional[Point] = None
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if ch == "S":
                if start is not None:
                    raise ValueError("Multiple starting positions found")
                start = Point(x, y)
            elif ch == "E":
                if end is not None:
                    raise ValueError("Multiple ending positions found")
                end = Point(x, y)

    if start is None:
        raise ValueError("Missing start")
    if end is None:
        raise ValueError("Missing end")

    return HeightMap(Grid.from_lines(lines, elevation, fill=0), start, end)


def astar(hmap: HeightMap, sources: Iterable[Point]) -> Optional[int]:
    """Fewest steps from any source to the end, or None when unreachable."""
    g: Dict[Point, int] = {}
    fringe: List[tuple] = []
    counter = 0

    for source in sources:
        g[source] = 0
        heapq.heappush(fringe, (source.manhattan(hmap.end), counter, source))
        counter += 1

    while fringe:
        _, _, current = heapq.heappop(fringe)
        if current == hmap.end:
            return g[current]

        for neighbour in hmap.heights.neighbours(current):
            if not hmap.can_move(current, neighbour):
                continue
            score = g[current] + 1
            if score < g.get(neighbour, score + 1):
                g[neighbour] = score
                heapq.heappush(
                    fringe, (score + neighbour.manhattan(hmap.end), counter, neighbour)
                )
                counter += 1

    return None


def part_one(text: str) -> Optional[int]:
    hmap = parse(text)
    return astar(hmap, [hmap.start])


def part_two(text: str) -> Optional[int]:
    hmap = parse(text)
    lowest = [p for p in hmap.heights.points() if hmap.heights[p] == 0]
    return astar(hmap, lowest)
