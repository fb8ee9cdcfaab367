"""
Day 15: Beacon Exclusion Zone.

Each sensor rules out a Manhattan-distance diamond. Part one merges the
diamonds' slices through a single row. Part two relies on the lone uncovered
position sitting just outside several diamonds: it must lie where a line one
step beyond one sensor's edge crosses a line one step beyond another's, or
where such a line meets the edge of the search area.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from ..grid import Point

logger = logging.getLogger(__name__)

SEARCH_ROW = 2_000_000
SEARCH_LIMIT = 4_000_000
TUNING_MULTIPLIER = 4_000_000

EXAMPLE_ARGS = {
    "part_one": {"row": 10},
    "part_two": {"limit": 20},
}

LINE_RE = re.compile(
    r"^Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)$"
)


@dataclass
class Detection:
    sensor: Point
    beacon: Point

    @property
    def radius(self) -> int:
        return self.sensor.manhattan(self.beacon)

    def covers(self, point: Point) -> bool:
        return self.sensor.manhattan(point) <= self.radius


def parse(text: str) -> List[Detection]:
    detections = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = LINE_RE.match(line.strip())
        if not match:
            raise ValueError(f"Invalid sensor report: {line!r}")
        sx, sy, bx, by = (int(g) for g in match.groups())
        detections.append(Detection(Point(sx, sy), Point(bx, by)))
    return detections


def merge(intervals: Iterable[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """Merge inclusive integer intervals, joining ones that touch."""
    merged: List[Tuple[int, int]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def coverage(detections: List[Detection], row: int) -> List[Tuple[int, int]]:
    intervals = []
    for d in detections:
        reach = d.radius - abs(d.sensor.y - row)
        if reach >= 0:
            intervals.append((d.sensor.x - reach, d.sensor.x + reach))
    return merge(intervals)


def part_one(text: str, row: int = SEARCH_ROW) -> int:
    detections = parse(text)
    regions = coverage(detections, row)
    logger.debug("Row %d covered by %s", row, regions)

    covered = sum(end - start + 1 for start, end in regions)
    beacons_in_row: Set[int] = {d.beacon.x for d in detections if d.beacon.y == row}
    covered -= sum(1 for x in beacons_in_row if any(s <= x <= e for s, e in regions))
    return covered


def candidates(detections: List[Detection], limit: int) -> Iterable[Point]:
    rising: Set[int] = set()   # y - x = c
    falling: Set[int] = set()  # y + x = c
    for d in detections:
        r = d.radius + 1
        sx, sy = d.sensor.x, d.sensor.y
        rising.update((sy - sx + r, sy - sx - r))
        falling.update((sy + sx + r, sy + sx - r))

    def inside(point: Point) -> bool:
        return 0 <= point.x <= limit and 0 <= point.y <= limit

    for a in rising:
        for b in falling:
            if (a + b) % 2:
                continue
            point = Point((b - a) // 2, (a + b) // 2)
            if inside(point):
                yield point

    # a gap on the edge of the area may be bounded by one line and the edge
    for a in rising:
        edges = (Point(0, a), Point(limit, a + limit), Point(-a, 0), Point(limit - a, limit))
        yield from filter(inside, edges)
    for b in falling:
        edges = (Point(0, b), Point(limit, b - limit), Point(b, 0), Point(b - limit, limit))
        yield from filter(inside, edges)

    # corners of the search area are not on any line
    yield from (Point(0, 0), Point(0, limit), Point(limit, 0), Point(limit, limit))


def part_two(text: str, limit: int = SEARCH_LIMIT) -> Optional[int]:
    detections = parse(text)
    for point in candidates(detections, limit):
        if not any(d.covers(point) for d in detections):
            logger.debug("Distress beacon at %s", point)
            return point.x * TUNING_MULTIPLIER + point.y
    return None
