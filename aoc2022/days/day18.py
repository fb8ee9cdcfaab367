"""Day 18: Boiling Boulders."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Set, Tuple

from ..utils import ints

Cube = Tuple[int, int, int]

FACES = [(1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)]


def parse(text: str) -> Set[Cube]:
    cubes = set()
    for line in text.splitlines():
        if not line.strip():
            continue
        coords = ints(line)
        if len(coords) != 3:
            raise ValueError(f"Invalid cube: {line!r}")
        cubes.add((coords[0], coords[1], coords[2]))
    return cubes


def adjacent(cube: Cube) -> Iterator[Cube]:
    x, y, z = cube
    for dx, dy, dz in FACES:
        yield x + dx, y + dy, z + dz


def part_one(text: str) -> int:
    cubes = parse(text)
    return sum(1 for cube in cubes for side in adjacent(cube) if side not in cubes)


def part_two(text: str) -> int:
    cubes = parse(text)
    if not cubes:
        return 0

    # one unit of air around the droplet so the steam can flow all the way round
    lo = [min(c[i] for c in cubes) - 1 for i in range(3)]
    hi = [max(c[i] for c in cubes) + 1 for i in range(3)]

    def inside(cube: Cube) -> bool:
        return all(lo[i] <= cube[i] <= hi[i] for i in range(3))

    start = (lo[0], lo[1], lo[2])
    outside = {start}
    queue = deque([start])
    faces = 0
    while queue:
        current = queue.popleft()
        for side in adjacent(current):
            if side in cubes:
                faces += 1
            elif inside(side) and side not in outside:
                outside.add(side)
                queue.append(side)
    return faces
