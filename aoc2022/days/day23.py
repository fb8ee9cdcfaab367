"""Day 23: Unstable Diffusion."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Set, Tuple

logger = logging.getLogger(__name__)

Elf = Tuple[int, int]

NEIGHBOURS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if dx or dy]

# direction to move, and the three cells that must be empty to move there
PROPOSALS: List[Tuple[Elf, List[Elf]]] = [
    ((0, -1), [(-1, -1), (0, -1), (1, -1)]),
    ((0, 1), [(-1, 1), (0, 1), (1, 1)]),
    ((-1, 0), [(-1, -1), (-1, 0), (-1, 1)]),
    ((1, 0), [(1, -1), (1, 0), (1, 1)]),
]


def parse(text: str) -> Set[Elf]:
    elves = set()
    for y, line in enumerate(text.strip().splitlines()):
        for x, ch in enumerate(line.strip()):
            if ch == "#":
                elves.add((x, y))
            elif ch != ".":
                raise ValueError(f"Invalid ground tile: {ch!r}")
    return elves


def spread(elves: Set[Elf], round_index: int) -> Set[Elf]:
    """Play one round; the first direction considered rotates with the round."""
    proposals: Dict[Elf, Elf] = {}
    for x, y in elves:
        if not any((x + dx, y + dy) in elves for dx, dy in NEIGHBOURS):
            continue
        for k in range(4):
            (mx, my), checks = PROPOSALS[(round_index + k) % 4]
            if not any((x + dx, y + dy) in elves for dx, dy in checks):
                proposals[(x, y)] = (x + mx, y + my)
                break

    wanted = Counter(proposals.values())
    return {
        proposals[elf] if elf in proposals and wanted[proposals[elf]] == 1 else elf
        for elf in elves
    }


def render(elves: Set[Elf]) -> str:
    xs = [x for x, _ in elves]
    ys = [y for _, y in elves]
    return "\n".join(
        "".join("#" if (x, y) in elves else "." for x in range(min(xs), max(xs) + 1))
        for y in range(min(ys), max(ys) + 1)
    )


def empty_ground(elves: Set[Elf]) -> int:
    xs = [x for x, _ in elves]
    ys = [y for _, y in elves]
    return (max(xs) - min(xs) + 1) * (max(ys) - min(ys) + 1) - len(elves)


def part_one(text: str) -> int:
    elves = parse(text)
    if not elves:
        return 0
    for round_index in range(10):
        elves = spread(elves, round_index)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Elves after 10 rounds:\n%s", render(elves))
    return empty_ground(elves)


def part_two(text: str) -> int:
    elves = parse(text)
    round_index = 0
    while True:
        moved = spread(elves, round_index)
        round_index += 1
        if moved == elves:
            return round_index
        elves = moved
