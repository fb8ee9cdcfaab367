"""
Day 5: Supply Stacks.

The drawing is parsed column-wise: crate letters sit at character offset 1
and then every 4 characters. Stacks are stored bottom-to-top so the top crate
is the last element.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

MOVE_RE = re.compile(r"^move (\d+) from (\d+) to (\d+)$")


@dataclass
class Move:
    quantity: int
    source: int                  # 1-based stack number
    target: int


def parse(text: str) -> Tuple[List[List[str]], List[Move]]:
    drawing: List[str] = []
    moves: List[Move] = []
    labels = 0

    for line in text.splitlines():
        if line.startswith("move"):
            match = MOVE_RE.match(line.strip())
            if not match:
                raise ValueError(f"Invalid move: {line!r}")
            moves.append(Move(*(int(g) for g in match.groups())))
        elif line.strip().startswith("1"):
            # stack labels; editors may strip trailing spaces from the crates above
            labels = len(line.split())
        elif line.strip():
            drawing.append(line)

    width = max((len(line) for line in drawing), default=0)
    stacks: List[List[str]] = [[] for _ in range(max(labels, (width + 2) // 4))]
    for line in reversed(drawing):
        for i, pos in enumerate(range(1, len(line), 4)):
            if line[pos] != " ":
                stacks[i].append(line[pos])

    return stacks, moves


def _apply(stacks: List[List[str]], move: Move, keep_order: bool) -> None:
    source, target = stacks[move.source - 1], stacks[move.target - 1]
    if move.quantity > len(source):
        raise ValueError(f"Cannot move {move.quantity} crates from stack {move.source}")
    lifted = source[len(source) - move.quantity:]
    del source[len(source) - move.quantity:]
    target.extend(lifted if keep_order else reversed(lifted))


def _tops(stacks: List[List[str]]) -> str:
    return "".join(stack[-1] for stack in stacks if stack)


def part_one(text: str) -> str:
    stacks, moves = parse(text)
    for move in moves:
        _apply(stacks, move, keep_order=False)
    return _tops(stacks)


def part_two(text: str) -> str:
    stacks, moves = parse(text)
    for move in moves:
        _apply(stacks, move, keep_order=True)
    return _tops(stacks)
