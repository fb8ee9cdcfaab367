"""
Day 10: Cathode-Ray Tube.

Cycles are counted from 1 and the signal strength uses X *during* the cycle,
i.e. before an ``addx`` completes. CRT pixels are counted from 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)

CRT_WIDTH = 40
CRT_ROWS = 6
SCORE_CYCLES = range(20, 221, 40)


@dataclass
class Instruction:
    op: str
    arg: Optional[int] = None

    @property
    def ticks(self) -> int:
        return 2 if self.op == "addx" else 1

    @classmethod
    def parse(cls, line: str) -> "Instruction":
        parts = line.split()
        if not parts:
            raise ValueError("Empty instruction")
        if parts[0] == "noop":
            return cls("noop")
        if parts[0] == "addx":
            if len(parts) < 2:
                raise ValueError(f"Insufficient arguments for instruction: {line!r}")
            try:
                return cls("addx", int(parts[1]))
            except ValueError:
                raise ValueError(f"Arguments could not parse: {line!r}")
        raise ValueError(f"Invalid instruction: {line!r}")


def parse(text: str) -> List[Instruction]:
    return [Instruction.parse(line) for line in text.splitlines() if line.strip()]


def register_values(instructions: List[Instruction]) -> Iterator[int]:
    """Value of X during each cycle, starting with cycle 1."""
    x = 1
    for instruction in instructions:
        for _ in range(instruction.ticks):
            yield x
        if instruction.op == "addx":
            x += instruction.arg


def part_one(text: str) -> int:
    values = list(register_values(parse(text)))
    if len(values) < SCORE_CYCLES[-1]:
        raise RuntimeError(f"Ran out of instructions after {len(values)} cycles")
    return sum(cycle * values[cycle - 1] for cycle in SCORE_CYCLES)


def part_two(text: str) -> str:
    pixels = ["."] * (CRT_WIDTH * CRT_ROWS)
    for i, x in enumerate(register_values(parse(text))):
        # the sprite is three pixels wide, centred on X
        pixels[i % len(pixels)] = "#" if abs(i % CRT_WIDTH - x) <= 1 else "."

    crt = "\n".join(
        "".join(pixels[row * CRT_WIDTH:(row + 1) * CRT_WIDTH]) for row in range(CRT_ROWS)
    )
    logger.debug("CRT:\n%s", crt)
    return crt
