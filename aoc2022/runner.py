"""
Loading and timing of the per-day solutions.

Every day module exposes ``part_one(text)`` and ``part_two(text)``. A module
may also declare ``EXAMPLE_ARGS`` with keyword overrides used when solving
the published example instead of the real input (e.g. a smaller search row).
"""

from __future__ import annotations

import importlib
import logging
import time
from dataclasses import dataclass
from types import ModuleType
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

Answer = Optional[Union[int, str]]

PARTS: Dict[int, str] = {1: "part_one", 2: "part_two"}
LAST_DAY = 25


@dataclass
class PartResult:
    """Answer and timing for one part of one day."""
    day: int
    part: int
    answer: Answer
    elapsed: float               # seconds


def load_day(day: int) -> ModuleType:
    """Import ``aoc2022.days.dayNN``."""
    if not 1 <= day <= LAST_DAY:
        raise ValueError(f"Unknown day: {day} (expected 1-{LAST_DAY})")
    name = f"aoc2022.days.day{day:02d}"
    try:
        return importlib.import_module(name)
    except ModuleNotFoundError as e:
        if e.name != name:
            raise
        raise ValueError(f"Day {day} is not implemented") from e


def available_days() -> List[int]:
    days = []
    for day in range(1, LAST_DAY + 1):
        try:
            load_day(day)
        except ValueError:
            continue
        days.append(day)
    return days


def solve_part(day: int, part: int, text: str, example: bool = False) -> PartResult:
    """
    Run one part of a day against puzzle text.

    Args:
        day: Day number (1-25)
        part: 1 or 2
        text: Raw puzzle text
        example: Apply the module's EXAMPLE_ARGS overrides

    Returns:
        PartResult with the answer and elapsed wall time
    """
    if part not in PARTS:
        raise ValueError(f"Unknown part: {part} (expected 1 or 2)")
    module = load_day(day)
    func = getattr(module, PARTS[part])
    kwargs = getattr(module, "EXAMPLE_ARGS", {}).get(PARTS[part], {}) if example else {}

    logger.debug("Solving day %d part %d (example=%s, overrides=%s)", day, part, example, kwargs)
    start = time.perf_counter()
    answer = func(text, **kwargs)
    elapsed = time.perf_counter() - start
    logger.info("Day %d part %d solved in %s", day, part, format_elapsed(elapsed))

    return PartResult(day=day, part=part, answer=answer, elapsed=elapsed)


def format_elapsed(seconds: float) -> str:
    if seconds < 1e-6:
        return f"{seconds * 1e9:.0f}ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"
