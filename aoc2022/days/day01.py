"""
Day 1: Calorie Counting.
"""

from typing import List

from ..utils import split_blocks


def parse(text: str) -> List[int]:
    """Total calories carried by each elf."""
    try:
        return [sum(int(line) for line in block) for block in split_blocks(text)]
    except ValueError as e:
        raise ValueError(f"Invalid calorie entry: {e}")


def part_one(text: str) -> int:
    return max(parse(text))


def part_two(text: str) -> int:
    return sum(sorted(parse(text), reverse=True)[:3])
