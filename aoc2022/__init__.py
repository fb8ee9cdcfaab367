"""
Advent of Code 2022 - Solutions for all 25 days.
"""

from .grid import Grid, Point
from .runner import PartResult, available_days, load_day, solve_part
from .utils import read_file, split_blocks, ints

__all__ = [
    "Grid",
    "Point",
    "PartResult",
    "available_days",
    "load_day",
    "solve_part",
    "read_file",
    "split_blocks",
    "ints",
]
