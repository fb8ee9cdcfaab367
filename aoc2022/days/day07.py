"""
Day 7: No Space Left On Device.

Assumes the terminal session lists every directory exactly once; a directory
listed twice would double count its files.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

TOTAL_CAPACITY = 70_000_000
SPACE_REQUIRED = 30_000_000
SMALL_DIR_LIMIT = 100_000


def parse(text: str) -> Dict[Tuple[str, ...], int]:
    """Cumulative size of every listed directory, keyed by path components."""
    cwd: List[str] = []
    sizes: Dict[Tuple[str, ...], int] = {}

    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue

        if parts[0] == "$":
            if len(parts) < 2:
                raise ValueError(f"Empty command: {line!r}")
            if parts[1] == "cd":
                if len(parts) != 3:
                    raise ValueError(f"cd needs one argument: {line!r}")
                target = parts[2]
                if target == "/":
                    cwd = []
                elif target == "..":
                    if cwd:
                        cwd.pop()
                else:
                    cwd.append(target)
            elif parts[1] == "ls":
                sizes.setdefault(tuple(cwd), 0)
            else:
                raise ValueError(f"Unknown command: {parts[1]!r}")
        elif parts[0] == "dir":
            continue
        else:
            try:
                size = int(parts[0])
            except ValueError:
                raise ValueError(f"Invalid listing entry: {line!r}")
            # the file counts towards this directory and every parent
            for depth in range(len(cwd) + 1):
                key = tuple(cwd[:depth])
                sizes[key] = sizes.get(key, 0) + size

    return sizes


def part_one(text: str) -> int:
    return sum(size for size in parse(text).values() if size <= SMALL_DIR_LIMIT)


def part_two(text: str) -> int:
    sizes = parse(text)
    used = sizes.get((), 0)
    if used > TOTAL_CAPACITY:
        raise RuntimeError(f"Using {used} which is more than the disk holds")
    needed = SPACE_REQUIRED - (TOTAL_CAPACITY - used)
    if needed <= 0:
        raise RuntimeError("Already enough free space for the update")
    return min(size for size in sizes.values() if size >= needed)
