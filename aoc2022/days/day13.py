"""
Day 13: Distress Signal.

Packets are valid JSON arrays, so they are decoded with orjson and compared
with a three-way comparison that follows the puzzle's ordering rules.
"""

from __future__ import annotations

from functools import cmp_to_key
from math import prod
from typing import List, Union

import orjson

Packet = Union[int, List["Packet"]]

DIVIDERS: List[Packet] = [[[2]], [[6]]]


def compare(left: Packet, right: Packet) -> int:
    """Negative when left comes first, positive when right does, 0 if undecided."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]

    for lhs, rhs in zip(left, right):
        result = compare(lhs, rhs)
        if result:
            return result
    # ran out of items on one side
    return (len(left) > len(right)) - (len(left) < len(right))


def parse_packet(line: str) -> Packet:
    try:
        packet = orjson.loads(line)
    except orjson.JSONDecodeError as e:
        raise ValueError(f"Invalid packet {line!r}: {e}")
    if not isinstance(packet, list):
        raise ValueError(f"Packet must be a list: {line!r}")
    return packet


def parse(text: str) -> List[Packet]:
    return [parse_packet(line.strip()) for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    packets = parse(text)
    if len(packets) % 2:
        raise ValueError("Packets must come in pairs")
    return sum(
        i + 1
        for i, (left, right) in enumerate(zip(packets[::2], packets[1::2]))
        if compare(left, right) < 0
    )


def part_two(text: str) -> int:
    packets = sorted(parse(text) + DIVIDERS, key=cmp_to_key(compare))
    return prod(packets.index(divider) + 1 for divider in DIVIDERS)
