"""Day 20: Grove Positioning System."""

from __future__ import annotations

from typing import List

DECRYPTION_KEY = 811589153
GROVE_OFFSETS = (1000, 2000, 3000)


def parse(text: str) -> List[int]:
    try:
        return [int(line) for line in text.split()]
    except ValueError as e:
        raise ValueError(f"Invalid number in file: {e}")


def mix(numbers: List[int], rounds: int = 1) -> List[int]:
    """
    Move every number forward or back by its own value, in original order.

    A number moving around the circle passes the n - 1 others, so shifts are
    taken modulo n - 1.

    Args:
        numbers: the encrypted file
        rounds: how many times to mix

    Returns:
        The mixed file, rotated arbitrarily.
    """
    n = len(numbers)
    order = list(range(n))
    if n < 2:
        return list(numbers)

    for _ in range(rounds):
        for original, value in enumerate(numbers):
            pos = order.index(original)
            order.pop(pos)
            order.insert((pos + value) % (n - 1), original)

    return [numbers[i] for i in order]


def grove_coordinates(mixed: List[int]) -> int:
    if 0 not in mixed:
        raise ValueError("File does not contain 0")
    zero = mixed.index(0)
    return sum(mixed[(zero + offset) % len(mixed)] for offset in GROVE_OFFSETS)


def part_one(text: str) -> int:
    return grove_coordinates(mix(parse(text)))


def part_two(text: str) -> int:
    numbers = [n * DECRYPTION_KEY for n in parse(text)]
    return grove_coordinates(mix(numbers, rounds=10))
