"""Day 25: Full of Hot Air."""

from __future__ import annotations

from typing import Optional

DIGITS = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}
SYMBOLS = {v: k for k, v in DIGITS.items()}


def snafu_to_int(snafu: str) -> int:
    value = 0
    for ch in snafu:
        if ch not in DIGITS:
            raise ValueError(f"Invalid SNAFU digit {ch!r} in {snafu!r}")
        value = value * 5 + DIGITS[ch]
    return value


def int_to_snafu(value: int) -> str:
    if value == 0:
        return "0"
    if value < 0:
        raise ValueError(f"Cannot encode negative number {value}")

    digits = []
    while value:
        value, rem = divmod(value, 5)
        if rem > 2:
            # borrow from the next place
            rem -= 5
            value += 1
        digits.append(SYMBOLS[rem])
    return "".join(reversed(digits))


def part_one(text: str) -> str:
    return int_to_snafu(sum(snafu_to_int(line.strip()) for line in text.splitlines() if line.strip()))


def part_two(text: str) -> Optional[int]:
    """The last star comes free with the other 49."""
    return None
