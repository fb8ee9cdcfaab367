from typing import List, Tuple

Range = Tuple[int, int]


def elf_range(s: str) -> Range:
    start, _, end = s.partition("-")
    try:
        return int(start), int(end)
    except ValueError:
        raise ValueError(f"Invalid section range: {s!r}")


def parse(text: str) -> List[Tuple[Range, Range]]:
    pairs = []
    for line in text.splitlines():
        if not line.strip():
            continue
        first, sep, second = line.strip().partition(",")
        if not sep:
            raise ValueError(f"Invalid pair: {line!r}")
        pairs.append((elf_range(first), elf_range(second)))
    return pairs


def contains(a: Range, b: Range) -> bool:
    return a[0] <= b[0] and a[1] >= b[1]


def overlaps(a: Range, b: Range) -> bool:
    return a[0] <= b[1] and b[0] <= a[1]


def part_one(text: str) -> int:
    return sum(1 for a, b in parse(text) if contains(a, b) or contains(b, a))


def part_two(text: str) -> int:
    return sum(1 for a, b in parse(text) if overlaps(a, b))
