from typing import Iterable, List


def priority(item: str) -> int:
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise ValueError(f"Not an item key: {item!r}")


def parse(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def common_item(groups: Iterable[str]) -> str:
    common = set.intersection(*(set(g) for g in groups))
    if len(common) != 1:
        raise ValueError(f"Expected exactly one shared item, found {sorted(common)}")
    return common.pop()


def part_one(text: str) -> int:
    total = 0
    for sack in parse(text):
        if len(sack) % 2:
            raise ValueError(f"Rucksack has an odd number of items: {sack!r}")
        half = len(sack) // 2
        total += priority(common_item([sack[:half], sack[half:]]))
    return total


def part_two(text: str) -> int:
    sacks = parse(text)
    if len(sacks) % 3:
        raise ValueError(f"Expected groups of three rucksacks, got {len(sacks)} lines")
    return sum(priority(common_item(sacks[i:i + 3])) for i in range(0, len(sacks), 3))
