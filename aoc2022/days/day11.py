"""
Day 11: Monkey in the Middle.

Part two never divides the worry level, so the numbers grow without bound.
Only divisibility by each monkey's test matters, and that is preserved when
working modulo the least common multiple of all the test divisors.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..utils import split_blocks

OPERATORS = {"+": operator.add, "*": operator.mul}


@dataclass
class Monkey:
    items: List[int]
    op: Callable[[int, int], int]
    operand: Optional[int]       # None means "old"
    test: int
    if_true: int
    if_false: int
    inspected: int = field(default=0)

    def inspect(self, old: int) -> int:
        self.inspected += 1
        return self.op(old, old if self.operand is None else self.operand)

    def target(self, worry: int) -> int:
        return self.if_true if worry % self.test == 0 else self.if_false


def _field(line: str, prefix: str) -> str:
    line = line.strip()
    if not line.startswith(prefix):
        raise ValueError(f"Expected {prefix!r}, got {line!r}")
    return line[len(prefix):].strip()


def parse_monkey(block: List[str]) -> Monkey:
    if len(block) != 6:
        raise ValueError(f"Monkey description should have 6 lines, got {len(block)}")

    items_text = _field(block[1], "Starting items:")
    items = [int(x) for x in items_text.split(",")] if items_text else []

    tokens = _field(block[2], "Operation: new = old").split()
    if len(tokens) != 2 or tokens[0] not in OPERATORS:
        raise ValueError(f"Unknown operation: {block[2].strip()!r}")
    operand = None if tokens[1] == "old" else int(tokens[1])

    return Monkey(
        items=items,
        op=OPERATORS[tokens[0]],
        operand=operand,
        test=int(_field(block[3], "Test: divisible by")),
        if_true=int(_field(block[4], "If true: throw to monkey")),
        if_false=int(_field(block[5], "If false: throw to monkey")),
    )


def parse(text: str) -> List[Monkey]:
    return [parse_monkey(block) for block in split_blocks(text)]


def play(monkeys: List[Monkey], rounds: int, relief: Callable[[int], int]) -> int:
    """Run the rounds and return the level of monkey business."""
    for _ in range(rounds):
        for monkey in monkeys:
            items, monkey.items = monkey.items, []
            for item in items:
                worry = relief(monkey.inspect(item))
                monkeys[monkey.target(worry)].items.append(worry)

    busiest = sorted((m.inspected for m in monkeys), reverse=True)
    return busiest[0] * busiest[1]


def part_one(text: str) -> int:
    return play(parse(text), 20, lambda worry: worry // 3)


def part_two(text: str) -> int:
    monkeys = parse(text)
    modulus = math.lcm(*(m.test for m in monkeys))
    return play(monkeys, 10_000, lambda worry: worry % modulus)
