"""
Day 21: Monkey Math.

Monkeys form an expression tree rooted at ``root``. Part two asks for the
value of ``humn`` that makes both sides of ``root`` equal; since ``humn``
appears in exactly one branch, the other side is a constant and each
operation on the way down can be undone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

ROOT = "root"
HUMAN = "humn"

OPERATORS = {"+", "-", "*", "/"}


@dataclass
class Operation:
    left: str
    op: str
    right: str


Job = Union[int, Operation]


def parse(text: str) -> Dict[str, Job]:
    monkeys: Dict[str, Job] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        name, _, job = line.partition(":")
        tokens = job.split()
        if len(tokens) == 1:
            try:
                monkeys[name.strip()] = int(tokens[0])
            except ValueError:
                raise ValueError(f"Invalid number for monkey {name.strip()}: {tokens[0]!r}")
        elif len(tokens) == 3 and tokens[1] in OPERATORS:
            monkeys[name.strip()] = Operation(tokens[0], tokens[1], tokens[2])
        else:
            raise ValueError(f"Invalid monkey job: {line!r}")

    if ROOT not in monkeys:
        raise ValueError("No root monkey")
    return monkeys


def apply(op: str, a: int, b: int) -> int:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    return a // b


class Troop:
    def __init__(self, monkeys: Dict[str, Job]):
        self.monkeys = monkeys
        self._values: Dict[str, int] = {}
        self._has_human: Dict[str, bool] = {}

    def job(self, name: str) -> Job:
        try:
            return self.monkeys[name]
        except KeyError:
            raise ValueError(f"Unknown monkey {name!r}")

    def value(self, name: str) -> int:
        if name not in self._values:
            job = self.job(name)
            if isinstance(job, int):
                self._values[name] = job
            else:
                self._values[name] = apply(job.op, self.value(job.left), self.value(job.right))
        return self._values[name]

    def depends_on_human(self, name: str) -> bool:
        if name not in self._has_human:
            job = self.job(name)
            if name == HUMAN:
                self._has_human[name] = True
            elif isinstance(job, int):
                self._has_human[name] = False
            else:
                self._has_human[name] = (
                    self.depends_on_human(job.left) or self.depends_on_human(job.right)
                )
        return self._has_human[name]

    def solve_for_human(self) -> int:
        root = self.job(ROOT)
        if isinstance(root, int):
            raise ValueError("Root monkey must compare two monkeys")
        if HUMAN not in self.monkeys:
            raise ValueError(f"No {HUMAN} monkey")

        if self.depends_on_human(root.left):
            name, target = root.left, self.value(root.right)
        else:
            name, target = root.right, self.value(root.left)

        while name != HUMAN:
            job = self.job(name)
            if not isinstance(job, Operation):
                raise ValueError(f"Monkey {name} does not depend on an operation")
            if self.depends_on_human(job.left):
                known = self.value(job.right)
                name = job.left
                # unknown on the left: target = x op known
                if job.op == "+":
                    target -= known
                elif job.op == "-":
                    target += known
                elif job.op == "*":
                    target //= known
                else:
                    target *= known
            else:
                known = self.value(job.left)
                name = job.right
                # unknown on the right: target = known op x
                if job.op == "+":
                    target -= known
                elif job.op == "-":
                    target = known - target
                elif job.op == "*":
                    target //= known
                else:
                    target = known // target
        return target


def part_one(text: str) -> int:
    return Troop(parse(text)).value(ROOT)


def part_two(text: str) -> int:
    return Troop(parse(text)).solve_for_human()
