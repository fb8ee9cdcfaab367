"""
Day 19: Not Enough Minerals.

Depth-first search over which robot to build next. Instead of stepping one
minute at a time the search jumps straight to the minute the next robot is
finished, which keeps the tree small enough for 32 minutes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import prod
from typing import List, Optional, Tuple

from ..utils import ints

logger = logging.getLogger(__name__)

ORE, CLAY, OBSIDIAN, GEODE = range(4)

Resources = Tuple[int, int, int]


@dataclass
class Blueprint:
    id: int
    # indexed by robot kind, each cost is (ore, clay, obsidian)
    costs: List[Resources]

    @property
    def max_spend(self) -> Resources:
        """No robot kind is worth having more of than can be spent in one minute."""
        return (
            max(cost[ORE] for cost in self.costs),
            self.costs[OBSIDIAN][CLAY],
            self.costs[GEODE][OBSIDIAN],
        )


def parse(text: str) -> List[Blueprint]:
    blueprints = []
    # the puzzle text wraps blueprints across lines, inputs do not
    for chunk in text.split("Blueprint")[1:]:
        numbers = ints(chunk)
        if len(numbers) != 7:
            raise ValueError(f"Invalid blueprint: {' '.join(chunk.split())!r}")
        bp_id, ore_ore, clay_ore, obs_ore, obs_clay, geode_ore, geode_obs = numbers
        blueprints.append(
            Blueprint(
                bp_id,
                [
                    (ore_ore, 0, 0),
                    (clay_ore, 0, 0),
                    (obs_ore, obs_clay, 0),
                    (geode_ore, 0, geode_obs),
                ],
            )
        )
    return blueprints


def minutes_until_affordable(cost: Resources, robots: Resources, stock: Resources) -> Optional[int]:
    wait = 0
    for need, have, rate in zip(cost, stock, robots):
        if need <= have:
            continue
        if rate == 0:
            return None
        wait = max(wait, -(-(need - have) // rate))
    return wait


def optimistic_geodes(
    blueprint: Blueprint, time_left: int, robots: Resources, stock: Resources, geodes: int
) -> int:
    """
    Upper bound on the geodes reachable from a state.

    Ore and clay are treated as unlimited and a free obsidian robot arrives
    every minute, so a geode robot is built whenever obsidian allows.
    """
    cost = blueprint.costs[GEODE][OBSIDIAN]
    obsidian, rate = stock[OBSIDIAN], robots[OBSIDIAN]
    for remaining in range(time_left - 1, -1, -1):
        if obsidian >= cost:
            obsidian -= cost
            geodes += remaining
        obsidian += rate
        rate += 1
    return geodes


def max_geodes(blueprint: Blueprint, minutes: int) -> int:
    caps = blueprint.max_spend
    best = 0

    def search(time_left: int, robots: Resources, stock: Resources, geodes: int) -> None:
        nonlocal best
        best = max(best, geodes)
        if optimistic_geodes(blueprint, time_left, robots, stock, geodes) <= best:
            return

        for kind in (GEODE, OBSIDIAN, CLAY, ORE):
            if kind != GEODE and robots[kind] >= caps[kind]:
                continue
            cost = blueprint.costs[kind]
            wait = minutes_until_affordable(cost, robots, stock)
            if wait is None or wait + 1 >= time_left:
                continue

            elapsed = wait + 1
            remaining = time_left - elapsed
            new_stock = tuple(s + r * elapsed - c for s, r, c in zip(stock, robots, cost))
            if kind == GEODE:
                search(remaining, robots, new_stock, geodes + remaining)
            else:
                new_robots = tuple(r + (i == kind) for i, r in enumerate(robots))
                search(remaining, new_robots, new_stock, geodes)

    search(minutes, (1, 0, 0), (0, 0, 0), 0)
    logger.debug("Blueprint %d opens %d geodes in %d minutes", blueprint.id, best, minutes)
    return best


def part_one(text: str) -> int:
    return sum(bp.id * max_geodes(bp, 24) for bp in parse(text))


def part_two(text: str) -> int:
    return prod(max_geodes(bp, 32) for bp in parse(text)[:3])
