"""
Day 16: Proboscidea Volcanium.

Only valves with a non-zero flow are worth visiting, so the tunnel graph is
compressed to shortest distances between those valves (plus the start).
A depth-first search then records, for every set of opened valves, the best
pressure that set can release. Two walkers working in parallel can never
open the same valve, so part two pairs up disjoint sets.
"""

from __future__ import annotations

import logging
import re
from collections import deque
from dataclasses import dataclass
from typing import Dict, List

logger = logging.getLogger(__name__)

START = "AA"

VALVE_RE = re.compile(
    r"^Valve ([A-Z]+) has flow rate=(\d+); tunnels? leads? to valves? (.+)$"
)


@dataclass
class Valve:
    name: str
    flow_rate: int
    tunnels: List[str]


def parse(text: str) -> Dict[str, Valve]:
    valves = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        match = VALVE_RE.match(line.strip())
        if not match:
            raise ValueError(f"Invalid valve description: {line!r}")
        name, flow_rate, tunnels = match.groups()
        valves[name] = Valve(name, int(flow_rate), [t.strip() for t in tunnels.split(",")])

    if START not in valves:
        raise ValueError(f"No starting valve {START}")
    for valve in valves.values():
        for tunnel in valve.tunnels:
            if tunnel not in valves:
                raise ValueError(f"Valve {valve.name} leads to unknown valve {tunnel}")
    return valves


def distances_from(valves: Dict[str, Valve], source: str) -> Dict[str, int]:
    dist = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for tunnel in valves[current].tunnels:
            if tunnel not in dist:
                dist[tunnel] = dist[current] + 1
                queue.append(tunnel)
    return dist


def best_per_valve_set(valves: Dict[str, Valve], minutes: int) -> Dict[int, int]:
    """
    Maximum pressure released for each set of opened valves.

    Sets are bitmasks over the valves with non-zero flow, in sorted name order.
    """
    useful = sorted(name for name, v in valves.items() if v.flow_rate > 0)
    bit = {name: 1 << i for i, name in enumerate(useful)}
    dist = {name: distances_from(valves, name) for name in useful + [START]}

    best: Dict[int, int] = {}

    def visit(current: str, remaining: int, opened: int, released: int) -> None:
        if released > best.get(opened, -1):
            best[opened] = released
        for name in useful:
            if opened & bit[name] or name not in dist[current]:
                continue
            # walk there, then spend a minute opening it
            left = remaining - dist[current][name] - 1
            if left <= 0:
                continue
            visit(name, left, opened | bit[name], released + left * valves[name].flow_rate)

    visit(START, minutes, 0, 0)
    logger.debug("Explored %d valve sets across %d useful valves", len(best), len(useful))
    return best


def part_one(text: str) -> int:
    return max(best_per_valve_set(parse(text), 30).values())


def part_two(text: str) -> int:
    valves = parse(text)
    best = best_per_valve_set(valves, 26)
    useful = sum(1 for v in valves.values() if v.flow_rate > 0)
    full = (1 << useful) - 1

    # best_subset[m] = best pressure from any set contained in m
    best_subset = [best.get(mask, 0) for mask in range(full + 1)]
    for i in range(useful):
        flag = 1 << i
        for mask in range(full + 1):
            if mask & flag:
                best_subset[mask] = max(best_subset[mask], best_subset[mask ^ flag])

    return max(released + best_subset[full ^ mask] for mask, released in best.items())
