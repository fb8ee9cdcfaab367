from typing import Iterable, List

from ..grid import Grid


def parse(text: str) -> Grid[int]:
    lines = [line.strip() for line in text.splitlines() if line.strip()]

    def digit(ch: str) -> int:
        if not ch.isdigit():
            raise ValueError(f"Invalid tree height: {ch!r}")
        return int(ch)

    return Grid.from_lines(lines, digit, fill=0)


def _sight_lines(trees: Grid[int], x: int, y: int) -> List[List[int]]:
    """Heights looking north, east, south and west, nearest tree first."""
    row, column = trees.row(y), trees.column(x)
    return [
        column[:y][::-1],
        row[x + 1:],
        column[y + 1:],
        row[:x][::-1],
    ]


def viewing_distance(height: int, heights: Iterable[int]) -> int:
    # the tree that blocks the view is counted too
    distance = 0
    for h in heights:
        distance += 1
        if h >= height:
            break
    return distance


def part_one(text: str) -> int:
    trees = parse(text)
    visible = 0
    for point in trees.points():
        height = trees[point]
        if any(all(h < height for h in line) for line in _sight_lines(trees, point.x, point.y)):
            visible += 1
    return visible


def part_two(text: str) -> int:
    trees = parse(text)
    best = 0
    for point in trees.points():
        height = trees[point]
        score = 1
        for line in _sight_lines(trees, point.x, point.y):
            score *= viewing_distance(height, line)
        best = max(best, score)
    return best
