"""
A flat list that models a fixed-size rectangle, looked up by (x, y).

Used by the days that work on a bounded 2-D map (trees, hills, the sand cave
and the monkey map).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    @classmethod
    def parse(cls, s: str) -> "Point":
        """Parse ``"x,y"``."""
        try:
            x, y = s.split(",")
            return cls(int(x), int(y))
        except ValueError:
            raise ValueError(f"Invalid point: {s!r}")

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def manhattan(self, other: "Point") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


class Grid(Generic[T]):
    """Row-major storage; ``grid[Point(x, y)]`` is ``values[width * y + x]``."""

    def __init__(self, width: int, height: int, fill: T):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must be non-empty, got {width}x{height}")
        self._width = width
        self._height = height
        self._values: List[T] = [fill] * (width * height)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        convert: Callable[[str], T],
        fill: T,
    ) -> "Grid[T]":
        """
        Build a grid from text lines, converting each character.
        Short lines are padded with ``fill``.
        """
        rows = list(lines)
        if not rows:
            raise ValueError("Cannot build a grid from no lines")
        width = max(len(row) for row in rows)
        grid: Grid[T] = cls(width, len(rows), fill)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                grid._values[width * y + x] = convert(ch)
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self._width and 0 <= point.y < self._height

    def index(self, point: Point) -> int:
        if not self.in_bounds(point):
            raise IndexError(f"{point} outside {self._width}x{self._height} grid")
        return self._width * point.y + point.x

    def __getitem__(self, point: Point) -> T:
        return self._values[self.index(point)]

    def __setitem__(self, point: Point, value: T) -> None:
        self._values[self.index(point)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def points(self) -> Iterator[Point]:
        for y in range(self._height):
            for x in range(self._width):
                yield Point(x, y)

    def row(self, y: int) -> List[T]:
        return self._values[self._width * y:self._width * (y + 1)]

    def column(self, x: int) -> List[T]:
        return self._values[x::self._width]

    def neighbours(self, point: Point) -> List[Point]:
        """In-bounds orthogonal neighbours: north, east, south, west."""
        candidates = [
            Point(point.x, point.y - 1),
            Point(point.x + 1, point.y),
            Point(point.x, point.y + 1),
            Point(point.x - 1, point.y),
        ]
        return [p for p in candidates if self.in_bounds(p)]

    def render(self, cell_to_char: Callable[[T], str] = str) -> str:
        return "\n".join(
            "".join(cell_to_char(v) for v in self.row(y)) for y in range(self._height)
        )
