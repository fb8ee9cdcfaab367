"""
Day 22: Monkey Map.

The board is walked the same way for both parts; only the rule for stepping
off an edge differs. Part one wraps around to the far side of the row or
column. Part two folds the net into a cube: every tile is given a position on
the surface of a cube, and stepping off a face carries on over the cube edge.

Cube positions use doubled coordinates so that tile centres are integers: for
a cube of side ``s`` a face with outward normal ``n`` holds its tiles at
``n * s + r * (2i + 1 - s) + d * (2j + 1 - s)``, where ``r`` and ``d`` are the
face's right and down vectors and ``(i, j)`` is the tile within the face.
"""

from __future__ import annotations

import logging
import math
import re
from collections import deque
from enum import Enum
from typing import Callable, Dict, List, Tuple, Union

from ..grid import Grid, Point

logger = logging.getLogger(__name__)

# facings, in clockwise order
EAST, SOUTH, WEST, NORTH = range(4)
DIRECTIONS = [Point(1, 0), Point(0, 1), Point(-1, 0), Point(0, -1)]

Vector = Tuple[int, int, int]
Step = Union[int, str]
Wrap = Callable[[Point, int], Tuple[Point, int]]


class Tile(Enum):
    VOID = " "
    OPEN = "."
    WALL = "#"

    def __str__(self) -> str:
        return self.value


def parse(text: str) -> Tuple[Grid[Tile], List[Step]]:
    lines = text.rstrip("\n").split("\n")
    try:
        blank = next(i for i, line in enumerate(lines) if not line.strip())
    except StopIteration:
        raise ValueError("Missing blank line between board and path")

    def to_tile(ch: str) -> Tile:
        try:
            return Tile(ch)
        except ValueError:
            raise ValueError(f"Invalid board tile: {ch!r}")

    board = Grid.from_lines([line.rstrip("\r") for line in lines[:blank]], to_tile, Tile.VOID)

    path_text = "".join(line.strip() for line in lines[blank + 1:])
    tokens = re.findall(r"\d+|[LR]", path_text)
    if "".join(tokens) != path_text:
        raise ValueError(f"Invalid path: {path_text!r}")
    path: List[Step] = [int(t) if t.isdigit() else t for t in tokens]
    return board, path


def on_board(board: Grid[Tile], point: Point) -> bool:
    return board.in_bounds(point) and board[point] != Tile.VOID


def flat_wrap(board: Grid[Tile]) -> Wrap:
    def step(pos: Point, facing: int) -> Tuple[Point, int]:
        ahead = pos + DIRECTIONS[facing]
        if on_board(board, ahead):
            return ahead, facing
        # walk backwards to the far edge
        back = DIRECTIONS[(facing + 2) % 4]
        while on_board(board, pos + back):
            pos = pos + back
        return pos, facing

    return step


def _add(*vectors: Vector) -> Vector:
    return tuple(sum(parts) for parts in zip(*vectors))


def _scale(v: Vector, k: int) -> Vector:
    return (v[0] * k, v[1] * k, v[2] * k)


def _neg(v: Vector) -> Vector:
    return _scale(v, -1)


class Cube:
    """The board folded into a cube, mapping tiles to and from surface positions."""

    def __init__(self, board: Grid[Tile]):
        tiles = sum(1 for t in board if t != Tile.VOID)
        side = math.isqrt(tiles // 6)
        if side == 0 or side * side * 6 != tiles:
            raise ValueError(f"{tiles} tiles cannot fold into a cube")
        self.side = side

        faces = [
            (fx, fy)
            for fy in range(board.height // side)
            for fx in range(board.width // side)
            if on_board(board, Point(fx * side, fy * side))
        ]
        if len(faces) != 6:
            raise ValueError(f"Board has {len(faces)} faces, not 6")

        # outward normal, right and down vectors per face, rolled across the net
        self.orientation: Dict[Tuple[int, int], Tuple[Vector, Vector, Vector]] = {
            faces[0]: ((0, 0, -1), (1, 0, 0), (0, 1, 0))
        }
        queue = deque([faces[0]])
        while queue:
            fx, fy = queue.popleft()
            n, r, d = self.orientation[(fx, fy)]
            rolls = {
                (fx + 1, fy): (r, _neg(n), d),
                (fx, fy + 1): (d, r, _neg(n)),
                (fx - 1, fy): (_neg(r), n, d),
                (fx, fy - 1): (_neg(d), r, n),
            }
            for face, orientation in rolls.items():
                if face in faces and face not in self.orientation:
                    self.orientation[face] = orientation
                    queue.append(face)
        if len(self.orientation) != 6:
            raise ValueError("Cube faces are not connected")

        self.surface: Dict[Vector, Point] = {}
        self.position: Dict[Point, Vector] = {}
        for (fx, fy), (n, r, d) in self.orientation.items():
            for j in range(side):
                for i in range(side):
                    p = _add(_scale(n, side), _scale(r, 2 * i + 1 - side), _scale(d, 2 * j + 1 - side))
                    tile = Point(fx * side + i, fy * side + j)
                    self.surface[p] = tile
                    self.position[tile] = p

    def face_of(self, tile: Point) -> Tuple[Vector, Vector, Vector]:
        return self.orientation[(tile.x // self.side, tile.y // self.side)]

    def step(self, pos: Point, facing: int) -> Tuple[Point, int]:
        n, r, d = self.face_of(pos)
        world = [r, d, _neg(r), _neg(d)][facing]
        p = self.position[pos]

        ahead = _add(p, _scale(world, 2))
        if ahead in self.surface:
            return self.surface[ahead], facing

        # over the edge: down the next face, heading away from the old one
        ahead = _add(p, world, _neg(n))
        tile = self.surface[ahead]
        _, r2, d2 = self.face_of(tile)
        heading = _neg(n)
        return tile, [r2, d2, _neg(r2), _neg(d2)].index(heading)


def walk(board: Grid[Tile], path: List[Step], wrap: Wrap) -> int:
    try:
        x = board.row(0).index(Tile.OPEN)
    except ValueError:
        raise ValueError("No open tile on the top row")
    pos, facing = Point(x, 0), EAST

    for step in path:
        if step == "R":
            facing = (facing + 1) % 4
        elif step == "L":
            facing = (facing - 1) % 4
        else:
            for _ in range(step):
                ahead, heading = wrap(pos, facing)
                if board[ahead] == Tile.WALL:
                    break
                pos, facing = ahead, heading

    logger.debug("Finished at %s facing %d", pos, facing)
    return 1000 * (pos.y + 1) + 4 * (pos.x + 1) + facing


def part_one(text: str) -> int:
    board, path = parse(text)
    return walk(board, path, flat_wrap(board))


def part_two(text: str) -> int:
    board, path = parse(text)
    return walk(board, path, Cube(board).step)
