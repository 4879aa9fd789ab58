"""Grid primitives: coordinates, directions, and cell contents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator

GRID_SIZE = 5


class Direction(StrEnum):
    """Cardinal directions in which the marker may slide."""

    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"

    def reverse(self) -> Direction:
        return _REVERSE[self]

    @property
    def symbol(self) -> str:
        return _ARROWS[self]

    @classmethod
    def values(cls) -> Iterator[Direction]:
        """All directions in enumeration order: North, South, West, East."""
        return iter((cls.NORTH, cls.SOUTH, cls.WEST, cls.EAST))


_REVERSE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}

_ARROWS = {
    Direction.NORTH: "↑",
    Direction.SOUTH: "↓",
    Direction.WEST: "←",
    Direction.EAST: "→",
}


class Cell(StrEnum):
    """Contents of a single grid cell; the value is its text symbol."""

    ICE = "."
    WALL = "*"
    START = "S"
    END = "E"

    @property
    def is_ice(self) -> bool:
        return self is Cell.ICE

    @property
    def is_obstacle(self) -> bool:
        return self is Cell.WALL

    @property
    def is_start(self) -> bool:
        return self is Cell.START

    @property
    def is_end(self) -> bool:
        return self is Cell.END


@dataclass(frozen=True, order=True)
class Pos:
    """A position on the board.

    ``x`` is the column and ``y`` the row.  Ordering compares ``y`` first so
    that sorting positions gives the same row-major order as :meth:`values`.
    """

    y: int
    x: int

    def __init__(self, x: int, y: int) -> None:
        if not isinstance(x, int) or not isinstance(y, int):
            raise TypeError(f"Pos components must be int, got ({x!r}, {y!r})")
        if not 0 <= x < GRID_SIZE:
            raise IndexError(f"Pos x (is {x}) should be less than {GRID_SIZE}")
        if not 0 <= y < GRID_SIZE:
            raise IndexError(f"Pos y (is {y}) should be less than {GRID_SIZE}")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __repr__(self) -> str:
        return f"Pos(x={self.x}, y={self.y})"

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    @property
    def xy(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def index(self) -> int:
        """Offset of this position in a row-major flat list."""
        return self.y * GRID_SIZE + self.x

    def step(self, direction: Direction) -> Pos | None:
        """Return the neighbouring position in *direction*.

        Returns ``None`` when the step would leave the board.
        """
        x, y = self.xy
        if direction is Direction.NORTH:
            if y == 0:
                return None
            return Pos(x, y - 1)
        if direction is Direction.SOUTH:
            if y == GRID_SIZE - 1:
                return None
            return Pos(x, y + 1)
        if direction is Direction.WEST:
            if x == 0:
                return None
            return Pos(x - 1, y)
        if x == GRID_SIZE - 1:
            return None
        return Pos(x + 1, y)

    @staticmethod
    def values() -> Iterator[Pos]:
        """Every position of the board in row-major order."""
        return (Pos(x, y) for y in range(GRID_SIZE) for x in range(GRID_SIZE))
