# crucible/direction.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple

from .types import Bound, Coord


class Direction(Enum):
    """
    4-connected compass heading.

    Values double as tie-break ordinals in the frontier; 0 is reserved for
    "no heading yet" (see ``ordinal``).
    """
    EAST = 1
    SOUTH = 2
    WEST = 3
    NORTH = 4

    def clockwise(self) -> "Direction":
        return _CLOCKWISE[self]

    def counter_clockwise(self) -> "Direction":
        return _COUNTER_CLOCKWISE[self]

    def reverse(self) -> "Direction":
        return _REVERSE[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTA[self]

    def step(self, coord: Coord, bound: Bound) -> Optional[Coord]:
        """One cell in this direction, or None if that would leave the grid."""
        dx, dy = _DELTA[self]
        x, y = coord[0] + dx, coord[1] + dy
        if 0 <= x < bound[0] and 0 <= y < bound[1]:
            return (x, y)
        return None

    def __str__(self) -> str:
        return self.name[0]


Direction.ALL = (Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH)

_CLOCKWISE = {
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
    Direction.NORTH: Direction.EAST,
}
_COUNTER_CLOCKWISE = {v: k for k, v in _CLOCKWISE.items()}
_REVERSE = {d: _CLOCKWISE[_CLOCKWISE[d]] for d in _CLOCKWISE}
_DELTA = {
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTH: (0, -1),
}


def ordinal(direction: Optional[Direction]) -> int:
    return 0 if direction is None else direction.value
