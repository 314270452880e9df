# crucible/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .direction import Direction, ordinal
from .types import Coord

SortKey = Tuple[int, int, int, int, int]


@dataclass(frozen=True)
class SearchState:
    """
    A node of the augmented graph: where we are, which way we last moved,
    and how many steps we have gone that way without turning.

    ``direction`` is None only for the start state, which has run_length 0.
    """
    coord: Coord
    direction: Optional[Direction] = None
    run_length: int = 0

    def __post_init__(self):
        if (self.direction is None) != (self.run_length == 0):
            raise ValueError(f"run_length {self.run_length} inconsistent with direction {self.direction}")

    def __str__(self) -> str:
        d = "X" if self.direction is None else str(self.direction)
        return f"{d}{self.coord}x{self.run_length}"


@dataclass(frozen=True)
class FrontierEntry:
    state: SearchState
    cost: int
    parent: Optional[SearchState] = field(default=None, compare=False)

    def sort_key(self) -> SortKey:
        x, y = self.state.coord
        return (self.cost, y, x, ordinal(self.state.direction), self.state.run_length)
