# crucible/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple
import os
import random as _random

from .exceptions import GridFormatError
from .types import Bound, Coord


@dataclass(frozen=True)
class CostGrid:
    """
    Immutable rectangle of positive per-cell entry costs, indexed by (x, y).

    Entering a cell costs its value; the start cell (0, 0) is never charged.
    """
    width: int
    height: int
    cells: Tuple[Tuple[int, ...], ...]  # [y][x]

    @staticmethod
    def from_rows(rows: Sequence[Sequence[int]]) -> "CostGrid":
        if not rows or not rows[0]:
            raise GridFormatError("grid is empty")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise GridFormatError(f"rows are of uneven length ({len(row)} != {width})", line=y + 1)
            for x, v in enumerate(row):
                if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
                    raise GridFormatError(f"cost must be a positive integer, got {v!r}", line=y + 1, column=x + 1)
        return CostGrid(width, len(rows), tuple(tuple(row) for row in rows))

    @staticmethod
    def from_text(text: str) -> "CostGrid":
        lines = [line.rstrip() for line in text.splitlines()]
        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()

        rows: List[List[int]] = []
        for y, line in enumerate(lines):
            row = []
            for x, ch in enumerate(line):
                if ch not in "123456789":
                    raise GridFormatError(f"invalid cost character {ch!r}", line=y + 1, column=x + 1)
                row.append(int(ch))
            rows.append(row)
        return CostGrid.from_rows(rows)

    @staticmethod
    def load(path: str) -> "CostGrid":
        with open(path, "r") as f:
            return CostGrid.from_text(f.read())

    @staticmethod
    def random(width: int = 13, height: int = 13, seed: Optional[int] = None,
               low: int = 1, high: int = 9) -> "CostGrid":
        if not 1 <= low <= high <= 9:
            raise ValueError("costs must satisfy 1 <= low <= high <= 9")
        rng = _random.Random(seed)
        rows = [[rng.randint(low, high) for _ in range(width)] for _ in range(height)]
        return CostGrid.from_rows(rows)

    def save(self, path: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w") as f:
            f.write(self.render())

    def render(self) -> str:
        # multi-digit costs have no text form; only 1..9 grids round-trip
        return "".join("".join(str(v) for v in row) + "\n" for row in self.cells)

    def bound(self) -> Bound:
        return (self.width, self.height)

    @property
    def start(self) -> Coord:
        return (0, 0)

    @property
    def goal(self) -> Coord:
        return (self.width - 1, self.height - 1)

    def in_bounds(self, c: Coord) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, c: Coord) -> int:
        x, y = c
        return self.cells[y][x]

    def coords(self) -> Iterator[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def path_cost(self, cells: Iterable[Coord]) -> int:
        """Sum of entry costs along a route, skipping the first cell."""
        it = iter(cells)
        next(it, None)
        return sum(self.get(c) for c in it)

    def __str__(self) -> str:
        return self.render()
