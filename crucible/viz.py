# crucible/viz.py
from __future__ import annotations
import os
from typing import Iterable, Optional, Set, Tuple

from PIL import Image, ImageDraw

from .grid import CostGrid
from .types import Coord

RGB = Tuple[int, int, int]

COOL: RGB = (250, 235, 180)
HOT: RGB = (150, 30, 20)
EXPANDED_TINT: RGB = (120, 170, 230)
PATH: RGB = (30, 60, 160)
START: RGB = (100, 220, 120)
GOAL: RGB = (255, 170, 80)


def heat_color(cost: int, lo: int = 1, hi: int = 9) -> RGB:
    """Linear blend from COOL (cheapest) to HOT (dearest), clamped to [lo, hi]."""
    if hi <= lo:
        t = 0.0
    else:
        t = (min(max(cost, lo), hi) - lo) / (hi - lo)
    return tuple(round(a + (b - a) * t) for a, b in zip(COOL, HOT))


def blend(base: RGB, tint: RGB, alpha: float) -> RGB:
    return tuple(round(a * (1 - alpha) + b * alpha) for a, b in zip(base, tint))


def draw_grid_png(grid: CostGrid,
                  path: Optional[Iterable[Coord]],
                  expanded: Optional[Set[Coord]],
                  out_png: str,
                  cell: int = 10) -> None:
    lo = min(min(row) for row in grid.cells)
    hi = max(max(row) for row in grid.cells)
    img = Image.new("RGB", (grid.width * cell, grid.height * cell), (255, 255, 255))
    drw = ImageDraw.Draw(img)
    expanded = expanded or set()

    for (x, y) in grid.coords():
        color = heat_color(grid.get((x, y)), lo, hi)
        if (x, y) in expanded:
            color = blend(color, EXPANDED_TINT, 0.35)
        drw.rectangle((x * cell, y * cell, x * cell + cell - 1, y * cell + cell - 1), fill=color)

    # route as a polyline through cell centres
    pts = [(x * cell + cell // 2, y * cell + cell // 2) for (x, y) in (path or [])]
    if len(pts) > 1:
        drw.line(pts, fill=PATH, width=max(1, cell // 4))

    for (x, y), color in ((grid.start, START), (grid.goal, GOAL)):
        inset = cell // 5
        drw.rectangle((x * cell + inset, y * cell + inset,
                       x * cell + cell - 1 - inset, y * cell + cell - 1 - inset), fill=color)

    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
