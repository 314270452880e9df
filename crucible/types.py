# crucible/types.py
from typing import Tuple

Coord = Tuple[int, int]  # (x, y)
Bound = Tuple[int, int]  # (width, height)
