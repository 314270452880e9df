# crucible/__init__.py
from .types import Coord, Bound
from .direction import Direction
from .grid import CostGrid
from .profiles import CrucibleProfile, NORMAL, ULTRA, PROFILES, get_profile
from .state import SearchState, FrontierEntry
from .frontier import Frontier
from .visited import VisitedSet
from .solver import Solver, SearchResult, SearchStatus, solve
from .runs import RunStats, run_profile, run_profiles
from .viz import draw_grid_png
from .exceptions import (
    CrucibleError, GridFormatError, InvalidProfileError,
    SearchError, NoPathError, SearchTimeoutError,
)

__version__ = "0.1.0"

__all__ = [
    "Coord", "Bound", "Direction", "CostGrid",
    "CrucibleProfile", "NORMAL", "ULTRA", "PROFILES", "get_profile",
    "SearchState", "FrontierEntry", "Frontier", "VisitedSet",
    "Solver", "SearchResult", "SearchStatus", "solve",
    "RunStats", "run_profile", "run_profiles", "draw_grid_png",
    "CrucibleError", "GridFormatError", "InvalidProfileError",
    "SearchError", "NoPathError", "SearchTimeoutError",
]
