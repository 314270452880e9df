# crucible/runs.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple
import time

from .exceptions import NoPathError
from .grid import CostGrid
from .profiles import CrucibleProfile, NORMAL, ULTRA
from .solver import SearchResult, Solver
from .types import Coord


@dataclass
class RunStats:
    profile: str
    reached: bool
    cost: Optional[int]
    steps: int
    expansions: int
    pops: int
    frontier_peak: int
    elapsed_sec: float
    path_taken: List[Coord] = field(default_factory=list)
    expanded_all: Set[Coord] = field(default_factory=set)
    result: Optional[SearchResult] = None


def run_profile(grid: CostGrid, profile: CrucibleProfile, time_limit: Optional[float] = None) -> RunStats:
    solver = Solver(grid, profile, time_limit=time_limit)
    t0 = time.perf_counter()
    try:
        res = solver.run()
    except NoPathError:
        return RunStats(profile.name, False, None, 0, len(solver.visited), solver.pops,
                        solver.frontier.peak, time.perf_counter() - t0,
                        expanded_all=solver.visited.cells())
    return RunStats(profile.name, True, res.cost, len(res.path) - 1, res.expanded, res.pops,
                    res.frontier_peak, time.perf_counter() - t0, res.cells, res.visited_cells, res)


def run_profiles(grid: CostGrid, profiles: Sequence[CrucibleProfile] = (NORMAL, ULTRA),
                 time_limit: Optional[float] = None) -> List[Tuple[str, RunStats]]:
    return [(p.name, run_profile(grid, p, time_limit=time_limit)) for p in profiles]
