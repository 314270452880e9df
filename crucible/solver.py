# crucible/solver.py
from __future__ import annotations
from enum import Enum
from typing import List, Optional, Set
import logging
import time

from .direction import Direction
from .exceptions import NoPathError, SearchTimeoutError
from .frontier import Frontier
from .grid import CostGrid
from .profiles import CrucibleProfile
from .state import FrontierEntry, SearchState
from .types import Coord
from .visited import VisitedSet

logger = logging.getLogger(__name__)


class SearchStatus(Enum):
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class SearchResult:
    def __init__(self, cost: int, path: List[SearchState], expanded: int, pops: int,
                 frontier_peak: int, visited_cells: Set[Coord], profile: CrucibleProfile):
        self.cost = cost
        self.path = path
        self.expanded = expanded
        self.pops = pops
        self.frontier_peak = frontier_peak
        self.visited_cells = visited_cells
        self.profile = profile

    @property
    def cells(self) -> List[Coord]:
        return [s.coord for s in self.path]

    def __repr__(self) -> str:
        return (f"SearchResult(cost={self.cost}, steps={len(self.path) - 1}, "
                f"expanded={self.expanded}, profile={self.profile.name!r})")


class Solver:
    """
    Uniform-cost search from the top-left to the bottom-right cell over
    (coord, heading, run length) states.

    One instance solves one (grid, profile) pair. ``step()`` advances the
    search by exactly one frontier pop; ``run()`` steps until it is over.
    """

    def __init__(self, grid: CostGrid, profile: CrucibleProfile, time_limit: Optional[float] = None):
        self.grid = grid
        self.profile = profile
        self.time_limit = time_limit
        self.frontier = Frontier()
        self.visited = VisitedSet()
        self.status = SearchStatus.RUNNING
        self.pops = 0
        self.last: Optional[FrontierEntry] = None
        self.result: Optional[SearchResult] = None
        self._deadline: Optional[float] = None
        self.frontier.insert(FrontierEntry(SearchState(grid.start), 0))

    def successors(self, entry: FrontierEntry) -> List[FrontierEntry]:
        state = entry.state
        d = state.direction
        allowed = list(Direction.ALL)
        if d is not None:
            assert state.run_length <= self.profile.max_straight
            allowed.remove(d.reverse())
            if state.run_length < self.profile.min_straight:
                allowed.remove(d.clockwise())
                allowed.remove(d.counter_clockwise())
            if state.run_length == self.profile.max_straight:
                allowed.remove(d)

        out: List[FrontierEntry] = []
        bound = self.grid.bound()
        for nd in allowed:
            coord = nd.step(state.coord, bound)
            if coord is None:
                continue
            run = state.run_length + 1 if nd == d else 1
            nxt = SearchState(coord, nd, run)
            if nxt in self.visited:
                continue
            out.append(FrontierEntry(nxt, entry.cost + self.grid.get(coord), state))
        return out

    def _is_goal(self, state: SearchState) -> bool:
        return state.coord == self.grid.goal and self.profile.can_stop(state)

    def step(self) -> SearchStatus:
        if self.status is not SearchStatus.RUNNING:
            return self.status

        if self.time_limit is not None:
            now = time.perf_counter()
            if self._deadline is None:
                self._deadline = now + self.time_limit
            elif now > self._deadline:
                raise SearchTimeoutError(self.time_limit, len(self.visited))

        entry = self.frontier.pop_cheapest()
        if entry is None:
            self.status = SearchStatus.EXHAUSTED
            logger.warning("frontier exhausted without reaching goal (profile=%s, expanded=%d)",
                           self.profile.name, len(self.visited))
            return self.status

        self.pops += 1
        self.last = entry
        state = entry.state

        if self._is_goal(state):
            self.status = SearchStatus.SOLVED
            self.result = SearchResult(
                cost=entry.cost,
                path=self.visited.path_to(state, entry.parent),
                expanded=len(self.visited),
                pops=self.pops,
                frontier_peak=self.frontier.peak,
                visited_cells=self.visited.cells(),
                profile=self.profile,
            )
            logger.info("solved %dx%d grid with profile %s: cost=%d expanded=%d",
                        self.grid.width, self.grid.height, self.profile.name, entry.cost, len(self.visited))
            return self.status

        if not self.visited.finalize(state, entry.cost, entry.parent):
            return self.status  # stale

        for nxt in self.successors(entry):
            self.frontier.insert(nxt)
        return self.status

    def run(self) -> SearchResult:
        logger.debug("searching %dx%d grid with profile %s", self.grid.width, self.grid.height, self.profile.name)
        while self.step() is SearchStatus.RUNNING:
            pass
        if self.status is SearchStatus.EXHAUSTED:
            raise NoPathError(self.profile.name, len(self.visited))
        return self.result


def solve(grid: CostGrid, profile: CrucibleProfile, time_limit: Optional[float] = None) -> int:
    """Minimum heat loss from (0, 0) to the far corner; raises NoPathError if unreachable."""
    return Solver(grid, profile, time_limit=time_limit).run().cost
