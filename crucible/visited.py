# crucible/visited.py
from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .state import SearchState
from .types import Coord


class VisitedSet:
    """
    States whose minimum cost is final.

    Each finalized state keeps its cost and the state it was reached from,
    which is enough to walk a route back to the start.
    """

    def __init__(self):
        self._final: Dict[SearchState, Tuple[int, Optional[SearchState]]] = {}

    def __len__(self) -> int:
        return len(self._final)

    def __contains__(self, state: SearchState) -> bool:
        return state in self._final

    def __iter__(self) -> Iterator[SearchState]:
        return iter(self._final)

    def finalize(self, state: SearchState, cost: int, parent: Optional[SearchState]) -> bool:
        """Record ``state``; returns False (and changes nothing) if it was already final."""
        if state in self._final:
            return False
        self._final[state] = (cost, parent)
        return True

    def cost_of(self, state: SearchState) -> int:
        return self._final[state][0]

    def parent_of(self, state: SearchState) -> Optional[SearchState]:
        return self._final[state][1]

    def cells(self) -> Set[Coord]:
        return {s.coord for s in self._final}

    def path_to(self, state: SearchState, parent: Optional[SearchState] = None) -> List[SearchState]:
        """
        States from the start to ``state``. If ``state`` itself was never
        finalized (the goal is returned before it is), pass its parent.
        """
        path = [state]
        cur = parent if state not in self._final else self._final[state][1]
        while cur is not None:
            path.append(cur)
            cur = self._final[cur][1]
        path.reverse()
        return path
