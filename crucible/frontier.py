# crucible/frontier.py
from __future__ import annotations
from typing import List, Optional, Set, Tuple
import heapq

from .state import FrontierEntry, SortKey


class Frontier:
    """
    Min-heap of not-yet-finalized entries ordered by (cost, y, x, heading, run).

    The secondary key makes pops reproducible when costs tie. An entry whose
    (cost, state) is already queued is not queued twice.
    """

    def __init__(self):
        self._heap: List[Tuple[SortKey, int, FrontierEntry]] = []
        self._queued: Set[SortKey] = set()
        self._counter = 0
        self.peak = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def insert(self, entry: FrontierEntry) -> bool:
        key = entry.sort_key()
        if key in self._queued:
            return False
        self._queued.add(key)
        heapq.heappush(self._heap, (key, self._counter, entry))
        self._counter += 1
        if len(self._heap) > self.peak:
            self.peak = len(self._heap)
        return True

    def pop_cheapest(self) -> Optional[FrontierEntry]:
        if not self._heap:
            return None
        key, _, entry = heapq.heappop(self._heap)
        self._queued.discard(key)
        return entry

    def peek_cost(self) -> Optional[int]:
        return self._heap[0][2].cost if self._heap else None

    def entries(self) -> List[FrontierEntry]:
        """Queued entries in pop order (a sorted copy; the heap is untouched)."""
        return [e for _, _, e in sorted(self._heap)]
