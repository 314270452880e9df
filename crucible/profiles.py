# crucible/profiles.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, TYPE_CHECKING

from .exceptions import InvalidProfileError

if TYPE_CHECKING:
    from .grid import CostGrid
    from .state import SearchState


@dataclass(frozen=True)
class CrucibleProfile:
    """How long a crucible must (min) and may (max) keep going straight."""
    min_straight: int
    max_straight: int
    name: str = ""

    def __post_init__(self):
        if self.min_straight < 1:
            raise InvalidProfileError("min_straight must be at least 1",
                                      {"min_straight": self.min_straight})
        if self.max_straight < self.min_straight:
            raise InvalidProfileError("max_straight must not be below min_straight",
                                      {"min_straight": self.min_straight, "max_straight": self.max_straight})
        if not self.name:
            object.__setattr__(self, "name", f"{self.min_straight}:{self.max_straight}")

    def can_stop(self, state: "SearchState") -> bool:
        return state.direction is None or state.run_length >= self.min_straight

    def state_space_bound(self, grid: "CostGrid") -> int:
        return grid.width * grid.height * 4 * self.max_straight


NORMAL = CrucibleProfile(1, 3, "normal")
ULTRA = CrucibleProfile(4, 10, "ultra")

PROFILES: Dict[str, CrucibleProfile] = {p.name: p for p in (NORMAL, ULTRA)}


def get_profile(text: str) -> CrucibleProfile:
    """Look up a preset by name, or build one from a ``MIN:MAX`` string."""
    key = text.strip().lower()
    if key in PROFILES:
        return PROFILES[key]
    parts = key.split(":")
    if len(parts) != 2:
        raise InvalidProfileError(f"unknown profile {text!r}; use one of {sorted(PROFILES)} or MIN:MAX")
    try:
        lo, hi = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidProfileError(f"profile bounds must be integers: {text!r}") from None
    return CrucibleProfile(lo, hi)
