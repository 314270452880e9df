# crucible/exceptions.py
"""
Exception hierarchy for crucible.

    CrucibleError
    ├── GridFormatError      (also a ValueError)
    ├── InvalidProfileError  (also a ValueError)
    └── SearchError
        ├── NoPathError
        └── SearchTimeoutError
"""
from __future__ import annotations
from typing import Any, Dict, Optional


class CrucibleError(Exception):
    """Base class; carries an optional context dict that is appended to str()."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} | {ctx}"


class GridFormatError(CrucibleError, ValueError):
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        context: Dict[str, Any] = {}
        if line is not None:
            context["line"] = line
        if column is not None:
            context["column"] = column
        super().__init__(message, context)
        self.line = line
        self.column = column


class InvalidProfileError(CrucibleError, ValueError):
    pass


class SearchError(CrucibleError):
    pass


class NoPathError(SearchError):
    """The frontier ran dry before the goal could be reached under the profile."""

    def __init__(self, profile_name: str, expanded: int):
        super().__init__("no path to goal", {"profile": profile_name, "expanded": expanded})
        self.profile_name = profile_name
        self.expanded = expanded


class SearchTimeoutError(SearchError):
    def __init__(self, time_limit: float, expanded: int):
        super().__init__("search time limit exceeded", {"time_limit": time_limit, "expanded": expanded})
        self.time_limit = time_limit
        self.expanded = expanded
