import io
import logging

import pytest

from crucible import CostGrid, NoPathError, SearchTimeoutError, Solver, ULTRA, NORMAL
from crucible.exceptions import CrucibleError, SearchError
from crucible.logging_config import configure_logging


def test_error_context_in_str():
    e = NoPathError("ultra", 12)
    assert isinstance(e, SearchError) and isinstance(e, CrucibleError)
    assert str(e) == "no path to goal | profile=ultra, expanded=12"
    assert str(CrucibleError("plain")) == "plain"
    assert "time_limit=1.5" in str(SearchTimeoutError(1.5, 3))


def test_configure_logging_single_handler():
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    root = configure_logging(logging.INFO, stream=stream)
    assert root.level == logging.INFO
    assert sum(1 for h in root.handlers if h.get_name() == "crucible-console") == 1
    configure_logging(logging.WARNING)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")


def test_solver_logs_outcomes(caplog):
    with caplog.at_level(logging.INFO, logger="crucible"):
        Solver(CostGrid.from_text("12\n34\n"), NORMAL).run()
        with pytest.raises(NoPathError):
            Solver(CostGrid.from_text("12\n34\n"), ULTRA).run()
    messages = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert any(lvl == logging.INFO and "cost=6" in m for lvl, m in messages)
    assert any(lvl == logging.WARNING and "exhausted" in m for lvl, m in messages)
