# crucible/logging_config.py
"""
Logging setup for the command-line tools.

Library modules only do ``logger = logging.getLogger(__name__)``; handlers are
installed here, once, by whoever owns the process (the CLI or the viewer).
"""
from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = logging.WARNING

_HANDLER_NAME = "crucible-console"


def configure_logging(level: Union[int, str] = DEFAULT_LEVEL, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single console handler to the ``crucible`` logger and set its level."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level}")
        level = resolved

    root = logging.getLogger("crucible")
    for h in list(root.handlers):
        if h.get_name() == _HANDLER_NAME:
            root.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return root
