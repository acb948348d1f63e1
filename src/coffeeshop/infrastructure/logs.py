"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(message)s"
HANDLER_NAME = "coffeeshop"


def setup_logging(level: int = logging.WARNING) -> None:
    """Attach a single console handler to the root logger.

    Safe to call more than once; later calls only change the level.
    Handlers installed by others (files, test capture) are left alone.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if not any(h.name == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.name = HANDLER_NAME
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
