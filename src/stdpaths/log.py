"""
stdpaths.log

Logging for stdpaths.

All modules log through ``get_logger(__name__)`` so records end up under the
single ``stdpaths`` logger, which writes ``[module] message`` lines to stderr.
"""

from __future__ import annotations

import logging
import sys
import threading

_lock = threading.Lock()
_setup_done = False

ROOT = "stdpaths"


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith(ROOT + "."):
            name = name[len(ROOT) + 1 :]
        return f"[{name}] {super().format(record)}"


def setup_logging(verbose: bool = False) -> None:
    """
    Configure the ``stdpaths`` logger once.

    Attaches one stderr handler at WARNING (DEBUG when *verbose*).
    Later calls only adjust the level.
    """
    global _setup_done
    logger = logging.getLogger(ROOT)
    with _lock:
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
        if _setup_done:
            return
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
        logger.propagate = False
        _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for *name*, nested under ``stdpaths``."""
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)
