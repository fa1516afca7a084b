"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package loggers.
    - Allow optional verbose/debug modes for the command line.

Inputs/Outputs:
    - Inputs: module name and verbosity settings.
    - Outputs: `logging.Logger` instances under the ``longspan`` namespace.

Notes/Edge cases:
    - Library code never configures handlers beyond a `NullHandler`; only
      `configure_logging` attaches a stream handler.
    - Logging configuration is idempotent.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "longspan"

_FORMAT = "%(levelname)s %(name)s: %(message)s"

_root = logging.getLogger(ROOT_LOGGER_NAME)
if not any(isinstance(h, logging.NullHandler) for h in _root.handlers):
    _root.addHandler(logging.NullHandler())


class _StderrHandler(logging.StreamHandler):
    """Stream handler writing to whatever ``sys.stderr`` is at emit time."""

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        pass


_stream_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace for module ``name``."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger and set ``level``.

    Repeated calls only adjust the level.
    """

    global _stream_handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown logging level: {level}")
    if _stream_handler is None:
        _stream_handler = _StderrHandler()
        _stream_handler.setFormatter(logging.Formatter(_FORMAT))
        _root.addHandler(_stream_handler)
    _root.setLevel(level)
    return _root
