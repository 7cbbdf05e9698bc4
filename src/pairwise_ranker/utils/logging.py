"""Logging helpers shared across :mod:`pairwise_ranker`."""

from __future__ import annotations

import logging
from typing import Optional, Union

_ROOT_NAME = "pairwise_ranker"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_root_logger = logging.getLogger(_ROOT_NAME)
_root_logger.addHandler(logging.NullHandler())
_stream_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""

    if name == _ROOT_NAME or name.startswith(_ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_NAME}.{name}")


def _coerce_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def set_log_level(level: Union[str, int]) -> None:
    """Set the verbosity of every ``pairwise_ranker`` logger.

    Accepts standard level names (``"debug"``, ``"info"`` ...) or their
    integer values.  A stream handler is attached the first time this is
    called so messages become visible without configuring ``logging``.
    """

    global _stream_handler
    numeric = _coerce_level(level)
    _root_logger.setLevel(numeric)
    if _stream_handler is None:
        _stream_handler = logging.StreamHandler()
        _stream_handler.setFormatter(logging.Formatter(_FORMAT))
        _root_logger.addHandler(_stream_handler)
    _stream_handler.setLevel(numeric)
