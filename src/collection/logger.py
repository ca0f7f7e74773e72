"""logger.py - Logger factory for the collection library."""

from __future__ import annotations

import logging

_ROOT = "collection"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace.

    The library never configures handlers beyond a ``NullHandler``;
    applications opt in with ``logging.basicConfig`` or their own setup.
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
