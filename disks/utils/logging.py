"""Centralized logging helpers."""

from __future__ import annotations

import logging
from typing import Final

_LOGGER_NAME: Final = "disks"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the package logger, or a ``disks.<component>`` child of it.

    Only the package root gets a stream handler; children propagate to it.
    """
    root = logging.getLogger(_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    if component:
        return root.getChild(component)
    return root


def set_verbosity(verbose: bool) -> None:
    """Switch the package logger between INFO and DEBUG."""
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)
