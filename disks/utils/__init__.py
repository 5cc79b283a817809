"""Utility exports."""

from .config import ComparisonConfig, SortConfig
from .logging import get_logger, set_verbosity
from .validation import ensure_row, parse_row

__all__ = [
    "ComparisonConfig",
    "SortConfig",
    "get_logger",
    "set_verbosity",
    "ensure_row",
    "parse_row",
]
