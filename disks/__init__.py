"""Alternating disks public interface.

Build a row with :class:`DiskRow` and sort it with ``sort_left_to_right`` or
``sort_lawnmower``; ``sorter_from_name`` returns either strategy by name.
"""

from __future__ import annotations

from .core import DiskColor, DiskRow, SortedDisks
from .sorters import (
    LawnmowerSorter,
    LeftToRightSorter,
    sort_lawnmower,
    sort_left_to_right,
    sorter_from_name,
)

__all__ = [
    "DiskColor",
    "DiskRow",
    "LawnmowerSorter",
    "LeftToRightSorter",
    "SortedDisks",
    "sort_lawnmower",
    "sort_left_to_right",
    "sorter_from_name",
]

__version__ = "0.1.0"
