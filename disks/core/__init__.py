"""Core data structures."""

from .results import SortedDisks
from .row import DiskColor, DiskRow

__all__ = [
    "DiskColor",
    "DiskRow",
    "SortedDisks",
]
