"""Sorter comparison helpers."""

from .comparison import ComparisonReport, compare_sorters, expected_swap_count

__all__ = ["ComparisonReport", "compare_sorters", "expected_swap_count"]
