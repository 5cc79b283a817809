"""Left-to-right sorter: repeated single-direction bubble passes."""

from __future__ import annotations

from disks.core.results import SortedDisks
from disks.core.row import DiskRow
from disks.sorters.base import BaseSorter


class LeftToRightSorter(BaseSorter):
    """Bubble light disks leftward with ``n - 1`` forward passes.

    Pass ``p`` scans pairs ``p .. n-2`` and swaps every dark/light pair it
    meets. Each swap removes one inversion, so the total swap count equals the
    number of dark-before-light pairs in the input.
    """

    name = "left-to-right"

    def sort_in_place(self, row: DiskRow) -> int:
        count = 0
        last = row.total_count() - 1
        for start in range(last):
            for index in range(start, last):
                count += self._swap_if_inverted(row, index)
        return count


def sort_left_to_right(before: DiskRow) -> SortedDisks:
    return LeftToRightSorter().sort(before)
