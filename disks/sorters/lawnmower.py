"""Lawnmower sorter: alternating forward and backward sweeps."""

from __future__ import annotations

from disks.core.results import SortedDisks
from disks.core.row import DiskRow
from disks.sorters.base import BaseSorter


class LawnmowerSorter(BaseSorter):
    """Sweep forward over even pairs, then backward over odd pairs, until sorted.

    The forward sweep visits indices ``0, 2, 4, ...``; the backward sweep starts
    at ``n - 1`` and steps down by two while the index is positive, skipping any
    index without a right neighbour. A sweep pair is one round of odd-even
    transposition, which finishes within ``n`` rounds for a balanced row.
    """

    name = "lawnmower"

    def sort_in_place(self, row: DiskRow) -> int:
        count = 0
        while not row.is_sorted():
            count += self._forward_sweep(row)
            count += self._backward_sweep(row)
        return count

    def _forward_sweep(self, row: DiskRow) -> int:
        count = 0
        for index in range(0, row.total_count() - 1, 2):
            if row.is_index(index + 1):
                count += self._swap_if_inverted(row, index)
        return count

    def _backward_sweep(self, row: DiskRow) -> int:
        count = 0
        for index in range(row.total_count() - 1, 0, -2):
            if row.is_index(index + 1):
                count += self._swap_if_inverted(row, index)
        return count


def sort_lawnmower(before: DiskRow) -> SortedDisks:
    return LawnmowerSorter().sort(before)
