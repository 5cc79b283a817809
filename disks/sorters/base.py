"""Abstract sorter definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from disks.core.results import SortedDisks
from disks.core.row import DiskColor, DiskRow
from disks.utils.logging import get_logger

_LOGGER = get_logger("sorters")


class BaseSorter(ABC):
    """Shared scaffolding for sorting strategies.

    ``sort`` copies the input, applies the alternating guard and delegates the
    traversal to :meth:`sort_in_place`. A row that is not in canonical
    alternating form comes back unchanged with a swap count of ``0``; pass
    ``strict=True`` to get a ``ValueError`` instead.
    """

    name: ClassVar[str] = ""

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def sort(self, before: DiskRow) -> SortedDisks:
        after = before.copy()
        if not after.is_alternating():
            if self._strict:
                msg = f"{self.name} sorter requires an alternating row, got {after}"
                raise ValueError(msg)
            _LOGGER.warning("Row is not alternating, skipping %s sort: %s", self.name, after)
            return SortedDisks(after=after, swap_count=0, algorithm=self.name)

        swap_count = self.sort_in_place(after)
        _LOGGER.debug(
            "%s sorted %d disks with %d swaps", self.name, after.total_count(), swap_count
        )
        return SortedDisks(after=after, swap_count=swap_count, algorithm=self.name)

    @abstractmethod
    def sort_in_place(self, row: DiskRow) -> int:
        """Sort ``row`` in place and return the number of swaps performed."""

    @staticmethod
    def _swap_if_inverted(row: DiskRow, index: int) -> int:
        """Swap a dark disk at ``index`` with a light one after it; return swaps made."""
        if row.get(index) is DiskColor.DARK and row.get(index + 1) is DiskColor.LIGHT:
            row.swap(index)
            return 1
        return 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strict={self._strict})"
