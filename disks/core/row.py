"""Row-of-disks data structure."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum


class DiskColor(Enum):
    """State of one disk."""

    LIGHT = "L"
    DARK = "D"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> DiskColor:
        try:
            return cls(symbol.strip().upper())
        except ValueError:
            msg = f"Unknown disk symbol: {symbol!r} (expected 'L' or 'D')"
            raise ValueError(msg) from None


class DiskRow:
    """A fixed-length row of ``2 * light_count`` disks.

    A new row alternates dark and light, starting with dark at index 0. The
    length never changes; tokens only move through :meth:`swap`. Every row holds
    as many light disks as dark ones.
    """

    __slots__ = ("_colors",)

    def __init__(self, light_count: int) -> None:
        if light_count < 1:
            msg = f"light_count must be >= 1, got {light_count}"
            raise ValueError(msg)
        self._colors = [DiskColor.LIGHT] * (light_count * 2)
        for index in range(0, len(self._colors), 2):
            self._colors[index] = DiskColor.DARK

    @classmethod
    def from_colors(cls, colors: Iterable[DiskColor]) -> DiskRow:
        """Build a row from an explicit token sequence.

        Raises ``ValueError`` unless the sequence is non-empty and holds the
        same number of light and dark disks.
        """
        tokens = list(colors)
        if not all(isinstance(token, DiskColor) for token in tokens):
            msg = "Row tokens must be DiskColor values"
            raise ValueError(msg)
        light = tokens.count(DiskColor.LIGHT)
        if not tokens or light * 2 != len(tokens):
            msg = f"Row needs equal, non-zero light and dark counts: {len(tokens)} tokens, {light} light"
            raise ValueError(msg)
        row = cls(light)
        row._colors = tokens
        return row

    def copy(self) -> DiskRow:
        return DiskRow.from_colors(self._colors)

    def total_count(self) -> int:
        return len(self._colors)

    def light_count(self) -> int:
        return self.total_count() // 2

    def dark_count(self) -> int:
        return self.light_count()

    def is_index(self, index: int) -> bool:
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        if not self.is_index(index):
            msg = f"Disk index {index} out of range for row of {self.total_count()}"
            raise IndexError(msg)
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """Exchange the disks at ``left_index`` and ``left_index + 1`` in place."""
        right_index = left_index + 1
        if not (self.is_index(left_index) and self.is_index(right_index)):
            msg = f"Cannot swap disks {left_index} and {right_index} in row of {self.total_count()}"
            raise IndexError(msg)
        colors = self._colors
        colors[left_index], colors[right_index] = colors[right_index], colors[left_index]

    def is_alternating(self) -> bool:
        """True only for the canonical pattern: dark at even, light at odd indices."""
        return all(
            color is (DiskColor.DARK if index % 2 == 0 else DiskColor.LIGHT)
            for index, color in enumerate(self._colors)
        )

    def is_sorted(self) -> bool:
        half = self.total_count() // 2
        return all(color is DiskColor.LIGHT for color in self._colors[:half]) and all(
            color is DiskColor.DARK for color in self._colors[half:]
        )

    def to_string(self) -> str:
        return " ".join(color.symbol for color in self._colors)

    def __len__(self) -> int:
        return self.total_count()

    def __getitem__(self, index: int) -> DiskColor:
        return self.get(index)

    def __iter__(self) -> Iterator[DiskColor]:
        return iter(tuple(self._colors))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiskRow):
            return NotImplemented
        return self._colors == other._colors

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DiskRow({self.to_string()!r})"
