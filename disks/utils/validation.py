"""Validation helpers for disk rows."""

from __future__ import annotations

from disks.core.row import DiskColor, DiskRow


def parse_row(text: str) -> DiskRow:
    """Parse ``"D L D L"`` (spaces optional) into a :class:`DiskRow`."""
    symbols = [char for char in text if not char.isspace()]
    if not symbols:
        msg = "Empty disk rows are not allowed"
        raise ValueError(msg)
    return DiskRow.from_colors(DiskColor.from_symbol(symbol) for symbol in symbols)


def ensure_row(entry: DiskRow | str | int) -> DiskRow:
    """Normalize a row, a textual row or a light count into a :class:`DiskRow`."""
    if isinstance(entry, DiskRow):
        return entry
    if isinstance(entry, bool):
        msg = f"Cannot build a disk row from {entry!r}"
        raise ValueError(msg)
    if isinstance(entry, int):
        return DiskRow(entry)
    if isinstance(entry, str):
        return parse_row(entry)
    msg = f"Cannot build a disk row from {type(entry).__name__}"
    raise ValueError(msg)
