"""Sorter registry surface.

Provides a small factory to obtain a sorter by name.
"""

from __future__ import annotations

from typing import Final

from disks.sorters.base import BaseSorter
from disks.sorters.lawnmower import LawnmowerSorter, sort_lawnmower
from disks.sorters.left_to_right import LeftToRightSorter, sort_left_to_right

_REGISTRY: Final[dict[str, type[BaseSorter]]] = {
    LeftToRightSorter.name: LeftToRightSorter,
    LawnmowerSorter.name: LawnmowerSorter,
}


def available_sorters() -> list[str]:
    return list(_REGISTRY)


def sorter_from_name(name: str, **params: object) -> BaseSorter:
    """Return a sorter instance from the registry.

    Raises KeyError for unknown sorters.

    Parameters
    ----------
    name : str
        Sorter name: "left-to-right" or "lawnmower"
    **params : object
        Constructor parameters (e.g., strict)

    Returns
    -------
    BaseSorter
        Configured sorter instance
    """
    key = name.lower()
    if key not in _REGISTRY:
        raise KeyError(f"Unknown sorter: {name}. Available: {available_sorters()}")
    cls = _REGISTRY[key]
    return cls(**params)  # type: ignore[arg-type]


__all__ = [
    "BaseSorter",
    "LawnmowerSorter",
    "LeftToRightSorter",
    "available_sorters",
    "sort_lawnmower",
    "sort_left_to_right",
    "sorter_from_name",
]
