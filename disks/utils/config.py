"""Configuration utilities."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_ALGORITHMS = ("left-to-right", "lawnmower")


def _as_int(value: Any, name: str) -> int:
    """Read an integer setting; digit strings are accepted, other types are not."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def _as_tuple(value: Any, name: str) -> tuple[Any, ...]:
    """Read a list setting; a lone scalar becomes a one-element tuple."""
    if isinstance(value, (str, int)):
        return (value,)
    if isinstance(value, Iterable) and not isinstance(value, Mapping):
        return tuple(value)
    raise ValueError(f"{name} must be a list, got {value!r}")


@dataclass(slots=True)
class SortConfig:
    """Settings for a single sort run."""

    algorithm: str = "left-to-right"
    light_count: int = 3
    strict: bool = False

    def __post_init__(self) -> None:
        if self.light_count < 1:
            raise ValueError("light_count must be >= 1")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SortConfig:
        return cls(
            algorithm=str(data.get("algorithm", "left-to-right")),
            light_count=_as_int(data.get("light_count", 3), "light_count"),
            strict=_as_bool(data.get("strict", False), "strict"),
        )

    def as_dict(self) -> dict[str, object]:
        return {
            "algorithm": self.algorithm,
            "light_count": self.light_count,
            "strict": self.strict,
        }


@dataclass(slots=True)
class ComparisonConfig:
    """Settings for comparing sorters across row sizes.

    ``sizes`` are light counts; each row holds twice as many disks.
    """

    sizes: tuple[int, ...] = (1, 2, 4, 8, 16, 32)
    repeats: int = 3
    algorithms: tuple[str, ...] = field(default_factory=lambda: DEFAULT_ALGORITHMS)

    def __post_init__(self) -> None:
        self.sizes = tuple(dict.fromkeys(_as_int(size, "size") for size in self.sizes))
        self.algorithms = tuple(self.algorithms)
        if not self.sizes:
            raise ValueError("sizes must not be empty")
        if min(self.sizes) < 1:
            raise ValueError("every size must be >= 1")
        if self.repeats < 1:
            raise ValueError("repeats must be >= 1")
        if not self.algorithms:
            raise ValueError("algorithms must not be empty")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ComparisonConfig:
        defaults = cls()
        return cls(
            sizes=_as_tuple(data.get("sizes", defaults.sizes), "sizes"),
            repeats=_as_int(data.get("repeats", defaults.repeats), "repeats"),
            algorithms=_as_tuple(data.get("algorithms", defaults.algorithms), "algorithms"),
        )

    def as_dict(self) -> dict[str, object]:
        return {
            "sizes": list(self.sizes),
            "repeats": self.repeats,
            "algorithms": list(self.algorithms),
        }
