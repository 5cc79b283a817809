"""Result containers."""

from __future__ import annotations

from dataclasses import dataclass

from disks.core.row import DiskRow


@dataclass(frozen=True, slots=True)
class SortedDisks:
    """Final row of a sort together with the number of swaps it took.

    ``after`` is a private copy; callers that mutate it do not affect the
    sorter or the input row.
    """

    after: DiskRow
    swap_count: int
    algorithm: str = ""

    def __post_init__(self) -> None:
        if self.swap_count < 0:
            msg = "swap_count must be non-negative"
            raise ValueError(msg)

    def is_sorted(self) -> bool:
        return self.after.is_sorted()

    def to_dict(self) -> dict[str, object]:
        return {
            "algorithm": self.algorithm,
            "after": self.after.to_string(),
            "light_count": self.after.light_count(),
            "swap_count": self.swap_count,
            "sorted": self.after.is_sorted(),
        }
