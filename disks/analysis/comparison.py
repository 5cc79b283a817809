"""Compare sorters on canonical rows of increasing size.

Every row of light count ``k`` starts as ``D L D L ...`` and holds
``k * (k + 1) / 2`` dark-before-light pairs. Both sorters remove exactly one
such pair per swap, so their swap counts agree; the interesting difference is
wall time.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter

import numpy as np
import pandas as pd

from disks.core.row import DiskRow
from disks.manifests import Manifest
from disks.sorters import sorter_from_name
from disks.utils.config import ComparisonConfig
from disks.utils.logging import get_logger

_LOGGER = get_logger("comparison")

COLUMNS = (
    "light_count",
    "total_count",
    "algorithm",
    "swap_count",
    "sorted",
    "median_seconds",
)


def expected_swap_count(light_count: int) -> int:
    """Number of inversions in the canonical alternating row."""
    return light_count * (light_count + 1) // 2


@dataclass(slots=True)
class ComparisonReport:
    """Tabular comparison results, one row per (light_count, algorithm)."""

    frame: pd.DataFrame
    config: ComparisonConfig

    def to_frame(self) -> pd.DataFrame:
        return self.frame.copy()

    def pivot_swaps(self) -> pd.DataFrame:
        """Swap counts with light counts as rows and algorithms as columns."""
        return self.frame.pivot(index="light_count", columns="algorithm", values="swap_count")

    def all_sorted(self) -> bool:
        return bool(self.frame["sorted"].all())

    def summary(self) -> dict[str, object]:
        swaps = self.frame.groupby("algorithm")["swap_count"].sum()
        seconds = self.frame.groupby("algorithm")["median_seconds"].sum()
        return {
            "rows": int(len(self.frame)),
            "all_sorted": self.all_sorted(),
            "total_swaps": {name: int(value) for name, value in swaps.items()},
            "total_median_seconds": {name: float(value) for name, value in seconds.items()},
        }

    def export_csv(self, path: str | Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.frame.to_csv(target, index=False)
        return target

    def export_json(self, path: str | Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = self.frame.to_dict(orient="records")
        target.write_text(json.dumps(payload, indent=2, default=_to_builtin), encoding="utf-8")
        return target

    def to_manifest(self) -> Manifest:
        return Manifest.create(
            command="compare",
            config=self.config.as_dict(),
            results=self.summary(),
        )


def _to_builtin(value: object) -> object:
    if isinstance(value, np.generic):
        return value.item()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def compare_sorters(config: ComparisonConfig | None = None) -> ComparisonReport:
    """Sort canonical rows with each configured algorithm and collect metrics."""

    config = config or ComparisonConfig()
    sorters = [sorter_from_name(name) for name in config.algorithms]
    records: list[dict[str, object]] = []
    for light_count in config.sizes:
        before = DiskRow(light_count)
        for sorter in sorters:
            timings = np.empty(config.repeats, dtype=float)
            results = []
            for repeat in range(config.repeats):
                start = perf_counter()
                results.append(sorter.sort(before))
                timings[repeat] = perf_counter() - start
            result = results[-1]
            records.append(
                {
                    "light_count": light_count,
                    "total_count": before.total_count(),
                    "algorithm": sorter.name,
                    "swap_count": result.swap_count,
                    "sorted": result.is_sorted(),
                    "median_seconds": float(np.median(timings)),
                }
            )
        _LOGGER.info("Compared %d sorters on %d disks", len(sorters), before.total_count())
    frame = pd.DataFrame.from_records(records, columns=list(COLUMNS))
    return ComparisonReport(frame=frame, config=config)
