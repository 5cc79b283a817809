#!/usr/bin/env python3
"""
Example showing both sorters on the same row.

This example shows:
1. Building the canonical alternating row
2. Sorting it with the left-to-right and lawnmower algorithms
3. Comparing the sorters across sizes and exporting the table
"""

from pathlib import Path

from disks import DiskRow, sort_lawnmower, sort_left_to_right
from disks.analysis import compare_sorters
from disks.utils import ComparisonConfig


def main() -> None:
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    row = DiskRow(4)
    print(f"before: {row}")  # noqa: T201
    for label, sort in (("left-to-right", sort_left_to_right), ("lawnmower", sort_lawnmower)):
        result = sort(row)
        print(f"{label:>14}: {result.after}  ({result.swap_count} swaps)")  # noqa: T201

    report = compare_sorters(ComparisonConfig(sizes=(1, 2, 4, 8, 16), repeats=3))
    print(report.pivot_swaps().to_string())  # noqa: T201
    report.export_csv(output_dir / "comparison.csv")
    report.to_manifest().save(output_dir / "manifest.json")


if __name__ == "__main__":
    main()
