"""Sorter timing micro benchmarks."""

from time import perf_counter

from disks.core.row import DiskRow
from disks.sorters import available_sorters, sorter_from_name

LIGHT_COUNTS = [8, 32, 128, 256]


def time_sorter(name: str, light_count: int, rounds: int = 5) -> float:
    sorter = sorter_from_name(name)
    row = DiskRow(light_count)
    start = perf_counter()
    for _ in range(rounds):
        sorter.sort(row)
    return (perf_counter() - start) / rounds


if __name__ == "__main__":
    for light_count in LIGHT_COUNTS:
        for name in available_sorters():
            print(f"{name:>14} k={light_count:<4}: {time_sorter(name, light_count):.6f}s")
