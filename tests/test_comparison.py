import json

import pandas as pd
import pytest

from disks.analysis import compare_sorters, expected_swap_count
from disks.utils import ComparisonConfig


@pytest.fixture
def report():
    return compare_sorters(ComparisonConfig(sizes=(1, 2, 3), repeats=2))


def test_report_has_one_row_per_size_and_algorithm(report):
    frame = report.to_frame()
    assert len(frame) == 6
    assert list(frame.columns) == [
        "light_count",
        "total_count",
        "algorithm",
        "swap_count",
        "sorted",
        "median_seconds",
    ]
    assert (frame["total_count"] == 2 * frame["light_count"]).all()
    assert (frame["median_seconds"] >= 0).all()


def test_swap_counts_match_inversions(report):
    pivot = report.pivot_swaps()
    for light_count in (1, 2, 3):
        assert pivot.loc[light_count, "left-to-right"] == expected_swap_count(light_count)
        assert pivot.loc[light_count, "lawnmower"] == expected_swap_count(light_count)


def test_summary(report):
    summary = report.summary()
    assert summary["rows"] == 6
    assert summary["all_sorted"] is True
    assert summary["total_swaps"] == {"lawnmower": 10, "left-to-right": 10}


def test_export_csv(report, tmp_path):
    path = report.export_csv(tmp_path / "out" / "comparison.csv")
    loaded = pd.read_csv(path)
    assert loaded["swap_count"].tolist() == report.frame["swap_count"].tolist()


def test_export_json(report, tmp_path):
    path = report.export_json(tmp_path / "comparison.json")
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert len(payload) == 6
    assert payload[0]["algorithm"] == "left-to-right"
    assert payload[0]["swap_count"] == 1


def test_to_manifest(report):
    manifest = report.to_manifest()
    assert manifest.command == "compare"
    assert manifest.config["sizes"] == [1, 2, 3]
    assert manifest.results["all_sorted"] is True


def test_single_algorithm():
    report = compare_sorters(ComparisonConfig(sizes=(4,), repeats=1, algorithms=("lawnmower",)))
    assert report.frame["algorithm"].tolist() == ["lawnmower"]


def test_unknown_algorithm_raises():
    with pytest.raises(KeyError):
        compare_sorters(ComparisonConfig(sizes=(1,), repeats=1, algorithms=("shellsort",)))
