"""Alternating disks command-line interface."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import yaml

from disks.analysis import compare_sorters
from disks.core.row import DiskRow
from disks.sorters import available_sorters, sorter_from_name
from disks.utils.config import ComparisonConfig, SortConfig
from disks.utils.logging import get_logger, set_verbosity
from disks.utils.validation import ensure_row

_LOGGER = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Alternating disks sorter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    sort_parser = subparsers.add_parser("sort", help="Sort one row of disks")
    sort_parser.add_argument(
        "light_count", nargs="?", type=int, default=3, help="Number of light disks (default: 3)"
    )
    sort_parser.add_argument(
        "--algorithm",
        choices=available_sorters(),
        default="left-to-right",
        help="Sorting algorithm (default: left-to-right)",
    )
    sort_parser.add_argument("--row", help='Explicit starting row, e.g. "D L D L"')
    sort_parser.add_argument(
        "--strict", action="store_true", help="Fail instead of skipping non-alternating rows"
    )

    compare_parser = subparsers.add_parser("compare", help="Compare sorters across row sizes")
    compare_parser.add_argument("--sizes", nargs="+", type=int, help="Light counts to compare")
    compare_parser.add_argument("--repeats", type=int, help="Timing repeats per measurement")
    compare_parser.add_argument(
        "--algorithms", nargs="+", choices=available_sorters(), help="Sorters to compare"
    )
    compare_parser.add_argument("--output", help="Write results to a .csv or .json file")
    compare_parser.add_argument("--manifest", help="Write a run manifest (JSON)")

    run_parser = subparsers.add_parser("run", help="Run sort/compare sections from a config file")
    run_parser.add_argument("config", help="Path to YAML/JSON config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbosity(args.verbose)

    if args.command == "sort":
        config = SortConfig(algorithm=args.algorithm, light_count=args.light_count, strict=args.strict)
        return _run_sort(config, args.row)
    elif args.command == "compare":
        overrides: dict[str, Any] = {}
        if args.sizes:
            overrides["sizes"] = args.sizes
        if args.repeats is not None:
            overrides["repeats"] = args.repeats
        if args.algorithms:
            overrides["algorithms"] = args.algorithms
        config = ComparisonConfig.from_mapping(overrides)
        return _run_compare(config, output=args.output, manifest=args.manifest)
    elif args.command == "run":
        return _run_from_config(Path(args.config))

    parser.print_help()
    return 0


def _run_sort(config: SortConfig, before: DiskRow | str | int | None = None) -> int:
    before = ensure_row(config.light_count if before is None else before)
    sorter = sorter_from_name(config.algorithm, strict=config.strict)
    result = sorter.sort(before)
    print(f"algorithm : {sorter.name}")
    print(f"before    : {before}")
    print(f"after     : {result.after}")
    print(f"swaps     : {result.swap_count}")
    return 0


def _run_compare(
    config: ComparisonConfig,
    *,
    output: str | Path | None = None,
    manifest: str | Path | None = None,
) -> int:
    report = compare_sorters(config)
    print(report.pivot_swaps().to_string())
    if output:
        target = Path(output)
        if target.suffix.lower() == ".json":
            report.export_json(target)
        else:
            report.export_csv(target)
        _LOGGER.info("Wrote comparison to %s", target)
    if manifest:
        report.to_manifest().save(manifest)
    print(json.dumps(report.summary(), indent=2))
    return 0 if report.all_sorted() else 1


def _run_from_config(path: Path) -> int:
    data = _load_config(path)
    if not isinstance(data, dict) or not ({"sort", "compare"} & set(data)):
        raise ValueError("Config needs a 'sort' and/or 'compare' section")

    status = 0
    if "sort" in data:
        section = dict(data["sort"] or {})
        row = section.pop("row", None)
        status |= _run_sort(SortConfig.from_mapping(section), row)
    if "compare" in data:
        section = dict(data["compare"] or {})
        output = section.pop("output", None)
        manifest = section.pop("manifest", None)
        status |= _run_compare(
            ComparisonConfig.from_mapping(section), output=output, manifest=manifest
        )
    return status


def _load_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    if path.suffix.lower() in {".json"}:
        return json.loads(path.read_text())
    return yaml.safe_load(path.read_text())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
