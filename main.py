from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import logging
from pathlib import Path
from typing import Any

from lodviz_kernel.algorithms import box_plot_stats, extent, gaussian_kde, histogram_bins, lttb_downsample, m4_downsample, mean, std_dev
from lodviz_kernel.config import DOWNSAMPLE_ALGORITHMS, KernelSettings, load_settings
from lodviz_kernel.data import DataPoint
from lodviz_kernel.errors import KernelDataError


LOGGER = logging.getLogger("lodviz_kernel.cli")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="lodviz-kernel")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--config", type=Path, default=None, help="TOML file with a [kernel] table.")
    sub = parser.add_subparsers(dest="command", required=True)

    describe = sub.add_parser("describe", help="Summary statistics for a JSON array of numbers.")
    describe.add_argument("input", type=Path)

    downsample = sub.add_parser("downsample", help="Reduce a JSON array of [x, y] pairs.")
    downsample.add_argument("input", type=Path)
    downsample.add_argument("--algorithm", choices=list(DOWNSAMPLE_ALGORITHMS), default=None)
    downsample.add_argument(
        "--threshold",
        type=int,
        default=500,
        help="LTTB target point count, or pixel columns for m4.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    settings = load_settings(args.config) if args.config is not None else KernelSettings()

    if args.command == "describe":
        values = _read_values(args.input)
        print(json.dumps(describe_values(values, settings), indent=2, sort_keys=True))
        return

    if args.command == "downsample":
        points = _read_points(args.input)
        algorithm = args.algorithm or settings.downsample_algorithm
        if args.threshold < 0:
            raise ValueError("--threshold must be >= 0")
        if algorithm == "lttb":
            reduced = lttb_downsample(points, args.threshold)
        elif algorithm == "m4":
            reduced = m4_downsample(points, args.threshold)
        else:
            reduced = list(points)
        LOGGER.info("downsampled %d -> %d points with %s", len(points), len(reduced), algorithm)
        print(json.dumps([[p.x, p.y] for p in reduced]))
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def describe_values(values: list[float], settings: KernelSettings) -> dict[str, Any]:
    limits = extent(values)
    bins = histogram_bins(values, settings.bin_rule)
    # box_plot_stats sorts its argument
    stats = box_plot_stats(list(values))
    kde = gaussian_kde(values, settings.kde_points)
    return {
        "count": len(values),
        "extent": list(limits) if limits is not None else None,
        "mean": mean(values),
        "std_dev": std_dev(values),
        "box_plot": asdict(stats) if stats is not None else None,
        "histogram": [asdict(b) for b in bins],
        "kde": asdict(kde) if kde is not None else None,
    }


def _load_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"input not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _read_values(path: Path) -> list[float]:
    raw = _load_json(path)
    if not isinstance(raw, list):
        raise KernelDataError("describe input must be a JSON array of numbers")
    out: list[float] = []
    for i, item in enumerate(raw):
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise KernelDataError(f"entry {i} is not a number: {item!r}")
        out.append(float(item))
    return out


def _read_points(path: Path) -> list[DataPoint]:
    raw = _load_json(path)
    if not isinstance(raw, list):
        raise KernelDataError("downsample input must be a JSON array of [x, y] pairs")
    points: list[DataPoint] = []
    for i, item in enumerate(raw):
        if not isinstance(item, list) or len(item) != 2:
            raise KernelDataError(f"entry {i} is not an [x, y] pair: {item!r}")
        x, y = item
        if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            raise KernelDataError(f"entry {i} has non-numeric coordinates: {item!r}")
        points.append(DataPoint(float(x), float(y)))
    return points


if __name__ == "__main__":
    main()
