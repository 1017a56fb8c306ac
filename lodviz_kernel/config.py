from __future__ import annotations

from dataclasses import dataclass, fields
import logging
from pathlib import Path
import tomllib
from typing import Any, Literal, Mapping

from lodviz_kernel.algorithms.statistics import DEFAULT_BIN_RULE, BinRule, FixedBins


LOGGER = logging.getLogger(__name__)

DownsampleAlgorithm = Literal["lttb", "m4", "none"]
DOWNSAMPLE_ALGORITHMS: tuple[str, ...] = ("lttb", "m4", "none")
BIN_RULE_NAMES: tuple[str, ...] = ("sturges", "scott", "freedman_diaconis")


@dataclass(frozen=True)
class KernelSettings:
    """Tunables for chart preparation.

    `bin_rule` is a rule name or a `FixedBins`; in TOML an integer selects fixed bins.
    """

    downsample_algorithm: DownsampleAlgorithm = "lttb"
    max_points_per_pixel: float = 1.0
    bin_rule: BinRule = DEFAULT_BIN_RULE
    kde_points: int = 100
    band_padding: float = 0.1
    y_padding_ratio: float = 0.05

    def __post_init__(self) -> None:
        if self.downsample_algorithm not in DOWNSAMPLE_ALGORITHMS:
            raise ValueError(f"Unsupported downsample_algorithm: {self.downsample_algorithm}")
        if self.max_points_per_pixel <= 0:
            raise ValueError("max_points_per_pixel must be > 0")
        if not isinstance(self.bin_rule, FixedBins) and self.bin_rule not in BIN_RULE_NAMES:
            raise ValueError(f"Unsupported bin_rule: {self.bin_rule}")
        if self.kde_points < 0:
            raise ValueError("kde_points must be >= 0")
        if not 0.0 <= self.band_padding < 1.0:
            raise ValueError("band_padding must be in [0, 1)")
        if self.y_padding_ratio < 0:
            raise ValueError("y_padding_ratio must be >= 0")

    def lttb_threshold(self, width: int) -> int:
        return max(int(width * self.max_points_per_pixel), 0)


def settings_from_mapping(raw: Mapping[str, Any]) -> KernelSettings:
    known = {f.name for f in fields(KernelSettings)}
    for key in raw:
        if key not in known:
            LOGGER.warning("ignoring unknown kernel setting: %s", key)

    values: dict[str, Any] = {}
    if "downsample_algorithm" in raw:
        values["downsample_algorithm"] = _coerce_str(raw["downsample_algorithm"], "downsample_algorithm")
    if "max_points_per_pixel" in raw:
        values["max_points_per_pixel"] = _coerce_float(raw["max_points_per_pixel"], "max_points_per_pixel")
    if "bin_rule" in raw:
        values["bin_rule"] = _coerce_bin_rule(raw["bin_rule"])
    if "kde_points" in raw:
        values["kde_points"] = _coerce_int(raw["kde_points"], "kde_points")
    if "band_padding" in raw:
        values["band_padding"] = _coerce_float(raw["band_padding"], "band_padding")
    if "y_padding_ratio" in raw:
        values["y_padding_ratio"] = _coerce_float(raw["y_padding_ratio"], "y_padding_ratio")
    return KernelSettings(**values)


def load_settings(path: str | Path) -> KernelSettings:
    """Read settings from the `[kernel]` table of a TOML file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"kernel config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("kernel", {})
    if not isinstance(table, dict):
        raise ValueError("kernel must be a table")
    return settings_from_mapping(table)


def _coerce_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value


def _coerce_float(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)


def _coerce_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer")
    return value


def _coerce_bin_rule(value: object) -> BinRule:
    if isinstance(value, FixedBins):
        return value
    if isinstance(value, bool):
        raise ValueError("bin_rule must be a rule name or a bin count")
    if isinstance(value, int):
        return FixedBins(value)
    return _coerce_str(value, "bin_rule")  # type: ignore[return-value]
