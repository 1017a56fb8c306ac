"""Descriptive statistics, box-plot summaries, histogram binning, KDE,
moving averages and least-squares regression.

Functions return `None` (or an empty list) for inputs too small to produce a
meaningful result instead of raising. `median` and `box_plot_stats` sort their
list argument in place; pass a copy when the original order matters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import functools
import logging
import math
import sys
from typing import Literal, Sequence, TypeAlias

import numpy as np


LOGGER = logging.getLogger(__name__)
EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class FixedBins:
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("FixedBins.count must be >= 0")


BinRule: TypeAlias = Literal["sturges", "scott", "freedman_diaconis"] | FixedBins
DEFAULT_BIN_RULE: BinRule = "freedman_diaconis"


@dataclass(frozen=True)
class Bin:
    x0: float
    x1: float
    count: int


@dataclass(frozen=True)
class BoxPlotStats:
    q1: float
    median: float
    q3: float
    iqr: float
    lower_whisker: float
    upper_whisker: float
    mean: float
    outliers: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class KdeResult:
    xs: list[float]
    ys: list[float]


def _compare(a: float, b: float) -> int:
    # NaN compares equal to everything.
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


_SORT_KEY = functools.cmp_to_key(_compare)


def _sort_in_place(data: list[float]) -> None:
    data.sort(key=_SORT_KEY)


def extent(data: Sequence[float]) -> tuple[float, float] | None:
    if len(data) == 0:
        return None
    lo = hi = data[0]
    for value in data[1:]:
        if value < lo:
            lo = value
        if value > hi:
            hi = value
    return (lo, hi)


def mean(data: Sequence[float]) -> float | None:
    if len(data) == 0:
        return None
    return sum(data) / len(data)


def sum_values(data: Sequence[float]) -> float:
    return float(sum(data))


def median(data: list[float]) -> float | None:
    """Median of `data`. Sorts `data` in place."""
    if len(data) == 0:
        return None
    _sort_in_place(data)
    mid = len(data) // 2
    if len(data) % 2 == 0:
        return (data[mid - 1] + data[mid]) / 2.0
    return data[mid]


def std_dev(data: Sequence[float]) -> float | None:
    """Sample standard deviation (n - 1 denominator)."""
    if len(data) < 2:
        return None
    m = sum(data) / len(data)
    variance = sum((x - m) ** 2 for x in data) / (len(data) - 1)
    return math.sqrt(variance)


def percentile(sorted_data: Sequence[float], p: float) -> float:
    """Linear-interpolation percentile of ascending `sorted_data`, `p` in [0, 1]."""
    n = len(sorted_data)
    if n == 0:
        return 0.0
    if n == 1:
        return sorted_data[0]
    h = p * (n - 1)
    lo = int(math.floor(h))
    frac = h - lo
    if lo + 1 >= n:
        return sorted_data[n - 1]
    return sorted_data[lo] * (1.0 - frac) + sorted_data[lo + 1] * frac


def box_plot_stats(data: list[float]) -> BoxPlotStats | None:
    """Tukey box-plot summary. Sorts `data` in place."""
    if len(data) == 0:
        return None
    _sort_in_place(data)

    q1 = percentile(data, 0.25)
    med = percentile(data, 0.5)
    q3 = percentile(data, 0.75)
    iqr = q3 - q1
    lower_fence = q1 - 1.5 * iqr
    upper_fence = q3 + 1.5 * iqr

    lower_whisker = next((x for x in data if x >= lower_fence), q1)
    upper_whisker = next((x for x in reversed(data) if x <= upper_fence), q3)
    outliers = [x for x in data if x < lower_fence or x > upper_fence]

    return BoxPlotStats(
        q1=q1,
        median=med,
        q3=q3,
        iqr=iqr,
        lower_whisker=lower_whisker,
        upper_whisker=upper_whisker,
        mean=sum(data) / len(data),
        outliers=outliers,
    )


def _sturges_count(n: int) -> int:
    return int(math.ceil(math.log2(n))) + 1


def _bin_count(data: Sequence[float], rule: BinRule, span: float) -> int:
    n = len(data)
    if isinstance(rule, FixedBins):
        return rule.count
    if rule == "sturges":
        return _sturges_count(n)
    if rule == "scott":
        sd = std_dev(data)
        if sd is None or sd <= 0:
            return 1
        h = 3.49 * sd * n ** (-1.0 / 3.0)
        return int(math.ceil(span / h))
    if rule == "freedman_diaconis":
        ordered = list(data)
        _sort_in_place(ordered)
        iqr = percentile(ordered, 0.75) - percentile(ordered, 0.25)
        if iqr > 0:
            h = 2.0 * iqr * n ** (-1.0 / 3.0)
            return int(math.ceil(span / h))
        LOGGER.debug("freedman-diaconis: zero IQR over %d values, using sturges", n)
        return _sturges_count(n)
    raise ValueError(f"Unsupported bin rule: {rule!r}")


def histogram_bins(data: Sequence[float], rule: BinRule = DEFAULT_BIN_RULE) -> list[Bin]:
    """Equal-width bins over [min, max]; the last bin is closed on the right."""
    if len(data) == 0:
        return []
    lo, hi = extent(data)  # type: ignore[misc]
    if abs(hi - lo) < EPSILON:
        return [Bin(x0=lo, x1=lo + 1.0, count=len(data))]

    k = max(1, _bin_count(data, rule, hi - lo))
    width = (hi - lo) / k
    counts = [0] * k
    for value in data:
        if value < lo or value > hi:
            continue
        idx = min(int(math.floor((value - lo) / width)), k - 1)
        counts[idx] += 1
    return [Bin(x0=lo + i * width, x1=lo + (i + 1) * width, count=counts[i]) for i in range(k)]


def gaussian_kde(data: Sequence[float], n_points: int) -> KdeResult | None:
    """Gaussian kernel density on an `n_points` grid, Silverman bandwidth."""
    if len(data) < 2 or n_points == 0:
        return None
    sd = std_dev(data)
    if sd is None or sd <= 0:
        return None

    values = np.asarray(data, dtype=np.float64)
    n = float(values.size)
    h = 1.06 * sd * n ** (-0.2)
    x_lo = float(values.min()) - 3.0 * h
    x_hi = float(values.max()) + 3.0 * h
    norm = 1.0 / (h * math.sqrt(2.0 * math.pi) * n)

    xs = x_lo + (x_hi - x_lo) * np.arange(n_points, dtype=np.float64) / max(n_points - 1, 1)
    z = (xs[:, None] - values[None, :]) / h
    ys = (norm * np.exp(-0.5 * z * z)).sum(axis=1)
    return KdeResult(xs=xs.tolist(), ys=ys.tolist())


def sma(data: Sequence[float], window: int) -> list[float]:
    """Simple moving average; `len(data) - window + 1` values."""
    if window == 0 or window > len(data):
        return []
    values = np.asarray(data, dtype=np.float64)
    windows = np.lib.stride_tricks.sliding_window_view(values, window)
    return (windows.sum(axis=1) / window).tolist()


def ema(data: Sequence[float], alpha: float) -> list[float]:
    """Exponential moving average seeded with the first value."""
    if len(data) == 0:
        return []
    alpha = min(1.0, max(0.0, alpha))
    out = [float(data[0])]
    for value in data[1:]:
        out.append(alpha * value + (1.0 - alpha) * out[-1])
    return out


def linear_regression(points: Sequence[tuple[float, float]]) -> tuple[float, float] | None:
    """OLS fit `y = intercept + slope * x`; returns `(intercept, slope)`."""
    n = len(points)
    if n < 2:
        return None
    x_mean = sum(x for x, _ in points) / n
    y_mean = sum(y for _, y in points) / n
    num = sum((x - x_mean) * (y - y_mean) for x, y in points)
    den = sum((x - x_mean) ** 2 for x, _ in points)
    if abs(den) < EPSILON:
        return None
    slope = num / den
    return (y_mean - slope * x_mean, slope)
