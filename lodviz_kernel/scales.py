from __future__ import annotations

from dataclasses import dataclass, field
import math
import sys
from typing import Protocol, Sequence

import numpy as np


EPSILON = sys.float_info.epsilon


class Scale(Protocol):
    def map(self, value: float) -> float:
        ...

    def inverse(self, mapped: float) -> float:
        ...

    def domain(self) -> tuple[float, float]:
        ...

    def range(self) -> tuple[float, float]:
        ...


def _lerp_map(value: float, domain: tuple[float, float], range_: tuple[float, float]) -> float:
    d0, d1 = domain
    r0, r1 = range_
    if abs(d1 - d0) < EPSILON:
        return r0
    normalized = (value - d0) / (d1 - d0)
    return r0 + normalized * (r1 - r0)


def _lerp_inverse(mapped: float, domain: tuple[float, float], range_: tuple[float, float]) -> float:
    d0, d1 = domain
    r0, r1 = range_
    if abs(r1 - r0) < EPSILON:
        return d0
    normalized = (mapped - r0) / (r1 - r0)
    return d0 + normalized * (d1 - d0)


def even_ticks(domain: tuple[float, float], count: int) -> list[float]:
    """`count + 1` evenly spaced values from domain start to domain end."""
    d0, d1 = domain
    if count <= 0:
        return [float(d0)]
    return [float(v) for v in np.linspace(d0, d1, count + 1, dtype=np.float64)]


@dataclass(frozen=True)
class LinearScale:
    domain_extent: tuple[float, float]
    range_extent: tuple[float, float]

    @classmethod
    def from_extent(cls, domain_min: float, domain_max: float, range_min: float, range_max: float) -> "LinearScale":
        return cls((float(domain_min), float(domain_max)), (float(range_min), float(range_max)))

    def map(self, value: float) -> float:
        return _lerp_map(value, self.domain_extent, self.range_extent)

    def inverse(self, mapped: float) -> float:
        return _lerp_inverse(mapped, self.domain_extent, self.range_extent)

    def domain(self) -> tuple[float, float]:
        return self.domain_extent

    def range(self) -> tuple[float, float]:
        return self.range_extent

    def ticks(self, count: int) -> list[float]:
        return even_ticks(self.domain_extent, count)


@dataclass(frozen=True)
class TimeScale:
    """Linear mapping over numeric timestamps. No calendar handling."""

    domain_extent: tuple[float, float]
    range_extent: tuple[float, float]

    def map(self, value: float) -> float:
        return _lerp_map(value, self.domain_extent, self.range_extent)

    def inverse(self, mapped: float) -> float:
        return _lerp_inverse(mapped, self.domain_extent, self.range_extent)

    def domain(self) -> tuple[float, float]:
        return self.domain_extent

    def range(self) -> tuple[float, float]:
        return self.range_extent

    def ticks(self, count: int) -> list[float]:
        return even_ticks(self.domain_extent, count)


@dataclass(frozen=True)
class LogScale:
    domain_extent: tuple[float, float]
    range_extent: tuple[float, float]
    base: float = 10.0

    def __post_init__(self) -> None:
        d0, d1 = self.domain_extent
        if not d0 > 0:
            raise ValueError("log scale domain min must be > 0")
        if not d1 > 0:
            raise ValueError("log scale domain max must be > 0")
        if not (self.base > 0 and self.base != 1):
            raise ValueError("log base must be > 0 and != 1")

    def _log(self, value: float) -> float:
        return math.log(value, self.base)

    def _log_domain(self) -> tuple[float, float]:
        return (self._log(self.domain_extent[0]), self._log(self.domain_extent[1]))

    def map(self, value: float) -> float:
        if value <= 0:
            return self.range_extent[0]
        return _lerp_map(self._log(value), self._log_domain(), self.range_extent)

    def inverse(self, mapped: float) -> float:
        r0, r1 = self.range_extent
        if abs(r1 - r0) < EPSILON:
            return self.domain_extent[0]
        return self.base ** _lerp_inverse(mapped, self._log_domain(), self.range_extent)

    def domain(self) -> tuple[float, float]:
        return self.domain_extent

    def range(self) -> tuple[float, float]:
        return self.range_extent

    def ticks(self, count: int) -> list[float]:
        exponents = even_ticks(self._log_domain(), count)
        return [float(self.base**e) for e in exponents]


@dataclass(frozen=True)
class BandScale:
    """Equal-width bands for ordered category labels.

    `padding` is the fraction of each step left as gutter, split evenly on
    both sides of the band.
    """

    category_labels: Sequence[str] = field(default_factory=tuple)
    range_extent: tuple[float, float] = (0.0, 1.0)
    padding: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "category_labels", tuple(self.category_labels))
        object.__setattr__(self, "padding", min(1.0, max(0.0, float(self.padding))))

    def step(self) -> float:
        if not self.category_labels:
            return 0.0
        r0, r1 = self.range_extent
        return abs(r1 - r0) / len(self.category_labels)

    def band_width(self) -> float:
        return self.step() * (1.0 - self.padding)

    def map_index(self, index: int) -> float:
        step = self.step()
        return self.range_extent[0] + index * step + step * self.padding / 2.0

    def map_index_center(self, index: int) -> float:
        return self.map_index(index) + self.band_width() / 2.0

    def map_category(self, name: str) -> float | None:
        # Linear scan; first matching label wins.
        for index, label in enumerate(self.category_labels):
            if label == name:
                return self.map_index(index)
        return None

    def __len__(self) -> int:
        return len(self.category_labels)

    def is_empty(self) -> bool:
        return not self.category_labels

    def categories(self) -> tuple[str, ...]:
        return tuple(self.category_labels)

    def range(self) -> tuple[float, float]:
        return self.range_extent


def padded_domain(vmin: float, vmax: float, ratio: float = 0.05) -> tuple[float, float]:
    """Grow [vmin, vmax] by `ratio` of its span; a flat span grows by max(1, |v|*ratio)."""
    if vmin == vmax:
        delta = max(1.0, abs(vmin) * ratio)
        return (vmin - delta, vmax + delta)
    pad = (vmax - vmin) * ratio
    return (vmin - pad, vmax + pad)


NICE_FRACTIONS: tuple[float, ...] = (1.0, 2.0, 5.0, 10.0)


def nice_step(span: float, target: int) -> float:
    """1, 2 or 5 times a power of ten, closest in log space to `span / (target - 1)`."""
    raw = abs(span) / max(target - 1, 1)
    if raw <= 0 or not math.isfinite(raw):
        return 1.0
    magnitude = 10.0 ** math.floor(math.log10(raw))
    return min((f * magnitude for f in NICE_FRACTIONS), key=lambda step: abs(math.log10(step / raw)))


def nice_ticks(vmin: float, vmax: float, target: int) -> list[float]:
    """Ticks on `nice_step` multiples covering [vmin, vmax] in either order."""
    if target <= 0:
        raise ValueError("target must be > 0")
    lo, hi = min(vmin, vmax), max(vmin, vmax)
    if lo == hi:
        return [float(lo)]

    step = nice_step(hi - lo, target)
    first = math.floor(lo / step)
    last = math.ceil(hi / step)
    # Integer multiples keep float drift out of the tick values.
    ticks = np.arange(first, last + 1, dtype=np.float64) * step
    return [0.0 if t == 0 else float(t) for t in ticks]


def tick_decimals(step: float) -> int:
    """Fraction digits needed to tell ticks `step` apart (1/2/5 steps)."""
    if step <= 0 or not math.isfinite(step):
        return 2
    return max(0, -math.floor(math.log10(step) + 1e-9))


def format_tick(value: float, decimals: int = 2) -> str:
    if not math.isfinite(value):
        return str(value)
    out = f"{value:.{decimals}f}"
    # -0.00 and friends
    if float(out) == 0.0:
        out = out.lstrip("-")
    return out


def tick_labels(ticks: Sequence[float]) -> list[str]:
    """Labels sharing one decimal count taken from the tick spacing."""
    if len(ticks) < 2:
        return [format_tick(float(t)) for t in ticks]
    decimals = tick_decimals(abs(float(ticks[1]) - float(ticks[0])))
    return [format_tick(float(t), decimals) for t in ticks]
