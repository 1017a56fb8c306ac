from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Literal, Sequence, TypeVar


DataType = Literal["quantitative", "temporal", "nominal", "ordinal"]
WaterfallKind = Literal["start", "delta", "total"]

DATA_TYPES: tuple[str, ...] = ("quantitative", "temporal", "nominal", "ordinal")
WATERFALL_KINDS: tuple[str, ...] = ("start", "delta", "total")

T = TypeVar("T")


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float


@dataclass
class Series(Generic[T]):
    """Named, ordered run of values. `visible` belongs to the caller."""

    name: str
    data: list[T] = field(default_factory=list)
    visible: bool = True


@dataclass
class Dataset:
    series: list[Series[DataPoint]] = field(default_factory=list)

    @classmethod
    def from_series(cls, series: Series[DataPoint]) -> "Dataset":
        return cls(series=[series])

    def add_series(self, series: Series[DataPoint]) -> None:
        self.series.append(series)

    def is_empty(self) -> bool:
        return all(not s.data for s in self.series)

    def point_count(self) -> int:
        return sum(len(s.data) for s in self.series)


@dataclass
class BarSeries:
    name: str
    values: list[float] = field(default_factory=list)


@dataclass
class BarDataset:
    """Category-aligned bar data.

    Each series is expected to carry one value per category. The length is not
    enforced; converters fill missing categories with 0.0.
    """

    categories: list[str] = field(default_factory=list)
    series: list[BarSeries] = field(default_factory=list)

    def add_series(self, name: str, values: Iterable[float]) -> None:
        self.series.append(BarSeries(name=name, values=[float(v) for v in values]))

    def value_matrix(self) -> list[list[float]]:
        return [list(s.values) for s in self.series]


@dataclass(frozen=True)
class OhlcBar:
    timestamp: float
    open: float
    high: float
    low: float
    close: float

    def is_bullish(self) -> bool:
        return self.close >= self.open


@dataclass(frozen=True)
class WaterfallBar:
    label: str
    value: float
    kind: WaterfallKind = "delta"

    def __post_init__(self) -> None:
        if self.kind not in WATERFALL_KINDS:
            raise ValueError(f"Unsupported waterfall kind: {self.kind}")

    @classmethod
    def start(cls, label: str, value: float) -> "WaterfallBar":
        return cls(label=label, value=float(value), kind="start")

    @classmethod
    def delta(cls, label: str, value: float) -> "WaterfallBar":
        return cls(label=label, value=float(value), kind="delta")

    @classmethod
    def total(cls, label: str, value: float = 0.0) -> "WaterfallBar":
        return cls(label=label, value=float(value), kind="total")


def ohlc_extent(bars: Sequence[OhlcBar]) -> tuple[float, float] | None:
    if not bars:
        return None
    return (min(b.low for b in bars), max(b.high for b in bars))


def dataset_extent(dataset: Dataset) -> tuple[tuple[float, float], tuple[float, float]] | None:
    """Return ((xmin, xmax), (ymin, ymax)) over every point of every series."""
    xs = [p.x for s in dataset.series for p in s.data]
    if not xs:
        return None
    ys = [p.y for s in dataset.series for p in s.data]
    return ((min(xs), max(xs)), (min(ys), max(ys)))
