from __future__ import annotations

from dataclasses import dataclass, field
import sys
from typing import Iterable, Sequence, TypeAlias

from lodviz_kernel.data import DataPoint


EPSILON = sys.float_info.epsilon


def _ordered(lo: float, hi: float) -> tuple[float, float]:
    return (lo, hi) if lo <= hi else (hi, lo)


@dataclass(frozen=True)
class PointSelection:
    indices: tuple[int, ...] = ()

    def is_empty(self) -> bool:
        return not self.indices

    def contains_point(self, point: DataPoint, index: int) -> bool:
        return index in self.indices


@dataclass(frozen=True)
class IntervalSelection:
    x: tuple[float, float]
    y: tuple[float, float] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _ordered(*self.x))
        if self.y is not None:
            object.__setattr__(self, "y", _ordered(*self.y))

    def is_empty(self) -> bool:
        return abs(self.x[1] - self.x[0]) < EPSILON

    def contains_point(self, point: DataPoint, index: int) -> bool:
        in_x = self.x[0] <= point.x <= self.x[1]
        in_y = self.y is None or self.y[0] <= point.y <= self.y[1]
        return in_x and in_y


@dataclass(frozen=True)
class MultiSelection:
    selections: tuple["Selection", ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        return not self.selections

    def contains_point(self, point: DataPoint, index: int) -> bool:
        return any(s.contains_point(point, index) for s in self.selections)


Selection: TypeAlias = PointSelection | IntervalSelection | MultiSelection


def point(indices: Iterable[int]) -> PointSelection:
    return PointSelection(indices=tuple(indices))


def interval_x(x_min: float, x_max: float) -> IntervalSelection:
    return IntervalSelection(x=(x_min, x_max))


def interval_xy(x_min: float, x_max: float, y_min: float, y_max: float) -> IntervalSelection:
    return IntervalSelection(x=(x_min, x_max), y=(y_min, y_max))


def multi(selections: Iterable[Selection]) -> MultiSelection:
    return MultiSelection(selections=tuple(selections))


def filter_by_selection(data: Sequence[DataPoint], selection: Selection) -> list[DataPoint]:
    return [p for i, p in enumerate(data) if selection.contains_point(p, i)]
