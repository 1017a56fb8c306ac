from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class StackedValue:
    y0: float
    y1: float


@dataclass(frozen=True)
class StackedSeries:
    series_index: int
    values: list[StackedValue] = field(default_factory=list)


def stack_series(series_values: Sequence[Sequence[float]]) -> list[StackedSeries]:
    """Cumulative stacking; the first series sits on the zero baseline.

    Baselines are sized from the first series. Categories past that length
    stack from 0 and are not carried forward.
    """
    return _stack(series_values)[0]


def stacked_totals(series_values: Sequence[Sequence[float]]) -> list[float]:
    """Final baseline per category of the first series; empty when there are no series.

    A shorter later series leaves the categories it skips at their earlier total.
    """
    return _stack(series_values)[1]


def _stack(series_values: Sequence[Sequence[float]]) -> tuple[list[StackedSeries], list[float]]:
    if not series_values:
        return [], []

    baselines = [0.0] * len(series_values[0])
    result: list[StackedSeries] = []
    for index, values in enumerate(series_values):
        stacked: list[StackedValue] = []
        for category, value in enumerate(values):
            y0 = baselines[category] if category < len(baselines) else 0.0
            stacked.append(StackedValue(y0=y0, y1=y0 + value))
        for category, entry in enumerate(stacked[: len(baselines)]):
            baselines[category] = entry.y1
        result.append(StackedSeries(series_index=index, values=stacked))
    return result, baselines
