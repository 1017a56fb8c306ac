from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from lodviz_kernel.data import WaterfallBar, WaterfallKind


Direction = Literal["up", "down", "flat"]


@dataclass(frozen=True)
class WaterfallSegment:
    label: str
    kind: WaterfallKind
    baseline: float
    top: float
    running_total: float
    direction: Direction


def waterfall_layout(bars: Sequence[WaterfallBar]) -> list[WaterfallSegment]:
    """Resolve bars into floating [baseline, top] segments.

    start resets the running total, delta floats between the previous and new
    totals, total draws the running total from zero without changing it.
    """
    running = 0.0
    segments: list[WaterfallSegment] = []
    for bar in bars:
        if bar.kind == "start":
            running = bar.value
            segments.append(WaterfallSegment(bar.label, bar.kind, 0.0, bar.value, running, "flat"))
        elif bar.kind == "delta":
            base = running
            running += bar.value
            direction: Direction = "up" if bar.value >= 0 else "down"
            segments.append(
                WaterfallSegment(bar.label, bar.kind, min(base, running), max(base, running), running, direction)
            )
        else:
            segments.append(WaterfallSegment(bar.label, bar.kind, 0.0, running, running, "flat"))
    return segments


def waterfall_extent(segments: Sequence[WaterfallSegment], pad_ratio: float = 0.1) -> tuple[float, float]:
    """Padded y-domain covering every segment and zero."""
    lo = min([0.0, *(s.baseline for s in segments), *(s.top for s in segments)])
    hi = max([0.0, *(s.baseline for s in segments), *(s.top for s in segments)])
    pad = abs(hi - lo) * pad_ratio
    return (lo - pad, hi + pad)
