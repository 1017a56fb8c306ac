"""Pie/donut slice angles and the matching path/centroid geometry.

Angles are radians, measured the SVG way (y grows downward), so increasing
angles run clockwise on screen and -pi/2 is 12 o'clock.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence


START_ANGLE = -math.pi / 2.0


@dataclass(frozen=True)
class ArcSlice:
    start_angle: float
    end_angle: float
    value: float
    percentage: float

    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2.0

    def span(self) -> float:
        return self.end_angle - self.start_angle


def compute_arcs(values: Sequence[float]) -> list[ArcSlice]:
    total = sum(v for v in values if v > 0)
    if total <= 0:
        return []

    arcs: list[ArcSlice] = []
    current = START_ANGLE
    for value in values:
        if value <= 0:
            continue
        end = current + (value / total) * 2.0 * math.pi
        arcs.append(ArcSlice(start_angle=current, end_angle=end, value=value, percentage=(value / total) * 100.0))
        current = end
    return arcs


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def radar_spoke_angle(index: int, count: int) -> float:
    """Angle of spoke `index` out of `count`, first spoke at 12 o'clock."""
    if count <= 0:
        return START_ANGLE
    return START_ANGLE + 2.0 * math.pi * index / count


def arc_path(cx: float, cy: float, outer_r: float, inner_r: float, start_angle: float, end_angle: float) -> str:
    large_arc = 1 if abs(end_angle - start_angle) > math.pi else 0
    sweep = 1
    sox, soy = polar_to_cartesian(cx, cy, outer_r, start_angle)
    eox, eoy = polar_to_cartesian(cx, cy, outer_r, end_angle)

    if inner_r <= 0:
        return (
            f"M {cx:.2f} {cy:.2f} L {sox:.2f} {soy:.2f} "
            f"A {outer_r:.2f} {outer_r:.2f} 0 {large_arc} {sweep} {eox:.2f} {eoy:.2f} Z"
        )

    # Inner edge runs backwards: from end angle to start angle.
    six, siy = polar_to_cartesian(cx, cy, inner_r, end_angle)
    eix, eiy = polar_to_cartesian(cx, cy, inner_r, start_angle)
    return (
        f"M {sox:.2f} {soy:.2f} "
        f"A {outer_r:.2f} {outer_r:.2f} 0 {large_arc} {sweep} {eox:.2f} {eoy:.2f} "
        f"L {six:.2f} {siy:.2f} "
        f"A {inner_r:.2f} {inner_r:.2f} 0 {large_arc} 0 {eix:.2f} {eiy:.2f} Z"
    )


def arc_centroid(cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> tuple[float, float]:
    return polar_to_cartesian(cx, cy, radius, (start_angle + end_angle) / 2.0)
