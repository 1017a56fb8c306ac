from __future__ import annotations

import bisect
from typing import Sequence

from lodviz_kernel.data import DataPoint


def find_nearest_point(data: Sequence[DataPoint], target_x: float) -> tuple[int, DataPoint] | None:
    """Closest point by x in x-sorted `data`, as `(index, point)`.

    O(log n). Equidistant neighbours resolve to the earlier index.
    """
    if not data:
        return None
    idx = bisect.bisect_left(data, target_x, key=lambda p: p.x)
    if idx == 0:
        return (0, data[0])
    if idx >= len(data):
        last = len(data) - 1
        return (last, data[last])
    before = abs(data[idx - 1].x - target_x)
    after = abs(data[idx].x - target_x)
    if after < before:
        return (idx, data[idx])
    return (idx - 1, data[idx - 1])
