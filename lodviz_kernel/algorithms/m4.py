"""M4 aggregation (Jugel et al., VLDB 2014).

Keeps first, last, min-y and max-y per pixel-column bucket, which is enough to
rasterise a line chart identically to the full series.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from lodviz_kernel.data import DataPoint


LOGGER = logging.getLogger(__name__)


def m4_downsample(data: Sequence[DataPoint], n_pixels: int) -> list[DataPoint]:
    """Reduce x-sorted `data` to at most `4 * n_pixels` points."""
    if not data or n_pixels == 0:
        return []
    if len(data) <= 4 * n_pixels:
        return list(data)

    x_min = data[0].x
    x_max = data[-1].x
    x_range = x_max - x_min
    if x_range <= 0:
        # Zero-width domain cannot be bucketed.
        return list(data)

    xs = np.fromiter((p.x for p in data), dtype=np.float64, count=len(data))
    ys = np.fromiter((p.y for p in data), dtype=np.float64, count=len(data))
    bucket_width = x_range / n_pixels

    result: list[DataPoint] = []
    for bucket in range(n_pixels):
        lo = x_min + bucket * bucket_width
        hi = lo + bucket_width
        if bucket == n_pixels - 1:
            mask = xs >= lo
        else:
            mask = (xs >= lo) & (xs < hi)
        indices = np.flatnonzero(mask)
        if indices.size == 0:
            continue

        bucket_ys = ys[indices]
        first = data[int(indices[0])]
        last = data[int(indices[-1])]
        low = data[int(indices[int(np.argmin(bucket_ys))])]
        # Ties: earliest minimum, latest maximum.
        high = data[int(indices[bucket_ys.size - 1 - int(np.argmax(bucket_ys[::-1]))])]

        for point in sorted((first, last, low, high), key=lambda p: p.x):
            if result and result[-1] == point:
                continue
            result.append(point)

    LOGGER.debug("m4 reduced %d points to %d over %d columns", len(data), len(result), n_pixels)
    return result
