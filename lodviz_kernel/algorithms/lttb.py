"""Largest-Triangle-Three-Buckets downsampling.

Steinarsson (2013), "Downsampling Time Series for Visual Representation".
The first and last points are always kept; every interior bucket contributes
the point spanning the largest triangle with the previously selected point and
the centroid of the following bucket.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from lodviz_kernel.data import DataPoint


def lttb_downsample(data: Sequence[DataPoint], threshold: int) -> list[DataPoint]:
    """Reduce x-sorted `data` to `threshold` points.

    `threshold == 0` or `threshold >= len(data)` returns a copy of the input.
    """
    n = len(data)
    if threshold >= n or threshold == 0:
        return list(data)
    if threshold == 1:
        return [data[0]]
    if threshold == 2:
        return [data[0], data[-1]]

    xs = np.fromiter((p.x for p in data), dtype=np.float64, count=n)
    ys = np.fromiter((p.y for p in data), dtype=np.float64, count=n)

    sampled = [data[0]]
    bucket_size = (n - 2) / (threshold - 2)
    a = 0

    for i in range(threshold - 2):
        avg_start = int(math.floor((i + 1) * bucket_size + 1.0))
        avg_end = min(int(math.floor((i + 2) * bucket_size + 1.0)), n)
        avg_x = float(xs[avg_start:avg_end].mean())
        avg_y = float(ys[avg_start:avg_end].mean())

        start = int(math.floor(i * bucket_size + 1.0))
        end = avg_start

        ax = xs[a]
        ay = ys[a]
        areas = np.abs((ax - avg_x) * (ys[start:end] - ay) - (ax - xs[start:end]) * (avg_y - ay))
        # argmax returns the first maximum, matching a strict ">" scan.
        a = start + int(np.argmax(areas))
        sampled.append(data[a])

    sampled.append(data[-1])
    return sampled
