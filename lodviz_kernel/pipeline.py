"""Turn raw chart data into downsampled series plus ready-to-use scales.

Pixel space is y-down: the y range runs from `height` to 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from lodviz_kernel.algorithms.lttb import lttb_downsample
from lodviz_kernel.algorithms.m4 import m4_downsample
from lodviz_kernel.algorithms.stack import StackedSeries, stack_series, stacked_totals
from lodviz_kernel.config import KernelSettings
from lodviz_kernel.data import BarDataset, DataPoint, Dataset, Series, dataset_extent
from lodviz_kernel.encoding import Encoding
from lodviz_kernel.field_value import DataTable
from lodviz_kernel.scales import BandScale, LinearScale, TimeScale, nice_ticks, padded_domain, tick_labels


LOGGER = logging.getLogger(__name__)

DEFAULT_TICK_TARGET = 5


@dataclass(frozen=True)
class PreparedChart:
    dataset: Dataset
    x_scale: LinearScale | TimeScale
    y_scale: LinearScale
    x_ticks: list[float] = field(default_factory=list)
    y_ticks: list[float] = field(default_factory=list)
    source_points: int = 0

    def x_tick_labels(self) -> list[str]:
        return tick_labels(self.x_ticks)

    def y_tick_labels(self) -> list[str]:
        return tick_labels(self.y_ticks)


@dataclass(frozen=True)
class PreparedBarChart:
    bars: BarDataset
    x_scale: BandScale
    y_scale: LinearScale
    y_ticks: list[float] = field(default_factory=list)
    stacked: list[StackedSeries] | None = None

    def y_tick_labels(self) -> list[str]:
        return tick_labels(self.y_ticks)


def _check_viewport(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError("viewport width/height must be >= 0")


def downsample_points(data: list[DataPoint], width: int, settings: KernelSettings) -> list[DataPoint]:
    algorithm = settings.downsample_algorithm
    if algorithm == "lttb":
        return lttb_downsample(data, settings.lttb_threshold(width))
    if algorithm == "m4":
        return m4_downsample(data, width)
    return list(data)


def prepare_line_chart(
    source: Dataset | DataTable,
    encoding: Encoding | None,
    width: int,
    height: int,
    settings: KernelSettings | None = None,
) -> PreparedChart:
    _check_viewport(width, height)
    settings = settings or KernelSettings()

    if isinstance(source, DataTable):
        if encoding is None:
            raise ValueError("an encoding is required to chart a DataTable")
        dataset = source.to_dataset(encoding)
    else:
        dataset = source

    reduced = Dataset()
    for series in dataset.series:
        points = downsample_points(series.data, width, settings)
        reduced.add_series(Series(series.name, points, series.visible))
    LOGGER.debug(
        "prepared line chart: %d -> %d points using %s",
        dataset.point_count(),
        reduced.point_count(),
        settings.downsample_algorithm,
    )

    limits = dataset_extent(reduced)
    if limits is None:
        (xmin, xmax), (ymin, ymax) = (0.0, 1.0), (0.0, 1.0)
    else:
        (xmin, xmax), (ymin, ymax) = limits
        if xmin == xmax:
            xmin -= 1.0
            xmax += 1.0
        ymin, ymax = padded_domain(ymin, ymax, settings.y_padding_ratio)

    temporal = encoding is not None and encoding.x.data_type == "temporal"
    x_scale: LinearScale | TimeScale
    if temporal:
        x_scale = TimeScale((xmin, xmax), (0.0, float(width)))
    else:
        x_scale = LinearScale((xmin, xmax), (0.0, float(width)))
    y_scale = LinearScale((ymin, ymax), (float(height), 0.0))

    return PreparedChart(
        dataset=reduced,
        x_scale=x_scale,
        y_scale=y_scale,
        x_ticks=nice_ticks(xmin, xmax, DEFAULT_TICK_TARGET),
        y_ticks=nice_ticks(ymin, ymax, DEFAULT_TICK_TARGET),
        source_points=dataset.point_count(),
    )


def prepare_bar_chart(
    source: BarDataset | DataTable,
    encoding: Encoding | None,
    width: int,
    height: int,
    settings: KernelSettings | None = None,
    *,
    stacked: bool = False,
) -> PreparedBarChart:
    """Band x scale over the categories and a y scale anchored at zero.

    With `stacked=True` the y domain covers the per-category stack totals.
    """
    _check_viewport(width, height)
    settings = settings or KernelSettings()

    if isinstance(source, DataTable):
        if encoding is None:
            raise ValueError("an encoding is required to chart a DataTable")
        bars = source.to_bar_dataset(encoding)
    else:
        bars = source

    matrix = bars.value_matrix()
    layers: list[StackedSeries] | None = None
    if stacked:
        layers = stack_series(matrix)
        values = stacked_totals(matrix)
    else:
        values = [v for row in matrix for v in row]

    lo = min([0.0, *values])
    hi = max([0.0, *values])
    if lo == hi:
        hi = 1.0
    pad = (hi - lo) * settings.y_padding_ratio
    if hi > 0:
        hi += pad
    if lo < 0:
        lo -= pad

    x_scale = BandScale(bars.categories, (0.0, float(width)), settings.band_padding)
    y_scale = LinearScale((lo, hi), (float(height), 0.0))
    LOGGER.debug("prepared bar chart: %d categories, %d series, stacked=%s", len(x_scale), len(bars.series), stacked)
    return PreparedBarChart(
        bars=bars,
        x_scale=x_scale,
        y_scale=y_scale,
        y_ticks=nice_ticks(lo, hi, DEFAULT_TICK_TARGET),
        stacked=layers,
    )
