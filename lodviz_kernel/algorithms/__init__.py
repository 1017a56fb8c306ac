from lodviz_kernel.algorithms.arc import ArcSlice, arc_centroid, arc_path, compute_arcs, polar_to_cartesian, radar_spoke_angle
from lodviz_kernel.algorithms.lttb import lttb_downsample
from lodviz_kernel.algorithms.m4 import m4_downsample
from lodviz_kernel.algorithms.nearest import find_nearest_point
from lodviz_kernel.algorithms.stack import StackedSeries, StackedValue, stack_series, stacked_totals
from lodviz_kernel.algorithms.statistics import (
    Bin,
    BinRule,
    BoxPlotStats,
    FixedBins,
    KdeResult,
    box_plot_stats,
    ema,
    extent,
    gaussian_kde,
    histogram_bins,
    linear_regression,
    mean,
    median,
    percentile,
    sma,
    std_dev,
    sum_values,
)
from lodviz_kernel.algorithms.waterfall import WaterfallSegment, waterfall_extent, waterfall_layout

__all__ = [
    "ArcSlice",
    "Bin",
    "BinRule",
    "BoxPlotStats",
    "FixedBins",
    "KdeResult",
    "StackedSeries",
    "StackedValue",
    "WaterfallSegment",
    "arc_centroid",
    "arc_path",
    "box_plot_stats",
    "compute_arcs",
    "ema",
    "extent",
    "find_nearest_point",
    "gaussian_kde",
    "histogram_bins",
    "linear_regression",
    "lttb_downsample",
    "m4_downsample",
    "mean",
    "median",
    "percentile",
    "polar_to_cartesian",
    "radar_spoke_angle",
    "sma",
    "stack_series",
    "stacked_totals",
    "std_dev",
    "sum_values",
    "waterfall_extent",
    "waterfall_layout",
]
