from lodviz_kernel.adapters import points_from_xy, table_from_dataframe, table_from_records
from lodviz_kernel.config import KernelSettings, load_settings, settings_from_mapping
from lodviz_kernel.data import BarDataset, BarSeries, DataPoint, Dataset, OhlcBar, Series, WaterfallBar
from lodviz_kernel.encoding import Encoding, Field
from lodviz_kernel.errors import ChartSpecError, KernelDataError
from lodviz_kernel.field_value import DataTable, data_row, field_value
from lodviz_kernel.pipeline import PreparedBarChart, PreparedChart, prepare_bar_chart, prepare_line_chart
from lodviz_kernel.scales import BandScale, LinearScale, LogScale, TimeScale
from lodviz_kernel.spec import ChartData, ChartSpec, ChartSpecBuilder

__all__ = [
    "BandScale",
    "BarDataset",
    "BarSeries",
    "ChartData",
    "ChartSpec",
    "ChartSpecBuilder",
    "ChartSpecError",
    "DataPoint",
    "DataTable",
    "Dataset",
    "Encoding",
    "Field",
    "KernelDataError",
    "KernelSettings",
    "LinearScale",
    "LogScale",
    "OhlcBar",
    "PreparedBarChart",
    "PreparedChart",
    "Series",
    "TimeScale",
    "WaterfallBar",
    "data_row",
    "field_value",
    "load_settings",
    "points_from_xy",
    "prepare_bar_chart",
    "prepare_line_chart",
    "settings_from_mapping",
    "table_from_dataframe",
    "table_from_records",
]
