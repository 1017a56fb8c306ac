from __future__ import annotations

import math
import unittest

from lodviz_kernel.config import KernelSettings
from lodviz_kernel.data import BarDataset, DataPoint, Dataset, Series
from lodviz_kernel.encoding import Encoding, Field
from lodviz_kernel.field_value import DataTable, data_row
from lodviz_kernel.pipeline import prepare_bar_chart, prepare_line_chart
from lodviz_kernel.scales import LinearScale, TimeScale


def _dataset(n: int) -> Dataset:
    return Dataset.from_series(Series("wave", [DataPoint(float(i), math.sin(i / 10.0)) for i in range(n)]))


class PrepareLineChartTests(unittest.TestCase):
    def test_lttb_reduces_to_width(self) -> None:
        chart = prepare_line_chart(_dataset(2000), None, 200, 100)
        self.assertEqual(chart.source_points, 2000)
        self.assertEqual(len(chart.dataset.series[0].data), 200)
        self.assertEqual(chart.dataset.series[0].name, "wave")
        self.assertIsInstance(chart.x_scale, LinearScale)
        self.assertEqual(chart.x_scale.domain(), (0.0, 1999.0))
        self.assertEqual(chart.x_scale.range(), (0.0, 200.0))
        self.assertEqual(chart.y_scale.range(), (100.0, 0.0))

    def test_y_domain_is_padded(self) -> None:
        data = Dataset.from_series(Series("s", [DataPoint(0.0, 0.0), DataPoint(1.0, 100.0)]))
        chart = prepare_line_chart(data, None, 10, 10, KernelSettings(y_padding_ratio=0.1))
        self.assertEqual(chart.y_scale.domain(), (-10.0, 110.0))
        self.assertEqual(chart.y_ticks, [-20.0, 0.0, 20.0, 40.0, 60.0, 80.0, 100.0, 120.0])
        self.assertEqual(chart.y_tick_labels()[:3], ["-20", "0", "20"])
        self.assertEqual(len(chart.x_tick_labels()), len(chart.x_ticks))

    def test_m4_and_none_algorithms(self) -> None:
        m4 = prepare_line_chart(_dataset(2000), None, 50, 100, KernelSettings(downsample_algorithm="m4"))
        self.assertLessEqual(len(m4.dataset.series[0].data), 200)
        raw = prepare_line_chart(_dataset(2000), None, 50, 100, KernelSettings(downsample_algorithm="none"))
        self.assertEqual(len(raw.dataset.series[0].data), 2000)

    def test_temporal_table_gets_time_scale(self) -> None:
        table = DataTable.from_rows([data_row(t=1000.0, v=1.0, g="a"), data_row(t=2000.0, v=2.0, g="b")])
        encoding = Encoding(Field.temporal("t"), Field.quantitative("v"), color=Field.nominal("g"))
        chart = prepare_line_chart(table, encoding, 100, 50)
        self.assertIsInstance(chart.x_scale, TimeScale)
        self.assertEqual([s.name for s in chart.dataset.series], ["a", "b"])

    def test_empty_and_invalid_inputs(self) -> None:
        chart = prepare_line_chart(Dataset(), None, 10, 10)
        self.assertEqual(chart.x_scale.domain(), (0.0, 1.0))
        with self.assertRaises(ValueError):
            prepare_line_chart(Dataset(), None, -1, 10)
        with self.assertRaises(ValueError):
            prepare_line_chart(DataTable(), None, 10, 10)


class PrepareBarChartTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bars = BarDataset(categories=["A", "B"])
        self.bars.add_series("s1", [10.0, 20.0])
        self.bars.add_series("s2", [5.0, 15.0])

    def test_grouped_domain_starts_at_zero(self) -> None:
        chart = prepare_bar_chart(self.bars, None, 200, 100, KernelSettings(y_padding_ratio=0.0))
        self.assertEqual(chart.y_scale.domain(), (0.0, 20.0))
        self.assertEqual(chart.x_scale.categories(), ("A", "B"))
        self.assertAlmostEqual(chart.x_scale.band_width(), 90.0)
        self.assertIsNone(chart.stacked)

    def test_stacked_domain_covers_totals(self) -> None:
        chart = prepare_bar_chart(self.bars, None, 200, 100, KernelSettings(y_padding_ratio=0.0), stacked=True)
        self.assertEqual(chart.y_scale.domain(), (0.0, 35.0))
        self.assertEqual(chart.y_tick_labels(), ["0", "10", "20", "30", "40"])
        assert chart.stacked is not None
        self.assertEqual(chart.stacked[1].values[1].y1, 35.0)

    def test_from_table(self) -> None:
        table = DataTable.from_rows([data_row(c="x", v=-4), data_row(c="y", v=8)])
        chart = prepare_bar_chart(table, Encoding(Field.nominal("c"), Field.quantitative("v")), 100, 100)
        lo, hi = chart.y_scale.domain()
        self.assertLess(lo, -4.0)
        self.assertGreater(hi, 8.0)


if __name__ == "__main__":
    unittest.main()
