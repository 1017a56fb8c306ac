from __future__ import annotations

import unittest

from lodviz_kernel.data import BarDataset, DataPoint, Dataset, OhlcBar, Series, WaterfallBar, dataset_extent, ohlc_extent


class DatasetTests(unittest.TestCase):
    def test_empty_and_counts(self) -> None:
        dataset = Dataset()
        self.assertTrue(dataset.is_empty())
        dataset.add_series(Series("empty"))
        self.assertTrue(dataset.is_empty())
        dataset.add_series(Series("a", [DataPoint(1.0, 2.0), DataPoint(3.0, -1.0)]))
        self.assertFalse(dataset.is_empty())
        self.assertEqual(dataset.point_count(), 2)
        self.assertTrue(dataset.series[1].visible)

    def test_extent_spans_all_series(self) -> None:
        dataset = Dataset.from_series(Series("a", [DataPoint(1.0, 2.0)]))
        dataset.add_series(Series("b", [DataPoint(-4.0, 9.0), DataPoint(6.0, 0.5)]))
        self.assertEqual(dataset_extent(dataset), ((-4.0, 6.0), (0.5, 9.0)))
        self.assertIsNone(dataset_extent(Dataset()))


class BarAndOhlcTests(unittest.TestCase):
    def test_bar_dataset_matrix(self) -> None:
        bars = BarDataset(categories=["Q1", "Q2"])
        bars.add_series("north", [1, 2])
        self.assertEqual(bars.value_matrix(), [[1.0, 2.0]])

    def test_ohlc(self) -> None:
        bars = [OhlcBar(0.0, 10.0, 12.0, 9.0, 11.0), OhlcBar(1.0, 11.0, 11.5, 7.5, 8.0)]
        self.assertTrue(bars[0].is_bullish())
        self.assertFalse(bars[1].is_bullish())
        self.assertEqual(ohlc_extent(bars), (7.5, 12.0))
        self.assertIsNone(ohlc_extent([]))

    def test_waterfall_constructors(self) -> None:
        self.assertEqual(WaterfallBar.start("s", 5).kind, "start")
        self.assertEqual(WaterfallBar.total("t"), WaterfallBar("t", 0.0, "total"))


if __name__ == "__main__":
    unittest.main()
