from __future__ import annotations

import unittest

from lodviz_kernel.data import BarDataset, DataPoint, Dataset, Series
from lodviz_kernel.encoding import Field
from lodviz_kernel.errors import ChartSpecError
from lodviz_kernel.field_value import DataTable, data_row
from lodviz_kernel.spec import ChartData, ChartSpec


class ChartSpecBuilderTests(unittest.TestCase):
    def test_build_with_points(self) -> None:
        spec = (
            ChartSpec.builder()
            .data_points([DataPoint(0.0, 1.0), DataPoint(1.0, 2.0)])
            .mark("line")
            .x(Field.quantitative("x"))
            .y(Field.quantitative("y"))
            .title("Revenue")
            .grid(True)
            .build()
        )
        self.assertEqual(spec.mark, "line")
        self.assertEqual(spec.options.title, "Revenue")
        self.assertTrue(spec.options.show_grid_x)
        dataset = spec.resolve_dataset()
        self.assertEqual(dataset.series[0].name, "default")
        self.assertEqual(len(dataset.series[0].data), 2)

    def test_missing_fields_are_reported(self) -> None:
        with self.assertRaises(ChartSpecError) as ctx:
            ChartSpec.builder().x(Field("x")).build()
        self.assertIn("data", str(ctx.exception))
        self.assertIn("mark", str(ctx.exception))
        self.assertNotIn("x", str(ctx.exception).split(":", 1)[1])

    def test_unknown_mark_rejected(self) -> None:
        with self.assertRaises(ChartSpecError):
            ChartSpec.builder().mark("pie")  # type: ignore[arg-type]

    def test_table_resolves_through_encoding(self) -> None:
        table = DataTable.from_rows([data_row(cat="A", v=3), data_row(cat="B", v=4)])
        spec = (
            ChartSpec.builder()
            .from_table(table)
            .mark("bar")
            .x(Field.nominal("cat"))
            .y(Field.quantitative("v"))
            .build()
        )
        bars = spec.resolve_bar_dataset()
        self.assertEqual(bars.categories, ["A", "B"])
        self.assertEqual(bars.value_matrix(), [[3.0, 4.0]])

    def test_table_without_y_cannot_resolve(self) -> None:
        spec = ChartSpec.builder().from_table(DataTable()).mark("point").x(Field("x")).build()
        with self.assertRaises(ChartSpecError):
            spec.resolve_dataset()

    def test_mismatched_data_resolves_empty(self) -> None:
        bars = BarDataset(categories=["A"])
        spec = ChartSpec.builder().bar_data(bars).mark("bar").x(Field.nominal("c")).build()
        self.assertIs(spec.resolve_bar_dataset(), bars)
        self.assertTrue(spec.resolve_dataset().is_empty())


class ChartDataTests(unittest.TestCase):
    def test_accessors(self) -> None:
        dataset = Dataset.from_series(Series("s", [DataPoint(0.0, 0.0)]))
        data = ChartData(dataset)
        self.assertIs(data.as_dataset(), dataset)
        self.assertIsNone(data.as_bar_dataset())
        self.assertIsNone(data.as_table())


if __name__ == "__main__":
    unittest.main()
