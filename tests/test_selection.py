from __future__ import annotations

import unittest

from lodviz_kernel.data import DataPoint
from lodviz_kernel.selection import filter_by_selection, interval_x, interval_xy, multi, point


class SelectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.data = [DataPoint(float(i), float(i * 10)) for i in range(8)]

    def test_interval_bounds_are_normalized(self) -> None:
        sel = interval_x(5.0, 2.0)
        self.assertEqual(sel.x, (2.0, 5.0))
        self.assertTrue(sel.contains_point(DataPoint(3.0, 0.0), 0))
        self.assertTrue(sel.contains_point(DataPoint(5.0, 0.0), 0))
        self.assertFalse(sel.contains_point(DataPoint(5.5, 0.0), 0))

    def test_interval_xy_checks_both_axes(self) -> None:
        sel = interval_xy(0.0, 10.0, 40.0, 20.0)
        self.assertEqual([p.x for p in filter_by_selection(self.data, sel)], [2.0, 3.0, 4.0])

    def test_point_selection_uses_indices(self) -> None:
        sel = point([1, 6])
        self.assertEqual(filter_by_selection(self.data, sel), [self.data[1], self.data[6]])

    def test_multi_is_a_union(self) -> None:
        sel = multi([point([0]), interval_x(6.0, 7.0)])
        self.assertEqual([p.x for p in filter_by_selection(self.data, sel)], [0.0, 6.0, 7.0])

    def test_is_empty(self) -> None:
        self.assertTrue(point([]).is_empty())
        self.assertTrue(interval_x(3.0, 3.0).is_empty())
        self.assertFalse(interval_x(3.0, 4.0).is_empty())
        self.assertTrue(multi([]).is_empty())


if __name__ == "__main__":
    unittest.main()
