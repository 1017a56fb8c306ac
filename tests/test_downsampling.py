from __future__ import annotations

import math
import unittest

from lodviz_kernel.algorithms import lttb_downsample, m4_downsample
from lodviz_kernel.data import DataPoint


def _wave(n: int) -> list[DataPoint]:
    return [DataPoint(float(i), math.sin(i / 7.0) * 10.0 + (i % 5)) for i in range(n)]


class LttbTests(unittest.TestCase):
    def test_output_length_and_endpoints(self) -> None:
        data = _wave(1000)
        for threshold in (2, 3, 10, 250, 999):
            out = lttb_downsample(data, threshold)
            self.assertEqual(len(out), threshold)
            self.assertEqual(out[0], data[0])
            self.assertEqual(out[-1], data[-1])

    def test_output_x_is_non_decreasing(self) -> None:
        out = lttb_downsample(_wave(500), 40)
        xs = [p.x for p in out]
        self.assertEqual(xs, sorted(xs))

    def test_threshold_zero_or_large_returns_copy(self) -> None:
        data = _wave(20)
        self.assertEqual(lttb_downsample(data, 0), data)
        self.assertEqual(lttb_downsample(data, 20), data)
        out = lttb_downsample(data, 100)
        self.assertEqual(out, data)
        self.assertIsNot(out, data)

    def test_threshold_one_keeps_first_point(self) -> None:
        data = _wave(30)
        self.assertEqual(lttb_downsample(data, 1), [data[0]])

    def test_keeps_spike(self) -> None:
        data = [DataPoint(float(i), 0.0) for i in range(100)]
        data[50] = DataPoint(50.0, 1000.0)
        out = lttb_downsample(data, 10)
        self.assertIn(DataPoint(50.0, 1000.0), out)

    def test_empty_input(self) -> None:
        self.assertEqual(lttb_downsample([], 10), [])


class M4Tests(unittest.TestCase):
    def test_output_bounded_and_sorted(self) -> None:
        data = _wave(5000)
        out = m4_downsample(data, 50)
        self.assertLessEqual(len(out), 4 * 50)
        xs = [p.x for p in out]
        self.assertEqual(xs, sorted(xs))
        self.assertEqual(out[0], data[0])
        self.assertEqual(out[-1], data[-1])

    def test_keeps_global_extremes(self) -> None:
        data = _wave(2000)
        out = m4_downsample(data, 20)
        kept = [p.y for p in out]
        self.assertIn(max(p.y for p in data), kept)
        self.assertIn(min(p.y for p in data), kept)

    def test_coinciding_bucket_points_are_emitted_once(self) -> None:
        data = [
            DataPoint(0.0, 5.0),
            DataPoint(1.0, 1.0),
            DataPoint(2.0, 3.0),
            DataPoint(3.0, 4.0),
            DataPoint(4.0, 2.0),
            DataPoint(5.0, 9.0),
            DataPoint(6.0, 0.0),
            DataPoint(7.0, 6.0),
            DataPoint(8.0, 8.0),
            DataPoint(9.0, 7.0),
        ]
        # in both buckets the first point is also the max
        self.assertEqual(
            m4_downsample(data, 2),
            [
                DataPoint(0.0, 5.0),
                DataPoint(1.0, 1.0),
                DataPoint(4.0, 2.0),
                DataPoint(5.0, 9.0),
                DataPoint(6.0, 0.0),
                DataPoint(9.0, 7.0),
            ],
        )

    def test_small_input_is_unchanged(self) -> None:
        data = _wave(40)
        self.assertEqual(m4_downsample(data, 10), data)

    def test_empty_or_zero_pixels(self) -> None:
        self.assertEqual(m4_downsample([], 10), [])
        self.assertEqual(m4_downsample(_wave(100), 0), [])

    def test_zero_width_x_range_returns_copy(self) -> None:
        data = [DataPoint(1.0, float(i)) for i in range(50)]
        self.assertEqual(m4_downsample(data, 2), data)


if __name__ == "__main__":
    unittest.main()
