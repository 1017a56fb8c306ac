from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from lodviz_kernel.algorithms import FixedBins
from lodviz_kernel.config import KernelSettings, load_settings, settings_from_mapping


class KernelSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = KernelSettings()
        self.assertEqual(settings.downsample_algorithm, "lttb")
        self.assertEqual(settings.bin_rule, "freedman_diaconis")
        self.assertEqual(settings.kde_points, 100)
        self.assertEqual(settings.lttb_threshold(640), 640)

    def test_validation(self) -> None:
        with self.assertRaises(ValueError):
            KernelSettings(downsample_algorithm="bogus")  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            KernelSettings(max_points_per_pixel=0.0)
        with self.assertRaises(ValueError):
            KernelSettings(bin_rule="bogus")  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            KernelSettings(band_padding=1.0)

    def test_mapping_coerces_bin_count(self) -> None:
        settings = settings_from_mapping({"bin_rule": 12, "max_points_per_pixel": 2})
        self.assertEqual(settings.bin_rule, FixedBins(12))
        self.assertEqual(settings.max_points_per_pixel, 2.0)
        self.assertEqual(settings.lttb_threshold(100), 200)

    def test_mapping_rejects_wrong_types(self) -> None:
        with self.assertRaises(ValueError):
            settings_from_mapping({"kde_points": "many"})
        with self.assertRaises(ValueError):
            settings_from_mapping({"bin_rule": True})

    def test_unknown_keys_are_logged(self) -> None:
        with self.assertLogs("lodviz_kernel.config", level="WARNING") as logs:
            settings_from_mapping({"colour": "red"})
        self.assertIn("colour", logs.output[0])


class LoadSettingsTests(unittest.TestCase):
    def test_reads_kernel_table(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "kernel.toml"
            path.write_text(
                '[kernel]\ndownsample_algorithm = "m4"\nbin_rule = "scott"\nkde_points = 64\ny_padding_ratio = 0.1\n',
                encoding="utf-8",
            )
            settings = load_settings(path)
        self.assertEqual(settings.downsample_algorithm, "m4")
        self.assertEqual(settings.bin_rule, "scott")
        self.assertEqual(settings.kde_points, 64)
        self.assertEqual(settings.y_padding_ratio, 0.1)

    def test_missing_table_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "kernel.toml"
            path.write_text('title = "unrelated"\n', encoding="utf-8")
            self.assertEqual(load_settings(path), KernelSettings())

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_settings(Path(tempfile.gettempdir()) / "does-not-exist-lodviz.toml")

    def test_kernel_must_be_a_table(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "kernel.toml"
            path.write_text('kernel = 3\n', encoding="utf-8")
            with self.assertRaises(ValueError):
                load_settings(path)


if __name__ == "__main__":
    unittest.main()
