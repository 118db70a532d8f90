from __future__ import annotations

import unittest

from axis_ticks.generator import NumericTickGenerator
from axis_ticks.raster.text_metrics import PillowLabelMeasurer, measure_largest, text_size
from axis_ticks.ticks import PixelSize


class TextMetricsTests(unittest.TestCase):
    def test_empty_labels_measure_zero(self) -> None:
        self.assertEqual(measure_largest([]), PixelSize.zero())
        self.assertEqual(text_size(""), (0, 0))

    def test_longer_label_is_wider(self) -> None:
        short = measure_largest(["1"])
        long = measure_largest(["1,000,000"])
        self.assertGreater(long.width, short.width)
        self.assertGreater(short.height, 0)

    def test_largest_combines_widest_and_tallest(self) -> None:
        sizes = [text_size(s) for s in ("100", "-2.5", "0")]
        got = measure_largest(["100", "-2.5", "0"])
        self.assertEqual(got.width, max(w for w, _ in sizes))
        self.assertEqual(got.height, max(h for _, h in sizes))

    def test_quarter_turn_swaps_dimensions(self) -> None:
        w0, h0 = text_size("12345", rotate_deg=0)
        w1, h1 = text_size("12345", rotate_deg=90)
        self.assertEqual((w1, h1), (h0, w0))

    def test_measurer_rejects_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            PillowLabelMeasurer(font_size_px=0.0)
        with self.assertRaises(ValueError):
            PillowLabelMeasurer(rotate_deg=45)

    def test_default_generator_uses_pillow_measurer(self) -> None:
        gen = NumericTickGenerator()
        self.assertIsInstance(gen.measurer, PillowLabelMeasurer)
        ticks = gen.generate(0.0, 100.0, 500.0)
        majors = [t for t in ticks if t.is_major]
        self.assertGreaterEqual(len(majors), 2)
        self.assertTrue(all(0.0 <= t.position <= 100.0 for t in majors))


if __name__ == "__main__":
    unittest.main()
