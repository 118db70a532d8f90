from __future__ import annotations

import unittest

from axis_ticks.config import TickSettings
from axis_ticks.errors import TickConfigurationError, UnsupportedRadixError
from axis_ticks.ticks import MajorTick, MinorTick, PixelSize


class TickTypeTests(unittest.TestCase):
    def test_pixel_size_area_and_elementwise_max(self) -> None:
        a = PixelSize(width=30.0, height=10.0)
        b = PixelSize(width=12.0, height=14.0)
        self.assertEqual(a.area, 300.0)
        self.assertEqual(a.max(b), PixelSize(width=30.0, height=14.0))
        self.assertEqual(PixelSize.zero().area, 0.0)

    def test_tick_variants(self) -> None:
        major = MajorTick(position=1.0, label="1")
        minor = MinorTick(position=0.2)
        self.assertTrue(major.is_major)
        self.assertFalse(minor.is_major)
        self.assertNotEqual(major, MajorTick(position=1.0, label="1.0"))


class TickSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = TickSettings()
        self.assertEqual(settings.initial_label_size, PixelSize(width=12.0, height=12.0))
        self.assertEqual(settings.minor_ticks_per_major, 5)
        self.assertEqual(settings.max_passes, 8)
        self.assertEqual(settings.radix, 10)

    def test_rejects_unsupported_radix(self) -> None:
        with self.assertRaises(UnsupportedRadixError):
            TickSettings(radix=16)

    def test_rejects_invalid_values(self) -> None:
        with self.assertRaises(TickConfigurationError):
            TickSettings(minor_ticks_per_major=0)
        with self.assertRaises(TickConfigurationError):
            TickSettings(max_passes=0)
        with self.assertRaises(TickConfigurationError):
            TickSettings(initial_label_size=PixelSize(width=0.0, height=12.0))


if __name__ == "__main__":
    unittest.main()
