from axis_ticks.config import TickSettings
from axis_ticks.errors import TickConfigurationError, TickError, TickRangeError, UnsupportedRadixError
from axis_ticks.generator import NumericTickGenerator, generate_ticks
from axis_ticks.labels import (
    DE_DE_LOCALE,
    EN_US_LOCALE,
    FR_FR_LOCALE,
    INVARIANT_LOCALE,
    NumberLocale,
    format_tick_label,
    format_tick_labels,
)
from axis_ticks.minor import minor_tick_positions
from axis_ticks.positions import MajorTickLayout, major_tick_layout, major_tick_positions
from axis_ticks.spacing import ideal_spacing
from axis_ticks.ticks import MajorTick, MinorTick, PixelSize, Tick

__all__ = [
    "DE_DE_LOCALE",
    "EN_US_LOCALE",
    "FR_FR_LOCALE",
    "INVARIANT_LOCALE",
    "MajorTick",
    "MajorTickLayout",
    "MinorTick",
    "NumberLocale",
    "NumericTickGenerator",
    "PixelSize",
    "Tick",
    "TickConfigurationError",
    "TickError",
    "TickRangeError",
    "TickSettings",
    "UnsupportedRadixError",
    "format_tick_label",
    "format_tick_labels",
    "generate_ticks",
    "ideal_spacing",
    "major_tick_layout",
    "major_tick_positions",
    "minor_tick_positions",
]
