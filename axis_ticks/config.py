from __future__ import annotations

from dataclasses import dataclass, field

from axis_ticks.errors import TickConfigurationError, UnsupportedRadixError
from axis_ticks.ticks import PixelSize


DEFAULT_LABEL_SIZE_PX = 12.0
DEFAULT_MINOR_TICKS_PER_MAJOR = 5
DEFAULT_RADIX = 10
SUPPORTED_RADICES = frozenset({10})
# One label footprint per label-sized block of pixels.
TICK_DENSITY = 1.0
MAX_TICK_COUNT = 1000
MAX_SPACING_CANDIDATES = 1000
FALLBACK_SPACING = 1.0
WARN_DEPTH = 3
MAX_PASSES = 8
LABEL_ROUND_DIGITS = 10
LARGE_LABEL_MAGNITUDE = 1000.0


def check_radix(radix: int) -> None:
    if radix not in SUPPORTED_RADICES:
        raise UnsupportedRadixError(radix)


@dataclass(frozen=True)
class TickSettings:
    initial_label_size: PixelSize = field(
        default_factory=lambda: PixelSize(width=DEFAULT_LABEL_SIZE_PX, height=DEFAULT_LABEL_SIZE_PX)
    )
    minor_ticks_per_major: int = DEFAULT_MINOR_TICKS_PER_MAJOR
    max_passes: int = MAX_PASSES
    warn_depth: int = WARN_DEPTH
    radix: int = DEFAULT_RADIX

    def __post_init__(self) -> None:
        check_radix(self.radix)
        if self.minor_ticks_per_major < 1:
            raise TickConfigurationError("minor_ticks_per_major must be >= 1")
        if self.max_passes < 1:
            raise TickConfigurationError("max_passes must be >= 1")
        if self.warn_depth < 0:
            raise TickConfigurationError("warn_depth must be >= 0")
        if self.initial_label_size.width <= 0 or self.initial_label_size.height <= 0:
            raise TickConfigurationError("initial_label_size must be > 0 in both dimensions")
