from __future__ import annotations

import math

from axis_ticks.config import DEFAULT_RADIX, FALLBACK_SPACING, MAX_SPACING_CANDIDATES, check_radix


# Step patterns walking down from a power of the radix.
_DIVISORS_BY_RADIX: dict[int, tuple[float, ...]] = {
    10: (2.0, 2.0, 2.5),  # 10, 5, 2.5, 1
    16: (2.0, 2.0, 2.0, 2.0),  # 16, 8, 4, 2, 1
}


def ideal_spacing(low: float, high: float, max_tick_count: int, *, radix: int = DEFAULT_RADIX) -> float:
    """Return a nice spacing for roughly `max_tick_count` ticks across [low, high].

    The candidate sequence starts at the largest power of the radix not
    exceeding the range and shrinks through the radix's step pattern until the
    target count is reached. The returned spacing sits three entries before the
    end of the sequence, one nice step coarser than the first spacing that fits.
    """
    check_radix(radix)
    span = float(high) - float(low)
    if not math.isfinite(span) or span <= 0:
        return FALLBACK_SPACING

    exponent = math.floor(math.log10(span) if radix == 10 else math.log(span, radix))
    initial = float(radix) ** exponent
    spacings = [initial, initial, initial]
    divisors = _DIVISORS_BY_RADIX[radix]

    divisions = 0
    # floor(span / spacing) < n exactly when span / spacing < n for integer n.
    ratio = 0.0
    while ratio < max_tick_count and len(spacings) < MAX_SPACING_CANDIDATES:
        spacing = spacings[-1] / divisors[divisions % len(divisors)]
        divisions += 1
        if spacing <= 0:
            break
        spacings.append(spacing)
        ratio = span / spacing

    return spacings[-3]
