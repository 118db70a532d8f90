from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from axis_ticks.config import DEFAULT_MINOR_TICKS_PER_MAJOR
from axis_ticks.errors import TickConfigurationError


def minor_tick_positions(
    major_positions: Sequence[float] | np.ndarray,
    minor_ticks_per_major: int = DEFAULT_MINOR_TICKS_PER_MAJOR,
    lower: float = -np.inf,
    upper: float = np.inf,
) -> np.ndarray:
    """Subdivide each major interval into `minor_ticks_per_major` equal parts.

    Major spacing is taken from the first two positions and assumed uniform.
    One padding interval below the first major covers minors that fall between
    `lower` and the first major. Only positions strictly inside (lower, upper)
    are kept.
    """
    if minor_ticks_per_major < 1:
        raise TickConfigurationError("minor_ticks_per_major must be >= 1")
    majors = np.asarray(major_positions, dtype=np.float64)
    if majors.size < 2:
        return np.asarray([], dtype=np.float64)

    major_spacing = float(majors[1] - majors[0])
    minor_spacing = major_spacing / minor_ticks_per_major
    anchors = np.concatenate(([majors[0] - major_spacing], majors))
    steps = minor_spacing * np.arange(1, minor_ticks_per_major, dtype=np.float64)

    # Row per anchor keeps the output ordered anchor by anchor.
    minors = (anchors[:, None] + steps[None, :]).ravel()
    return minors[(minors > lower) & (minors < upper)]
