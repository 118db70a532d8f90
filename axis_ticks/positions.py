from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from axis_ticks.config import DEFAULT_RADIX, MAX_TICK_COUNT, TICK_DENSITY
from axis_ticks.spacing import ideal_spacing


@dataclass(frozen=True)
class MajorTickLayout:
    positions: np.ndarray
    spacing: float
    visible: np.ndarray


def target_tick_count(edge_size: float, max_label_px: float) -> int:
    if not (math.isfinite(edge_size) and math.isfinite(max_label_px)) or max_label_px <= 0 or edge_size <= 0:
        return 0
    return int(math.floor(edge_size / max_label_px * TICK_DENSITY))


def major_tick_layout(
    vmin: float,
    vmax: float,
    edge_size: float,
    max_label_px: float,
    *,
    radix: int = DEFAULT_RADIX,
) -> MajorTickLayout:
    span = vmax - vmin
    spacing = ideal_spacing(vmin, vmax, target_tick_count(edge_size, max_label_px), radix=radix)

    # fmod keeps the sign of vmin, so the anchor sits above vmin for negative ranges.
    anchor = vmin - math.fmod(vmin, spacing)
    count = _candidate_count(span / spacing)
    candidates = anchor + spacing * np.arange(count, dtype=np.float64)
    visible = candidates[(candidates >= vmin) & (candidates <= vmax)]
    visible = visible[np.concatenate(([True], np.diff(visible) > 0))] if visible.size else visible

    positions = visible
    if positions.size < 2:
        first = float(positions[0]) if positions.size else anchor
        positions = np.asarray([first, first + spacing], dtype=np.float64)
    return MajorTickLayout(positions=positions, spacing=spacing, visible=visible)


def major_tick_positions(
    vmin: float,
    vmax: float,
    edge_size: float,
    max_label_px: float,
    *,
    radix: int = DEFAULT_RADIX,
) -> np.ndarray:
    """Return the positions the minor subdivider works from.

    When fewer than two ticks fit inside [vmin, vmax] the result is padded to
    two points one spacing apart, and the padded point may lie beyond vmax.
    Use `major_tick_layout(...).visible` for the labeled major ticks.
    """
    return major_tick_layout(vmin, vmax, edge_size, max_label_px, radix=radix).positions


def _candidate_count(ratio: float) -> int:
    if not math.isfinite(ratio):
        return MAX_TICK_COUNT if ratio > 0 else 1
    return max(1, min(MAX_TICK_COUNT, int(math.floor(min(ratio, MAX_TICK_COUNT))) + 2))
