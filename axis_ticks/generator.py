from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
import math

from axis_ticks.config import TickSettings
from axis_ticks.errors import TickRangeError
from axis_ticks.labels import INVARIANT_LOCALE, NumberLocale, format_tick_labels
from axis_ticks.minor import minor_tick_positions
from axis_ticks.positions import MajorTickLayout, major_tick_layout
from axis_ticks.raster.text_metrics import PillowLabelMeasurer
from axis_ticks.ticks import MajorTick, MinorTick, PixelSize, Tick


LOGGER = logging.getLogger(__name__)

LabelMeasurer = Callable[[Sequence[str]], PixelSize]


class NumericTickGenerator:
    """Picks major/minor ticks for a linear numeric axis.

    Tick density depends on label size and label size depends on the chosen
    ticks, so positions are recomputed with the largest measured label until
    the prediction stops growing.
    """

    def __init__(
        self,
        is_vertical: bool = False,
        *,
        measurer: LabelMeasurer | None = None,
        locale: NumberLocale = INVARIANT_LOCALE,
        settings: TickSettings | None = None,
    ) -> None:
        if measurer is None:
            measurer = PillowLabelMeasurer()
        self.is_vertical = bool(is_vertical)
        self.measurer = measurer
        self.locale = locale
        self.settings = settings if settings is not None else TickSettings()

    def generate(self, vmin: float, vmax: float, edge_size: float) -> list[Tick]:
        vmin = float(vmin)
        vmax = float(vmax)
        if not (math.isfinite(vmin) and math.isfinite(vmax)):
            raise TickRangeError(f"axis limits must be finite, got ({vmin}, {vmax})")
        if vmin > vmax:
            raise TickRangeError(f"axis min must be <= max, got ({vmin}, {vmax})")
        if not math.isfinite(vmax - vmin):
            raise TickRangeError(f"axis span overflows, got ({vmin}, {vmax})")

        predicted = self.settings.initial_label_size
        for depth in range(self.settings.max_passes):
            if depth > self.settings.warn_depth:
                LOGGER.warning("tick label feedback depth=%d for range (%g, %g)", depth, vmin, vmax)
            layout, labels = self._layout_for(vmin, vmax, edge_size, predicted)
            largest = predicted.max(self.measurer(labels))
            if not largest.area > predicted.area:
                return self._final_ticks(layout, labels, vmin, vmax)
            predicted = largest

        LOGGER.warning(
            "tick label size did not settle after %d passes; using last layout (predicted %gx%g px)",
            self.settings.max_passes,
            predicted.width,
            predicted.height,
        )
        return self._final_ticks(layout, labels, vmin, vmax)

    def _layout_for(
        self,
        vmin: float,
        vmax: float,
        edge_size: float,
        predicted: PixelSize,
    ) -> tuple[MajorTickLayout, list[str]]:
        max_label_px = predicted.height if self.is_vertical else predicted.width
        layout = major_tick_layout(vmin, vmax, float(edge_size), max_label_px, radix=self.settings.radix)
        return layout, format_tick_labels(self._labeled_positions(layout, vmin), self.locale)

    @staticmethod
    def _labeled_positions(layout: MajorTickLayout, vmin: float) -> list[float]:
        if layout.visible.size:
            return layout.visible.tolist()
        # Always label at least one tick.
        return [vmin]

    def _final_ticks(self, layout: MajorTickLayout, labels: list[str], vmin: float, vmax: float) -> list[Tick]:
        majors: list[Tick] = [
            MajorTick(position=pos, label=label) for pos, label in zip(self._labeled_positions(layout, vmin), labels)
        ]
        minors: list[Tick] = [
            MinorTick(position=pos)
            for pos in minor_tick_positions(
                layout.positions,
                self.settings.minor_ticks_per_major,
                vmin,
                vmax,
            ).tolist()
        ]
        return majors + minors


def generate_ticks(
    vmin: float,
    vmax: float,
    edge_size: float,
    *,
    is_vertical: bool = False,
    measurer: LabelMeasurer | None = None,
    locale: NumberLocale = INVARIANT_LOCALE,
    settings: TickSettings | None = None,
) -> list[Tick]:
    generator = NumericTickGenerator(is_vertical, measurer=measurer, locale=locale, settings=settings)
    return generator.generate(vmin, vmax, edge_size)
