from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
import locale as _locale
import math

from axis_ticks.config import LABEL_ROUND_DIGITS, LARGE_LABEL_MAGNITUDE


@dataclass(frozen=True)
class NumberLocale:
    """Decimal and grouping symbols used when rendering tick labels."""

    decimal_separator: str = "."
    group_separator: str = ","

    @classmethod
    def from_system(cls) -> "NumberLocale":
        """Snapshot the separators of the process locale (LC_NUMERIC)."""
        conv = _locale.localeconv()
        return cls(
            decimal_separator=str(conv.get("decimal_point") or "."),
            group_separator=str(conv.get("thousands_sep") or ""),
        )

    def apply(self, text: str) -> str:
        if self.decimal_separator == "." and self.group_separator == ",":
            return text
        return text.translate({ord("."): self.decimal_separator, ord(","): self.group_separator})


INVARIANT_LOCALE = NumberLocale()
EN_US_LOCALE = NumberLocale(decimal_separator=".", group_separator=",")
DE_DE_LOCALE = NumberLocale(decimal_separator=",", group_separator=".")
FR_FR_LOCALE = NumberLocale(decimal_separator=",", group_separator="\u202f")


def format_tick_label(value: float, locale: NumberLocale = INVARIANT_LOCALE) -> str:
    value = float(value)
    if not math.isfinite(value):
        return str(value)

    # Round or large numbers read best grouped with no decimals.
    if value == math.trunc(value) or abs(value) > LARGE_LABEL_MAGNITUDE:
        label = locale.apply(_format_grouped(value))
    else:
        # Rounding strips noise left over from spacing arithmetic (0.30000000000000004).
        label = locale.apply(_format_general(round(value, LABEL_ROUND_DIGITS)))
    return "0" if label == "-0" else label


def format_tick_labels(values: Iterable[float], locale: NumberLocale = INVARIANT_LOCALE) -> list[str]:
    return [format_tick_label(float(v), locale) for v in values]


def _format_grouped(value: float) -> str:
    whole = int(Decimal(repr(value)).to_integral_value(rounding=ROUND_HALF_UP))
    return f"{whole:,}"


def _format_general(value: float) -> str:
    # Shortest round-trip digits, exponent written as 1E-07.
    text = repr(value).replace("e", "E")
    if text.endswith(".0"):
        return text[:-2]
    return text
