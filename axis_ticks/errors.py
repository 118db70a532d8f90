from __future__ import annotations


class TickError(Exception):
    """Base class for tick generation failures."""


class TickConfigurationError(TickError, ValueError):
    pass


class UnsupportedRadixError(TickConfigurationError):
    def __init__(self, radix: int) -> None:
        super().__init__(f"radix {radix} is not supported")
        self.radix = radix


class TickRangeError(TickError, ValueError):
    pass
