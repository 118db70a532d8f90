from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class PixelSize:
    width: float
    height: float

    @classmethod
    def zero(cls) -> "PixelSize":
        return cls(width=0.0, height=0.0)

    @property
    def area(self) -> float:
        return self.width * self.height

    def max(self, other: "PixelSize") -> "PixelSize":
        return PixelSize(width=max(self.width, other.width), height=max(self.height, other.height))


@dataclass(frozen=True)
class MajorTick:
    position: float
    label: str

    @property
    def is_major(self) -> bool:
        return True


@dataclass(frozen=True)
class MinorTick:
    position: float

    @property
    def is_major(self) -> bool:
        return False


Tick: TypeAlias = MajorTick | MinorTick
