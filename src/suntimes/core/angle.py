"""
suntimes.core.angle
-------------------
Radians-backed angle value.

Degrees and radians are separate construction paths; nothing is normalised
to [0, 2pi), so accumulated offsets and negative angles stay meaningful.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Angle:
    value: float  # radians

    @classmethod
    def from_rad(cls, rad: float) -> "Angle":
        return cls(float(rad))

    @classmethod
    def from_deg(cls, deg: float) -> "Angle":
        return cls(math.radians(deg))

    def deg(self) -> float:
        return math.degrees(self.value)

    def rad(self) -> float:
        return self.value

    def sin(self) -> float:
        return math.sin(self.value)

    def cos(self) -> float:
        return math.cos(self.value)

    def tan(self) -> float:
        return math.tan(self.value)

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.value + other.value)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.value - other.value)

    def __mul__(self, k: float) -> "Angle":
        if isinstance(k, Angle):
            return NotImplemented
        return Angle(self.value * k)

    def __rmul__(self, k: float) -> "Angle":
        if isinstance(k, Angle):
            return NotImplemented
        return Angle(k * self.value)

    def __truediv__(self, k: float) -> "Angle":
        if isinstance(k, Angle):
            return NotImplemented
        return Angle(self.value / k)

    def __repr__(self) -> str:
        return f"Angle({self.deg():.6f} deg)"
