"""
suntimes.core.julian
--------------------
Julian Day and Julian Century value types.

Both are plain offsets on the Julian time line; which origin they count from
(the Julian epoch, J2000.0, a day's UTC midnight) is decided by the caller.
A JulianCentury is always combined with a JulianDay by converting the day
operand first, so century-scale baselines can take day-scale corrections.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Union

from .angle import Angle


JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC
DAYS_PER_CENTURY = 36525.0
SECONDS_PER_DAY = 86400.0


def utc_midnight(d: date) -> datetime:
    """The calendar date at 00:00 UTC as an aware datetime."""
    return datetime.combine(d, time(0), tzinfo=timezone.utc)


@dataclass(frozen=True)
class JulianDay:
    value: float  # days

    @classmethod
    def from_date(cls, d: date) -> "JulianDay":
        """Julian Day of the date at UTC midnight."""
        tp = utc_midnight(d).timestamp()
        return cls((tp / SECONDS_PER_DAY) + JD_UNIX_EPOCH)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "JulianDay":
        """Julian Day of an aware datetime."""
        if dt.tzinfo is None:
            raise ValueError("datetime must be timezone-aware (UTC)")
        return cls(dt.timestamp() / SECONDS_PER_DAY + JD_UNIX_EPOCH)

    @classmethod
    def from_angle(cls, a: Angle) -> "JulianDay":
        """Read an angle as a fraction of a full turn of the earth (360 deg = 1 day)."""
        return cls(a.deg() / 360.0)

    def to_timedelta(self) -> timedelta:
        """
        Whole seconds, floored. Negative offsets round towards the past, so
        -0.5 s becomes -1 s rather than 0 s.
        """
        sec = math.floor(self.value * SECONDS_PER_DAY)
        return timedelta(seconds=sec)

    def to_datetime(self) -> datetime:
        """Absolute JD -> aware UTC datetime, floored to whole seconds."""
        return datetime.fromtimestamp(0, tz=timezone.utc) + JulianDay(self.value - JD_UNIX_EPOCH).to_timedelta()

    def to_century(self) -> "JulianCentury":
        return JulianCentury.from_day(self)

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def __add__(self, other: "JulianDay") -> "JulianDay":
        if not isinstance(other, JulianDay):
            return NotImplemented
        return JulianDay(self.value + other.value)

    def __sub__(self, other: "JulianDay") -> "JulianDay":
        if not isinstance(other, JulianDay):
            return NotImplemented
        return JulianDay(self.value - other.value)


@dataclass(frozen=True)
class JulianCentury:
    value: float  # centuries of 36525 days

    @classmethod
    def from_day(cls, d: JulianDay) -> "JulianCentury":
        return cls(d.value / DAYS_PER_CENTURY)

    @classmethod
    def from_date(cls, d: date) -> "JulianCentury":
        return cls.from_day(JulianDay.from_date(d))

    def to_day(self) -> JulianDay:
        return JulianDay(self.value * DAYS_PER_CENTURY)

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def __add__(self, other: Union["JulianCentury", JulianDay]) -> "JulianCentury":
        if isinstance(other, JulianDay):
            other = JulianCentury.from_day(other)
        if not isinstance(other, JulianCentury):
            return NotImplemented
        return JulianCentury(self.value + other.value)

    def __sub__(self, other: Union["JulianCentury", JulianDay]) -> "JulianCentury":
        if isinstance(other, JulianDay):
            other = JulianCentury.from_day(other)
        if not isinstance(other, JulianCentury):
            return NotImplemented
        return JulianCentury(self.value - other.value)


# J2000.0 epoch; the solar polynomials take centuries since this instant.
J2000 = JulianDay(2451545.0)


def centuries_since_j2000(d: date) -> JulianCentury:
    """Time parameter of the solar polynomials for the date's UTC midnight."""
    return JulianCentury.from_date(d) - J2000
