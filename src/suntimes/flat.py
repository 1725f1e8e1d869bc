"""
suntimes.flat
-------------
C-compatible flat record of one day's sun times.

Every field is a signed 64-bit Unix timestamp (seconds, UTC). A missing
event is stored as 0, the Unix epoch itself; this sentinel exists only in
this module; everything above it uses None.
"""

from __future__ import annotations

import ctypes
from datetime import datetime, timezone
from typing import Optional

from .core.types import SunEvent, SunTimes

MISSING = 0


class SunTimesFlat(ctypes.Structure):
    _fields_ = [(ev.value, ctypes.c_int64) for ev in (
        SunEvent.NOON,
        SunEvent.MIDNIGHT,
        SunEvent.ASTRO_DAWN,
        SunEvent.NAUT_DAWN,
        SunEvent.CIVIL_DAWN,
        SunEvent.SUNRISE,
        SunEvent.SUNSET,
        SunEvent.CIVIL_DUSK,
        SunEvent.NAUT_DUSK,
        SunEvent.ASTRO_DUSK,
    )]

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={getattr(self, name)}" for name, _ in self._fields_)
        return f"SunTimesFlat({body})"


def _to_ts(t: Optional[datetime]) -> int:
    if t is None:
        return MISSING
    return int(t.timestamp())


def _from_ts(ts: int) -> Optional[datetime]:
    if ts == MISSING:
        return None
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def flatten(times: SunTimes) -> SunTimesFlat:
    return SunTimesFlat(**{name: _to_ts(getattr(times, name)) for name, _ in SunTimesFlat._fields_})


def unflatten(flat: SunTimesFlat) -> SunTimes:
    values = {name: _from_ts(getattr(flat, name)) for name, _ in SunTimesFlat._fields_}
    # noon and midnight are always real instants, even at the epoch
    values["noon"] = datetime.fromtimestamp(flat.noon, tz=timezone.utc)
    values["midnight"] = datetime.fromtimestamp(flat.midnight, tz=timezone.utc)
    return SunTimes(**values)


def sun_times_flat(latitude: float, longitude: float, timestamp: int, *, engine: str = "noaa") -> SunTimesFlat:
    """Flat sun times for the UTC date containing the Unix `timestamp`."""
    from .api import sun_times

    d = datetime.fromtimestamp(timestamp, tz=timezone.utc).date()
    return flatten(sun_times(latitude, longitude, d, engine=engine))
