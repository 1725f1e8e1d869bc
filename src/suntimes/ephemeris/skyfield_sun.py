#ephemeris/skyfield_sun.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from . import require_ephemeris


@dataclass
class SkyfieldSun:
    """
    Reference noon/sunrise/sunset from a JPL ephemeris via skyfield's almanac.

    Requires optional deps:
      pip install "suntimes[ephemeris]"
    The ephemeris file (default de421.bsp) is downloaded by skyfield on first use.
    """
    eph: object
    ts: object

    @classmethod
    def load(cls, path: str = "de421.bsp") -> "SkyfieldSun":
        require_ephemeris()
        from skyfield.api import load  # type: ignore

        return cls(eph=load(path), ts=load.timescale())

    def events_between(self, lat: float, lon: float, start: datetime, end: datetime) -> Dict[str, List[datetime]]:
        """Solar transits, sunrises and sunsets in [start, end) as aware UTC datetimes."""
        from skyfield import almanac  # type: ignore
        from skyfield.api import wgs84  # type: ignore

        topos = wgs84.latlon(lat, lon)
        t0 = self.ts.from_datetime(start)
        t1 = self.ts.from_datetime(end)

        out: Dict[str, List[datetime]] = {"noon": [], "sunrise": [], "sunset": []}

        transits = almanac.meridian_transits(self.eph, self.eph["sun"], topos)
        times, codes = almanac.find_discrete(t0, t1, transits)
        for t, code in zip(times, codes):
            if int(code) == 1:
                out["noon"].append(t.utc_datetime())

        rise_set = almanac.sunrise_sunset(self.eph, topos)
        times, is_up = almanac.find_discrete(t0, t1, rise_set)
        for t, up in zip(times, is_up):
            out["sunrise" if bool(up) else "sunset"].append(t.utc_datetime())

        return out


def nearest(candidates: List[datetime], t: datetime) -> Optional[datetime]:
    if not candidates:
        return None
    return min(candidates, key=lambda c: abs((c - t).total_seconds()))
