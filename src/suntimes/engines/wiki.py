"""
suntimes.engines.wiki
---------------------
The simplified "sunrise equation" (Wikipedia, complete calculation on Earth).

No iteration and no equation-of-time series: a fixed axial tilt, a
three-term equation of center and a two-term transit correction. Cheaper
and less accurate than the NOAA engine (errors of a minute or two are
normal); kept as an independent cross-check.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..core.angle import Angle
from ..core.julian import J2000, JulianDay
from ..core.types import EngineId, SunEvent, SunTimes
from .events import event_angle

LOG = logging.getLogger(__name__)

AXIAL_TILT = Angle.from_deg(23.44)
PERIHELION_ARG_DEG = 102.9372


def julian_day_number(d: date) -> float:
    """Days since J2000.0 of the solar transit nearest the date's noon."""
    return float(math.ceil(JulianDay.from_date(d).value - J2000.value + 0.0008))


def mean_solar_time(n: float, longitude: Angle) -> float:
    return n - JulianDay.from_angle(longitude).value


def solar_mean_anomaly(j_star: float) -> Angle:
    return Angle.from_deg(math.fmod(357.5291 + 0.98560028 * j_star, 360.0))


def equation_of_the_center(mean_anomaly: Angle) -> Angle:
    c1 = 1.9148 * mean_anomaly.sin()
    c2 = 0.0200 * (2.0 * mean_anomaly).sin()
    c3 = 0.0003 * (3.0 * mean_anomaly).sin()
    return Angle.from_deg(c1 + c2 + c3)


def ecliptic_longitude(mean_anomaly: Angle) -> Angle:
    eqc = equation_of_the_center(mean_anomaly)
    return Angle.from_deg(math.fmod(mean_anomaly.deg() + eqc.deg() + 180.0 + PERIHELION_ARG_DEG, 360.0))


def solar_transit(j_star: float, mean_anomaly: Angle, lam: Angle) -> JulianDay:
    """Absolute JD of true noon."""
    eq_time = 0.0053 * mean_anomaly.sin() - 0.0069 * (2.0 * lam).sin()
    return JulianDay(J2000.value + j_star + eq_time)


def declination_of_the_sun(lam: Angle) -> Angle:
    return Angle.from_rad(math.asin(lam.sin() * AXIAL_TILT.sin()))


def hour_angle(latitude: Angle, declination: Angle, time_angle: Angle) -> Angle:
    """Like the NOAA hour angle, but signed like `time_angle` (negative at dawn)."""
    num = time_angle.cos() - latitude.sin() * declination.sin()
    den = latitude.cos() * declination.cos()
    ratio = num / den
    omega = math.acos(ratio) if -1.0 <= ratio <= 1.0 else math.nan
    return Angle.from_rad(math.copysign(omega, time_angle.rad()))


@dataclass(frozen=True)
class WikiEngine:
    id: EngineId = field(default_factory=lambda: EngineId(family="wiki", name="wiki", version="1"))

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": "Sunrise equation with fixed 23.44 deg tilt, no refinement",
            "accuracy": "a few minutes",
        }

    def sun_time(self, latitude: Angle, longitude: Angle, d: date, event: SunEvent) -> Optional[datetime]:
        event = SunEvent(event)
        n = julian_day_number(d)
        j_star = mean_solar_time(n, longitude)
        ma = solar_mean_anomaly(j_star)
        lam = ecliptic_longitude(ma)

        result = solar_transit(j_star, ma, lam)
        if event is SunEvent.MIDNIGHT:
            result = result + JulianDay(0.5)
        elif event is not SunEvent.NOON:
            decl = declination_of_the_sun(lam)
            ha = hour_angle(latitude, decl, event_angle(event))
            result = result + JulianDay.from_angle(ha)

        if result.is_nan():
            LOG.debug("%s does not happen on %s at lat=%.4f", event.value, d, latitude.deg())
            return None
        return result.to_datetime()

    def sun_times(self, latitude: Angle, longitude: Angle, d: date) -> SunTimes:
        times = {ev.value: self.sun_time(latitude, longitude, d, ev) for ev in SunEvent}
        return SunTimes(**times)
