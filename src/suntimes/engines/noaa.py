"""
suntimes.engines.noaa
---------------------
Sun event times after the NOAA solar calculator.

Noon is found from the longitude and refined twice with the equation of
time. Elevation events start from that noon, step back by the hour angle and
are refined once more at the approximate event time. The number of passes is
fixed, so results are reproducible against reference tables.

Time bookkeeping: `day` is the UTC midnight of the requested date in Julian
centuries since J2000.0; the solvers return the event's offset from that
midnight in Julian days.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional

from ..core.angle import Angle
from ..core.julian import JulianCentury, JulianDay, centuries_since_j2000, utc_midnight
from ..core.types import EngineId, SunEvent, SunTimes
from ..reference.solar import equation_of_time, sun_declination
from .events import ELEVATION_EVENTS, event_angle

LOG = logging.getLogger(__name__)

NOON = Angle.from_rad(math.pi)


def hour_angle(tp: JulianCentury, latitude: Angle, elevation: Angle) -> Angle:
    """
    Hour angle at which the sun reaches `elevation` (a signed zenith angle).

    The result carries the sign of -elevation, so dawn angles (negative)
    give a positive hour angle to subtract from noon and dusk angles a
    negative one. NaN when the sun never gets there on that day.
    """
    decli = sun_declination(tp)
    cos_omega = elevation.cos() / (latitude.cos() * decli.cos()) - latitude.tan() * decli.tan()
    if -1.0 <= cos_omega <= 1.0:
        omega = math.acos(cos_omega)
    else:
        omega = math.nan
    return Angle.from_rad(math.copysign(omega, -elevation.rad()))


def time_of_solar_noon(day: JulianCentury, longitude: Angle) -> JulianDay:
    # First, approximate local noon from the longitude alone...
    approx_noon_offset = JulianDay.from_angle(NOON - longitude)
    tp = day + approx_noon_offset

    # ...take the equation of time there...
    eq_of_time = equation_of_time(tp)
    tp = day + JulianDay.from_angle(NOON - longitude - eq_of_time)

    # ...and once more at the improved time point.
    eq_of_time = equation_of_time(tp)
    return JulianDay.from_angle(NOON - longitude - eq_of_time)


def time_of_solar_elevation(
    noon: JulianCentury,
    latitude: Angle,
    longitude: Angle,
    elevation: Angle,
) -> JulianDay:
    """
    Offset from the day's UTC midnight at which the sun passes `elevation`.
    `noon` is the absolute time of true noon (day + noon offset).
    """
    angle = hour_angle(noon, latitude, elevation)
    tp = noon - JulianDay.from_angle(angle)

    eq_of_time = equation_of_time(tp)
    angle = hour_angle(tp, latitude, elevation)
    return JulianDay.from_angle(NOON - longitude - eq_of_time - angle)


@dataclass(frozen=True)
class NoaaEngine:
    id: EngineId = field(default_factory=lambda: EngineId(family="noaa", name="noaa", version="1"))

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": "NOAA solar calculator, two-pass refinement of noon and hour angle",
            "accuracy": "about one minute for |lat| < 72 deg",
        }

    def _noon_offset(self, day: JulianCentury, longitude: Angle) -> JulianDay:
        return time_of_solar_noon(day, longitude)

    def _elevation_time(
        self,
        d: date,
        day: JulianCentury,
        noon_offset: JulianDay,
        latitude: Angle,
        longitude: Angle,
        event: SunEvent,
    ) -> Optional[datetime]:
        offset = time_of_solar_elevation(day + noon_offset, latitude, longitude, event_angle(event))
        if offset.is_nan():
            LOG.debug("%s does not happen on %s at lat=%.4f", event.value, d, latitude.deg())
            return None
        return utc_midnight(d) + offset.to_timedelta()

    def sun_time(self, latitude: Angle, longitude: Angle, d: date, event: SunEvent) -> Optional[datetime]:
        event = SunEvent(event)
        day = centuries_since_j2000(d)
        noon_offset = self._noon_offset(day, longitude)
        t_noon = utc_midnight(d) + noon_offset.to_timedelta()

        if event is SunEvent.NOON:
            return t_noon
        if event is SunEvent.MIDNIGHT:
            return t_noon + timedelta(hours=12)
        return self._elevation_time(d, day, noon_offset, latitude, longitude, event)

    def sun_times(self, latitude: Angle, longitude: Angle, d: date) -> SunTimes:
        day = centuries_since_j2000(d)
        noon_offset = self._noon_offset(day, longitude)
        t_noon = utc_midnight(d) + noon_offset.to_timedelta()

        events = {
            ev.value: self._elevation_time(d, day, noon_offset, latitude, longitude, ev)
            for ev in ELEVATION_EVENTS
        }
        return SunTimes(noon=t_noon, midnight=t_noon + timedelta(hours=12), **events)
