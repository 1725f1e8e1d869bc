# reference/solar.py
"""
NOAA-style low-precision solar position.

All functions take t in Julian centuries since J2000.0 and return angles in
degrees (wrapped in Angle) unless noted. The polynomial coefficients are the
empirical fits from the NOAA solar calculator spreadsheet (after Meeus,
Astronomical Algorithms, ch. 25) and have to be reproduced exactly.
"""

from __future__ import annotations

import math

from ..core.angle import Angle
from ..core.julian import JulianCentury


def _lunar_node(t: float) -> Angle:
    """Longitude of the moon's ascending node, used for nutation/aberration."""
    return Angle.from_deg(125.04 - 1934.136 * t)


def sun_geometric_mean_longitude(tp: JulianCentury) -> Angle:
    t = tp.value
    # fmod binds to the secular term only; the 280.46646 offset is added after.
    return Angle.from_deg(280.46646 + math.fmod(t * (36000.76983 + t * 0.0003032), 360.0))


def sun_geometric_mean_anomaly(tp: JulianCentury) -> Angle:
    t = tp.value
    return Angle.from_deg(357.52911 + t * (35999.05029 - 0.0001537 * t))


def earth_orbit_eccentricity(tp: JulianCentury) -> float:
    t = tp.value
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def sun_equation_of_center(tp: JulianCentury) -> Angle:
    an = sun_geometric_mean_anomaly(tp)
    t = tp.value

    return Angle.from_deg(
        an.sin() * (1.914602 - t * (0.004817 + 0.000014 * t))
        + (2.0 * an).sin() * (0.019993 - 0.000101 * t)
        + (3.0 * an).sin() * 0.000289
    )


def sun_true_longitude(tp: JulianCentury) -> Angle:
    return sun_geometric_mean_longitude(tp) + sun_equation_of_center(tp)


def sun_apparent_longitude(tp: JulianCentury) -> Angle:
    omega = _lunar_node(tp.value)
    return sun_true_longitude(tp) - Angle.from_deg(0.00569 + 0.00478 * omega.sin())


def mean_ecliptic_obliquity(tp: JulianCentury) -> Angle:
    t = tp.value
    return Angle.from_deg(
        23.0 + (26.0 + (21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))) / 60.0) / 60.0
    )


def obliquity_correction(tp: JulianCentury) -> Angle:
    omega = _lunar_node(tp.value)
    return mean_ecliptic_obliquity(tp) + Angle.from_deg(0.00256 * omega.cos())


def sun_declination(tp: JulianCentury) -> Angle:
    al = sun_apparent_longitude(tp)
    oc = obliquity_correction(tp)
    return Angle.from_rad(math.asin(oc.sin() * al.sin()))


def equation_of_time(tp: JulianCentury) -> Angle:
    """
    Apparent minus mean solar time, as an angle of earth rotation (radians).
    360 deg correspond to one day, so 1 deg is 4 minutes of clock time.
    """
    oc = obliquity_correction(tp)
    ml = sun_geometric_mean_longitude(tp)
    ma = sun_geometric_mean_anomaly(tp)
    oe = earth_orbit_eccentricity(tp)
    y = (oc / 2.0).tan() * (oc / 2.0).tan()

    et = (
        y * (2.0 * ml).sin()
        - 2.0 * oe * ma.sin()
        + 4.0 * oe * y * ma.sin() * (2.0 * ml).cos()
        - 0.5 * y * y * (4.0 * ml).sin()
        - 1.25 * oe * oe * (2.0 * ma).sin()
    )
    return Angle.from_rad(et)


def equation_of_time_minutes(tp: JulianCentury) -> float:
    """Equation of time in minutes of clock time."""
    return 4.0 * equation_of_time(tp).deg()


def solar_zenith_angle(tp: JulianCentury, latitude: Angle, hour_angle: Angle) -> Angle:
    """
    Angle between the local zenith and the sun for a given hour angle.
    The sun's elevation above the horizon is 90 deg minus this.
    """
    decli = sun_declination(tp)
    cos_z = hour_angle.cos() * latitude.cos() * decli.cos() + latitude.sin() * decli.sin()
    # rounding can push |cos_z| a hair above 1 at the subsolar point
    if not math.isnan(cos_z):
        cos_z = max(-1.0, min(1.0, cos_z))
    return Angle.from_rad(math.acos(cos_z))
