# tests/test_solar_position.py

import math
from datetime import date

import pytest

from suntimes.core.angle import Angle
from suntimes.core.julian import JulianCentury, centuries_since_j2000
from suntimes.reference import solar


def test_meeus_example_25a_sun_position():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 25.a.
    Date: 1992 October 13, 0h TD.
    """
    t = centuries_since_j2000(date(1992, 10, 13))

    assert solar.sun_geometric_mean_longitude(t).deg() == pytest.approx(201.80720, abs=1e-5)
    # mean anomaly is not range-reduced
    assert solar.sun_geometric_mean_anomaly(t).deg() % 360.0 == pytest.approx(278.99397, abs=1e-5)
    assert solar.earth_orbit_eccentricity(t) == pytest.approx(0.016711668, abs=1e-9)
    assert solar.sun_equation_of_center(t).deg() == pytest.approx(-1.89732, abs=1e-5)
    assert solar.sun_true_longitude(t).deg() % 360.0 == pytest.approx(199.90988, abs=1e-5)
    assert solar.sun_apparent_longitude(t).deg() % 360.0 == pytest.approx(199.90895, abs=1e-4)

    # 23 deg 26' 24.83"
    assert solar.mean_ecliptic_obliquity(t).deg() == pytest.approx(23.44023, abs=1e-5)
    assert solar.obliquity_correction(t).deg() == pytest.approx(23.43999, abs=1e-5)
    assert solar.sun_declination(t).deg() == pytest.approx(-7.78507, abs=1e-4)


def test_meeus_example_28b_equation_of_time():
    # E = 13m 42.7s for 1992 October 13.0
    t = centuries_since_j2000(date(1992, 10, 13))
    assert solar.equation_of_time_minutes(t) == pytest.approx(13.0 + 42.7 / 60.0, abs=0.05)
    assert solar.equation_of_time(t).rad() == pytest.approx(0.059825, abs=1e-4)


def test_epoch_values():
    t = JulianCentury(0.0)
    assert solar.sun_geometric_mean_longitude(t).deg() == pytest.approx(280.46646, abs=1e-10)
    assert solar.sun_geometric_mean_anomaly(t).deg() == pytest.approx(357.52911, abs=1e-10)
    assert solar.earth_orbit_eccentricity(t) == 0.016708634


def test_mean_longitude_reduces_only_secular_term():
    """
    The 360 deg reduction applies to t*(36000.76983 + 0.0003032 t) only, with
    C fmod semantics, so the result may leave [0, 360).
    """
    # 0.003 * 36000.77... = 108.0023 < 360: nothing is reduced
    t = JulianCentury(0.003)
    secular = 0.003 * (36000.76983 + 0.003 * 0.0003032)
    assert solar.sun_geometric_mean_longitude(t).deg() == pytest.approx(280.46646 + secular, abs=1e-9)
    assert solar.sun_geometric_mean_longitude(t).deg() > 360.0

    # negative t keeps the sign of the remainder (fmod, not floor-mod)
    t = JulianCentury(-0.003)
    secular = -0.003 * (36000.76983 - 0.003 * 0.0003032)
    assert solar.sun_geometric_mean_longitude(t).deg() == pytest.approx(280.46646 + secular, abs=1e-9)

    # one full century: the secular term wraps by exactly 100 turns
    t = JulianCentury(1.0)
    assert solar.sun_geometric_mean_longitude(t).deg() == pytest.approx(280.46646 + 0.7701332, abs=1e-7)


def test_equation_of_time_is_bounded():
    """The equation of time stays within about +-17 minutes (well inside +-20) for 1800..2200."""
    for year in range(1800, 2201, 7):
        for month in range(1, 13):
            t = centuries_since_j2000(date(year, month, 1))
            assert abs(solar.equation_of_time_minutes(t)) < 20.0


def test_equation_of_time_sign_through_the_year():
    # Sun slow in mid February, fast in early November
    feb = solar.equation_of_time_minutes(centuries_since_j2000(date(2024, 2, 11)))
    nov = solar.equation_of_time_minutes(centuries_since_j2000(date(2024, 11, 3)))
    assert feb == pytest.approx(-14.2, abs=0.5)
    assert nov == pytest.approx(16.4, abs=0.5)


def test_declination_at_solstices():
    jun = solar.sun_declination(centuries_since_j2000(date(2024, 6, 21))).deg()
    dec = solar.sun_declination(centuries_since_j2000(date(2024, 12, 21))).deg()
    assert jun == pytest.approx(23.44, abs=0.05)
    assert dec == pytest.approx(-23.44, abs=0.05)


def test_solar_zenith_angle():
    t = centuries_since_j2000(date(2024, 6, 21))
    decl = solar.sun_declination(t)
    # sun overhead at noon where latitude equals declination
    assert solar.solar_zenith_angle(t, decl, Angle.from_deg(0.0)).deg() == pytest.approx(0.0, abs=1e-5)
    # at the equator, six hours from noon the sun is on the horizon
    z = solar.solar_zenith_angle(t, Angle.from_deg(0.0), Angle.from_deg(90.0)).deg()
    assert z == pytest.approx(90.0, abs=1e-9)


def test_nan_time_propagates():
    t = JulianCentury(math.nan)
    assert solar.equation_of_time(t).is_nan()
    assert solar.sun_declination(t).is_nan()
