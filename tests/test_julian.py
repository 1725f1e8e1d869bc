# tests/test_julian.py

import math
import random
from datetime import date, datetime, timedelta, timezone

import pytest

from suntimes.core.angle import Angle
from suntimes.core.julian import (
    J2000,
    JulianCentury,
    JulianDay,
    centuries_since_j2000,
    utc_midnight,
)


def test_known_epochs():
    # Unix epoch is 1970-01-01 00:00:00 UTC
    assert JulianDay.from_date(date(1970, 1, 1)).value == 2440587.5
    # J2000.0 is noon of 2000-01-01, so its midnight is half a day earlier
    assert JulianDay.from_date(date(2000, 1, 1)).value == 2451544.5
    assert JulianDay.from_date(date(1969, 12, 31)).value == 2440586.5


def test_centuries_since_j2000():
    t = centuries_since_j2000(date(1992, 10, 13))
    # Meeus, Example 25.a
    assert t.value == pytest.approx(-0.072183436, abs=1e-9)
    assert centuries_since_j2000(date(2000, 1, 1)).value == pytest.approx(-0.5 / 36525.0, abs=1e-12)


def test_day_century_roundtrip():
    random.seed(42)
    for _ in range(1000):
        x = random.uniform(-1e7, 1e7)
        back = JulianCentury.from_day(JulianDay(x)).to_day().value
        assert back == pytest.approx(x, rel=1e-14)
    assert JulianDay(36525.0).to_century() == JulianCentury(1.0)


def test_mixed_arithmetic_stays_in_centuries():
    c = JulianCentury(1.0) + JulianDay(36525.0)
    assert isinstance(c, JulianCentury)
    assert c.value == pytest.approx(2.0)

    c = JulianCentury(1.0) - JulianDay(18262.5)
    assert isinstance(c, JulianCentury)
    assert c.value == pytest.approx(0.5)

    c = JulianCentury(1.0) + JulianCentury(0.25)
    assert c.value == pytest.approx(1.25)

    with pytest.raises(TypeError):
        JulianCentury(1.0) + 1.0


def test_timedelta_floors():
    assert JulianDay(0.25).to_timedelta() == timedelta(hours=6)
    assert JulianDay(-0.25).to_timedelta() == timedelta(hours=-6)
    half_second = 0.5 / 86400.0
    assert JulianDay(half_second).to_timedelta() == timedelta(0)
    # floor, not truncation
    assert JulianDay(-half_second).to_timedelta() == timedelta(seconds=-1)


def test_from_angle():
    assert JulianDay.from_angle(Angle.from_deg(90.0)).value == pytest.approx(0.25)
    assert JulianDay.from_angle(Angle.from_rad(math.pi)).value == pytest.approx(0.5)
    assert JulianDay.from_angle(Angle.from_deg(-360.0)).value == pytest.approx(-1.0)
    assert JulianDay.from_angle(Angle.from_rad(math.nan)).is_nan()


def test_datetime_conversions():
    assert J2000.to_datetime() == datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
    assert JulianDay(2440587.5).to_datetime() == datetime(1970, 1, 1, tzinfo=timezone.utc)

    dt = datetime(2022, 10, 15, 6, 30, tzinfo=timezone.utc)
    assert JulianDay.from_datetime(dt).value == pytest.approx(JulianDay.from_date(dt.date()).value + 6.5 / 24.0, abs=1e-8)

    with pytest.raises(ValueError):
        JulianDay.from_datetime(datetime(2022, 10, 15))


def test_utc_midnight():
    m = utc_midnight(date(2022, 10, 15))
    assert m == datetime(2022, 10, 15, tzinfo=timezone.utc)
    assert m.tzinfo is timezone.utc
