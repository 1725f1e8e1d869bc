# tests/test_wiki.py

from datetime import date

import pytest

from suntimes.core.angle import Angle
from suntimes.core.types import SunEvent
from suntimes.engines.noaa import NoaaEngine
from suntimes.engines.wiki import (
    WikiEngine,
    declination_of_the_sun,
    ecliptic_longitude,
    julian_day_number,
    solar_mean_anomaly,
)

BIELEFELD = (52.02182, 8.53509)


def _deg(lat, lon):
    return Angle.from_deg(lat), Angle.from_deg(lon)


def test_julian_day_number():
    assert julian_day_number(date(2000, 1, 1)) == 0.0
    assert julian_day_number(date(2000, 1, 2)) == 1.0
    assert julian_day_number(date(1999, 12, 31)) == -1.0


def test_declination_at_solstice():
    n = julian_day_number(date(2024, 6, 21))
    lam = ecliptic_longitude(solar_mean_anomaly(n))
    assert declination_of_the_sun(lam).deg() == pytest.approx(23.44, abs=0.05)


@pytest.mark.parametrize("d", [date(2022, 10, 15), date(2024, 3, 20), date(2024, 6, 21), date(2024, 12, 21)])
def test_close_to_noaa_at_mid_latitude(d):
    lat, lon = _deg(*BIELEFELD)
    wiki = WikiEngine().sun_times(lat, lon, d)
    noaa = NoaaEngine().sun_times(lat, lon, d)

    assert abs((wiki.noon - noaa.noon).total_seconds()) < 180
    assert abs((wiki.sunrise - noaa.sunrise).total_seconds()) < 300
    assert abs((wiki.sunset - noaa.sunset).total_seconds()) < 300


def test_event_order():
    lat, lon = _deg(*BIELEFELD)
    times = WikiEngine().sun_times(lat, lon, date(2022, 10, 15))
    order = [t for _, t in times.items()]
    assert order == sorted(order)


def test_polar_day():
    lat, lon = _deg(80.0, 15.0)
    eng = WikiEngine()
    assert eng.sun_time(lat, lon, date(2024, 6, 21), SunEvent.SUNRISE) is None
    assert eng.sun_time(lat, lon, date(2024, 6, 21), SunEvent.NOON) is not None


def test_engine_info():
    assert WikiEngine().info()["id"].family == "wiki"
