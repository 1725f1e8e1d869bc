# tests/test_flat.py

import ctypes
from datetime import date, datetime, timezone

from suntimes import sun_times
from suntimes.flat import MISSING, SunTimesFlat, flatten, sun_times_flat, unflatten

BIELEFELD = (52.02182, 8.53509)


def test_layout():
    assert ctypes.sizeof(SunTimesFlat) == 10 * 8
    names = [name for name, _ in SunTimesFlat._fields_]
    assert names[:2] == ["noon", "midnight"]
    assert names[2:] == [
        "astro_dawn", "naut_dawn", "civil_dawn", "sunrise",
        "sunset", "civil_dusk", "naut_dusk", "astro_dusk",
    ]


def test_flatten_timestamps():
    times = sun_times(*BIELEFELD, date(2022, 10, 15))
    flat = flatten(times)
    assert flat.noon == int(times.noon.timestamp())
    assert flat.sunrise == int(times.sunrise.timestamp())
    assert flat.midnight - flat.noon == 12 * 3600


def test_missing_events_are_zero():
    times = sun_times(80.0, 15.0, date(2024, 6, 21))
    flat = flatten(times)
    assert flat.sunrise == MISSING
    assert flat.astro_dusk == MISSING
    assert flat.noon != MISSING


def test_unflatten_restores_record():
    for lat, lon in (BIELEFELD, (80.0, 15.0)):
        times = sun_times(lat, lon, date(2024, 6, 21))
        assert unflatten(flatten(times)) == times


def test_sun_times_flat_uses_utc_date():
    ts = int(datetime(2022, 10, 15, 23, 59, tzinfo=timezone.utc).timestamp())
    flat = sun_times_flat(*BIELEFELD, ts)
    expected = flatten(sun_times(*BIELEFELD, date(2022, 10, 15)))
    assert bytes(flat) == bytes(expected)
    assert "noon=" in repr(flat)
