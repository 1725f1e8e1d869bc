# tests/test_diagnostics.py

from datetime import date

import pytest

from suntimes.core.types import SunEvent
from suntimes.diagnostics.compare_engines import diff_stats
from suntimes.diagnostics.day_length import fmt_span


def test_fmt_span():
    from datetime import datetime, timezone

    a = datetime(2024, 6, 21, 3, 0, tzinfo=timezone.utc)
    b = datetime(2024, 6, 21, 19, 45, 30, tzinfo=timezone.utc)
    assert fmt_span(a, b) == "16:45"
    assert fmt_span(None, b) == "   --   "


def test_diff_stats_same_engine_is_zero():
    stats = diff_stats(52.0, 8.5, date(2024, 1, 1), 5, "noaa", "noaa")
    for ev in SunEvent:
        assert stats[ev]["n"] == 5.0
        assert stats[ev]["max_abs"] == 0.0
        assert stats[ev]["mismatch"] == 0.0


def test_diff_stats_noaa_vs_wiki():
    stats = diff_stats(52.0, 8.5, date(2024, 1, 1), 10)
    assert stats[SunEvent.NOON]["max_abs"] < 180.0
    assert stats[SunEvent.SUNRISE]["max_abs"] < 300.0


def test_eot_series():
    pytest.importorskip("numpy")
    from suntimes.diagnostics.eot_curve import eot_series

    days, eot, decl = eot_series(2024, 2024, step_days=1)
    assert len(days) == 366
    assert eot.min() == pytest.approx(-14.2, abs=0.5)
    assert eot.max() == pytest.approx(16.4, abs=0.5)
    assert decl.max() == pytest.approx(23.44, abs=0.05)


def test_eot_curve_main(capsys):
    pytest.importorskip("numpy")
    from suntimes.diagnostics.eot_curve import main

    assert main(["--step-days", "5"]) == 0
    assert "Equation of time 2024..2024" in capsys.readouterr().out
