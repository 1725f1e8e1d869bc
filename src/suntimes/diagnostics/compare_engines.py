#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import Dict, List, Optional

import suntimes
from suntimes.core.types import SunEvent


def diff_stats(
    lat: float,
    lon: float,
    d0: date,
    n_days: int,
    engine_a: str = "noaa",
    engine_b: str = "wiki",
) -> Dict[SunEvent, Dict[str, float]]:
    """
    Per-event statistics of (engine_a - engine_b) in seconds over n_days.
    Days where only one engine has the event are counted as mismatches.
    """
    diffs: Dict[SunEvent, List[float]] = {ev: [] for ev in SunEvent}
    mismatch: Dict[SunEvent, int] = {ev: 0 for ev in SunEvent}

    for k in range(n_days):
        d = d0 + timedelta(days=k)
        ta = suntimes.sun_times(lat, lon, d, engine=engine_a)
        tb = suntimes.sun_times(lat, lon, d, engine=engine_b)
        for ev, a in ta.items():
            b = tb.get(ev)
            if a is None and b is None:
                continue
            if a is None or b is None:
                mismatch[ev] += 1
                continue
            diffs[ev].append((a - b).total_seconds())

    out: Dict[SunEvent, Dict[str, float]] = {}
    for ev in SunEvent:
        xs = diffs[ev]
        if xs:
            out[ev] = {
                "n": float(len(xs)),
                "mean": sum(xs) / len(xs),
                "max_abs": max(abs(x) for x in xs),
                "mismatch": float(mismatch[ev]),
            }
        else:
            out[ev] = {"n": 0.0, "mean": 0.0, "max_abs": 0.0, "mismatch": float(mismatch[ev])}
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare two registered engines day by day.")
    p.add_argument("--lat", type=float, default=52.02182)
    p.add_argument("--lon", type=float, default=8.53509)
    p.add_argument("--start", default="2024-01-01", help="YYYY-MM-DD")
    p.add_argument("--days", type=int, default=366)
    p.add_argument("--a", default="noaa")
    p.add_argument("--b", default="wiki")
    args = p.parse_args(argv)

    y, m, dd = map(int, args.start.split("-"))
    stats = diff_stats(args.lat, args.lon, date(y, m, dd), args.days, args.a, args.b)

    print(f"{args.a} - {args.b}  lat {args.lat:+.4f} lon {args.lon:+.4f}  from {args.start}, {args.days} days")
    print(f"{'event':>11}  {'n':>4}  {'mean[s]':>9}  {'max|d|[s]':>9}  {'mismatch':>8}")
    for ev, s in stats.items():
        print(f"{ev.value:>11}  {int(s['n']):4d}  {s['mean']:9.1f}  {s['max_abs']:9.1f}  {int(s['mismatch']):8d}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
