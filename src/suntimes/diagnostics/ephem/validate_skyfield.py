#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import Dict, List, Optional

import suntimes
from suntimes.core.julian import utc_midnight
from suntimes.ephemeris.skyfield_sun import SkyfieldSun, nearest


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate analytical sun times against a JPL ephemeris (skyfield).")
    p.add_argument("--lat", type=float, default=52.02182)
    p.add_argument("--lon", type=float, default=8.53509)
    p.add_argument("--start", default="2024-01-01", help="YYYY-MM-DD")
    p.add_argument("--days", type=int, default=30)
    p.add_argument("--step-days", type=int, default=1)
    p.add_argument("--engine", default="noaa")
    p.add_argument("--bsp", default="de421.bsp", help="ephemeris file for skyfield")
    args = p.parse_args(argv)

    print("Loading ephemeris...")
    ref = SkyfieldSun.load(args.bsp)

    y, m, dd = map(int, args.start.split("-"))
    d0 = date(y, m, dd)

    errs: Dict[str, List[float]] = {"noon": [], "sunrise": [], "sunset": []}
    missing: Dict[str, int] = {k: 0 for k in errs}

    for k in range(0, args.days, args.step_days):
        d = d0 + timedelta(days=k)
        ours = suntimes.sun_times(args.lat, args.lon, d, engine=args.engine)
        window = ref.events_between(
            args.lat, args.lon,
            utc_midnight(d) - timedelta(days=1),
            utc_midnight(d) + timedelta(days=2),
        )
        for name in errs:
            t = getattr(ours, name)
            if t is None:
                missing[name] += 1
                continue
            r = nearest(window[name], t)
            if r is None or abs((t - r).total_seconds()) > 6 * 3600:
                missing[name] += 1
                continue
            errs[name].append((t - r).total_seconds())

    print(f"{args.engine} - skyfield  lat {args.lat:+.4f} lon {args.lon:+.4f}")
    print(f"{'event':>8}  {'n':>4}  {'mean[s]':>8}  {'max|d|[s]':>9}  {'missing':>7}")
    for name, xs in errs.items():
        if xs:
            mean = sum(xs) / len(xs)
            mx = max(abs(x) for x in xs)
        else:
            mean = mx = float("nan")
        print(f"{name:>8}  {len(xs):4d}  {mean:8.1f}  {mx:9.1f}  {missing[name]:7d}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
