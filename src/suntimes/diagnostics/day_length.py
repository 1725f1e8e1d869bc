from __future__ import annotations

import argparse
from datetime import date, datetime
from typing import List, Optional

import suntimes


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def fmt_span(a: Optional[datetime], b: Optional[datetime]) -> str:
    if a is None or b is None:
        return "   --   "
    sec = int((b - a).total_seconds())
    h, rem = divmod(sec, 3600)
    return f"{h:02d}:{rem // 60:02d}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Day, civil and astronomical-night length by latitude.")
    p.add_argument("date", nargs="?", default="2024-06-21", help="YYYY-MM-DD (UTC)")
    p.add_argument("--lon", type=float, default=0.0)
    p.add_argument("--lat-step", type=float, default=10.0)
    p.add_argument("--engine", default="noaa")
    args = p.parse_args(argv)

    if args.lat_step <= 0:
        p.error("--lat-step must be positive")

    d = _parse_ymd(args.date)
    print(f"Date {d}  lon {args.lon:+.2f}  engine {args.engine}")
    print(" lat   daylight  civil   nautical  astro")
    print("-" * 42)

    lat = -90.0
    while lat <= 90.0:
        # cos(lat) = 0 at the poles; stay a hair inside
        lat_eval = max(-89.99, min(89.99, lat))
        t = suntimes.sun_times(lat_eval, args.lon, d, engine=args.engine)
        print(
            f"{lat:+5.0f}   {fmt_span(t.sunrise, t.sunset)}  "
            f"{fmt_span(t.civil_dawn, t.civil_dusk)}  "
            f"{fmt_span(t.naut_dawn, t.naut_dusk)}  "
            f"{fmt_span(t.astro_dawn, t.astro_dusk)}"
        )
        lat += args.lat_step

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
