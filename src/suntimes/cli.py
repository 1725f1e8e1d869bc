from __future__ import annotations

import argparse
from datetime import date, datetime
import logging
import sys
import re
import importlib
import inspect
from typing import Optional


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_LABELS = {
    "astro_dawn": " a. dawn",
    "naut_dawn": " n. dawn",
    "civil_dawn": " c. dawn",
    "sunrise": " sunrise",
    "noon": "    noon",
    "sunset": "  sunset",
    "civil_dusk": " c. dusk",
    "naut_dusk": " n. dusk",
    "astro_dusk": " a. dusk",
    "midnight": "midnight",
}
_ABSENT = "does not happen"


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _fmt(t: Optional[datetime]) -> str:
    if t is None:
        return _ABSENT.center(19)
    return t.strftime("%Y-%m-%d %H:%M:%S")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_location(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, default=52.02182, help="Observer latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, default=8.53509, help="Observer longitude in degrees (positive East)")


def cmd_day(argv: list[str]) -> int:
    import suntimes

    p = argparse.ArgumentParser(prog="suntimes day", description="Sun event times (UTC) for one date")
    p.add_argument("date", help="YYYY-MM-DD (UTC)")
    _add_location(p)
    p.add_argument("--engine", default="noaa")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    times = suntimes.sun_times(args.lat, args.lon, d, engine=args.engine)

    print(f"==== {d}  lat {args.lat:+.5f}  lon {args.lon:+.5f}  ({args.engine}) ====")
    for ev, t in times.items():
        print(f"{_LABELS[ev.value]}: {_fmt(t)} UTC")
    return 0


def cmd_compare(argv: list[str]) -> int:
    import suntimes

    p = argparse.ArgumentParser(prog="suntimes compare", description="Sun event times from every registered engine")
    p.add_argument("date", help="YYYY-MM-DD (UTC)")
    _add_location(p)
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    names = suntimes.list_engines()
    results = {name: suntimes.sun_times(args.lat, args.lon, d, engine=name) for name in names}

    print(f"==== {d}  lat {args.lat:+.5f}  lon {args.lon:+.5f} ====")
    print("          " + " | ".join(n.center(19) for n in names))
    for ev, _ in results[names[0]].items():
        cols = " | ".join(_fmt(results[n].get(ev)) for n in names)
        print(f"{_LABELS[ev.value]}: {cols}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    from suntimes.core.julian import J2000, JulianCentury, JulianDay, centuries_since_j2000
    from suntimes.reference import solar
    from suntimes.api import sun_elevation

    p = argparse.ArgumentParser(prog="suntimes solar", description="Solar position quantities at a date or JD(UTC).")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--date", default=None, help="YYYY-MM-DD, taken at 00:00 UTC")
    g.add_argument("--jd-utc", type=float, default=None, help="Julian Date in UTC")
    _add_location(p)
    args = p.parse_args(argv)

    if args.jd_utc is not None:
        jd = JulianDay(args.jd_utc)
        t = JulianCentury.from_day(jd) - J2000
    else:
        d = _parse_ymd(args.date) if args.date else date(2000, 1, 1)
        jd = JulianDay.from_date(d)
        t = centuries_since_j2000(d)

    print("Time Input:")
    print(f"  JD_UTC = {jd.value:.6f}")
    print(f"  T (Julian centuries from J2000.0) = {t.value:.12f}")
    print()
    print("Solar Position (degrees):")
    print(f"  Mean Longitude     (L0)     = {solar.sun_geometric_mean_longitude(t).deg():.6f}")
    print(f"  Mean Anomaly       (M)      = {solar.sun_geometric_mean_anomaly(t).deg():.6f}")
    print(f"  Eccentricity       (e)      = {solar.earth_orbit_eccentricity(t):.9f}")
    print(f"  True Longitude              = {solar.sun_true_longitude(t).deg():.6f}")
    print(f"  Apparent Longitude          = {solar.sun_apparent_longitude(t).deg():.6f}")
    print(f"  Obliquity (corrected)       = {solar.obliquity_correction(t).deg():.6f}")
    print(f"  Declination        (delta)  = {solar.sun_declination(t).deg():.6f}")
    print()
    print("Equation of Time:")
    print(f"  EOT (minutes) = {solar.equation_of_time_minutes(t):.4f}")
    print()
    print(f"Sun at lat {args.lat:+.5f} lon {args.lon:+.5f}:")
    print(f"  Elevation (no refraction) = {sun_elevation(args.lat, args.lon, jd.to_datetime()):.4f} deg")
    return 0


def cmd_engines(argv: list[str]) -> int:
    import suntimes

    p = argparse.ArgumentParser(prog="suntimes engines", description="List registered engines")
    p.parse_args(argv)
    for name in suntimes.list_engines():
        info = suntimes.engine_info(name)
        print(f"{name:8s} {info.get('description', '')}  [{info.get('accuracy', '?')}]")
    return 0


def _pop_verbose(argv: list[str]) -> tuple[bool, list[str]]:
    kept = [a for a in argv if a not in ("-v", "--verbose")]
    return len(kept) != len(argv), kept


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `suntimes YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        verbose, argv = _pop_verbose(argv)
        _setup_logging(verbose)
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="suntimes", description="Sunrise, sunset, twilight and solar noon calculator.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Sun event times (UTC) for one date", add_help=False)
    sub.add_parser("compare", help="Sun event times from every registered engine", add_help=False)
    sub.add_parser("solar", help="Solar position quantities at a date", add_help=False)
    sub.add_parser("engines", help="List registered engines", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["eot-curve", "day-length", "compare-engines", "validate-skyfield"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    # -v after the subcommand ends up among the subcommand's arguments
    verbose, rest = _pop_verbose(rest)
    _setup_logging(args.verbose or verbose)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "compare":
        return cmd_compare(rest)

    if args.cmd == "solar":
        return cmd_solar(rest)

    if args.cmd == "engines":
        return cmd_engines(rest)

    if args.cmd == "diag":
        tool_map = {
            "eot-curve": "suntimes.diagnostics.eot_curve",
            "day-length": "suntimes.diagnostics.day_length",
            "compare-engines": "suntimes.diagnostics.compare_engines",
            "validate-skyfield": "suntimes.diagnostics.ephem.validate_skyfield",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
