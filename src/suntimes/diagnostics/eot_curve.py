#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List, Optional

from suntimes.core.errors import DependencyUnavailableError
from suntimes.core.julian import centuries_since_j2000
from suntimes.reference.solar import equation_of_time_minutes, sun_declination


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise DependencyUnavailableError('Need numpy. Install: pip install "suntimes[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise DependencyUnavailableError('Need matplotlib. Install: pip install "suntimes[diagnostics]"') from e


def eot_series(year_start: int, year_end: int, step_days: int = 1):
    """Days since start, equation of time (minutes) and declination (deg) as numpy arrays."""
    np = _need_numpy()

    d0 = date(year_start, 1, 1)
    n = (date(year_end + 1, 1, 1) - d0).days
    offsets = np.arange(0, n, step_days)

    eot = np.empty(len(offsets))
    decl = np.empty(len(offsets))
    for i, k in enumerate(offsets):
        t = centuries_since_j2000(d0 + timedelta(days=int(k)))
        eot[i] = equation_of_time_minutes(t)
        decl[i] = sun_declination(t).deg()
    return offsets, eot, decl


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Equation of time and declination over a range of years.")
    p.add_argument("--year-start", type=int, default=2024)
    p.add_argument("--year-end", type=int, default=2024)
    p.add_argument("--step-days", type=int, default=1)
    p.add_argument("--out-png", default=None, help="write an analemma-style plot (needs matplotlib)")
    args = p.parse_args(argv)

    if args.year_end < args.year_start:
        raise ValueError("year-end must not be before year-start")

    np = _need_numpy()
    days, eot, decl = eot_series(args.year_start, args.year_end, args.step_days)

    i_min = int(np.argmin(eot))
    i_max = int(np.argmax(eot))
    d0 = date(args.year_start, 1, 1)
    print(f"Equation of time {args.year_start}..{args.year_end} ({len(days)} samples)")
    print(f"  min = {eot[i_min]:+8.3f} min  on {d0 + timedelta(days=int(days[i_min]))}")
    print(f"  max = {eot[i_max]:+8.3f} min  on {d0 + timedelta(days=int(days[i_max]))}")
    print(f"  rms = {float(np.sqrt(np.mean(eot ** 2))):8.3f} min")
    print(f"Declination range: {decl.min():+.3f} .. {decl.max():+.3f} deg")

    if args.out_png:
        plt = _need_matplotlib()
        fig, (ax0, ax1) = plt.subplots(1, 2, figsize=(11, 4.5))
        ax0.plot(days, eot, lw=1.0)
        ax0.axhline(0.0, color="k", lw=0.5)
        ax0.set_xlabel(f"days since {d0}")
        ax0.set_ylabel("equation of time [min]")
        ax1.plot(eot, decl, lw=1.0)
        ax1.set_xlabel("equation of time [min]")
        ax1.set_ylabel("declination [deg]")
        ax1.set_title("analemma")
        fig.tight_layout()
        fig.savefig(args.out_png, dpi=120)
        print(f"Wrote {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
