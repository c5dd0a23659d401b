#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from mmcal.core.types import CalendarType
from mmcal.engines.clock import jd_to_western, western_to_jd
from mmcal.engines.thingyan import festival_window


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "mmcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "mmcal[diagnostics]"') from e


def day_of_year(jdn: int) -> int:
    """Proleptic Gregorian day of year, Jan 1 = 1."""
    w = jd_to_western(jdn, CalendarType.GREGORIAN)
    jan1 = western_to_jd(w.year, 1, 1, 12, 0, 0, CalendarType.GREGORIAN)
    return int(jdn - jan1) + 1


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, my in enumerate(years):
        y[i] = float(day_of_year(festival_window(int(my)).new_year_day))
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Myanmar New Year day across years.")
    p.add_argument("--start-year", type=int, default=1100, help="first Myanmar year (ME)")
    p.add_argument("--end-year", type=int, default=1500, help="last Myanmar year (ME)")
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="new_year_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.start_year, args.end_year)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Myanmar year (ME)")
    ax.set_ylabel("Gregorian day-of-year (Jan 1 = 1)")
    ax.set_title("Myanmar New Year Day")

    ax.scatter(x, y, s=12, marker="o", c="tab:blue", linewidths=0.0, alpha=0.5, label="New Year Day")
    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="tab:blue", linewidth=1.8)

    ax.legend(loc="upper left", frameon=False)
    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
