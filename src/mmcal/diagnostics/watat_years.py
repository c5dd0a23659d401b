#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Tuple

from mmcal.core.types import YearType
from mmcal.engines.watat import year_info


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


@dataclass(frozen=True)
class Style:
    label: str
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"


STYLES = {
    YearType.LITTLE_WATAT: Style("Little watat", marker="o", size=40, hollow=True),
    YearType.BIG_WATAT: Style("Big watat", marker="o", size=40, hollow=False),
}


def build_points(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """(year, position in the 19-year cycle, year type) of every watat year in range."""
    xs, ys, ts = [], [], []
    for my in range(start_year, end_year + 1):
        yo = year_info(my)
        if yo.year_type != YearType.COMMON:
            xs.append(my)
            ys.append(my % 19)
            ts.append(int(yo.year_type))
    return np.array(xs, dtype=int), np.array(ys, dtype=int), np.array(ts, dtype=int)


def discrepancy_years(start_year: int, end_year: int) -> List[int]:
    return [my for my in range(start_year, end_year + 1) if year_info(my).discrepancy]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Watat year barcode: position of every watat year in the 19-year cycle.")
    p.add_argument("--start-year", type=int, default=1300, help="first Myanmar year (ME)")
    p.add_argument("--end-year", type=int, default=1400, help="last Myanmar year (ME)")
    p.add_argument("--out", default="watat_years.png")
    p.add_argument("--title", default="Watat years of the Myanmar calendar")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y, t = build_points(np, start_year, end_year)

    fig, ax = plt.subplots(figsize=(16, 3.6))
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(-0.5, 18.5)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Myanmar year (ME)")
    ax.set_ylabel("ME mod 19")

    for yt, st in STYLES.items():
        sel = t == int(yt)
        if st.hollow:
            ax.scatter(x[sel], y[sel], s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=1.2, label=st.label, zorder=5)
        else:
            ax.scatter(x[sel], y[sel], s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, label=st.label, zorder=5)

    bad = discrepancy_years(start_year, end_year)
    if bad:
        ax.scatter(bad, [my % 19 for my in bad], s=120, marker="x", c="tab:red",
                   label="Full-moon discrepancy", zorder=6)

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}  ({len(x)} watat years, {len(bad)} discrepancies)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
