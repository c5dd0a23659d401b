from __future__ import annotations

import argparse
from typing import List, Optional

import mmcal
from mmcal.core.types import WesternDateTime


def mmdd(w: WesternDateTime) -> str:
    return f"{w.month:02d}-{w.day:02d}"


def iso(w: WesternDateTime) -> str:
    return f"{w.year:04d}-{w.month:02d}-{w.day:02d}"


def hhmm(w: WesternDateTime) -> str:
    return f"{w.hour:02d}:{w.minute:02d}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a table of Thingyan akya/atat moments (Myanmar time) and New Year days.")
    p.add_argument("--from-year", type=int, default=1380, help="first Myanmar year (ME)")
    p.add_argument("--to-year", type=int, default=1400, help="last Myanmar year (ME)")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format in table columns (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    fmt = mmdd if args.dates == "mmdd" else iso
    headers = ["ME", "Akyo", "Akya", "at", "Atat", "at", "Days", "New Year"]
    colw = [5, 10, 10, 5, 10, 5, 4, 10]
    print("  ".join(h.ljust(w) for h, w in zip(headers, colw)))
    print("  ".join("-" * w for w in colw))

    for my in range(Y0, Y1 + 1):
        t = mmcal.festival_window(my)
        akya_t = t.western("akya_time")
        atat_t = t.western("atat_time")
        days = t.atat_day - t.akya_day + 1
        row = [
            str(my),
            fmt(t.western("akyo_day")),
            fmt(t.western("akya_day")),
            hhmm(akya_t),
            fmt(t.western("atat_day")),
            hhmm(atat_t),
            str(days),
            fmt(t.western("new_year_day")),
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
