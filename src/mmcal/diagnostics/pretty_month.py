from __future__ import annotations

import argparse

import mmcal
from mmcal.engines.clock import western_month_length
from mmcal.engines.myanmar import MONTH_NAMES, month_length, month_name


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def column(jdn: int) -> int:
    """Grid column of a day, Sunday first."""
    return (mmcal.day_info(jdn).weekday + 6) % 7


def print_grid(title: str, first_jdn: int, days: list[tuple[str, str]]) -> None:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(column(first_jdn))]
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for row in weeks:
        print(" ".join(c[0] for c in row))
        print(" ".join(c[1] for c in row))
    print()


def myanmar_month_calendar(my: int, mm: int) -> None:
    first = mmcal.myanmar_to_julian(my, mm, 1)
    myt = int(mmcal.julian_to_myanmar(first).year_type)
    n = month_length(mm, myt)

    days = []
    for i in range(n):
        info = mmcal.day_info(first + i, attributes=("holidays",))
        w = info.western
        mark = "*" if info.attributes["holidays"] else ""
        days.append((f"{i + 1:2d}{mark}", f"{w.month:02d}-{w.day:02d}"))

    last = mmcal.julian_to_western(first + n - 1)
    d0 = mmcal.julian_to_western(first)
    title = (
        f"ME {my} {month_name(mm, myt)}   "
        f"({d0.year}-{d0.month:02d}-{d0.day:02d} .. {last.year}-{last.month:02d}-{last.day:02d})"
    )
    print_grid(title, first, days)


def western_month_calendar(gy: int, gm: int) -> None:
    first = round(mmcal.western_to_julian(gy, gm, 1))
    n = western_month_length(gy, gm)

    days = []
    for i in range(n):
        info = mmcal.day_info(first + i)
        w, t = info.western, info.myanmar
        bot = f"{t.month:02d}-{t.day:02d}"
        days.append((f"{w.day:2d}", bot))

    print_grid(f"Western month  {gy}-{gm:02d}  (Myanmar month-day below)", first, days)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Myanmar-month calendar and/or a Western-month calendar with paired labels."
    )
    p.add_argument("--myanmar", nargs=2, type=int, metavar=("MY", "MM"),
                   help=f"Myanmar month to print: MY MM (0..14, e.g. 1386 1 for {MONTH_NAMES[1]})")
    p.add_argument("--western", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Western month to print: GY GM (e.g. 2024 4)")
    args = p.parse_args(argv)

    if not args.myanmar and not args.western:
        myanmar_month_calendar(1386, 1)
        western_month_calendar(2024, 4)
        return 0

    if args.myanmar:
        my, mm = args.myanmar
        try:
            mmcal.myanmar_to_julian(my, mm, 1, strict=True)
        except mmcal.InvalidDateError as e:
            raise SystemExit(f"ME {my} month {mm}: {e}")
        myanmar_month_calendar(my, mm)

    if args.western:
        gy, gm = args.western
        western_month_calendar(gy, gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
