from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    y, m, d = map(int, s.split("-"))
    return y, m, d


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


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_day(argv: list[str]) -> int:
    import mmcal

    p = argparse.ArgumentParser(prog="mmcal day", description="Western date -> Myanmar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--tz", type=float, default=mmcal.MYANMAR_CLOCK.tz_offset, help="timezone offset in hours (default: 6.5)")
    p.add_argument("--strict", action="store_true", help="reject dates that do not exist")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    config = mmcal.DEFAULT_CLOCK.with_timezone(args.tz)
    y, m, d = _parse_ymd(args.date)
    try:
        t = mmcal.MyanmarDateTime.from_western(y, m, d, config=config, strict=args.strict)
    except mmcal.InvalidDateError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    info = mmcal.day_info(t.jdnl, attributes=tuple(args.attr), config=config)
    print(t.to_string("%Www %y-%mm-%dd"), "|", t.to_myanmar_string("&y &M &P &f"))
    print(info)
    return 0


def cmd_thingyan(argv: list[str]) -> int:
    import mmcal

    p = argparse.ArgumentParser(prog="mmcal thingyan", description="Thingyan festival days leading into a Myanmar year")
    p.add_argument("year", type=int, help="Myanmar year (ME) of the new year")
    args = p.parse_args(argv)

    w = mmcal.festival_window(args.year)

    def day(jdn: int | None) -> str:
        if jdn is None:
            return "-"
        return mmcal.format_western(jdn, "%Www %y-%mm-%dd")

    def moment(jd: float) -> str:
        # Myanmar local time already
        return mmcal.format_western(jd, "%Www %y-%mm-%dd %HH:%nn:%ss")

    print(f"Thingyan ME {w.year_from} -> {w.year_to}")
    print(f"  Akyo          {day(w.akyo_day)}")
    print(f"  Akya          {day(w.akya_day)}   (akya time {moment(w.akya_time)})")
    print(f"  Akyat         {day(w.akyat_day)}")
    print(f"  Akyat (2nd)   {day(w.akyat_day2)}")
    print(f"  Atat          {day(w.atat_day)}   (atat time {moment(w.atat_time)})")
    print(f"  New Year Day  {day(w.new_year_day)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    verbose = False
    for flag in ("-v", "--verbose"):
        while flag in argv:
            argv.remove(flag)
            verbose = True
    _setup_logging(verbose)

    # Convenience: `mmcal YYYY-MM-DD` behaves like `mmcal day YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="mmcal", description="Myanmar calendar tools (flags -v/--verbose enable debug logging)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_day = sub.add_parser("day", help="Western date -> Myanmar day label")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    p_tg = sub.add_parser("thingyan", help="Thingyan festival days for a Myanmar year")
    p_tg.add_argument("year", help="Myanmar year (ME)")

    sub.add_parser("month", help="Print Myanmar/Western month calendars (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["thingyan-table", "watat-years", "round-trip", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        day_argv = [args.date]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "thingyan":
        return cmd_thingyan([args.year] + rest)

    if args.cmd == "month":
        return _run_module_main("mmcal.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "thingyan-table": "mmcal.diagnostics.thingyan_table",
            "watat-years": "mmcal.diagnostics.watat_years",
            "round-trip": "mmcal.diagnostics.round_trip",
            "new-year-scatter": "mmcal.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
