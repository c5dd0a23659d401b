from __future__ import annotations

import argparse
import random
from typing import List

import mmcal
from mmcal.core.types import CalendarType


def parse_calendars(s: str) -> List[CalendarType]:
    # "british,gregorian" -> [CalendarType.BRITISH, ...]
    out = []
    for x in s.split(","):
        x = x.strip()
        if x:
            try:
                out.append(CalendarType[x.upper()])
            except KeyError:
                raise SystemExit(f"Unknown calendar '{x}'. Known: british, gregorian, julian")
    return out


def myanmar_roundtrip(N: int, start: int, end: int, seed: int, *, max_failures: int) -> int:
    """Random JDN -> Myanmar date -> JDN."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        jdn = random.randint(start, end)
        t = mmcal.julian_to_myanmar(jdn)
        back = mmcal.myanmar_to_julian(t.year, t.month, t.day)
        if back != jdn:
            failures += 1
            print("\nFAIL (myanmar)")
            print("jdn:", jdn)
            print("myanmar:", t)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def western_roundtrip(ct: CalendarType, N: int, start: int, end: int, seed: int, *, max_failures: int) -> int:
    """Random JD -> Western date-time -> JD, to the millisecond."""
    random.seed(seed)
    config = mmcal.DEFAULT_CLOCK.with_calendar(ct)
    failures = 0

    for _ in range(N):
        jd = random.randint(start, end) + random.random() - 0.5
        w = mmcal.julian_to_western(jd, config=config)
        back = mmcal.western_to_julian(*w.as_tuple(), config=config)
        if abs(back - jd) * 86400.0 > 1e-3:
            failures += 1
            print(f"\nFAIL (western, {ct.name.lower()})")
            print("jd:", jd)
            print("western:", w)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JDN -> Myanmar/Western -> JDN.")
    p.add_argument("--calendars", type=str, default="british,gregorian,julian",
                   help="Comma-separated Western calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=int, default=2086308, help="First JDN (default: about 1000 CE).")
    p.add_argument("--end", type=int, default=2634166, help="Last JDN (default: 2500-01-01).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per check.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    print("Testing myanmar ...")
    total_fail = myanmar_roundtrip(args.N, args.start, args.end, args.seed, max_failures=args.max_failures)
    for ct in parse_calendars(args.calendars):
        print(f"Testing {ct.name.lower()} ...")
        total_fail += western_roundtrip(ct, args.N, args.start, args.end, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
