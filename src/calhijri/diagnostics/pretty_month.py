from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse
from typing import Optional

import calhijri
from calhijri.core.time import weekday_sunday_first
from calhijri.core.types import MONTH_NAMES


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def hijri_month_calendar(Y: int, M: int, country: Optional[str], today: Optional[date] = None) -> None:
    grid = calhijri.month_grid(Y, M, country, today=today)

    weeks: list[list[tuple[str, str]]] = []
    for wk in grid.weeks():
        row = []
        for c in wk:
            if not c.in_month:
                row.append(cell("", ""))
                continue
            mark = "*" if c.is_today else ""
            row.append(cell(f"{c.hijri.day:2d}{mark}", f"{c.gregorian.month:02d}-{c.gregorian.day:02d}"))
        weeks.append(row)

    first = grid.first_gregorian
    p = grid.profile
    title = f"{MONTH_NAMES[M - 1]} {Y} AH  [{p.country} {p.method} {p.offset:+d}]  ({grid.days} days from {first})"
    print_grid(title, weeks)


def gregorian_month_calendar(gy: int, gm: int, country: Optional[str]) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(weekday_sunday_first(first))]
    d = first
    while d <= last:
        if calhijri.is_valid_gregorian_date(d):
            h = calhijri.gregorian_to_hijri(d, country)
            bot = f"{h.month:02d}-{h.day:02d}"
        else:
            bot = "--"
        wk.append(cell(f"{d.day:2d}", bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d += timedelta(days=1)
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    print_grid(f"Gregorian month  {gy}-{gm:02d}", weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Hijri-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--country", default=None, help="Country profile code (default: SA)")
    p.add_argument("--hijri", nargs=2, type=int, metavar=("Y", "M"),
                   help="Hijri month to print: Y M (e.g. 1447 9)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 2)")
    args = p.parse_args(argv)

    if not args.hijri and not args.greg:
        h = calhijri.today_hijri(args.country)
        hijri_month_calendar(h.year, h.month, args.country)
        return 0

    if args.hijri:
        Y, M = args.hijri
        hijri_month_calendar(Y, M, args.country)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm, args.country)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
