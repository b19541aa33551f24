from __future__ import annotations

import argparse
import logging
import sys
import re
import importlib
import inspect
from typing import Optional

from calhijri.core.errors import CalhijriError
from calhijri.core.time import parse_iso_date, parse_ymd_triple
from calhijri.core.types import METHODS, CountryProfile, HijriDate

log = logging.getLogger("calhijri.cli")

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


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
        format="%(asctime)s  [%(levelname)s]  %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _profile_tag(p: CountryProfile) -> str:
    return f"[{p.country} {p.method} {p.offset:+d}]"


def _fmt_hijri(h: HijriDate) -> str:
    return f"{h}  ({h.day} {h.month_name} {h.year} AH)"


def _country_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("--country", default=None, help="Country profile code (default: SA)")


def cmd_g2h(argv: list[str]) -> int:
    import calhijri

    p = argparse.ArgumentParser(prog="calhijri g2h", description="Gregorian -> Hijri")
    p.add_argument("date", help="YYYY-MM-DD")
    _country_arg(p)
    args = p.parse_args(argv)

    try:
        d = parse_iso_date(args.date)
    except ValueError as e:
        raise SystemExit(str(e))
    profile = calhijri.resolve_profile(args.country)
    h = calhijri.gregorian_to_hijri(d, profile)
    print(f"{_fmt_hijri(h)}  {_profile_tag(profile)}")
    return 0


def cmd_h2g(argv: list[str]) -> int:
    import calhijri

    p = argparse.ArgumentParser(prog="calhijri h2g", description="Hijri -> Gregorian")
    p.add_argument("date", help="Y-M-D (Hijri), e.g. 1447-09-01")
    _country_arg(p)
    args = p.parse_args(argv)

    try:
        y, m, d = parse_ymd_triple(args.date)
    except ValueError as e:
        raise SystemExit(str(e))
    profile = calhijri.resolve_profile(args.country)
    g = calhijri.hijri_to_gregorian(HijriDate(y, m, d), profile)
    print(f"{g}  {g.to_date().strftime('%A')}  {_profile_tag(profile)}")
    return 0


def cmd_today(argv: list[str]) -> int:
    import calhijri

    p = argparse.ArgumentParser(prog="calhijri today", description="Today's Hijri date")
    _country_arg(p)
    args = p.parse_args(argv)

    profile = calhijri.resolve_profile(args.country)
    h = calhijri.today_hijri(profile)
    print(f"{_fmt_hijri(h)}  {_profile_tag(profile)}")
    return 0


def cmd_range(argv: list[str]) -> int:
    import calhijri

    argparse.ArgumentParser(prog="calhijri range", description="Supported conversion range").parse_args(argv)
    info = calhijri.table_info()
    r = info["supported"]
    print(f"source    : {info['source']}")
    print(f"hijri     : {r['hijri']['min']} .. {r['hijri']['max']} AH")
    print(f"gregorian : {r['gregorian']['min']} .. {r['gregorian']['max']}")
    print(f"months    : {info['months']}")
    return 0


def cmd_profiles(argv: list[str]) -> int:
    from calhijri import profiles

    p = argparse.ArgumentParser(prog="calhijri profiles", description="List country profiles")
    p.add_argument("--method", choices=METHODS, default=None)
    args = p.parse_args(argv)

    rows = profiles.profiles_by_method(args.method) if args.method else profiles.all_profiles()
    for prof in sorted(rows, key=lambda x: x.country):
        print(f"{prof.country}  {prof.method:<22} {prof.offset:+d}  {prof.timezone:<20} {prof.display_name.en}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `calhijri YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["g2h"] + argv

    p = argparse.ArgumentParser(prog="calhijri", description="Hijri (Umm al-Qura) calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("g2h", help="Gregorian -> Hijri")
    sub.add_parser("h2g", help="Hijri -> Gregorian")
    sub.add_parser("today", help="Today's Hijri date")
    sub.add_parser("range", help="Supported conversion range")
    sub.add_parser("profiles", help="List country profiles")

    p_month = sub.add_parser("month", help="Print a Hijri month calendar")
    p_month.add_argument("year", type=int)
    p_month.add_argument("month", type=int)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "month-lengths", "check-table"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    commands = {
        "g2h": cmd_g2h,
        "h2g": cmd_h2g,
        "today": cmd_today,
        "range": cmd_range,
        "profiles": cmd_profiles,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "month":
            return _run_module_main(
                "calhijri.diagnostics.pretty_month",
                ["--hijri", str(args.year), str(args.month)] + rest,
            )

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "calhijri.diagnostics.round_trip",
                "month-lengths": "calhijri.diagnostics.month_lengths",
                "check-table": "calhijri.diagnostics.check_table",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CalhijriError as e:
        log.debug("conversion failed", exc_info=True)
        print(f"error ({e.code}): {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
