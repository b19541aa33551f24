from __future__ import annotations

import argparse
from collections import Counter

from calhijri.core.errors import TableValidationError
from calhijri.core.types import ReferenceTable
from calhijri.reference.ummalqura import load_table, read_table_file


def summarize(table: ReferenceTable) -> None:
    meta = table.metadata
    first, last = table.months[0], table.months[-1]
    lengths = Counter(r.days for r in table.months)

    print(f"source       : {meta.source}")
    print(f"range        : {meta.range}")
    print(f"last updated : {meta.last_updated.isoformat()}")
    print(f"description  : {meta.description}")
    print()
    print(f"months       : {len(table.months)}")
    print(f"hijri        : {first.h_year}/{first.h_month:02d} .. {last.h_year}/{last.h_month:02d}")
    print(f"gregorian    : {first.g_start.isoformat()} .. {last.g_end.isoformat()}")
    print(f"29-day months: {lengths[29]}")
    print(f"30-day months: {lengths[30]}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Validate an Umm al-Qura table file and print a summary.")
    p.add_argument("path", nargs="?", default=None, help="JSON table (default: the table in use)")
    args = p.parse_args(argv)

    try:
        table = read_table_file(args.path) if args.path else load_table()
    except TableValidationError as e:
        print(f"INVALID: {e}")
        return 1

    summarize(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
