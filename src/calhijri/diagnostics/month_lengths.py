#!/usr/bin/env python3
"""
Month-length statistics of the reference table.

- year lengths (354/355 days) per Hijri year
- drift of each month start against a uniform mean-synodic-month grid
"""
from __future__ import annotations

from typing import Any, List, Optional, Tuple

import argparse

from calhijri.core.types import ReferenceTable
from calhijri.reference.ummalqura import load_table, read_table_file

SYNODIC_MONTH_DAYS = 29.530588861


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calhijri[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calhijri[diagnostics]"') from e


def year_lengths(np, table: ReferenceTable) -> Tuple[Any, Any]:
    """(years, days-in-year) for every Hijri year fully covered by the table."""
    years = np.array([r.h_year for r in table.months], dtype=int)
    days = np.array([r.days for r in table.months], dtype=int)
    out_y: List[int] = []
    out_d: List[int] = []
    for Y in np.unique(years):
        mask = years == Y
        if int(mask.sum()) == 12:
            out_y.append(int(Y))
            out_d.append(int(days[mask].sum()))
    return np.array(out_y, dtype=int), np.array(out_d, dtype=int)


def start_drift(np, table: ReferenceTable) -> Tuple[Any, Any]:
    """
    Residual (days) of each month start against the least-squares line
    start = a + b * index. Returns (residuals, slope b).
    """
    idx = np.arange(len(table.months), dtype=float)
    starts = np.array([r.g_start.toordinal() for r in table.months], dtype=float)
    b, a = np.polyfit(idx, starts, 1)
    return starts - (a + b * idx), float(b)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Month-length and drift statistics of the Umm al-Qura table.")
    p.add_argument("--table", default=None, help="JSON table (default: the table in use)")
    p.add_argument("--plot", default="", help="Output base name; writes <base>.png when given")
    args = p.parse_args(argv)

    np = _need_numpy()
    table = read_table_file(args.table) if args.table else load_table()

    years, ylen = year_lengths(np, table)
    resid, slope = start_drift(np, table)
    days = np.array([r.days for r in table.months], dtype=float)

    print(f"months          : {len(table.months)}")
    print(f"mean month      : {days.mean():.6f} days (synodic {SYNODIC_MONTH_DAYS:.6f})")
    print(f"fitted month    : {slope:.6f} days")
    print(f"start residuals : min {resid.min():+.3f}  max {resid.max():+.3f}  std {resid.std():.3f} days")
    if len(years):
        n355 = int((ylen == 355).sum())
        print(f"full years      : {len(years)} ({years[0]}..{years[-1]}), {n355} of 355 days")

    if args.plot:
        plt = _need_matplotlib()
        fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(9.2, 6.4), constrained_layout=True)

        ax0.set_title("Umm al-Qura year lengths")
        ax0.bar(years, ylen - 354, color="tab:blue")
        ax0.set_ylabel("days - 354")
        ax0.set_xlabel("Hijri year")

        ax1.set_title("Month start vs. uniform lunation grid")
        ax1.plot(np.arange(len(resid)), resid, color="0.30", linewidth=0.9)
        ax1.set_ylabel("residual (days)")
        ax1.set_xlabel("month index")
        ax1.grid(True, color="0.88", linewidth=0.7)

        fig.savefig(f"{args.plot}.png", dpi=150)
        print(f"wrote {args.plot}.png")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
