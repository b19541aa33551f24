from __future__ import annotations

import argparse
import random
from typing import List

import calhijri
from calhijri.core.types import HijriDate
from calhijri.profiles import default_profile, with_offset


def parse_offsets(s: str) -> List[int]:
    # "-2,-1,0" -> [-2, -1, 0]
    return [int(x) for x in s.split(",") if x.strip()]


def random_hijri(rng: random.Random) -> HijriDate:
    """A random day strictly inside the table (first and last months excluded)."""
    months = calhijri.get_engine().index.table.months
    rec = months[rng.randint(1, len(months) - 2)]
    return HijriDate(rec.h_year, rec.h_month, rng.randint(1, rec.days))


def roundtrip_test(offset: int, N: int, seed: int, *, max_failures: int) -> int:
    rng = random.Random(seed)
    profile = with_offset(default_profile(), offset)
    failures = 0

    for _ in range(N):
        h0 = random_hijri(rng)
        g = calhijri.hijri_to_gregorian(h0, profile)
        h1 = calhijri.gregorian_to_hijri(g, profile)
        if h1 != h0:
            failures += 1
            print("\nFAIL")
            print("offset:", offset)
            print("hijri:", h0)
            print("gregorian:", g)
            print("back:", h1)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: hijri -> gregorian -> hijri.")
    p.add_argument("--offsets", type=str, default="-2,-1,0,1,2", help="Comma-separated profile offsets.")
    p.add_argument("--N", type=int, default=2000, help="Trials per offset.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per offset.")
    args = p.parse_args(argv)

    total = 0
    for off in parse_offsets(args.offsets):
        f = roundtrip_test(off, args.N, args.seed, max_failures=args.max_failures)
        print(f"offset {off:+d}: {args.N} trials, {f} failures")
        total += f

    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
