"""
calhijri.reference.ummalqura

The Umm al-Qura reference table: Gregorian start date and day count of every
Hijri month in the supported range.

Loading
-------
The table is parsed and validated once per process and shared read-only
afterwards. Source resolution order:
  1) CALHIJRI_TABLE environment variable (path to a JSON table)
  2) packaged data (calhijri/reference/data/umm_al_qura.json)

Validation is all-or-nothing: a single malformed record rejects the table with
TableValidationError. A broken override is never replaced by the packaged
table.

Expected JSON layout::

    {"metadata": {"source": ..., "range": ..., "lastUpdated": "YYYY-MM-DD", "description": ...},
     "months": [{"h_year": 1447, "h_month": 1, "g_start": "2025-06-26", "days": 30}, ...]}
"""

from __future__ import annotations

import importlib.resources
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, List, Mapping, Optional

from ..core.errors import TableValidationError
from ..core.time import parse_iso_date
from ..core.types import HijriMonthRecord, ReferenceTable, TableMetadata
from ..core.validation import HIJRI_YEAR_MAX, HIJRI_YEAR_MIN

log = logging.getLogger(__name__)

TABLE_ENV_VAR = "CALHIJRI_TABLE"
PACKAGED_TABLE = "umm_al_qura.json"
MONTH_DAYS = (29, 30)


# ---------------------------------------------------------------------------
# Parsing / validation
# ---------------------------------------------------------------------------

def _int_field(rec: Mapping[str, Any], name: str, where: str) -> int:
    if name not in rec:
        raise TableValidationError(f"{where}: missing '{name}'")
    v = rec[name]
    if isinstance(v, bool) or not isinstance(v, int):
        raise TableValidationError(f"{where}: '{name}' must be an int, got {v!r}")
    return v


def _str_field(obj: Mapping[str, Any], name: str, where: str) -> str:
    v = obj.get(name)
    if not isinstance(v, str) or not v.strip():
        raise TableValidationError(f"{where}: '{name}' must be a non-empty string")
    return v


def _parse_metadata(raw: Any) -> TableMetadata:
    if not isinstance(raw, Mapping):
        raise TableValidationError("metadata must be an object")
    last = _str_field(raw, "lastUpdated", "metadata")
    try:
        last_updated = parse_iso_date(last)
    except ValueError as e:
        raise TableValidationError(f"metadata: lastUpdated is not an ISO date: {last!r}") from e
    return TableMetadata(
        source=_str_field(raw, "source", "metadata"),
        range=_str_field(raw, "range", "metadata"),
        last_updated=last_updated,
        description=_str_field(raw, "description", "metadata"),
    )


def _parse_month(raw: Any, i: int) -> HijriMonthRecord:
    where = f"months[{i}]"
    if not isinstance(raw, Mapping):
        raise TableValidationError(f"{where}: record must be an object")

    y = _int_field(raw, "h_year", where)
    m = _int_field(raw, "h_month", where)
    days = _int_field(raw, "days", where)
    if not (HIJRI_YEAR_MIN <= y <= HIJRI_YEAR_MAX):
        raise TableValidationError(f"{where}: h_year {y} outside {HIJRI_YEAR_MIN}..{HIJRI_YEAR_MAX}")
    if not (1 <= m <= 12):
        raise TableValidationError(f"{where}: h_month {m} outside 1..12")
    if days not in MONTH_DAYS:
        raise TableValidationError(f"{where}: days must be 29 or 30, got {days}")

    g = raw.get("g_start")
    try:
        g_start = parse_iso_date(g)
    except ValueError as e:
        raise TableValidationError(f"{where}: g_start is not an ISO date: {g!r}") from e

    return HijriMonthRecord(h_year=y, h_month=m, g_start=g_start, days=days)


def _check_order(months: List[HijriMonthRecord]) -> None:
    """Both orderings must agree and the spans must tile the timeline."""
    for i in range(1, len(months)):
        prev, cur = months[i - 1], months[i]
        if cur.key != prev.key + 1:
            raise TableValidationError(
                f"months[{i}]: {cur.h_year}/{cur.h_month} does not follow {prev.h_year}/{prev.h_month}"
            )
        expected = prev.g_end.toordinal() + 1
        if cur.g_start.toordinal() != expected:
            kind = "gap" if cur.g_start.toordinal() > expected else "overlap"
            raise TableValidationError(
                f"months[{i}]: {kind} between {prev.g_end.isoformat()} and {cur.g_start.isoformat()}"
            )


def parse_table(raw: Any) -> ReferenceTable:
    """Validate a decoded JSON table and build the immutable ReferenceTable."""
    if not isinstance(raw, Mapping):
        raise TableValidationError("table must be an object with 'metadata' and 'months'")
    metadata = _parse_metadata(raw.get("metadata"))

    rows = raw.get("months")
    if not isinstance(rows, list) or not rows:
        raise TableValidationError("months must be a non-empty list")

    months = [_parse_month(r, i) for i, r in enumerate(rows)]
    _check_order(months)
    return ReferenceTable(metadata=metadata, months=tuple(months))


def read_table_file(path: str | os.PathLike[str]) -> ReferenceTable:
    """Read and validate a table file. Not cached."""
    p = Path(path).expanduser()
    try:
        with p.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise TableValidationError(f"{p}: not valid JSON ({e})") from e
    except OSError as e:
        raise TableValidationError(f"{p}: cannot read ({e})") from e
    return parse_table(raw)


def _read_packaged() -> ReferenceTable:
    path = importlib.resources.files("calhijri.reference").joinpath("data").joinpath(PACKAGED_TABLE)
    with path.open("r", encoding="utf-8") as f:
        return parse_table(json.load(f))


# ---------------------------------------------------------------------------
# Process-wide cache
# ---------------------------------------------------------------------------

_TABLE: Optional[ReferenceTable] = None
_LOCK = threading.Lock()


def _resolve() -> ReferenceTable:
    override = os.environ.get(TABLE_ENV_VAR, "").strip()
    if override:
        log.debug("loading Umm al-Qura table from %s=%s", TABLE_ENV_VAR, override)
        return read_table_file(override)
    log.debug("loading packaged Umm al-Qura table")
    return _read_packaged()


def load_table() -> ReferenceTable:
    """
    The validated reference table, parsed on first use and shared thereafter.

    Concurrent first callers block on a lock so that exactly one validation
    pass runs and everyone receives the same instance.
    """
    global _TABLE
    table = _TABLE
    if table is not None:
        return table
    with _LOCK:
        if _TABLE is None:
            table = _resolve()
            first, last = table.months[0], table.months[-1]
            log.info(
                "Umm al-Qura table loaded: %d months, %d/%d .. %d/%d AH (%s .. %s)",
                len(table.months),
                first.h_year, first.h_month, last.h_year, last.h_month,
                first.g_start.isoformat(), last.g_end.isoformat(),
            )
            _TABLE = table
        return _TABLE
