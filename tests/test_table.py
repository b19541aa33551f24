# tests/test_table.py

import json
import threading
import time
from datetime import date

import pytest

from calhijri.core.errors import DataIntegrityError, TableValidationError
from calhijri.reference import ummalqura
from calhijri.reference.ummalqura import TABLE_ENV_VAR, load_table, parse_table, read_table_file


def test_packaged_table_shape():
    t = load_table()
    assert len(t) == 936
    assert t.metadata.range == "1423-1500 AH"
    assert t.metadata.last_updated == date(2026, 10, 19)

    first, last = t.months[0], t.months[-1]
    assert (first.h_year, first.h_month, first.g_start, first.days) == (1423, 1, date(2002, 3, 15), 30)
    assert (last.h_year, last.h_month, last.g_start, last.days) == (1500, 12, date(2077, 10, 18), 30)
    assert last.g_end == date(2077, 11, 16)


def test_packaged_table_is_contiguous():
    months = load_table().months
    for prev, cur in zip(months, months[1:]):
        assert cur.key == prev.key + 1
        assert (cur.g_start - prev.g_end).days == 1
    assert {r.days for r in months} == {29, 30}
    assert sum(1 for r in months if r.days == 30) == 497


def test_known_month_starts():
    by_key = {(r.h_year, r.h_month): r for r in load_table().months}
    # 1 Muharram, 1 Ramadan and 1 Shawwal of recent years
    assert by_key[(1445, 1)].g_start == date(2023, 7, 19)
    assert by_key[(1445, 9)].g_start == date(2024, 3, 11)
    assert by_key[(1445, 10)].g_start == date(2024, 4, 10)
    assert by_key[(1446, 9)].g_start == date(2025, 3, 1)
    assert by_key[(1447, 1)].g_start == date(2025, 6, 26)
    assert by_key[(1447, 1)].days == 30
    assert by_key[(1447, 9)].g_start == date(2026, 2, 18)


def test_mid_year_month_starts():
    by_key = {(r.h_year, r.h_month): r for r in load_table().months}
    # (year, month): (first day, day count)
    pinned = {
        (1427, 5): (date(2006, 5, 28), 30),
        (1427, 6): (date(2006, 6, 27), 29),
        (1446, 5): (date(2024, 11, 3), 29),
        (1446, 6): (date(2024, 12, 2), 30),
        (1451, 12): (date(2030, 4, 4), 29),
        (1452, 1): (date(2030, 5, 3), 30),
        (1485, 9): (date(2063, 1, 1), 29),
        (1485, 10): (date(2063, 1, 30), 30),
    }
    for key, (start, days) in pinned.items():
        assert (by_key[key].g_start, by_key[key].days) == (start, days), key


def test_matches_published_umm_al_qura():
    hijridate = pytest.importorskip("hijridate")
    for r in load_table().months:
        h = hijridate.Hijri(r.h_year, r.h_month, 1)
        assert date(*h.to_gregorian().datetuple()) == r.g_start, (r.h_year, r.h_month)
        assert h.month_length() == r.days, (r.h_year, r.h_month)


def test_load_table_is_memoized():
    assert load_table() is load_table()


def test_parse_small_table(small_raw):
    t = parse_table(small_raw)
    assert len(t) == 3
    assert t.metadata.source == "test"
    assert t.months[1].g_start == date(2025, 7, 26)
    assert t.months[2].g_end == date(2025, 9, 22)


def _set(raw, i, **kw):
    raw["months"][i].update(kw)
    return raw


@pytest.mark.parametrize(
    "mutate, fragment",
    [
        (lambda r: _set(r, 0, h_year=1299), "h_year"),
        (lambda r: _set(r, 0, h_year=1501), "h_year"),
        (lambda r: _set(r, 0, h_year=True), "h_year"),
        (lambda r: _set(r, 1, h_month=13), "h_month"),
        (lambda r: _set(r, 1, h_month=0), "h_month"),
        (lambda r: _set(r, 2, days=31), "days"),
        (lambda r: _set(r, 2, days=28), "days"),
        (lambda r: _set(r, 2, days="30"), "days"),
        (lambda r: _set(r, 1, g_start="2025-7-26"), "g_start"),
        (lambda r: _set(r, 1, g_start="2025-02-30"), "g_start"),
        (lambda r: _set(r, 1, g_start=None), "g_start"),
        (lambda r: _set(r, 1, g_start="2025-07-27"), "gap"),
        (lambda r: _set(r, 1, g_start="2025-07-25"), "overlap"),
        (lambda r: _set(r, 1, h_month=3), "does not follow"),
    ],
)
def test_parse_table_rejects_bad_records(small_raw, mutate, fragment):
    with pytest.raises(TableValidationError, match=fragment):
        parse_table(mutate(small_raw))


def test_parse_table_rejects_structure(small_raw):
    with pytest.raises(TableValidationError):
        parse_table([])

    raw = dict(small_raw, months=[])
    with pytest.raises(TableValidationError, match="non-empty"):
        parse_table(raw)

    raw = dict(small_raw)
    del raw["months"]
    with pytest.raises(TableValidationError):
        parse_table(raw)

    raw = dict(small_raw, metadata=None)
    with pytest.raises(TableValidationError, match="metadata"):
        parse_table(raw)

    raw = dict(small_raw, metadata=dict(small_raw["metadata"], lastUpdated="yesterday"))
    with pytest.raises(TableValidationError, match="lastUpdated"):
        parse_table(raw)

    raw = dict(small_raw, metadata=dict(small_raw["metadata"], source=""))
    with pytest.raises(TableValidationError, match="source"):
        parse_table(raw)

    raw = dict(small_raw, months=small_raw["months"] + ["not a record"])
    with pytest.raises(TableValidationError, match=r"months\[3\]"):
        parse_table(raw)


def test_table_validation_error_is_data_integrity_error(small_raw):
    small_raw["months"][0]["days"] = 31
    with pytest.raises(DataIntegrityError):
        parse_table(small_raw)


def test_read_table_file(tmp_path, small_raw):
    p = tmp_path / "table.json"
    p.write_text(json.dumps(small_raw), encoding="utf-8")
    t = read_table_file(p)
    assert len(t) == 3

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(TableValidationError, match="not valid JSON"):
        read_table_file(bad)


def test_env_override(tmp_path, small_raw, monkeypatch):
    p = tmp_path / "table.json"
    p.write_text(json.dumps(small_raw), encoding="utf-8")
    monkeypatch.setenv(TABLE_ENV_VAR, str(p))
    monkeypatch.setattr(ummalqura, "_TABLE", None)

    t = load_table()
    assert len(t) == 3
    assert load_table() is t


def test_broken_override_fails_loudly(tmp_path, small_raw, monkeypatch):
    small_raw["months"][1]["g_start"] = "2025-07-30"
    p = tmp_path / "table.json"
    p.write_text(json.dumps(small_raw), encoding="utf-8")
    monkeypatch.setenv(TABLE_ENV_VAR, str(p))
    monkeypatch.setattr(ummalqura, "_TABLE", None)

    with pytest.raises(TableValidationError, match="gap"):
        load_table()
    # nothing half-built was cached
    assert ummalqura._TABLE is None


def test_missing_override_is_a_table_error(tmp_path, monkeypatch):
    monkeypatch.setenv(TABLE_ENV_VAR, str(tmp_path / "nope.json"))
    monkeypatch.setattr(ummalqura, "_TABLE", None)

    with pytest.raises(DataIntegrityError, match="cannot read"):
        load_table()
    assert ummalqura._TABLE is None


def test_concurrent_first_load_validates_once(monkeypatch):
    monkeypatch.delenv(TABLE_ENV_VAR, raising=False)
    monkeypatch.setattr(ummalqura, "_TABLE", None)

    calls = []
    real_resolve = ummalqura._resolve

    def slow_resolve():
        calls.append(1)
        time.sleep(0.05)
        return real_resolve()

    monkeypatch.setattr(ummalqura, "_resolve", slow_resolve)

    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(load_table())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)
