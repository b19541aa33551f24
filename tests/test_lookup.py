# tests/test_lookup.py

from datetime import date, timedelta

import pytest

from calhijri.core.types import ReferenceTable
from calhijri.engines.lookup import MonthIndex
from calhijri.reference.ummalqura import load_table, parse_table


@pytest.fixture(scope="module")
def index():
    return MonthIndex(load_table())


def test_find_by_hijri(index):
    rec = index.find_by_hijri(1447, 9)
    assert rec.g_start == date(2026, 2, 18)
    assert rec.days == 30

    assert index.find_by_hijri(1423, 1).g_start == date(2002, 3, 15)
    assert index.find_by_hijri(1500, 12).g_start == date(2077, 10, 18)
    assert index.find_by_hijri(1422, 12) is None
    assert index.find_by_hijri(1501, 1) is None


def test_find_by_gregorian(index):
    # first day, last day and a middle day of 1 Muharram 1447 (30 days)
    for d in (date(2025, 6, 26), date(2025, 7, 10), date(2025, 7, 25)):
        rec = index.find_by_gregorian(d)
        assert (rec.h_year, rec.h_month) == (1447, 1)
    rec = index.find_by_gregorian(date(2025, 7, 26))
    assert (rec.h_year, rec.h_month) == (1447, 2)

    assert index.find_by_gregorian(date(2002, 3, 14)) is None
    assert index.find_by_gregorian(date(2077, 11, 17)) is None
    assert index.find_by_gregorian(date(2077, 11, 16)).h_month == 12


def test_every_record_is_found_by_both_keys(index):
    for rec in index.table.months:
        assert index.find_by_hijri(rec.h_year, rec.h_month) is rec
        assert index.find_by_gregorian(rec.g_start) is rec
        assert index.find_by_gregorian(rec.g_end) is rec


def test_supported_ranges(index):
    assert len(index) == 936
    assert index.supported_year_range() == (1423, 1500)
    assert index.supported_gregorian_range() == (date(2002, 3, 15), date(2077, 11, 16))


def test_small_table(small_raw):
    idx = MonthIndex(parse_table(small_raw))
    assert idx.first.h_month == 1
    assert idx.last.h_month == 3
    assert idx.find_by_gregorian(date(2025, 8, 24) - timedelta(days=1)).h_month == 2
    assert idx.find_by_hijri(1447, 4) is None


def test_empty_table_rejected():
    table = ReferenceTable(metadata=load_table().metadata, months=())
    with pytest.raises(ValueError):
        MonthIndex(table)


def test_record_contains(index):
    rec = index.find_by_hijri(1446, 6)
    assert rec.contains(date(2024, 12, 2))
    assert rec.contains(date(2024, 12, 31))
    assert not rec.contains(date(2024, 12, 1))
    assert not rec.contains(date(2025, 1, 1))
