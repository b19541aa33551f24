from __future__ import annotations
from typing import Optional

from calhijri.core.types import ReferenceTable
from calhijri.engines.converter import ConversionEngine
from calhijri.engines.lookup import MonthIndex
from calhijri.reference.ummalqura import load_table


def build_engine(table: Optional[ReferenceTable] = None) -> ConversionEngine:
    """Engine over ``table``, or over the shared Umm al-Qura table."""
    return ConversionEngine(MonthIndex(table if table is not None else load_table()))
