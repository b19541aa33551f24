"""Diagnostics package.

- round_trip, pretty_month, check_table: always available
- month_lengths: needs numpy (and matplotlib for --plot), pip install "calhijri[diagnostics]"
"""

__all__ = ["round_trip", "pretty_month", "check_table", "month_lengths"]
