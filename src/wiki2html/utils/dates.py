#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/utils/dates.py
"""Partial date handling for contact cards and event lists.

Wiki pages write dates as ``dd.mm.yyyy``, and events may omit parts of it:
``dd.mm.`` for a yearly date, ``mm.yyyy`` or just ``yyyy``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

_INT_RE = re.compile(r"[+-]?\d+")

FULL_DATE_FORMAT = "%d.%m.%Y"


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"Not an integer: {text!r}")
    return int(text)


def _compare(a: int, b: int) -> int:
    return (a > b) - (a < b)


@dataclass
class DateFields:
    """A date whose day, month and year are each optional."""

    day: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None

    @classmethod
    def from_date(cls, value: date) -> DateFields:
        return cls(value.day, value.month, value.year)

    def compare_to(self, other: DateFields) -> int:
        """Compare chronologically; the year only counts when both dates have one."""
        if self.year is not None and other.year is not None and self.year != other.year:
            return _compare(self.year, other.year)
        return self.compare_to_ignore_year(other)

    def compare_to_ignore_year(self, other: DateFields) -> int:
        """Compare month and day; a missing month or day counts as 1."""
        month_cmp = _compare(self.month or 1, other.month or 1)
        if month_cmp:
            return month_cmp
        return _compare(self.day or 1, other.day or 1)


def parse_date_fields(text: Optional[str]) -> Optional[DateFields]:
    """Parse a possibly partial ``dd.mm.yyyy`` date.

    Leading blanks are skipped and everything after the first blank (e.g. a
    time of day) is ignored.

    Parameters
    ----------
    text : str or None
        Text such as ``24.12.2025``, ``24.12.``, ``12.2025`` or ``2025``

    Returns
    -------
    DateFields or None
        ``None`` when the text is missing or not a date

    Examples
    --------
    >>> parse_date_fields("24.12. 18:00")
    DateFields(day=24, month=12, year=None)

    """
    if text is None:
        return None
    text = text.lstrip(" ")
    if not text:
        return None
    space_pos = text.find(" ")
    if space_pos > 0:
        text = text[:space_pos]

    pos1 = text.find(".")
    pos2 = text.find(".", pos1 + 1) if pos1 >= 0 else -1
    result = DateFields()
    try:
        if pos2 >= 0:
            result.day = _parse_int(text[:pos1])
            result.month = _parse_int(text[pos1 + 1 : pos2])
            if len(text) > pos2 + 1:
                result.year = _parse_int(text[pos2 + 1 :])
        elif pos1 >= 0:
            result.month = _parse_int(text[:pos1])
            if len(text) > pos1 + 1:
                result.year = _parse_int(text[pos1 + 1 :])
        else:
            result.year = _parse_int(text)
    except ValueError:
        return None
    return result


def format_date_fields(fields: Optional[DateFields]) -> str:
    """Format fields as ``dd.mm.yyyy``, leaving out the missing parts."""
    if fields is None:
        return ""
    parts = []
    if fields.day is not None:
        parts.append(f"{fields.day:02d}.")
    if fields.month is not None:
        parts.append(f"{fields.month:02d}.")
    if fields.year is not None:
        parts.append(str(fields.year))
    return "".join(parts)


def parse_full_date(text: Optional[str]) -> Optional[date]:
    """Parse a complete ``dd.mm.yyyy`` date, returning ``None`` if malformed."""
    if text is None:
        return None
    try:
        return datetime.strptime(text.strip(), FULL_DATE_FORMAT).date()
    except ValueError:
        return None


def fractional_age(birthday: date, until: date) -> float:
    """Return the age in years with the days since the last birthday as fraction.

    Leap years are ignored; the result is only meant for display with one
    decimal place.
    """
    from_day = birthday.timetuple().tm_yday
    to_day = until.timetuple().tm_yday
    years = until.year - birthday.year
    if to_day < from_day:
        years -= 1
    days = to_day - from_day
    if days < 0:
        days += 365
    return years + days / 365
