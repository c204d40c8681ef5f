"""Day count conventions used to turn a pair of dates into a year fraction."""

from __future__ import annotations

import calendar
from datetime import date
from enum import Enum


class DayCount(Enum):
    """Day count conventions."""

    ACT_360 = "ACT/360"
    ACT_365F = "ACT/365F"
    THIRTY_360 = "30/360"
    ACT_ACT_ISDA = "ACT/ACT ISDA"

    @classmethod
    def of(cls, name: str) -> DayCount:
        """Look up a convention by name, e.g. 'ACT/365F'."""
        key = name.strip().upper()
        for member in cls:
            if member.value == key or member.name == key:
                return member
        raise ValueError(f"Unknown day count convention: {name}. Available: {[m.value for m in cls]}")

    def days(self, start: date, end: date) -> int:
        """Number of days between two dates under this convention."""
        if self is DayCount.THIRTY_360:
            d1 = min(start.day, 30)
            d2 = end.day
            if d2 == 31 and d1 == 30:
                d2 = 30
            return 360 * (end.year - start.year) + 30 * (end.month - start.month) + (d2 - d1)
        return (end - start).days

    def year_fraction(self, start: date, end: date) -> float:
        """Year fraction between two dates (negative if end is before start)."""
        if end < start:
            return -self.year_fraction(end, start)
        if self is DayCount.ACT_360:
            return (end - start).days / 360.0
        if self is DayCount.ACT_365F:
            return (end - start).days / 365.0
        if self is DayCount.THIRTY_360:
            return self.days(start, end) / 360.0
        return _act_act_isda(start, end)

    def __str__(self) -> str:
        return self.value


def _act_act_isda(start: date, end: date) -> float:
    # Days in each calendar year are divided by that year's length.
    if start.year == end.year:
        return (end - start).days / (366.0 if calendar.isleap(start.year) else 365.0)
    first = (date(start.year + 1, 1, 1) - start).days / (366.0 if calendar.isleap(start.year) else 365.0)
    last = (end - date(end.year, 1, 1)).days / (366.0 if calendar.isleap(end.year) else 365.0)
    return first + (end.year - start.year - 1) + last
