"""
Calendar-date arithmetic.

Everything here works on datetime.date values (no time of day, no time zone),
so day differences are exact ordinal differences and never drift across DST.
"""
import calendar
from datetime import date
from typing import Iterator, Tuple, Union

DateLike = Union[date, str]


def parse_date(value: DateLike) -> date:
    """Accept a date or an ISO "YYYY-MM-DD" string."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def days_between(a: date, b: date) -> int:
    """Signed number of days from a to b (positive when b is later)."""
    return b.toordinal() - a.toordinal()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_day_of_month(d: date) -> date:
    return d.replace(day=1)


def last_day_of_month(d: date) -> date:
    return d.replace(day=days_in_month(d.year, d.month))


def iter_months(start: date, end: date) -> Iterator[Tuple[int, int]]:
    """
    Yield (year, month) for every calendar month from start's month through
    end's month inclusive. Yields nothing when end's month precedes start's.
    """
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        month += 1
        if month > 12:
            year, month = year + 1, 1
