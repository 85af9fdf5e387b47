from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Union

import numpy as np
from dateutil.relativedelta import relativedelta

from periodkit._exceptions import DateRangeError

DateLike = Union[date, datetime, str, "np.datetime64"]

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"


def to_date(value: DateLike) -> date:
    """
    Normalise a date-like value to a ``datetime.date``.

    A ``datetime`` is truncated to its calendar day.  Strings are accepted in
    ``YYYY-MM-DD`` and ``YYYYMMDD`` form.
    """
    # datetime is a subclass of date, so it has to be checked first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise ValueError("NaT is not a date.")
        return value.astype("datetime64[D]").item()
    if isinstance(value, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {value!r}")
    raise TypeError(f"Unsupported date-like value: {value!r}")


def add_days(d: date, days: int) -> date:
    try:
        return d + timedelta(days=days)
    except OverflowError as exc:
        raise DateRangeError(f"{d} {days:+d} days is out of range.") from exc


def add_years(d: date, years: int) -> date:
    """Add whole years; February 29 falls back to February 28."""
    try:
        return d + relativedelta(years=years)
    except (OverflowError, ValueError) as exc:
        raise DateRangeError(f"{d} {years:+d} years is out of range.") from exc


def add_months(d: date, months: int) -> date:
    try:
        return d + relativedelta(months=months)
    except (OverflowError, ValueError) as exc:
        raise DateRangeError(f"{d} {months:+d} months is out of range.") from exc


# ── calendar primitives ──────────────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(d: date) -> int:
    return calendar.monthrange(d.year, d.month)[1]


def days_in_year(d: date) -> int:
    return 366 if calendar.isleap(d.year) else 365


# ── month / year boundaries ──────────────────────────────────────────────

def month_start(d: date) -> date:
    return d.replace(day=1)


# The first day of the month doubles as the month-and-year key.
month_and_year = month_start


def month_end(d: date) -> date:
    return d.replace(day=days_in_month(d))


def compare_month_year(d1: date, d2: date) -> int:
    """Compare only the month and year of two dates; returns -1, 0 or 1."""
    m1, m2 = month_start(d1), month_start(d2)
    return (m1 > m2) - (m1 < m2)


def days_to_month_end(d: date) -> int:
    """Days left in the month, counting ``d`` itself."""
    return days_in_month(d) - d.day + 1


def days_to_month_begin(d: date) -> int:
    return d.day


def days_to_year_end(d: date) -> int:
    """Days left in the year, counting ``d`` itself."""
    return days_in_year(d) - d.timetuple().tm_yday + 1


def applicable_day_count(year: date, as_of: date) -> int:
    """
    Portion of ``year``'s year that has passed by ``as_of``.

    Returns -1 when ``year`` lies after ``as_of``, the number of days from
    ``year`` through ``as_of`` inclusive when both fall in the same year, and
    the full length of ``year``'s year otherwise.
    """
    if year > as_of:
        return -1
    if year.year == as_of.year:
        return (as_of - year).days + 1
    return days_in_year(year)


def year_day_count_ahead(d: date) -> int:
    """Number of days from ``d`` to the same date one year later."""
    return (add_years(d, 1) - d).days


def change_year(d: date, year: date) -> date:
    """Move ``d`` into the year of ``year``, keeping month and day."""
    return add_years(d, year.year - d.year)


def is_in_period(d: date, period) -> bool:
    return period.contains(d)


def last_week_day(d: date) -> date:
    """``d`` itself on a weekday, otherwise the Friday before it."""
    while d.weekday() >= 5:
        d = add_days(d, -1)
    return d
