from __future__ import annotations

import logging
from datetime import date
from typing import List

from periodkit.dates.dates import DateLike, add_days, add_years, is_leap_year, to_date
from periodkit.period.algebra import overlaps
from periodkit.period.period import Period

logger = logging.getLogger(__name__)


def _year_end(year: int, month: int, day: int) -> date:
    # A February year end is always the last day of February.
    if month == 2:
        day = 29 if is_leap_year(year) else 28
    return date(year, month, day)


def _fix_leap_february(d: date) -> date:
    if d.month == 2 and is_leap_year(d.year):
        return date(d.year, 2, 29)
    return d


def fiscal_year(fiscal_year_end: DateLike, as_of: DateLike) -> Period:
    """
    The twelve-month fiscal year for ``as_of``.

    Only the month and day of ``fiscal_year_end`` are used; its year is
    ignored.  Leap years are taken into account for February year ends.
    The choice is made by month: any ``as_of`` in the year-end month
    selects the fiscal year that ends in that month.
    """
    anchor, as_of = to_date(fiscal_year_end), to_date(as_of)
    if as_of.month > anchor.month:
        begin = add_days(_year_end(as_of.year, anchor.month, anchor.day), 1)
        end = add_days(add_years(begin, 1), -1)
    else:
        end = _year_end(as_of.year, anchor.month, anchor.day)
        begin = add_days(_fix_leap_february(add_years(end, -1)), 1)
    logger.debug("Fiscal year ending %02d-%02d as of %s: %s - %s",
                 anchor.month, anchor.day, as_of, begin, end)
    return Period(begin, end)


def fiscal_years(fiscal_year_end: DateLike, period: Period) -> List[Period]:
    """Fiscal years intersecting ``period``, in chronological order."""
    if period.is_empty:
        return []
    years: List[Period] = []
    current = fiscal_year(fiscal_year_end, period.begin)
    while True:
        if overlaps(current, period):
            years.append(current)
        if current.end >= period.end:
            return years
        current = fiscal_year(fiscal_year_end, add_years(current.end, 1))
