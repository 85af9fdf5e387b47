# src/periodkit/period/__init__.py
"""
periodkit.period
~~~~~~~~~~~~~~~~

The ``Period`` value type, an inclusive ``[begin, end]`` span of calendar
days, together with the algebra over it.

Basic usage::

    from datetime import date
    from periodkit.period import Period, overlap, exclude, month_count

    a = Period(date(2020, 1, 1), date(2020, 1, 10))
    b = Period(date(2020, 1, 6), date(2020, 1, 20))
    overlap(a, b)            # → Period(2020-01-06, 2020-01-10)
    exclude(a, b)            # → Period(2020-01-01, 2020-01-05)
    month_count(a)           # → 1

Weeks with a configurable first day::

    from dateutil.relativedelta import SU
    us_week = from_week_factory(SU)
    us_week(date(2020, 1, 8))   # → Period(2020-01-05, 2020-01-11)

Public API
----------
Period            The value type.
from_week_factory Week-of-date constructor for a given first weekday.
overlap, overlaps, exclude, combine, shift, empty
month_count, monthly_schedule, as_months, yearly_schedule
period_values     Map a (date, value) stream onto sub-periods.
min_max           Bounding period widened onto business days.
"""

from __future__ import annotations

from periodkit.period.algebra import (
    as_months,
    combine,
    contains,
    empty,
    exclude,
    min_max,
    month_count,
    monthly_schedule,
    overlap,
    overlaps,
    period_values,
    shift,
    yearly_schedule,
)
from periodkit.period.period import Period, from_week_factory

__all__ = [
    "Period",
    "from_week_factory",
    "overlap",
    "overlaps",
    "exclude",
    "combine",
    "contains",
    "shift",
    "empty",
    "month_count",
    "monthly_schedule",
    "as_months",
    "yearly_schedule",
    "period_values",
    "min_max",
]
