"""
periodkit
~~~~~~~~~

Inclusive calendar-day intervals and the arithmetic around them: counts,
schedules, overlap/combine/exclude, fiscal years and business-day walking.

Basic usage::

    from datetime import date
    from periodkit import Period, overlap, fiscal_year

    q = Period(date(2020, 1, 1), date(2020, 3, 31))
    q.day_count()                                   # → 91
    overlap(q, Period.from_month(date(2020, 3, 5))) # → March 2020
    fiscal_year(date(2000, 9, 30), date(2020, 1, 1))
    # → Period(2019-10-01, 2020-09-30)
"""

from __future__ import annotations

from periodkit._exceptions import BusinessDayError, DateRangeError, PeriodError
from periodkit.dates import (
    business_days,
    is_business_day,
    is_holiday,
    is_weekend,
    next_business_day,
    prev_business_day,
    to_date,
)
from periodkit.fiscal import fiscal_year, fiscal_years
from periodkit.period import (
    Period,
    as_months,
    combine,
    empty,
    exclude,
    from_week_factory,
    min_max,
    month_count,
    monthly_schedule,
    overlap,
    overlaps,
    period_values,
    shift,
    yearly_schedule,
)

__all__ = [
    "Period",
    "from_week_factory",
    "overlap",
    "overlaps",
    "exclude",
    "combine",
    "shift",
    "empty",
    "month_count",
    "monthly_schedule",
    "as_months",
    "yearly_schedule",
    "period_values",
    "min_max",
    "fiscal_year",
    "fiscal_years",
    "to_date",
    "is_weekend",
    "is_holiday",
    "is_business_day",
    "prev_business_day",
    "next_business_day",
    "business_days",
    "PeriodError",
    "DateRangeError",
    "BusinessDayError",
]
