# src/periodkit/dates/__init__.py
"""
periodkit.dates
~~~~~~~~~~~~~~~

Calendar-day helpers: month/year boundary queries and business-day walking
around a caller-supplied holiday set.

Basic usage::

    from datetime import date
    from periodkit.dates import month_end, next_business_day

    month_end(date(2020, 2, 10))                   # → 2020-02-29
    holidays = {date(2020, 12, 25)}
    next_business_day(holidays, date(2020, 12, 24))  # → 2020-12-28

With ``rigid_month`` a walk never leaves the month it started in::

    next_business_day(set(), date(2021, 4, 30), rigid_month=True)
    # → 2021-04-29

Public API
----------
to_date             Normalise date-likes (datetime, ISO string, datetime64).
is_business_day     Not a weekend and not a listed holiday.
prev_business_day   Walk backwards to the nearest business day.
next_business_day   Walk forwards to the nearest business day.
business_days       Both neighbours at once.
business_day_mask   Vectorised business-day test over a date array.
"""

from __future__ import annotations

from periodkit.dates.business import (
    DEFAULT_MAX_WALK,
    business_day_count,
    business_day_mask,
    business_days,
    is_business_day,
    is_holiday,
    is_weekend,
    next_business_day,
    prev_business_day,
)
from periodkit.dates.dates import (
    add_days,
    add_months,
    add_years,
    applicable_day_count,
    change_year,
    compare_month_year,
    days_in_month,
    days_in_year,
    days_to_month_begin,
    days_to_month_end,
    days_to_year_end,
    is_in_period,
    is_leap_year,
    last_week_day,
    month_and_year,
    month_end,
    month_start,
    to_date,
    year_day_count_ahead,
)

__all__ = [
    "DEFAULT_MAX_WALK",
    "to_date",
    "add_days",
    "add_months",
    "add_years",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "month_start",
    "month_and_year",
    "month_end",
    "compare_month_year",
    "days_to_month_end",
    "days_to_month_begin",
    "days_to_year_end",
    "applicable_day_count",
    "year_day_count_ahead",
    "change_year",
    "is_in_period",
    "last_week_day",
    "is_weekend",
    "is_holiday",
    "is_business_day",
    "prev_business_day",
    "next_business_day",
    "business_days",
    "business_day_mask",
    "business_day_count",
]
