from __future__ import annotations

import logging
from datetime import date
from typing import Collection, Iterable, Optional, Tuple

import numpy as np

from periodkit._exceptions import BusinessDayError
from periodkit.dates.dates import add_days

logger = logging.getLogger(__name__)

HolidaySet = Collection[date]

# Upper bound on the number of days a single business-day walk may step.
DEFAULT_MAX_WALK: int = 366 * 10


def is_weekend(d: date) -> bool:
    return d.weekday() >= 5


def is_holiday(holidays: HolidaySet, d: date) -> bool:
    """True on weekends and on any date listed in ``holidays``."""
    return is_weekend(d) or d in holidays


def is_business_day(holidays: HolidaySet, d: date) -> bool:
    return not is_holiday(holidays, d)


# ── walking ──────────────────────────────────────────────────────────────

def prev_business_day(
    holidays: HolidaySet,
    d: date,
    rigid_month: bool = False,
    max_days: Optional[int] = None,
) -> date:
    """
    Latest business day strictly before ``d``.

    With ``rigid_month`` the result must stay in ``d``'s month: when the walk
    would cross into the previous month it turns around and looks for the
    next business day from the first day of the month instead.
    ``date.min`` is returned unchanged, and a walk that reaches it stops
    there.
    """
    if d == date.min:
        return d
    return _walk(holidays, d, -1, rigid_month, max_days)


def next_business_day(
    holidays: HolidaySet,
    d: date,
    rigid_month: bool = False,
    max_days: Optional[int] = None,
) -> date:
    """
    Earliest business day strictly after ``d``.

    With ``rigid_month`` the result must stay in ``d``'s month: when the walk
    would cross into the next month it turns around and looks for the previous
    business day from the last day of the month instead.
    ``date.max`` is returned unchanged, and a walk that reaches it stops
    there.
    """
    if d == date.max:
        return d
    return _walk(holidays, d, 1, rigid_month, max_days)


def _walk(
    holidays: HolidaySet,
    start: date,
    step: int,
    rigid_month: bool,
    max_days: Optional[int],
) -> date:
    limit = DEFAULT_MAX_WALK if max_days is None else max_days
    sentinel = date.min if step < 0 else date.max
    current = start
    for _ in range(limit):
        # the walk stops at the edge of the representable range
        if current == sentinel:
            return current
        candidate = add_days(current, step)

        if rigid_month and candidate.month != current.month:
            logger.debug(
                "Walk from %s left the month at %s; reversing.", start, candidate
            )
            return _reverse_in_month(holidays, current, -step, limit)

        if is_business_day(holidays, candidate):
            return candidate
        current = candidate

    raise BusinessDayError(
        f"No business day within {limit} days of {start}."
    )


def _reverse_in_month(
    holidays: HolidaySet, edge: date, step: int, limit: int
) -> date:
    result = _walk(holidays, edge, step, False, limit)
    if (result.year, result.month) != (edge.year, edge.month):
        raise BusinessDayError(
            f"No business day in {edge:%Y-%m} around {edge}."
        )
    return result


def business_days(holidays: HolidaySet, d: date) -> Tuple[date, date]:
    """Previous and next business day around ``d``, computed independently."""
    return prev_business_day(holidays, d), next_business_day(holidays, d)


# ── vectorised helpers ───────────────────────────────────────────────────

def _holiday_array(holidays: Iterable[date]) -> np.ndarray:
    return np.array(sorted(holidays), dtype="datetime64[D]")


def business_day_mask(holidays: HolidaySet, dates) -> np.ndarray:
    """
    Boolean array marking which of ``dates`` are business days.

    ``dates`` may be any sequence of dates or a ``datetime64`` array; the
    result has the same shape.
    """
    arr = np.asarray(dates, dtype="datetime64[D]")
    if arr.size == 0:
        return np.zeros(arr.shape, dtype=bool)
    return np.is_busday(arr, holidays=_holiday_array(holidays))


def business_day_count(holidays: HolidaySet, period) -> int:
    """Number of business days in ``period``; 0 for an empty period."""
    if period.is_empty:
        return 0
    return int(
        np.busday_count(
            np.datetime64(period.begin, "D"),
            np.datetime64(period.end, "D") + np.timedelta64(1, "D"),
            holidays=_holiday_array(holidays),
        )
    )
