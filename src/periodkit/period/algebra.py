from __future__ import annotations

import logging
from datetime import date, timedelta
from itertools import zip_longest
from typing import Callable, Dict, Iterable, List, Tuple, TypeVar, Union

from periodkit.dates.business import (
    HolidaySet,
    is_business_day,
    next_business_day,
    prev_business_day,
)
from periodkit.dates.dates import (
    DateLike,
    add_days,
    add_months,
    add_years,
    month_end,
    month_start,
    to_date,
)
from periodkit.period.period import Period

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ── set-like operations ──────────────────────────────────────────────────

def overlap(p1: Period, p2: Period) -> Period:
    """Largest period inside both; empty when they do not intersect."""
    return Period(max(p1.begin, p2.begin), min(p1.end, p2.end))


def overlaps(p1: Period, p2: Period) -> bool:
    return not overlap(p1, p2).is_empty


def exclude(p1: Period, p2: Period) -> Period:
    """
    Remove the part of ``p1`` covered by ``p2``.

    Only a leading or trailing cut is representable.  When ``p2`` sits
    strictly inside ``p1`` the result is the part of ``p1`` before the cut;
    the part after it is dropped.
    """
    cut = overlap(p1, p2)
    if cut.is_empty:
        return p1
    if cut.begin == p1.begin:
        return Period(add_days(cut.end, 1), p1.end)
    return Period(p1.begin, add_days(cut.begin, -1))


def combine(p1: Period, p2: Period) -> Period:
    """Bounding range of both periods, whether or not they touch."""
    return Period(min(p1.begin, p2.begin), max(p1.end, p2.end))


def contains(p: Period, other: Union[Period, DateLike]) -> bool:
    return p.contains(other)


def shift(p: Period, delta: Union[timedelta, int]) -> Period:
    """
    Move both ends by ``delta``: a number of days or a timedelta holding
    whole days only.
    """
    if isinstance(delta, timedelta):
        if delta % timedelta(days=1):
            raise ValueError(f"delta must be a whole number of days; got {delta}.")
        days = delta.days
    else:
        days = int(delta)
    return Period(add_days(p.begin, days), add_days(p.end, days))


def empty(d: DateLike) -> Period:
    return Period.empty(d)


# ── months and years ─────────────────────────────────────────────────────

def month_count(p: Period) -> int:
    """
    Months spanned by ``p``, never less than 1.  An end on the last day of
    its month counts that month as passed.
    """
    end_month = p.end.month + 1 if p.end == month_end(p.end) else p.end.month
    return max(1, (p.end.year - p.begin.year) * 12 + end_month - p.begin.month)


def monthly_schedule(p: Period, frequency: int = 1) -> List[date]:
    """First-of-month dates every ``frequency`` months from begin to end."""
    if frequency < 1:
        raise ValueError(f"frequency must be at least 1; got {frequency}.")
    if p.is_empty:
        return []
    first, last = month_start(p.begin), month_start(p.end)
    months = (last.year - first.year) * 12 + last.month - first.month
    return [add_months(first, k) for k in range(0, months + 1, frequency)]


def as_months(p: Period) -> List[Period]:
    return [Period.from_month(m) for m in monthly_schedule(p, 1)]


def yearly_schedule(p: Period) -> List[date]:
    """First-of-month dates one year apart from begin's month to end's."""
    if p.is_empty:
        return []
    first, last = month_start(p.begin), month_start(p.end)
    years = ((last.year - first.year) * 12 + last.month - first.month) // 12
    return [add_years(first, k) for k in range(years + 1)]


# ── value segmentation ───────────────────────────────────────────────────

def period_values(
    base: Period,
    date_values: Iterable[Tuple[DateLike, T]],
    is_neutral: Callable[[T], bool],
) -> Dict[Period, T]:
    """
    Split ``base`` into sub-periods driven by a stream of ``(date, value)``.

    Each anchor date holds its value up to the day before the next anchor;
    the last one runs to ``base.end``.  Sub-periods are clipped to ``base``.
    Empty sub-periods and values for which ``is_neutral`` is true are left
    out.  Anchors are stably sorted by date first.
    """
    anchors = sorted(
        ((to_date(d), v) for d, v in date_values), key=lambda dv: dv[0]
    )
    result: Dict[Period, T] = {}
    for (start, value), nxt in zip_longest(anchors, anchors[1:]):
        stop = base.end if nxt is None else add_days(nxt[0], -1)
        segment = overlap(Period(start, stop), base)
        if segment.is_empty or is_neutral(value):
            continue
        result[segment] = value
    logger.debug(
        "Segmented %r into %d of %d anchors.", base, len(result), len(anchors)
    )
    return result


# ── bounds ───────────────────────────────────────────────────────────────

def min_max(periods: Iterable[Period], holidays: HolidaySet) -> Period:
    """
    Bounding period of ``periods`` with both ends pushed outwards onto
    business days.  The range is only ever widened.  No periods gives the
    empty period ``(date.max, date.min)``.
    """
    lo, hi = date.max, date.min
    seen = False
    for p in periods:
        lo, hi = min(lo, p.begin), max(hi, p.end)
        seen = True
    if not seen:
        return Period(lo, hi)

    if not is_business_day(holidays, lo):
        lo = min(lo, prev_business_day(holidays, lo))
    if not is_business_day(holidays, hi):
        hi = max(hi, next_business_day(holidays, hi))
    return Period(lo, hi)
