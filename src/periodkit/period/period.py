from __future__ import annotations

from datetime import date, timedelta
from functools import partial
from typing import Callable, Iterator, Tuple, Union

import numpy as np

from periodkit.dates.dates import (
    DateLike,
    add_days,
    add_years,
    month_end,
    month_start,
    to_date,
)
from periodkit.period._lazy import Lazy


def _daily(begin: date, end: date) -> Tuple[date, ...]:
    count = (end - begin).days + 1 if begin <= end else 0
    return tuple(begin + timedelta(days=i) for i in range(count))


class Period:
    """
    Inclusive span of calendar days ``[begin, end]``.

    A period with ``begin > end`` is empty.  It is still a valid value: it
    counts zero days and has an empty schedule.  Construction is O(1); the
    daily schedule is built on first request and cached on the instance.
    """

    __slots__ = ("_begin", "_end", "_schedule")

    def __init__(self, begin: DateLike, end: DateLike) -> None:
        self._begin: date = to_date(begin)
        self._end: date = to_date(end)
        self._schedule: Lazy[Tuple[date, ...]] = Lazy(
            partial(_daily, self._begin, self._end)
        )

    # ── constructors ─────────────────────────────────────────────────────

    @classmethod
    def from_tuple(cls, pair: Tuple[DateLike, DateLike]) -> "Period":
        begin, end = pair
        return cls(begin, end)

    @classmethod
    def from_month(cls, d: DateLike) -> "Period":
        """The whole calendar month containing ``d``."""
        d = to_date(d)
        return cls(month_start(d), month_end(d))

    @classmethod
    def one_year_ahead(cls, d: DateLike) -> "Period":
        """First day of ``d``'s month through the day before one year later."""
        start = month_start(to_date(d))
        return cls(start, add_days(add_years(start, 1), -1))

    @classmethod
    def empty(cls, d: DateLike) -> "Period":
        """Canonical empty period anchored at ``d``: ``(d + 1 day, d)``."""
        d = to_date(d)
        return cls(add_days(d, 1), d)

    # ── properties ───────────────────────────────────────────────────────

    @property
    def begin(self) -> date:
        return self._begin

    @property
    def end(self) -> date:
        return self._end

    @property
    def is_empty(self) -> bool:
        return self._begin > self._end

    # ── days ─────────────────────────────────────────────────────────────

    def day_count(self) -> int:
        if self.is_empty:
            return 0
        return (self._end - self._begin).days + 1

    def daily_schedule(self) -> Tuple[date, ...]:
        """Every day from begin to end inclusive, cached after the first call."""
        return self._schedule.value

    def daily_array(self) -> np.ndarray:
        if self.is_empty:
            return np.array([], dtype="datetime64[D]")
        return np.arange(
            np.datetime64(self._begin, "D"),
            np.datetime64(self._end, "D") + np.timedelta64(1, "D"),
        )

    # ── containment ──────────────────────────────────────────────────────

    def contains(self, other: Union["Period", DateLike]) -> bool:
        """
        For a date: ``begin <= other <= end``.
        For a period: ``other`` lies entirely inside this one.
        """
        if isinstance(other, Period):
            return self._begin <= other._begin and self._end >= other._end
        d = to_date(other)
        return self._begin <= d <= self._end

    def __contains__(self, other: Union["Period", DateLike]) -> bool:
        return self.contains(other)

    # ── value semantics ──────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._begin == other._begin and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._begin, self._end))

    def __iter__(self) -> Iterator[date]:
        yield self._begin
        yield self._end

    def __reduce__(self):
        return (type(self), (self._begin, self._end))

    def __repr__(self) -> str:
        return f"Period({self._begin.isoformat()}, {self._end.isoformat()})"

    def __str__(self) -> str:
        return f"{self._begin.isoformat()} - {self._end.isoformat()}"


def from_week_factory(week_start) -> Callable[[DateLike], Period]:
    """
    Build a ``date -> Period`` function returning the 7-day week containing
    the date, where weeks begin on ``week_start``.

    ``week_start`` is 0..6 with Monday = 0 (``calendar.MONDAY`` etc.) or a
    ``dateutil.relativedelta`` weekday such as ``MO`` or ``SU``.
    """
    start = getattr(week_start, "weekday", week_start)
    if not isinstance(start, int) or not 0 <= start <= 6:
        raise ValueError(f"week_start must be a weekday 0..6; got {week_start!r}.")

    def week_of(d: DateLike) -> Period:
        d = to_date(d)
        first = add_days(d, -((d.weekday() - start) % 7))
        return Period(first, add_days(first, 6))

    return week_of
