from __future__ import annotations


class PeriodError(Exception):
    """Base exception for all periodkit errors."""


class DateRangeError(PeriodError, OverflowError):
    """Day arithmetic stepped outside the representable ``date`` range."""


class BusinessDayError(PeriodError):
    """
    A business-day walk could not be resolved: either it ran past its step
    bound (e.g. every day is a holiday) or a rigid-month walk found no
    business day inside the month.
    """
