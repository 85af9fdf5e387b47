"""
tests/period/test_period.py

Covers:
  - Construction and date coercion
  - Empty and single-day periods
  - Day count and daily schedule (caching, numpy view)
  - Containment of dates and periods
  - Structural equality, hashing, unpacking, pickling
  - Month / year-ahead / empty / week constructors
  - Compute-once schedule cache under concurrent first access
"""

import gc
import pickle
import threading
from datetime import date, datetime, timedelta

import numpy as np
import pytest
from dateutil.relativedelta import MO, SA, SU

from periodkit import Period, from_week_factory
from periodkit.period._lazy import Lazy


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def today():
    return date(2020, 6, 15)


@pytest.fixture
def single_day(today):
    return Period(today, today)


@pytest.fixture
def inverted(today):
    """Ends the day before it begins."""
    return Period(today, today - timedelta(days=1))


@pytest.fixture
def june():
    return Period(date(2020, 6, 1), date(2020, 6, 30))


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_boundaries_stored(self, june):
        assert june.begin == date(2020, 6, 1)
        assert june.end == date(2020, 6, 30)

    def test_datetime_truncated_to_day(self):
        p = Period(datetime(2020, 6, 1, 23, 59), datetime(2020, 6, 2, 0, 1))
        assert p.begin == date(2020, 6, 1)
        assert p.end == date(2020, 6, 2)
        assert type(p.begin) is date

    def test_iso_strings_accepted(self):
        assert Period("2020-06-01", "20200630") == Period(
            date(2020, 6, 1), date(2020, 6, 30)
        )

    def test_datetime64_accepted(self):
        p = Period(np.datetime64("2020-06-01"), np.datetime64("2020-06-30"))
        assert p.begin == date(2020, 6, 1)

    def test_bad_string_raises(self):
        with pytest.raises(ValueError):
            Period("01/06/2020", "2020-06-30")

    def test_bad_type_raises(self):
        with pytest.raises(TypeError):
            Period(20200601, date(2020, 6, 30))

    def test_from_tuple(self, june):
        assert Period.from_tuple((date(2020, 6, 1), date(2020, 6, 30))) == june

    def test_construction_does_not_build_schedule(self):
        p = Period(date.min, date.max)
        assert not p._schedule.is_computed
        assert p.day_count() == 3652059


# ── Empty and single-day periods ──────────────────────────────────────────────

class TestEmpty:

    def test_inverted_is_empty(self, inverted):
        assert inverted.is_empty

    def test_inverted_counts_zero_days(self, inverted):
        assert inverted.day_count() == 0

    def test_inverted_has_empty_schedule(self, inverted):
        assert inverted.daily_schedule() == ()
        assert inverted.daily_array().size == 0

    def test_single_day_is_not_empty(self, single_day):
        assert not single_day.is_empty
        assert single_day.day_count() == 1

    def test_single_day_schedule(self, single_day, today):
        assert single_day.daily_schedule() == (today,)

    def test_empty_constructor(self, today):
        p = Period.empty(today)
        assert p.begin == today + timedelta(days=1)
        assert p.end == today
        assert p.is_empty


# ── Day count and schedule ────────────────────────────────────────────────────

class TestDays:

    def test_two_day_count_is_inclusive(self, today):
        assert Period(today, today + timedelta(days=1)).day_count() == 2

    def test_month_day_count(self, june):
        assert june.day_count() == 30

    def test_schedule_length_matches_count(self, june):
        assert len(june.daily_schedule()) == june.day_count()

    def test_schedule_is_ordered_and_contiguous(self, june):
        days = june.daily_schedule()
        assert days[0] == june.begin
        assert days[-1] == june.end
        assert all((b - a).days == 1 for a, b in zip(days, days[1:]))

    def test_schedule_cached(self, june):
        first = june.daily_schedule()
        assert june.daily_schedule() is first

    def test_schedule_across_leap_february(self):
        p = Period(date(2020, 2, 27), date(2020, 3, 1))
        assert p.daily_schedule() == (
            date(2020, 2, 27),
            date(2020, 2, 28),
            date(2020, 2, 29),
            date(2020, 3, 1),
        )

    def test_daily_array_matches_schedule(self, june):
        arr = june.daily_array()
        assert arr.dtype == np.dtype("datetime64[D]")
        assert [d.item() for d in arr] == list(june.daily_schedule())


# ── Containment ───────────────────────────────────────────────────────────────

class TestContains:

    def test_contains_boundaries(self, june):
        assert june.contains(date(2020, 6, 1))
        assert june.contains(date(2020, 6, 30))

    def test_excludes_outside_dates(self, june):
        assert not june.contains(date(2020, 5, 31))
        assert not june.contains(date(2020, 7, 1))

    def test_in_operator(self, june):
        assert date(2020, 6, 15) in june
        assert datetime(2020, 6, 30, 18, 0) in june

    def test_contains_inner_period(self, june):
        assert june.contains(Period(date(2020, 6, 10), date(2020, 6, 20)))

    def test_contains_itself(self, june):
        assert june.contains(june)

    def test_does_not_contain_straddling_period(self, june):
        assert not june.contains(Period(date(2020, 6, 20), date(2020, 7, 5)))

    def test_empty_contains_no_date(self, inverted, today):
        assert not inverted.contains(today)


# ── Value semantics ───────────────────────────────────────────────────────────

class TestValueSemantics:

    def test_equal_boundaries_are_equal(self):
        p1 = Period(date(2017, 10, 2), date(2017, 10, 20))
        p2 = Period(date(2017, 10, 2), date(2017, 10, 20))
        assert p1 == p2
        assert hash(p1) == hash(p2)

    def test_different_begin_not_equal(self):
        p1 = Period(date(2017, 10, 2), date(2017, 10, 20))
        p2 = Period(date(2016, 10, 2), date(2017, 10, 20))
        assert p1 != p2

    def test_not_equal_to_tuple(self):
        p = Period(date(2017, 10, 2), date(2017, 10, 20))
        assert p != (date(2017, 10, 2), date(2017, 10, 20))

    def test_interchangeable_as_dict_key(self):
        key = Period(date(2017, 10, 2), date(2017, 10, 20))
        mapping = {key: "x"}
        assert mapping[Period(date(2017, 10, 2), date(2017, 10, 20))] == "x"

    def test_unpacks_to_begin_end(self, june):
        begin, end = june
        assert (begin, end) == (june.begin, june.end)

    def test_begin_is_read_only(self, june):
        with pytest.raises(AttributeError):
            june.begin = date(2020, 1, 1)

    def test_pickle_round_trip_keeps_equality(self, june):
        june.daily_schedule()
        restored = pickle.loads(pickle.dumps(june))
        assert restored == june
        assert restored.day_count() == 30

    def test_repr_and_str(self, june):
        assert repr(june) == "Period(2020-06-01, 2020-06-30)"
        assert str(june) == "2020-06-01 - 2020-06-30"


# ── Factories ─────────────────────────────────────────────────────────────────

class TestFactories:

    def test_from_month(self):
        assert Period.from_month(date(2021, 4, 17)) == Period(
            date(2021, 4, 1), date(2021, 4, 30)
        )

    def test_from_month_leap_february(self):
        assert Period.from_month(date(2020, 2, 10)).end == date(2020, 2, 29)

    def test_from_month_common_february(self):
        assert Period.from_month(date(2021, 2, 10)).end == date(2021, 2, 28)

    def test_one_year_ahead(self):
        p = Period.one_year_ahead(date(2019, 3, 17))
        assert p == Period(date(2019, 3, 1), date(2020, 2, 29))
        assert p.day_count() == 366

    def test_one_year_ahead_common_year(self):
        p = Period.one_year_ahead(date(2021, 1, 31))
        assert p == Period(date(2021, 1, 1), date(2021, 12, 31))
        assert p.day_count() == 365


class TestWeekFactory:

    def test_monday_week(self):
        week_of = from_week_factory(MO)
        # 2020-06-17 is a Wednesday
        p = week_of(date(2020, 6, 17))
        assert p.begin == date(2020, 6, 15)
        assert p.end == date(2020, 6, 21)
        assert len(p.daily_schedule()) == 7

    def test_week_start_on_the_date_itself(self):
        week_of = from_week_factory(0)
        assert week_of(date(2020, 6, 15)).begin == date(2020, 6, 15)

    def test_sunday_week(self):
        week_of = from_week_factory(SU)
        assert week_of(date(2020, 6, 17)).begin == date(2020, 6, 14)

    def test_saturday_week(self):
        week_of = from_week_factory(SA)
        assert week_of(date(2020, 6, 17)).begin == date(2020, 6, 13)

    def test_every_day_of_a_week_maps_to_same_period(self):
        week_of = from_week_factory(SU)
        weeks = {week_of(date(2020, 6, 14) + timedelta(days=i)) for i in range(7)}
        assert len(weeks) == 1

    def test_invalid_week_start_raises(self):
        with pytest.raises(ValueError):
            from_week_factory(7)


# ── Lazy cache ────────────────────────────────────────────────────────────────

class TestLazy:

    def test_factory_runs_once(self):
        calls = []
        lazy = Lazy(lambda: calls.append(1) or len(calls))
        assert lazy.value == 1
        assert lazy.value == 1
        assert calls == [1]

    def test_concurrent_first_access_computes_once(self):
        calls = []
        gate = threading.Barrier(8)

        def build():
            calls.append(1)
            return tuple(range(1000))

        lazy = Lazy(build)
        results = []

        def read():
            gate.wait()
            results.append(lazy.value)

        threads = [threading.Thread(target=read) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert calls == [1]
        assert all(r is results[0] for r in results)

    def test_shared_period_schedule_identical_across_threads(self, june):
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(june.daily_schedule()))
            for _ in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert all(r is results[0] for r in results)

    def test_schedule_factory_does_not_reference_the_period(self, june):
        factory = june._schedule._factory
        assert all(ref is not june for ref in gc.get_referents(factory))
        assert june.daily_schedule()[0] == june.begin
