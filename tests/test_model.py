import calendar
from datetime import date, timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from timenorm.model import (
    RelTime,
    Time,
    day_of_week,
    days_in_month,
    hms_to_seconds,
    is_leap,
)


@given(st.integers(min_value=-10000, max_value=10000))
def test_is_leap_matches_calendar(year):
    assert is_leap(year) == calendar.isleap(year)


@given(st.integers(min_value=1, max_value=9999), st.integers(min_value=1, max_value=12))
def test_days_in_month_matches_calendar(year, month):
    assert days_in_month(year, month) == calendar.monthrange(year, month)[1]


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(2000, month)


@given(st.dates(min_value=date(1, 1, 1), max_value=date(9999, 12, 31)))
def test_day_of_week_matches_date(value):
    assert day_of_week(value.year, value.month, value.day) == value.isoweekday() % 7


@given(st.dates(min_value=date(2, 1, 1), max_value=date(9998, 12, 31)),
       st.integers(min_value=-500, max_value=500))
def test_day_of_week_carries_days(value, offset):
    shifted = value + timedelta(days=offset)
    assert day_of_week(value.year, value.month, value.day + offset) == (
        shifted.isoweekday() % 7
    )


@given(st.integers(min_value=1, max_value=9000), st.integers(min_value=1, max_value=12),
       st.integers(min_value=1, max_value=28))
def test_day_of_week_carries_months(year, month, day):
    assert day_of_week(year, month + 12, day) == day_of_week(year + 1, month, day)


@given(st.integers(min_value=-100, max_value=100), st.integers(min_value=-100, max_value=100),
       st.integers(min_value=-100, max_value=100))
def test_hms_to_seconds(h, i, s):
    expected = timedelta(hours=h, minutes=i, seconds=s).total_seconds()
    assert hms_to_seconds(h, i, s) == expected


def test_time_relative_not_shared():
    a = Time()
    b = Time()
    a.relative.d = 5
    assert b.relative.d == 0
    assert RelTime().special.amount == 0