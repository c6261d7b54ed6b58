"""
Tests for src/dates/calendar.py

These tests verify date construction, field extraction, year shifting and
formatting across BCE, CE and far-range dates, plus the calendar bounds.
"""

from datetime import date, datetime

import numpy as np
import pytest

from src.dates.calendar import (
    CENTURY_MAX,
    CENTURY_MIN,
    DATE_MAX,
    DATE_MIN,
    FIRST_DAY_CE,
    LAST_DAY_BCE,
    MAX_EPOCH_DAY,
    MIN_EPOCH_DAY,
    YEAR_MAX,
    YEAR_MIN,
    as_calendar_date,
    day_of,
    format_date,
    from_epoch_day,
    is_in_range,
    make_date,
    minus_years,
    month_of,
    plus_years,
    to_epoch_day,
    year_of,
)


# ============================================================================
# Construction and fields
# ============================================================================

@pytest.mark.parametrize("year,month,day", [
    (2000, 1, 1),
    (1969, 12, 31),
    (1, 1, 1),
    (0, 2, 29),          # year 0 (1 BCE) is a leap year
    (-1, 12, 31),
    (-1234, 4, 1),
    (YEAR_MIN, 1, 1),
    (YEAR_MAX, 12, 31),
])
def test_make_date_fields_agree(year, month, day):
    """Test that make_date and the field accessors agree."""
    d = make_date(year, month, day)

    assert year_of(d) == year
    assert month_of(d) == month
    assert day_of(d) == day


def test_make_date_matches_python_dates():
    """Test agreement with the standard library inside its supported range."""
    for d in (date(1, 1, 1), date(1970, 1, 1), date(2024, 2, 29), date(9999, 12, 31)):
        assert make_date(d.year, d.month, d.day) == np.datetime64(d, "D")


def test_make_date_rejects_invalid_fields():
    """Test that impossible dates raise ValueError."""
    with pytest.raises(ValueError):
        make_date(2023, 2, 29)
    with pytest.raises(ValueError):
        make_date(2023, 13, 1)
    with pytest.raises(ValueError):
        make_date(2023, 4, 31)
    with pytest.raises(ValueError):
        make_date(YEAR_MAX + 1, 1, 1)
    with pytest.raises(ValueError):
        make_date(YEAR_MIN - 1, 12, 31)


def test_epoch_day_projection():
    """Test the epoch-day conversion around the epoch and at the bounds."""
    assert to_epoch_day(make_date(1970, 1, 1)) == 0
    assert to_epoch_day(make_date(1969, 12, 31)) == -1
    assert to_epoch_day(make_date(2000, 1, 1)) == 10957
    assert from_epoch_day(10957) == make_date(2000, 1, 1)
    assert from_epoch_day(MIN_EPOCH_DAY) == DATE_MIN
    assert from_epoch_day(MAX_EPOCH_DAY) == DATE_MAX


def test_bounds():
    """Test the calendar constants."""
    assert year_of(DATE_MIN) == -999_999_999
    assert year_of(DATE_MAX) == 999_999_999
    assert MIN_EPOCH_DAY < 0 < MAX_EPOCH_DAY
    assert CENTURY_MIN == -9_999_999
    assert CENTURY_MAX == 9_999_999
    assert to_epoch_day(FIRST_DAY_CE) - to_epoch_day(LAST_DAY_BCE) == 367  # all of leap year 0 sits between
    assert is_in_range(DATE_MIN) and is_in_range(DATE_MAX)
    assert not is_in_range(DATE_MIN - np.timedelta64(1, "D"))
    assert not is_in_range(DATE_MAX + np.timedelta64(1, "D"))


# ============================================================================
# Year shifts
# ============================================================================

def test_minus_years_keeps_month_and_day():
    """Test a plain shift."""
    assert minus_years(make_date(2000, 1, 1), 18) == make_date(1982, 1, 1)
    assert minus_years(make_date(5, 6, 15), 10) == make_date(-5, 6, 15)


def test_minus_years_clamps_leap_day():
    """Test that Feb 29 lands on Feb 28 in a common year."""
    assert minus_years(make_date(2024, 2, 29), 1) == make_date(2023, 2, 28)
    assert minus_years(make_date(2024, 2, 29), 4) == make_date(2020, 2, 29)


def test_plus_years_is_inverse_shift():
    """Test plus_years, including leap-day clamping."""
    assert plus_years(make_date(1982, 1, 1), 18) == make_date(2000, 1, 1)
    assert plus_years(make_date(2000, 2, 29), 100) == make_date(2100, 2, 28)


# ============================================================================
# Formatting and coercion
# ============================================================================

@pytest.mark.parametrize("value,expected", [
    (make_date(2000, 1, 1), "2000-01-01"),
    (make_date(1, 1, 1), "0001-01-01"),
    (make_date(0, 6, 1), "0000-06-01"),
    (make_date(-1, 12, 31), "-0001-12-31"),
    (make_date(-1234, 4, 1), "-1234-04-01"),
    (make_date(10000, 1, 1), "+10000-01-01"),
    (DATE_MIN, "-999999999-01-01"),
    (DATE_MAX, "+999999999-12-31"),
])
def test_format_date(value, expected):
    """Test extended ISO rendering."""
    assert format_date(value) == expected


def test_as_calendar_date_accepts_supported_types():
    """Test coercion of each supported input type."""
    expected = make_date(2015, 1, 5)

    assert as_calendar_date(expected) == expected
    assert as_calendar_date(np.datetime64("2015-01-05T18:30")) == expected
    assert as_calendar_date(date(2015, 1, 5)) == expected
    assert as_calendar_date(datetime(2015, 1, 5, 23, 59)) == expected
    assert as_calendar_date("2015-01-05") == expected
    assert as_calendar_date("-1234-04-01") == make_date(-1234, 4, 1)
    assert as_calendar_date("+999999999-12-31") == DATE_MAX


def test_as_calendar_date_round_trips_format():
    """Test that format_date output parses back to the same date."""
    for d in (DATE_MIN, LAST_DAY_BCE, FIRST_DAY_CE, DATE_MAX):
        assert as_calendar_date(format_date(d)) == d


def test_as_calendar_date_rejects_bad_input():
    """Test rejection of unsupported values."""
    with pytest.raises(TypeError):
        as_calendar_date(20150105)
    with pytest.raises(ValueError):
        as_calendar_date("05/01/2015")
    with pytest.raises(ValueError):
        as_calendar_date(np.datetime64("NaT"))


def test_as_calendar_date_parses_years_just_past_bounds():
    """Test that a string past YEAR_MAX parses so the bounds check can report it."""
    value = as_calendar_date("+1000000000-01-01")

    assert year_of(value) == YEAR_MAX + 1
    assert not is_in_range(value)


def test_as_calendar_date_rejects_far_out_years_and_impossible_days():
    """Test that unrepresentable years and nonexistent days raise ValueError."""
    with pytest.raises(ValueError, match="far outside"):
        as_calendar_date("+5000000000-01-01")
    with pytest.raises(ValueError, match="out of range"):
        as_calendar_date("2000-02-30")
