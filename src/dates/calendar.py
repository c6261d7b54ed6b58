"""
Calendar date helpers built on numpy datetime64.

**Conceptual**: A calendar date here is a numpy `datetime64` with day
resolution. Under the hood that is a signed 64-bit count of days since
1970-01-01, i.e. exactly the "epoch day" the sampling functions draw from.
numpy implements the proleptic Gregorian calendar (leap years, month lengths)
with astronomical year numbering: year 0 is 1 BCE, year -1 is 2 BCE, and so on.

**Range**: numpy can represent far more than we allow. Dates are bounded to
years [YEAR_MIN, YEAR_MAX] = [-999999999, 999999999], giving DATE_MIN =
-999999999-01-01 and DATE_MAX = +999999999-12-31.

This module deliberately offers only what random date generation needs:
construction, conversion, field extraction, whole-year shifts and ISO
formatting. Leap-year and month-length rules come from numpy, never from
hand-written tables.
"""

import re
from datetime import date, datetime

import numpy as np

YEAR_MIN = -999_999_999
YEAR_MAX = 999_999_999

# Truncated toward zero, so the extreme centuries still fit inside the year range
CENTURY_MIN = -(-YEAR_MIN // 100)
CENTURY_MAX = YEAR_MAX // 100

_EPOCH_YEAR = 1970
_ISO_DATE_PATTERN = re.compile(r"^([+-]?\d{4,})-(\d{2})-(\d{2})$")


def _month_start(year: int, month: int) -> np.datetime64:
    """First day of (year, month) with month resolution."""
    return np.datetime64(year - _EPOCH_YEAR, "Y").astype("datetime64[M]") + np.timedelta64(month - 1, "M")


def _month_length(month_start: np.datetime64) -> int:
    next_month = month_start + np.timedelta64(1, "M")
    length = next_month.astype("datetime64[D]") - month_start.astype("datetime64[D]")
    return int(length.astype(np.int64))


def _from_ymd(year: int, month: int, day: int) -> np.datetime64:
    month_start = _month_start(year, month)
    if not 1 <= day <= _month_length(month_start):
        raise ValueError(f"Day {day} is out of range for {year}-{month:02d}")
    return month_start.astype("datetime64[D]") + np.timedelta64(day - 1, "D")


def make_date(year: int, month: int, day: int) -> np.datetime64:
    """
    Build a calendar date from its fields.

    Args:
        year: Astronomical year in [YEAR_MIN, YEAR_MAX] (0 is 1 BCE).
        month: Month in [1, 12].
        day: Day of month, valid for the given month and year.

    Returns:
        numpy datetime64[D].

    Raises:
        ValueError: If any field is out of range.

    Example:
        >>> make_date(-1234, 4, 1)
        numpy.datetime64('-1234-04-01')
    """
    if not YEAR_MIN <= year <= YEAR_MAX:
        raise ValueError(f"Year {year} is out of range [{YEAR_MIN}, {YEAR_MAX}]")
    if not 1 <= month <= 12:
        raise ValueError(f"Month {month} is out of range [1, 12]")
    return _from_ymd(year, month, day)


def to_epoch_day(value: np.datetime64) -> int:
    """Number of days between 1970-01-01 and the date (negative before the epoch)."""
    return int(value.astype("datetime64[D]").astype(np.int64))


def from_epoch_day(epoch_day: int) -> np.datetime64:
    """Calendar date lying `epoch_day` days after 1970-01-01."""
    return np.datetime64(int(epoch_day), "D")


def year_of(value: np.datetime64) -> int:
    return int(value.astype("datetime64[Y]").astype(np.int64)) + _EPOCH_YEAR


def month_of(value: np.datetime64) -> int:
    return int(value.astype("datetime64[M]").astype(np.int64)) % 12 + 1


def day_of(value: np.datetime64) -> int:
    month_start = value.astype("datetime64[M]").astype("datetime64[D]")
    return int((value.astype("datetime64[D]") - month_start).astype(np.int64)) + 1


def minus_years(value: np.datetime64, years: int) -> np.datetime64:
    """
    Shift a date back by whole years.

    The month and day are kept; when the day does not exist in the target
    year (Feb 29 shifted to a common year) it is clamped to the last valid
    day of that month.

    Args:
        value: Date to shift.
        years: Number of years to subtract (negative values add).

    Returns:
        The shifted date.

    Example:
        >>> minus_years(make_date(2024, 2, 29), 1)
        numpy.datetime64('2023-02-28')
    """
    target_year = year_of(value) - years
    month = month_of(value)
    month_start = _month_start(target_year, month)
    day = min(day_of(value), _month_length(month_start))
    return _from_ymd(target_year, month, day)


def plus_years(value: np.datetime64, years: int) -> np.datetime64:
    """Shift a date forward by whole years, clamping Feb 29 like minus_years()."""
    return minus_years(value, -years)


def is_in_range(value: np.datetime64) -> bool:
    return bool(DATE_MIN <= value <= DATE_MAX)


def format_date(value: np.datetime64) -> str:
    """
    Render a date in extended ISO-8601 form.

    Years are zero padded to four digits, negative years carry a leading '-'
    and years above 9999 carry a leading '+', so DATE_MIN reads
    "-999999999-01-01" and DATE_MAX reads "+999999999-12-31".
    """
    year = year_of(value)
    if abs(year) < 1000:
        year_text = f"-{-year:04d}" if year < 0 else f"{year:04d}"
    elif year > 9999:
        year_text = f"+{year}"
    else:
        year_text = str(year)
    return f"{year_text}-{month_of(value):02d}-{day_of(value):02d}"


def as_calendar_date(value) -> np.datetime64:
    """
    Coerce a date-like value to a numpy datetime64[D].

    Accepted inputs:
      - numpy datetime64 of any unit (finer units are truncated to the day).
      - datetime.date or datetime.datetime (time of day is dropped).
      - ISO strings "YYYY-MM-DD", including signed and extended years such
        as "-1234-04-01" or "+999999999-12-31".

    Raises:
        TypeError: For unsupported input types.
        ValueError: For NaT, malformed strings or impossible dates.

    Strings with a year just past [YEAR_MIN, YEAR_MAX] are returned as-is;
    use is_in_range() to check the bounds.
    """
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise ValueError("NaT is not a calendar date")
        return value.astype("datetime64[D]")
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return np.datetime64(value.isoformat(), "D")
    if isinstance(value, str):
        match = _ISO_DATE_PATTERN.match(value.strip())
        if match is None:
            raise ValueError(f"Expected an ISO date like YYYY-MM-DD, got: {value!r}")
        year, month, day = (int(group) for group in match.groups())
        # Years past the bounds still parse so callers can report the range;
        # beyond twice the bound numpy's month arithmetic would overflow
        if abs(year) > 2 * YEAR_MAX:
            raise ValueError(f"Year {year} is far outside [{YEAR_MIN}, {YEAR_MAX}]")
        if not 1 <= month <= 12:
            raise ValueError(f"Month {month} is out of range [1, 12]")
        return _from_ymd(year, month, day)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a calendar date")


DATE_MIN = make_date(YEAR_MIN, 1, 1)
DATE_MAX = make_date(YEAR_MAX, 12, 31)
MIN_EPOCH_DAY = to_epoch_day(DATE_MIN)
MAX_EPOCH_DAY = to_epoch_day(DATE_MAX)

FIRST_DAY_CE = make_date(1, 1, 1)
LAST_DAY_BCE = make_date(-1, 12, 31)
