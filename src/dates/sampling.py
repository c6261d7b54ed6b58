"""
Random calendar date generation under constraints.

**Conceptual**: Every function here turns a date-domain constraint ("before
this date", "in the 21st century", "an adult born relative to this date")
into a half-open interval of epoch days [low, high), draws one integer from
that interval with a RangeSampler, and converts it back to a calendar date.
Because epoch days map one-to-one onto dates, a uniform integer gives a
uniform date.

**Functionally**:
- Inputs are validated before any randomness is consumed; violations raise
  ValidationError with a stable message and nothing else happens.
- All functions take a keyword-only `sampler` (default: the process-wide
  sampler from src.utils.rng). Pass a seeded sampler for reproducible output.
- The "now" variants take a keyword-only `clock` (default: RealClock) so
  tests can freeze "today".
- Date arguments accept anything as_calendar_date() understands
  (numpy datetime64, datetime.date, ISO strings) and must lie within
  [DATE_MIN, DATE_MAX].

**Usage**:
    from src.dates.sampling import random_adult_birth_date
    from src.utils.rng import get_seeded_sampler

    birth = random_adult_birth_date(18, "2000-01-01", sampler=get_seeded_sampler(7))
"""

from typing import Optional

import numpy as np

from src.dates.calendar import (
    CENTURY_MAX,
    CENTURY_MIN,
    DATE_MAX,
    DATE_MIN,
    FIRST_DAY_CE,
    LAST_DAY_BCE,
    MAX_EPOCH_DAY,
    MIN_EPOCH_DAY,
    YEAR_MIN,
    as_calendar_date,
    format_date,
    from_epoch_day,
    is_in_range,
    make_date,
    minus_years,
    to_epoch_day,
    year_of,
)
from src.dates.exceptions import ValidationError
from src.utils.logger import get_logger
from src.utils.rng import RangeSampler, get_default_sampler
from src.utils.time import Clock, RealClock

# Nobody is assumed to be older than this when generating birth dates
MAX_AGE = 120

logger = get_logger("sampling")


def _sample(low_inclusive: int, high_exclusive: int, sampler: Optional[RangeSampler]) -> np.datetime64:
    if sampler is None:
        sampler = get_default_sampler()
    logger.debug("Sampling epoch day in [%d, %d)", low_inclusive, high_exclusive)
    return from_epoch_day(sampler.sample_between(low_inclusive, high_exclusive))


def _reject(message: str, source: str) -> ValidationError:
    logger.debug("%s rejected its input: %s", source, message)
    return ValidationError(message, source=source)


def _checked_date(value, source: str) -> np.datetime64:
    try:
        calendar_date = as_calendar_date(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise _reject(f"The given date {value!r} is not a valid calendar date: {e}", source) from e
    if not is_in_range(calendar_date):
        raise _reject(
            f"The given date {format_date(calendar_date)} is outside the supported range "
            f"{format_date(DATE_MIN)} to {format_date(DATE_MAX)}.",
            source,
        )
    return calendar_date


def _today(clock: Optional[Clock]) -> np.datetime64:
    if clock is None:
        clock = RealClock()
    return clock.today()


def _check_age_upper_bound(age_of_majority: int, source: str) -> None:
    if age_of_majority > MAX_AGE:
        raise _reject(
            f"The given age of majority cannot be greater than the maximum age {MAX_AGE}",
            source,
        )
    if age_of_majority < 0:
        raise _reject("The given age of majority cannot be negative", source)


def random_date(*, sampler: Optional[RangeSampler] = None) -> np.datetime64:
    """Uniformly random date in [DATE_MIN, DATE_MAX]."""
    return _sample(MIN_EPOCH_DAY, MAX_EPOCH_DAY + 1, sampler)


def random_bce_date(*, sampler: Optional[RangeSampler] = None) -> np.datetime64:
    """
    Uniformly random date before the Common Era.

    Range: [DATE_MIN, LAST_DAY_BCE] where LAST_DAY_BCE is -0001-12-31.
    """
    return _sample(MIN_EPOCH_DAY, to_epoch_day(LAST_DAY_BCE) + 1, sampler)


def random_ce_date(*, sampler: Optional[RangeSampler] = None) -> np.datetime64:
    """
    Uniformly random date in the Common Era.

    Range: [0001-01-01, DATE_MAX].
    """
    return _sample(to_epoch_day(FIRST_DAY_CE), MAX_EPOCH_DAY + 1, sampler)


def random_date_before(max_date, *, sampler: Optional[RangeSampler] = None) -> np.datetime64:
    """
    Uniformly random date strictly before `max_date`.

    Args:
        max_date: Exclusive upper bound.
        sampler: Randomness source (default: process-wide sampler).

    Returns:
        A date in [DATE_MIN, max_date).

    Raises:
        ValidationError: If max_date is DATE_MIN (no earlier date exists) or
                         lies outside the supported range.
    """
    max_date = _checked_date(max_date, "random_date_before")
    if max_date == DATE_MIN:
        raise _reject(
            f"The given date is equals to the minimum date {format_date(DATE_MIN)}. "
            "It needs to be after it.",
            "random_date_before",
        )
    return _sample(MIN_EPOCH_DAY, to_epoch_day(max_date), sampler)


def random_date_after(min_date, *, sampler: Optional[RangeSampler] = None) -> np.datetime64:
    """
    Uniformly random date strictly after `min_date`.

    Args:
        min_date: Exclusive lower bound.
        sampler: Randomness source (default: process-wide sampler).

    Returns:
        A date in (min_date, DATE_MAX].

    Raises:
        ValidationError: If min_date is DATE_MAX (no later date exists) or
                         lies outside the supported range.
    """
    min_date = _checked_date(min_date, "random_date_after")
    if min_date == DATE_MAX:
        raise _reject(
            f"The given date is equals to the maximum date {format_date(DATE_MAX)}. "
            "It needs to be before it.",
            "random_date_after",
        )
    return _sample(to_epoch_day(min_date) + 1, MAX_EPOCH_DAY + 1, sampler)


def random_date_before_now(
    *,
    clock: Optional[Clock] = None,
    sampler: Optional[RangeSampler] = None,
) -> np.datetime64:
    """Uniformly random date in [DATE_MIN, today)."""
    return _sample(MIN_EPOCH_DAY, to_epoch_day(_today(clock)), sampler)


def random_date_after_now(
    *,
    clock: Optional[Clock] = None,
    sampler: Optional[RangeSampler] = None,
) -> np.datetime64:
    """Uniformly random date in (today, DATE_MAX]."""
    return _sample(to_epoch_day(_today(clock)) + 1, MAX_EPOCH_DAY + 1, sampler)


def random_date_between(min_date, max_date, *, sampler: Optional[RangeSampler] = None) -> np.datetime64:
    """
    Uniformly random date in [min_date, max_date], both ends included.

    Equal bounds are allowed and always return that date.

    Raises:
        ValidationError: If min_date is after max_date, or either bound lies
                         outside the supported range.
    """
    min_date = _checked_date(min_date, "random_date_between")
    max_date = _checked_date(max_date, "random_date_between")
    if min_date > max_date:
        raise _reject(
            "The minimum given date is after the maximum given date",
            "random_date_between",
        )
    return _sample(to_epoch_day(min_date), to_epoch_day(max_date) + 1, sampler)


def random_date_in_century(century: int, *, sampler: Optional[RangeSampler] = None) -> np.datetime64:
    """
    Uniformly random date within a century.

    **Conceptual**: Centuries follow the historical convention: the 21st
    century runs from 2001-01-01 to 2100-12-31, and there is no century zero.
    Century c covers years [(c - 1) * 100 + 1, c * 100]; negative centuries
    apply the same formula on the astronomical year axis.

    Args:
        century: Nonzero century in [CENTURY_MIN, CENTURY_MAX].
        sampler: Randomness source (default: process-wide sampler).

    Returns:
        A date whose year lies in the century.

    Raises:
        ValidationError: If century is out of range or zero.

    Example:
        >>> year_of(random_date_in_century(21)) in range(2001, 2101)
        True
    """
    if century < CENTURY_MIN or century > CENTURY_MAX:
        raise _reject(
            f"The given century needs to be between {CENTURY_MIN} and {CENTURY_MAX}.",
            "random_date_in_century",
        )
    if century == 0:
        raise _reject(
            "The given century cannot have value zero as the Gregorian calendar "
            "does not have a zero century.",
            "random_date_in_century",
        )

    start_date = make_date((century - 1) * 100 + 1, 1, 1)
    end_date = make_date(century * 100, 12, 31)
    return _sample(to_epoch_day(start_date), to_epoch_day(end_date) + 1, sampler)


def random_adult_birth_date(
    age_of_majority: int,
    reference_date,
    *,
    sampler: Optional[RangeSampler] = None,
) -> np.datetime64:
    """
    Random birth date of someone who is an adult on `reference_date`.

    **Conceptual**: An adult is at least `age_of_majority` years old and, by
    assumption, at most MAX_AGE (120) years old. The birth date therefore lies
    in [reference - 120 years, reference - age_of_majority years], both ends
    included.

    **Edge cases**:
    - If reference_date.year - age_of_majority falls below YEAR_MIN the
      majority cutoff cannot be represented and the call fails.
    - If only reference_date.year - 120 falls below YEAR_MIN, the lower bound
      is clamped to DATE_MIN instead.
    - Shifting Feb 29 into a common year lands on Feb 28.

    Args:
        age_of_majority: Age at which a person stops being a minor, in [0, 120].
        reference_date: Date on which the person must be an adult.
        sampler: Randomness source (default: process-wide sampler).

    Returns:
        The sampled birth date.

    Raises:
        ValidationError: On year underflow of the majority cutoff, an age of
                         majority above MAX_AGE or below zero, or a reference
                         date outside the supported range.
    """
    source = "random_adult_birth_date"
    reference_date = _checked_date(reference_date, source)
    reference_year = year_of(reference_date)

    if reference_year - age_of_majority < YEAR_MIN:
        raise _reject(
            "The given date cannot have a year where the age of majority year calculated "
            f"is less than the minimum allowed year {YEAR_MIN}",
            source,
        )
    _check_age_upper_bound(age_of_majority, source)

    high_exclusive = to_epoch_day(minus_years(reference_date, age_of_majority)) + 1
    if reference_year - MAX_AGE < YEAR_MIN:
        low_inclusive = MIN_EPOCH_DAY
    else:
        low_inclusive = to_epoch_day(minus_years(reference_date, MAX_AGE))
    return _sample(low_inclusive, high_exclusive, sampler)


def random_minor_birth_date(
    age_of_majority: int,
    reference_date,
    *,
    sampler: Optional[RangeSampler] = None,
) -> np.datetime64:
    """
    Random birth date of someone who is still a minor on `reference_date`.

    **Conceptual**: A minor was born on or before the reference date and
    strictly after the majority cutoff (reference - age_of_majority years).
    The birth date lies in (reference - age_of_majority years, reference].

    **Edge cases**:
    - If reference_date.year - age_of_majority falls below YEAR_MIN, the
      lower bound is clamped to DATE_MIN (inclusive). Unlike
      random_adult_birth_date this does not fail.
    - An age of majority of zero leaves no possible minor and is rejected.

    Args:
        age_of_majority: Age at which a person stops being a minor, in [1, 120].
        reference_date: Date on which the person must still be a minor.
        sampler: Randomness source (default: process-wide sampler).

    Returns:
        The sampled birth date.

    Raises:
        ValidationError: If age_of_majority is above MAX_AGE, not positive,
                         or reference_date lies outside the supported range.
    """
    source = "random_minor_birth_date"
    reference_date = _checked_date(reference_date, source)
    _check_age_upper_bound(age_of_majority, source)
    if age_of_majority == 0:
        raise _reject(
            "The given age of majority must be greater than zero for a minor birth date to exist",
            source,
        )

    high_exclusive = to_epoch_day(reference_date) + 1
    if year_of(reference_date) - age_of_majority < YEAR_MIN:
        low_inclusive = MIN_EPOCH_DAY
    else:
        low_inclusive = to_epoch_day(minus_years(reference_date, age_of_majority)) + 1
    return _sample(low_inclusive, high_exclusive, sampler)


def random_adult_birth_date_from_now(
    age_of_majority: int,
    *,
    clock: Optional[Clock] = None,
    sampler: Optional[RangeSampler] = None,
) -> np.datetime64:
    """random_adult_birth_date() with today as the reference date."""
    return random_adult_birth_date(age_of_majority, _today(clock), sampler=sampler)


def random_minor_birth_date_from_now(
    age_of_majority: int,
    *,
    clock: Optional[Clock] = None,
    sampler: Optional[RangeSampler] = None,
) -> np.datetime64:
    """random_minor_birth_date() with today as the reference date."""
    return random_minor_birth_date(age_of_majority, _today(clock), sampler=sampler)
