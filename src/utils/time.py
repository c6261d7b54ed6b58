"""
Clock abstractions for deterministic "today" in date generation.

This module provides a simple, testable way to obtain today's date via a clock
object rather than calling date.today() directly. Functions such as
random_date_before_now() ask a Clock for "today", so tests can freeze it to a
known date and assert exact bounds.
"""

from datetime import date
from typing import Protocol

import numpy as np

from src.dates.calendar import as_calendar_date


class Clock(Protocol):
    """
    Abstract source of the current calendar date.

    **Usage**: Consumers accept a Clock (usually as a keyword argument) and call
    clock.today() whenever they need the current date. In production, pass a
    RealClock (or nothing, it is the default); in tests, pass a FrozenClock.

    **Example**:
        def pick(clock: Clock):
            today = clock.today()

        pick(RealClock())
        pick(FrozenClock(date(2015, 1, 5)))
    """

    def today(self) -> np.datetime64:
        """
        Return today's date according to this clock.

        Returns:
            numpy datetime64 with day resolution.
        """
        ...


class RealClock:
    """
    Clock that returns the system's current local date.

    The local date (not UTC) is used, matching what a person filling in a
    birth date form would call "today".
    """

    def today(self) -> np.datetime64:
        return as_calendar_date(date.today())


class FrozenClock:
    """
    Clock that always returns a fixed date (for deterministic tests).

    **Usage**:
        clock = FrozenClock(date(2015, 1, 5))
        clock.today()  # numpy.datetime64('2015-01-05')

    Accepts anything as_calendar_date() understands: datetime.date,
    numpy datetime64 or an ISO "YYYY-MM-DD" string.
    """

    def __init__(self, fixed_today):
        self._fixed_today = as_calendar_date(fixed_today)

    def today(self) -> np.datetime64:
        return self._fixed_today


def get_real_clock() -> Clock:
    """Factory function to create a RealClock instance."""
    return RealClock()


def get_frozen_clock(fixed_today) -> Clock:
    """
    Factory function to create a FrozenClock with a given date.

    Args:
        fixed_today: The date to freeze at.

    Returns:
        FrozenClock instance configured with fixed_today.
    """
    return FrozenClock(fixed_today)
