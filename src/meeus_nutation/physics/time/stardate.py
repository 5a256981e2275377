"""Defines the :class:`.JulianDate` class and supporting calendar conversions.

Julian dates are plain ``float`` values, so it is easy to mix them up with other
floating point quantities. Subclassing ``float`` keeps them usable in arithmetic while
letting functions recognise that they were handed a Julian date rather than a
``datetime``.

The calendar algorithms follow :cite:t:`meeus_1998_algorithms`, Chapter 7, and therefore work
for any year, including years that ``datetime`` cannot represent (before 1 or after 9999).
Calendar fields given directly to :meth:`.JulianDate.getJulianDate` before 1582 October 15 are
interpreted in the Julian calendar. ``datetime`` objects always use the proleptic Gregorian
calendar, so :func:`.datetimeToJulianDate` counts their days with ``toordinal()`` instead.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timezone

# Third Party Imports
from numpy import floor

# Local Imports
from .. import constants as const

DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
"""``tuple``: length of each month in a common year."""


def isGregorianDate(year: int, month: int, day: float) -> bool:
    """Return ``True`` if the calendar date falls on or after the Gregorian reform.

    Raises:
        ``ValueError``: if the date is one of the ten days dropped by the reform
            (1582 October 5 through 14).
    """
    if year != 1582:
        return year > 1582
    if month != 10:
        return month > 10
    if day < 5.0:
        return False
    if day < 15.0:
        raise ValueError(f"JulianDate: 1582 October {int(day)} does not exist in either calendar.")
    return True


def getDaysInMonth(year: int, month: int) -> int:
    """Return the number of days in `month` of `year`.

    Years before the reform follow the Julian leap year rule, where every fourth year is a leap
    year. Later years also skip century years not divisible by 400.
    """
    if month != 2:
        return DAYS_IN_MONTH[month - 1]

    leap = year % 4 == 0
    if year > 1582:
        leap = leap and (year % 100 != 0 or year % 400 == 0)
    return 29 if leap else 28


class JulianDate(float):
    """Class representing a Julian date in floating point form.

    This class allows better introspection and conversion to other time formats.
    """

    @classmethod
    def getJulianDate(cls, year, month, day, hour=0, minute=0, second=0.0):
        """From a calendar date & time in UTC [ymdhms], return the :class:`.JulianDate`.

        References:
            :cite:t:`meeus_1998_algorithms`, Chapter 7, Eqn 7.1

        Args:
            year (int): Calendar year, astronomical numbering (year 0 is 1 BC)
            month (int): Month of the year
            day (int): Day of the month
            hour (int): Hours in the day (UTC)
            minute (int): Minutes in the hour (UTC)
            second (float): Seconds in the minute (UTC)

        Raises:
            ``ValueError``: if any field is out of range, including days past the end of the
                month, or the date was dropped by the Gregorian reform.

        Returns:
            :class:`.JulianDate`: corresponding date & time in Julian date format
        """
        # Make sure we have correct inputs for months and days
        if month > 12 or month < 1:
            raise ValueError("JulianDate: Month must be an integer (1-12).")
        if day > (month_length := getDaysInMonth(year, month)) or day < 1:
            raise ValueError(f"JulianDate: Day must be an integer (1-{month_length}) for {year}-{month:02d}.")
        # Ensure hr/min/sec are properly input
        if hour >= 24.0 or hour < 0.0:
            raise ValueError("JulianDate: Hour must be a float [0-24).")
        if minute >= 60.0 or minute < 0.0:
            raise ValueError("JulianDate: Minute must be a float [0-60).")
        if second >= 60.0 or second < 0.0:
            raise ValueError("JulianDate: Second must be a float [0-60).")

        fractional_day = day + (second + minute * 60 + hour * 3600) / const.DAYS2SEC
        gregorian = isGregorianDate(year, month, fractional_day)

        # January and February are counted as months 13 and 14 of the previous year
        if month <= 2:
            year -= 1
            month += 12

        correction = 0
        if gregorian:
            century = floor(year / 100)
            correction = 2 - century + floor(century / 4)

        julian_day = (
            floor(365.25 * (year + 4716))
            + floor(30.6001 * (month + 1))
            + fractional_day
            + correction
            - 1524.5
        )
        return cls(julian_day)

    @property
    def calendar_date(self):
        """Helper method to retrieve calendar date from JulianDate object."""
        return getCalendarDate(self)

    def __repr__(self):
        """Return a string representation of this :class:`.JulianDate`."""
        year, month, day, hour, minute, second = self.calendar_date
        return (
            f"JulianDate({float(self)}, "
            f"UTC={year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:06.3f})"
        )

    def __str__(self):
        """Return a string representation of this :class:`.JulianDate`."""
        return self.__repr__()


def getCalendarDate(julian_date):
    """From a Julian date return the calendar date & time in UTC.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 7, Pg. 63

    Note:
        Meeus' method is not valid for negative Julian days. Those dates all fall in the
        Julian calendar, where 1461 days are exactly four years, so whole four-year cycles
        are added before converting and removed from the year afterwards.

    Returns:
        ``tuple``: (year, month, day, hour, minute, second)
    """
    julian_date = float(julian_date)
    shifted_cycles = 0
    if julian_date < 0.0:
        shifted_cycles = int(floor(-julian_date / const.DAYS_PER_JULIAN_CYCLE)) + 1
        julian_date += shifted_cycles * const.DAYS_PER_JULIAN_CYCLE

    julian_date += 0.5
    whole = int(floor(julian_date))
    # Julian dates near 2.4e6 only resolve ~0.1 ms, so keep whole milliseconds
    total_seconds = round((julian_date - whole) * const.DAYS2SEC, 3)
    if total_seconds >= const.DAYS2SEC:
        whole += 1
        total_seconds -= const.DAYS2SEC

    if whole < const.GREGORIAN_REFORM_JULIAN_DAY:
        shifted = whole
    else:
        alpha = int((whole - 1867216.25) / 36524.25)
        shifted = whole + 1 + alpha - int(alpha / 4)

    b_val = shifted + 1524
    c_val = int((b_val - 122.1) / 365.25)
    d_val = int(365.25 * c_val)
    e_val = int((b_val - d_val) / 30.6001)

    day = b_val - d_val - int(30.6001 * e_val)
    month = e_val - 1 if e_val < 14 else e_val - 13
    year = c_val - 4716 if month > 2 else c_val - 4715
    year -= 4 * shifted_cycles

    # Find hours, minutes, and seconds in the day
    hour = int(total_seconds // 3600)
    minute = int((total_seconds - hour * 3600) // 60)
    second = total_seconds - hour * 3600 - minute * 60

    return year, month, day, hour, minute, second


def datetimeToJulianDate(date_time):
    """Convert a ``datetime`` or ``date`` object to a :class:`.JulianDate`.

    Naive ``datetime`` objects are assumed to already be in UTC; aware ones are
    converted to UTC first. A ``date`` is taken at 0h UTC.

    Note:
        Python dates use the proleptic Gregorian calendar for every year, so days are counted
        from the ordinal rather than switching to the Julian calendar before 1582.

    Args:
        date_time (datetime): ``datetime`` or ``date`` object to be converted.

    Returns:
        JulianDate: Converted :class:`.JulianDate` object.
    """
    day_fraction = 0.0
    if isinstance(date_time, datetime):
        if date_time.tzinfo is not None:
            date_time = date_time.astimezone(timezone.utc)

        seconds = date_time.hour * 3600 + date_time.minute * 60 + date_time.second
        day_fraction = (seconds + date_time.microsecond / 1e6) / const.DAYS2SEC

    return JulianDate(date_time.toordinal() + const.ORDINAL_JULIAN_DATE_OFFSET + day_fraction)
