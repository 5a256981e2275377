from __future__ import annotations

# Standard Library Imports
from datetime import date, datetime, timedelta, timezone

# Third Party Imports
import pytest
from numpy import isclose

# Meeus Nutation Imports
from meeus_nutation.physics.time.stardate import (
    JulianDate,
    datetimeToJulianDate,
    getCalendarDate,
    getDaysInMonth,
)

# [NOTE]: Reference values from Meeus, Astronomical Algorithms, Chapter 7
CALENDAR_TO_JULIAN: list[tuple[tuple[int, int, int, int, int, float], float]] = [
    ((2000, 1, 1, 12, 0, 0.0), 2451545.0),
    ((1999, 1, 1, 0, 0, 0.0), 2451179.5),
    ((1987, 1, 27, 0, 0, 0.0), 2446822.5),
    ((1988, 6, 19, 12, 0, 0.0), 2447332.0),
    ((1900, 1, 1, 0, 0, 0.0), 2415020.5),
    ((1600, 1, 1, 0, 0, 0.0), 2305447.5),
    ((1582, 10, 15, 0, 0, 0.0), 2299160.5),
    ((1582, 10, 4, 0, 0, 0.0), 2299159.5),
    ((837, 4, 10, 7, 12, 0.0), 2026871.8),
    ((333, 1, 27, 12, 0, 0.0), 1842713.0),
    ((-1000, 7, 12, 12, 0, 0.0), 1356001.0),
    ((-4712, 1, 1, 12, 0, 0.0), 0.0),
    ((2015, 10, 10, 0, 0, 0.0), 2457305.5),
]


@pytest.mark.parametrize(("calendar", "julian_date"), CALENDAR_TO_JULIAN)
def testGetJulianDate(calendar: tuple[int, int, int, int, int, float], julian_date: float):
    """Test calendar date to Julian date, on both sides of the Gregorian reform."""
    result = JulianDate.getJulianDate(*calendar)
    assert isinstance(result, JulianDate)
    assert isclose(float(result), julian_date, rtol=0.0, atol=1e-6)


@pytest.mark.parametrize(("calendar", "julian_date"), CALENDAR_TO_JULIAN)
def testCalendarDate(calendar: tuple[int, int, int, int, int, float], julian_date: float):
    """Test Julian date back to a calendar date."""
    year, month, day, hour, minute, second = JulianDate(julian_date).calendar_date
    assert (year, month, day, hour, minute) == calendar[:5]
    assert isclose(second, calendar[5], atol=1e-3)


def testMeeusExample7c():
    """JD 2436116.31 is 1957 October 4.81."""
    year, month, day, hour, minute, second = getCalendarDate(2436116.31)
    assert (year, month, day) == (1957, 10, 4)
    assert isclose(hour + minute / 60 + second / 3600, 0.81 * 24, atol=1e-6)


@pytest.mark.parametrize("year", [-8100, -4713, -1, 0, 1, 12100])
def testDistantYears(year: int):
    """Years outside of ``datetime``'s range still round trip, including negative Julian dates."""
    julian_date = JulianDate.getJulianDate(year, 3, 1)
    assert julian_date.calendar_date[:3] == (year, 3, 1)


BAD_CALENDAR_DATES: list[tuple[int, int, int, int, int, float]] = [
    (2015, 13, 1, 0, 0, 0.0),
    (2015, 0, 1, 0, 0, 0.0),
    (2015, 1, 0, 0, 0, 0.0),
    (2015, 1, 32, 0, 0, 0.0),
    (2015, 2, 29, 0, 0, 0.0),
    (2016, 2, 30, 0, 0, 0.0),
    (1900, 2, 29, 0, 0, 0.0),
    (2015, 4, 31, 0, 0, 0.0),
    (2015, 1, 1, 24, 0, 0.0),
    (2015, 1, 1, 0, 60, 0.0),
    (2015, 1, 1, 0, 0, 60.0),
    (2015, 1, 1, 0, 0, -1.0),
    (1582, 10, 10, 0, 0, 0.0),
]


@pytest.mark.parametrize("calendar", BAD_CALENDAR_DATES)
def testBadCalendarDate(calendar: tuple[int, int, int, int, int, float]):
    """Invalid calendar fields are rejected instead of rolling over."""
    with pytest.raises(ValueError, match="JulianDate"):
        JulianDate.getJulianDate(*calendar)


@pytest.mark.parametrize(
    ("year", "month", "days"),
    [(2015, 2, 28), (2016, 2, 29), (1900, 2, 28), (2000, 2, 29), (1500, 2, 29), (-4, 2, 29), (2015, 4, 30)],
)
def testDaysInMonth(year: int, month: int, days: int):
    """Julian leap years before the reform, Gregorian after."""
    assert getDaysInMonth(year, month) == days
    JulianDate.getJulianDate(year, month, days, 23, 59, 59.999)


def testDatetimeConversions():
    """Naive datetimes are UTC, aware ones are converted to UTC."""
    assert datetimeToJulianDate(datetime(2015, 10, 10)) == 2457305.5
    assert datetimeToJulianDate(date(2015, 10, 10)) == 2457305.5

    aware = datetime(2015, 10, 10, 2, tzinfo=timezone(timedelta(hours=2)))
    assert datetimeToJulianDate(aware) == 2457305.5

    date_time = datetime(2015, 10, 14, 4, 34, 10, 500000)
    expected = JulianDate.getJulianDate(2015, 10, 14, 4, 34, 10.5)
    assert isclose(datetimeToJulianDate(date_time), expected, rtol=0.0, atol=1e-8)


@pytest.mark.parametrize(
    ("date_like", "julian_date"),
    [
        (date(1000, 1, 1), 2086302.5),
        (datetime(1, 1, 1), 1721425.5),
        (datetime(1582, 10, 10), 2299155.5),
        (datetime(1582, 10, 14), 2299159.5),
        (datetime(1582, 10, 15), 2299160.5),
    ],
)
def testProlepticGregorian(date_like: date, julian_date: float):
    """Python dates are proleptic Gregorian, even across the reform."""
    assert datetimeToJulianDate(date_like) == julian_date


def testProlepticGregorianMatchesJulianCalendar():
    """Proleptic Gregorian 1582 October 14 is Julian calendar 1582 October 4."""
    assert datetimeToJulianDate(datetime(1582, 10, 14)) == JulianDate.getJulianDate(1582, 10, 4)


def testRepr():
    """The representation shows the UTC calendar date."""
    assert repr(JulianDate(2451545.0)) == "JulianDate(2451545.0, UTC=2000-01-01T12:00:00.000)"
