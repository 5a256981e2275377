from __future__ import annotations

# Standard Library Imports
from datetime import date, datetime, timedelta

# Third Party Imports
import pytest
from numpy import isclose

# Meeus Nutation Imports
from meeus_nutation.physics.time.conversions import (
    formatSeconds,
    getCalendarYear,
    getJulianDate,
    getTimeFactor,
)
from meeus_nutation.physics.time.stardate import JulianDate


def testGetJulianDate():
    """Every accepted date type resolves to the same Julian date."""
    expected = 2457305.5
    assert getJulianDate(datetime(2015, 10, 10)) == expected
    assert getJulianDate(date(2015, 10, 10)) == expected
    assert getJulianDate(JulianDate(expected)) == expected
    assert getJulianDate(expected) == expected
    assert isinstance(getJulianDate(expected), JulianDate)


@pytest.mark.parametrize("bad_date", ["2015-10-10", None, True, [2457305.5]])
def testGetJulianDateBadType(bad_date):
    """Unsupported date types are rejected."""
    with pytest.raises(TypeError):
        getJulianDate(bad_date)


TIME_FACTORS: list[tuple[datetime | JulianDate, float]] = [
    (datetime(2000, 1, 1, 12), 0.0),
    (JulianDate(2451545.0 + 36525.0), 1.0),
    (JulianDate(2451545.0 - 36525.0), -1.0),
    (datetime(2015, 7, 10), 5668.5 / 36525.0),
    (JulianDate(2446895.5), -0.127296372348),
]


@pytest.mark.parametrize(("date_like", "time_factor"), TIME_FACTORS)
def testGetTimeFactor(date_like: datetime | JulianDate, time_factor: float):
    """Time factor is Julian centuries since J2000.0."""
    assert isclose(getTimeFactor(date_like), time_factor, rtol=0.0, atol=1e-12)


def testGetCalendarYear():
    """Calendar years are available for dates ``datetime`` can't hold."""
    assert getCalendarYear(datetime(2015, 7, 10)) == 2015
    assert getCalendarYear(JulianDate.getJulianDate(12100, 1, 1)) == 12100
    assert getCalendarYear(JulianDate.getJulianDate(-8100, 1, 1)) == -8100


def testFormatSeconds():
    """Durations print as signed seconds."""
    assert formatSeconds(timedelta(seconds=-0.0786)) == "-0.0786s"
    assert formatSeconds(timedelta(seconds=1.5), decimals=1) == "1.5s"


@pytest.mark.parametrize(
    ("date_like", "julian_date"),
    [(date(1000, 1, 1), 2086302.5), (datetime(1582, 10, 10), 2299155.5), (datetime(1000, 1, 1, 12), 2086303.0)],
)
def testGetJulianDateBeforeReform(date_like: date, julian_date: float):
    """Python dates before the Gregorian reform keep their proleptic Gregorian day."""
    assert getJulianDate(date_like) == julian_date
