"""Helper functions that convert between different forms of time."""

from __future__ import annotations

# Standard Library Imports
import datetime
from numbers import Real
from typing import TYPE_CHECKING, Union

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.logger import meeusLogError
from .. import constants as const
from .stardate import JulianDate, datetimeToJulianDate

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing_extensions import TypeAlias

DateLike: TypeAlias = Union[datetime.datetime, datetime.date, JulianDate, float]
"""Anything that can be turned into a UTC Julian date."""


def getJulianDate(date: DateLike) -> JulianDate:
    """Resolve `date` to a UTC :class:`.JulianDate`.

    Args:
        date (:data:`.DateLike`): a ``datetime`` (naive means UTC), a ``date`` (taken at 0h UTC),
            a :class:`.JulianDate`, or a real number interpreted as a Julian date.

    Raises:
        ``TypeError``: if `date` is none of the accepted types.

    Returns:
        :class:`.JulianDate`: the Julian date of `date`.
    """
    if isinstance(date, JulianDate):
        return date

    # ``datetime`` is a subclass of ``date``
    if isinstance(date, datetime.date):
        return datetimeToJulianDate(date)

    if isinstance(date, Real) and not isinstance(date, bool):
        return JulianDate(date)

    meeusLogError(f"Cannot derive a Julian date from {type(date)}")
    raise TypeError(type(date))


def getTimeFactor(date: DateLike) -> float:
    """Return the number of Julian centuries between J2000.0 and `date`.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 22, Eqn 22.1

    Args:
        date (:data:`.DateLike`): date to evaluate.

    Returns:
        ``float``: :math:`T = (JD - 2451545.0) / 36525`, negative before J2000.
    """
    return (float(getJulianDate(date)) - const.J2000_JULIAN_DATE) / const.DAYS_PER_JULIAN_CENTURY


def getCalendarYear(date: DateLike) -> int:
    """Return the calendar year of `date`, in astronomical numbering."""
    if isinstance(date, datetime.date):
        return date.year

    return getJulianDate(date).calendar_date[0]


def formatSeconds(duration: datetime.timedelta, decimals: int | None = None) -> str:
    """Render a signed duration in seconds, e.g. ``-0.0786s``.

    Args:
        duration (``timedelta``): duration to format.
        decimals (``int``, optional): number of decimals. Defaults to the configured
            ``formatting.SecondsDecimals``.
    """
    if decimals is None:
        decimals = BehavioralConfig.getConfig().formatting.SecondsDecimals

    return f"{duration.total_seconds():.{decimals}f}s"
