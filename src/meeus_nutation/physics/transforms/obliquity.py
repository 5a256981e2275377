"""Obliquity of the ecliptic.

The mean obliquity is the smooth, secular part of the inclination of the Earth's equator on
the ecliptic. Two polynomial models are provided: the IAU model, which is cheap and accurate to
about 1" over 2000 years, and the fit of :cite:t:`laskar_1986_obliquity`. The true obliquity adds
the nutation in obliquity to the mean value.
"""

from __future__ import annotations

# Standard Library Imports
from enum import Enum
from typing import TYPE_CHECKING

# Local Imports
from ...common.exceptions import ObliquityRangeError
from ...common.logger import meeusLogWarning
from ..angles import Angle
from ..maths import polynomial
from ..time.conversions import getCalendarYear, getTimeFactor
from .nutation import findNutation

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from ..time.conversions import DateLike


class ObliquityModel(Enum):
    """Polynomial models of the mean obliquity of the ecliptic.

    Each member carries its display label, its coefficients (radians, constant term first, in
    powers of the time factor) and the largest allowed magnitude of the time factor, if any.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 22, Eqn 22.2 & 22.3
    """

    IAU = (
        "IAU",
        (
            Angle.fromDMS(23, 26, 21.448).radians,
            Angle.fromDMS(0, 0, -46.8150).radians,
            Angle.fromDMS(0, 0, -0.00059).radians,
            Angle.fromDMS(0, 0, 0.001813).radians,
        ),
        None,
    )

    LASKAR = (
        "Laskar",
        (
            Angle.fromDMS(23, 26, 21.448).radians,
            Angle.fromDMS(0, 0, -4680.93).radians,
            Angle.fromDMS(0, 0, -1.55).radians,
            Angle.fromDMS(0, 0, 1999.25).radians,
            Angle.fromDMS(0, 0, -51.38).radians,
            Angle.fromDMS(0, 0, -249.67).radians,
            Angle.fromDMS(0, 0, -39.05).radians,
            Angle.fromDMS(0, 0, 7.12).radians,
            Angle.fromDMS(0, 0, 27.87).radians,
            Angle.fromDMS(0, 0, 5.79).radians,
            Angle.fromDMS(0, 0, 2.45).radians,
        ),
        1.0,
    )

    def __init__(self, label: str, coefficients: tuple[float, ...], time_factor_limit: float | None):
        """Unpack the member value into named attributes."""
        self.label = label
        self.coefficients = coefficients
        self.time_factor_limit = time_factor_limit

    def isValid(self, time_factor: float) -> bool:
        """Return whether `time_factor` lies inside this model's range."""
        return self.time_factor_limit is None or abs(time_factor) < self.time_factor_limit

    def evaluate(self, time_factor: float) -> Angle:
        """Evaluate the model polynomial at `time_factor` without any range check."""
        return Angle.fromRadians(polynomial(time_factor, self.coefficients))


def meanObliquityIAU(date: DateLike) -> Angle:
    """Calculate the mean obliquity of the ecliptic with the IAU polynomial.

    Accuracy degrades to about 10" at 4000 years from J2000, but no date is rejected.

    Args:
        date (:data:`.DateLike`): date to evaluate, in UTC.

    Returns:
        :class:`.Angle`: mean obliquity, :math:`\\epsilon_0`.
    """
    return ObliquityModel.IAU.evaluate(getTimeFactor(date))


def meanObliquityLaskar(date: DateLike) -> Angle:
    """Calculate the mean obliquity of the ecliptic with Laskar's polynomial.

    Note:
        The polynomial is evaluated directly in Julian centuries, and only for
        :math:`|T| < 1`.

    Args:
        date (:data:`.DateLike`): date to evaluate, in UTC.

    Raises:
        :class:`.ObliquityRangeError`: if `date` is outside the model's range. The error names
            the calendar year of `date`.

    Returns:
        :class:`.Angle`: mean obliquity, :math:`\\epsilon_0`.
    """
    model = ObliquityModel.LASKAR
    time_factor = getTimeFactor(date)
    if not model.isValid(time_factor):
        err = ObliquityRangeError(getCalendarYear(date), model=model.label)
        meeusLogWarning(str(err))
        raise err

    return model.evaluate(time_factor)


def meanObliquity(date: DateLike) -> Angle:
    """Calculate the mean obliquity of the ecliptic.

    Note:
        This always uses :func:`.meanObliquityIAU`. The Laskar model is never chosen based on
        the date; call :func:`.meanObliquityLaskar` explicitly to use it.

    Args:
        date (:data:`.DateLike`): date to evaluate, in UTC.

    Returns:
        :class:`.Angle`: mean obliquity, :math:`\\epsilon_0`.
    """
    return meanObliquityIAU(date)


def trueObliquity(date: DateLike) -> Angle:
    """Calculate the true obliquity of the ecliptic, :math:`\\epsilon = \\epsilon_0 + \\Delta\\epsilon`.

    Args:
        date (:data:`.DateLike`): date to evaluate, in UTC.

    Returns:
        :class:`.Angle`: true obliquity, :math:`\\epsilon`.
    """
    return meanObliquity(date) + findNutation(date).obli
