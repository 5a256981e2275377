"""General mathematics functions that provide extended capability to `numpy`.

* `numpy docs <https://numpy.org/doc/stable/>`_
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import fmod

# Local Imports
from ..common.exceptions import PolynomialCoefficientError
from ..common.logger import meeusLogError
from . import constants as const

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Sequence


def polynomial(x: float, coefficients: Sequence[float]) -> float:
    r"""Evaluate a polynomial at `x` with Horner's method.

    The coefficients are ordered from the constant term upward, so ``[c0, c1, c2]`` is
    :math:`c_0 + c_1 x + c_2 x^2`. No powers of `x` are ever formed directly.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 1, Pg. 10

    Args:
        x (``float``): value at which the polynomial is evaluated.
        coefficients (``Sequence[float]``): polynomial coefficients, constant term first.

    Raises:
        :class:`.PolynomialCoefficientError`: if `coefficients` is empty.

    Returns:
        ``float``: value of the polynomial at `x`.
    """
    if len(coefficients) == 0:
        msg = "Cannot evaluate a polynomial without any coefficients"
        meeusLogError(msg)
        raise PolynomialCoefficientError(msg)

    result = coefficients[-1]
    for coefficient in coefficients[-2::-1]:
        result = coefficient + result * x

    return result


def wrapAngle2Pi(angle: float) -> float:
    r"""Force angle into range of :math:`[0, 2\pi)`."""
    # Fmod takes sign of dividend (first arg)
    if (angle := fmod(angle, const.TWOPI)) < 0:
        angle += const.TWOPI
    if angle >= const.TWOPI:
        angle = 0.0
    return angle


def wrapAngle360(angle: float) -> float:
    """Force angle into range of [0, 360) degrees."""
    if (angle := fmod(angle, const.FULL_CIRCLE_DEG)) < 0:
        angle += const.FULL_CIRCLE_DEG
    # Adding 360 to a tiny negative remainder can round up to exactly 360
    if angle >= const.FULL_CIRCLE_DEG:
        angle = 0.0
    return angle

