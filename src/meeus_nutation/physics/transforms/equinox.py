"""Equation of the equinoxes, the nutation in right ascension."""

from __future__ import annotations

# Standard Library Imports
from datetime import timedelta
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import cos

# Local Imports
from .. import constants as const
from .nutation import findNutation
from .obliquity import trueObliquity

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from ..time.conversions import DateLike


RIGHT_ASCENSION_DECIMALS: int = 4
"""``int``: decimals of a second kept in the nutation in right ascension."""


def nutationInRightAscension(date: DateLike) -> timedelta:
    """Calculate the nutation in right ascension (equation of the equinoxes).

    This is the correction between mean and apparent sidereal time,
    :math:`\\Delta\\psi \\cos\\epsilon` expressed in seconds of time.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 12, Pg. 88

    Args:
        date (:data:`.DateLike`): date to evaluate, in UTC.

    Returns:
        ``timedelta``: signed correction, rounded to 0.0001 seconds.
    """
    delta_psi = findNutation(date).long
    epsilon = trueObliquity(date)

    hours = delta_psi.degrees * cos(epsilon.radians) * const.DEG2HOUR
    seconds = float(hours) * const.HOUR2SEC

    return timedelta(seconds=round(seconds, RIGHT_ASCENSION_DECIMALS))
