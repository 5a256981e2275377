"""Calculate Earth nutation parameters.

This module stores the coefficients of the truncated IAU 1980 nutation series, as
tabulated by :cite:t:`meeus_1998_algorithms`, and sums them into the nutation in
longitude (:math:`\\Delta\\psi`) and the nutation in obliquity (:math:`\\Delta\\epsilon`).
Terms smaller than 0.0003" have been dropped from the series, which leaves 63 of them.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from importlib import resources
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import array, cos, sin

# Local Imports
from ...common.logger import meeusLogDebug
from ...common.utilities import loadDatFile
from .. import constants as const
from ..angles import Angle
from ..maths import polynomial, wrapAngle360
from ..time.conversions import getTimeFactor

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from ..time.conversions import DateLike


NUTATION_MODULE: str = "meeus_nutation.physics.data.nutation"
"""``str``: defines nutation data module location."""


NUTATION_MEEUS_1998: str = "meeus_1998.dat"
"""``str``: defines nutation data file for the truncated 1980 nutation model."""


class FundamentalArgument(Enum):
    """Lunisolar arguments of the nutation series.

    Each value holds the polynomial coefficients in degrees for powers 0 through 3 of the
    time factor.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 22, Pg. 144
    """

    D = (297.85036, 445267.111480, -0.0019142, 1.0 / 189474.0)
    """Mean elongation of the Moon from the Sun."""

    M = (357.52772, 35999.050340, -0.0001603, -1.0 / 300000.0)
    """Mean anomaly of the Sun (Earth)."""

    M_PRIME = (134.96298, 477198.867398, 0.0086972, 1.0 / 56250.0)
    """Mean anomaly of the Moon."""

    F = (93.27191, 483202.017538, -0.0036825, 1.0 / 327270.0)
    """Moon's argument of latitude."""

    OMEGA = (125.04452, -1934.136261, 0.0020708, 1.0 / 450000.0)
    """Longitude of the ascending node of the Moon's mean orbit on the ecliptic."""

    def evaluate(self, time_factor: float) -> Angle:
        """Return this argument at `time_factor`, normalized to [0°, 360°).

        Args:
            time_factor (``float``): Julian centuries since J2000.0.
        """
        return Angle.fromDegrees(wrapAngle360(polynomial(time_factor, self.value)))


def fundamentalArguments(time_factor: float) -> ndarray:
    """Return D, M, M', F and Ω at `time_factor`, (radians)."""
    return array([argument.evaluate(time_factor).radians for argument in FundamentalArgument])


@lru_cache(maxsize=1)
def getMeeusNutationSeries() -> tuple[ndarray, ndarray]:
    """Return the 63 periodic terms of the truncated nutation series.

    Note:
        This function is cached so repeated calls shouldn't need to re-read the file. The
        returned arrays are read-only.

    References:
        :cite:t:`meeus_1998_algorithms`, Table 22.A

    Returns:
        ``tuple``: (real coefficients, integer multipliers). Real coefficients are the
        columns sin0, sin1, cos0, cos1 in units of 0.0001". Integer multipliers are the
        columns D, M, M', F, Ω.
    """
    res = resources.files(NUTATION_MODULE).joinpath(NUTATION_MEEUS_1998)
    with resources.as_file(res) as file_resource:
        nut_data = array(loadDatFile(file_resource))

    # Parse integer and real coefficients out.
    integers = nut_data[::, :5].astype(int)
    reals = nut_data[::, 5:9].copy()
    integers.setflags(write=False)
    reals.setflags(write=False)

    return reals, integers


@dataclass(frozen=True)
class NutationResult:
    """Nutation of the Earth's axis for a single date."""

    long: Angle
    """:class:`.Angle`: nutation in longitude, :math:`\\Delta\\psi`."""

    obli: Angle
    """:class:`.Angle`: nutation in obliquity, :math:`\\Delta\\epsilon`."""

    def __str__(self) -> str:
        """Return ``Δψ = <long>, Δε = <obli>`` in sexagesimal form."""
        return f"Δψ = {self.long}, Δε = {self.obli}"


def findNutation(date: DateLike) -> NutationResult:
    """Calculate the nutation in longitude and in obliquity for `date`.

    Every periodic term contributes :math:`(S_0 + S_1 T) \\sin(arg)` to
    :math:`\\Delta\\psi` and :math:`(C_0 + C_1 T) \\cos(arg)` to :math:`\\Delta\\epsilon`, where
    the argument is the integer combination of the fundamental arguments.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 22, Pg. 143-146

    Args:
        date (:data:`.DateLike`): date to evaluate, in UTC.

    Returns:
        :class:`.NutationResult`: :math:`\\Delta\\psi` and :math:`\\Delta\\epsilon`.
    """
    time_factor = getTimeFactor(date)
    reals, integers = getMeeusNutationSeries()

    arguments = integers.dot(fundamentalArguments(time_factor))
    longitude_terms = (reals[::, 0] + reals[::, 1] * time_factor) * sin(arguments)
    obliquity_terms = (reals[::, 2] + reals[::, 3] * time_factor) * cos(arguments)

    # Table units are 0.0001 arcseconds
    scale = const.NUTATION_TERM_SCALE * const.ARCSEC2DEG
    delta_psi = float(longitude_terms.sum()) * scale
    delta_eps = float(obliquity_terms.sum()) * scale

    meeusLogDebug(f"Nutation at T={time_factor:.10f}: dpsi={delta_psi:.10e} deg, deps={delta_eps:.10e} deg")

    return NutationResult(long=Angle.fromDegrees(delta_psi), obli=Angle.fromDegrees(delta_eps))
