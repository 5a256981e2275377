"""Defines the :class:`.Angle` value type used for every angular result.

An :class:`.Angle` stores radians only. Degrees, arcseconds and the sexagesimal
``D°M'S"`` form are all derived from that single value on request.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass

# Third Party Imports
from numpy import deg2rad, rad2deg

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from . import constants as const
from .maths import wrapAngle2Pi


@dataclass(frozen=True)
class Angle:
    """Immutable rotational quantity."""

    radians: float
    """``float``: value of the angle, (radians)."""

    @classmethod
    def fromRadians(cls, value: float) -> Angle:
        """Build an angle from radians."""
        return cls(float(value))

    @classmethod
    def fromDegrees(cls, value: float) -> Angle:
        """Build an angle from decimal degrees."""
        return cls(float(deg2rad(value)))

    @classmethod
    def fromArcseconds(cls, value: float) -> Angle:
        """Build an angle from arcseconds."""
        return cls.fromDegrees(value * const.ARCSEC2DEG)

    @classmethod
    def fromDMS(cls, degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> Angle:
        """Build an angle from degrees, arcminutes and arcseconds.

        A negative sign on any component makes the whole angle negative, so
        ``fromDMS(0, 0, -46.815)`` is minus 46.815 arcseconds.

        Args:
            degrees (``float``): whole (or decimal) degrees.
            minutes (``float``, optional): arcminutes. Defaults to 0.
            seconds (``float``, optional): arcseconds. Defaults to 0.

        Returns:
            :class:`.Angle`: the combined angle.
        """
        sign = -1.0 if min(degrees, minutes, seconds) < 0 else 1.0
        total = abs(degrees) + abs(minutes) * const.ARCMIN2DEG + abs(seconds) * const.ARCSEC2DEG
        return cls.fromDegrees(sign * total)

    @property
    def degrees(self) -> float:
        """``float``: value of the angle, (degrees)."""
        return float(rad2deg(self.radians))

    @property
    def arcseconds(self) -> float:
        """``float``: value of the angle, (arcseconds)."""
        return self.degrees * 3600.0

    def normalized(self) -> Angle:
        """Return the equivalent angle in [0°, 360°)."""
        return Angle(float(wrapAngle2Pi(self.radians)))

    def toDMS(self, decimals: int | None = None) -> tuple[int, int, int, float]:
        """Split the angle into sexagesimal components.

        Args:
            decimals (``int``, optional): round the arcseconds to this many decimals before
                splitting, so that a rounded 60" carries into the minutes. ``None`` disables
                rounding.

        Returns:
            ``tuple``: (sign, degrees, minutes, seconds), where sign is ``-1`` or ``1`` and the
            other components are non-negative.
        """
        total = abs(self.arcseconds)
        if decimals is not None:
            total = round(total, decimals)

        sign = -1 if self.radians < 0 and total > 0 else 1
        whole_degrees = int(total // 3600)
        whole_minutes = int((total - whole_degrees * 3600) // 60)
        seconds = total - whole_degrees * 3600 - whole_minutes * 60
        return sign, whole_degrees, whole_minutes, seconds

    def toSexagesimal(self, decimals: int | None = None) -> str:
        """Format the angle as ``-D°M'S.sss"``.

        Args:
            decimals (``int``, optional): arcsecond decimals. Defaults to the configured
                ``formatting.ArcsecondDecimals``.
        """
        if decimals is None:
            decimals = BehavioralConfig.getConfig().formatting.ArcsecondDecimals

        sign, deg, minutes, seconds = self.toDMS(decimals)
        prefix = "-" if sign < 0 else ""
        return f"{prefix}{deg}°{minutes}'{seconds:.{decimals}f}\""

    def __add__(self, other: Angle) -> Angle:
        """Sum two angles without normalizing."""
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __str__(self) -> str:
        """Return the sexagesimal representation."""
        return self.toSexagesimal()
