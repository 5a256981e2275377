"""Global math & astronomy constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    #. :cite:t:`meeus_1998_algorithms`, Chapters 7, 12 & 22
"""

from __future__ import annotations

# Third Party Imports
from numpy import pi

# Conversion constants
PI = pi
TWOPI = 2.0 * pi
DAYS2SEC = 24.0 * 3600
ARCSEC2DEG = 1.0 / 3600.0
ARCMIN2DEG = 1.0 / 60.0
DEG2HOUR = 1.0 / 15.0  # 360 degrees of arc per 24 hours of time
HOUR2SEC = 3600.0
FULL_CIRCLE_DEG = 360.0

# Time constants
J2000_JULIAN_DATE = 2451545.0  # 2000 January 1.5 TT
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_CYCLE = 1461  # four Julian calendar years
GREGORIAN_REFORM_JULIAN_DAY = 2299161  # 1582 October 15
ORDINAL_JULIAN_DATE_OFFSET = 1721424.5  # Julian date of proleptic Gregorian day 0, 0h

NUTATION_TERM_SCALE = 1.0e-4
"""``float``: periodic nutation terms are tabulated in units of 0.0001 arcseconds."""
