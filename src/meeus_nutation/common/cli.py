"""Define the command line interface for the nutation calculator."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path
from datetime import datetime

# Local Imports
from ..physics.time.stardate import JulianDate
from .logger import meeusLogError

JULIAN_DATE_PREFIX: str = "JD"
"""``str``: prefix marking a command line date as a raw Julian date."""


def dateChecker(date_string):
    """Checks for valid dates passed to the CLI parser.

    Args:
        date_string (``str``): ISO 8601 date (``2015-10-14T04:34:10``, optionally with a UTC
            offset) or a Julian date prefixed with ``JD`` (``JD2457305.5``).

    Raises:
        ValueError: if the string is neither form

    Returns:
        ``datetime`` | :class:`.JulianDate`: parsed date
    """
    try:
        if date_string.upper().startswith(JULIAN_DATE_PREFIX):
            return JulianDate(float(date_string[len(JULIAN_DATE_PREFIX) :]))
        return datetime.fromisoformat(date_string)
    except ValueError:
        meeusLogError(f"Bad date given to CLI: {date_string!r}")
        raise


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        meeusLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="Nutation & Obliquity Command Line Interface")

    parser.add_argument(
        "date",
        metavar="DATE",
        type=dateChecker,
        help="UTC date in ISO 8601 format, or a Julian date prefixed with 'JD'",
    )

    parser.add_argument(
        "-l",
        "--laskar",
        dest="laskar",
        action="store_true",
        default=False,
        help="Also report the mean obliquity from Laskar's polynomial",
    )

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a custom behavioral configuration file",
    )

    return parser
