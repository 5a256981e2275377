"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
computing the Earth's nutation and the obliquity of the ecliptic for a single date.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .physics.time.conversions import DateLike

__version__ = "1.0.0"


def runNutation(date: DateLike, laskar: bool = False, config_path: str | None = None) -> list[str]:
    """Compute and report every nutation quantity for `date`.

    Args:
        date (:data:`.DateLike`): UTC date to evaluate.
        laskar (``bool``, optional): whether to also report Laskar's mean obliquity. If the date
            is outside that model's range, a warning is logged and the IAU value is reported
            in its place. Defaults to ``False``.
        config_path (``str``, optional): custom behavioral configuration file. Defaults to
            ``None``, which uses the packaged defaults.

    Returns:
        ``list``: the report lines, in the order they were printed.
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.exceptions import ObliquityRangeError
    from .common.logger import PACKAGE_LOGGER_NAME, Logger, meeusLogInfo
    from .physics.time.conversions import formatSeconds, getJulianDate
    from .physics.transforms.equinox import nutationInRightAscension
    from .physics.transforms.nutation import findNutation
    from .physics.transforms.obliquity import meanObliquity, meanObliquityLaskar, trueObliquity

    if config_path:
        BehavioralConfig.resetConfig()
        BehavioralConfig.getConfig(config_path)

    # Library modules log through the package logger, so give it the configured handler
    Logger(PACKAGE_LOGGER_NAME)
    julian_date = getJulianDate(date)
    meeusLogInfo(f"Computing nutation for {julian_date!r}")

    lines = [
        f"Julian date:           {float(julian_date)}",
        f"Nutation:              {findNutation(julian_date)}",
        f"Mean obliquity (IAU):  {meanObliquity(julian_date)}",
        f"True obliquity:        {trueObliquity(julian_date)}",
        f"Nutation in RA:        {formatSeconds(nutationInRightAscension(julian_date))}",
    ]

    if laskar:
        try:
            laskar_obliquity = meanObliquityLaskar(date)
        except ObliquityRangeError:
            # The rejection itself was already logged as a warning
            meeusLogInfo("Reporting the IAU mean obliquity in place of Laskar's")
            laskar_obliquity = meanObliquity(julian_date)
        lines.append(f"Mean obliquity (Laskar): {laskar_obliquity}")

    for line in lines:
        print(line)

    return lines


def main() -> None:
    """Nutation calculator main entry point.

    This is the function that the :command:`meeus-nutation` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.cli import getCommandLineParser

    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    runNutation(cli_args.date, laskar=cli_args.laskar, config_path=cli_args.config_path)
