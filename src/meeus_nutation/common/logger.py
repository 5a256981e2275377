"""Defines the :class:`.Logger` class and the package-wide logging helpers.

Library modules never hold a :class:`.Logger` themselves. They write through the ``meeusLog*``
one-liners to the :data:`.PACKAGE_LOGGER_NAME` logger, and the command line entry point attaches
the configured handler to it.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "meeus_nutation"
"""``str``: name of the top-level logger every module-level helper writes to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record layout shared by the stdout and file handlers."""


class Logger:
    """Wrap a standard :class:`logging.Logger` with a handler chosen by the behavioral config.

    Records go to ``stdout`` or to a rotating, time-stamped log file. Attribute access that isn't
    defined here (``debug``, ``info``, ``level``, ...) is forwarded to the wrapped logger.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Attach a handler to the logger called `name`, unless it already has one.

        Args:
            name (``str``): name of the logger instance
            level (``int``, optional): lowest level published. Defaults to ``logging.Level``
                from the config.
            path (``str``, optional): ``"stdout"`` or a directory for log files. Defaults to
                ``logging.OutputLocation`` from the config.
            allow_multiple_handlers (``bool``, optional): add a handler even if one exists.
                Defaults to ``logging.AllowMultipleHandlers`` from the config.
        """
        config = BehavioralConfig.getConfig().logging
        if level is None:
            level = config.Level
        if path is None:
            path = config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if self.logger.handlers and not allow_multiple_handlers:
            return

        if path == "stdout":
            self.filename = "stdout"
            handler = logging.StreamHandler(sys.stdout)
        else:
            if not exists(path):
                self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                makedirs(path)

            self.filename = join(path, f"{name}_{pathSafeTime()}.log")
            handler = RotatingFileHandler(
                self.filename,
                maxBytes=config.MaxFileSize,
                backupCount=config.MaxFileCount,
            )

        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _meeusLog(message: str, level: int):
    """Log `message` at `level` on the :data:`.PACKAGE_LOGGER_NAME` logger."""
    logging.getLogger(PACKAGE_LOGGER_NAME).log(level, message)


def meeusLogError(message: str):
    """Log an ERROR message to the package log."""
    _meeusLog(message, logging.ERROR)


def meeusLogWarning(message: str):
    """Log a WARNING message to the package log."""
    _meeusLog(message, logging.WARNING)


def meeusLogInfo(message: str):
    """Log an INFO message to the package log."""
    _meeusLog(message, logging.INFO)


def meeusLogDebug(message: str):
    """Log a DEBUG message to the package log."""
    _meeusLog(message, logging.DEBUG)
