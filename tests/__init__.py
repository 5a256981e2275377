"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_FILE = "custom.config"

# Reference dates, all UTC
NUTATION_DATETIME = datetime(2015, 10, 10)
RIGHT_ASCENSION_DATETIME = datetime(2015, 10, 14, 4, 34, 10)
OBLIQUITY_DATETIME = datetime(2015, 7, 10)
