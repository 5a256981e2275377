"""Allow ``python -m meeus_nutation``."""

from __future__ import annotations

# Local Imports
from . import main

if __name__ == "__main__":
    main()
