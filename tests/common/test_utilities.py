from __future__ import annotations

# Standard Library Imports
import os

# Third Party Imports
import pytest

# Meeus Nutation Imports
from meeus_nutation.common import pathSafeTime
from meeus_nutation.common.utilities import loadDatFile

# Local Imports
from .. import FIXTURE_DATA_DIR


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testLoadDatFile(datafiles: str):
    """Ensure dat file loader works properly."""
    # Valid dat file, comments and blank lines are skipped
    data = loadDatFile(os.path.join(datafiles, "dat/valid.dat"))
    assert data == [
        [0.0, 0.0, 0.0, 0.0, 1.0, -171996.0, -174.2, 92025.0, 8.9],
        [-2.0, 0.0, 0.0, 2.0, 2.0, -13187.0, -1.6, 5736.0, -3.1],
    ]
    # Custom delimiter
    data = loadDatFile(os.path.join(datafiles, "dat/comma.dat"), delim=",")
    assert data == [[1.5, 2.5, 3.5], [4.0, 5.0, 6.0]]
    # Empty dat file
    with pytest.raises(IOError, match="Empty DAT file:") as io_exc_info:
        loadDatFile(os.path.join(datafiles, "dat/empty.dat"))
    err_msg: str = io_exc_info.value.args[0]
    assert err_msg.endswith(".dat")
    # Non-existant dat file
    with pytest.raises(FileNotFoundError):
        loadDatFile(os.path.join(datafiles, "dat/nonexistant.dat"))
    # Invalid dat file
    with pytest.raises(ValueError, match="Parsing error reading DAT file:") as io_exc_info:
        loadDatFile(os.path.join(datafiles, "dat/invalid.dat"))
    err_msg: str = io_exc_info.value.args[0]
    assert err_msg.endswith(".dat")


def testPathSafeTime():
    """Time stamps can be used in file names."""
    # Standard Library Imports
    from datetime import datetime

    stamp = pathSafeTime(datetime(2015, 10, 14, 4, 34, 10, 250000))
    assert stamp == "2015-10-14T04-34-10250000"
    assert ":" not in pathSafeTime()
