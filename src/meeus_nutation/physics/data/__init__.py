"""Package data files used by :mod:`meeus_nutation.physics`."""
