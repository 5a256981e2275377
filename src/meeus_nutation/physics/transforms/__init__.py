"""Earth orientation corrections: nutation, obliquity of the ecliptic and the equation of the equinoxes."""
