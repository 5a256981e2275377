"""
Nutation Over a Nodal Cycle
===========================

Show the nutation in longitude and in obliquity over one 18.6 year cycle of the Moon's node.

This example demonstrates how :func:`.findNutation` works along with a simple plot.
"""

# %%
# Imports
# -------

# Third Party Imports
import numpy as np
from matplotlib import pyplot as plt

# %%
# Create Sample Dates
# -------------------
#
# Sample one Julian date every five days, starting at J2000.0.
# The Moon's node regresses once every 6798 days, about 18.6 years.

start_jd = 2451545.0
nodal_period = 6798.38  # days
step = 5.0  # days

# Meeus Nutation Imports
from meeus_nutation.physics.time.stardate import JulianDate

julian_dates = [JulianDate(jd) for jd in np.arange(start_jd, start_jd + nodal_period, step)]

# %%
# Find Nutation
# -------------
#
# Compute both nutation components for every date, in arcseconds.

# Meeus Nutation Imports
from meeus_nutation.physics.transforms.nutation import findNutation

results = [findNutation(jd) for jd in julian_dates]
delta_psi = np.array([result.long.arcseconds for result in results])
delta_eps = np.array([result.obli.arcseconds for result in results])
years = 2000.0 + (np.array(julian_dates) - start_jd) / 365.25

print(f"Largest |dpsi|: {np.abs(delta_psi).max():.3f} arcseconds")
print(f"Largest |deps|: {np.abs(delta_eps).max():.3f} arcseconds")

# %%
# Nutation in Right Ascension
# ---------------------------
#
# The equation of the equinoxes follows the nutation in longitude.

# Meeus Nutation Imports
from meeus_nutation.physics.transforms.equinox import nutationInRightAscension

ra_seconds = np.array([nutationInRightAscension(jd).total_seconds() for jd in julian_dates[::10]])

# %%
# Plot Data
# ---------
#
# Plot both components and the nutation in right ascension against the year.

fig, (ax1, ax2) = plt.subplots(2, 1, sharex=True)
ax1.plot(years, delta_psi, label="Δψ")
ax1.plot(years, delta_eps, label="Δε")
ax1.set_ylabel("arcseconds")
ax1.legend()
ax2.plot(years[::10], ra_seconds, "green")
ax2.set_xlabel("year")
ax2.set_ylabel("seconds of time")
plt.show()
