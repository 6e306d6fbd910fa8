"""
Physical constants and unit conversions.

Units are SI throughout (meters, seconds, m^3/s^2). These values are
passed into OrbitalElements constructors by the catalog; the evaluation
engine itself never reads them.
"""

# Astronomical unit [m], IAU 2012 exact definition
AU_TO_METERS = 149_597_870_700.0

# Heliocentric gravitational constant GM_sun [m^3/s^2]
SUN_GM = 1.32712440018e20

# Time
SECONDS_PER_DAY = 86400.0
J2000_JD = 2451545.0  # 2000-01-01T12:00:00 TT

# Accepted Julian Date window for position queries (1900-01-01 .. 2100-01-01)
MIN_QUERY_JD = 2415020.5
MAX_QUERY_JD = 2488069.5
