"""
Constants declarations for planeprojection
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Equatorial radius (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_E2 = WGS84_F * (2 - WGS84_F)  # Squared eccentricity

# Reference latitudes beyond this lose the 0.1% accuracy guarantee
MAX_ACCURATE_LATITUDE = 65.0
