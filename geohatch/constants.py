"""
Hatching constants and default configuration values.
"""

# Earth model (dimensions in meters)
EARTH_RADIUS = 6371000.0  # Mean radius used by the equirectangular frame
DEFAULT_ELLIPSOID = "WGS84"  # Reference ellipsoid for geodesic fidelity

# Hatch parameter defaults
DEFAULT_SPACING = 100.0  # m between adjacent lines
DEFAULT_BEARING = 0.0  # degrees clockwise from north
DEFAULT_OFFSET = 50.0  # m past the polygon boundary
DEFAULT_FIDELITY = "planar"  # "planar" or "geodesic"

# Geometry tolerances
INTERSECTION_TOLERANCE = 1e-10  # Determinant / collinearity threshold
ROUND_TRIP_TOLERANCE = 1e-9  # degrees

# Input limits
MIN_RING_POINTS = 4  # Including the closing point
MAX_SCAN_LINES = 100000  # Guard against spacing far below polygon extent
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
