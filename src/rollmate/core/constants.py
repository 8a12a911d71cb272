"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CHECKIN_GRACE_MINUTES = 10
DEFAULT_CIRCLE_STEPS = 64
DEFAULT_GEOFENCE_RADIUS_METERS = 500
EARTH_RADIUS_METERS = 6_371_000
WEEK_LENGTH_DAYS = 7
