from __future__ import annotations

import math
from typing import List

from ..core.constants import DEFAULT_CIRCLE_STEPS, EARTH_RADIUS_METERS
from .model import CircleGeofence, Geofence, PolygonGeofence, Position


def haversine_meters(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in meters."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(a)))


def circle_points(lat: float, lng: float, radius_m: float, steps: int = DEFAULT_CIRCLE_STEPS) -> List[Position]:
    """Approximate a circle by a closed ``(lng, lat)`` ring of ``steps`` vertices."""
    if steps < 3:
        raise ValueError("steps must be at least 3")

    phi1 = math.radians(lat)
    lambda1 = math.radians(lng)
    delta = radius_m / EARTH_RADIUS_METERS

    ring: List[Position] = []
    for i in range(steps):
        theta = 2 * math.pi * i / steps
        phi2 = math.asin(math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(delta) * math.cos(theta))
        lambda2 = lambda1 + math.atan2(
            math.sin(theta) * math.sin(delta) * math.cos(phi1),
            math.cos(delta) - math.sin(phi1) * math.sin(phi2),
        )
        # Normalise longitude back into [-180, 180).
        lng2 = (math.degrees(lambda2) + 540) % 360 - 180
        ring.append((lng2, math.degrees(phi2)))
    ring.append(ring[0])
    return ring


def point_in_ring(lat: float, lng: float, ring) -> bool:
    """Even-odd ray casting on the ``(lng, lat)`` plane."""
    inside = False
    n = len(ring)
    j = n - 1
    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > lat) != (yj > lat):
            x_cross = (xj - xi) * (lat - yi) / (yj - yi) + xi
            if lng < x_cross:
                inside = not inside
        j = i
    return inside


def contains(geofence: Geofence, lat: float, lng: float) -> bool:
    if isinstance(geofence, CircleGeofence):
        return haversine_meters(geofence.lat, geofence.lng, lat, lng) <= geofence.radius
    if isinstance(geofence, PolygonGeofence):
        return point_in_ring(lat, lng, geofence.ring)
    raise TypeError(f"Unsupported geofence: {type(geofence)!r}")


def as_polygon(geofence: Geofence, steps: int = DEFAULT_CIRCLE_STEPS) -> PolygonGeofence:
    """Polygon rendering of any geofence (circles are sampled)."""
    if isinstance(geofence, PolygonGeofence):
        return geofence
    return PolygonGeofence(ring=tuple(circle_points(geofence.lat, geofence.lng, geofence.radius, steps)))
