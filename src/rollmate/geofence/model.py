"""Class geofence shapes.

A geofence is either a closed polygon ring in GeoJSON order ``(lng, lat)`` or
a circle given by its center ``(lat, lng)`` and a radius in meters. The JSON
shapes are the ones the map widgets emit::

    {"type": "Polygon", "coordinates": [[[lng, lat], ..., [lng, lat]]]}
    {"type": "Circle", "center": {"lat": ..., "lng": ...}, "radius": 500}
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Tuple, Union

from ..core.exceptions import ValidationError

Position = Tuple[float, float]


@dataclass(frozen=True)
class PolygonGeofence:
    ring: Tuple[Position, ...]

    kind = "Polygon"

    def __post_init__(self) -> None:
        if len(self.ring) < 4:
            raise ValidationError("Polygon geofence needs at least 4 positions")
        if self.ring[0] != self.ring[-1]:
            raise ValidationError("Polygon geofence ring must be closed")
        for lng, lat in self.ring:
            _check_lat_lng(lat, lng)

    def to_dict(self) -> dict:
        return {"type": self.kind, "coordinates": [[list(p) for p in self.ring]]}


@dataclass(frozen=True)
class CircleGeofence:
    lat: float
    lng: float
    radius: float

    kind = "Circle"

    def __post_init__(self) -> None:
        _check_lat_lng(self.lat, self.lng)
        if not math.isfinite(self.radius) or self.radius <= 0:
            raise ValidationError("Circle geofence radius must be positive")

    def to_dict(self) -> dict:
        return {"type": self.kind, "center": {"lat": self.lat, "lng": self.lng}, "radius": self.radius}


Geofence = Union[PolygonGeofence, CircleGeofence]


def _check_lat_lng(lat: float, lng: float) -> None:
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValidationError("Geofence coordinates must be finite numbers")
    if not -90 <= lat <= 90 or not -180 <= lng <= 180:
        raise ValidationError("Geofence coordinates out of range")


def _number(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Geofence {field} must be a number")
    return float(value)


def _parse_polygon(payload: dict) -> PolygonGeofence:
    coordinates = payload.get("coordinates")
    if not isinstance(coordinates, list) or not coordinates or not isinstance(coordinates[0], list):
        raise ValidationError("Polygon geofence needs a coordinates ring")
    if len(coordinates) > 1:
        raise ValidationError("Polygon geofence holes are not supported")

    ring = []
    for point in coordinates[0]:
        if not isinstance(point, (list, tuple)) or len(point) != 2:
            raise ValidationError("Polygon positions must be [lng, lat] pairs")
        ring.append((_number(point[0], "longitude"), _number(point[1], "latitude")))
    return PolygonGeofence(ring=tuple(ring))


def _parse_circle(payload: dict) -> CircleGeofence:
    center = payload.get("center")
    if not isinstance(center, dict):
        raise ValidationError("Circle geofence needs a center")
    return CircleGeofence(
        lat=_number(center.get("lat"), "latitude"),
        lng=_number(center.get("lng"), "longitude"),
        radius=_number(payload.get("radius"), "radius"),
    )


def parse_geofence(payload: Any) -> Geofence:
    """Turn a client payload into a typed geofence or raise ``ValidationError``."""
    if isinstance(payload, (PolygonGeofence, CircleGeofence)):
        return payload
    if not isinstance(payload, dict):
        raise ValidationError("Geofence must be an object")

    kind = payload.get("type")
    if kind == PolygonGeofence.kind:
        return _parse_polygon(payload)
    if kind == CircleGeofence.kind or (kind is None and "center" in payload and "radius" in payload):
        return _parse_circle(payload)
    raise ValidationError(f"Unsupported geofence type: {kind!r}")
