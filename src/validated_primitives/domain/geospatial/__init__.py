"""Geospatial domain models: coordinates, distances, routes and boundaries."""

from __future__ import annotations

from validated_primitives.domain.geospatial.boundary import BoundingBox, GeoBoundary
from validated_primitives.domain.geospatial.builders import (
    CoordinateBuilder,
    GeospatialRouteBuilder,
    RouteSegmentBuilder,
)
from validated_primitives.domain.geospatial.coordinate import (
    EARTH_RADIUS,
    EARTH_RADIUS_KM,
    Coordinate,
    DistanceUnit,
    haversine_vectorized,
)
from validated_primitives.domain.geospatial.distance import GeoDistance
from validated_primitives.domain.geospatial.route import GeospatialRoute, RouteSegment

__all__ = [
    "BoundingBox",
    "Coordinate",
    "CoordinateBuilder",
    "DistanceUnit",
    "EARTH_RADIUS",
    "EARTH_RADIUS_KM",
    "GeoBoundary",
    "GeoDistance",
    "GeospatialRoute",
    "GeospatialRouteBuilder",
    "RouteSegment",
    "RouteSegmentBuilder",
    "haversine_vectorized",
]
