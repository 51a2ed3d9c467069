"""Polygon boundaries on the earth's surface."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Iterable

import numpy as np

from validated_primitives.domain.geospatial.coordinate import (
    EARTH_RADIUS_KM,
    Coordinate,
    haversine_vectorized,
)
from validated_primitives.domain.geospatial.distance import KM_TO_MILES
from validated_primitives.result import ValidationResult

SQ_KM_TO_SQ_MILES = 0.386102

_CENTER_QUANTUM = Decimal("0.000001")


@dataclass(frozen=True)
class BoundingBox:
    """Geographic bounding box in decimal degrees."""

    min_lat: Decimal
    max_lat: Decimal
    min_lon: Decimal
    max_lon: Decimal

    def contains(self, point: Coordinate) -> bool:
        """Check if point is inside bounding box."""
        return (
            self.min_lat <= point.latitude.value <= self.max_lat
            and self.min_lon <= point.longitude.value <= self.max_lon
        )


def _axes(vertices: Iterable[Coordinate]) -> tuple[np.ndarray, np.ndarray]:
    points = list(vertices)
    lats = np.array([float(v.latitude.value) for v in points])
    lons = np.array([float(v.longitude.value) for v in points])
    return lats, lons


def _spherical_area_km2(lats: np.ndarray, lons: np.ndarray) -> float:
    lat1 = np.radians(lats)
    lon1 = np.radians(lons)
    lat2 = np.roll(lat1, -1)
    lon2 = np.roll(lon1, -1)
    area = np.sum((lon2 - lon1) * (2 + np.sin(lat1) + np.sin(lat2)))
    return float(abs(area * EARTH_RADIUS_KM * EARTH_RADIUS_KM / 2.0))


def _perimeter_km(lats: np.ndarray, lons: np.ndarray) -> float:
    return float(np.sum(haversine_vectorized(lats, lons, np.roll(lats, -1), np.roll(lons, -1))))


def _center(vertices: list[Coordinate]) -> Coordinate | None:
    count = len(vertices)
    avg_lat = sum(v.latitude.value for v in vertices) / count
    avg_lon = sum(v.longitude.value for v in vertices) / count
    _, center = Coordinate.try_create(
        avg_lat.quantize(_CENTER_QUANTUM, rounding=ROUND_HALF_EVEN),
        avg_lon.quantize(_CENTER_QUANTUM, rounding=ROUND_HALF_EVEN),
    )
    return center


@dataclass(frozen=True)
class GeoBoundary:
    """A closed polygon given by at least three vertices (the last joins the first).

    Area uses a spherical polygon approximation; containment uses ray casting
    on latitude/longitude, so polygons crossing the antimeridian are not
    supported.
    """

    vertices: tuple[Coordinate, ...]
    area_square_kilometers: float
    perimeter_kilometers: float
    center: Coordinate | None

    @classmethod
    def try_create(
        cls,
        vertices: Iterable[Coordinate | None] | None,
    ) -> tuple[ValidationResult, GeoBoundary | None]:
        if vertices is None:
            return ValidationResult.failure("Vertices collection is required.", "Vertices", "Required"), None
        vertex_list = list(vertices)
        if len(vertex_list) < 3:
            return (
                ValidationResult.failure(
                    "Boundary must have at least 3 vertices to form a polygon.",
                    "Vertices",
                    "InsufficientVertices",
                ),
                None,
            )
        if any(v is None for v in vertex_list):
            return (
                ValidationResult.failure("All vertices must be valid coordinates.", "Vertices", "InvalidVertex"),
                None,
            )

        lats, lons = _axes(vertex_list)
        boundary = cls(
            vertices=tuple(vertex_list),
            area_square_kilometers=_spherical_area_km2(lats, lons),
            perimeter_kilometers=_perimeter_km(lats, lons),
            center=_center(vertex_list),
        )
        return ValidationResult.success(), boundary

    @property
    def area_square_miles(self) -> float:
        return self.area_square_kilometers * SQ_KM_TO_SQ_MILES

    @property
    def area_square_meters(self) -> float:
        return self.area_square_kilometers * 1_000_000

    @property
    def perimeter_miles(self) -> float:
        return self.perimeter_kilometers * KM_TO_MILES

    def contains(self, point: Coordinate | None) -> bool:
        """Ray-casting point-in-polygon test."""
        if point is None:
            return False
        lats, lons = _axes(self.vertices)
        prev_lats = np.roll(lats, 1)
        prev_lons = np.roll(lons, 1)
        test_lat = float(point.latitude.value)
        test_lon = float(point.longitude.value)

        straddles = (lons > test_lon) != (prev_lons > test_lon)
        with np.errstate(divide="ignore", invalid="ignore"):
            crossing_lat = (prev_lats - lats) * (test_lon - lons) / (prev_lons - lons) + lats
        crossings = straddles & (test_lat < crossing_lat)
        return bool(np.count_nonzero(crossings) % 2)

    def distance_to_nearest_edge(self, point: Coordinate | None) -> float:
        """Kilometres from ``point`` to the closest vertex of any edge."""
        if point is None:
            return math.inf
        lats, lons = _axes(self.vertices)
        distances = haversine_vectorized(float(point.latitude.value), float(point.longitude.value), lats, lons)
        return float(np.min(distances))

    def get_bounding_box(self) -> BoundingBox:
        latitudes = [v.latitude.value for v in self.vertices]
        longitudes = [v.longitude.value for v in self.vertices]
        return BoundingBox(
            min_lat=min(latitudes),
            max_lat=max(latitudes),
            min_lon=min(longitudes),
            max_lon=max(longitudes),
        )

    def get_description(self) -> str:
        return (
            f"Polygon with {len(self.vertices)} vertices: "
            f"Area {self.area_square_kilometers:.2f} km² ({self.area_square_miles:.2f} mi²), "
            f"Perimeter {self.perimeter_kilometers:.2f} km ({self.perimeter_miles:.2f} mi)"
        )

    def __str__(self) -> str:
        return self.get_description()
