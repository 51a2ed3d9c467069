"""Fluent builders for coordinates, segments and routes."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from validated_primitives.domain.geospatial.coordinate import Coordinate
from validated_primitives.domain.geospatial.route import GeospatialRoute, RouteSegment
from validated_primitives.result import ValidationResult
from validated_primitives.value_objects.geospatial import DEFAULT_DECIMAL_PLACES

Number = Decimal | int | float | str


class CoordinateBuilder:
    """Builder for creating coordinates with fluent interface.

    Example:
        >>> result, coordinate = (
        ...     CoordinateBuilder()
        ...     .with_coordinates(40.7128, -74.0060)
        ...     .with_altitude(10)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self.reset()

    def with_latitude(self, latitude: Number) -> "CoordinateBuilder":
        self._latitude = latitude
        return self

    def with_longitude(self, longitude: Number) -> "CoordinateBuilder":
        self._longitude = longitude
        return self

    def with_coordinates(self, latitude: Number, longitude: Number) -> "CoordinateBuilder":
        self._latitude = latitude
        self._longitude = longitude
        return self

    def with_decimal_places(self, decimal_places: int) -> "CoordinateBuilder":
        self._decimal_places = decimal_places
        return self

    def with_altitude(self, altitude: Number | None) -> "CoordinateBuilder":
        self._altitude = altitude
        return self

    def with_accuracy(self, accuracy: Number | None) -> "CoordinateBuilder":
        self._accuracy = accuracy
        return self

    def with_position(
        self,
        latitude: Number,
        longitude: Number,
        altitude: Number | None = None,
        accuracy: Number | None = None,
    ) -> "CoordinateBuilder":
        """Set every positional field at once."""
        self._latitude = latitude
        self._longitude = longitude
        self._altitude = altitude
        self._accuracy = accuracy
        return self

    def build(self) -> tuple[ValidationResult, Coordinate | None]:
        result = ValidationResult.success()
        if self._latitude is None:
            result.add_error("Latitude is required.", "Latitude", "Required")
        if self._longitude is None:
            result.add_error("Longitude is required.", "Longitude", "Required")
        if not result.is_valid:
            return result, None

        return Coordinate.try_create(
            self._latitude,
            self._longitude,
            self._decimal_places,
            self._altitude,
            self._accuracy,
        )

    def reset(self) -> "CoordinateBuilder":
        self._latitude: Number | None = None
        self._longitude: Number | None = None
        self._decimal_places = DEFAULT_DECIMAL_PLACES
        self._altitude: Number | None = None
        self._accuracy: Number | None = None
        return self


class RouteSegmentBuilder:
    """Builder for a single route segment."""

    def __init__(self) -> None:
        self.reset()

    def with_from(self, from_: Coordinate | None) -> "RouteSegmentBuilder":
        self._from = from_
        return self

    def with_to(self, to: Coordinate | None) -> "RouteSegmentBuilder":
        self._to = to
        return self

    def with_coordinates(self, from_: Coordinate | None, to: Coordinate | None) -> "RouteSegmentBuilder":
        self._from = from_
        self._to = to
        return self

    def with_name(self, name: str | None) -> "RouteSegmentBuilder":
        self._name = name
        return self

    def build(self) -> tuple[ValidationResult, RouteSegment | None]:
        return RouteSegment.try_create(self._from, self._to, self._name)

    def reset(self) -> "RouteSegmentBuilder":
        self._from: Coordinate | None = None
        self._to: Coordinate | None = None
        self._name: str | None = None
        return self


class GeospatialRouteBuilder:
    """Builder that accumulates segments and builds a route.

    Segments created from coordinate pairs via :meth:`add_segment_between`
    are validated immediately; any failure is kept and reported by
    :meth:`build` together with the route's own checks.

    Example:
        >>> result, route = (
        ...     GeospatialRouteBuilder()
        ...     .with_name("Coast road")
        ...     .add_segment_between(a, b, "Leg 1")
        ...     .add_segment_between(b, c, "Leg 2")
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._segments: list[RouteSegment] = []
        self._failures = ValidationResult.success()
        self._name: str | None = None

    def add_segment(self, segment: RouteSegment | None) -> "GeospatialRouteBuilder":
        """Append an already-built segment. None is ignored."""
        if segment is not None:
            self._segments.append(segment)
        return self

    def add_segments(self, segments: Iterable[RouteSegment | None] | None) -> "GeospatialRouteBuilder":
        if segments is not None:
            self._segments.extend(s for s in segments if s is not None)
        return self

    def add_segment_between(
        self,
        from_: Coordinate | None,
        to: Coordinate | None,
        segment_name: str | None = None,
    ) -> "GeospatialRouteBuilder":
        """Create a segment from two coordinates and append it."""
        result, segment = RouteSegment.try_create(from_, to, segment_name)
        if segment is None:
            self._failures.merge(result)
        else:
            self._segments.append(segment)
        return self

    def with_name(self, name: str | None) -> "GeospatialRouteBuilder":
        self._name = name
        return self

    @property
    def segment_count(self) -> int:
        return len(self._segments)

    def build(self) -> tuple[ValidationResult, GeospatialRoute | None]:
        if not self._failures.is_valid:
            result = ValidationResult.success().merge(self._failures)
            return result, None
        return GeospatialRoute.try_create(self._segments, self._name)

    def reset(self) -> "GeospatialRouteBuilder":
        self._segments.clear()
        self._failures = ValidationResult.success()
        self._name = None
        return self
