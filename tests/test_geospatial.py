"""Tests for coordinates, distances, routes and boundaries."""

from __future__ import annotations

from decimal import Decimal

import numpy as np
import pytest

from validated_primitives.domain.geospatial import (
    BoundingBox,
    Coordinate,
    CoordinateBuilder,
    DistanceUnit,
    GeoBoundary,
    GeoDistance,
    GeospatialRoute,
    GeospatialRouteBuilder,
    RouteSegment,
    RouteSegmentBuilder,
    haversine_vectorized,
)


def point(lat, lon) -> Coordinate:
    _, coordinate = Coordinate.try_create(lat, lon)
    return coordinate


@pytest.fixture
def origin():
    return point(0, 0)


@pytest.fixture
def east():
    return point(0, 1)


@pytest.fixture
def north_east():
    return point(1, 1)


@pytest.fixture
def unit_square():
    _, boundary = GeoBoundary.try_create([point(0, 0), point(0, 1), point(1, 1), point(1, 0)])
    return boundary


# =============================================================================
# Coordinates and distances
# =============================================================================


class TestHaversine:
    def test_new_york_to_los_angeles(self):
        km = haversine_vectorized(40.7128, -74.0060, 34.0522, -118.2437)
        assert float(km) == pytest.approx(3935.75, rel=1e-3)

    def test_vectorized(self):
        lats = np.array([0.0, 0.0])
        lons = np.array([1.0, 2.0])
        distances = haversine_vectorized(0.0, 0.0, lats, lons)
        assert distances.shape == (2,)
        assert distances[1] == pytest.approx(2 * distances[0])

    def test_units(self):
        km = float(haversine_vectorized(0, 0, 0, 1))
        miles = float(haversine_vectorized(0, 0, 0, 1, DistanceUnit.MILES))
        assert km == pytest.approx(111.19, abs=0.01)
        assert miles == pytest.approx(69.09, abs=0.01)


class TestCoordinate:
    def test_valid(self):
        result, nyc = Coordinate.try_create("40.7128", "-74.0060", altitude=10)
        assert result.is_valid
        assert nyc.to_cardinal_string() == "40.712800° N, 74.006000° W, 10.0m"
        assert nyc.to_google_maps_format() == "40.7128,-74.0060"
        assert nyc.to_decimal_degrees_string() == "40.7128, -74.0060"

    def test_accuracy_in_str(self):
        _, c = Coordinate.try_create(1, 2, accuracy=5)
        assert str(c) == "1.000000° N, 2.000000° E (±5m)"

    def test_axes_reported_together(self):
        result, coordinate = Coordinate.try_create(91, 181)
        assert coordinate is None
        assert result.codes == ["MaxValue", "MaxValue"]
        assert [e.member_name for e in result.errors] == ["Latitude", "Longitude"]

    @pytest.mark.parametrize(
        "altitude, accuracy, codes",
        [
            (-501, None, ["InvalidAltitude"]),
            (10001, None, ["InvalidAltitude"]),
            (None, -1, ["InvalidAccuracy"]),
            (None, 1_000_001, ["InvalidAccuracy"]),
            ("x", None, ["InvalidNumber"]),
            (None, "far", ["InvalidNumber"]),
        ],
    )
    def test_altitude_and_accuracy(self, altitude, accuracy, codes):
        result, _ = Coordinate.try_create(0, 0, altitude=altitude, accuracy=accuracy)
        assert result.codes == codes

    def test_same_position_ignores_altitude(self):
        a = Coordinate.try_create("1.5", "2.5", altitude=100)[1]
        b = Coordinate.try_create("1.500", "2.5", decimal_places=3)[1]
        assert a.same_position(b)

    def test_distance_to(self):
        london = point("51.5074", "-0.1278")
        paris = point("48.8566", "2.3522")
        assert london.distance_to(paris) == pytest.approx(343.5, abs=1.0)


class TestGeoDistance:
    def test_units(self, origin, east):
        _, distance = GeoDistance.try_create(origin, east)
        assert distance.kilometers == pytest.approx(111.19, abs=0.01)
        assert distance.meters == pytest.approx(distance.kilometers * 1000)
        assert distance.miles == pytest.approx(distance.kilometers * 0.621371)
        assert distance.in_unit(DistanceUnit.NAUTICAL_MILES) == pytest.approx(distance.kilometers * 0.539957)
        assert str(distance) == "111.19 km"
        assert distance.to_formatted_string(DistanceUnit.METERS, 0) == "111195 m"

    def test_required(self):
        result, distance = GeoDistance.try_create(None, None)
        assert distance is None
        assert [e.member_name for e in result.errors] == ["From", "To"]

    def test_within_radius(self, origin, east):
        _, distance = GeoDistance.try_create(origin, east)
        assert distance.is_within_radius(200)
        assert not distance.is_within_radius(100)

    def test_description(self, origin, east):
        _, distance = GeoDistance.try_create(origin, east)
        assert distance.get_description().startswith(
            "Distance from 0.000000° N, 0.000000° E to 0.000000° N, 1.000000° E: 111.19 km"
        )


# =============================================================================
# Routes
# =============================================================================


class TestRouteSegment:
    def test_description(self, origin, east):
        _, segment = RouteSegment.try_create(origin, east, "Leg")
        assert segment.get_description() == (
            "Leg: 0.000000° N, 0.000000° E → 0.000000° N, 1.000000° E (111.19 km)"
        )

    def test_unnamed(self, origin, east):
        _, segment = RouteSegment.try_create(origin, east)
        assert str(segment).startswith("Segment: ")

    def test_missing_end(self, origin):
        result, segment = RouteSegment.try_create(origin, None)
        assert segment is None
        assert result.codes == ["Required"]


class TestGeospatialRoute:
    def test_contiguous(self, origin, east, north_east):
        legs = [RouteSegment.try_create(origin, east)[1], RouteSegment.try_create(east, north_east)[1]]
        result, route = GeospatialRoute.try_create(legs)
        assert result.is_valid
        assert len(route) == 2
        assert route.starting_point is origin
        assert route.ending_point is north_east
        assert route.get_waypoints() == [origin, east, north_east]
        assert route.total_distance_kilometers == pytest.approx(222.4, abs=0.1)
        assert route.total_distance_meters == pytest.approx(route.total_distance_kilometers * 1000)
        assert route.get_cumulative_distance(1) == pytest.approx(route.total_distance_kilometers)
        assert route.get_cumulative_distance(2) is None
        assert route.get_segment_distance(-1) is None
        assert route.get_segment_distance(0).kilometers == pytest.approx(111.19, abs=0.01)

    def test_description(self, origin, east):
        _, route = GeospatialRoute.try_create([RouteSegment.try_create(origin, east)[1]])
        assert route.get_description().startswith("Route: 1 segment, Total distance: 111.19 km")
        assert "\nFrom: 0.000000° N, 0.000000° E\nTo: 0.000000° N, 1.000000° E" in str(route)

    def test_gap_reported(self, origin, east, north_east):
        legs = [RouteSegment.try_create(origin, east)[1], RouteSegment.try_create(north_east, origin)[1]]
        result, route = GeospatialRoute.try_create(legs)
        assert route is None
        assert result.codes == ["NonContiguousSegments"]
        assert result.errors[0].member_name == "Segments[1]"
        assert result.errors[0].message == (
            "Segment 1 ends at 0.000000° N, 1.000000° E but segment 2 starts at "
            "1.000000° N, 1.000000° E. Segments must be contiguous."
        )

    def test_every_gap_reported(self, origin, east, north_east):
        leg = RouteSegment.try_create(origin, east)[1]
        result, _ = GeospatialRoute.try_create([leg, leg, leg])
        assert [e.member_name for e in result.errors] == ["Segments[1]", "Segments[2]"]

    @pytest.mark.parametrize(
        "segments, code",
        [(None, "Required"), ([], "InsufficientSegments"), ([None], "InvalidSegment")],
    )
    def test_bad_collections(self, segments, code):
        result, _ = GeospatialRoute.try_create(segments)
        assert result.codes == [code]


class TestRouteBuilders:
    def test_segment_builder(self, origin, east):
        result, segment = RouteSegmentBuilder().with_from(origin).with_to(east).with_name("A").build()
        assert result.is_valid
        assert segment.name == "A"

    def test_route_builder(self, origin, east, north_east):
        builder = (
            GeospatialRouteBuilder()
            .with_name("Coast road")
            .add_segment_between(origin, east, "Leg 1")
            .add_segment_between(east, north_east, "Leg 2")
        )
        assert builder.segment_count == 2
        result, route = builder.build()
        assert result.is_valid
        assert route.name == "Coast road"
        assert str(route).startswith("Coast road: 2 segments")

    def test_failed_segment_surfaces_in_build(self, origin):
        result, route = GeospatialRouteBuilder().add_segment_between(origin, None).build()
        assert route is None
        assert result.codes == ["Required"]
        assert result.errors[0].member_name == "To"

    def test_add_segments_skips_none(self, origin, east):
        segment = RouteSegment.try_create(origin, east)[1]
        builder = GeospatialRouteBuilder().add_segments([segment, None]).add_segment(None)
        assert builder.segment_count == 1

    def test_reset(self, origin):
        builder = GeospatialRouteBuilder().add_segment_between(origin, None)
        result, _ = builder.reset().build()
        assert result.codes == ["InsufficientSegments"]


class TestCoordinateBuilder:
    def test_missing_axes(self):
        result, coordinate = CoordinateBuilder().build()
        assert coordinate is None
        assert [e.member_name for e in result.errors] == ["Latitude", "Longitude"]

    def test_with_position(self):
        result, coordinate = CoordinateBuilder().with_position(40.7128, -74.006, altitude=10).build()
        assert result.is_valid
        assert coordinate.altitude == Decimal(10)

    def test_decimal_places(self):
        result, _ = CoordinateBuilder().with_decimal_places(2).with_coordinates("1.234", "2").build()
        assert result.codes == ["DecimalPlaces"]


# =============================================================================
# Boundaries
# =============================================================================


class TestGeoBoundary:
    def test_measurements(self, unit_square):
        assert unit_square.area_square_kilometers == pytest.approx(12364, rel=1e-2)
        assert unit_square.area_square_miles == pytest.approx(unit_square.area_square_kilometers * 0.386102)
        assert unit_square.perimeter_kilometers == pytest.approx(444.7, rel=1e-2)
        assert unit_square.get_description().startswith("Polygon with 4 vertices: Area ")

    def test_center(self, unit_square):
        assert unit_square.center.latitude.value == Decimal("0.5")
        assert unit_square.center.longitude.value == Decimal("0.5")

    def test_contains(self, unit_square):
        assert unit_square.contains(point("0.5", "0.5"))
        assert not unit_square.contains(point(2, 2))
        assert not unit_square.contains(None)

    def test_distance_to_nearest_edge(self, unit_square):
        assert unit_square.distance_to_nearest_edge(point(0, 0)) == pytest.approx(0.0)
        assert unit_square.distance_to_nearest_edge(None) == float("inf")

    def test_bounding_box(self, unit_square):
        bbox = unit_square.get_bounding_box()
        assert bbox == BoundingBox(Decimal(0), Decimal(1), Decimal(0), Decimal(1))
        assert bbox.contains(point("0.25", "0.75"))
        assert not bbox.contains(point("1.5", "0.5"))

    @pytest.mark.parametrize(
        "vertices, code",
        [
            (None, "Required"),
            ([], "InsufficientVertices"),
            (["placeholder", "placeholder"], "InsufficientVertices"),
        ],
    )
    def test_bad_vertices(self, vertices, code):
        result, boundary = GeoBoundary.try_create(vertices)
        assert boundary is None
        assert result.codes == [code]

    def test_none_vertex(self, origin, east):
        result, _ = GeoBoundary.try_create([origin, east, None])
        assert result.codes == ["InvalidVertex"]
