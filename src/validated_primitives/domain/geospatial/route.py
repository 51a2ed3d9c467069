"""Route segments and multi-segment routes."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable

from validated_primitives.domain.geospatial.coordinate import Coordinate
from validated_primitives.domain.geospatial.distance import KM_TO_MILES, GeoDistance
from validated_primitives.result import ValidationResult


@dataclass(frozen=True)
class RouteSegment:
    """One leg of a route, from one coordinate to the next."""

    from_: Coordinate
    to: Coordinate
    distance: GeoDistance
    name: str | None = None

    @classmethod
    def try_create(
        cls,
        from_: Coordinate | None,
        to: Coordinate | None,
        name: str | None = None,
    ) -> tuple[ValidationResult, RouteSegment | None]:
        result, distance = GeoDistance.try_create(from_, to)
        if distance is None:
            return result, None
        return result, cls(from_, to, distance, name)

    def get_description(self) -> str:
        label = f"{self.name}: " if self.name is not None else "Segment: "
        return (
            f"{label}{self.from_.to_cardinal_string()} → {self.to.to_cardinal_string()} "
            f"({self.distance.to_formatted_string()})"
        )

    def __str__(self) -> str:
        return self.get_description()


@dataclass(frozen=True)
class GeospatialRoute:
    """Ordered, contiguous segments: each segment starts where the previous one ended."""

    segments: tuple[RouteSegment, ...]
    total_distance_kilometers: float
    name: str | None = None

    @classmethod
    def try_create(
        cls,
        segments: Iterable[RouteSegment | None] | None,
        name: str | None = None,
    ) -> tuple[ValidationResult, GeospatialRoute | None]:
        """Build a route, reporting every gap between consecutive segments.

        A missing collection, an empty one or a None entry is reported on its
        own; otherwise each discontinuity adds one ``NonContiguousSegments``
        error naming ``Segments[i]``.
        """
        if segments is None:
            return ValidationResult.failure("Segments collection is required.", "Segments", "Required"), None
        segment_list = list(segments)
        if not segment_list:
            return (
                ValidationResult.failure(
                    "Route must have at least one segment.", "Segments", "InsufficientSegments"
                ),
                None,
            )
        if any(segment is None for segment in segment_list):
            return ValidationResult.failure("All segments must be valid.", "Segments", "InvalidSegment"), None

        result = ValidationResult.success()
        for i, (current, following) in enumerate(zip(segment_list, segment_list[1:])):
            if not current.to.same_position(following.from_):
                result.add_error(
                    f"Segment {i + 1} ends at {current.to.to_cardinal_string()} but segment {i + 2} "
                    f"starts at {following.from_.to_cardinal_string()}. Segments must be contiguous.",
                    f"Segments[{i + 1}]",
                    "NonContiguousSegments",
                )
        if not result.is_valid:
            return result, None

        total = sum(segment.distance.kilometers for segment in segment_list)
        return result, cls(tuple(segment_list), total, name)

    @property
    def total_distance_miles(self) -> float:
        return self.total_distance_kilometers * KM_TO_MILES

    @property
    def total_distance_meters(self) -> float:
        return self.total_distance_kilometers * 1000

    @property
    def starting_point(self) -> Coordinate:
        return self.segments[0].from_

    @property
    def ending_point(self) -> Coordinate:
        return self.segments[-1].to

    def get_waypoints(self) -> list[Coordinate]:
        """Start of the first segment followed by the end of every segment."""
        return [self.segments[0].from_] + [segment.to for segment in self.segments]

    def get_segment_distance(self, segment_index: int) -> GeoDistance | None:
        if not 0 <= segment_index < len(self.segments):
            return None
        return self.segments[segment_index].distance

    def get_cumulative_distance(self, segment_index: int) -> float | None:
        """Kilometres travelled up to and including ``segment_index``."""
        if not 0 <= segment_index < len(self.segments):
            return None
        return self.cumulative_distances()[segment_index]

    def cumulative_distances(self) -> list[float]:
        return list(accumulate(segment.distance.kilometers for segment in self.segments))

    def get_description(self) -> str:
        count = len(self.segments)
        label = f"{self.name}: " if self.name is not None else "Route: "
        return (
            f"{label}{count} segment{'' if count == 1 else 's'}, "
            f"Total distance: {self.total_distance_kilometers:.2f} km ({self.total_distance_miles:.2f} mi)"
            f"\nFrom: {self.starting_point.to_cardinal_string()}"
            f"\nTo: {self.ending_point.to_cardinal_string()}"
        )

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.get_description()
