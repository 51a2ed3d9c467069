"""Geographic coordinates and great-circle distance.

Distances use the haversine formula on a sphere of radius 6371.0 km. The
formula is written with NumPy so the same code serves a single pair of
points and whole arrays of vertices.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto

import numpy as np

from validated_primitives.result import ValidationResult
from validated_primitives.value_objects.base import try_decimal
from validated_primitives.value_objects.geospatial import DEFAULT_DECIMAL_PLACES, Latitude, Longitude


class DistanceUnit(Enum):
    """Distance units for geospatial calculations."""

    KILOMETERS = auto()
    MILES = auto()
    METERS = auto()
    NAUTICAL_MILES = auto()


EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_MILES = 3958.8

# Earth radius in different units
EARTH_RADIUS = {
    DistanceUnit.KILOMETERS: EARTH_RADIUS_KM,
    DistanceUnit.MILES: EARTH_RADIUS_MILES,
    DistanceUnit.METERS: EARTH_RADIUS_KM * 1000,
    DistanceUnit.NAUTICAL_MILES: 3440.1,
}

MIN_ALTITUDE_M = Decimal(-500)
MAX_ALTITUDE_M = Decimal(10000)
MAX_ACCURACY_M = Decimal(1_000_000)


def haversine_vectorized(
    lat1: np.ndarray | float,
    lon1: np.ndarray | float,
    lat2: np.ndarray | float,
    lon2: np.ndarray | float,
    unit: DistanceUnit = DistanceUnit.KILOMETERS,
) -> np.ndarray:
    """Compute Haversine distance (vectorized).

    Args:
        lat1: Latitude(s) of first point(s) in degrees
        lon1: Longitude(s) of first point(s) in degrees
        lat2: Latitude(s) of second point(s) in degrees
        lon2: Longitude(s) of second point(s) in degrees
        unit: Distance unit (default: kilometers)

    Returns:
        Distance(s) in the requested unit
    """
    radius = EARTH_RADIUS[unit]

    lat1_rad = np.radians(lat1)
    lon1_rad = np.radians(lon1)
    lat2_rad = np.radians(lat2)
    lon2_rad = np.radians(lon2)

    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = (
        np.sin(dlat / 2) ** 2
        + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlon / 2) ** 2
    )
    c = 2 * np.arcsin(np.sqrt(np.clip(a, 0, 1)))

    return radius * c


@dataclass(frozen=True)
class Coordinate:
    """A point on the earth with optional altitude and accuracy (both metres)."""

    latitude: Latitude
    longitude: Longitude
    altitude: Decimal | None = None
    accuracy: Decimal | None = None

    @classmethod
    def try_create(
        cls,
        latitude: Decimal | int | float | str,
        longitude: Decimal | int | float | str,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        altitude: Decimal | int | float | str | None = None,
        accuracy: Decimal | int | float | str | None = None,
    ) -> tuple[ValidationResult, Coordinate | None]:
        """Validate both axes plus the optional altitude and accuracy bounds.

        Altitude must lie within -500..10,000 m and accuracy within
        0..1,000,000 m. All problems are reported together.
        """
        result = ValidationResult.success()

        lat_result, lat_value = Latitude.try_create(latitude, decimal_places, "Latitude")
        result.merge(lat_result)
        lon_result, lon_value = Longitude.try_create(longitude, decimal_places, "Longitude")
        result.merge(lon_result)

        if altitude is not None:
            altitude, altitude_result = try_decimal(altitude, "Altitude")
            result.merge(altitude_result)
        if accuracy is not None:
            accuracy, accuracy_result = try_decimal(accuracy, "Accuracy")
            result.merge(accuracy_result)

        if altitude is not None and altitude < MIN_ALTITUDE_M:
            result.add_error(
                "Altitude cannot be less than -500 meters (below sea level limit).", "Altitude", "InvalidAltitude"
            )
        if altitude is not None and altitude > MAX_ALTITUDE_M:
            result.add_error(
                "Altitude cannot exceed 10,000 meters (typical GPS limit).", "Altitude", "InvalidAltitude"
            )
        if accuracy is not None and accuracy < 0:
            result.add_error("Accuracy cannot be negative.", "Accuracy", "InvalidAccuracy")
        if accuracy is not None and accuracy > MAX_ACCURACY_M:
            result.add_error("Accuracy cannot exceed 1,000,000 meters.", "Accuracy", "InvalidAccuracy")

        if not result.is_valid:
            return result, None
        return result, cls(lat_value, lon_value, altitude, accuracy)

    def same_position(self, other: Coordinate) -> bool:
        """True when latitude and longitude values match, ignoring precision and altitude."""
        return (
            self.latitude.value == other.latitude.value
            and self.longitude.value == other.longitude.value
        )

    def distance_to(self, other: Coordinate, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> float:
        """Great-circle distance to ``other``, in kilometres by default."""
        return float(
            haversine_vectorized(
                float(self.latitude.value),
                float(self.longitude.value),
                float(other.latitude.value),
                float(other.longitude.value),
                unit,
            )
        )

    def to_cardinal_string(self) -> str:
        """``"40.712800° N, 74.006000° W, 10.0m"``"""
        parts = [self.latitude.to_cardinal_string(), self.longitude.to_cardinal_string()]
        if self.altitude is not None:
            parts.append(f"{self.altitude:.1f}m")
        return ", ".join(parts)

    def to_decimal_degrees_string(self) -> str:
        return f"{self.latitude.value}, {self.longitude.value}"

    def to_google_maps_format(self) -> str:
        return f"{self.latitude.value},{self.longitude.value}"

    def __str__(self) -> str:
        text = self.to_cardinal_string()
        if self.accuracy is not None:
            text += f" (±{self.accuracy:.0f}m)"
        return text
