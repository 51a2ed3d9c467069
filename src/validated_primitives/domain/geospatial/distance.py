"""Distance between two coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from validated_primitives.domain.geospatial.coordinate import Coordinate, DistanceUnit
from validated_primitives.result import ValidationResult

KM_TO_MILES = 0.621371
KM_TO_NAUTICAL_MILES = 0.539957

_UNIT_SUFFIX = {
    DistanceUnit.KILOMETERS: "km",
    DistanceUnit.MILES: "mi",
    DistanceUnit.METERS: "m",
    DistanceUnit.NAUTICAL_MILES: "nm",
}


@dataclass(frozen=True)
class GeoDistance:
    """Great-circle distance between two coordinates, stored in kilometres."""

    from_: Coordinate
    to: Coordinate
    kilometers: float

    @classmethod
    def try_create(
        cls,
        from_: Coordinate | None,
        to: Coordinate | None,
    ) -> tuple[ValidationResult, GeoDistance | None]:
        result = ValidationResult.success()
        if from_ is None:
            result.add_error("Starting coordinate (From) is required.", "From", "Required")
        if to is None:
            result.add_error("Ending coordinate (To) is required.", "To", "Required")
        if not result.is_valid:
            return result, None
        return result, cls(from_, to, from_.distance_to(to))

    @property
    def miles(self) -> float:
        return self.kilometers * KM_TO_MILES

    @property
    def meters(self) -> float:
        return self.kilometers * 1000

    @property
    def nautical_miles(self) -> float:
        return self.kilometers * KM_TO_NAUTICAL_MILES

    def in_unit(self, unit: DistanceUnit) -> float:
        if unit is DistanceUnit.MILES:
            return self.miles
        if unit is DistanceUnit.METERS:
            return self.meters
        if unit is DistanceUnit.NAUTICAL_MILES:
            return self.nautical_miles
        return self.kilometers

    def to_formatted_string(self, unit: DistanceUnit = DistanceUnit.KILOMETERS, decimal_places: int = 2) -> str:
        """``"3935.75 km"``, ``"2445.56 mi"``, ..."""
        return f"{self.in_unit(unit):.{decimal_places}f} {_UNIT_SUFFIX[unit]}"

    def get_description(self) -> str:
        return (
            f"Distance from {self.from_.to_cardinal_string()} to {self.to.to_cardinal_string()}: "
            f"{self.kilometers:.2f} km ({self.miles:.2f} mi)"
        )

    def is_within_radius(self, radius_km: float) -> bool:
        return self.kilometers <= radius_km

    def __str__(self) -> str:
        return self.to_formatted_string()
