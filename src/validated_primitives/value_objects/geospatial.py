"""Latitude and longitude in decimal degrees."""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from validated_primitives.result import ValidationResult
from validated_primitives.validators import geospatial
from validated_primitives.validators.base import ValueValidator
from validated_primitives.value_objects.base import ValidatedValueObject, try_decimal
from validated_primitives.value_objects.registry import register_value_object

DEFAULT_DECIMAL_PLACES = 6

_DECIMAL_PLACES_MESSAGE = "Decimal places must be between 0 and 8."


class _Degrees(ValidatedValueObject[Decimal]):
    """Decimal degrees with a declared precision of 0-8 places."""

    MIN_VALUE: ClassVar[Decimal]
    MAX_VALUE: ClassVar[Decimal]
    POSITIVE: ClassVar[tuple[str, str]]
    NEGATIVE: ClassVar[tuple[str, str]]

    decimal_places: int

    def __init__(self, value: Decimal, decimal_places: int, property_name: str) -> None:
        if not 0 <= decimal_places <= geospatial.MAX_COORDINATE_DECIMAL_PLACES:
            raise ValueError(_DECIMAL_PLACES_MESSAGE)
        self.decimal_places = decimal_places
        super().__init__(
            value,
            property_name,
            [
                self._range_validator(property_name),
                geospatial.decimal_places(property_name, decimal_places),
            ],
        )

    @classmethod
    def _range_validator(cls, property_name: str) -> ValueValidator[Decimal]:
        raise NotImplementedError

    @classmethod
    def _try_create(
        cls,
        value: Decimal | int | float | str,
        decimal_places: int,
        property_name: str,
    ):
        if not 0 <= decimal_places <= geospatial.MAX_COORDINATE_DECIMAL_PLACES:
            return cls._rejected(
                ValidationResult.failure(_DECIMAL_PLACES_MESSAGE, property_name, "InvalidDecimalPlaces"),
                property_name,
            )
        number, number_result = try_decimal(value, property_name)
        if number is None:
            return cls._rejected(number_result, property_name)
        return cls._validated(cls(number, decimal_places, property_name))

    def get_hemisphere(self) -> str:
        return self.POSITIVE[0] if self.value >= 0 else self.NEGATIVE[0]

    def get_cardinal_direction(self) -> str:
        return self.POSITIVE[1] if self.value >= 0 else self.NEGATIVE[1]

    def to_cardinal_string(self) -> str:
        """``"40.712800° N"``"""
        return f"{abs(self.value):.{self.decimal_places}f}° {self.get_cardinal_direction()}"

    def _equality_components(self) -> tuple[object, ...]:
        return (self.value, self.decimal_places)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{self.value:.{self.decimal_places}f}°"


@register_value_object
class Latitude(_Degrees):
    name = "latitude"
    category = "geospatial"

    MIN_VALUE = Decimal(-90)
    MAX_VALUE = Decimal(90)
    POSITIVE = ("North", "N")
    NEGATIVE = ("South", "S")

    @classmethod
    def _range_validator(cls, property_name: str) -> ValueValidator[Decimal]:
        return geospatial.latitude_range(property_name, cls.MIN_VALUE, cls.MAX_VALUE)

    @classmethod
    def try_create(
        cls,
        value: Decimal | int | float | str,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        property_name: str = "Latitude",
    ) -> tuple[ValidationResult, "Latitude | None"]:
        return cls._try_create(value, decimal_places, property_name)


@register_value_object
class Longitude(_Degrees):
    name = "longitude"
    category = "geospatial"

    MIN_VALUE = Decimal(-180)
    MAX_VALUE = Decimal(180)
    POSITIVE = ("East", "E")
    NEGATIVE = ("West", "W")

    @classmethod
    def _range_validator(cls, property_name: str) -> ValueValidator[Decimal]:
        return geospatial.longitude_range(property_name, cls.MIN_VALUE, cls.MAX_VALUE)

    @classmethod
    def try_create(
        cls,
        value: Decimal | int | float | str,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        property_name: str = "Longitude",
    ) -> tuple[ValidationResult, "Longitude | None"]:
        return cls._try_create(value, decimal_places, property_name)
