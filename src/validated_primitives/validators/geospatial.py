"""Latitude and longitude validators (decimal degrees)."""

from __future__ import annotations

from decimal import Decimal

from validated_primitives.validators import money
from validated_primitives.validators.base import ValueValidator

MAX_COORDINATE_DECIMAL_PLACES = 8


def latitude_range(
    field_name: str = "Latitude",
    minimum: Decimal = Decimal(-90),
    maximum: Decimal = Decimal(90),
) -> ValueValidator[Decimal]:
    return money.value_range(field_name, minimum, maximum, unit="°")


def longitude_range(
    field_name: str = "Longitude",
    minimum: Decimal = Decimal(-180),
    maximum: Decimal = Decimal(180),
) -> ValueValidator[Decimal]:
    return money.value_range(field_name, minimum, maximum, unit="°")


def decimal_places(field_name: str = "Latitude", max_decimal_places: int = 6) -> ValueValidator[Decimal]:
    return money.decimal_places(field_name, max_decimal_places)
