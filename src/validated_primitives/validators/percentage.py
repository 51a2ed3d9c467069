"""Percentage validators (values expressed on the 0-100 scale)."""

from __future__ import annotations

from decimal import Decimal

from validated_primitives.validators import money
from validated_primitives.validators.base import ValueValidator


def value_range(
    field_name: str = "Percentage",
    minimum: Decimal = Decimal(0),
    maximum: Decimal = Decimal(100),
) -> ValueValidator[Decimal]:
    return money.value_range(field_name, minimum, maximum, unit="%")


def decimal_places(field_name: str = "Percentage", max_decimal_places: int = 2) -> ValueValidator[Decimal]:
    return money.decimal_places(field_name, max_decimal_places)
