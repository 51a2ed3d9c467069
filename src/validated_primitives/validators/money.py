"""Monetary amount validators.

Amounts are ``decimal.Decimal``; the number of decimal places is the
scale the amount was written with, so ``Decimal("1.50")`` has two.
"""

from __future__ import annotations

from decimal import Decimal

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import ValueValidator, count_decimal_places


def non_negative(field_name: str = "Money") -> ValueValidator[Decimal]:
    def validate(value: Decimal) -> ValidationResult:
        if value < 0:
            return ValidationResult.failure(f"{field_name} cannot be negative.", field_name, "NonNegative")
        return ValidationResult.success()

    return validate


def decimal_places(field_name: str = "Money", max_decimal_places: int = 2) -> ValueValidator[Decimal]:
    def validate(value: Decimal) -> ValidationResult:
        if count_decimal_places(value) > max_decimal_places:
            return ValidationResult.failure(
                f"{field_name} cannot have more than {max_decimal_places} decimal places.",
                field_name,
                "DecimalPlaces",
            )
        return ValidationResult.success()

    return validate


def value_range(
    field_name: str = "Money",
    minimum: Decimal = Decimal(0),
    maximum: Decimal | None = None,
    unit: str = "",
) -> ValueValidator[Decimal]:
    """Inclusive bounds check; ``unit`` is appended to the bound in messages."""

    def validate(value: Decimal) -> ValidationResult:
        if value < minimum:
            return ValidationResult.failure(
                f"{field_name} must be at least {minimum}{unit}.", field_name, "MinValue"
            )
        if maximum is not None and value > maximum:
            return ValidationResult.failure(
                f"{field_name} must be at most {maximum}{unit}.", field_name, "MaxValue"
            )
        return ValidationResult.success()

    return validate
