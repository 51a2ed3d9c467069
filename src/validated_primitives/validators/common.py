"""Validators shared by most value objects."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import ValueValidator, is_blank


def not_null_or_whitespace(field_name: str) -> ValueValidator[str]:
    """Fail when the value is None, empty or whitespace only."""

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.failure(
                f"{field_name} cannot be null or whitespace.", field_name, "NotNullOrWhitespace"
            )
        return ValidationResult.success()

    return validate


def max_length(field_name: str, maximum: int) -> ValueValidator[str]:
    """Fail when the value is longer than ``maximum``. None passes."""

    def validate(value: str | None) -> ValidationResult:
        if value is not None and len(value) > maximum:
            return ValidationResult.failure(
                f"{field_name} must be at most {maximum} characters.", field_name, "MaxLength"
            )
        return ValidationResult.success()

    return validate


def length(field_name: str, minimum: int, maximum: int) -> ValueValidator[str]:
    """Fail when the value length is outside ``[minimum, maximum]``. None passes."""

    def validate(value: str | None) -> ValidationResult:
        if value is not None and not (minimum <= len(value) <= maximum):
            return ValidationResult.failure(
                f"{field_name} must be between {minimum} and {maximum} characters.",
                field_name,
                "Length",
            )
        return ValidationResult.success()

    return validate


def required(field_name: str, message: str, code: str = "Required") -> ValueValidator[str]:
    """Presence check with a catalogue specific message."""

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.failure(message, field_name, code)
        return ValidationResult.success()

    return validate
