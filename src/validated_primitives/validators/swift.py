"""SWIFT/BIC code validators (ISO 9362).

Structure: ``AAAABBCCXXX`` where AAAA is the institution, BB the country,
CC the location and the optional XXX the branch.
"""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import (
    ValueValidator,
    compile_pattern,
    is_ascii_letters,
    is_blank,
    matches,
)
from validated_primitives.validators.common import required

_FORMAT = compile_pattern(r"^[A-Z0-9]+$")
_STRUCTURE = compile_pattern(r"^[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}([A-Z0-9]{3})?$")


def not_null_or_whitespace(field_name: str = "SwiftCode") -> ValueValidator[str]:
    return required(field_name, "SWIFT code must be provided")


def valid_format(field_name: str = "SwiftCode") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not matches(_FORMAT, value.strip().upper()):
            return ValidationResult.failure(
                "SWIFT code must contain only letters and digits (ISO 9362)",
                field_name,
                "InvalidFormat",
            )
        return ValidationResult.success()

    return validate


def valid_length(field_name: str = "SwiftCode") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if len(value.strip()) not in (8, 11):
            return ValidationResult.failure(
                "SWIFT code must be either 8 characters (BIC8) or 11 characters (BIC11) "
                "according to ISO 9362",
                field_name,
                "InvalidLength",
            )
        return ValidationResult.success()

    return validate


def valid_structure(field_name: str = "SwiftCode") -> ValueValidator[str]:
    """Institution, country, location and branch shape. Wrong lengths are left to ``valid_length``."""

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        normalized = value.strip().upper()
        if len(normalized) not in (8, 11):
            return ValidationResult.success()
        if not matches(_STRUCTURE, normalized):
            return ValidationResult.failure(
                "SWIFT code structure is invalid. ISO 9362 format: 4 letter institution code "
                "+ 2 letter country code + 2 alphanumeric location code "
                "+ optional 3 alphanumeric branch code",
                field_name,
                "InvalidStructure",
            )
        return ValidationResult.success()

    return validate


def valid_country_code(field_name: str = "SwiftCode") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        normalized = value.strip().upper()
        if len(normalized) < 6:
            return ValidationResult.success()
        if not is_ascii_letters(normalized[4:6]):
            return ValidationResult.failure(
                "SWIFT code contains invalid country code. Country code must be 2 letters "
                "(ISO 3166-1 alpha-2) as required by ISO 9362",
                field_name,
                "InvalidCountryCode",
            )
        return ValidationResult.success()

    return validate


def not_test_code(field_name: str = "SwiftCode") -> ValueValidator[str]:
    """Reject test codes, whose location code ends in ``0``."""

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        normalized = value.strip().upper()
        if len(normalized) < 8:
            return ValidationResult.success()
        if normalized[7] == "0":
            return ValidationResult.failure(
                "SWIFT code appears to be a test code (location code second character is '0'). "
                "Test codes should not be used for real transactions. (ISO 9362)",
                field_name,
                "TestCode",
            )
        return ValidationResult.success()

    return validate
