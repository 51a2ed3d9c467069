"""ABA routing transit number validators."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import (
    ValueValidator,
    compile_pattern,
    is_ascii_digits,
    is_blank,
    matches,
    remove_separators,
)
from validated_primitives.validators.checksum import is_aba_checksum_valid
from validated_primitives.validators.common import required

_FORMAT = compile_pattern(r"^[\d\s\-]+$")


def is_valid_federal_reserve_symbol(prefix: int) -> bool:
    """First two digits: 00-12 (banks), 21-32 (thrifts), 61-72 (electronic), 80 (travelers cheques)."""
    return 0 <= prefix <= 12 or 21 <= prefix <= 32 or 61 <= prefix <= 72 or prefix == 80


def not_null_or_whitespace(field_name: str = "RoutingNumber") -> ValueValidator[str]:
    return required(field_name, "Routing number must be provided")


def valid_format(field_name: str = "RoutingNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not matches(_FORMAT, value.strip()):
            return ValidationResult.failure(
                "Routing number must contain only digits and optional separators (- or space)",
                field_name,
                "InvalidFormat",
            )
        return ValidationResult.success()

    return validate


def only_digits(field_name: str = "RoutingNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not is_ascii_digits(remove_separators(value)):
            return ValidationResult.failure(
                "Routing number must contain only digits (separators like - and spaces are allowed)",
                field_name,
                "InvalidCharacters",
            )
        return ValidationResult.success()

    return validate


def valid_length(field_name: str = "RoutingNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if len(remove_separators(value)) != 9:
            return ValidationResult.failure(
                "Routing number must be exactly 9 digits", field_name, "InvalidLength"
            )
        return ValidationResult.success()

    return validate


def valid_checksum(field_name: str = "RoutingNumber") -> ValueValidator[str]:
    """ABA 3-7-1 weighted checksum. Malformed input is left to the other validators."""

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        digits = remove_separators(value)
        if len(digits) != 9 or not is_ascii_digits(digits):
            return ValidationResult.success()
        if not is_aba_checksum_valid(digits):
            return ValidationResult.failure(
                "Routing number checksum is invalid. The routing number does not pass ABA validation.",
                field_name,
                "InvalidChecksum",
            )
        return ValidationResult.success()

    return validate


def valid_federal_reserve_symbol(field_name: str = "RoutingNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        digits = remove_separators(value)
        if len(digits) < 2 or not is_ascii_digits(digits):
            return ValidationResult.success()
        if not is_valid_federal_reserve_symbol(int(digits[:2])):
            return ValidationResult.failure(
                "Routing number has an invalid Federal Reserve routing symbol. The first two "
                "digits must be in the ranges: 00-12, 21-32, 61-72, or 80.",
                field_name,
                "InvalidFederalReserveSymbol",
            )
        return ValidationResult.success()

    return validate
