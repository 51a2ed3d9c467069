"""US Social Security Number validators.

The area, group and serial checks are independent of each other, so an
input like ``000-00-0000`` reports all three problems.
"""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import (
    ValueValidator,
    compile_pattern,
    extract_digits,
    is_blank,
    matches,
)
from validated_primitives.validators.common import required

_DASHED = compile_pattern(r"^\d{3}-\d{2}-\d{4}$")

FORMAT_MESSAGE = "Social Security Number must be in format XXX-XX-XXXX or 9 digits"

# 987-65-4320 .. 987-65-4329 are reserved for advertising
ADVERTISING_PREFIX = "98765432"


def _ssn_portion(value: str) -> str:
    """The run of digits, dashes and spaces starting at the first digit, spaces removed."""
    cleaned = value.strip()
    start = next((i for i, c in enumerate(cleaned) if c.isdigit()), None)
    if start is None:
        return ""
    end = start
    while end < len(cleaned) and (cleaned[end].isdigit() or cleaned[end] in "- "):
        end += 1
    return cleaned[start:end].replace(" ", "")


def check_input_format(value: str | None, field_name: str = "SocialSecurityNumber") -> ValidationResult:
    """Nine digits, and when dashes are used they must sit at ``XXX-XX-XXXX``."""
    if is_blank(value):
        return ValidationResult.success()
    if len(extract_digits(value)) != 9:
        return ValidationResult.failure(FORMAT_MESSAGE, field_name, "InvalidFormat")
    if "-" in value:
        portion = _ssn_portion(value)
        if "-" in portion and len(extract_digits(portion)) == 9 and not matches(_DASHED, portion):
            return ValidationResult.failure(FORMAT_MESSAGE, field_name, "InvalidFormat")
    return ValidationResult.success()


def not_empty(field_name: str = "SocialSecurityNumber") -> ValueValidator[str]:
    return required(field_name, "Social Security Number must be provided")


def valid_format(field_name: str = "SocialSecurityNumber") -> ValueValidator[str]:
    return lambda value: check_input_format(value, field_name)


def valid_area_number(field_name: str = "SocialSecurityNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        digits = extract_digits(value)
        if len(digits) < 3:
            return ValidationResult.success()
        area = int(digits[:3])
        if area == 0:
            reason = "000"
        elif area == 666:
            reason = "666"
        elif area >= 900:
            reason = "900-999"
        else:
            return ValidationResult.success()
        return ValidationResult.failure(
            f"Social Security Number cannot have area number {reason}", field_name, "InvalidAreaNumber"
        )

    return validate


def valid_group_number(field_name: str = "SocialSecurityNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        digits = extract_digits(value)
        if len(digits) >= 5 and digits[3:5] == "00":
            return ValidationResult.failure(
                "Social Security Number cannot have group number 00", field_name, "InvalidGroupNumber"
            )
        return ValidationResult.success()

    return validate


def valid_serial_number(field_name: str = "SocialSecurityNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        digits = extract_digits(value)
        if len(digits) >= 9 and digits[5:9] == "0000":
            return ValidationResult.failure(
                "Social Security Number cannot have serial number 0000",
                field_name,
                "InvalidSerialNumber",
            )
        return ValidationResult.success()

    return validate


def not_advertising_number(field_name: str = "SocialSecurityNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        digits = extract_digits(value)
        if len(digits) == 9 and digits.startswith(ADVERTISING_PREFIX):
            return ValidationResult.failure(
                "Social Security Number cannot be a known advertising/test number",
                field_name,
                "AdvertisingNumber",
            )
        return ValidationResult.success()

    return validate
