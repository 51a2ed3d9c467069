"""Payment card validators: card number, expiration and security number.

Card numbers are validated on their digits only, so any separators the
user typed are ignored. Brand detection works on prefix and length.
"""

from __future__ import annotations

import calendar
from datetime import date

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import ValueValidator, extract_digits, is_blank, utc_today
from validated_primitives.validators.checksum import is_luhn_valid

# Card brand patterns: (prefixes, lengths)
CARD_PATTERNS: dict[str, tuple[list[str], list[int]]] = {
    "visa": (["4"], [13, 16, 19]),
    "mastercard": (
        ["51", "52", "53", "54", "55"] +
        [str(i) for i in range(2221, 2721)],
        [16]
    ),
    "amex": (["34", "37"], [15]),
    "discover": (
        ["6011", "65"] + [f"64{i}" for i in range(4, 10)],
        [16]
    ),
    "jcb": ([str(i) for i in range(3528, 3590)], [16]),
    "diners": (["36", "38", "39"] + [f"30{i}" for i in range(6)], [14]),
}


def detect_brand(number: str) -> str | None:
    """Detect card brand from number.

    Args:
        number: Card number (digits only)

    Returns:
        Brand name or None if not detected
    """
    for brand, (prefixes, lengths) in CARD_PATTERNS.items():
        if len(number) in lengths:
            for prefix in prefixes:
                if number.startswith(prefix):
                    return brand
    return None


def normalize_expiration_year(year: int) -> int:
    """Two-digit years are in the 2000s."""
    return year + 2000 if 0 <= year < 100 else year


# ============================================================================
# Card number
# ============================================================================

def not_empty(field_name: str = "CreditCardNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.failure("Credit card number must be provided", field_name, "Required")
        return ValidationResult.success()

    return validate


def valid_digit_count(field_name: str = "CreditCardNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if not 13 <= len(extract_digits(value)) <= 19:
            return ValidationResult.failure(
                "Credit card number must contain between 13 and 19 digits", field_name, "InvalidLength"
            )
        return ValidationResult.success()

    return validate


def not_all_identical_digits(field_name: str = "CreditCardNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        digits = extract_digits(value)
        if digits and digits == digits[0] * len(digits):
            return ValidationResult.failure(
                "Credit card number cannot consist of all identical digits",
                field_name,
                "IdenticalDigits",
            )
        return ValidationResult.success()

    return validate


def luhn_check(field_name: str = "CreditCardNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if not is_luhn_valid(extract_digits(value)):
            return ValidationResult.failure(
                "Credit card number is not valid (Luhn check failed)", field_name, "InvalidChecksum"
            )
        return ValidationResult.success()

    return validate


# ============================================================================
# Expiration, validated as a (month, year) pair
# ============================================================================

def valid_month(field_name: str = "Expiration") -> ValueValidator[tuple[int, int]]:
    def validate(value: tuple[int, int]) -> ValidationResult:
        month, _ = value
        if not 1 <= month <= 12:
            return ValidationResult.failure("Month must be between 1 and 12.", field_name, "InvalidMonth")
        return ValidationResult.success()

    return validate


def valid_year(field_name: str = "Expiration") -> ValueValidator[tuple[int, int]]:
    def validate(value: tuple[int, int]) -> ValidationResult:
        _, year = value
        if year < 0:
            return ValidationResult.failure("Year must be a positive number.", field_name, "InvalidYear")
        return ValidationResult.success()

    return validate


def not_expired(field_name: str = "Expiration") -> ValueValidator[tuple[int, int]]:
    """The last day of the expiry month must not be before the first of the current UTC month."""

    def validate(value: tuple[int, int]) -> ValidationResult:
        month, year = value
        if not 1 <= month <= 12 or year < 0:
            return ValidationResult.success()
        year = normalize_expiration_year(year)
        if year > 9999:
            return ValidationResult.success()
        today = utc_today()
        last_day = date(year, month, calendar.monthrange(year, month)[1])
        if last_day < today.replace(day=1):
            return ValidationResult.failure(
                "Expiration date must be in the future or current month.", field_name, "Expired"
            )
        return ValidationResult.success()

    return validate


# ============================================================================
# Security number (CVV / CVC)
# ============================================================================

def security_number_not_empty(field_name: str = "SecurityNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.failure("Security number must be provided", field_name, "Required")
        return ValidationResult.success()

    return validate


def security_number_length(field_name: str = "SecurityNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if not 3 <= len(extract_digits(value)) <= 4:
            return ValidationResult.failure(
                "Security number must contain 3 or 4 digits", field_name, "InvalidLength"
            )
        return ValidationResult.success()

    return validate
