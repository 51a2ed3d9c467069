"""IBAN and BBAN validators (ISO 13616).

An account number is classified first (``detect_account_type``); IBANs are
then checked for structure, registered country, country length and the
mod 97 checksum, while BBANs get a length check and an optional
country-specific format check.
"""

from __future__ import annotations

from enum import Enum

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators.base import (
    ValueValidator,
    compile_pattern,
    is_ascii_digits,
    is_ascii_letters,
    is_blank,
    matches,
    normalize,
)
from validated_primitives.validators.checksum import is_iban_checksum_valid
from validated_primitives.validators.common import required


class BankAccountNumberType(str, Enum):
    """Kind of bank account identifier."""

    UNKNOWN = "unknown"
    IBAN = "iban"
    BBAN = "bban"


# ISO 13616 registry: country code -> total IBAN length
IBAN_LENGTHS: dict[str, int] = {
    "AD": 24, "AE": 23, "AL": 28, "AT": 20, "AZ": 28, "BA": 20, "BE": 16,
    "BG": 22, "BH": 22, "BR": 29, "BY": 28, "CH": 21, "CR": 22, "CY": 28,
    "CZ": 24, "DE": 22, "DK": 18, "DO": 28, "EE": 20, "EG": 29, "ES": 24,
    "FI": 18, "FO": 18, "FR": 27, "GB": 22, "GE": 22, "GI": 23, "GL": 18,
    "GR": 27, "GT": 28, "HR": 21, "HU": 28, "IE": 22, "IL": 23, "IS": 26,
    "IT": 27, "JO": 30, "KW": 30, "KZ": 20, "LB": 28, "LC": 32, "LI": 21,
    "LT": 20, "LU": 20, "LV": 21, "MC": 27, "MD": 24, "ME": 22, "MK": 19,
    "MR": 27, "MT": 31, "MU": 30, "NL": 18, "NO": 15, "PK": 24, "PL": 28,
    "PS": 29, "PT": 25, "QA": 29, "RO": 24, "RS": 22, "SA": 24, "SE": 24,
    "SI": 19, "SK": 24, "SM": 27, "TN": 24, "TR": 26, "UA": 29, "VA": 22,
    "VG": 24, "XK": 20,
}

_ALNUM = compile_pattern(r"^[A-Z0-9]+$")
_IBAN_STRUCTURE = compile_pattern(r"^[A-Z]{2}\d{2}[A-Z0-9]+$")


def normalize_account_number(value: str | None) -> str:
    """Uppercase and strip spaces and hyphens. Idempotent."""
    return normalize(value) if value else ""


def detect_account_type(value: str | None) -> BankAccountNumberType:
    """Classify an account number.

    IBAN when it starts with two letters and two digits and the letters are a
    registered IBAN country; BBAN when it is all digits or does not start
    with two letters; unknown otherwise.
    """
    normalized = normalize_account_number(value)
    if not normalized:
        return BankAccountNumberType.UNKNOWN
    if (
        len(normalized) >= 4
        and is_ascii_letters(normalized[:2])
        and is_ascii_digits(normalized[2:4])
        and normalized[:2] in IBAN_LENGTHS
    ):
        return BankAccountNumberType.IBAN
    if is_ascii_digits(normalized) or not is_ascii_letters(normalized[:2]):
        return BankAccountNumberType.BBAN
    return BankAccountNumberType.UNKNOWN


def not_null_or_whitespace(field_name: str = "IbanNumber") -> ValueValidator[str]:
    return required(field_name, "Account number must be provided")


def valid_format(field_name: str = "IbanNumber") -> ValueValidator[str]:
    """Only letters and digits once separators are removed."""

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not matches(_ALNUM, normalize_account_number(value)):
            return ValidationResult.failure(
                "Account number must contain only letters and digits", field_name, "InvalidFormat"
            )
        return ValidationResult.success()

    return validate


def valid_iban_format(field_name: str = "IbanNumber") -> ValueValidator[str]:
    """Structure, registered country and country length of an IBAN."""

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        normalized = normalize_account_number(value)
        if not matches(_IBAN_STRUCTURE, normalized):
            return ValidationResult.failure(
                "IBAN must start with 2 letter country code and 2 check digits (ISO 13616)",
                field_name,
                "InvalidIbanStructure",
            )
        country = normalized[:2]
        expected = IBAN_LENGTHS.get(country)
        if expected is None:
            return ValidationResult.failure(
                f"IBAN country code '{country}' is not recognized (ISO 13616)",
                field_name,
                "InvalidIbanCountryCode",
            )
        if len(normalized) != expected:
            return ValidationResult.failure(
                f"IBAN for country {country} must be {expected} characters long, "
                f"but was {len(normalized)}",
                field_name,
                "InvalidIbanLength",
            )
        return ValidationResult.success()

    return validate


def valid_iban_checksum(field_name: str = "IbanNumber") -> ValueValidator[str]:
    """ISO 13616 mod 97 check. Values shorter than 4 characters are left to other validators."""

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        normalized = normalize_account_number(value)
        if len(normalized) < 4:
            return ValidationResult.success()
        if not is_iban_checksum_valid(normalized):
            return ValidationResult.failure(
                "IBAN checksum is invalid (ISO 13616 mod-97 validation failed)",
                field_name,
                "InvalidIbanChecksum",
            )
        return ValidationResult.success()

    return validate


def _fixed_length(length: int, message: str):
    return lambda bban: (len(bban) == length, message)


def _digits_between(minimum: int, maximum: int, message: str):
    return lambda bban: (minimum <= len(bban) <= maximum and is_ascii_digits(bban), message)


_BBAN_RULES = {
    CountryCode.UNITED_KINGDOM: _digits_between(8, 8, "UK BBAN must be 8 digits"),
    CountryCode.UNITED_STATES: _digits_between(4, 17, "US BBAN must be 4-17 digits"),
    CountryCode.GERMANY: _fixed_length(18, "German BBAN must be 18 characters"),
    CountryCode.FRANCE: _fixed_length(23, "French BBAN must be 23 characters"),
    CountryCode.NETHERLANDS: _fixed_length(14, "Dutch BBAN must be 14 characters"),
    CountryCode.SPAIN: _fixed_length(20, "Spanish BBAN must be 20 characters"),
    CountryCode.ITALY: _fixed_length(23, "Italian BBAN must be 23 characters"),
}


def valid_bban_format(
    field_name: str = "IbanNumber",
    country: CountryCode | None = None,
) -> ValueValidator[str]:
    """BBAN length (4-34) and, when ``country`` is given, its national format."""
    rule = _BBAN_RULES.get(country) if country is not None else None

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        normalized = normalize_account_number(value)
        if not 4 <= len(normalized) <= 34:
            return ValidationResult.failure(
                "BBAN must be between 4 and 34 characters", field_name, "InvalidBbanLength"
            )
        if rule is not None:
            ok, message = rule(normalized)
            if not ok:
                return ValidationResult.failure(message, field_name, "InvalidBbanFormat")
        return ValidationResult.success()

    return validate
