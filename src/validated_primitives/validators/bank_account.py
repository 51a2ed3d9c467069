"""Bank account number validators.

Country format rules come from a static table. Countries that use IBANs
domestically are checked as IBANs (prefix, length, structure, mod 97);
the others have a national digit pattern.
"""

from __future__ import annotations

from typing import Callable

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators.base import (
    ValueValidator,
    compile_pattern,
    is_blank,
    matches,
    normalize,
)
from validated_primitives.validators.checksum import is_iban_checksum_valid
from validated_primitives.validators.common import required

_ALLOWED_CHARACTERS = compile_pattern(r"^[A-Z0-9\s\-]+$")
_IBAN_STRUCTURE = compile_pattern(r"^[A-Z]{2}\d{2}[A-Z0-9]+$")

# Countries whose domestic account numbers are IBANs: country -> (prefix, length)
DOMESTIC_IBAN_COUNTRIES: dict[CountryCode, tuple[str, int]] = {
    CountryCode.GERMANY: ("DE", 22),
    CountryCode.FRANCE: ("FR", 27),
    CountryCode.ITALY: ("IT", 27),
    CountryCode.SPAIN: ("ES", 24),
    CountryCode.NETHERLANDS: ("NL", 18),
    CountryCode.BELGIUM: ("BE", 16),
    CountryCode.SWITZERLAND: ("CH", 21),
    CountryCode.AUSTRIA: ("AT", 20),
    CountryCode.SWEDEN: ("SE", 24),
    CountryCode.NORWAY: ("NO", 15),
    CountryCode.DENMARK: ("DK", 18),
    CountryCode.FINLAND: ("FI", 18),
    CountryCode.POLAND: ("PL", 28),
    CountryCode.CZECH_REPUBLIC: ("CZ", 24),
    CountryCode.HUNGARY: ("HU", 28),
    CountryCode.PORTUGAL: ("PT", 25),
    CountryCode.IRELAND: ("IE", 22),
}

# country -> (pattern, message)
NATIONAL_FORMATS: dict[CountryCode, tuple[str, str]] = {
    CountryCode.UNITED_KINGDOM: (r"^\d{8}$", "UK bank account number must be 8 digits"),
    CountryCode.UNITED_STATES: (r"^\d{4,17}$", "US bank account number must be 4-17 digits"),
    CountryCode.AUSTRALIA: (r"^\d{6,9}$", "Australian bank account number must be 6-9 digits"),
    CountryCode.CANADA: (r"^\d{7,12}$", "Canadian bank account number must be 7-12 digits"),
    CountryCode.JAPAN: (r"^\d{7}$", "Japanese bank account number must be 7 digits"),
    CountryCode.SINGAPORE: (r"^\d{8,15}$", "Singapore bank account number must be 8-15 digits"),
    CountryCode.INDIA: (r"^\d{9,18}$", "Indian bank account number must be 9-18 digits"),
    CountryCode.CHINA: (r"^\d{16,19}$", "Chinese bank account number must be 16-19 digits"),
    CountryCode.BRAZIL: (r"^\d{1,13}[A-Z0-9]?$", "Brazilian bank account number format is invalid"),
}


def _iban_check(prefix: str, length: int) -> Callable[[str], str | None]:
    def check(normalized: str) -> str | None:
        if not normalized.startswith(prefix):
            return f"IBAN must start with {prefix} for this country"
        if len(normalized) != length:
            return f"IBAN must be {length} characters long for {prefix}"
        if not matches(_IBAN_STRUCTURE, normalized):
            return (
                "IBAN format is invalid. Expected format: "
                "2 letter country code + 2 check digits + account number"
            )
        if not is_iban_checksum_valid(normalized):
            return "IBAN checksum is invalid"
        return None

    return check


def _pattern_check(pattern: str, message: str) -> Callable[[str], str | None]:
    compiled = compile_pattern(pattern)
    return lambda normalized: None if matches(compiled, normalized) else message


_COUNTRY_CHECKS: dict[CountryCode, Callable[[str], str | None]] = {
    **{c: _iban_check(p, n) for c, (p, n) in DOMESTIC_IBAN_COUNTRIES.items()},
    **{c: _pattern_check(p, m) for c, (p, m) in NATIONAL_FORMATS.items()},
}


def not_null_or_whitespace(field_name: str = "BankAccountNumber") -> ValueValidator[str]:
    return required(field_name, "Bank account number must be provided")


def valid_format(field_name: str = "BankAccountNumber") -> ValueValidator[str]:
    """Letters, digits, spaces and hyphens only."""

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not matches(_ALLOWED_CHARACTERS, value.strip().upper()):
            return ValidationResult.failure(
                "Bank account number contains invalid characters", field_name, "InvalidFormat"
            )
        return ValidationResult.success()

    return validate


def country_format(
    field_name: str = "BankAccountNumber",
    country: CountryCode = CountryCode.UNKNOWN,
) -> ValueValidator[str]:
    """National account number format of ``country``. Unlisted countries pass."""
    check = _COUNTRY_CHECKS.get(country)

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value) or check is None:
            return ValidationResult.success()
        message = check(normalize(value))
        if message is not None:
            return ValidationResult.failure(message, field_name, "InvalidCountryAccountNumberFormat")
        return ValidationResult.success()

    return validate
