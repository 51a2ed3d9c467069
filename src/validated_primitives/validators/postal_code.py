"""Postal code validators."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators import base
from validated_primitives.validators.base import (
    ValueValidator,
    compile_pattern,
    is_blank,
    matches,
    regex_table,
)

_POSTAL_CHARACTERS = compile_pattern(r"^[A-Za-z0-9\s\-]+$")

POSTAL_CODE_PATTERNS: dict[CountryCode, str] = {
    CountryCode.UNITED_STATES: r"^\d{5}(-\d{4})?$",
    CountryCode.UNITED_KINGDOM: r"^[A-Z]{1,2}\d[A-Z\d]?\s?\d[A-Z]{2}$",
    CountryCode.CANADA: r"^[A-Z]\d[A-Z]\s?\d[A-Z]\d$",
    CountryCode.JAPAN: r"^\d{3}-?\d{4}$",
    CountryCode.NETHERLANDS: r"^\d{4}\s?[A-Z]{2}$",
    CountryCode.GERMANY: r"^\d{5}$",
    CountryCode.FRANCE: r"^\d{5}$",
    CountryCode.AUSTRALIA: r"^\d{4}$",
    CountryCode.SPAIN: r"^\d{5}$",
    CountryCode.ITALY: r"^\d{5}$",
    CountryCode.SWITZERLAND: r"^\d{4}$",
    CountryCode.AUSTRIA: r"^\d{4}$",
    CountryCode.BELGIUM: r"^\d{4}$",
    CountryCode.SWEDEN: r"^\d{3}\s?\d{2}$",
    CountryCode.NORWAY: r"^\d{4}$",
    CountryCode.DENMARK: r"^\d{4}$",
    CountryCode.FINLAND: r"^\d{5}$",
    CountryCode.POLAND: r"^\d{2}-\d{3}$",
    CountryCode.CZECH_REPUBLIC: r"^\d{3}\s\d{2}$",
    CountryCode.HUNGARY: r"^(H-)?\d{4}$",
    CountryCode.PORTUGAL: r"^\d{4}-\d{3}$",
    CountryCode.IRELAND: r"^[A-Z]\d{2}\s?[A-Z0-9]{4}$",
    CountryCode.BRAZIL: r"^\d{5}-?\d{3}$",
    CountryCode.MEXICO: r"^\d{5}$",
    CountryCode.CHINA: r"^\d{6}$",
    CountryCode.INDIA: r"^\d{6}$",
    CountryCode.SOUTH_AFRICA: r"^\d{4}$",
    CountryCode.NEW_ZEALAND: r"^\d{4}$",
    CountryCode.SINGAPORE: r"^\d{6}$",
    CountryCode.SOUTH_KOREA: r"^\d{5}$",
    CountryCode.RUSSIA: r"^\d{6}$",
}

POSTAL_CODE_RULES = regex_table(POSTAL_CODE_PATTERNS)


def valid_format(field_name: str = "PostalCode") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not matches(_POSTAL_CHARACTERS, value.strip()):
            return ValidationResult.failure(
                f"{field_name} can only contain letters, numbers, spaces, and hyphens.",
                field_name,
                "InvalidPostalCodeFormat",
            )
        return ValidationResult.success()

    return validate


def country_format(field_name: str, country: CountryCode) -> ValueValidator[str]:
    """Match the country's postal code pattern on the trimmed, uppercased value."""
    return base.country_format(
        field_name,
        country,
        POSTAL_CODE_RULES,
        code="InvalidCountryPostalCodeFormat",
        message=lambda c: f"{field_name} is not a valid postal code format for {c}.",
        normalizer=lambda v: v.strip().upper(),
    )
