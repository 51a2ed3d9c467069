"""Passport number validators.

Each country has its own length and shape rule with a matching message.
Countries without a rule, and the wildcards, accept 6-12 characters.
"""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators import base
from validated_primitives.validators.base import (
    CountryRule,
    ValueValidator,
    compile_pattern,
    is_blank,
    length_rule,
    matches,
    normalize,
    regex_rule,
)
from validated_primitives.validators.common import required

_ALNUM = compile_pattern(r"^[A-Z0-9]+$")

PASSPORT_RULES: dict[CountryCode, CountryRule] = {
    # North America
    CountryCode.UNITED_STATES: regex_rule(r"^\d{9}$", "US passport must be 9 digits"),
    CountryCode.CANADA: regex_rule(
        r"^[A-Z]{2}\d{6}$", "Canada passport must be 2 letters followed by 6 digits"
    ),
    CountryCode.MEXICO: regex_rule(
        r"^[A-Z]\d{9}$", "Mexico passport must be 1 letter followed by 9 digits"
    ),
    # UK and Ireland
    CountryCode.UNITED_KINGDOM: length_rule(9, message="UK passport must be 9 characters"),
    CountryCode.IRELAND: regex_rule(
        r"^[A-Z]{2}\d{7}$", "Ireland passport must be 2 letters followed by 7 digits"
    ),
    # Western Europe
    CountryCode.GERMANY: length_rule(9, 10, "Germany passport must be 9-10 alphanumeric characters"),
    CountryCode.FRANCE: length_rule(9, message="France passport must be 9 characters"),
    CountryCode.NETHERLANDS: length_rule(
        8, 9, "Netherlands passport must be 8-9 alphanumeric characters"
    ),
    CountryCode.BELGIUM: length_rule(8, message="Belgium passport must be 8 characters"),
    CountryCode.SWITZERLAND: length_rule(8, message="Switzerland passport must be 8 characters"),
    CountryCode.AUSTRIA: length_rule(8, message="Austria passport must be 8 characters"),
    # Southern Europe
    CountryCode.ITALY: length_rule(9, message="Italy passport must be 9 alphanumeric characters"),
    CountryCode.SPAIN: length_rule(9, message="Spain passport must be 9 characters"),
    CountryCode.PORTUGAL: length_rule(7, 8, "Portugal passport must be 7-8 characters"),
    # Northern Europe
    CountryCode.SWEDEN: regex_rule(r"^\d{8}$", "Sweden passport must be 8 digits"),
    CountryCode.NORWAY: length_rule(7, 8, "Norway passport must be 7-8 alphanumeric characters"),
    CountryCode.DENMARK: regex_rule(r"^\d{9}$", "Denmark passport must be 9 digits"),
    CountryCode.FINLAND: length_rule(9, message="Finland passport must be 9 characters"),
    # Eastern Europe
    CountryCode.POLAND: length_rule(9, message="Poland passport must be 9 characters"),
    CountryCode.CZECH_REPUBLIC: regex_rule(r"^\d{8,9}$", "Czech Republic passport must be 8-9 digits"),
    CountryCode.HUNGARY: length_rule(8, 9, "Hungary passport must be 8-9 characters"),
    CountryCode.RUSSIA: length_rule(9, 10, "Russia passport must be 9-10 digits"),
    # Oceania
    CountryCode.AUSTRALIA: length_rule(8, 9, "Australia passport must be 8-9 characters"),
    CountryCode.NEW_ZEALAND: length_rule(8, message="New Zealand passport must be 8 characters"),
    # Asia
    CountryCode.JAPAN: length_rule(9, message="Japan passport must be 9 characters"),
    CountryCode.CHINA: length_rule(9, message="China passport must be 9 characters"),
    CountryCode.INDIA: regex_rule(
        r"^[A-Z]\d{7}$", "India passport must be 1 letter followed by 7 digits"
    ),
    CountryCode.SINGAPORE: regex_rule(
        r"^[A-Z].{7}[A-Z]$", "Singapore passport must be 1 letter + 7 digits + 1 letter"
    ),
    CountryCode.SOUTH_KOREA: length_rule(9, message="South Korea passport must be 9 characters"),
    # Other
    CountryCode.BRAZIL: length_rule(8, 9, "Brazil passport must be 8-9 characters"),
    CountryCode.SOUTH_AFRICA: regex_rule(
        r"^[A-Z]\d{8}$", "South Africa passport must be 1 letter followed by 8 digits"
    ),
}

GENERIC_PASSPORT_RULE = length_rule(6, 12)


def not_null_or_whitespace(field_name: str = "Passport") -> ValueValidator[str]:
    return required(field_name, "Passport number must be provided")


def valid_format(field_name: str = "Passport") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not matches(_ALNUM, normalize(value)):
            return ValidationResult.failure(
                "Passport number must contain only letters and digits", field_name, "InvalidFormat"
            )
        return ValidationResult.success()

    return validate


def country_format(country: CountryCode, field_name: str = "Passport") -> ValueValidator[str]:
    return base.country_format(
        field_name,
        country,
        PASSPORT_RULES,
        code="InvalidCountryFormat",
        message=lambda c: f"Passport number for {c} must be 6-12 alphanumeric characters",
        default_rule=GENERIC_PASSPORT_RULE,
    )
