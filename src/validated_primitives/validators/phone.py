"""Phone number validators.

Country patterns accept the national form with an optional international
prefix and the separators commonly written between digit groups.
"""

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

_PHONE_CHARACTERS = compile_pattern(r"^[\+\d\s\-\(\)]+$")

_NANP = r"^(\+1[-\s]?)?(\(?\d{3}\)?[-\s]?)?\d{3}[-\s]?\d{4}$"

PHONE_PATTERNS: dict[CountryCode, str] = {
    CountryCode.UNITED_STATES: _NANP,
    CountryCode.UNITED_KINGDOM: r"^(\+44\s?)?0?\d{4}\s?\d{6}$|^(\+44\s?)?0?\d{3}\s?\d{3}\s?\d{4}$",
    CountryCode.CANADA: _NANP,
    CountryCode.JAPAN: r"^(\+81[-\s]?)?0?\d{1,4}[-\s]?\d{1,4}[-\s]?\d{4}$",
    CountryCode.NETHERLANDS: r"^(\+31[-\s]?)?0?\d{2}[-\s]?\d{3}[-\s]?\d{4}$",
    CountryCode.GERMANY: r"^(\+49[-\s]?)?0?\d{2,5}[-\s]?\d{3,10}$",
    CountryCode.FRANCE: r"^(\+33[-\s]?)?0?\d{1}[-\s]?\d{2}[-\s]?\d{2}[-\s]?\d{2}[-\s]?\d{2}$",
    CountryCode.AUSTRALIA: r"^(\+61[-\s]?)?0?\d{1}[-\s]?\d{4}[-\s]?\d{4}$",
    CountryCode.SPAIN: r"^(\+34[-\s]?)?\d{3}[-\s]?\d{3}[-\s]?\d{3}$",
    CountryCode.ITALY: r"^(\+39[-\s]?)?\d{2,4}[-\s]?\d{6,8}$",
    CountryCode.SWITZERLAND: r"^(\+41[-\s]?)?0?\d{2}[-\s]?\d{3}[-\s]?\d{2}[-\s]?\d{2}$",
    CountryCode.AUSTRIA: r"^(\+43[-\s]?)?0?\d{1,4}[-\s]?\d{3,10}$",
    CountryCode.BELGIUM: r"^(\+32[-\s]?)?0?\d{3}[-\s]?\d{2}[-\s]?\d{2}[-\s]?\d{2}$",
    CountryCode.SWEDEN: r"^(\+46[-\s]?)?0?\d{2}[-\s]?\d{3}[-\s]?\d{2}[-\s]?\d{2}$",
    CountryCode.NORWAY: r"^(\+47[-\s]?)?\d{3}[-\s]?\d{2}[-\s]?\d{3}$",
    CountryCode.DENMARK: r"^(\+45[-\s]?)?\d{2}[-\s]?\d{2}[-\s]?\d{2}[-\s]?\d{2}$",
    CountryCode.FINLAND: r"^(\+358[-\s]?)?0?\d{2}[-\s]?\d{3}[-\s]?\d{2}[-\s]?\d{2}$",
    CountryCode.POLAND: r"^(\+48[-\s]?)?\d{3}[-\s]?\d{3}[-\s]?\d{3}$",
    CountryCode.CZECH_REPUBLIC: r"^(\+420[-\s]?)?\d{3}[-\s]?\d{3}[-\s]?\d{3}$",
    CountryCode.HUNGARY: r"^(\+36[-\s]?)?0?\d{2}[-\s]?\d{3}[-\s]?\d{4}$",
    CountryCode.PORTUGAL: r"^(\+351[-\s]?)?\d{3}[-\s]?\d{3}[-\s]?\d{3}$",
    CountryCode.IRELAND: r"^(\+353[-\s]?)?0?\d{2}[-\s]?\d{3}[-\s]?\d{4}$",
    CountryCode.BRAZIL: r"^(\+55[-\s]?)?\(?\d{2}\)?[-\s]?\d{4,5}[-\s]?\d{4}$",
    CountryCode.MEXICO: r"^(\+52[-\s]?)?\d{3}[-\s]?\d{3}[-\s]?\d{4}$",
    CountryCode.CHINA: r"^(\+86[-\s]?)?\d{3}[-\s]?\d{4}[-\s]?\d{4}$",
    CountryCode.INDIA: r"^(\+91[-\s]?)?\d{5}[-\s]?\d{5}$",
    CountryCode.SOUTH_AFRICA: r"^(\+27[-\s]?)?0?\d{2}[-\s]?\d{3}[-\s]?\d{4}$",
    CountryCode.NEW_ZEALAND: r"^(\+64[-\s]?)?0?\d{1}[-\s]?\d{3}[-\s]?\d{4}$",
    CountryCode.SINGAPORE: r"^(\+65[-\s]?)?\d{4}[-\s]?\d{4}$",
    CountryCode.SOUTH_KOREA: r"^(\+82[-\s]?)?0?\d{2}[-\s]?\d{4}[-\s]?\d{4}$",
    CountryCode.RUSSIA: r"^(\+7[-\s]?)?\d{3}[-\s]?\d{3}[-\s]?\d{2}[-\s]?\d{2}$",
}

PHONE_RULES = regex_table(PHONE_PATTERNS)


def phone_number(field_name: str = "PhoneNumber") -> ValueValidator[str]:
    """Permissive character check kept for callers that predate ``country_format``.

    Unlike the other validators, None and blank input fail here.
    """

    def validate(value: str | None) -> ValidationResult:
        if not matches(_PHONE_CHARACTERS, value or ""):
            return ValidationResult.failure("Invalid phone number format.", field_name, "PhoneNumber")
        return ValidationResult.success()

    return validate


def valid_format(field_name: str = "PhoneNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not matches(_PHONE_CHARACTERS, value.strip()):
            return ValidationResult.failure(
                f"{field_name} can only contain numbers, spaces, plus sign, hyphens, and parentheses.",
                field_name,
                "InvalidPhoneNumberFormat",
            )
        return ValidationResult.success()

    return validate


def country_format(field_name: str, country: CountryCode) -> ValueValidator[str]:
    return base.country_format(
        field_name,
        country,
        PHONE_RULES,
        code="InvalidCountryPhoneFormat",
        message=lambda c: f"{field_name} is not a valid phone number format for {c}.",
        normalizer=str.strip,
    )
