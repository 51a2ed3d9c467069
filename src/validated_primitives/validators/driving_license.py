"""Driving license number validators.

Rules are length bounds per issuing country, tightened with a shape check
where the national format fixes one. A country may carry several rules;
the first one that fails supplies the message. Countries without rules pass.
"""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
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


def _between(country: str, low: int, high: int) -> CountryRule:
    return length_rule(low, high, f"{country} driving license must be {low}-{high} characters")


def _exactly(country: str, size: int) -> CountryRule:
    return length_rule(size, message=f"{country} driving license must be exactly {size} characters")


def _digits(country: str, size: int) -> CountryRule:
    return regex_rule(rf"^\d{{{size}}}$", f"{country} driving license must be exactly {size} digits")


LICENSE_RULES: dict[CountryCode, tuple[CountryRule, ...]] = {
    # North America
    CountryCode.UNITED_STATES: (_between("United States", 5, 16),),
    CountryCode.CANADA: (_between("Canada", 8, 16),),
    CountryCode.MEXICO: (_between("Mexico", 16, 18),),
    # Europe
    CountryCode.UNITED_KINGDOM: (
        _exactly("United Kingdom", 16),
        regex_rule(r"^[A-Z]{5}.*$", "United Kingdom driving license must start with 5 letters"),
    ),
    CountryCode.GERMANY: (_exactly("Germany", 11),),
    CountryCode.FRANCE: (_digits("France", 12),),
    CountryCode.ITALY: (_exactly("Italy", 10),),
    CountryCode.SPAIN: (
        _exactly("Spain", 9),
        regex_rule(r"^\d{8}[A-Z]$", "Spain driving license must be 8 digits followed by 1 letter"),
    ),
    CountryCode.NETHERLANDS: (_digits("Netherlands", 10),),
    CountryCode.BELGIUM: (_digits("Belgium", 10),),
    CountryCode.SWEDEN: (_between("Sweden", 8, 13),),
    CountryCode.NORWAY: (_exactly("Norway", 11),),
    CountryCode.DENMARK: (_between("Denmark", 8, 10),),
    CountryCode.FINLAND: (_exactly("Finland", 12),),
    CountryCode.AUSTRIA: (_digits("Austria", 8),),
    CountryCode.SWITZERLAND: (_between("Switzerland", 8, 9),),
    CountryCode.POLAND: (_exactly("Poland", 13),),
    CountryCode.IRELAND: (_between("Ireland", 8, 9),),
    # Asia-Pacific
    CountryCode.AUSTRALIA: (_between("Australia", 6, 10),),
    CountryCode.NEW_ZEALAND: (_exactly("New Zealand", 8),),
    CountryCode.JAPAN: (_digits("Japan", 12),),
    CountryCode.SINGAPORE: (
        _between("Singapore", 7, 8),
        regex_rule(r"^[A-Z].*$", "Singapore driving license must start with a letter"),
    ),
    CountryCode.SOUTH_KOREA: (_between("South Korea", 12, 14),),
    CountryCode.INDIA: (_between("India", 13, 16),),
    # Other
    CountryCode.BRAZIL: (_digits("Brazil", 11),),
    CountryCode.SOUTH_AFRICA: (_between("South Africa", 8, 13),),
}


def not_null_or_whitespace(field_name: str = "DrivingLicenseNumber") -> ValueValidator[str]:
    return required(field_name, "Driving license number must be provided")


def valid_format(field_name: str = "DrivingLicenseNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not matches(_ALNUM, normalize(value)):
            return ValidationResult.failure(
                "Driving license number must contain only letters and digits",
                field_name,
                "InvalidFormat",
            )
        return ValidationResult.success()

    return validate


def country_format(
    country: CountryCode, field_name: str = "DrivingLicenseNumber"
) -> ValueValidator[str]:
    rules = LICENSE_RULES.get(country, ())

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        normalized = normalize(value)
        for rule in rules:
            if not rule.check(normalized):
                return ValidationResult.failure(rule.message, field_name, "InvalidCountryFormat")
        return ValidationResult.success()

    return validate
