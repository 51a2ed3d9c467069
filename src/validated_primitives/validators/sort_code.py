"""UK and Irish bank sort code validators."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators.base import (
    CountryRule,
    ValueValidator,
    compile_pattern,
    is_ascii_digits,
    is_blank,
    matches,
    regex_rule,
    remove_separators,
)
from validated_primitives.validators.common import required

_FORMAT = compile_pattern(r"^[\d\s\-]+$")

SORT_CODE_COUNTRIES: dict[CountryCode, CountryRule] = {
    CountryCode.UNITED_KINGDOM: regex_rule(r"^\d{6}$"),
    CountryCode.IRELAND: regex_rule(r"^\d{6}$"),
}


def not_null_or_whitespace(field_name: str = "SortCode") -> ValueValidator[str]:
    return required(field_name, "Sort code must be provided")


def valid_format(field_name: str = "SortCode") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not matches(_FORMAT, value.strip()):
            return ValidationResult.failure(
                "Sort code must contain only digits and optional separators (- or space)",
                field_name,
                "InvalidFormat",
            )
        return ValidationResult.success()

    return validate


def country_format(field_name: str, country: CountryCode) -> ValueValidator[str]:
    """Six digits for UK and Ireland; dashed input must be ``XX-XX-XX``.

    Countries without sort codes pass.
    """
    rule = SORT_CODE_COUNTRIES.get(country)

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if "-" in value:
            parts = value.split("-")
            if len(parts) != 3 or any(len(part) != 2 for part in parts):
                return ValidationResult.failure(
                    "Sort code with dashes must be in format XX-XX-XX",
                    field_name,
                    "InvalidCountrySortCodeFormat",
                )
        if rule is not None and not rule.check(remove_separators(value).strip()):
            return ValidationResult.failure(
                f"Sort code is not valid for {country}. "
                "Expected format: 6 digits (e.g., 12-34-56 or 123456)",
                field_name,
                "InvalidCountrySortCodeFormat",
            )
        return ValidationResult.success()

    return validate


def only_digits(field_name: str = "SortCode") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not is_ascii_digits(remove_separators(value)):
            return ValidationResult.failure(
                "Sort code must contain only digits (separators like - and spaces are allowed)",
                field_name,
                "InvalidCharacters",
            )
        return ValidationResult.success()

    return validate
