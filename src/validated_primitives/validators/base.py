"""Validator contract and the pipeline that runs it.

Features:
- ``ValueValidator``: a pure function from a value to a ``ValidationResult``
- Non-short-circuit execution: every validator runs, all failures are kept
- ReDoS protection for catalogue patterns plus an input length bound
- Static per-country rule tables with a single dispatch mechanism
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping, TypeVar

from validated_primitives.config import get_config
from validated_primitives.exceptions import RegexValidationError
from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode

T = TypeVar("T")

ValueValidator = Callable[[T], ValidationResult | None]


# ============================================================================
# Logging - Uses standard Python logging directly
# ============================================================================

def _get_logger(name: str) -> logging.Logger:
    """Get a logger for the given component name."""
    return logging.getLogger(f"validated_primitives.{name}")


logger = _get_logger("validators")


# ============================================================================
# Pipeline
# ============================================================================

def run_validators(value: T, validators: Iterable[ValueValidator[T] | None]) -> ValidationResult:
    """Run every validator against ``value`` and merge the failures.

    ``None`` validators and ``None`` results count as success. The chain
    never stops early, so the returned result lists every problem.

    Args:
        value: Candidate value
        validators: Ordered validators

    Returns:
        Aggregated result
    """
    result = ValidationResult.success()
    for validator in validators:
        if validator is None:
            continue
        outcome = validator(value)
        if outcome is not None and not outcome.is_valid:
            result.merge(outcome)
    return result


def is_blank(value: Any) -> bool:
    """True for None and whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def remove_separators(value: str, separators: str = " -") -> str:
    """Remove separator characters from a value."""
    result = value
    for sep in separators:
        result = result.replace(sep, "")
    return result


def normalize(value: str, separators: str = " -") -> str:
    """Strip separators and surrounding whitespace, then uppercase."""
    return remove_separators(value.strip(), separators).upper()


def extract_digits(value: str | None) -> str:
    """Keep only the ASCII digits of a value."""
    if not value:
        return ""
    return "".join(c for c in value if c in "0123456789")


def is_ascii_digits(value: str) -> bool:
    return bool(value) and all(c in "0123456789" for c in value)


def is_ascii_letters(value: str) -> bool:
    return bool(value) and all("A" <= c <= "Z" or "a" <= c <= "z" for c in value)


def is_ascii_alnum(value: str) -> bool:
    return bool(value) and value.isascii() and value.isalnum()


# ============================================================================
# ReDoS Protection
# ============================================================================

class RegexSafetyChecker:
    """Detects ReDoS vulnerabilities in regex patterns.

    Checks for common dangerous patterns that could cause exponential backtracking.
    """

    REDOS_PATTERNS = [
        r"\(.+\)\+\+",           # Nested quantifiers: (a+)+
        r"\(.+\)\*\*",           # Nested quantifiers: (a*)*
        r"\(.+\)\{\d+,\}",       # Nested with unbounded repetition
        r"\(.+\|.+\)\+",         # Alternation in quantified group
    ]

    MAX_PATTERN_LENGTH = 1000

    @classmethod
    def check_pattern(cls, pattern: str) -> tuple[bool, str | None]:
        """Check if a pattern is potentially vulnerable to ReDoS."""
        if len(pattern) > cls.MAX_PATTERN_LENGTH:
            return False, f"Pattern too long ({len(pattern)} > {cls.MAX_PATTERN_LENGTH})"

        for redos_pattern in cls.REDOS_PATTERNS:
            if re.search(redos_pattern, pattern):
                return False, f"Potentially vulnerable to ReDoS: matches {redos_pattern}"

        return True, None


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern[str]:
    """Validate and compile a regex pattern with ReDoS check.

    Catalogue patterns are compiled once, at import time.

    Raises:
        RegexValidationError: If the pattern is unsafe or does not compile.
    """
    if pattern is None:
        raise RegexValidationError("None", "Pattern cannot be None")

    is_safe, warning = RegexSafetyChecker.check_pattern(pattern)
    if not is_safe:
        raise RegexValidationError(pattern, f"ReDoS risk: {warning}")

    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise RegexValidationError(pattern, str(e)) from e


def matches(pattern: re.Pattern[str], value: str) -> bool:
    """Full-match ``value`` against ``pattern`` within the input length bound."""
    limit = get_config().max_input_length
    if len(value) > limit:
        logger.debug(f"Skipping regex match: input length {len(value)} exceeds {limit}")
        return False
    return pattern.fullmatch(value) is not None


# ============================================================================
# Country Dispatch
# ============================================================================

@dataclass(frozen=True)
class CountryRule:
    """Format rule for one country.

    A value passes when it satisfies every constraint that is set.

    Attributes:
        pattern: Regex the whole value must match
        min_length: Minimum length
        max_length: Maximum length
        predicate: Extra check on the normalized value
        message: Country specific failure message, if any
    """

    pattern: re.Pattern[str] | None = None
    min_length: int | None = None
    max_length: int | None = None
    predicate: Callable[[str], bool] | None = None
    message: str | None = None

    def check(self, value: str) -> bool:
        if self.min_length is not None and len(value) < self.min_length:
            return False
        if self.max_length is not None and len(value) > self.max_length:
            return False
        if self.pattern is not None and not matches(self.pattern, value):
            return False
        if self.predicate is not None and not self.predicate(value):
            return False
        return True


def regex_rule(pattern: str, message: str | None = None) -> CountryRule:
    """Shorthand for a rule made of one compiled pattern."""
    return CountryRule(pattern=compile_pattern(pattern), message=message)


def length_rule(
    min_length: int,
    max_length: int | None = None,
    message: str | None = None,
    predicate: Callable[[str], bool] | None = None,
) -> CountryRule:
    """Shorthand for a length-bounded rule (``max_length`` defaults to ``min_length``)."""
    return CountryRule(
        min_length=min_length,
        max_length=min_length if max_length is None else max_length,
        predicate=predicate,
        message=message,
    )


def country_format(
    field_name: str,
    country: CountryCode,
    rules: Mapping[CountryCode, CountryRule],
    code: str,
    message: str | Callable[[CountryCode], str],
    normalizer: Callable[[str], str] = normalize,
    default_rule: CountryRule | None = None,
) -> ValueValidator[str]:
    """Build a validator that dispatches on ``country``.

    Blank input passes; presence is a separate validator. Countries absent
    from ``rules`` use ``default_rule`` and pass when there is none.

    Args:
        field_name: Field name reported in errors
        country: Issuing country
        rules: Static rule table
        code: Error code reported on failure
        message: Failure message, or a callable producing it from the country
        normalizer: Applied to the raw input before matching
        default_rule: Rule for countries missing from the table

    Returns:
        Validator function
    """
    rule = rules.get(country, default_rule)

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value) or rule is None:
            return ValidationResult.success()
        if rule.check(normalizer(value)):
            return ValidationResult.success()
        text = rule.message or (message(country) if callable(message) else message)
        return ValidationResult.failure(text, field_name, code)

    return validate


def regex_table(patterns: Mapping[CountryCode, str]) -> dict[CountryCode, CountryRule]:
    """Compile a ``{country: pattern}`` table into rules."""
    return {country: regex_rule(pattern) for country, pattern in patterns.items()}


def utc_today() -> date:
    """Current UTC calendar date; date rules never use local time."""
    return datetime.now(timezone.utc).date()


def count_decimal_places(value: Decimal) -> int:
    """Scale of a decimal as written: ``Decimal("1.50")`` has two places."""
    exponent = value.as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)
