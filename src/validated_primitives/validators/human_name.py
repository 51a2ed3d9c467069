"""Personal name validators."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import ValueValidator, is_blank

NAME_PUNCTUATION = "-'"


def is_name_text(value: str) -> bool:
    """Unicode letters, hyphens and apostrophes only."""
    return bool(value) and all(c.isalpha() or c in NAME_PUNCTUATION for c in value)


def alpha_with_hyphen_and_apostrophe(field_name: str = "Name") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        if not is_name_text(value):
            return ValidationResult.failure(
                f"{field_name} can only contain letters, hyphens, and apostrophes.",
                field_name,
                "AlphaWithHyphenAndApostrophe",
            )
        return ValidationResult.success()

    return validate
