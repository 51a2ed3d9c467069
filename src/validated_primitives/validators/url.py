"""Web URL validators."""

from __future__ import annotations

from urllib.parse import urlsplit

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import ValueValidator, is_blank

WEB_SCHEMES = ("http", "https")


def is_web_url(value: str) -> bool:
    """Absolute http(s) URL with a host and no whitespace anywhere."""
    if any(c.isspace() for c in value):
        return False
    try:
        parts = urlsplit(value)
        parts.port
    except ValueError:
        return False
    return parts.scheme.lower() in WEB_SCHEMES and bool(parts.hostname)


def web_url(field_name: str = "Url") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value) or not is_web_url(value):
            return ValidationResult.failure("Invalid web URL format.", field_name, "WebUrl")
        return ValidationResult.success()

    return validate
