"""Exception types.

Expected bad input is reported through ``ValidationResult``; the exceptions
here cover the throwing ``create`` facades, programming errors and
configuration problems.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from validated_primitives.result import ValidationResult


class ValueObjectValidationError(ValueError):
    """Raised by ``create`` when the input does not produce a valid value object."""

    def __init__(self, value_object_type: str, validation_result: "ValidationResult"):
        self.value_object_type = value_object_type
        self.validation_result = validation_result
        super().__init__(validation_result.to_single_message())

    @property
    def errors(self):
        return self.validation_result.errors


class InvalidRangeError(ValueError):
    """Raised when a range is constructed with a start after its end."""

    def __init__(self, message: str = "'From' must be less than or equal to 'To'."):
        super().__init__(message)


class RegexValidationError(ValueError):
    """Raised when a regex pattern is invalid."""

    def __init__(self, pattern: str, error: str):
        self.pattern = pattern
        self.error = error
        super().__init__(f"Invalid regex pattern '{pattern}': {error}")


class ConfigError(Exception):
    """Base configuration error."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration validation error."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Configuration validation failed: {', '.join(errors)}")


class ConfigSourceError(ConfigError):
    """Configuration source error."""

    pass
