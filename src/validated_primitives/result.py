"""Validation result model.

A ``ValidationResult`` aggregates zero or more ``ValidationError`` entries.
Validity is always derived from the error list, so a result can never claim
to be valid while carrying errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class ValidationError:
    """A single field-level validation failure.

    Attributes:
        message: Human readable description of the problem.
        member_name: Name of the field the error belongs to.
        code: Stable machine readable category, e.g. ``"InvalidChecksum"``.
    """

    message: str
    member_name: str | None = None
    code: str | None = None

    def __str__(self) -> str:
        if self.member_name:
            return f"{self.member_name}: {self.message}"
        return self.message

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary."""
        return {
            "message": self.message,
            "member_name": self.member_name,
            "code": self.code,
        }


class ValidationResult:
    """Ordered collection of validation errors.

    Results are only ever appended to, through ``merge`` and ``add_error``.
    Both return the receiver so calls can be chained.
    """

    __slots__ = ("_errors",)

    def __init__(self, errors: list[ValidationError] | None = None) -> None:
        self._errors: list[ValidationError] = list(errors) if errors else []

    @classmethod
    def success(cls) -> "ValidationResult":
        """Create a result without errors."""
        return cls()

    @classmethod
    def failure(
        cls,
        message: str,
        member_name: str | None = None,
        code: str | None = None,
    ) -> "ValidationResult":
        """Create a result holding exactly one error."""
        return cls([ValidationError(message, member_name, code)])

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        return tuple(self._errors)

    @property
    def codes(self) -> list[str | None]:
        """Error codes in error order."""
        return [e.code for e in self._errors]

    def add_error(
        self,
        message: str,
        member_name: str | None = None,
        code: str | None = None,
    ) -> "ValidationResult":
        """Append a single error."""
        self._errors.append(ValidationError(message, member_name, code))
        return self

    def merge(self, other: "ValidationResult | None") -> "ValidationResult":
        """Append all errors of ``other`` after the current ones.

        Args:
            other: Result to merge. ``None`` is ignored.

        Returns:
            This result.
        """
        if other is not None and other is not self:
            self._errors.extend(other._errors)
        elif other is self:
            self._errors.extend(list(self._errors))
        return self

    def to_single_message(self, separator: str = "; ") -> str:
        """Join all error strings into one message ("" when valid)."""
        if self.is_valid:
            return ""
        return separator.join(str(e) for e in self._errors)

    def to_bullet_list(self) -> str:
        """Render one `` - error`` line per error."""
        return "\n".join(f" - {e}" for e in self._errors)

    def to_dict(self) -> dict[str, list[str]]:
        """Group error messages by member name ("" for unnamed errors)."""
        grouped: dict[str, list[str]] = {}
        for error in self._errors:
            grouped.setdefault(error.member_name or "", []).append(error.message)
        return grouped

    def __bool__(self) -> bool:
        return self.is_valid

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(list(self._errors))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self._errors == other._errors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(valid)"
        return f"ValidationResult(errors={self._errors!r})"
