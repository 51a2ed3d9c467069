"""Personal name aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from validated_primitives.result import ValidationResult

MAX_NAME_LENGTH = 50


@dataclass(frozen=True)
class PersonName:
    """First, optional middle and last name, each trimmed."""

    first_name: str
    last_name: str
    middle_name: str | None = None

    @property
    def full_name(self) -> str:
        """``"John Quincy Adams"``"""
        parts = [self.first_name]
        if self.middle_name:
            parts.append(self.middle_name)
        parts.append(self.last_name)
        return " ".join(parts)

    @property
    def formal_name(self) -> str:
        """``"Adams, John Quincy"``"""
        given = f"{self.first_name} {self.middle_name}" if self.middle_name else self.first_name
        return f"{self.last_name}, {given}"

    @property
    def initials(self) -> str:
        """``"J.Q.A."``"""
        parts = [self.first_name, self.middle_name, self.last_name]
        return "".join(f"{part[0]}." for part in parts if part)

    @classmethod
    def try_create(
        cls,
        first_name: str | None,
        last_name: str | None,
        middle_name: str | None = None,
    ) -> tuple[ValidationResult, PersonName | None]:
        result = ValidationResult.success()
        first = (first_name or "").strip()
        last = (last_name or "").strip()
        middle = (middle_name or "").strip() or None

        if not first:
            result.add_error("First name is required and cannot be empty.", "FirstName", "Required")
        elif len(first) > MAX_NAME_LENGTH:
            result.add_error("First name must be between 1 and 50 characters.", "FirstName", "Length")

        if not last:
            result.add_error("Last name is required and cannot be empty.", "LastName", "Required")
        elif len(last) > MAX_NAME_LENGTH:
            result.add_error("Last name must be between 1 and 50 characters.", "LastName", "Length")

        if middle is not None and len(middle) > MAX_NAME_LENGTH:
            result.add_error("Middle name cannot exceed 50 characters.", "MiddleName", "MaxLength")

        if not result.is_valid:
            return result, None
        return result, cls(first, last, middle)

    def __str__(self) -> str:
        return self.full_name
