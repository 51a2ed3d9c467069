"""Date validators.

"Today" is the current UTC date and only the date part of a value is
compared, so these rules never depend on the local time zone.
"""

from __future__ import annotations

from datetime import date, datetime

from validated_primitives.ranges import DateRange
from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import ValueValidator, utc_today


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def from_today_forward(field_name: str = "Date") -> ValueValidator[date]:
    def validate(value: date) -> ValidationResult:
        if _as_date(value) < utc_today():
            return ValidationResult.failure(
                f"{field_name} must be today or in the future.", field_name, "FromTodayForward"
            )
        return ValidationResult.success()

    return validate


def before_today(field_name: str = "Date") -> ValueValidator[date]:
    def validate(value: date) -> ValidationResult:
        if _as_date(value) >= utc_today():
            return ValidationResult.failure(f"{field_name} must be before today.", field_name, "BeforeToday")
        return ValidationResult.success()

    return validate


def between(field_name: str, date_range: DateRange) -> ValueValidator[date]:
    """Value must fall inside ``date_range``, honouring its inclusivity flags."""

    def validate(value: date) -> ValidationResult:
        if date_range.contains(value):
            return ValidationResult.success()
        if date_range.inclusive_start and date_range.inclusive_end:
            message = (
                f"{field_name} must be between {date_range.from_:%Y-%m-%d} "
                f"and {date_range.to:%Y-%m-%d}."
            )
        else:
            message = f"{field_name} must be within the range {date_range}."
        return ValidationResult.failure(message, field_name, "Between")

    return validate


def between_dates(field_name: str, from_: date, to: date, inclusive: bool = True) -> ValueValidator[date]:
    """Shorthand for ``between`` over a range with the same flag on both ends."""
    return between(field_name, DateRange(from_, to, inclusive, inclusive))
