"""Date value objects: birth dates, future dates and selections inside a range.

Each factory accepts a ``date``/``datetime`` or a date string. Strings are
parsed leniently with ``dateutil`` ("2024-03-01", "1 March 2024", "03/01/2024");
text that cannot be parsed fails with ``InvalidDateString``.
"""

from __future__ import annotations

from datetime import date, datetime

from dateutil import parser as date_parser

from validated_primitives.ranges import DateRange
from validated_primitives.result import ValidationResult
from validated_primitives.validators import dates
from validated_primitives.value_objects.base import ValidatedValueObject
from validated_primitives.value_objects.registry import register_value_object

DateInput = date | datetime | str


def parse_date_string(value: str) -> datetime | None:
    """Parse a date string, or return None when it is not a date."""
    if not value or not value.strip():
        return None
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        return None


def _invalid_date_string(property_name: str) -> ValidationResult:
    return ValidationResult.failure("Invalid date format.", property_name, "InvalidDateString")


@register_value_object
class DateOfBirth(ValidatedValueObject[date]):
    """A date strictly before today (UTC)."""

    name = "date_of_birth"
    category = "dates"

    def __init__(self, value: date, property_name: str = "DateOfBirth") -> None:
        super().__init__(value, property_name, [dates.before_today(property_name)])

    @classmethod
    def try_create(
        cls,
        value: DateInput,
        property_name: str = "DateOfBirth",
    ) -> tuple[ValidationResult, "DateOfBirth | None"]:
        if isinstance(value, str):
            parsed = parse_date_string(value)
            if parsed is None:
                return cls._rejected(_invalid_date_string(property_name), property_name)
            value = parsed
        return cls._validated(cls(value, property_name))


@register_value_object
class FutureDate(ValidatedValueObject[date]):
    """A date that is today (UTC) or later."""

    name = "future_date"
    category = "dates"

    def __init__(self, value: date, property_name: str = "FutureDate") -> None:
        super().__init__(value, property_name, [dates.from_today_forward(property_name)])

    @classmethod
    def try_create(
        cls,
        value: DateInput,
        property_name: str = "FutureDate",
    ) -> tuple[ValidationResult, "FutureDate | None"]:
        if isinstance(value, str):
            parsed = parse_date_string(value)
            if parsed is None:
                return cls._rejected(_invalid_date_string(property_name), property_name)
            value = parsed
        return cls._validated(cls(value, property_name))


@register_value_object
class BetweenDatesSelection(ValidatedValueObject[date]):
    """A date chosen from inside a ``DateRange``."""

    name = "between_dates"
    category = "dates"

    date_range: DateRange

    def __init__(
        self,
        value: date,
        date_range: DateRange,
        property_name: str = "BetweenDatesSelection",
    ) -> None:
        self.date_range = date_range
        super().__init__(value, property_name, [dates.between(property_name, date_range)])

    @classmethod
    def check(
        cls,
        value: date,
        date_range: DateRange,
        property_name: str = "BetweenDatesSelection",
    ) -> ValidationResult:
        """Validate without keeping the instance."""
        return cls(value, date_range, property_name).validate()

    @classmethod
    def try_create(
        cls,
        value: DateInput,
        date_range: DateRange,
        property_name: str = "BetweenDatesSelection",
    ) -> tuple[ValidationResult, "BetweenDatesSelection | None"]:
        if isinstance(value, str):
            parsed = parse_date_string(value)
            if parsed is None:
                return cls._rejected(_invalid_date_string(property_name), property_name)
            value = parsed
        return cls._validated(cls(value, date_range, property_name))

    @classmethod
    def try_create_between(
        cls,
        value: DateInput,
        from_: date,
        to: date,
        inclusive: bool = True,
        property_name: str = "BetweenDatesSelection",
    ) -> tuple[ValidationResult, "BetweenDatesSelection | None"]:
        """Like ``try_create`` but builds the range first; a reversed range is returned as its failure."""
        range_result, date_range = DateRange.try_create(from_, to, inclusive, inclusive)
        if date_range is None:
            return cls._rejected(range_result, property_name)
        return cls.try_create(value, date_range, property_name)

    def _equality_components(self) -> tuple[object, ...]:
        return (self.value, self.date_range)
