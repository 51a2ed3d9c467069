"""Closed, open and half-open ranges of dates and times.

Every range type has two construction paths: the raw constructor raises
``InvalidRangeError`` when ``from_ > to``, while ``try_create`` reports the
same problem as a ``ValidationResult`` failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, ClassVar, Generic, TypeVar

from validated_primitives.exceptions import InvalidRangeError
from validated_primitives.result import ValidationResult

P = TypeVar("P", date, time)

RANGE_ORDER_MESSAGE = "'From' must be less than or equal to 'To'."


@dataclass(frozen=True)
class _Range(Generic[P]):
    from_: P
    to: P
    inclusive_start: bool = True
    inclusive_end: bool = True

    _point_format: ClassVar[str] = "%Y-%m-%d"

    def __post_init__(self) -> None:
        object.__setattr__(self, "from_", self._coerce(self.from_))
        object.__setattr__(self, "to", self._coerce(self.to))
        if self.from_ > self.to:
            raise InvalidRangeError(RANGE_ORDER_MESSAGE)

    @classmethod
    def _coerce(cls, point: Any) -> P:
        return point

    @classmethod
    def try_create(
        cls,
        from_: P,
        to: P,
        inclusive_start: bool = True,
        inclusive_end: bool = True,
    ) -> tuple[ValidationResult, Any]:
        """Build a range, reporting ``from_ > to`` as an ``InvalidRange`` failure."""
        if cls._coerce(from_) > cls._coerce(to):
            return ValidationResult.failure(RANGE_ORDER_MESSAGE, cls.__name__, "InvalidRange"), None
        return ValidationResult.success(), cls(from_, to, inclusive_start, inclusive_end)

    def contains(self, point: P) -> bool:
        point = self._coerce(point)
        lower_ok = point >= self.from_ if self.inclusive_start else point > self.from_
        upper_ok = point <= self.to if self.inclusive_end else point < self.to
        return lower_ok and upper_ok

    def __contains__(self, point: P) -> bool:
        return self.contains(point)

    def __str__(self) -> str:
        start = "[" if self.inclusive_start else "("
        end = "]" if self.inclusive_end else ")"
        fmt = self._point_format
        return f"{start}{self.from_.strftime(fmt)} .. {self.to.strftime(fmt)}{end}"


class DateRange(_Range[date]):
    """Range of calendar days built from datetimes.

    Both bounds and every tested point are truncated to their date, so the
    time of day never matters.
    """

    @classmethod
    def _coerce(cls, point: Any) -> date:
        return point.date() if isinstance(point, datetime) else point

    @classmethod
    def until_now(
        cls, from_: datetime, inclusive_start: bool = True, inclusive_end: bool = True
    ) -> tuple[ValidationResult, DateRange | None]:
        return cls.try_create(from_, datetime.now(), inclusive_start, inclusive_end)

    @classmethod
    def from_now_until(
        cls, to: datetime, inclusive_start: bool = True, inclusive_end: bool = True
    ) -> tuple[ValidationResult, DateRange | None]:
        return cls.try_create(datetime.now(), to, inclusive_start, inclusive_end)


class DateOnlyRange(_Range[date]):
    """Range of ``date`` values."""

    @classmethod
    def until_today(
        cls, from_: date, inclusive_start: bool = True, inclusive_end: bool = True
    ) -> tuple[ValidationResult, DateOnlyRange | None]:
        from validated_primitives.validators.base import utc_today

        return cls.try_create(from_, utc_today(), inclusive_start, inclusive_end)

    @classmethod
    def from_today_until(
        cls, to: date, inclusive_start: bool = True, inclusive_end: bool = True
    ) -> tuple[ValidationResult, DateOnlyRange | None]:
        from validated_primitives.validators.base import utc_today

        return cls.try_create(utc_today(), to, inclusive_start, inclusive_end)


class TimeOnlyRange(_Range[time]):
    """Range of times of day."""

    _point_format: ClassVar[str] = "%H:%M:%S"

    @classmethod
    def until_now(
        cls, from_: time, inclusive_start: bool = True, inclusive_end: bool = True
    ) -> tuple[ValidationResult, TimeOnlyRange | None]:
        return cls.try_create(from_, datetime.now().time(), inclusive_start, inclusive_end)

    @classmethod
    def from_now_until(
        cls, to: time, inclusive_start: bool = True, inclusive_end: bool = True
    ) -> tuple[ValidationResult, TimeOnlyRange | None]:
        return cls.try_create(datetime.now().time(), to, inclusive_start, inclusive_end)
