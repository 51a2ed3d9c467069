"""Base class for self-validating value objects.

A value object wraps one primitive value together with the validators that
define what a legal value is. ``try_create`` is the canonical factory: it
returns ``(result, instance)`` where the instance is None exactly when the
result is a failure. ``create`` is the raising shortcut.

Instances are immutable once constructed. Equality and hashing use
``_equality_components()``, so two values that normalize the same way are
equal regardless of how they were written; the validator list never takes
part in comparisons.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Generic, Iterable, TypeVar

from validated_primitives.config import get_config
from validated_primitives.exceptions import ValueObjectValidationError
from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import ValueValidator, _get_logger, run_validators

T = TypeVar("T")
V = TypeVar("V", bound="ValidatedValueObject[Any]")

logger = _get_logger("value_objects")


class ValidatedValueObject(Generic[T]):
    """Immutable wrapper around a primitive value and its validators.

    Subclasses assign their own attributes before calling
    ``super().__init__``; the base constructor freezes the instance.

    Class Attributes:
        name: Short registry name, e.g. ``"iban"``
        category: Registry category, e.g. ``"banking"``
    """

    name: ClassVar[str] = ""
    category: ClassVar[str] = "general"

    value: T
    property_name: str

    def __init__(
        self,
        value: T,
        property_name: str,
        validators: Iterable[ValueValidator[T] | None] = (),
    ) -> None:
        self.value = value
        self.property_name = property_name
        self._validators: tuple[ValueValidator[T], ...] = tuple(
            v for v in validators if v is not None
        )
        self._frozen = True

    # ------------------------------------------------------------------
    # Immutability
    # ------------------------------------------------------------------

    def __setattr__(self, key: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, key, value)

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> ValidationResult:
        """Run every validator against the wrapped value. Idempotent."""
        return run_validators(self.value, self._validators)

    @classmethod
    def _validated(cls: type[V], instance: V) -> tuple[ValidationResult, V | None]:
        result = instance.validate()
        if result.is_valid:
            return result, instance
        _log_failure(cls.__name__, instance.property_name, result)
        return result, None

    @classmethod
    def _rejected(cls: type[V], result: ValidationResult, property_name: str) -> tuple[ValidationResult, None]:
        """Report a failure found before an instance could be built."""
        _log_failure(cls.__name__, property_name, result)
        return result, None

    @classmethod
    def try_create(cls: type[V], *args: Any, **kwargs: Any) -> tuple[ValidationResult, V | None]:
        """Validate raw input and build an instance from it.

        Subclasses define the arguments. Invalid input, including text that
        cannot be parsed, never raises: it is reported in the result.

        Returns:
            ``(result, instance)`` where ``instance`` is None exactly when
            ``result.is_valid`` is False.
        """
        raise NotImplementedError

    @classmethod
    def create(cls: type[V], *args: Any, **kwargs: Any) -> V:
        """Same arguments as ``try_create``; raise instead of returning a failure.

        Raises:
            ValueObjectValidationError: If validation fails.
        """
        result, instance = cls.try_create(*args, **kwargs)
        if instance is None:
            raise ValueObjectValidationError(cls.__name__, result)
        return instance

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def _equality_components(self) -> tuple[Any, ...]:
        return (self.value,)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._equality_components() == other._equality_components()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._equality_components()))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


def _log_failure(type_name: str, property_name: str, result: ValidationResult) -> None:
    if get_config().log_failures:
        logger.debug(f"{type_name} rejected for {property_name}: {', '.join(c for c in result.codes if c)}")


def as_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric amount to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather than
    its binary expansion.

    Raises:
        TypeError: If ``value`` is not a number or numeric string.
        ValueError: If ``value`` is NaN, infinite or not a number.
    """
    if isinstance(value, bool):
        raise TypeError("Expected a number, got bool")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {value!r}") from e
    else:
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    if not result.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")
    return result


def try_decimal(
    value: Decimal | int | float | str, property_name: str
) -> tuple[Decimal | None, ValidationResult]:
    """Coerce like ``as_decimal`` but report unparsable input as a failure.

    Non-numeric strings, NaN and infinities become an ``InvalidNumber`` error
    for ``property_name``. Values of the wrong type still raise ``TypeError``.
    """
    try:
        return as_decimal(value), ValidationResult.success()
    except ValueError:
        return None, ValidationResult.failure(
            f"{property_name} must be a finite number.", property_name, "InvalidNumber"
        )
