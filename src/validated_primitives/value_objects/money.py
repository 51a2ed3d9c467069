"""Monetary value objects: decimal amounts, minor-unit amounts and percentages."""

from __future__ import annotations

from decimal import Decimal

from validated_primitives import currency
from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators import money, percentage
from validated_primitives.value_objects.base import ValidatedValueObject, as_decimal, try_decimal
from validated_primitives.value_objects.registry import register_value_object


@register_value_object
class Money(ValidatedValueObject[Decimal]):
    """Non-negative amount with at most two decimal places in a given currency.

    Example:
        >>> result, price = Money.try_create("USD", Decimal("1234.5"))
        >>> str(price)
        '$1,234.50'
        >>> price.to_string_with_code()
        '1,234.50 USD'
    """

    name = "money"
    category = "money"

    MAX_DECIMAL_PLACES = 2

    currency_code: str

    def __init__(self, value: Decimal, currency_code: str, property_name: str = "Money") -> None:
        self.currency_code = currency_code
        super().__init__(
            value,
            property_name,
            [
                money.non_negative(property_name),
                money.decimal_places(property_name, self.MAX_DECIMAL_PLACES),
            ],
        )

    @classmethod
    def try_create(
        cls,
        currency_code: str | CountryCode,
        amount: Decimal | int | float | str,
        property_name: str = "Money",
    ) -> tuple[ValidationResult, "Money | None"]:
        """Create an amount in a currency given by ISO code or by country.

        Args:
            currency_code: ISO 4217 code such as ``"EUR"``, or a ``CountryCode``
                whose currency is looked up.
            amount: The amount; floats are converted through their shortest repr.
            property_name: Member name used in validation errors.
        """
        if isinstance(currency_code, CountryCode):
            currency_code = currency.get_currency_code(currency_code)
        number, number_result = try_decimal(amount, property_name)
        if number is None:
            return cls._rejected(number_result, property_name)
        return cls._validated(cls(number, currency_code, property_name))

    def get_currency_symbol(self) -> str:
        return currency.get_currency_symbol(self.currency_code)

    def to_string_with_code(self) -> str:
        return f"{self.value:,.2f} {self.currency_code}"

    def _equality_components(self) -> tuple[object, ...]:
        return (self.value, self.currency_code)

    def __str__(self) -> str:
        return f"{self.get_currency_symbol()}{self.value:,.2f}"


@register_value_object
class SmallUnitMoney(ValidatedValueObject[int]):
    """Whole number of minor currency units (cents, pence, yen, ...) for a country."""

    name = "small_unit_money"
    category = "money"

    country_code: CountryCode

    def __init__(self, value: int, country_code: CountryCode, property_name: str = "SmallUnitMoney") -> None:
        self.country_code = country_code
        super().__init__(value, property_name, [money.non_negative(property_name)])

    @classmethod
    def try_create(
        cls,
        country_code: CountryCode,
        value: int,
        property_name: str = "SmallUnitMoney",
    ) -> tuple[ValidationResult, "SmallUnitMoney | None"]:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"SmallUnitMoney needs an integer amount, got {type(value).__name__}")
        return cls._validated(cls(value, country_code, property_name))

    def get_currency_code(self) -> str:
        return currency.get_currency_code(self.country_code)

    def get_currency_symbol(self) -> str:
        return currency.get_currency_symbol(self.get_currency_code())

    def get_decimal_places(self) -> int:
        return currency.get_decimal_places(self.country_code)

    def get_smallest_unit_name(self) -> str:
        return currency.get_minor_unit_name(self.country_code)

    def to_decimal(self) -> Decimal:
        """Amount in major units, e.g. 12345 cents -> ``Decimal("123.45")``."""
        return Decimal(self.value).scaleb(-self.get_decimal_places())

    def to_string_with_code(self) -> str:
        return f"{self.to_decimal():,.2f} {self.get_currency_code()}"

    def to_raw_string(self) -> str:
        return f"{self.value} {self.get_smallest_unit_name()}"

    def _equality_components(self) -> tuple[object, ...]:
        return (self.value, self.country_code)

    def __str__(self) -> str:
        return f"{self.get_currency_symbol()}{self.to_decimal():,.2f}"


@register_value_object
class Percentage(ValidatedValueObject[Decimal]):
    """Value on the 0-100 scale with a fixed display precision of 0-3 places."""

    name = "percentage"
    category = "money"

    MAX_DECIMAL_PLACES = 3

    decimal_places: int

    def __init__(self, value: Decimal, decimal_places: int = 0, property_name: str = "Percentage") -> None:
        if not 0 <= decimal_places <= self.MAX_DECIMAL_PLACES:
            raise ValueError("Decimal places must be between 0 and 3.")
        self.decimal_places = decimal_places
        super().__init__(
            value,
            property_name,
            [
                percentage.value_range(property_name),
                percentage.decimal_places(property_name, decimal_places),
            ],
        )

    @classmethod
    def try_create(
        cls,
        value: Decimal | int | float | str,
        decimal_places: int = 0,
        property_name: str = "Percentage",
    ) -> tuple[ValidationResult, "Percentage | None"]:
        if not 0 <= decimal_places <= cls.MAX_DECIMAL_PLACES:
            return cls._rejected(
                ValidationResult.failure(
                    "Decimal places must be between 0 and 3.", property_name, "InvalidDecimalPlaces"
                ),
                property_name,
            )
        number, number_result = try_decimal(value, property_name)
        if number is None:
            return cls._rejected(number_result, property_name)
        return cls._validated(cls(number, decimal_places, property_name))

    def to_fraction(self) -> Decimal:
        """``Decimal("12.5")`` -> ``Decimal("0.125")``."""
        return self.value / 100

    def of(self, base: Decimal | int) -> Decimal:
        return as_decimal(base) * self.to_fraction()

    def _equality_components(self) -> tuple[object, ...]:
        return (self.value, self.decimal_places)

    def __str__(self) -> str:
        return f"{self.value:.{self.decimal_places}f}%"
