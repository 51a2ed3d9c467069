"""Payment card value objects: card number, expiration date and security number."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators import credit_card
from validated_primitives.validators.base import extract_digits, is_blank
from validated_primitives.value_objects.base import ValidatedValueObject
from validated_primitives.value_objects.registry import register_value_object


@register_value_object
class CreditCardNumber(ValidatedValueObject[str]):
    """Primary account number, stored as digits only.

    Spaces and hyphens in the input are ignored; the number must have 13-19
    digits, must not repeat one digit throughout and must pass Luhn.
    """

    name = "credit_card"
    category = "payment"

    def __init__(self, value: str, property_name: str = "CreditCardNumber") -> None:
        super().__init__(
            extract_digits(value),
            property_name,
            [
                credit_card.not_empty(property_name),
                credit_card.valid_digit_count(property_name),
                credit_card.not_all_identical_digits(property_name),
                credit_card.luhn_check(property_name),
            ],
        )

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "CreditCardNumber",
    ) -> tuple[ValidationResult, "CreditCardNumber | None"]:
        if is_blank(value):
            return cls._rejected(
                ValidationResult.failure("Credit card number must be provided", property_name, "Required"),
                property_name,
            )
        return cls._validated(cls(value, property_name))

    def masked(self) -> str:
        """All but the last four digits replaced with ``*``."""
        if len(self.value) <= 4:
            return self.value
        return "*" * (len(self.value) - 4) + self.value[-4:]

    @property
    def brand(self) -> str | None:
        """Card scheme ("visa", "mastercard", ...) or None when unrecognized."""
        return credit_card.detect_brand(self.value)

    def __repr__(self) -> str:
        return f"CreditCardNumber({self.masked()!r})"


@register_value_object
class CreditCardExpiration(ValidatedValueObject[tuple[int, int]]):
    """Card expiry month and year. Two digit years are read as 20xx."""

    name = "credit_card_expiration"
    category = "payment"

    def __init__(self, month: int, year: int, property_name: str = "Expiration") -> None:
        super().__init__(
            (month, credit_card.normalize_expiration_year(year)),
            property_name,
            [
                credit_card.valid_month(property_name),
                credit_card.valid_year(property_name),
                credit_card.not_expired(property_name),
            ],
        )

    @classmethod
    def try_create(
        cls,
        month: int,
        year: int,
        property_name: str = "Expiration",
    ) -> tuple[ValidationResult, "CreditCardExpiration | None"]:
        return cls._validated(cls(month, year, property_name))

    @property
    def month(self) -> int:
        return self.value[0]

    @property
    def year(self) -> int:
        return self.value[1]

    @property
    def is_expired(self) -> bool:
        """Re-evaluated against today's date on every access."""
        outcome = credit_card.not_expired(self.property_name)(self.value)
        return outcome is not None and not outcome.is_valid

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.year % 100:02d}"


@register_value_object
class CreditCardSecurityNumber(ValidatedValueObject[str]):
    """CVV/CVC: three or four digits."""

    name = "credit_card_security_number"
    category = "payment"

    def __init__(self, value: str, property_name: str = "SecurityNumber") -> None:
        super().__init__(
            extract_digits(value),
            property_name,
            [
                credit_card.security_number_not_empty(property_name),
                credit_card.security_number_length(property_name),
            ],
        )

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "SecurityNumber",
    ) -> tuple[ValidationResult, "CreditCardSecurityNumber | None"]:
        if is_blank(value):
            return cls._rejected(
                ValidationResult.failure("Security number must be provided", property_name, "Required"),
                property_name,
            )
        return cls._validated(cls(value, property_name))

    def __repr__(self) -> str:
        return "CreditCardSecurityNumber('***')"
