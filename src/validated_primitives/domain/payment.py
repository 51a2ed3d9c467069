"""Credit card details aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from validated_primitives.result import ValidationResult
from validated_primitives.value_objects.payment import (
    CreditCardExpiration,
    CreditCardNumber,
    CreditCardSecurityNumber,
)


@dataclass(frozen=True)
class CreditCardDetails:
    """Card number, security number and expiration, validated together."""

    card_number: CreditCardNumber
    security_number: CreditCardSecurityNumber
    expiration: CreditCardExpiration

    @classmethod
    def try_create(
        cls,
        card_number: str | None,
        security_number: str | None,
        expiration_month: int | None,
        expiration_year: int | None,
    ) -> tuple[ValidationResult, CreditCardDetails | None]:
        result = ValidationResult.success()

        number_result, number_value = CreditCardNumber.try_create(card_number, "CardNumber")
        result.merge(number_result)

        security_result, security_value = CreditCardSecurityNumber.try_create(security_number, "SecurityNumber")
        result.merge(security_result)

        expiration_value = None
        if expiration_month is None or expiration_year is None:
            result.add_error("Expiration month and year must be provided", "Expiration", "Required")
        else:
            expiration_result, expiration_value = CreditCardExpiration.try_create(
                expiration_month, expiration_year, "Expiration"
            )
            result.merge(expiration_result)

        if not result.is_valid:
            return result, None
        return result, cls(number_value, security_value, expiration_value)

    def get_masked_card_number(self) -> str:
        return self.card_number.masked()

    def is_expired(self) -> bool:
        return self.expiration.is_expired

    def __str__(self) -> str:
        return f"Card: {self.card_number.masked()}, Expires: {self.expiration}, CVV: ***"
