"""Fluent builders for the address, banking and credit card aggregates.

Builders collect raw input step by step and defer every check to ``build``,
which returns the same ``(ValidationResult, value)`` pair as the aggregate's
``try_create``.
"""

from __future__ import annotations

from datetime import date

from validated_primitives.domain.address import Address
from validated_primitives.domain.banking import BankingDetails
from validated_primitives.domain.payment import CreditCardDetails
from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators.base import is_blank
from validated_primitives.value_objects.banking import IbanNumber


# =============================================================================
# Address
# =============================================================================


class AddressBuilder:
    """Builder for creating addresses with fluent interface.

    Example:
        >>> result, address = (
        ...     AddressBuilder()
        ...     .with_street("10 Downing Street")
        ...     .with_city("London")
        ...     .with_postal_code("SW1A 2AA")
        ...     .with_country(CountryCode.UNITED_KINGDOM)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self.reset()

    def with_street(self, street: str | None) -> "AddressBuilder":
        self._street = street
        return self

    def with_address_line2(self, address_line2: str | None) -> "AddressBuilder":
        self._address_line2 = address_line2
        return self

    def with_city(self, city: str | None) -> "AddressBuilder":
        self._city = city
        return self

    def with_state_province(self, state_province: str | None) -> "AddressBuilder":
        self._state_province = state_province
        return self

    def with_postal_code(self, postal_code: str | None) -> "AddressBuilder":
        self._postal_code = postal_code
        return self

    def with_country(self, country: CountryCode | None) -> "AddressBuilder":
        self._country = country or CountryCode.UNKNOWN
        return self

    def with_address(
        self,
        street: str | None,
        city: str | None,
        country: CountryCode | None,
        postal_code: str | None,
        address_line2: str | None = None,
        state_province: str | None = None,
    ) -> "AddressBuilder":
        """Set all fields at once."""
        self._street = street
        self._address_line2 = address_line2
        self._city = city
        self._state_province = state_province
        self._country = country or CountryCode.UNKNOWN
        self._postal_code = postal_code
        return self

    def build(self) -> tuple[ValidationResult, Address | None]:
        result = ValidationResult.success()
        if is_blank(self._street):
            result.add_error("Street address is required.", "Street", "Required")
        if is_blank(self._city):
            result.add_error("City is required.", "City", "Required")
        if is_blank(self._postal_code):
            result.add_error("Postal code is required.", "PostalCode", "Required")
        if self._country is CountryCode.UNKNOWN:
            result.add_error("Country is required.", "Country", "Required")
        if not result.is_valid:
            return result, None

        return Address.try_create(
            self._street,
            self._address_line2,
            self._city,
            self._country,
            self._postal_code,
            self._state_province,
        )

    def reset(self) -> "AddressBuilder":
        self._street: str | None = None
        self._address_line2: str | None = None
        self._city: str | None = None
        self._state_province: str | None = None
        self._postal_code: str | None = None
        self._country = CountryCode.UNKNOWN
        return self


# =============================================================================
# Banking
# =============================================================================


class BankingDetailsBuilder:
    """Builder for banking details.

    When no country is set, ``build`` takes it from the account number if
    that is a valid IBAN of a supported country.
    """

    def __init__(self) -> None:
        self.reset()

    def with_country(self, country: CountryCode) -> "BankingDetailsBuilder":
        self._country = country
        return self

    def with_account_number(self, account_number: str | None) -> "BankingDetailsBuilder":
        self._account_number = account_number
        return self

    def with_swift_code(self, swift_code: str | None) -> "BankingDetailsBuilder":
        self._swift_code = swift_code
        return self

    def with_routing_number(self, routing_number: str | None) -> "BankingDetailsBuilder":
        self._routing_number = routing_number
        return self

    def with_sort_code(self, sort_code: str | None) -> "BankingDetailsBuilder":
        self._sort_code = sort_code
        return self

    def with_us_banking(
        self, routing_number: str, account_number: str, swift_code: str | None = None
    ) -> "BankingDetailsBuilder":
        self._country = CountryCode.UNITED_STATES
        self._routing_number = routing_number
        self._account_number = account_number
        self._swift_code = swift_code
        return self

    def with_uk_banking(
        self, sort_code: str, account_number: str, swift_code: str | None = None
    ) -> "BankingDetailsBuilder":
        self._country = CountryCode.UNITED_KINGDOM
        self._sort_code = sort_code
        self._account_number = account_number
        self._swift_code = swift_code
        return self

    def with_international_banking(
        self, iban: str, swift_code: str, country: CountryCode | None = None
    ) -> "BankingDetailsBuilder":
        self._account_number = iban
        self._swift_code = swift_code
        if country is not None:
            self._country = country
        return self

    def _detect_country(self) -> CountryCode | None:
        if is_blank(self._account_number):
            return None
        result, account = IbanNumber.try_create(self._account_number)
        if result.is_valid and account.is_iban:
            return account.country_code
        return None

    def build(self) -> tuple[ValidationResult, BankingDetails | None]:
        country = self._country if self._country is not None else self._detect_country()
        if country is None:
            return ValidationResult.failure("Country is required", "Country", "Required"), None
        if is_blank(self._account_number):
            return ValidationResult.failure("Account number is required", "AccountNumber", "Required"), None

        return BankingDetails.try_create(
            country,
            self._account_number,
            self._swift_code,
            self._routing_number,
            self._sort_code,
        )

    def reset(self) -> "BankingDetailsBuilder":
        self._country: CountryCode | None = None
        self._account_number: str | None = None
        self._swift_code: str | None = None
        self._routing_number: str | None = None
        self._sort_code: str | None = None
        return self


# =============================================================================
# Credit card
# =============================================================================


class CreditCardBuilder:
    """Builder for credit card details."""

    def __init__(self) -> None:
        self.reset()

    def with_card_number(self, card_number: str | None) -> "CreditCardBuilder":
        self._card_number = card_number
        return self

    def with_security_code(self, security_code: str | int | None) -> "CreditCardBuilder":
        self._security_code = str(security_code) if isinstance(security_code, int) else security_code
        return self

    def with_expiration(self, expiration: date | str | int, year: int | None = None) -> "CreditCardBuilder":
        """Set the expiration from a date, an ``"MM/YY"`` string, or a month and year.

        Unparsable strings leave the expiration unset, so ``build`` reports it
        as missing.
        """
        if isinstance(expiration, date):
            self._expiration_month = expiration.month
            self._expiration_year = expiration.year
        elif isinstance(expiration, str):
            self._set_expiration_from_string(expiration)
        else:
            self._expiration_month = expiration
            self._expiration_year = year
        return self

    def _set_expiration_from_string(self, expiration: str) -> None:
        parts = [part.strip() for part in expiration.split("/") if part.strip()]
        if len(parts) != 2:
            return
        try:
            month, year = int(parts[0]), int(parts[1])
        except ValueError:
            return
        self._expiration_month = month
        self._expiration_year = year

    def build(self) -> tuple[ValidationResult, CreditCardDetails | None]:
        return CreditCardDetails.try_create(
            self._card_number,
            self._security_code,
            self._expiration_month,
            self._expiration_year,
        )

    def reset(self) -> "CreditCardBuilder":
        self._card_number: str | None = None
        self._security_code: str | None = None
        self._expiration_month: int | None = None
        self._expiration_year: int | None = None
        return self
