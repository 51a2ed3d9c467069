"""Banking details aggregate.

Which national identifiers are needed depends on the country: US accounts
need an ABA routing number, UK and Irish accounts need a sort code, and
neither may be supplied anywhere else.
"""

from __future__ import annotations

from dataclasses import dataclass

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators.base import is_blank
from validated_primitives.value_objects.banking import IbanNumber, RoutingNumber, SortCode, SwiftCode

ROUTING_NUMBER_COUNTRIES = frozenset({CountryCode.UNITED_STATES})
SORT_CODE_COUNTRIES = frozenset({CountryCode.UNITED_KINGDOM, CountryCode.IRELAND})


def check_country_requirements(
    country: CountryCode,
    routing_number: RoutingNumber | None,
    sort_code: SortCode | None,
) -> ValidationResult:
    """Country-specific presence rules for routing numbers and sort codes."""
    result = ValidationResult.success()
    if country in ROUTING_NUMBER_COUNTRIES and routing_number is None:
        result.add_error(
            "Routing number is required for United States banking details", "RoutingNumber", "Required"
        )
    if country in SORT_CODE_COUNTRIES and sort_code is None:
        result.add_error(f"Sort code is required for {country} banking details", "SortCode", "Required")
    if country not in ROUTING_NUMBER_COUNTRIES and routing_number is not None:
        result.add_error(
            "Routing number is only applicable for United States banking", "RoutingNumber", "NotApplicable"
        )
    if country not in SORT_CODE_COUNTRIES and sort_code is not None:
        result.add_error(
            "Sort code is only applicable for United Kingdom or Ireland banking", "SortCode", "NotApplicable"
        )
    return result


@dataclass(frozen=True)
class BankingDetails:
    country: CountryCode
    account_number: IbanNumber
    swift_code: SwiftCode | None = None
    routing_number: RoutingNumber | None = None
    sort_code: SortCode | None = None

    @classmethod
    def try_create(
        cls,
        country: CountryCode,
        account_number: str | None,
        swift_code: str | None = None,
        routing_number: str | None = None,
        sort_code: str | None = None,
    ) -> tuple[ValidationResult, BankingDetails | None]:
        """Validate an account and its bank identifiers.

        A missing account number is reported on its own; otherwise every
        supplied part is validated and all errors are returned together.
        """
        if is_blank(account_number):
            return ValidationResult.failure("Account number is required", "AccountNumber", "Required"), None

        result = ValidationResult.success()
        account_result, account_value = IbanNumber.try_create(account_number, country, "AccountNumber")
        result.merge(account_result)

        swift_value = None
        if not is_blank(swift_code):
            swift_result, swift_value = SwiftCode.try_create(swift_code, "SwiftCode")
            result.merge(swift_result)

        routing_value = None
        if not is_blank(routing_number):
            routing_result, routing_value = RoutingNumber.try_create(routing_number, "RoutingNumber")
            result.merge(routing_result)

        sort_value = None
        if not is_blank(sort_code):
            sort_result, sort_value = SortCode.try_create(country, sort_code, "SortCode")
            result.merge(sort_result)

        result.merge(check_country_requirements(country, routing_value, sort_value))

        if not result.is_valid:
            return result, None
        return result, cls(country, account_value, swift_value, routing_value, sort_value)

    @property
    def supports_international_transfers(self) -> bool:
        return self.swift_code is not None

    @property
    def uses_iban(self) -> bool:
        return self.account_number.is_iban

    @property
    def masked_account_number(self) -> str:
        return self.account_number.masked()

    def __str__(self) -> str:
        parts = []
        if self.swift_code is not None:
            parts.append(f"SWIFT: {self.swift_code}")
        if self.routing_number is not None:
            parts.append(f"Routing: {self.routing_number.to_formatted_string()}")
        if self.sort_code is not None:
            parts.append(f"Sort Code: {self.sort_code.to_formatted_string()}")
        parts.append(f"Account: {self.masked_account_number}")
        parts.append(f"({self.country})")
        return " | ".join(parts)
