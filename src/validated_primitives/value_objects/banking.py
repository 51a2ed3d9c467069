"""Banking value objects: account numbers, IBANs, SWIFT/BIC, ABA routing numbers and sort codes."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators import bank_account, iban, routing, sort_code, swift
from validated_primitives.validators.base import extract_digits
from validated_primitives.validators.iban import (
    BankAccountNumberType,
    detect_account_type,
    normalize_account_number,
)
from validated_primitives.value_objects.base import ValidatedValueObject
from validated_primitives.value_objects.registry import register_value_object


def _group_by_four(normalized: str) -> str:
    return " ".join(normalized[i : i + 4] for i in range(0, len(normalized), 4))


def _mask(normalized: str) -> str:
    if len(normalized) <= 4:
        return "*" * len(normalized)
    return "*" * (len(normalized) - 4) + normalized[-4:]


# =============================================================================
# Account numbers
# =============================================================================


@register_value_object
class BankAccountNumber(ValidatedValueObject[str]):
    """A national or IBAN-form bank account number checked against its country's format.

    Example:
        >>> result, account = BankAccountNumber.try_create(
        ...     CountryCode.GERMANY, "DE89 3704 0044 0532 0130 00"
        ... )
        >>> account.to_formatted_string()
        'DE89 3704 0044 0532 0130 00'
    """

    name = "bank_account"
    category = "banking"

    country_code: CountryCode

    def __init__(
        self,
        value: str,
        country_code: CountryCode,
        property_name: str = "BankAccountNumber",
    ) -> None:
        self.country_code = country_code
        validators = [
            bank_account.not_null_or_whitespace(property_name),
            bank_account.valid_format(property_name),
        ]
        if not country_code.is_wildcard:
            validators.append(bank_account.country_format(property_name, country_code))
        super().__init__(value, property_name, validators)

    @classmethod
    def try_create(
        cls,
        country_code: CountryCode,
        value: str | None,
        property_name: str = "BankAccountNumber",
    ) -> tuple[ValidationResult, "BankAccountNumber | None"]:
        return cls._validated(cls(value, country_code, property_name))

    @property
    def is_iban(self) -> bool:
        return len(self.value) >= 2 and self.value[0].isalpha() and self.value[1].isalpha()

    def to_normalized_string(self) -> str:
        return normalize_account_number(self.value)

    def to_formatted_string(self) -> str:
        """IBANs in groups of four, anything else normalized."""
        normalized = self.to_normalized_string()
        if self.is_iban and len(normalized) >= 4:
            return _group_by_four(normalized)
        return normalized

    def get_iban_country_code(self) -> str | None:
        return self.value[:2].upper() if self.is_iban else None

    def get_iban_check_digits(self) -> str | None:
        if self.is_iban and len(self.value) >= 4:
            return self.to_normalized_string()[2:4]
        return None

    def masked(self) -> str:
        return _mask(self.to_normalized_string())

    def get_country_name(self) -> str:
        return self.country_code.display_name

    def _equality_components(self) -> tuple[object, ...]:
        return (self.to_normalized_string(), self.country_code)


@register_value_object
class IbanNumber(ValidatedValueObject[str]):
    """An account number classified as IBAN or BBAN and validated accordingly.

    IBANs get structure, length and mod 97 checks and take their country from
    the first two letters; BBANs get a length check plus the national format
    of ``country_code`` when one is given.
    """

    name = "iban"
    category = "banking"

    account_type: BankAccountNumberType
    country_code: CountryCode | None

    def __init__(
        self,
        value: str,
        country_code: CountryCode | None = None,
        property_name: str = "AccountNumber",
    ) -> None:
        self.account_type = detect_account_type(value)
        validators = [
            iban.not_null_or_whitespace(property_name),
            iban.valid_format(property_name),
        ]
        if self.account_type is BankAccountNumberType.IBAN:
            validators.append(iban.valid_iban_format(property_name))
            validators.append(iban.valid_iban_checksum(property_name))
            detected = CountryCode.from_iso(normalize_account_number(value)[:2])
            self.country_code = None if detected is CountryCode.UNKNOWN else detected
        elif self.account_type is BankAccountNumberType.BBAN:
            validators.append(iban.valid_bban_format(property_name, country_code))
            self.country_code = country_code
        else:
            self.country_code = country_code
        super().__init__(value, property_name, validators)

    @classmethod
    def try_create(
        cls,
        value: str | None,
        country_code: CountryCode | None = None,
        property_name: str = "AccountNumber",
    ) -> tuple[ValidationResult, "IbanNumber | None"]:
        return cls._validated(cls(value, country_code, property_name))

    @property
    def is_iban(self) -> bool:
        return self.account_type is BankAccountNumberType.IBAN

    @property
    def is_bban(self) -> bool:
        return self.account_type is BankAccountNumberType.BBAN

    def to_normalized_string(self) -> str:
        return normalize_account_number(self.value)

    def to_formatted_string(self) -> str:
        normalized = self.to_normalized_string()
        if self.is_iban and len(normalized) >= 4:
            return _group_by_four(normalized)
        return normalized

    def get_iban_country_code(self) -> str | None:
        if not self.is_iban:
            return None
        normalized = self.to_normalized_string()
        return normalized[:2] if len(normalized) >= 2 else None

    def get_iban_check_digits(self) -> str | None:
        if not self.is_iban:
            return None
        normalized = self.to_normalized_string()
        return normalized[2:4] if len(normalized) >= 4 else None

    def get_bban_part(self) -> str:
        """The domestic part: everything after the IBAN country and check digits."""
        normalized = self.to_normalized_string()
        if self.is_iban and len(normalized) > 4:
            return normalized[4:]
        return normalized

    def masked(self) -> str:
        return _mask(self.to_normalized_string())

    def _equality_components(self) -> tuple[object, ...]:
        return (self.to_normalized_string(), self.account_type)

    def __str__(self) -> str:
        return self.to_normalized_string()


# =============================================================================
# Bank identifiers
# =============================================================================


@register_value_object
class SwiftCode(ValidatedValueObject[str]):
    """ISO 9362 Business Identifier Code (BIC8 or BIC11).

    Layout: ``AAAA`` institution, ``BB`` country, ``CC`` location and an
    optional ``DDD`` branch (``XXX`` is the primary office).
    """

    name = "swift"
    category = "banking"

    def __init__(
        self,
        value: str,
        property_name: str = "SwiftCode",
        allow_test_codes: bool = False,
    ) -> None:
        validators = [
            swift.not_null_or_whitespace(property_name),
            swift.valid_format(property_name),
            swift.valid_length(property_name),
            swift.valid_structure(property_name),
            swift.valid_country_code(property_name),
        ]
        if not allow_test_codes:
            validators.append(swift.not_test_code(property_name))
        super().__init__(value, property_name, validators)

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "SwiftCode",
        allow_test_codes: bool = False,
    ) -> tuple[ValidationResult, "SwiftCode | None"]:
        return cls._validated(cls(value, property_name, allow_test_codes))

    def to_normalized_string(self) -> str:
        return self.value.strip().upper()

    def to_full_format(self) -> str:
        """BIC11 form; BIC8 codes get the ``XXX`` primary office branch."""
        normalized = self.to_normalized_string()
        return normalized + "XXX" if len(normalized) == 8 else normalized

    @property
    def institution_code(self) -> str:
        return self.to_normalized_string()[:4]

    bank_code = institution_code

    @property
    def country_code(self) -> str:
        return self.to_normalized_string()[4:6]

    @property
    def location_code(self) -> str:
        return self.to_normalized_string()[6:8]

    @property
    def branch_code(self) -> str:
        normalized = self.to_normalized_string()
        return normalized[8:11] if len(normalized) == 11 else "XXX"

    @property
    def is_primary_office(self) -> bool:
        normalized = self.to_normalized_string()
        return len(normalized) == 8 or normalized.endswith("XXX")

    @property
    def is_test_code(self) -> bool:
        return self.location_code[1:2] == "0"

    @property
    def is_bic8(self) -> bool:
        return len(self.to_normalized_string()) == 8

    @property
    def is_bic11(self) -> bool:
        return len(self.to_normalized_string()) == 11

    def _equality_components(self) -> tuple[object, ...]:
        return (self.to_full_format(),)

    def __str__(self) -> str:
        return self.to_normalized_string()


@register_value_object
class RoutingNumber(ValidatedValueObject[str]):
    """Nine digit ABA routing transit number (US)."""

    name = "routing"
    category = "banking"

    def __init__(self, value: str, property_name: str = "RoutingNumber") -> None:
        super().__init__(
            value,
            property_name,
            [
                routing.not_null_or_whitespace(property_name),
                routing.valid_format(property_name),
                routing.only_digits(property_name),
                routing.valid_length(property_name),
                routing.valid_federal_reserve_symbol(property_name),
                routing.valid_checksum(property_name),
            ],
        )

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "RoutingNumber",
    ) -> tuple[ValidationResult, "RoutingNumber | None"]:
        return cls._validated(cls(value, property_name))

    def to_digits_only(self) -> str:
        return extract_digits(self.value)

    def to_formatted_string(self) -> str:
        """``XXXX-YYYY-C``: Federal Reserve symbol, institution, check digit."""
        digits = self.to_digits_only()
        if len(digits) != 9:
            return self.value
        return f"{digits[:4]}-{digits[4:8]}-{digits[8]}"

    @property
    def federal_reserve_symbol(self) -> str:
        return self.to_digits_only()[:4]

    @property
    def institution_identifier(self) -> str:
        return self.to_digits_only()[4:8]

    @property
    def check_digit(self) -> str:
        return self.to_digits_only()[8:9]

    @property
    def federal_reserve_district(self) -> int | None:
        digits = self.to_digits_only()
        return int(digits[:2]) if len(digits) >= 2 else None

    def _equality_components(self) -> tuple[object, ...]:
        return (self.to_digits_only(),)


@register_value_object
class SortCode(ValidatedValueObject[str]):
    """UK/Irish bank sort code (``12-34-56`` or ``123456``)."""

    name = "sort_code"
    category = "banking"

    country_code: CountryCode

    def __init__(
        self,
        value: str,
        country_code: CountryCode,
        property_name: str = "SortCode",
    ) -> None:
        self.country_code = country_code
        validators = [
            sort_code.not_null_or_whitespace(property_name),
            sort_code.valid_format(property_name),
        ]
        if country_code in sort_code.SORT_CODE_COUNTRIES:
            validators.append(sort_code.only_digits(property_name))
            validators.append(sort_code.country_format(property_name, country_code))
        super().__init__(value, property_name, validators)

    @classmethod
    def try_create(
        cls,
        country_code: CountryCode,
        value: str | None,
        property_name: str = "SortCode",
    ) -> tuple[ValidationResult, "SortCode | None"]:
        return cls._validated(cls(value, country_code, property_name))

    def to_digits_only(self) -> str:
        return extract_digits(self.value)

    def to_formatted_string(self) -> str:
        digits = self.to_digits_only()
        if self.country_code in sort_code.SORT_CODE_COUNTRIES and len(digits) == 6:
            return f"{digits[:2]}-{digits[2:4]}-{digits[4:]}"
        return self.value

    def get_country_name(self) -> str:
        return self.country_code.display_name

    def _equality_components(self) -> tuple[object, ...]:
        return (self.to_digits_only(), self.country_code)
