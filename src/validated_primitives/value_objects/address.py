"""Postal address parts: postal codes, cities, states/provinces and street lines."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators import common, postal_code
from validated_primitives.validators.base import is_blank
from validated_primitives.value_objects.base import ValidatedValueObject
from validated_primitives.value_objects.registry import register_value_object


@register_value_object
class PostalCode(ValidatedValueObject[str]):
    """Postal or ZIP code, checked against the country's format when one is known."""

    name = "postal_code"
    category = "address"

    country_code: CountryCode

    def __init__(self, value: str, country_code: CountryCode, property_name: str = "PostalCode") -> None:
        self.country_code = country_code
        validators = [
            common.not_null_or_whitespace(property_name),
            postal_code.valid_format(property_name),
            common.length(property_name, 2, 10),
        ]
        if not country_code.is_wildcard:
            validators.append(postal_code.country_format(property_name, country_code))
        super().__init__(value, property_name, validators)

    @classmethod
    def try_create(
        cls,
        country_code: CountryCode,
        value: str | None,
        property_name: str = "PostalCode",
    ) -> tuple[ValidationResult, "PostalCode | None"]:
        return cls._validated(cls(value, country_code, property_name))

    def get_country_name(self) -> str:
        return self.country_code.display_name

    def _equality_components(self) -> tuple[object, ...]:
        return (self.value, self.country_code)


class _TrimmedText(ValidatedValueObject[str]):
    """Required free text, trimmed, with a maximum length."""

    MAX_LENGTH = 100

    def __init__(self, value: str, property_name: str) -> None:
        super().__init__(
            value.strip() if value is not None else "",
            property_name,
            [
                common.not_null_or_whitespace(property_name),
                common.max_length(property_name, self.MAX_LENGTH),
            ],
        )


@register_value_object
class City(_TrimmedText):
    name = "city"
    category = "address"

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "City",
    ) -> tuple[ValidationResult, "City | None"]:
        return cls._validated(cls(value, property_name))


@register_value_object
class StateProvince(_TrimmedText):
    name = "state_province"
    category = "address"

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "StateProvince",
    ) -> tuple[ValidationResult, "StateProvince | None"]:
        return cls._validated(cls(value, property_name))


@register_value_object
class AddressLine(ValidatedValueObject[str]):
    """Optional street line of at most 200 characters.

    Blank input is not an error: ``try_create`` returns ``(success, None)``.
    """

    name = "address_line"
    category = "address"

    MAX_LENGTH = 200

    def __init__(self, value: str, property_name: str = "AddressLine") -> None:
        super().__init__(
            value.strip(),
            property_name,
            [common.max_length(property_name, self.MAX_LENGTH)],
        )

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "AddressLine",
    ) -> tuple[ValidationResult, "AddressLine | None"]:
        if is_blank(value):
            return ValidationResult.success(), None
        return cls._validated(cls(value, property_name))
