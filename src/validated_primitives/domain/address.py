"""Postal address aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators.base import is_blank
from validated_primitives.value_objects.address import AddressLine, City, PostalCode, StateProvince


@dataclass(frozen=True)
class Address:
    """A validated postal address. The country is carried by the postal code."""

    street: AddressLine
    city: City
    postal_code: PostalCode
    address_line2: AddressLine | None = None
    state_province: StateProvince | None = None

    @property
    def country(self) -> CountryCode:
        return self.postal_code.country_code

    @classmethod
    def try_create(
        cls,
        street: str | None,
        address_line2: str | None,
        city: str | None,
        country: CountryCode | None,
        postal_code: str | None,
        state_province: str | None = None,
    ) -> tuple[ValidationResult, Address | None]:
        """Validate every part and report all problems together.

        Args:
            street: First address line (required).
            address_line2: Optional second line.
            city: City name (required).
            country: Country of the address; None or ``UNKNOWN`` is an error.
            postal_code: Postal code, checked against the country's format.
            state_province: Optional state, county or province.

        Returns:
            ``(result, address)``; the address is None when anything failed.
        """
        result = ValidationResult.success()

        street_result, street_value = AddressLine.try_create(street, "Street")
        result.merge(street_result)
        if is_blank(street):
            result.add_error("Street address is required.", "Street", "Required")

        line2_value = None
        if not is_blank(address_line2):
            line2_result, line2_value = AddressLine.try_create(address_line2, "AddressLine2")
            result.merge(line2_result)

        city_result, city_value = City.try_create(city, "City")
        result.merge(city_result)

        state_value = None
        if not is_blank(state_province):
            state_result, state_value = StateProvince.try_create(state_province, "StateProvince")
            result.merge(state_result)

        postal_value = None
        if country is None or country is CountryCode.UNKNOWN:
            result.add_error("Country is required.", "Country", "Required")
        else:
            postal_result, postal_value = PostalCode.try_create(country, postal_code, "PostalCode")
            result.merge(postal_result)

        if not result.is_valid:
            return result, None
        return result, cls(street_value, city_value, postal_value, line2_value, state_value)

    def __str__(self) -> str:
        parts = [self.street.value]
        if self.address_line2 is not None:
            parts.append(self.address_line2.value)
        parts.append(self.city.value)
        if self.state_province is not None:
            parts.append(self.state_province.value)
        parts.append(self.postal_code.value)
        parts.append(self.postal_code.get_country_name())
        return ", ".join(parts)
