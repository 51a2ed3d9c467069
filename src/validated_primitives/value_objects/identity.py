"""Identity document value objects: passports, driving licenses, SSNs and personal names."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators import common, driving_license, human_name, passport, ssn
from validated_primitives.validators.base import extract_digits, is_blank, normalize
from validated_primitives.value_objects.base import ValidatedValueObject
from validated_primitives.value_objects.registry import register_value_object


def _mask_all_but_last_four(normalized: str) -> str:
    if len(normalized) <= 4:
        return "*" * len(normalized)
    return "*" * (len(normalized) - 4) + normalized[-4:]


class _IssuedDocument(ValidatedValueObject[str]):
    """Document number tied to the country that issued it."""

    issuing_country: CountryCode

    def to_normalized_string(self) -> str:
        return normalize(self.value)

    def masked(self) -> str:
        return _mask_all_but_last_four(self.to_normalized_string())

    def get_country_name(self) -> str:
        return self.issuing_country.display_name

    def _equality_components(self) -> tuple[object, ...]:
        return (self.to_normalized_string(), self.issuing_country)

    def __str__(self) -> str:
        return self.to_normalized_string()


@register_value_object
class Passport(_IssuedDocument):
    """Passport number with per-country format rules (ICAO 9303 based)."""

    name = "passport"
    category = "identity"

    def __init__(self, value: str, issuing_country: CountryCode, property_name: str = "Passport") -> None:
        self.issuing_country = issuing_country
        super().__init__(
            value,
            property_name,
            [
                passport.not_null_or_whitespace(property_name),
                passport.valid_format(property_name),
                passport.country_format(issuing_country, property_name),
            ],
        )

    @classmethod
    def try_create(
        cls,
        issuing_country: CountryCode,
        value: str | None,
        property_name: str = "Passport",
    ) -> tuple[ValidationResult, "Passport | None"]:
        return cls._validated(cls(value, issuing_country, property_name))

    def to_formatted_string(self) -> str:
        """Country display format (CA ``AB 123456``, UK groups of three, RU ``12 3456789``)."""
        normalized = self.to_normalized_string()
        country = self.issuing_country
        if country is CountryCode.CANADA and len(normalized) == 8:
            return f"{normalized[:2]} {normalized[2:]}"
        if country is CountryCode.UNITED_KINGDOM and len(normalized) == 9:
            return f"{normalized[:3]} {normalized[3:6]} {normalized[6:]}"
        if country is CountryCode.RUSSIA and len(normalized) == 9:
            return f"{normalized[:2]} {normalized[2:]}"
        return normalized

    @property
    def passport_type(self) -> str:
        normalized = self.to_normalized_string()
        if self.issuing_country is CountryCode.AUSTRALIA and len(normalized) >= 8 and normalized[0].isalpha():
            if normalized[0] in "PN":
                return "Regular Passport"
            if normalized[0] == "D":
                return "Diplomatic Passport"
            return "Other"
        if self.issuing_country is CountryCode.GERMANY and len(normalized) >= 9 and normalized.startswith("C"):
            return "Regular Passport (C-series)"
        return "Regular Passport"


@register_value_object
class DrivingLicenseNumber(_IssuedDocument):
    """Driving license number with per-country format rules."""

    name = "driving_license"
    category = "identity"

    def __init__(
        self,
        value: str,
        issuing_country: CountryCode,
        property_name: str = "DrivingLicenseNumber",
    ) -> None:
        self.issuing_country = issuing_country
        super().__init__(
            value,
            property_name,
            [
                driving_license.not_null_or_whitespace(property_name),
                driving_license.valid_format(property_name),
                driving_license.country_format(issuing_country, property_name),
            ],
        )

    @classmethod
    def try_create(
        cls,
        issuing_country: CountryCode,
        value: str | None,
        property_name: str = "DrivingLicenseNumber",
    ) -> tuple[ValidationResult, "DrivingLicenseNumber | None"]:
        return cls._validated(cls(value, issuing_country, property_name))

    def to_formatted_string(self) -> str:
        normalized = self.to_normalized_string()
        country = self.issuing_country
        if country is CountryCode.UNITED_KINGDOM and len(normalized) == 16:
            return f"{normalized[:5]} {normalized[5:11]} {normalized[11:]}"
        if country is CountryCode.SPAIN and len(normalized) == 9:
            return f"{normalized[:8]}-{normalized[8:]}"
        if country is CountryCode.POLAND and len(normalized) == 13:
            return f"{normalized[:5]} {normalized[5:]}"
        if country is CountryCode.INDIA and 13 <= len(normalized) <= 16:
            return f"{normalized[:4]}-{normalized[4:]}"
        return normalized

    @property
    def license_class(self) -> str:
        # No supported country encodes the class in the number itself
        return "Standard"


@register_value_object
class SocialSecurityNumber(ValidatedValueObject[str]):
    """US Social Security Number, stored as its nine digits.

    The raw input is checked for layout (``XXX-XX-XXXX`` or nine digits)
    before the digits are extracted, so ``"123-456-789"`` is rejected even
    though it contains nine digits.
    """

    name = "ssn"
    category = "identity"

    def __init__(self, value: str, property_name: str = "SocialSecurityNumber") -> None:
        super().__init__(
            extract_digits(value),
            property_name,
            [
                ssn.not_empty(property_name),
                ssn.valid_format(property_name),
                ssn.valid_area_number(property_name),
                ssn.valid_group_number(property_name),
                ssn.valid_serial_number(property_name),
                ssn.not_advertising_number(property_name),
            ],
        )

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "SocialSecurityNumber",
    ) -> tuple[ValidationResult, "SocialSecurityNumber | None"]:
        if is_blank(value):
            return cls._rejected(
                ValidationResult.failure("Social Security Number must be provided", property_name, "Required"),
                property_name,
            )
        format_result = ssn.check_input_format(value, property_name)
        if not format_result.is_valid:
            return cls._rejected(format_result, property_name)
        return cls._validated(cls(value, property_name))

    def to_digits_only(self) -> str:
        return self.value

    def masked(self) -> str:
        """``XXX-XX-1234``"""
        if len(self.value) != 9:
            return "*" * len(self.value)
        return f"XXX-XX-{self.value[5:9]}"

    def partially_masked(self) -> str:
        """``123-XX-1234``"""
        if len(self.value) != 9:
            return "*" * len(self.value)
        return f"{self.value[:3]}-XX-{self.value[5:9]}"

    @property
    def area_number(self) -> str:
        return self.value[:3] if len(self.value) >= 3 else ""

    @property
    def group_number(self) -> str:
        return self.value[3:5] if len(self.value) >= 5 else ""

    @property
    def serial_number(self) -> str:
        return self.value[5:9] if len(self.value) >= 9 else ""

    def __str__(self) -> str:
        if len(self.value) != 9:
            return self.value
        return f"{self.value[:3]}-{self.value[3:5]}-{self.value[5:]}"

    def __repr__(self) -> str:
        return f"SocialSecurityNumber({self.masked()!r})"


@register_value_object
class HumanName(ValidatedValueObject[str]):
    """A single name part: letters, hyphens and apostrophes, at most 50 characters."""

    name = "human_name"
    category = "identity"

    MAX_LENGTH = 50

    def __init__(self, value: str, property_name: str = "Name") -> None:
        super().__init__(
            value.strip() if value is not None else "",
            property_name,
            [
                common.not_null_or_whitespace(property_name),
                common.max_length(property_name, self.MAX_LENGTH),
                human_name.alpha_with_hyphen_and_apostrophe(property_name),
            ],
        )

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "Name",
    ) -> tuple[ValidationResult, "HumanName | None"]:
        return cls._validated(cls(value, property_name))
