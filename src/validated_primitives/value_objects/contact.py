"""Contact value objects: email addresses, phone numbers and website URLs."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators import common, email, phone, url
from validated_primitives.value_objects.base import ValidatedValueObject
from validated_primitives.value_objects.registry import register_value_object


@register_value_object
class EmailAddress(ValidatedValueObject[str]):
    name = "email"
    category = "contact"

    def __init__(self, value: str, property_name: str = "Email") -> None:
        super().__init__(
            value,
            property_name,
            [
                common.not_null_or_whitespace(property_name),
                email.email_format(property_name),
                common.max_length(property_name, email.MAX_EMAIL_LENGTH),
            ],
        )

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "Email",
    ) -> tuple[ValidationResult, "EmailAddress | None"]:
        return cls._validated(cls(value, property_name))


@register_value_object
class PhoneNumber(ValidatedValueObject[str]):
    """Phone number, optionally checked against a country's numbering format.

    With the default ``CountryCode.ALL`` only the permissive character check
    runs, which accepts any mix of digits, spaces, ``+``, ``-`` and brackets.
    """

    name = "phone"
    category = "contact"

    country_code: CountryCode

    def __init__(
        self,
        value: str,
        country_code: CountryCode = CountryCode.ALL,
        property_name: str = "PhoneNumber",
    ) -> None:
        self.country_code = country_code
        validators = [
            common.not_null_or_whitespace(property_name),
            phone.phone_number(property_name),
        ]
        if not country_code.is_wildcard:
            validators.append(phone.valid_format(property_name))
            validators.append(phone.country_format(property_name, country_code))
        super().__init__(value, property_name, validators)

    @classmethod
    def try_create(
        cls,
        value: str | None,
        country_code: CountryCode = CountryCode.ALL,
        property_name: str = "PhoneNumber",
    ) -> tuple[ValidationResult, "PhoneNumber | None"]:
        return cls._validated(cls(value, country_code, property_name))

    def get_country_name(self) -> str:
        return self.country_code.display_name


@register_value_object
class WebsiteUrl(ValidatedValueObject[str]):
    """Absolute http or https URL."""

    name = "url"
    category = "contact"

    def __init__(self, value: str, property_name: str = "Url") -> None:
        super().__init__(value, property_name, [url.web_url(property_name)])

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "Url",
    ) -> tuple[ValidationResult, "WebsiteUrl | None"]:
        return cls._validated(cls(value, property_name))
