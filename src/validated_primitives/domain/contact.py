"""Contact information aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from validated_primitives.result import ValidationResult
from validated_primitives.types import CountryCode
from validated_primitives.validators.base import is_blank
from validated_primitives.value_objects.contact import EmailAddress, PhoneNumber, WebsiteUrl


@dataclass(frozen=True)
class ContactInformation:
    """Email, phone numbers and an optional website for one person or business."""

    email: EmailAddress
    primary_phone: PhoneNumber
    secondary_phone: PhoneNumber | None = None
    website: WebsiteUrl | None = None

    @classmethod
    def try_create(
        cls,
        country_code: CountryCode,
        email: str | None,
        primary_phone: str | None,
        secondary_phone: str | None = None,
        website: str | None = None,
    ) -> tuple[ValidationResult, ContactInformation | None]:
        """Validate all parts; phone numbers are checked against ``country_code``."""
        result = ValidationResult.success()

        email_result, email_value = EmailAddress.try_create(email, "Email")
        result.merge(email_result)

        primary_result, primary_value = PhoneNumber.try_create(primary_phone, country_code, "PrimaryPhone")
        result.merge(primary_result)

        secondary_value = None
        if not is_blank(secondary_phone):
            secondary_result, secondary_value = PhoneNumber.try_create(
                secondary_phone, country_code, "SecondaryPhone"
            )
            result.merge(secondary_result)

        website_value = None
        if not is_blank(website):
            website_result, website_value = WebsiteUrl.try_create(website, "Website")
            result.merge(website_result)

        if not result.is_valid:
            return result, None
        return result, cls(email_value, primary_value, secondary_value, website_value)

    def __str__(self) -> str:
        parts = [f"Email: {self.email.value}", f"Phone: {self.primary_phone.value}"]
        if self.secondary_phone is not None:
            parts.append(f"Secondary Phone: {self.secondary_phone.value}")
        if self.website is not None:
            parts.append(f"Website: {self.website.value}")
        return " | ".join(parts)
