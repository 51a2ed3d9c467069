"""Tests for domain aggregates and their builders."""

from __future__ import annotations

from datetime import date

import pytest

from validated_primitives.domain import (
    Address,
    AddressBuilder,
    BankingDetails,
    BankingDetailsBuilder,
    ContactInformation,
    CreditCardBuilder,
    CreditCardDetails,
    PersonName,
    check_country_requirements,
)
from validated_primitives.types import CountryCode
from validated_primitives.value_objects.banking import RoutingNumber

DE_IBAN = "DE89 3704 0044 0532 0130 00"
VISA = "4111111111111111"


# =============================================================================
# Address
# =============================================================================


class TestAddress:
    def test_valid(self, uk):
        result, address = Address.try_create("10 Downing Street", None, "London", uk, "SW1A 2AA")
        assert result.is_valid
        assert address.country is uk
        assert address.address_line2 is None
        assert str(address) == "10 Downing Street, London, SW1A 2AA, United Kingdom"

    def test_optional_parts(self, us):
        _, address = Address.try_create(
            "1600 Pennsylvania Ave NW", "Suite 1", "Washington", us, "20500", "DC"
        )
        assert address.address_line2.value == "Suite 1"
        assert address.state_province.value == "DC"
        assert "Suite 1" in str(address)

    def test_all_errors_reported(self, us):
        result, address = Address.try_create(" ", None, "", us, "ABCDE")
        assert address is None
        assert result.codes == ["Required", "NotNullOrWhitespace", "InvalidCountryPostalCodeFormat"]
        assert [e.member_name for e in result.errors] == ["Street", "City", "PostalCode"]

    @pytest.mark.parametrize("country", [None, CountryCode.UNKNOWN])
    def test_country_required(self, country):
        result, _ = Address.try_create("1 Main St", None, "Springfield", country, "12345")
        assert result.codes == ["Required"]
        assert result.errors[0].message == "Country is required."

    def test_overlong_street_is_not_also_missing(self, us):
        result, _ = Address.try_create("x" * 201, None, "Springfield", us, "12345")
        assert result.codes == ["MaxLength"]


class TestAddressBuilder:
    def test_build(self, uk):
        result, address = (
            AddressBuilder()
            .with_street("10 Downing Street")
            .with_city("London")
            .with_postal_code("SW1A 2AA")
            .with_country(uk)
            .build()
        )
        assert result.is_valid
        assert address.city.value == "London"

    def test_with_address(self, us):
        result, address = AddressBuilder().with_address(
            "1 Main St", "Springfield", us, "12345", state_province="IL"
        ).build()
        assert result.is_valid
        assert address.state_province.value == "IL"

    def test_missing_fields(self):
        result, address = AddressBuilder().with_country(None).build()
        assert address is None
        assert [e.member_name for e in result.errors] == ["Street", "City", "PostalCode", "Country"]
        assert set(result.codes) == {"Required"}

    def test_reset(self, uk):
        builder = AddressBuilder().with_street("1 High St").with_country(uk)
        result, _ = builder.reset().build()
        assert len(result.errors) == 4


# =============================================================================
# Person name
# =============================================================================


class TestPersonName:
    def test_full_name(self):
        result, name = PersonName.try_create(" John ", "Adams", "Quincy")
        assert result.is_valid
        assert name.full_name == "John Quincy Adams"
        assert name.formal_name == "Adams, John Quincy"
        assert name.initials == "J.Q.A."
        assert str(name) == "John Quincy Adams"

    def test_blank_middle_name(self):
        _, name = PersonName.try_create("Ada", "Lovelace", "  ")
        assert name.middle_name is None
        assert name.formal_name == "Lovelace, Ada"
        assert name.initials == "A.L."

    def test_required(self):
        result, name = PersonName.try_create("", None)
        assert name is None
        assert [e.member_name for e in result.errors] == ["FirstName", "LastName"]
        assert result.codes == ["Required", "Required"]

    def test_lengths(self):
        result, _ = PersonName.try_create("a" * 51, "b", "c" * 51)
        assert result.codes == ["Length", "MaxLength"]


# =============================================================================
# Contact information
# =============================================================================


class TestContactInformation:
    def test_valid(self, us):
        result, contact = ContactInformation.try_create(
            us, "jane@example.com", "(555) 123-4567", website="https://example.com"
        )
        assert result.is_valid
        assert contact.secondary_phone is None
        assert str(contact) == (
            "Email: jane@example.com | Phone: (555) 123-4567 | Website: https://example.com"
        )

    def test_errors_carry_member_names(self, us):
        result, contact = ContactInformation.try_create(us, "bad", "12345", secondary_phone="12")
        assert contact is None
        members = {e.member_name for e in result.errors}
        assert members == {"Email", "PrimaryPhone", "SecondaryPhone"}

    def test_blank_optional_parts_ignored(self, uk):
        result, contact = ContactInformation.try_create(uk, "a@b.co", "07911 123456", " ", "")
        assert result.is_valid
        assert contact.website is None


# =============================================================================
# Banking details
# =============================================================================


class TestBankingDetails:
    def test_us(self, us):
        result, details = BankingDetails.try_create(us, "123456789", routing_number="021000021")
        assert result.is_valid
        assert not details.uses_iban
        assert details.masked_account_number == "*****6789"
        assert "Routing: 0210-0002-1" in str(details)
        assert not details.supports_international_transfers

    def test_us_requires_routing(self, us):
        result, details = BankingDetails.try_create(us, "123456789")
        assert details is None
        assert result.codes == ["Required"]
        assert result.errors[0].member_name == "RoutingNumber"

    def test_uk(self, uk):
        result, details = BankingDetails.try_create(uk, "12345678", sort_code="12-34-56")
        assert result.is_valid
        assert "Sort Code: 12-34-56" in str(details)

    def test_uk_rejects_routing_number(self, uk):
        result, _ = BankingDetails.try_create(uk, "12345678", routing_number="021000021")
        assert result.codes == ["Required", "NotApplicable"]
        assert [e.member_name for e in result.errors] == ["SortCode", "RoutingNumber"]

    def test_international(self):
        result, details = BankingDetails.try_create(CountryCode.GERMANY, DE_IBAN, "DEUTDEFF")
        assert result.is_valid
        assert details.uses_iban
        assert details.supports_international_transfers
        assert str(details).startswith("SWIFT: DEUTDEFF")

    def test_missing_account_reported_alone(self, us):
        result, _ = BankingDetails.try_create(us, "  ", routing_number="bad")
        assert result.codes == ["Required"]
        assert result.errors[0].member_name == "AccountNumber"

    def test_country_requirements(self):
        routing = RoutingNumber.create("021000021")
        result = check_country_requirements(CountryCode.FRANCE, routing, None)
        assert result.codes == ["NotApplicable"]
        assert check_country_requirements(CountryCode.UNITED_STATES, routing, None).is_valid


class TestBankingDetailsBuilder:
    def test_us_banking(self):
        result, details = BankingDetailsBuilder().with_us_banking("021000021", "123456789").build()
        assert result.is_valid
        assert details.country is CountryCode.UNITED_STATES

    def test_uk_banking(self):
        result, details = BankingDetailsBuilder().with_uk_banking("123456", "12345678").build()
        assert result.is_valid
        assert details.sort_code.to_formatted_string() == "12-34-56"

    def test_country_detected_from_iban(self):
        result, details = BankingDetailsBuilder().with_international_banking(DE_IBAN, "DEUTDEFF").build()
        assert result.is_valid
        assert details.country is CountryCode.GERMANY

    def test_country_required_for_bban(self):
        result, _ = BankingDetailsBuilder().with_account_number("12345678").build()
        assert result.codes == ["Required"]
        assert result.errors[0].member_name == "Country"

    def test_account_required(self, uk):
        result, _ = BankingDetailsBuilder().with_country(uk).build()
        assert result.errors[0].member_name == "AccountNumber"


# =============================================================================
# Credit card details
# =============================================================================


class TestCreditCardDetails:
    def test_valid(self):
        result, card = CreditCardDetails.try_create(VISA, "123", 12, 2099)
        assert result.is_valid
        assert card.get_masked_card_number() == "************1111"
        assert not card.is_expired()
        assert str(card) == "Card: ************1111, Expires: 12/99, CVV: ***"

    def test_missing_expiration(self):
        result, card = CreditCardDetails.try_create(VISA, "123", None, 2099)
        assert card is None
        assert result.codes == ["Required"]
        assert result.errors[0].member_name == "Expiration"

    def test_errors_merged(self):
        result, _ = CreditCardDetails.try_create("4111111111111112", "", 13, 2099)
        assert result.codes == ["InvalidChecksum", "Required", "InvalidMonth"]


class TestCreditCardBuilder:
    def test_string_expiration(self):
        result, card = (
            CreditCardBuilder()
            .with_card_number(VISA)
            .with_security_code(123)
            .with_expiration("12/99")
            .build()
        )
        assert result.is_valid
        assert card.expiration.year == 2099
        assert card.security_number.value == "123"

    def test_date_expiration(self):
        _, card = (
            CreditCardBuilder()
            .with_card_number(VISA)
            .with_security_code("1234")
            .with_expiration(date(2099, 3, 1))
            .build()
        )
        assert card.expiration.month == 3

    def test_month_and_year(self):
        _, card = CreditCardBuilder().with_card_number(VISA).with_security_code("123").with_expiration(
            6, 2099
        ).build()
        assert str(card.expiration) == "06/99"

    @pytest.mark.parametrize("expiration", ["garbage", "12/ab", "12"])
    def test_unparsable_string_is_missing(self, expiration):
        result, _ = (
            CreditCardBuilder()
            .with_card_number(VISA)
            .with_security_code("123")
            .with_expiration(expiration)
            .build()
        )
        assert result.codes == ["Required"]
