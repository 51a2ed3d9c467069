"""Tests for contact and network value objects."""

import ipaddress

import pytest

from validated_primitives.config import configure
from validated_primitives.types import CountryCode
from validated_primitives.validators import email, phone, url
from validated_primitives.value_objects.contact import EmailAddress, PhoneNumber, WebsiteUrl
from validated_primitives.value_objects.network import IpAddress, MacAddress


class TestEmailAddress:
    """Tests for EmailAddress."""

    @pytest.mark.parametrize(
        "value", ["user@example.com", "first.last+tag@sub.example.co.uk", "o'hara@example.ie"]
    )
    def test_valid(self, value):
        result, _ = EmailAddress.try_create(value)
        assert result.is_valid

    @pytest.mark.parametrize(
        "value", ["user@localhost", "user..dot@example.com", "@example.com", "user@-example.com", "user@example.c0m"]
    )
    def test_invalid(self, value):
        result, _ = EmailAddress.try_create(value)
        assert result.codes == ["EmailFormat"]
        assert result.errors[0].message == "Invalid email address format."

    def test_blank_reports_presence_and_format(self):
        result, _ = EmailAddress.try_create("")
        assert result.codes == ["NotNullOrWhitespace", "EmailFormat"]

    def test_too_long(self):
        result, _ = EmailAddress.try_create("a" * 250 + "@example.com")
        assert result.codes == ["MaxLength"]

    def test_validator_with_field_name(self):
        assert email.email_format("Contact")("bad").errors[0].member_name == "Contact"


class TestPhoneNumber:
    """Tests for PhoneNumber."""

    @pytest.mark.parametrize(
        "country, value",
        [
            (CountryCode.UNITED_STATES, "(555) 123-4567"),
            (CountryCode.UNITED_STATES, "+1 555-123-4567"),
            (CountryCode.UNITED_KINGDOM, "07911 123456"),
            (CountryCode.UNITED_KINGDOM, "+44 2079460958"),
            (CountryCode.GERMANY, "+49 30 12345678"),
            (CountryCode.INDIA, "98765 43210"),
        ],
    )
    def test_valid_for_country(self, country, value):
        result, number = PhoneNumber.try_create(value, country)
        assert result.is_valid
        assert number.country_code is country

    def test_invalid_for_country(self):
        result, _ = PhoneNumber.try_create("12345", CountryCode.UNITED_STATES)
        assert result.codes == ["InvalidCountryPhoneFormat"]
        assert result.errors[0].message == "PhoneNumber is not a valid phone number format for UnitedStates."

    def test_any_country_only_checks_characters(self):
        result, number = PhoneNumber.try_create("12 34")
        assert result.is_valid
        assert number.get_country_name() == "All Countries"

    def test_letters_rejected(self):
        result, _ = PhoneNumber.try_create("call me")
        assert result.codes == ["PhoneNumber"]

    def test_letters_rejected_with_country(self):
        result, _ = PhoneNumber.try_create("555-CALL", CountryCode.UNITED_STATES)
        assert result.codes == ["PhoneNumber", "InvalidPhoneNumberFormat", "InvalidCountryPhoneFormat"]

    def test_every_concrete_country_has_a_pattern(self):
        concrete = {c for c in CountryCode if not c.is_wildcard}
        assert concrete <= set(phone.PHONE_PATTERNS)


class TestWebsiteUrl:
    """Tests for WebsiteUrl."""

    @pytest.mark.parametrize("value", ["https://example.com", "http://example.com:8080/path?q=1#frag"])
    def test_valid(self, value):
        result, _ = WebsiteUrl.try_create(value)
        assert result.is_valid

    @pytest.mark.parametrize(
        "value", ["ftp://example.com", "http://", "example.com", "http://exa mple.com", "http://example.com:99999"]
    )
    def test_invalid(self, value):
        result, _ = WebsiteUrl.try_create(value)
        assert result.codes == ["WebUrl"]

    def test_blank(self):
        assert not url.is_web_url("")


class TestIpAddress:
    """Tests for IpAddress."""

    def test_ipv4(self):
        address = IpAddress.create("192.168.1.1")
        assert address.version == 4
        assert address.is_private
        assert not address.is_loopback
        assert address.to_ip_address() == ipaddress.IPv4Address("192.168.1.1")

    def test_ipv6(self):
        address = IpAddress.create("::1")
        assert address.version == 6
        assert address.is_loopback

    @pytest.mark.parametrize("value", ["256.1.1.1", "1.2.3", "not an ip", "fe80::1 ", ".::1", ""])
    def test_invalid(self, value):
        result, _ = IpAddress.try_create(value)
        assert result.codes == ["IpAddress"]

    def test_leading_zeros_rejected_by_default(self):
        result, _ = IpAddress.try_create("192.168.001.001")
        assert not result.is_valid

    def test_leading_zeros_allowed_when_not_strict(self):
        configure(strict_ip_v4=False)
        address = IpAddress.create("192.168.001.001")
        assert address.to_ip_address() == ipaddress.IPv4Address("192.168.1.1")
        assert str(address) == "192.168.001.001"


class TestMacAddress:
    """Tests for MacAddress."""

    @pytest.mark.parametrize("value", ["00:1a:2b:3c:4d:5e", "00-1A-2B-3C-4D-5E", "001A.2B3C.4D5E", "001A2B3C4D5E"])
    def test_notations_normalize(self, value):
        address = MacAddress.create(value)
        assert address.value == "00:1A:2B:3C:4D:5E"

    def test_formats(self):
        address = MacAddress.create("00:1A:2B:3C:4D:5E")
        assert address.to_hyphen_format() == "00-1A-2B-3C-4D-5E"
        assert address.to_dot_format() == "001A.2B3C.4D5E"
        assert address.to_continuous_format() == "001A2B3C4D5E"
        assert address.get_oui() == "00:1A:2B"
        assert address.get_nic() == "3C:4D:5E"
        assert address.is_unicast()
        assert address.is_universally_administered()

    def test_locally_administered(self):
        assert MacAddress.create("02:00:00:00:00:01").is_locally_administered()

    def test_broadcast(self):
        result, _ = MacAddress.try_create("FF-FF-FF-FF-FF-FF")
        assert result.codes == ["BroadcastAddress"]
        allowed, address = MacAddress.try_create("FF-FF-FF-FF-FF-FF", allow_broadcast=True)
        assert allowed.is_valid
        assert address.is_multicast()

    def test_multicast(self):
        result, _ = MacAddress.try_create("01:00:5E:00:00:01")
        assert result.codes == ["MulticastAddress"]
        allowed, _ = MacAddress.try_create("01:00:5E:00:00:01", allow_multicast=True)
        assert allowed.is_valid

    def test_all_zeros(self):
        result, _ = MacAddress.try_create("00:00:00:00:00:00")
        assert result.codes == ["AllZeros"]
        allowed, _ = MacAddress.try_create("00:00:00:00:00:00", allow_all_zeros=True)
        assert allowed.is_valid

    def test_invalid_format(self):
        result, _ = MacAddress.try_create("00:1A:2B:3C:4D")
        assert result.codes == ["InvalidFormat"]

    def test_equality_across_notations(self):
        assert MacAddress.create("001A2B3C4D5E") == MacAddress.create("00-1a-2b-3c-4d-5e")
