"""Tests for the behaviour every registered value object shares."""

from __future__ import annotations

from datetime import date

import pytest

from validated_primitives.ranges import DateRange
from validated_primitives.types import CountryCode
from validated_primitives.validators.mac_address import normalize_mac
from validated_primitives.validators.tracking_number import normalize_tracking_number
from validated_primitives.value_objects.banking import BankAccountNumber
from validated_primitives.value_objects.registry import registry

UK = CountryCode.UNITED_KINGDOM
US = CountryCode.UNITED_STATES
DE_IBAN = "DE89 3704 0044 0532 0130 00"

# name -> (leading positional arguments, trailing keyword arguments)
FACTORY_ARGS: dict[str, tuple[tuple, dict]] = {
    "bank_account": ((UK,), {}),
    "driving_license": ((UK,), {}),
    "money": (("USD",), {}),
    "passport": ((UK,), {}),
    "postal_code": ((UK,), {}),
    "small_unit_money": ((US,), {}),
    "sort_code": ((UK,), {}),
    "between_dates": ((), {"date_range": DateRange(date(2000, 1, 1), date(2030, 12, 31))}),
}

LONG_TEXT = "x" * 300

# name -> (valid input, other inputs)
SAMPLES: dict[str, tuple[object, list[object]]] = {
    "address_line": ("1 Main St", [LONG_TEXT]),
    "bank_account": ("12345678", ["", "1234*5678", LONG_TEXT]),
    "barcode": ("4006381333937", ["", "4006381333938", LONG_TEXT]),
    "between_dates": ("2024-01-10", ["", "not a date", "1999-12-31"]),
    "city": ("London", ["", LONG_TEXT]),
    "credit_card": ("4111 1111 1111 1111", ["", "4111111111111112", LONG_TEXT]),
    "credit_card_security_number": ("123", ["", "12", "12a4"]),
    "date_of_birth": ("1990-05-17", ["", "not a date", "2999-01-01"]),
    "driving_license": ("MORGA753116SM9IJ", ["", "#%&", LONG_TEXT]),
    "email": ("user@example.com", ["", "user@localhost", LONG_TEXT]),
    "future_date": ("2999-01-01", ["", "not a date", "1990-05-17"]),
    "human_name": ("Ada", ["", "R2D2", LONG_TEXT]),
    "iban": ("GB82 WEST 1234 5698 7654 32", ["", "GB83 WEST 1234 5698 7654 32", LONG_TEXT]),
    "ip_address": ("192.168.1.1", ["", "192.168.001.001", LONG_TEXT]),
    "latitude": ("40.7128", ["", "abc", "NaN", float("inf"), 91]),
    "longitude": (-74.006, ["", "abc", float("-inf"), -180.5]),
    "mac_address": ("00:1A:2B:3C:4D:5E", ["", "FF-FF-FF-FF-FF-FF", LONG_TEXT]),
    "money": ("12.50", ["", "abc", "NaN", float("inf"), -1, "1.234"]),
    "passport": ("123456789", ["", "#%&", LONG_TEXT]),
    "percentage": ("12", ["", "abc", "NaN", 101]),
    "phone": ("(555) 123-4567", ["", "call me", LONG_TEXT]),
    "postal_code": ("SW1A 1AA", ["", "12345", LONG_TEXT]),
    "routing": ("021000021", ["", "021000020", LONG_TEXT]),
    "small_unit_money": (12345, [0, -1]),
    "sort_code": ("12-34-56", ["", "12#456", LONG_TEXT]),
    "ssn": ("123-45-6789", ["", "000-00-0000", LONG_TEXT]),
    "state_province": ("California", ["", LONG_TEXT]),
    "swift": ("DEUTDEFF", ["", "DEUTDEF0", LONG_TEXT]),
    "tracking_number": ("1Z999AA10123456784", ["", "ABC", LONG_TEXT]),
    "url": ("https://example.com", ["", "ftp://example.com", LONG_TEXT]),
}


def build(name: str, value: object):
    if name == "credit_card_expiration":
        return registry.get(name).try_create(*value)
    prefix, kwargs = FACTORY_ARGS.get(name, ((), {}))
    return registry.get(name).try_create(*prefix, value, **kwargs)


EXPIRATION_SAMPLES = ((12, 2099), [(0, 2099), (13, 2030), (6, -1), (1, 2000)])
ALL_SAMPLES = {**SAMPLES, "credit_card_expiration": EXPIRATION_SAMPLES}


class TestTryCreateContract:
    """``try_create`` returns an instance exactly when the result is valid."""

    def test_every_registered_type_has_samples(self):
        assert set(ALL_SAMPLES) == set(registry.list_all())

    @pytest.mark.parametrize("name", sorted(ALL_SAMPLES))
    def test_valid_sample(self, name):
        result, instance = build(name, ALL_SAMPLES[name][0])
        assert result.is_valid, result.to_single_message()
        assert instance is not None

    @pytest.mark.parametrize(
        "name, value",
        [(name, value) for name, (_, others) in sorted(ALL_SAMPLES.items()) for value in others],
    )
    def test_instance_present_only_when_valid(self, name, value):
        result, instance = build(name, value)
        assert result.is_valid == (instance is not None)

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_address_line_is_absent(self, value):
        result, line = build("address_line", value)
        assert result.is_valid
        assert line is None


class TestNormalizationIdempotence:
    def test_bank_account(self):
        once = BankAccountNumber.create(CountryCode.GERMANY, DE_IBAN.lower()).to_normalized_string()
        twice = BankAccountNumber.create(CountryCode.GERMANY, once).to_normalized_string()
        assert once == twice == "DE89370400440532013000"

    def test_bank_account_domestic(self):
        once = BankAccountNumber.create(UK, "1234 5678").to_normalized_string()
        assert BankAccountNumber.create(UK, once).to_normalized_string() == once

    @pytest.mark.parametrize(
        "value", ["00-1a-2b-3c-4d-5e", "001A.2B3C.4D5E", "001a2b3c4d5e", " 00:1A:2B:3C:4D:5E ", "abc "]
    )
    def test_mac(self, value):
        once = normalize_mac(value)
        assert normalize_mac(once) == once

    def test_mac_canonical_form(self):
        assert normalize_mac("001a.2b3c.4d5e") == "00:1A:2B:3C:4D:5E"

    @pytest.mark.parametrize("value", ["1z 999-aa1-0123456784", "rr 123 456 789 gb", "TBA123456789012"])
    def test_tracking_number(self, value):
        once = normalize_tracking_number(value)
        assert normalize_tracking_number(once) == once
        assert once == once.upper()
        assert " " not in once and "-" not in once
