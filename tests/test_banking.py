"""Tests for banking validators and value objects."""

import pytest

from validated_primitives.exceptions import ValueObjectValidationError
from validated_primitives.types import CountryCode
from validated_primitives.validators import bank_account, iban, routing, sort_code, swift
from validated_primitives.validators.iban import BankAccountNumberType, detect_account_type
from validated_primitives.value_objects.banking import (
    BankAccountNumber,
    IbanNumber,
    RoutingNumber,
    SortCode,
    SwiftCode,
)

GB_IBAN = "GB82 WEST 1234 5698 7654 32"
DE_IBAN = "DE89 3704 0044 0532 0130 00"


# =============================================================================
# Bank account numbers
# =============================================================================


class TestBankAccountNumber:
    """Tests for BankAccountNumber."""

    def test_uk_national_account(self):
        result, account = BankAccountNumber.try_create(CountryCode.UNITED_KINGDOM, "12345678")
        assert result.is_valid
        assert not account.is_iban
        assert account.get_iban_country_code() is None
        assert account.get_country_name() == "United Kingdom"

    def test_uk_wrong_length(self):
        result, account = BankAccountNumber.try_create(CountryCode.UNITED_KINGDOM, "1234567")
        assert account is None
        assert result.codes == ["InvalidCountryAccountNumberFormat"]

    def test_german_iban(self):
        result, account = BankAccountNumber.try_create(CountryCode.GERMANY, DE_IBAN)
        assert result.is_valid
        assert account.is_iban
        assert account.get_iban_country_code() == "DE"
        assert account.get_iban_check_digits() == "89"
        assert account.to_formatted_string() == DE_IBAN

    def test_german_account_with_wrong_prefix(self):
        result, _ = BankAccountNumber.try_create(CountryCode.GERMANY, "FR1420041010050500013M02606")
        assert result.errors[0].message == "IBAN must start with DE for this country"

    def test_german_iban_bad_checksum(self):
        result, _ = BankAccountNumber.try_create(CountryCode.GERMANY, "DE88370400440532013000")
        assert result.errors[0].message == "IBAN checksum is invalid"

    def test_invalid_characters(self):
        result, _ = BankAccountNumber.try_create(CountryCode.ALL, "1234*5678")
        assert result.codes == ["InvalidFormat"]

    def test_blank_is_required(self):
        result, _ = BankAccountNumber.try_create(CountryCode.UNITED_KINGDOM, "   ")
        assert result.codes == ["Required"]
        assert result.errors[0].message == "Bank account number must be provided"

    def test_unlisted_country_passes_format(self):
        result, _ = BankAccountNumber.try_create(CountryCode.MEXICO, "ABC123")
        assert result.is_valid

    def test_masked(self):
        account = BankAccountNumber.create(CountryCode.UNITED_KINGDOM, "12345678")
        assert account.masked() == "****5678"

    def test_equality_ignores_formatting(self):
        a = BankAccountNumber.create(CountryCode.GERMANY, DE_IBAN)
        b = BankAccountNumber.create(CountryCode.GERMANY, DE_IBAN.replace(" ", "").lower())
        assert a == b
        assert hash(a) == hash(b)

    def test_country_format_validator_directly(self):
        validate = bank_account.country_format("Account", CountryCode.UNITED_STATES)
        assert validate("123").codes == ["InvalidCountryAccountNumberFormat"]
        assert validate("1234").is_valid
        assert validate(None).is_valid


# =============================================================================
# IBAN
# =============================================================================


class TestAccountTypeDetection:
    """Tests for detect_account_type."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (GB_IBAN, BankAccountNumberType.IBAN),
            ("12345678", BankAccountNumberType.BBAN),
            ("1234ABCD", BankAccountNumberType.BBAN),
            ("XX12ABCD", BankAccountNumberType.UNKNOWN),
            ("", BankAccountNumberType.UNKNOWN),
            (None, BankAccountNumberType.UNKNOWN),
        ],
    )
    def test_detection(self, value, expected):
        assert detect_account_type(value) is expected


class TestIbanNumber:
    """Tests for IbanNumber."""

    def test_german_iban(self):
        result, account = IbanNumber.try_create(DE_IBAN)
        assert result.is_valid
        assert account.is_iban
        assert account.country_code is CountryCode.GERMANY
        assert account.get_iban_country_code() == "DE"
        assert account.get_bban_part() == "370400440532013000"

    def test_equality_ignores_formatting(self):
        assert IbanNumber.create(GB_IBAN) == IbanNumber.create("gb82west12345698765432")

    def test_normalization_is_idempotent(self):
        once = IbanNumber.create(GB_IBAN).to_normalized_string()
        twice = IbanNumber.create(once).to_normalized_string()
        assert once == twice == "GB82WEST12345698765432"

    def test_formatted_and_masked(self):
        account = IbanNumber.create(GB_IBAN)
        assert account.to_formatted_string() == GB_IBAN
        assert account.masked().endswith("5432")
        assert account.masked().startswith("*")
        assert str(account) == "GB82WEST12345698765432"

    def test_bad_checksum(self):
        result, account = IbanNumber.try_create("GB83 WEST 1234 5698 7654 32")
        assert account is None
        assert result.codes == ["InvalidIbanChecksum"]

    def test_wrong_length(self):
        result, _ = IbanNumber.try_create("DE8937040044053201300")
        assert "InvalidIbanLength" in result.codes

    def test_invalid_characters(self):
        result, _ = IbanNumber.try_create("GB82*WEST")
        assert "InvalidFormat" in result.codes

    def test_bban_with_country(self):
        result, account = IbanNumber.try_create("12345678", CountryCode.UNITED_KINGDOM)
        assert result.is_valid
        assert account.is_bban
        assert account.country_code is CountryCode.UNITED_KINGDOM

    def test_bban_wrong_national_format(self):
        result, _ = IbanNumber.try_create("1234567", CountryCode.UNITED_KINGDOM)
        assert result.codes == ["InvalidBbanFormat"]

    def test_bban_too_short(self):
        result, _ = IbanNumber.try_create("123")
        assert result.codes == ["InvalidBbanLength"]

    def test_iban_of_country_outside_enum(self):
        result, account = IbanNumber.try_create("EE38 2200 2210 2014 5685")
        assert result.is_valid
        assert account.country_code is None

    def test_create_raises(self):
        with pytest.raises(ValueObjectValidationError) as exc_info:
            IbanNumber.create("GB83 WEST 1234 5698 7654 32")
        assert exc_info.value.value_object_type == "IbanNumber"
        assert exc_info.value.validation_result.codes == ["InvalidIbanChecksum"]

    def test_unknown_country_structure(self):
        validate = iban.valid_iban_format("Iban")
        assert validate("ZZ12ABCD").codes == ["InvalidIbanCountryCode"]
        assert validate("1234").codes == ["InvalidIbanStructure"]


# =============================================================================
# SWIFT / BIC
# =============================================================================


class TestSwiftCode:
    """Tests for SwiftCode."""

    def test_bic8(self):
        code = SwiftCode.create("deutdeff")
        assert code.is_bic8
        assert code.institution_code == "DEUT"
        assert code.bank_code == "DEUT"
        assert code.country_code == "DE"
        assert code.location_code == "FF"
        assert code.branch_code == "XXX"
        assert code.is_primary_office
        assert code.to_full_format() == "DEUTDEFFXXX"
        assert str(code) == "DEUTDEFF"

    def test_bic11(self):
        code = SwiftCode.create("DEUTDEFF500")
        assert code.is_bic11
        assert code.branch_code == "500"
        assert not code.is_primary_office

    def test_bic8_equals_primary_office_bic11(self):
        assert SwiftCode.create("DEUTDEFF") == SwiftCode.create("DEUTDEFFXXX")

    def test_wrong_length(self):
        result, _ = SwiftCode.try_create("DEUTDEF")
        assert result.codes == ["InvalidLength"]

    def test_bad_structure(self):
        result, _ = SwiftCode.try_create("DEU1DEFF")
        assert "InvalidStructure" in result.codes

    def test_numeric_country(self):
        result, _ = SwiftCode.try_create("DEUT12FF")
        assert "InvalidCountryCode" in result.codes

    def test_test_code_rejected_by_default(self):
        result, _ = SwiftCode.try_create("DEUTDEF0")
        assert result.codes == ["TestCode"]

    def test_test_code_allowed(self):
        result, code = SwiftCode.try_create("DEUTDEF0", allow_test_codes=True)
        assert result.is_valid
        assert code.is_test_code

    def test_invalid_characters(self):
        validate = swift.valid_format()
        assert validate("DEUT-DEFF").codes == ["InvalidFormat"]


# =============================================================================
# Routing numbers
# =============================================================================


class TestRoutingNumber:
    """Tests for RoutingNumber."""

    def test_valid(self):
        result, number = RoutingNumber.try_create("021000021")
        assert result.is_valid
        assert number.to_formatted_string() == "0210-0002-1"
        assert number.federal_reserve_symbol == "0210"
        assert number.institution_identifier == "0002"
        assert number.check_digit == "1"
        assert number.federal_reserve_district == 2

    def test_bad_checksum(self):
        result, number = RoutingNumber.try_create("021000020")
        assert number is None
        assert result.codes == ["InvalidChecksum"]

    def test_separators_allowed(self):
        assert RoutingNumber.create("0210-0002-1") == RoutingNumber.create("021000021")

    def test_wrong_length(self):
        result, _ = RoutingNumber.try_create("02100002")
        assert result.codes == ["InvalidLength"]

    def test_letters(self):
        result, _ = RoutingNumber.try_create("02100002A")
        assert result.codes == ["InvalidFormat", "InvalidCharacters"]

    def test_invalid_federal_reserve_symbol(self):
        validate = routing.valid_federal_reserve_symbol()
        assert validate("991000021").codes == ["InvalidFederalReserveSymbol"]
        assert validate("801000021").is_valid

    def test_blank(self):
        result, _ = RoutingNumber.try_create("")
        assert result.codes == ["Required"]


# =============================================================================
# Sort codes
# =============================================================================


class TestSortCode:
    """Tests for SortCode."""

    @pytest.mark.parametrize("value", ["12-34-56", "123456", "12 34 56"])
    def test_valid_uk(self, value):
        result, code = SortCode.try_create(CountryCode.UNITED_KINGDOM, value)
        assert result.is_valid
        assert code.to_formatted_string() == "12-34-56"

    def test_badly_dashed(self):
        result, _ = SortCode.try_create(CountryCode.UNITED_KINGDOM, "1-234-56")
        assert result.codes == ["InvalidCountrySortCodeFormat"]

    def test_too_short(self):
        result, _ = SortCode.try_create(CountryCode.IRELAND, "12345")
        assert result.codes == ["InvalidCountrySortCodeFormat"]

    def test_letters(self):
        result, _ = SortCode.try_create(CountryCode.UNITED_KINGDOM, "12AB56")
        assert "InvalidFormat" in result.codes

    def test_other_country_skips_country_rules(self):
        result, code = SortCode.try_create(CountryCode.GERMANY, "1234")
        assert result.is_valid
        assert code.to_formatted_string() == "1234"

    def test_equality_on_digits_and_country(self):
        a = SortCode.create(CountryCode.UNITED_KINGDOM, "12-34-56")
        b = SortCode.create(CountryCode.UNITED_KINGDOM, "123456")
        c = SortCode.create(CountryCode.IRELAND, "123456")
        assert a == b
        assert a != c

    def test_country_format_message(self):
        validate = sort_code.country_format("SortCode", CountryCode.UNITED_KINGDOM)
        assert "UnitedKingdom" in validate("1234567").errors[0].message
