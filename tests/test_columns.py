"""Tests for bulk column validation with polars."""

from __future__ import annotations

import polars as pl
import pytest

from validated_primitives import EmailAddress
from validated_primitives.columns import (
    NULL_ISSUE_TYPE,
    UNKNOWN_ISSUE_TYPE,
    ColumnIssue,
    PrimitiveColumnValidator,
    validate_column,
)
from validated_primitives.types import CountryCode, Severity


@pytest.fixture
def routing_lf():
    return pl.LazyFrame({"aba": ["021000021", "021000020", "021000020", None]})


class TestPrimitiveColumnValidator:
    def test_failures_grouped_by_code(self, routing_lf):
        issues = validate_column(routing_lf, "aba", "routing")

        assert len(issues) == 1
        issue = issues[0]
        assert issue.issue_type == "InvalidChecksum"
        assert issue.count == 2
        assert issue.column == "aba"
        assert issue.primitive == "routing"
        assert issue.severity == Severity.HIGH
        assert issue.details.startswith("2 of 4 values (50.00%): ")
        # Distinct values are sampled once.
        assert issue.sample_values == ["021000020"]

    def test_nulls_allowed_by_default(self, routing_lf):
        issues = validate_column(routing_lf, "aba", "routing")
        assert NULL_ISSUE_TYPE not in [i.issue_type for i in issues]

    def test_nulls_reported(self, routing_lf):
        issues = validate_column(routing_lf, "aba", "routing", allow_null=False)
        null_issue = issues[-1]
        assert null_issue.issue_type == NULL_ISSUE_TYPE
        assert null_issue.count == 1
        assert null_issue.details == "1 of 4 values (25.00%) are null"

    def test_dataframe_accepted(self):
        df = pl.DataFrame({"aba": ["021000021", "011000015"]})
        assert validate_column(df, "aba", "routing") == []

    def test_empty_column(self):
        lf = pl.LazyFrame({"aba": pl.Series([], dtype=pl.Utf8)})
        assert validate_column(lf, "aba", "routing") == []

    def test_factory_kwargs(self):
        lf = pl.LazyFrame({"postcode": ["SW1A 1AA", "12345"]})
        validator = PrimitiveColumnValidator(
            "postcode", "postal_code", country_code=CountryCode.UNITED_KINGDOM
        )
        issues = validator.validate(lf)
        assert [(i.issue_type, i.count) for i in issues] == [("InvalidCountryPostalCodeFormat", 1)]

    def test_money_amounts(self):
        lf = pl.LazyFrame({"price": ["1.50", "-2", "abc", "1.999"]})
        issues = validate_column(lf, "price", "money", currency_code="USD")
        assert [i.issue_type for i in issues] == ["NonNegative", "InvalidNumber", "DecimalPlaces"]
        assert all(i.severity == Severity.HIGH for i in issues)

    def test_wrong_type_reported_as_invalid(self):
        lf = pl.LazyFrame({"cents": ["12", "34"]})
        issues = validate_column(lf, "cents", "small_unit_money", country_code=CountryCode.UNITED_STATES)
        assert [(i.issue_type, i.count) for i in issues] == [(UNKNOWN_ISSUE_TYPE, 2)]

    def test_class_instead_of_name(self):
        lf = pl.LazyFrame({"email": ["a@example.com", "bad1", "bad2", "bad3"]})
        validator = PrimitiveColumnValidator("email", EmailAddress, sample_size=1)
        issues = {i.issue_type: i for i in validator.validate(lf)}
        assert issues["EmailFormat"].count == 3
        assert issues["EmailFormat"].sample_values == ["bad1"]
        assert issues["EmailFormat"].severity == Severity.CRITICAL

    def test_check_value(self):
        validator = PrimitiveColumnValidator("aba", "routing")
        assert validator.check_value("021000021") == []
        assert [code for code, _ in validator.check_value("021000020")] == ["InvalidChecksum"]

    @pytest.mark.parametrize(
        "ratio, expected",
        [
            (0.6, Severity.CRITICAL),
            (0.5, Severity.HIGH),
            (0.1, Severity.MEDIUM),
            (0.05, Severity.LOW),
        ],
    )
    def test_severity(self, ratio, expected):
        validator = PrimitiveColumnValidator("aba", "routing")
        assert validator._calculate_severity(ratio) == expected

    def test_custom_thresholds(self, routing_lf):
        issues = validate_column(routing_lf, "aba", "routing", severity_thresholds=(0.9, 0.8, 0.7))
        assert issues[0].severity == Severity.LOW

    def test_negative_sample_size(self):
        with pytest.raises(ValueError, match="sample_size"):
            PrimitiveColumnValidator("aba", "routing", sample_size=-1)

    def test_unknown_primitive(self):
        with pytest.raises(ValueError, match="Unknown value object"):
            PrimitiveColumnValidator("x", "no_such_type")


class TestColumnIssue:
    def test_to_dict(self):
        issue = ColumnIssue(
            column="aba",
            issue_type="InvalidChecksum",
            count=2,
            severity=Severity.HIGH,
            details="2 of 4",
            primitive="routing",
            sample_values=["021000020"],
        )
        assert issue.to_dict() == {
            "column": "aba",
            "issue_type": "InvalidChecksum",
            "count": 2,
            "severity": "high",
            "details": "2 of 4",
            "primitive": "routing",
            "sample_values": ["021000020"],
        }

    def test_to_dict_omits_empty_extras(self):
        issue = ColumnIssue("aba", NULL_ISSUE_TYPE, 1, Severity.LOW)
        assert set(issue.to_dict()) == {"column", "issue_type", "count", "severity", "details"}

    def test_severity_ordering(self):
        assert Severity.LOW < Severity.MEDIUM < Severity.HIGH < Severity.CRITICAL
        assert max([Severity.MEDIUM, Severity.CRITICAL, Severity.LOW]) == Severity.CRITICAL
