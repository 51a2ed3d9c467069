"""Bulk validation of polars columns with value objects.

Every non-null value of a column is passed through a value object's
``try_create``. Failures are grouped by error code, so a column with a
thousand badly formatted IBANs yields one ``InvalidFormat`` issue with a
count of 1000 rather than a thousand results.

Example:
    >>> lf = pl.LazyFrame({"aba": ["021000021", "021000020", "021000020"]})
    >>> issues = validate_column(lf, "aba", "routing")
    >>> [(i.issue_type, i.count) for i in issues]
    [('InvalidChecksum', 2)]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import polars as pl

from validated_primitives.types import Severity
from validated_primitives.validators.base import _get_logger
from validated_primitives.value_objects.base import ValidatedValueObject
from validated_primitives.value_objects.registry import registry

logger = _get_logger("columns")

NULL_ISSUE_TYPE = "Null"
UNKNOWN_ISSUE_TYPE = "Invalid"

# Keyword under which each primitive's try_create takes the raw value.
_VALUE_ARGUMENT: dict[str, str] = {
    "money": "amount",
}


# ============================================================================
# Issue
# ============================================================================


@dataclass
class ColumnIssue:
    """All failures sharing one error code within a column."""

    column: str
    issue_type: str
    count: int
    severity: Severity
    details: str | None = None
    primitive: str | None = None
    sample_values: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "column": self.column,
            "issue_type": self.issue_type,
            "count": self.count,
            "severity": self.severity.value,
            "details": self.details,
        }
        if self.primitive is not None:
            result["primitive"] = self.primitive
        if self.sample_values:
            result["sample_values"] = self.sample_values
        return result


# ============================================================================
# Validator
# ============================================================================


class PrimitiveColumnValidator:
    """Validate a column of raw values against one value object type.

    Args:
        column: Column to validate.
        primitive: Registry name (``"iban"``) or a value object class.
        allow_null: When False, null values are reported as a ``Null`` issue.
        sample_size: Maximum number of sample values kept per issue.
        severity_thresholds: Failing ratios above which an issue is critical,
            high and medium respectively.
        **factory_kwargs: Extra keyword arguments for ``try_create``, e.g.
            ``country_code=CountryCode.UNITED_KINGDOM``.

    Example:
        validator = PrimitiveColumnValidator(
            "postcode", "postal_code", country_code=CountryCode.UNITED_KINGDOM
        )
        issues = validator.validate(lf)
    """

    def __init__(
        self,
        column: str,
        primitive: str | type[ValidatedValueObject[Any]],
        *,
        allow_null: bool = True,
        sample_size: int = 5,
        severity_thresholds: tuple[float, float, float] = (0.5, 0.2, 0.05),
        **factory_kwargs: Any,
    ) -> None:
        if sample_size < 0:
            raise ValueError(f"sample_size must be >= 0, got {sample_size}")
        self.column = column
        self.primitive = registry.get(primitive) if isinstance(primitive, str) else primitive
        self.allow_null = allow_null
        self.sample_size = sample_size
        self.severity_thresholds = severity_thresholds
        self.factory_kwargs = factory_kwargs
        self._value_argument = _VALUE_ARGUMENT.get(self.primitive.name, "value")

    def _calculate_severity(self, ratio: float) -> Severity:
        """Calculate severity based on failing ratio and thresholds."""
        critical_th, high_th, medium_th = self.severity_thresholds
        if ratio > critical_th:
            return Severity.CRITICAL
        elif ratio > high_th:
            return Severity.HIGH
        elif ratio > medium_th:
            return Severity.MEDIUM
        return Severity.LOW

    def check_value(self, value: Any) -> list[tuple[str, str]]:
        """Validate one raw value.

        Returns:
            ``(code, message)`` for every error, empty when the value is valid.
            A value of a type the factory rejects outright is reported
            under ``Invalid``.
        """
        kwargs = {self._value_argument: value, **self.factory_kwargs}
        try:
            result, _ = self.primitive.try_create(**kwargs)
        except (TypeError, ValueError) as e:
            return [(UNKNOWN_ISSUE_TYPE, str(e))]
        return [(error.code or UNKNOWN_ISSUE_TYPE, error.message) for error in result.errors]

    def validate(self, lf: pl.LazyFrame | pl.DataFrame) -> list[ColumnIssue]:
        """Validate the column.

        Distinct values are validated once and weighted by how often they
        occur.

        Args:
            lf: Input LazyFrame (a DataFrame is accepted too)

        Returns:
            One issue per distinct error code, in first-seen order
        """
        df = lf.select(pl.col(self.column)).collect() if isinstance(lf, pl.LazyFrame) else lf.select(self.column)
        total_rows = df.height
        if total_rows == 0:
            return []

        counts: dict[str, int] = {}
        messages: dict[str, str] = {}
        samples: dict[str, list[Any]] = {}

        distinct = (
            df.drop_nulls(self.column)
            .group_by(self.column, maintain_order=True)
            .agg(pl.len().alias("_occurrences"))
        )
        for value, occurrences in distinct.iter_rows():
            for code in self._record_failures(value, occurrences, counts, messages, samples):
                logger.debug(f"{self.column}: {value!r} failed with {code}")

        issues = [
            ColumnIssue(
                column=self.column,
                issue_type=code,
                count=count,
                severity=self._calculate_severity(count / total_rows),
                details=f"{count} of {total_rows} values ({count / total_rows:.2%}): {messages[code]}",
                primitive=self.primitive.name,
                sample_values=samples[code],
            )
            for code, count in counts.items()
        ]

        null_count = df.get_column(self.column).null_count()
        if not self.allow_null and null_count > 0:
            ratio = null_count / total_rows
            issues.append(
                ColumnIssue(
                    column=self.column,
                    issue_type=NULL_ISSUE_TYPE,
                    count=null_count,
                    severity=self._calculate_severity(ratio),
                    details=f"{null_count} of {total_rows} values ({ratio:.2%}) are null",
                    primitive=self.primitive.name,
                )
            )
        return issues

    def _record_failures(
        self,
        value: Any,
        occurrences: int,
        counts: dict[str, int],
        messages: dict[str, str],
        samples: dict[str, list[Any]],
    ) -> list[str]:
        codes: list[str] = []
        for code, message in self.check_value(value):
            # A value reporting the same code twice still counts once.
            if code in codes:
                continue
            codes.append(code)
            counts[code] = counts.get(code, 0) + occurrences
            messages.setdefault(code, message)
            code_samples = samples.setdefault(code, [])
            if len(code_samples) < self.sample_size:
                code_samples.append(value)
        return codes


def validate_column(
    lf: pl.LazyFrame | pl.DataFrame,
    column: str,
    primitive: str | type[ValidatedValueObject[Any]],
    **kwargs: Any,
) -> list[ColumnIssue]:
    """Validate ``column`` of ``lf`` against ``primitive``.

    Keyword arguments are split between :class:`PrimitiveColumnValidator`
    options and ``try_create`` arguments the same way the constructor does.
    """
    return PrimitiveColumnValidator(column, primitive, **kwargs).validate(lf)
