"""Product barcode validators (UPC-A, EAN-13, EAN-8, Code 39, Code 128)."""

from __future__ import annotations

from enum import Enum

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import (
    ValueValidator,
    compile_pattern,
    is_ascii_digits,
    is_blank,
    matches,
)
from validated_primitives.validators.checksum import is_gtin_checksum_valid


class BarcodeFormat(str, Enum):
    UNKNOWN = "Unknown"
    UPC_A = "UPC_A"
    EAN13 = "EAN13"
    EAN8 = "EAN8"
    CODE39 = "Code39"
    CODE128 = "Code128"


_CODE39 = compile_pattern(r"^\*[0-9A-Z\-\.\s\$\/\+\%]+\*$")

INVALID_BARCODE_MESSAGE = (
    "Invalid barcode format. Supported formats: UPC-A (12 digits), EAN-13 (13 digits), "
    "EAN-8 (8 digits), Code39 (alphanumeric with *), Code128 (alphanumeric)."
)


def normalize_barcode(value: str) -> str:
    """Remove spaces and hyphens."""
    return value.replace(" ", "").replace("-", "")


def is_valid_upc_a(code: str) -> bool:
    return len(code) == 12 and is_ascii_digits(code) and is_gtin_checksum_valid(code, 12)


def is_valid_ean13(code: str) -> bool:
    return len(code) == 13 and is_ascii_digits(code) and is_gtin_checksum_valid(code, 13)


def is_valid_ean8(code: str) -> bool:
    return len(code) == 8 and is_ascii_digits(code) and is_gtin_checksum_valid(code, 8)


def is_valid_code39(code: str) -> bool:
    return len(code) >= 3 and matches(_CODE39, code)


def is_valid_code128(code: str) -> bool:
    """2-48 printable ASCII characters, no ``*`` and not purely numeric."""
    if not 2 <= len(code) <= 48:
        return False
    if any(not 32 <= ord(c) <= 126 for c in code) or "*" in code:
        return False
    return not is_ascii_digits(code)


_CHECKS = (is_valid_upc_a, is_valid_ean13, is_valid_ean8, is_valid_code39, is_valid_code128)


def detect_barcode_format(value: str | None) -> BarcodeFormat:
    """Classify by shape only; checksums are not consulted."""
    if is_blank(value):
        return BarcodeFormat.UNKNOWN
    code = normalize_barcode(value.strip())
    if is_ascii_digits(code):
        return {
            12: BarcodeFormat.UPC_A,
            13: BarcodeFormat.EAN13,
            8: BarcodeFormat.EAN8,
        }.get(len(code), BarcodeFormat.CODE128)
    if code.startswith("*") and code.endswith("*"):
        return BarcodeFormat.CODE39
    return BarcodeFormat.CODE128


def valid_barcode(field_name: str = "Barcode") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.failure("Barcode cannot be empty.", field_name, "Barcode.Empty")
        code = normalize_barcode(value.strip())
        if any(check(code) for check in _CHECKS):
            return ValidationResult.success()
        return ValidationResult.failure(INVALID_BARCODE_MESSAGE, field_name, "Barcode.InvalidFormat")

    return validate
