"""MAC address (IEEE 802) validators.

Accepted notations: ``AA:BB:CC:DD:EE:FF``, ``AA-BB-CC-DD-EE-FF``,
``AABB.CCDD.EEFF`` (Cisco) and ``AABBCCDDEEFF``.
"""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import (
    ValueValidator,
    compile_pattern,
    is_blank,
    matches,
)

MAC_PATTERNS = (
    compile_pattern(r"^([0-9A-Fa-f]{2}:){5}[0-9A-Fa-f]{2}$"),
    compile_pattern(r"^([0-9A-Fa-f]{2}-){5}[0-9A-Fa-f]{2}$"),
    compile_pattern(r"^([0-9A-Fa-f]{4}\.){2}[0-9A-Fa-f]{4}$"),
    compile_pattern(r"^[0-9A-Fa-f]{12}$"),
)

BROADCAST = "FFFFFFFFFFFF"
ALL_ZEROS = "000000000000"


def strip_mac(value: str) -> str:
    """Drop ``:``, ``-`` and ``.`` and uppercase."""
    return value.replace(":", "").replace("-", "").replace(".", "").upper()


def normalize_mac(value: str | None) -> str:
    """Canonical colon form, or the trimmed input when it is not 12 hex digits long."""
    if is_blank(value):
        return ""
    stripped = strip_mac(value)
    if len(stripped) != 12:
        return value.strip()
    return ":".join(stripped[i:i + 2] for i in range(0, 12, 2))


def valid_format(field_name: str = "MacAddress") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.failure("MAC address cannot be empty.", field_name, "Required")
        trimmed = value.strip()
        if any(matches(pattern, trimmed) for pattern in MAC_PATTERNS):
            return ValidationResult.success()
        return ValidationResult.failure(
            "Invalid MAC address format. Expected formats: AA:BB:CC:DD:EE:FF, "
            "AA-BB-CC-DD-EE-FF, AABB.CCDD.EEFF, or AABBCCDDEEFF.",
            field_name,
            "InvalidFormat",
        )

    return validate


def not_broadcast(field_name: str = "MacAddress") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if not is_blank(value) and strip_mac(value) == BROADCAST:
            return ValidationResult.failure(
                "MAC address cannot be the broadcast address (FF:FF:FF:FF:FF:FF).",
                field_name,
                "BroadcastAddress",
            )
        return ValidationResult.success()

    return validate


def not_multicast(field_name: str = "MacAddress") -> ValueValidator[str]:
    """Reject group addresses (least significant bit of the first octet set).

    The broadcast address is left to ``not_broadcast``.
    """

    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.success()
        stripped = strip_mac(value)
        if len(stripped) != 12 or stripped == BROADCAST:
            return ValidationResult.success()
        try:
            first_octet = int(stripped[:2], 16)
        except ValueError:
            return ValidationResult.success()
        if first_octet & 0x01:
            return ValidationResult.failure(
                "MAC address cannot be a multicast address.", field_name, "MulticastAddress"
            )
        return ValidationResult.success()

    return validate


def not_all_zeros(field_name: str = "MacAddress") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if not is_blank(value) and strip_mac(value) == ALL_ZEROS:
            return ValidationResult.failure(
                "MAC address cannot be all zeros (00:00:00:00:00:00).", field_name, "AllZeros"
            )
        return ValidationResult.success()

    return validate
