"""IP address validators built on the standard ``ipaddress`` module."""

from __future__ import annotations

import ipaddress

from validated_primitives.config import get_config
from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import ValueValidator, is_ascii_digits, is_blank

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def _parse_lenient_ipv4(value: str) -> ipaddress.IPv4Address | None:
    """Dotted quad that may carry leading zeros, e.g. ``192.168.001.001``."""
    octets = value.split(".")
    if len(octets) != 4 or not all(is_ascii_digits(o) and len(o) <= 3 for o in octets):
        return None
    numbers = [int(o) for o in octets]
    if any(n > 255 for n in numbers):
        return None
    return ipaddress.IPv4Address(".".join(str(n) for n in numbers))


def parse_ip_address(value: str | None) -> IPAddress | None:
    """Parse an IPv4 or IPv6 address, or return None.

    IPv4 must be a canonical dotted quad unless ``strict_ip_v4`` is off in
    the active config. IPv6 may not contain spaces or start or end with a dot.
    """
    if is_blank(value):
        return None
    if ":" in value:
        if " " in value or value.startswith(".") or value.endswith("."):
            return None
        try:
            return ipaddress.IPv6Address(value)
        except ValueError:
            return None
    try:
        return ipaddress.IPv4Address(value)
    except ValueError:
        if get_config().strict_ip_v4:
            return None
        return _parse_lenient_ipv4(value)


def ip_address(field_name: str = "IpAddress") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if parse_ip_address(value) is None:
            return ValidationResult.failure("Invalid IP address format.", field_name, "IpAddress")
        return ValidationResult.success()

    return validate
