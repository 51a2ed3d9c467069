"""Network address value objects."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators import common, ip_address, mac_address
from validated_primitives.validators.ip_address import IPAddress, parse_ip_address
from validated_primitives.value_objects.base import ValidatedValueObject
from validated_primitives.value_objects.registry import register_value_object


@register_value_object
class IpAddress(ValidatedValueObject[str]):
    """IPv4 or IPv6 address, kept as the text it was created from."""

    name = "ip_address"
    category = "network"

    def __init__(self, value: str, property_name: str = "IpAddress") -> None:
        super().__init__(value, property_name, [ip_address.ip_address(property_name)])

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "IpAddress",
    ) -> tuple[ValidationResult, "IpAddress | None"]:
        return cls._validated(cls(value, property_name))

    def to_ip_address(self) -> IPAddress:
        parsed = parse_ip_address(self.value)
        if parsed is None:
            raise ValueError(f"Not an IP address: {self.value!r}")
        return parsed

    @property
    def version(self) -> int:
        """4 or 6."""
        return self.to_ip_address().version

    @property
    def is_private(self) -> bool:
        return self.to_ip_address().is_private

    @property
    def is_loopback(self) -> bool:
        return self.to_ip_address().is_loopback


@register_value_object
class MacAddress(ValidatedValueObject[str]):
    """IEEE 802 MAC address stored in canonical ``AA:BB:CC:DD:EE:FF`` form.

    Broadcast, multicast and all-zero addresses are rejected unless
    explicitly allowed.
    """

    name = "mac_address"
    category = "network"

    def __init__(
        self,
        value: str,
        allow_multicast: bool = False,
        allow_broadcast: bool = False,
        allow_all_zeros: bool = False,
        property_name: str = "MacAddress",
    ) -> None:
        validators = [
            common.not_null_or_whitespace(property_name),
            mac_address.valid_format(property_name),
        ]
        # Broadcast first: FF:FF:FF:FF:FF:FF also has the multicast bit set
        if not allow_broadcast:
            validators.append(mac_address.not_broadcast(property_name))
        if not allow_multicast:
            validators.append(mac_address.not_multicast(property_name))
        if not allow_all_zeros:
            validators.append(mac_address.not_all_zeros(property_name))
        super().__init__(mac_address.normalize_mac(value), property_name, validators)

    @classmethod
    def try_create(
        cls,
        value: str | None,
        allow_multicast: bool = False,
        allow_broadcast: bool = False,
        allow_all_zeros: bool = False,
        property_name: str = "MacAddress",
    ) -> tuple[ValidationResult, "MacAddress | None"]:
        return cls._validated(
            cls(value, allow_multicast, allow_broadcast, allow_all_zeros, property_name)
        )

    def to_hyphen_format(self) -> str:
        return self.value.replace(":", "-")

    def to_dot_format(self) -> str:
        """Cisco notation, ``AABB.CCDD.EEFF``."""
        continuous = self.to_continuous_format()
        return f"{continuous[:4]}.{continuous[4:8]}.{continuous[8:12]}"

    def to_continuous_format(self) -> str:
        return self.value.replace(":", "")

    def get_oui(self) -> str:
        """Organizationally Unique Identifier (first three octets)."""
        return ":".join(self.value.split(":")[:3])

    def get_nic(self) -> str:
        """Network interface part (last three octets)."""
        return ":".join(self.value.split(":")[3:])

    def _first_octet(self) -> int:
        return int(self.value[:2], 16)

    def is_locally_administered(self) -> bool:
        return bool(self._first_octet() & 0x02)

    def is_universally_administered(self) -> bool:
        return not self.is_locally_administered()

    def is_multicast(self) -> bool:
        return bool(self._first_octet() & 0x01)

    def is_unicast(self) -> bool:
        return not self.is_multicast()
