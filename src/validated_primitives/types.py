"""Type definitions for validated-primitives."""

from __future__ import annotations

from enum import Enum


class CountryCode(str, Enum):
    """Countries understood by the country-parameterized validators.

    ``UNKNOWN`` and ``ALL`` are wildcards: validators receiving them skip every
    country-specific rule.
    """

    UNKNOWN = "Unknown"
    ALL = "All"
    UNITED_STATES = "UnitedStates"
    UNITED_KINGDOM = "UnitedKingdom"
    CANADA = "Canada"
    GERMANY = "Germany"
    IRELAND = "Ireland"
    JAPAN = "Japan"
    AUSTRALIA = "Australia"
    FRANCE = "France"
    INDIA = "India"
    NETHERLANDS = "Netherlands"
    ITALY = "Italy"
    SOUTH_AFRICA = "SouthAfrica"
    SPAIN = "Spain"
    SINGAPORE = "Singapore"
    POLAND = "Poland"
    SWITZERLAND = "Switzerland"
    SWEDEN = "Sweden"
    DENMARK = "Denmark"
    CZECH_REPUBLIC = "CzechRepublic"
    BRAZIL = "Brazil"
    SOUTH_KOREA = "SouthKorea"
    NORWAY = "Norway"
    NEW_ZEALAND = "NewZealand"
    HUNGARY = "Hungary"
    AUSTRIA = "Austria"
    PORTUGAL = "Portugal"
    MEXICO = "Mexico"
    BELGIUM = "Belgium"
    RUSSIA = "Russia"
    CHINA = "China"
    FINLAND = "Finland"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human readable country name, e.g. ``"United Kingdom"``."""
        return _DISPLAY_NAMES.get(self, self.value)

    @property
    def iso_alpha2(self) -> str | None:
        """ISO 3166-1 alpha-2 code, or None for the wildcard members."""
        return _ISO_ALPHA2.get(self)

    @property
    def is_wildcard(self) -> bool:
        """True for ``UNKNOWN`` and ``ALL``."""
        return self in (CountryCode.UNKNOWN, CountryCode.ALL)

    @classmethod
    def from_iso(cls, code: str | None) -> "CountryCode":
        """Look up a member by ISO alpha-2 code (case-insensitive).

        Args:
            code: Two letter code such as ``"DE"``. ``"UK"`` is accepted for GB.

        Returns:
            Matching member, or ``UNKNOWN`` when the code is not supported.
        """
        if not code:
            return cls.UNKNOWN
        code = code.strip().upper()
        if code == "UK":
            code = "GB"
        return _BY_ISO_ALPHA2.get(code, cls.UNKNOWN)


_DISPLAY_NAMES: dict[CountryCode, str] = {
    CountryCode.ALL: "All Countries",
    CountryCode.UNITED_STATES: "United States",
    CountryCode.UNITED_KINGDOM: "United Kingdom",
    CountryCode.SOUTH_AFRICA: "South Africa",
    CountryCode.CZECH_REPUBLIC: "Czech Republic",
    CountryCode.SOUTH_KOREA: "South Korea",
    CountryCode.NEW_ZEALAND: "New Zealand",
}

_ISO_ALPHA2: dict[CountryCode, str] = {
    CountryCode.UNITED_STATES: "US",
    CountryCode.UNITED_KINGDOM: "GB",
    CountryCode.CANADA: "CA",
    CountryCode.GERMANY: "DE",
    CountryCode.IRELAND: "IE",
    CountryCode.JAPAN: "JP",
    CountryCode.AUSTRALIA: "AU",
    CountryCode.FRANCE: "FR",
    CountryCode.INDIA: "IN",
    CountryCode.NETHERLANDS: "NL",
    CountryCode.ITALY: "IT",
    CountryCode.SOUTH_AFRICA: "ZA",
    CountryCode.SPAIN: "ES",
    CountryCode.SINGAPORE: "SG",
    CountryCode.POLAND: "PL",
    CountryCode.SWITZERLAND: "CH",
    CountryCode.SWEDEN: "SE",
    CountryCode.DENMARK: "DK",
    CountryCode.CZECH_REPUBLIC: "CZ",
    CountryCode.BRAZIL: "BR",
    CountryCode.SOUTH_KOREA: "KR",
    CountryCode.NORWAY: "NO",
    CountryCode.NEW_ZEALAND: "NZ",
    CountryCode.HUNGARY: "HU",
    CountryCode.AUSTRIA: "AT",
    CountryCode.PORTUGAL: "PT",
    CountryCode.MEXICO: "MX",
    CountryCode.BELGIUM: "BE",
    CountryCode.RUSSIA: "RU",
    CountryCode.CHINA: "CN",
    CountryCode.FINLAND: "FI",
}

_BY_ISO_ALPHA2: dict[str, CountryCode] = {v: k for k, v in _ISO_ALPHA2.items()}


class Severity(str, Enum):
    """Severity levels for bulk column issues."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    def __ge__(self, other: "Severity") -> bool:
        return _SEVERITY_ORDER.index(self) >= _SEVERITY_ORDER.index(other)

    def __gt__(self, other: "Severity") -> bool:
        return _SEVERITY_ORDER.index(self) > _SEVERITY_ORDER.index(other)

    def __le__(self, other: "Severity") -> bool:
        return _SEVERITY_ORDER.index(self) <= _SEVERITY_ORDER.index(other)

    def __lt__(self, other: "Severity") -> bool:
        return _SEVERITY_ORDER.index(self) < _SEVERITY_ORDER.index(other)


_SEVERITY_ORDER = [Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL]
