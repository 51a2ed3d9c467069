"""Currency data per country (ISO 4217 codes, symbols and minor units)."""

from __future__ import annotations

from validated_primitives.types import CountryCode

UNKNOWN_CURRENCY = "UNKNOWN"

_EURO_COUNTRIES = (
    CountryCode.GERMANY,
    CountryCode.FRANCE,
    CountryCode.ITALY,
    CountryCode.SPAIN,
    CountryCode.NETHERLANDS,
    CountryCode.BELGIUM,
    CountryCode.AUSTRIA,
    CountryCode.PORTUGAL,
    CountryCode.IRELAND,
    CountryCode.FINLAND,
)

CURRENCY_CODES: dict[CountryCode, str] = {
    CountryCode.UNITED_STATES: "USD",
    CountryCode.UNITED_KINGDOM: "GBP",
    CountryCode.CANADA: "CAD",
    CountryCode.AUSTRALIA: "AUD",
    **{country: "EUR" for country in _EURO_COUNTRIES},
    CountryCode.SWITZERLAND: "CHF",
    CountryCode.SWEDEN: "SEK",
    CountryCode.NORWAY: "NOK",
    CountryCode.DENMARK: "DKK",
    CountryCode.POLAND: "PLN",
    CountryCode.CZECH_REPUBLIC: "CZK",
    CountryCode.HUNGARY: "HUF",
    CountryCode.JAPAN: "JPY",
    CountryCode.CHINA: "CNY",
    CountryCode.INDIA: "INR",
    CountryCode.BRAZIL: "BRL",
    CountryCode.MEXICO: "MXN",
    CountryCode.SOUTH_AFRICA: "ZAR",
    CountryCode.NEW_ZEALAND: "NZD",
    CountryCode.SINGAPORE: "SGD",
    CountryCode.SOUTH_KOREA: "KRW",
    CountryCode.RUSSIA: "RUB",
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "GBP": "£",
    "EUR": "€",
    "JPY": "¥",
    "CNY": "¥",
    "INR": "₹",
    "RUB": "₽",
    "KRW": "₩",
    "CHF": "CHF",
    "CAD": "C$",
    "AUD": "A$",
    "BRL": "R$",
    "MXN": "MX$",
    "ZAR": "R",
    "NZD": "NZ$",
    "SGD": "S$",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
    "PLN": "zł",
    "CZK": "Kč",
    "HUF": "Ft",
}

MINOR_UNIT_NAMES: dict[str, str] = {
    "USD": "cents",
    "GBP": "pence",
    "CAD": "cents",
    "AUD": "cents",
    "EUR": "cents",
    "CHF": "rappen",
    "SEK": "öre",
    "NOK": "øre",
    "DKK": "øre",
    "PLN": "groszy",
    "CZK": "haléřů",
    "HUF": "fillér",
    "JPY": "yen",
    "CNY": "fen",
    "INR": "paise",
    "BRL": "centavos",
    "MXN": "centavos",
    "ZAR": "cents",
    "NZD": "cents",
    "SGD": "cents",
    "KRW": "won",
    "RUB": "kopeks",
}

# Currencies without a minor unit in everyday use
ZERO_DECIMAL_CURRENCIES = frozenset({"JPY", "KRW"})


def get_currency_code(country: CountryCode) -> str:
    """ISO 4217 code for a country, ``"UNKNOWN"`` when there is none."""
    return CURRENCY_CODES.get(country, UNKNOWN_CURRENCY)


def get_currency_symbol(currency_code: str) -> str:
    """Display symbol for an ISO 4217 code, ``""`` when unknown."""
    return CURRENCY_SYMBOLS.get(currency_code.upper() if currency_code else "", "")


def get_minor_unit_name(country: CountryCode) -> str:
    return MINOR_UNIT_NAMES.get(get_currency_code(country), "units")


def get_decimal_places(country: CountryCode) -> int:
    """Minor unit exponent: 0 for yen and won, 2 otherwise."""
    return 0 if get_currency_code(country) in ZERO_DECIMAL_CURRENCIES else 2
