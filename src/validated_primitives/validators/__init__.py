"""Validator catalogues.

Each catalogue module exposes factory functions that return a
``ValueValidator`` bound to a field name (and, where relevant, a country
or a bound). Catalogues are used by module, e.g.
``validators.routing.valid_checksum("RoutingNumber")``.

Catalogues:
    common: presence and length checks shared by most value objects
    checksum: Luhn, ISO 13616 mod 97, ABA and GTIN check digits
    bank_account, iban, swift, routing, sort_code: banking identifiers
    phone, postal_code, email, url, ip_address, mac_address: contact and network
    passport, driving_license, ssn: identity documents
    credit_card: card number, expiration and security number
    barcode, tracking_number: logistics
    money, percentage, dates, human_name, geospatial: scalar values
"""

from validated_primitives.validators import (
    bank_account,
    barcode,
    checksum,
    common,
    credit_card,
    dates,
    driving_license,
    email,
    geospatial,
    human_name,
    iban,
    ip_address,
    mac_address,
    money,
    passport,
    percentage,
    phone,
    postal_code,
    routing,
    sort_code,
    ssn,
    swift,
    tracking_number,
    url,
)
from validated_primitives.validators.base import (
    CountryRule,
    RegexSafetyChecker,
    ValueValidator,
    compile_pattern,
    country_format,
    matches,
    run_validators,
)

__all__ = [
    # Pipeline
    "ValueValidator",
    "run_validators",
    "CountryRule",
    "country_format",
    "RegexSafetyChecker",
    "compile_pattern",
    "matches",
    # Catalogues
    "bank_account",
    "barcode",
    "checksum",
    "common",
    "credit_card",
    "dates",
    "driving_license",
    "email",
    "geospatial",
    "human_name",
    "iban",
    "ip_address",
    "mac_address",
    "money",
    "passport",
    "percentage",
    "phone",
    "postal_code",
    "routing",
    "sort_code",
    "ssn",
    "swift",
    "tracking_number",
    "url",
]
