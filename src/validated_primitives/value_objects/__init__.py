"""Self-validating value objects.

Every type follows the same protocol:

    >>> result, iban = IbanNumber.try_create("GB82 WEST 1234 5698 7654 32")
    >>> result.is_valid
    True
    >>> IbanNumber.create("not an iban")  # raises ValueObjectValidationError

Categories:
    - banking: BankAccountNumber, IbanNumber, SwiftCode, RoutingNumber, SortCode
    - identity: Passport, DrivingLicenseNumber, SocialSecurityNumber, HumanName
    - contact: EmailAddress, PhoneNumber, WebsiteUrl
    - network: IpAddress, MacAddress
    - address: PostalCode, City, StateProvince, AddressLine
    - payment: CreditCardNumber, CreditCardExpiration, CreditCardSecurityNumber
    - logistics: Barcode, TrackingNumber
    - money: Money, SmallUnitMoney, Percentage
    - dates: DateOfBirth, FutureDate, BetweenDatesSelection
    - geospatial: Latitude, Longitude
"""

from __future__ import annotations

from validated_primitives.value_objects.base import ValidatedValueObject, as_decimal, try_decimal
from validated_primitives.value_objects.registry import (
    ValueObjectRegistry,
    register_value_object,
    registry,
)

from validated_primitives.value_objects.address import AddressLine, City, PostalCode, StateProvince
from validated_primitives.value_objects.banking import (
    BankAccountNumber,
    IbanNumber,
    RoutingNumber,
    SortCode,
    SwiftCode,
)
from validated_primitives.value_objects.contact import EmailAddress, PhoneNumber, WebsiteUrl
from validated_primitives.value_objects.dates import (
    BetweenDatesSelection,
    DateOfBirth,
    FutureDate,
    parse_date_string,
)
from validated_primitives.value_objects.geospatial import Latitude, Longitude
from validated_primitives.value_objects.identity import (
    DrivingLicenseNumber,
    HumanName,
    Passport,
    SocialSecurityNumber,
)
from validated_primitives.value_objects.logistics import Barcode, TrackingNumber
from validated_primitives.value_objects.money import Money, Percentage, SmallUnitMoney
from validated_primitives.value_objects.network import IpAddress, MacAddress
from validated_primitives.value_objects.payment import (
    CreditCardExpiration,
    CreditCardNumber,
    CreditCardSecurityNumber,
)

__all__ = [
    # Base
    "ValidatedValueObject",
    "as_decimal",
    "try_decimal",
    # Registry
    "ValueObjectRegistry",
    "register_value_object",
    "registry",
    # Banking
    "BankAccountNumber",
    "IbanNumber",
    "SwiftCode",
    "RoutingNumber",
    "SortCode",
    # Identity
    "Passport",
    "DrivingLicenseNumber",
    "SocialSecurityNumber",
    "HumanName",
    # Contact
    "EmailAddress",
    "PhoneNumber",
    "WebsiteUrl",
    # Network
    "IpAddress",
    "MacAddress",
    # Address
    "PostalCode",
    "City",
    "StateProvince",
    "AddressLine",
    # Payment
    "CreditCardNumber",
    "CreditCardExpiration",
    "CreditCardSecurityNumber",
    # Logistics
    "Barcode",
    "TrackingNumber",
    # Money
    "Money",
    "SmallUnitMoney",
    "Percentage",
    # Dates
    "DateOfBirth",
    "FutureDate",
    "BetweenDatesSelection",
    "parse_date_string",
    # Geospatial
    "Latitude",
    "Longitude",
]
