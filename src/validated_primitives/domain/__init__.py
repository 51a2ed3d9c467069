"""Domain aggregates composed from value objects."""

from __future__ import annotations

from validated_primitives.domain.address import Address
from validated_primitives.domain.banking import (
    ROUTING_NUMBER_COUNTRIES,
    SORT_CODE_COUNTRIES,
    BankingDetails,
    check_country_requirements,
)
from validated_primitives.domain.builders import AddressBuilder, BankingDetailsBuilder, CreditCardBuilder
from validated_primitives.domain.contact import ContactInformation
from validated_primitives.domain.geospatial import (
    Coordinate,
    CoordinateBuilder,
    DistanceUnit,
    GeoBoundary,
    GeoDistance,
    GeospatialRoute,
    GeospatialRouteBuilder,
    RouteSegment,
    RouteSegmentBuilder,
)
from validated_primitives.domain.payment import CreditCardDetails
from validated_primitives.domain.person import PersonName

__all__ = [
    "Address",
    "AddressBuilder",
    "BankingDetails",
    "BankingDetailsBuilder",
    "ContactInformation",
    "Coordinate",
    "CoordinateBuilder",
    "CreditCardBuilder",
    "CreditCardDetails",
    "DistanceUnit",
    "GeoBoundary",
    "GeoDistance",
    "GeospatialRoute",
    "GeospatialRouteBuilder",
    "PersonName",
    "ROUTING_NUMBER_COUNTRIES",
    "RouteSegment",
    "RouteSegmentBuilder",
    "SORT_CODE_COUNTRIES",
    "check_country_requirements",
]
