"""validated-primitives - Self-validating domain primitives.

Value objects that validate on construction and report every problem at
once, validator catalogues for banking, identity, contact, payment and
logistics identifiers, and bulk validation of polars columns.

Example:
    >>> from validated_primitives import IbanNumber
    >>> result, iban = IbanNumber.try_create("DE89 3704 0044 0532 0130 00")
    >>> result.is_valid, iban.country_code
    (True, <CountryCode.GERMANY: 'Germany'>)
"""

import logging

from validated_primitives.config import (
    ValidatorConfig,
    configure,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from validated_primitives.exceptions import (
    ConfigError,
    ConfigSourceError,
    ConfigValidationError,
    InvalidRangeError,
    RegexValidationError,
    ValueObjectValidationError,
)
from validated_primitives.result import ValidationError, ValidationResult
from validated_primitives.types import CountryCode, Severity
from validated_primitives.ranges import DateOnlyRange, DateRange, TimeOnlyRange
from validated_primitives.validators.base import ValueValidator, run_validators

# Value objects
from validated_primitives import value_objects
from validated_primitives.value_objects import *  # noqa: F403
from validated_primitives.value_objects import registry

# Domain aggregates and builders
from validated_primitives import domain
from validated_primitives.domain import (
    Address,
    AddressBuilder,
    BankingDetails,
    BankingDetailsBuilder,
    ContactInformation,
    Coordinate,
    CoordinateBuilder,
    CreditCardBuilder,
    CreditCardDetails,
    GeoBoundary,
    GeoDistance,
    GeospatialRoute,
    GeospatialRouteBuilder,
    PersonName,
    RouteSegment,
    RouteSegmentBuilder,
)

# Bulk column validation
from validated_primitives.columns import ColumnIssue, PrimitiveColumnValidator, validate_column

logging.getLogger("validated_primitives").addHandler(logging.NullHandler())

# Version: Single source of truth from pyproject.toml
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("validated-primitives")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    # Results and contract
    "ValidationError",
    "ValidationResult",
    "ValueValidator",
    "run_validators",
    # Types
    "CountryCode",
    "Severity",
    # Configuration
    "ValidatorConfig",
    "configure",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
    # Exceptions
    "ConfigError",
    "ConfigSourceError",
    "ConfigValidationError",
    "InvalidRangeError",
    "RegexValidationError",
    "ValueObjectValidationError",
    # Ranges
    "DateRange",
    "DateOnlyRange",
    "TimeOnlyRange",
    # Value objects
    "value_objects",
    "registry",
    *value_objects.__all__,
    # Domain
    "domain",
    "Address",
    "AddressBuilder",
    "BankingDetails",
    "BankingDetailsBuilder",
    "ContactInformation",
    "Coordinate",
    "CoordinateBuilder",
    "CreditCardBuilder",
    "CreditCardDetails",
    "GeoBoundary",
    "GeoDistance",
    "GeospatialRoute",
    "GeospatialRouteBuilder",
    "PersonName",
    "RouteSegment",
    "RouteSegmentBuilder",
    # Columns
    "ColumnIssue",
    "PrimitiveColumnValidator",
    "validate_column",
]
