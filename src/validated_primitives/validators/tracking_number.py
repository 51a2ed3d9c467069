"""Parcel tracking number validators and carrier detection.

Validation accepts a number when any carrier format matches. Detection
has to pick one carrier, so it walks the formats from most to least
specific; where formats overlap the earlier entry wins.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import (
    ValueValidator,
    compile_pattern,
    is_ascii_alnum,
    is_ascii_digits,
    is_blank,
    matches,
)


class TrackingNumberFormat(str, Enum):
    UNKNOWN = "Unknown"
    UPS = "UPS"
    FEDEX_EXPRESS = "FedExExpress"
    FEDEX_GROUND = "FedExGround"
    FEDEX_SMARTPOST = "FedExSmartPost"
    USPS = "USPS"
    DHL_EXPRESS = "DHLExpress"
    DHL_ECOMMERCE = "DHLEcommerce"
    DHL_GLOBAL_MAIL = "DHLGlobalMail"
    AMAZON_LOGISTICS = "AmazonLogistics"
    ROYAL_MAIL = "RoyalMail"
    CANADA_POST = "CanadaPost"
    AUSTRALIA_POST = "AustraliaPost"
    TNT = "TNT"
    CHINA_POST = "ChinaPost"
    LASERSHIP = "LaserShip"
    ONTRAC = "OnTrac"
    IRISH_POST = "IrishPost"

    @property
    def carrier_name(self) -> str:
        return CARRIER_NAMES.get(self, "Unknown Carrier")


CARRIER_NAMES: dict[TrackingNumberFormat, str] = {
    TrackingNumberFormat.UPS: "UPS",
    TrackingNumberFormat.FEDEX_EXPRESS: "FedEx Express",
    TrackingNumberFormat.FEDEX_GROUND: "FedEx Ground",
    TrackingNumberFormat.FEDEX_SMARTPOST: "FedEx SmartPost",
    TrackingNumberFormat.USPS: "USPS",
    TrackingNumberFormat.DHL_EXPRESS: "DHL Express",
    TrackingNumberFormat.DHL_ECOMMERCE: "DHL eCommerce",
    TrackingNumberFormat.DHL_GLOBAL_MAIL: "DHL Global Mail",
    TrackingNumberFormat.AMAZON_LOGISTICS: "Amazon Logistics",
    TrackingNumberFormat.ROYAL_MAIL: "Royal Mail",
    TrackingNumberFormat.CANADA_POST: "Canada Post",
    TrackingNumberFormat.AUSTRALIA_POST: "Australia Post",
    TrackingNumberFormat.TNT: "TNT",
    TrackingNumberFormat.CHINA_POST: "China Post",
    TrackingNumberFormat.LASERSHIP: "LaserShip",
    TrackingNumberFormat.ONTRAC: "OnTrac",
    TrackingNumberFormat.IRISH_POST: "Irish Post",
}

INVALID_TRACKING_MESSAGE = (
    "Invalid tracking number format. Supported carriers: UPS, FedEx, USPS, DHL, Amazon, "
    "Royal Mail, Canada Post, Australia Post, TNT, China Post, LaserShip, OnTrac, Irish Post."
)

# UPU S10 international item: two letters, nine digits, two letter origin country
_S10 = compile_pattern(r"^[A-Z]{2}\d{9}[A-Z]{2}$")


def normalize_tracking_number(value: str) -> str:
    """Remove spaces and hyphens and uppercase."""
    return value.replace(" ", "").replace("-", "").upper()


def _digits(*lengths: int) -> Callable[[str], bool]:
    return lambda v: len(v) in lengths and is_ascii_digits(v)


def _prefixed_digits(prefix: str, size: int) -> Callable[[str], bool]:
    return lambda v: len(v) == size and v.startswith(prefix) and is_ascii_digits(v[len(prefix):])


def _is_ups(v: str) -> bool:
    return len(v) == 18 and v.startswith("1Z") and is_ascii_alnum(v[2:])


def _is_usps(v: str) -> bool:
    return (len(v) == 20 or len(v) == 22) and is_ascii_digits(v)


def _is_dhl_ecommerce(v: str) -> bool:
    return len(v) == 22 and v.startswith("GM") and is_ascii_alnum(v)


def _is_dhl_global_mail(v: str) -> bool:
    return 13 <= len(v) <= 16 and is_ascii_alnum(v)


def _is_s10(v: str) -> bool:
    return len(v) == 13 and matches(_S10, v)


def _is_canada_post(v: str) -> bool:
    return len(v) == 16 and is_ascii_alnum(v)


CARRIER_PREDICATES: dict[TrackingNumberFormat, Callable[[str], bool]] = {
    TrackingNumberFormat.UPS: _is_ups,
    TrackingNumberFormat.FEDEX_EXPRESS: _digits(12),
    TrackingNumberFormat.FEDEX_GROUND: _digits(15),
    TrackingNumberFormat.FEDEX_SMARTPOST: _digits(22),
    TrackingNumberFormat.USPS: _is_usps,
    TrackingNumberFormat.DHL_EXPRESS: _digits(10),
    TrackingNumberFormat.DHL_ECOMMERCE: _is_dhl_ecommerce,
    TrackingNumberFormat.DHL_GLOBAL_MAIL: _is_dhl_global_mail,
    TrackingNumberFormat.AMAZON_LOGISTICS: _prefixed_digits("TBA", 15),
    TrackingNumberFormat.ROYAL_MAIL: _is_s10,
    TrackingNumberFormat.CANADA_POST: _is_canada_post,
    TrackingNumberFormat.AUSTRALIA_POST: _digits(13),
    TrackingNumberFormat.TNT: _digits(9, 13),
    TrackingNumberFormat.CHINA_POST: _is_s10,
    TrackingNumberFormat.LASERSHIP: _prefixed_digits("1LS", 15),
    TrackingNumberFormat.ONTRAC: _prefixed_digits("C", 15),
    TrackingNumberFormat.IRISH_POST: _is_s10,
}

_S10_SUFFIXES = {
    "GB": TrackingNumberFormat.ROYAL_MAIL,
    "CN": TrackingNumberFormat.CHINA_POST,
    "IE": TrackingNumberFormat.IRISH_POST,
}

# Detection order, most specific first
_DETECTION_ORDER: tuple[tuple[TrackingNumberFormat, Callable[[str], bool]], ...] = (
    (TrackingNumberFormat.UPS, lambda v: len(v) == 18 and v.startswith("1Z")),
    (TrackingNumberFormat.AMAZON_LOGISTICS, _prefixed_digits("TBA", 15)),
    (TrackingNumberFormat.DHL_ECOMMERCE, lambda v: len(v) == 22 and v.startswith("GM")),
    (TrackingNumberFormat.LASERSHIP, _prefixed_digits("1LS", 15)),
    (TrackingNumberFormat.ONTRAC, _prefixed_digits("C", 15)),
    (TrackingNumberFormat.TNT, _digits(9)),
    (TrackingNumberFormat.DHL_EXPRESS, _digits(10)),
    (TrackingNumberFormat.FEDEX_EXPRESS, _digits(12)),
    (TrackingNumberFormat.USPS, _is_s10),
    (TrackingNumberFormat.AUSTRALIA_POST, _digits(13)),
    (TrackingNumberFormat.FEDEX_GROUND, _digits(15)),
    (TrackingNumberFormat.CANADA_POST, _is_canada_post),
    (TrackingNumberFormat.FEDEX_SMARTPOST, _digits(22)),
    (TrackingNumberFormat.USPS, lambda v: 20 <= len(v) <= 22 and is_ascii_alnum(v)),
    (TrackingNumberFormat.DHL_GLOBAL_MAIL, _is_dhl_global_mail),
)


def detect_carrier(value: str | None) -> TrackingNumberFormat:
    """Pick the most likely carrier for a tracking number.

    S10 numbers go to Royal Mail, China Post or Irish Post by their origin
    suffix and to USPS otherwise.
    """
    if is_blank(value):
        return TrackingNumberFormat.UNKNOWN
    code = normalize_tracking_number(value)
    for fmt, predicate in _DETECTION_ORDER:
        if predicate(code):
            if fmt is TrackingNumberFormat.USPS and len(code) == 13:
                return _S10_SUFFIXES.get(code[11:], TrackingNumberFormat.USPS)
            return fmt
    return TrackingNumberFormat.UNKNOWN


def valid_tracking_number(field_name: str = "TrackingNumber") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value):
            return ValidationResult.failure(
                "Tracking number cannot be empty.", field_name, "TrackingNumber.Empty"
            )
        code = normalize_tracking_number(value)
        if any(predicate(code) for predicate in CARRIER_PREDICATES.values()):
            return ValidationResult.success()
        return ValidationResult.failure(
            INVALID_TRACKING_MESSAGE, field_name, "TrackingNumber.InvalidFormat"
        )

    return validate
