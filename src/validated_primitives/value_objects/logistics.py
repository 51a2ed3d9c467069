"""Logistics value objects: product barcodes and parcel tracking numbers."""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators import barcode, common, tracking_number
from validated_primitives.validators.barcode import BarcodeFormat
from validated_primitives.validators.tracking_number import TrackingNumberFormat
from validated_primitives.value_objects.base import ValidatedValueObject
from validated_primitives.value_objects.registry import register_value_object


@register_value_object
class Barcode(ValidatedValueObject[str]):
    """Product barcode in any supported symbology; ``format`` is detected from its shape."""

    name = "barcode"
    category = "logistics"

    format: BarcodeFormat

    def __init__(self, value: str, property_name: str = "Barcode") -> None:
        self.format = barcode.detect_barcode_format(value)
        super().__init__(
            value,
            property_name,
            [common.not_null_or_whitespace(property_name), barcode.valid_barcode(property_name)],
        )

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "Barcode",
    ) -> tuple[ValidationResult, "Barcode | None"]:
        return cls._validated(cls(value, property_name))

    def get_normalized(self) -> str:
        return self.value.replace(" ", "").replace("-", "")


@register_value_object
class TrackingNumber(ValidatedValueObject[str]):
    """Parcel tracking number; ``format`` names the most likely carrier."""

    name = "tracking_number"
    category = "logistics"

    format: TrackingNumberFormat

    def __init__(self, value: str, property_name: str = "TrackingNumber") -> None:
        self.format = tracking_number.detect_carrier(value)
        super().__init__(
            value,
            property_name,
            [
                common.not_null_or_whitespace(property_name),
                tracking_number.valid_tracking_number(property_name),
            ],
        )

    @classmethod
    def try_create(
        cls,
        value: str | None,
        property_name: str = "TrackingNumber",
    ) -> tuple[ValidationResult, "TrackingNumber | None"]:
        return cls._validated(cls(value, property_name))

    def get_normalized(self) -> str:
        return tracking_number.normalize_tracking_number(self.value)

    def get_carrier_name(self) -> str:
        return self.format.carrier_name
