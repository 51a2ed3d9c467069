"""Value object registry for discovery and lookup by short name."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from validated_primitives.value_objects.base import ValidatedValueObject


class ValueObjectRegistry:
    """Singleton registry mapping short names ("iban", "swift", ...) to value object classes."""

    _instance: "ValueObjectRegistry | None" = None

    CATEGORIES = (
        "banking",
        "identity",
        "contact",
        "network",
        "address",
        "payment",
        "logistics",
        "money",
        "dates",
        "geospatial",
    )

    def __new__(cls) -> "ValueObjectRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._value_objects = {}
            cls._instance._categories = {}
            cls._instance._initialized = False
        return cls._instance

    def _discover(self) -> None:
        """Import every category module so their decorators run."""
        if self._initialized:
            return
        for category in self.CATEGORIES:
            importlib.import_module(f"validated_primitives.value_objects.{category}")
        self._initialized = True

    def register(self, vo_cls: type["ValidatedValueObject"]) -> None:
        """Register a value object class under its ``name`` and ``category``."""
        name = vo_cls.name or vo_cls.__name__.lower()
        category = vo_cls.category

        self._value_objects[name] = vo_cls

        if category not in self._categories:
            self._categories[category] = {}
        self._categories[category][name] = vo_cls

    def get(self, name: str) -> type["ValidatedValueObject"]:
        """Get a value object class by name.

        Raises:
            ValueError: If no class is registered under ``name``.
        """
        self._discover()
        if name not in self._value_objects:
            available = ", ".join(sorted(self._value_objects.keys()))
            raise ValueError(f"Unknown value object: {name}. Available: {available}")
        return self._value_objects[name]

    def get_by_category(self, category: str) -> dict[str, type["ValidatedValueObject"]]:
        self._discover()
        return self._categories.get(category, {}).copy()

    def list_all(self) -> dict[str, type["ValidatedValueObject"]]:
        self._discover()
        return self._value_objects.copy()

    def list_categories(self) -> list[str]:
        self._discover()
        return list(self._categories.keys())

    def __iter__(self) -> Iterator[tuple[str, type["ValidatedValueObject"]]]:
        self._discover()
        return iter(self._value_objects.items())

    def __contains__(self, name: str) -> bool:
        self._discover()
        return name in self._value_objects

    def __len__(self) -> int:
        self._discover()
        return len(self._value_objects)


# Singleton instance
registry = ValueObjectRegistry()


def register_value_object(cls: type["ValidatedValueObject"]) -> type["ValidatedValueObject"]:
    """Decorator to register a value object class."""
    registry.register(cls)
    return cls
