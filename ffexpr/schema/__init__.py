"""Data-driven filter schemas, their registry and the YAML catalogue loader."""

from .registry import (
    FilterCategory,
    FilterOption,
    FilterRegistry,
    FilterSchema,
    OptionType,
    get_registry,
    reset_registry,
)
from .builder import SchemaFilter

__all__ = [
    "FilterCategory",
    "FilterOption",
    "FilterRegistry",
    "FilterSchema",
    "OptionType",
    "SchemaFilter",
    "get_registry",
    "reset_registry",
]
