"""Filter schema registry: data-driven descriptions of ffmpeg filters."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from ..core.constants import PARAMETER_SEPARATOR
from ..core.enums import Color
from ..core.errors import InvalidArgument
from ..core.function import color_text
from ..core.sanitize import escape, quote_expression
from ..core.validate import check_file, not_empty, range_check
from ..core.values import expand_all, to_value

if TYPE_CHECKING:
    from ..config import Config
    from .builder import SchemaFilter

logger = logging.getLogger("ffexpr")


class FilterCategory(str, Enum):
    """Categories of filters."""
    BLUR = "blur"
    COLOR = "color"
    SPATIAL = "spatial"
    TEMPORAL = "temporal"
    ANALYSIS = "analysis"
    MEDIA = "media"
    CUSTOM = "custom"


class OptionType(str, Enum):
    """Types of filter options."""
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    EXPRESSION = "expression"
    BOOL = "bool"
    FLAG = "flag"
    CHOICE = "choice"
    LIST = "list"
    COLOR = "color"
    FILE = "file"


@dataclass
class FilterOption:
    """Definition of a filter option.

    ``key`` is the token written into the expression when it differs from the
    descriptive ``name`` (``name: sigma_vertical``, ``key: sigmaV``).
    ``choices`` is either a list of accepted values or a mapping from a
    descriptive identifier to the ffmpeg alias it renders as.
    """
    name: str
    type: OptionType
    description: str = ""
    key: Optional[str] = None
    default: Any = None
    min_value: float | None = None
    max_value: float | None = None
    choices: Union[list[str], dict[str, str], None] = None
    separator: str = PARAMETER_SEPARATOR
    escape: bool = False
    positional: bool = False

    @property
    def render_key(self) -> str:
        return self.key or self.name

    def validate(self, value: Any) -> Optional[str]:
        """Validate a value and return it rendered for the expression.

        Args:
            value: Value to validate.

        Returns:
            The rendered text, or ``None`` for a bare flag.

        Raises:
            InvalidArgument: If the value does not fit the option.
        """
        if self.type == OptionType.FLAG:
            if value is None or value is True:
                return None
            raise InvalidArgument(f"Parameter '{self.name}' is a flag and takes no value")

        if value is None:
            raise InvalidArgument(f"Parameter '{self.name}' is required")

        if self.type == OptionType.INT:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgument(f"Parameter '{self.name}' must be an integer")
            self._check_range(value)
            return to_value(value)

        if self.type == OptionType.FLOAT:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidArgument(f"Parameter '{self.name}' must be a number")
            self._check_range(value)
            return to_value(value)

        if self.type == OptionType.EXPRESSION:
            if isinstance(value, str):
                not_empty(value, f"Parameter '{self.name}' cannot be empty")
                return self._escaped(value)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidArgument(f"Parameter '{self.name}' must be a number or an expression")
            self._check_range(value)
            return to_value(value)

        if self.type == OptionType.STRING:
            if not isinstance(value, str):
                raise InvalidArgument(f"Parameter '{self.name}' must be a string")
            not_empty(value, f"Parameter '{self.name}' cannot be empty")
            return self._escaped(value)

        if self.type == OptionType.BOOL:
            if not isinstance(value, bool):
                raise InvalidArgument(f"Parameter '{self.name}' must be a boolean")
            return to_value(value)

        if self.type == OptionType.CHOICE:
            return self._choice(value)

        if self.type == OptionType.LIST:
            items = list(value) if isinstance(value, (list, tuple)) else [value]
            not_empty(items, f"Parameter '{self.name}' needs at least one value")
            if self.choices:
                items = [self._choice(item) for item in items]
            return expand_all(self.separator, items)

        if self.type == OptionType.COLOR:
            if not isinstance(value, (Color, str)):
                raise InvalidArgument(f"Parameter '{self.name}' must be a color")
            not_empty(to_value(value), f"Parameter '{self.name}' cannot be empty")
            return color_text(value)

        if self.type == OptionType.FILE:
            path = check_file(value)
            return escape(path.as_posix(), quote=True)

        raise InvalidArgument(f"Parameter '{self.name}' has unsupported type {self.type!r}")

    def _check_range(self, value: float) -> None:
        if self.min_value is None and self.max_value is None:
            return
        minimum = float("-inf") if self.min_value is None else self.min_value
        maximum = float("inf") if self.max_value is None else self.max_value
        range_check(value, minimum, maximum)

    def _escaped(self, text: str) -> str:
        return escape(text, quote=True) if self.escape else quote_expression(text)

    def _choice(self, value: Any) -> str:
        text = to_value(value)
        if not self.choices:
            return text
        if isinstance(self.choices, dict):
            # Accept the identifier or the alias it renders as
            lowered = text.lower()
            for identifier, alias in self.choices.items():
                if identifier.lower() == lowered or str(alias).lower() == lowered:
                    return str(alias)
            allowed = list(self.choices.keys())
        else:
            for choice in self.choices:
                if str(choice).lower() == text.lower():
                    return str(choice)
            allowed = list(self.choices)
        raise InvalidArgument(f"Parameter '{self.name}' must be one of {allowed}, got {value!r}")


@dataclass
class FilterSchema:
    """Definition of a filter and its options."""
    name: str
    category: FilterCategory
    description: str
    options: list[FilterOption] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    _search_text: str = field(init=False, repr=False, default="")

    def __post_init__(self):
        """Pre-compute search text for faster lookups."""
        parts = [self.name, self.description] + self.tags + self.aliases
        self._search_text = " ".join(parts).lower()

    def get_option(self, name: str) -> Optional[FilterOption]:
        """Get an option by its name or by the key it renders as."""
        for option in self.options:
            if option.name == name:
                return option
        for option in self.options:
            if option.key == name:
                return option
        return None

    @property
    def positional_options(self) -> list[FilterOption]:
        return [option for option in self.options if option.positional]


class FilterRegistry:
    """Central registry of filter schemas."""

    def __init__(self):
        self._schemas: dict[str, FilterSchema] = {}
        self._aliases: dict[str, str] = {}
        self._by_category: dict[FilterCategory, list[FilterSchema]] = {
            cat: [] for cat in FilterCategory
        }
        self._cached_json_schema: Optional[dict] = None

    def register(self, schema: FilterSchema) -> None:
        """Register a schema, replacing any schema of the same name.

        Args:
            schema: Schema to register.
        """
        previous = self._schemas.get(schema.name)
        if previous is not None:
            logger.warning("Replacing filter schema '%s'", schema.name)
            self._by_category[previous.category].remove(previous)

        self._schemas[schema.name] = schema
        self._by_category[schema.category].append(schema)
        self._aliases.pop(schema.name, None)
        for alias in schema.aliases:
            self.register_alias(alias, schema.name)

        logger.debug("Registered filter '%s' (%s)", schema.name, schema.category.value)
        self._cached_json_schema = None

    def register_alias(self, alias: str, name: str) -> None:
        """Bind another name to a registered schema.

        Raises:
            InvalidArgument: If ``name`` is not registered or ``alias`` is a schema name.
        """
        if name not in self._schemas:
            raise InvalidArgument(f"Cannot alias '{alias}' to unknown filter '{name}'")
        if alias in self._schemas:
            raise InvalidArgument(f"'{alias}' is already a registered filter")
        self._aliases[alias] = name

    def get(self, name: str) -> Optional[FilterSchema]:
        """Get a schema by name or alias.

        Args:
            name: Filter name.

        Returns:
            FilterSchema if found, None otherwise.
        """
        schema = self._schemas.get(name)
        if schema is None and name in self._aliases:
            schema = self._schemas.get(self._aliases[name])
        return schema

    def list_all(self) -> list[FilterSchema]:
        """List all registered schemas."""
        return list(self._schemas.values())

    def list_by_category(self, category: Union[FilterCategory, str]) -> list[FilterSchema]:
        """List schemas in a category.

        Args:
            category: Category (or its value) to filter by.

        Returns:
            List of schemas in the category; empty for unknown categories.
        """
        try:
            category = FilterCategory(category)
        except ValueError:
            return []
        return list(self._by_category.get(category, []))

    def search(self, query: str) -> list[FilterSchema]:
        """Search schemas by name, alias, description or tag."""
        query = query.lower()
        return [
            schema for schema in self._schemas.values()
            if query in schema._search_text
        ]

    def create(self, name: str) -> "SchemaFilter":
        """Create a builder for a registered filter.

        Raises:
            InvalidArgument: If no schema has that name or alias.
        """
        from .builder import SchemaFilter

        schema = self.get(name)
        if schema is None:
            raise InvalidArgument(f"Unknown filter '{name}'")
        return SchemaFilter(schema)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._schemas)

    def to_json_schema(self) -> dict:
        """Generate a JSON schema describing option values per filter.

        Returns:
            JSON schema dict for validation.
        """
        if self._cached_json_schema is not None:
            return copy.deepcopy(self._cached_json_schema)

        filter_schemas = {}

        for name, schema in self._schemas.items():
            properties = {}

            for option in schema.options:
                prop: dict[str, Any] = {
                    "description": option.description,
                }

                if option.type == OptionType.INT:
                    prop["type"] = "integer"
                    if option.min_value is not None:
                        prop["minimum"] = int(option.min_value)
                    if option.max_value is not None:
                        prop["maximum"] = int(option.max_value)
                elif option.type == OptionType.FLOAT:
                    prop["type"] = "number"
                    if option.min_value is not None:
                        prop["minimum"] = option.min_value
                    if option.max_value is not None:
                        prop["maximum"] = option.max_value
                elif option.type == OptionType.EXPRESSION:
                    prop["type"] = ["number", "string"]
                elif option.type in (OptionType.BOOL, OptionType.FLAG):
                    prop["type"] = "boolean"
                elif option.type == OptionType.CHOICE:
                    prop["type"] = "string"
                    if option.choices:
                        prop["enum"] = list(option.choices)
                elif option.type == OptionType.LIST:
                    prop["type"] = "array"
                    if option.choices:
                        prop["items"] = {"type": "string", "enum": list(option.choices)}
                else:
                    prop["type"] = "string"

                if option.default is not None:
                    prop["default"] = option.default

                properties[option.name] = prop

            filter_schemas[name] = {
                "type": "object",
                "description": schema.description,
                "properties": properties,
                "additionalProperties": False,
            }

        self._cached_json_schema = {
            "type": "object",
            "properties": {
                "filter": {
                    "type": "string",
                    "enum": list(self._schemas.keys()),
                },
                "options": {
                    "oneOf": [
                        {"$ref": f"#/definitions/{name}"}
                        for name in filter_schemas.keys()
                    ]
                }
            },
            "definitions": filter_schemas,
            "required": ["filter"],
        }
        return copy.deepcopy(self._cached_json_schema)


# Global registry instance
_registry: Optional[FilterRegistry] = None


def get_registry(config: Optional["Config"] = None) -> FilterRegistry:
    """Get the global filter registry, building it on first use.

    Args:
        config: Configuration naming the catalogues to load. Defaults to
            :meth:`Config.load`. Ignored once the registry exists.

    Returns:
        Global FilterRegistry instance.
    """
    global _registry
    if _registry is None:
        _registry = _build_registry(config)
    return _registry


def reset_registry() -> None:
    """Forget the global registry so the next call rebuilds it."""
    global _registry
    _registry = None


def _build_registry(config: Optional["Config"]) -> FilterRegistry:
    from ..config import Config
    from .yaml_loader import load_builtin_catalog, load_catalog_dir

    if config is None:
        config = Config.load()

    registry = FilterRegistry()
    if config.include_builtin_catalog:
        load_builtin_catalog(registry)
    for directory in config.catalog_dirs:
        load_catalog_dir(directory, registry)
    logger.info("Filter registry ready with %d filter(s)", len(registry))
    return registry
