"""YAML-based filter catalogue loader.

A catalogue file lists filter schemas under a top-level ``filters`` key::

    filters:
      - name: gblur
        category: blur
        description: Gaussian blur
        aliases: [gaussian_blur]
        tags: [smooth, soften]
        options:
          sigma:
            type: float
            min: 0
            max: 1024
          sigma_vertical:
            key: sigmaV
            type: float
            min: -1
            max: 1024

The package ships its catalogue in ``ffexpr/schema/catalog/``; more
directories can be named in the configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..core.constants import PARAMETER_SEPARATOR
from .registry import (
    FilterCategory,
    FilterOption,
    FilterRegistry,
    FilterSchema,
    OptionType,
)

logger = logging.getLogger("ffexpr")

BUILTIN_CATALOG = Path(__file__).resolve().parent / "catalog"

# ------------------------------------------------------------------ #
#   YAML → FilterSchema conversion                                   #
# ------------------------------------------------------------------ #

# Map YAML type strings to OptionType enum values.
_TYPE_MAP: dict[str, OptionType] = {
    "int": OptionType.INT,
    "integer": OptionType.INT,
    "float": OptionType.FLOAT,
    "double": OptionType.FLOAT,
    "number": OptionType.FLOAT,
    "string": OptionType.STRING,
    "str": OptionType.STRING,
    "expression": OptionType.EXPRESSION,
    "expr": OptionType.EXPRESSION,
    "bool": OptionType.BOOL,
    "boolean": OptionType.BOOL,
    "flag": OptionType.FLAG,
    "choice": OptionType.CHOICE,
    "enum": OptionType.CHOICE,
    "list": OptionType.LIST,
    "flags": OptionType.LIST,
    "color": OptionType.COLOR,
    "file": OptionType.FILE,
    "path": OptionType.FILE,
}


def _as_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        return [str(value)]
    return [str(v) for v in value]


def _parse_option(name: str, data: dict[str, Any]) -> Optional[FilterOption]:
    """Convert a YAML option dict into a ``FilterOption``."""
    type_name = str(data.get("type", "string")).lower()
    otype = _TYPE_MAP.get(type_name)
    if otype is None:
        logger.warning("Unknown type '%s' for option '%s'", type_name, name)
        return None

    choices = data.get("choices")
    if isinstance(choices, dict):
        choices = {str(k): str(v) for k, v in choices.items()}
    elif choices is not None:
        choices = _as_list(choices)

    return FilterOption(
        name=str(name),
        type=otype,
        description=str(data.get("description", "")),
        key=data.get("key"),
        default=data.get("default"),
        min_value=data.get("min"),
        max_value=data.get("max"),
        choices=choices,
        separator=str(data.get("separator", PARAMETER_SEPARATOR)),
        escape=bool(data.get("escape", False)),
        positional=bool(data.get("positional", False)),
    )


def parse_filter(data: Any, source: Union[str, Path] = "<memory>") -> Optional[FilterSchema]:
    """Convert one catalogue entry into a :class:`FilterSchema`.

    Returns ``None`` (after logging why) if the entry is malformed.
    """
    if not isinstance(data, dict):
        logger.warning("Skipping filter entry in %s: entry must be a mapping", source)
        return None

    name = data.get("name")
    if not name:
        logger.warning("Skipping filter entry in %s: missing 'name'", source)
        return None

    cat_str = str(data.get("category", "custom")).lower()
    try:
        category = FilterCategory(cat_str)
    except ValueError:
        category = FilterCategory.CUSTOM

    options_raw = data.get("options") or {}
    if not isinstance(options_raw, dict):
        logger.warning("Skipping filter '%s' in %s: 'options' must be a mapping", name, source)
        return None

    options: list[FilterOption] = []
    for oname, odata in options_raw.items():
        if not isinstance(odata, dict):
            odata = {"type": odata} if isinstance(odata, str) else {}
        option = _parse_option(oname, odata)
        if option is None:
            logger.warning("Skipping filter '%s' in %s: invalid option '%s'", name, source, oname)
            return None
        options.append(option)

    return FilterSchema(
        name=str(name),
        category=category,
        description=str(data.get("description", "")),
        options=options,
        aliases=_as_list(data.get("aliases")),
        tags=_as_list(data.get("tags")),
    )


def load_filters_from_yaml(path: Union[str, Path]) -> list[FilterSchema]:
    """Parse a catalogue file into schemas.

    Returns an empty list if the file cannot be read or has no ``filters`` list.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to read filter catalogue %s: %s", path, exc)
        return []

    if not isinstance(data, dict) or not isinstance(data.get("filters"), list):
        logger.warning("Invalid filter catalogue %s: expected a top-level 'filters' list", path)
        return []

    schemas = []
    for entry in data["filters"]:
        schema = parse_filter(entry, path)
        if schema is not None:
            schemas.append(schema)
    return schemas


# ------------------------------------------------------------------ #
#   Registration                                                      #
# ------------------------------------------------------------------ #

def load_catalog_file(path: Union[str, Path], registry: FilterRegistry) -> int:
    """Register every valid schema of one catalogue file.

    Returns the number of schemas registered.
    """
    loaded = 0
    for schema in load_filters_from_yaml(path):
        try:
            registry.register(schema)
        except ValueError as exc:
            # A clashing alias leaves the schema registered under its own name
            logger.warning("Alias problem for filter '%s' in %s: %s", schema.name, path, exc)
        loaded += 1
    return loaded


def load_catalog_dir(directory: Union[str, Path], registry: FilterRegistry) -> int:
    """Register the schemas of every ``*.yaml``/``*.yml`` file in a directory.

    Returns the total number of schemas registered.
    """
    directory = Path(directory).expanduser()
    if not directory.is_dir():
        logger.warning("Filter catalogue directory not found: %s", directory)
        return 0

    total = 0
    for yf in sorted(directory.glob("*.yaml")) + sorted(directory.glob("*.yml")):
        total += load_catalog_file(yf, registry)

    if total > 0:
        logger.info("Loaded %d filter schema(s) from %s", total, directory)
    return total


def load_builtin_catalog(registry: FilterRegistry) -> int:
    """Register the catalogue shipped with the package."""
    return load_catalog_dir(BUILTIN_CATALOG, registry)
