"""Generic filter builder driven by a :class:`FilterSchema`."""

from typing import Any, Callable, Optional

from ..core.errors import InvalidArgument
from ..core.function import FilterFunction
from .registry import FilterOption, FilterSchema, OptionType


class SchemaFilter(FilterFunction):
    """Builder for any filter described by a schema.

    Options are validated against the schema before they reach the buffer::

        registry.create("amplify").radius(3).factor(10)   # amplify=radius=3:factor=10
        registry.create("crop").set("w", 640).set("h", 480)  # crop=640:480

    Positional options render first in declaration order. A gap left by an
    unset positional option is filled with that option's default.
    """

    def __init__(self, schema: FilterSchema) -> None:
        super().__init__()
        self._schema = schema
        self._positional: dict[str, Optional[str]] = {}

    @property
    def schema(self) -> FilterSchema:
        return self._schema

    def get_name(self) -> str:
        return self._schema.name

    def _option(self, name: str) -> FilterOption:
        option = self._schema.get_option(name)
        if option is None:
            raise InvalidArgument(f"Filter '{self._schema.name}' has no option '{name}'")
        return option

    def set(self, option_name: str, *values: Any) -> "SchemaFilter":
        """Validate and set an option; list options take several values."""
        option = self._option(option_name)
        if option.type == OptionType.LIST:
            value: Any = list(values)
        elif not values:
            value = None
        elif len(values) == 1:
            value = values[0]
        else:
            raise InvalidArgument(f"Option '{option.name}' takes a single value, got {len(values)}")

        rendered = option.validate(value)
        if option.positional:
            self._check_gap(option)
            self._positional[option.name] = rendered
            return self
        return self.add_arg(option.render_key, rendered)

    def value(self, *values: Any) -> "SchemaFilter":
        """Set the next unset positional option."""
        for option in self._schema.positional_options:
            if option.name not in self._positional:
                return self.set(option.name, *values)
        raise InvalidArgument(f"Filter '{self._schema.name}' has no free positional option")

    def enable(self, arg: str) -> "SchemaFilter":
        return self.status(arg, True)

    def disable(self, arg: str) -> "SchemaFilter":
        return self.status(arg, False)

    def status(self, arg: str, state: bool) -> "SchemaFilter":
        option = self._option(arg)
        if option.type != OptionType.BOOL:
            raise InvalidArgument(f"Option '{option.name}' is not a boolean option")
        return self.set(option.name, bool(state))

    def _check_gap(self, option: FilterOption) -> None:
        for earlier in self._schema.positional_options:
            if earlier is option:
                return
            if earlier.name not in self._positional and earlier.default is None:
                raise InvalidArgument(
                    f"Set '{earlier.name}' before '{option.name}'; it has no default"
                )

    def get_tokens(self) -> list[str]:
        positional = self._schema.positional_options
        last = max(
            (i for i, option in enumerate(positional) if option.name in self._positional),
            default=-1,
        )
        tokens = []
        for option in positional[:last + 1]:
            if option.name in self._positional:
                rendered = self._positional[option.name]
            else:
                rendered = option.validate(option.default)
            if rendered is not None:
                tokens.append(rendered)
        return tokens + super().get_tokens()

    def __getattr__(self, name: str) -> Callable[..., "SchemaFilter"]:
        if name.startswith("_"):
            raise AttributeError(name)
        option = self._schema.get_option(name)
        if option is None:
            raise AttributeError(f"'{self._schema.name}' has no option '{name}'")

        def setter(*values: Any) -> "SchemaFilter":
            return self.set(option.name, *values)

        setter.__name__ = name
        return setter
