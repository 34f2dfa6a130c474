"""Argument accumulator shared by every filter builder.

A builder owns one ordered buffer of option entries and renders it as::

    name=key1=value1:key2=value2:positional

Named entries keep the position of their first insertion; setting the same
name again replaces the value in place. Base arguments (see
:meth:`FilterFunction.add_base_arg`) always render first, positionally.
"""

from typing import Any, ClassVar, Optional, TypeVar, Union

from .constants import ARGUMENT_WRAPPER, PARAMETER_SEPARATOR, VALUE_SEPARATOR
from .enums import Color
from .sanitize import quote_expression
from .validate import not_empty, not_null, range_check
from .values import expand_all, flatten, to_value

F = TypeVar("F", bound="FilterFunction")


class _Positional(int):
    """Buffer key of an unnamed entry (ordinal of insertion)."""


class FilterFunction:
    """Base class of all filter builders.

    Subclasses set ``name`` and expose classmethod factories; option setters
    validate their input first and then delegate to ``add_arg`` and friends.
    """

    name: ClassVar[Optional[str]] = None
    separator: ClassVar[str] = PARAMETER_SEPARATOR
    arg_wrapper: ClassVar[tuple[str, str]] = ARGUMENT_WRAPPER

    def __init__(self) -> None:
        self._args: dict[Union[str, _Positional], Optional[str]] = {}
        self._base: dict[str, Optional[str]] = {}
        self._positional_count = 0

    # ── Accumulation ──────────────────────────────────────────────

    def add_arg(self: F, arg_name: Optional[str], *values: Any) -> F:
        """Append ``arg_name=value``; several values are joined by the part separator."""
        return self.add_arg2(arg_name, self.separator, *values)

    def add_arg2(self: F, arg_name: Optional[str], separator: str, *values: Any) -> F:
        """Append ``arg_name=v1<separator>v2...``.

        A ``None`` name stores a positional entry. No values (or a single
        ``None``) store a bare flag for named entries.
        """
        flat = flatten(values)
        if not flat:
            rendered = None
        elif len(flat) == 1:
            rendered = to_value(flat[0])
        else:
            rendered = expand_all(separator, flat)

        if arg_name is None:
            key: Union[str, _Positional] = _Positional(self._positional_count)
            self._positional_count += 1
        else:
            key = arg_name
        self._args[key] = rendered
        return self

    def add_value(self: F, value: Any) -> F:
        """Append one positional value."""
        return self.add_arg(None, value)

    def add_values(self: F, *values: Any) -> F:
        """Append positional values joined by the part separator."""
        return self.add_arg(None, *values)

    def add_base_arg(self: F, arg_name: str, value: Any) -> F:
        """Record a value rendered positionally ahead of all other entries."""
        self._base[arg_name] = to_value(value)
        return self

    def remove_arg(self: F, arg_name: str) -> F:
        """Drop a named entry if present."""
        self._args.pop(arg_name, None)
        return self

    def enable(self: F, arg: str) -> F:
        return self.status(arg, True)

    def disable(self: F, arg: str) -> F:
        return self.status(arg, False)

    def status(self: F, arg: str, state: bool) -> F:
        """Append ``arg=true`` or ``arg=false``."""
        return self.add_arg(arg, bool(state))

    # ── Introspection ─────────────────────────────────────────────

    def get_name(self) -> Optional[str]:
        """Filter name written in front of the arguments."""
        return self.name

    def get_arg(self, arg_name: str) -> Optional[str]:
        """Rendered value of a named entry (``None`` for flags or absent names)."""
        return self._args.get(arg_name)

    def has_arg(self, arg_name: str) -> bool:
        return arg_name in self._args

    def __len__(self) -> int:
        return len(self._base) + len(self._args)

    # ── Rendering ─────────────────────────────────────────────────

    def get_tokens(self) -> list[str]:
        """Rendered tokens in output order, without the filter name."""
        tokens = [value for value in self._base.values() if value is not None]
        for key, value in self._args.items():
            if isinstance(key, _Positional):
                if value is not None:
                    tokens.append(value)
            elif value is None:
                tokens.append(key)
            else:
                tokens.append(f"{key}{VALUE_SEPARATOR}{value}")
        return tokens

    def get_arguments(self) -> str:
        """The argument part, wrapped in ``arg_wrapper``."""
        start, end = self.arg_wrapper
        return f"{start}{self.separator.join(self.get_tokens())}{end}"

    def to_string(self) -> str:
        """Render the filter expression; does not modify the builder."""
        name = self.get_name()
        if not self.get_tokens():
            return name or ""
        arguments = self.get_arguments()
        if name is None:
            return arguments
        return f"{name}{VALUE_SEPARATOR}{arguments}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.to_string()!r}>"


def color_text(color: Optional[Union[Color, str]], alpha: float = 0) -> str:
    """Render a color as ``name`` or ``name@alpha``; ``None`` picks a random one."""
    if color is None:
        color = Color.RANDOM
    range_check(alpha, 0.0, 1.0)
    text = to_value(color)
    return f"{text}@{to_value(float(alpha))}" if alpha > 0 else text


def number_or_expression(
    value: Union[int, float, str],
    label: str,
    minimum: float = float("-inf"),
    maximum: float = float("inf"),
) -> Union[int, float, str]:
    """Range-check a number, or quote an expression string where needed."""
    not_null(value, f"The {label} cannot be empty")
    if isinstance(value, str):
        not_empty(value, f"The {label} cannot be empty")
        return quote_expression(value)
    range_check(value, minimum, maximum)
    return value


class ColorMixin:
    """Adds the common ``color`` option."""

    def color(self, color: Union[Color, str], alpha: float = 0):
        return self.add_arg("color", color_text(color, alpha))


class Custom(ColorMixin, FilterFunction):
    """Builder for any filter, with the accumulator methods made public.

    Example::

        Custom.define("fspp").add_arg("quality", 5).add_arg2("filter_params", "|", 1, 2)
    """

    def __init__(self, fun_name: Optional[str]) -> None:
        super().__init__()
        self._fun_name = fun_name

    @classmethod
    def define(cls, fun_name: Optional[str]) -> "Custom":
        return cls(fun_name)

    def get_name(self) -> Optional[str]:
        return self._fun_name
