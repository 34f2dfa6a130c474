"""Conversion of Python option values into filter-expression text."""

import math
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from .constants import FALSE, MAX_DECIMAL_DIGITS, TRUE
from .errors import InvalidArgument

_TWO_PLACES = Decimal("0.01")


def format_float(value: float) -> str:
    """Render a float the way ffmpeg users write it.

    Integral values drop the fraction (``10.0`` -> ``10``) and values with
    more than three decimal digits are rounded to three.
    """
    if not math.isfinite(value):
        raise InvalidArgument(f"Cannot render the non-finite number {value}")
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        return f"{value:.{MAX_DECIMAL_DIGITS}f}"
    decimals = text.split(".", 1)[1]
    if len(decimals) > MAX_DECIMAL_DIGITS:
        return f"{value:.{MAX_DECIMAL_DIGITS}f}"
    return text


def to_value(value: Any) -> Optional[str]:
    """Convert one option value to its textual form.

    Returns:
        The rendered text, or ``None`` when ``value`` is ``None``.
    """
    if value is None:
        return None
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return TRUE if value else FALSE
    if isinstance(value, Enum):
        command = getattr(value, "command", None)
        return command() if callable(command) else str(value.value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, Decimal):
        return format(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP), "f")
    if isinstance(value, int):
        return str(value)
    return str(value)


def flatten(values: Iterable[Any]) -> list[Any]:
    """Expand list/tuple members one level, so ``f(a, [b, c])`` == ``f(a, b, c)``."""
    flat: list[Any] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            flat.extend(value)
        else:
            flat.append(value)
    return flat


def expand_all(
    separator: str,
    values: Iterable[Any],
    handler: Optional[Callable[[str], str]] = None,
) -> str:
    """Join rendered values with ``separator``, skipping ``None`` members."""
    parts = []
    for value in flatten(values):
        text = to_value(value)
        if text is None:
            continue
        parts.append(handler(text) if handler else text)
    return separator.join(parts)
