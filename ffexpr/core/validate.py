"""Argument guards used by every option setter.

All checks are pure: they either return (possibly a normalized value) or
raise :class:`~ffexpr.core.errors.InvalidArgument`. Setters call them before
touching the argument buffer so a rejected value never leaves a partial token.
"""

import math
from pathlib import Path
from typing import Any, Iterable, Optional

from .errors import FileNotFound, InvalidArgument


def range_check(value: float, minimum: float, maximum: float) -> None:
    """Reject values outside the inclusive range ``[minimum, maximum]``.

    Args:
        value: Integer or float to check.
        minimum: Lowest accepted value.
        maximum: Highest accepted value.

    Raises:
        InvalidArgument: If the value is missing or outside the range.
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgument(f"Expected a number in range({minimum}, {maximum}), got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgument(f"Expected a finite number in range({minimum}, {maximum}), got {value}")
    if value < minimum or value > maximum:
        raise InvalidArgument(
            f"Value out of range({minimum}, {maximum}), but your value is {value}"
        )


def not_null(value: Any, message: str) -> None:
    if value is None:
        raise InvalidArgument(message)


def not_empty(value: Any, message: str) -> None:
    """Reject ``None``, empty strings and empty collections."""
    if value is None:
        raise InvalidArgument(message)
    if isinstance(value, str) and not value.strip():
        raise InvalidArgument(message)
    if isinstance(value, (list, tuple, set, dict)) and not value:
        raise InvalidArgument(message)


def is_true(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidArgument(message)


def is_false(condition: bool, message: str) -> None:
    if condition:
        raise InvalidArgument(message)


def check_choice(value: Any, choices: Iterable[Any], name: str = "value") -> None:
    """Reject a value that is not one of ``choices``."""
    allowed = list(choices)
    if value not in allowed:
        raise InvalidArgument(f"Parameter '{name}' must be one of {allowed}, got {value!r}")


def check_extension(path: str | Path, extension: str) -> None:
    """Require ``path`` to end with ``.extension``.

    Raises:
        InvalidArgument: If the path is empty or carries another extension.
    """
    if not path or not str(path).strip():
        raise InvalidArgument("Path cannot be empty")
    ext = extension.lstrip(".").lower()
    suffix = Path(str(path)).suffix.lstrip(".")
    if suffix.lower() != ext:
        raise InvalidArgument(
            f'Your path variable must end with ".{ext}", but now it is ".{suffix}".'
        )


def check_file(
    path: Optional[str | Path],
    is_directory: bool = False,
    must_exist: bool = True,
) -> Path:
    """Validate a file or directory referenced by a filter option.

    Unlike output-path helpers this never creates anything on disk.

    Args:
        path: The referenced path.
        is_directory: Expect a directory instead of a regular file.
        must_exist: If False, a missing path is accepted as-is.

    Returns:
        The path as a :class:`pathlib.Path`.

    Raises:
        InvalidArgument: If the path is empty or has the wrong kind.
        FileNotFound: If the path is missing and ``must_exist`` is set.
    """
    if path is None or not str(path).strip():
        kind = "directory" if is_directory else "file"
        raise InvalidArgument(f"The target {kind} cannot be empty")

    target = Path(path)
    if not target.exists():
        if must_exist:
            raise FileNotFound(f"The target file does not exist: {target}")
        return target

    if is_directory and not target.is_dir():
        raise InvalidArgument(f"The target file can only be a folder: {target}")
    if not is_directory and target.is_dir():
        raise InvalidArgument(f"The target file cannot be a folder: {target}")
    return target
