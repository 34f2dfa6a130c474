"""Escaping and quoting of text embedded in filter expressions.

ffmpeg reads a filter graph in two passes. The graph parser splits filters
at ``,`` ``;`` ``[`` ``]`` and strips one level of quoting; each filter then
splits its own arguments at ``:`` and ``=``, stripping a second level. A
string value that may contain those characters (paths, expressions, key
points, text) is backslash-escaped for the second pass and single-quoted for
the first.
"""

import re
from typing import Any

from .constants import INPUT_TOKEN_END, INPUT_TOKEN_START, QUOTE

# Characters that terminate an option value inside a filter description
_RESERVED = re.compile(r"([:=\[\]\\'])")

# Anything the graph parser or the option parser would act on
_SYNTAX = re.compile(r"[:=\[\],;\\'\s]")

_DRAWTEXT_ESCAPES = (
    ("\\", "\\\\"),
    ("'", "\\'"),
    (":", "\\:"),
    (";", "\\;"),
    (",", "\\,"),
    ("[", "\\["),
    ("]", "\\]"),
    ("%", "%%"),
)


def single_quote(text: str) -> str:
    """Quote ``text`` for the graph parser.

    Nothing is special inside single quotes, so an embedded quote closes the
    string, is added backslash-escaped and the string reopens: ``a'b`` ->
    ``'a'\\''b'``.
    """
    return QUOTE + text.replace(QUOTE, QUOTE + "\\" + QUOTE + QUOTE) + QUOTE


def escape(text: Any, quote: bool = False) -> str:
    """Backslash-escape reserved characters of an option value.

    Args:
        text: Value to escape (converted with ``str``).
        quote: Also protect the result from the graph parser with
            :func:`single_quote`.

    Returns:
        Escaped text safe for use as one filter option value.
    """
    escaped = _RESERVED.sub(r"\\\1", str(text))
    return single_quote(escaped) if quote else escaped


def quote_expression(value: Any) -> str:
    """Render an expression, quoting it only when it carries syntax characters.

    ``iw/2`` stays as is; ``min(iw,ih)`` becomes ``'min(iw,ih)'`` so the comma
    does not end the filter.
    """
    text = str(value)
    return escape(text, quote=True) if _SYNTAX.search(text) else text


def wrap_label(label: Any) -> str:
    """Render a stream label: ``0:v`` -> ``[0:v]``; ``None`` -> ``""``."""
    if label is None:
        return ""
    text = str(label)
    if text.startswith(INPUT_TOKEN_START) and text.endswith(INPUT_TOKEN_END):
        return text
    return f"{INPUT_TOKEN_START}{text}{INPUT_TOKEN_END}"


def sanitize_text_param(text: str) -> str:
    """Escape literal text for the drawtext ``text`` option.

    Besides the option-value syntax characters, drawtext needs quotes and
    chain separators escaped, and ``%`` doubled so it is not read as the
    start of a text expansion.
    """
    if not text:
        return text
    # Backslash first so the escapes added below stay single
    for char, replacement in _DRAWTEXT_ESCAPES:
        text = text.replace(char, replacement)
    return text
