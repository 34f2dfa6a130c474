"""Core of ffexpr: validation, value rendering, the argument accumulator and graphs."""

from .errors import FFExprError, InvalidArgument, FileNotFound
from .function import FilterFunction, ColorMixin, Custom
from .graph import Graph, FilterGraph
from .enums import FilterEnum, Color

__all__ = [
    "FFExprError",
    "InvalidArgument",
    "FileNotFound",
    "FilterFunction",
    "ColorMixin",
    "Custom",
    "Graph",
    "FilterGraph",
    "FilterEnum",
    "Color",
]
