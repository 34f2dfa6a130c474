"""ffexpr: fluent, validated builders for ffmpeg filter-graph expressions.

Example usage::

    from ffexpr import FilterGraph
    from ffexpr.filters import Amplify, Scale

    vf = FilterGraph.simple().graph(Amplify.radius(3).factor(10), Scale.to(1280, 720))
    vf.to_args()  # ['-vf', 'amplify=radius=3:factor=10,scale=1280:720']
"""

__version__ = "1.0.0"

from .config import Config
from .core import (
    Color,
    ColorMixin,
    Custom,
    FFExprError,
    FileNotFound,
    FilterEnum,
    FilterFunction,
    FilterGraph,
    Graph,
    InvalidArgument,
)
from .schema import get_registry

__all__ = [
    "Color",
    "ColorMixin",
    "Config",
    "Custom",
    "FFExprError",
    "FileNotFound",
    "FilterEnum",
    "FilterFunction",
    "FilterGraph",
    "Graph",
    "InvalidArgument",
    "get_registry",
]
