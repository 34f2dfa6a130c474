"""Hand-written builders for common ffmpeg video filters."""

from .blur import Amplify, AvgBlur, BoxBlur, GBlur, Unsharp, Convolution
from .color import Eq, Hue, Curves, ColorKey, ColorChannelMixer, Negate, Format, Vignette
from .spatial import Crop, Scale, Pad, Flip, Transpose, Overlay
from .temporal import Fade, Mix, Yadif, Bwdif
from .analysis import CodecView, Thistogram
from .media import CoverRectangle, Subtitles, DrawText

__all__ = [
    "Amplify",
    "AvgBlur",
    "BoxBlur",
    "GBlur",
    "Unsharp",
    "Convolution",
    "Eq",
    "Hue",
    "Curves",
    "ColorKey",
    "ColorChannelMixer",
    "Negate",
    "Format",
    "Vignette",
    "Crop",
    "Scale",
    "Pad",
    "Flip",
    "Transpose",
    "Overlay",
    "Fade",
    "Mix",
    "Yadif",
    "Bwdif",
    "CodecView",
    "Thistogram",
    "CoverRectangle",
    "Subtitles",
    "DrawText",
]
