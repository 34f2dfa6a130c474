"""Geometry filters: cropping, scaling, padding, flipping and overlays."""

from enum import auto
from typing import Optional, Union

from ..core.constants import APPEND_SEPARATOR
from ..core.enums import AspectRatio, EofAction, FilterEnum, Overlays, VideoSize, When
from ..core.function import ColorMixin, FilterFunction, number_or_expression
from ..core.validate import is_true, not_empty, not_null, range_check

Dimension = Union[int, float, str]


def _dimension(value: Dimension, label: str) -> Union[int, float, str]:
    """Accept a number (``-1`` keeps the aspect) or an expression such as ``iw/2``."""
    return number_or_expression(value, label, -2)


class Crop(FilterFunction):
    """Crop the input to ``w:h`` at ``x:y``.

    Example::

        Crop.the(640, 480, "(in_w-out_w)/2", 0).exact()
        # crop=640:480:(in_w-out_w)/2:0:exact=true
    """

    name = "crop"

    @classmethod
    def the(
        cls,
        width: Dimension,
        height: Dimension,
        x: Optional[Dimension] = None,
        y: Optional[Dimension] = None,
    ) -> "Crop":
        crop = cls()
        crop.add_base_arg("w", _dimension(width, "crop width"))
        crop.add_base_arg("h", _dimension(height, "crop height"))
        if x is not None or y is not None:
            crop.add_base_arg("x", _dimension(0 if x is None else x, "crop x"))
            crop.add_base_arg("y", _dimension(0 if y is None else y, "crop y"))
        return crop

    def keep_aspect(self, state: bool = True) -> "Crop":
        """Keep the display aspect ratio of the input."""
        return self.status("keep_aspect", state)

    def exact(self, state: bool = True) -> "Crop":
        """Crop precisely; otherwise chroma subsampling may round the window."""
        return self.status("exact", state)


class Scale(FilterFunction):
    """Resize the input with libswscale.

    ``Scale.to(1280, 720)`` renders ``scale=1280:720``; a named size renders
    ``scale=s=hd720``.
    """

    name = "scale"

    class Flag(FilterEnum):
        FAST_BILINEAR = auto()
        BILINEAR = auto()
        BICUBIC = auto()
        EXPERIMENTAL = auto()
        NEIGHBOR = auto()
        AREA = auto()
        BICUBLIN = auto()
        GAUSS = auto()
        SINC = auto()
        LANCZOS = auto()
        SPLINE = auto()
        PRINT_INFO = auto()
        ACCURATE_RND = auto()
        FULL_CHROMA_INT = auto()
        FULL_CHROMA_INP = auto()
        BITEXACT = auto()

    class ColorMatrix(FilterEnum):
        AUTO = auto()
        BT709 = auto()
        FCC = auto()
        BT601 = auto()
        BT470 = auto()
        SMPTE170M = auto()
        SMPTE240M = auto()
        BT2020 = auto()

    class Range(FilterEnum):
        AUTO = auto()
        JPEG = auto()
        MPEG = auto()
        TV = auto()
        PC = auto()

    @classmethod
    def to(cls, width: Union[Dimension, VideoSize], height: Optional[Dimension] = None) -> "Scale":
        scale = cls()
        if isinstance(width, VideoSize):
            is_true(height is None, "A video size already sets the height")
            return scale.add_arg("s", width)
        not_null(height, "The output height is required when the width is not a video size")
        scale.add_base_arg("w", _dimension(width, "output width"))
        scale.add_base_arg("h", _dimension(height, "output height"))
        return scale

    def eval(self, when: When) -> "Scale":
        return self.add_arg("eval", When.parse(when))

    def interlaced(self, state: bool = True) -> "Scale":
        return self.status("interl", state)

    def flags(self, *flags: "Scale.Flag") -> "Scale":
        not_empty(list(flags), "At least one scaler flag is required")
        checked = [Scale.Flag.parse(f) for f in flags]
        return self.add_arg2("flags", APPEND_SEPARATOR, *checked)

    def param0(self, value: float) -> "Scale":
        """Tuning parameter of the bicubic, gauss and lanczos scalers."""
        return self.add_arg("param0", value)

    def param1(self, value: float) -> "Scale":
        return self.add_arg("param1", value)

    def in_color_matrix(self, matrix: "Scale.ColorMatrix") -> "Scale":
        return self.add_arg("in_color_matrix", Scale.ColorMatrix.parse(matrix))

    def out_color_matrix(self, matrix: "Scale.ColorMatrix") -> "Scale":
        return self.add_arg("out_color_matrix", Scale.ColorMatrix.parse(matrix))

    def in_range(self, value: "Scale.Range") -> "Scale":
        return self.add_arg("in_range", Scale.Range.parse(value))

    def out_range(self, value: "Scale.Range") -> "Scale":
        return self.add_arg("out_range", Scale.Range.parse(value))

    def force_original_aspect_ratio(self, mode: AspectRatio) -> "Scale":
        return self.add_arg("force_original_aspect_ratio", AspectRatio.parse(mode))

    def force_divisible_by(self, value: int) -> "Scale":
        """Only meaningful together with :meth:`force_original_aspect_ratio`."""
        range_check(value, 1, 256)
        return self.add_arg("force_divisible_by", value)


class Pad(ColorMixin, FilterFunction):
    """Add padding around the input and place the original at ``x:y``."""

    name = "pad"

    @classmethod
    def of(cls) -> "Pad":
        return cls()

    def size(self, width: Dimension, height: Dimension) -> "Pad":
        width = _dimension(width, "pad width")
        height = _dimension(height, "pad height")
        return self.add_arg("w", width).add_arg("h", height)

    def position(self, x: Dimension, y: Dimension) -> "Pad":
        x = _dimension(x, "pad x")
        y = _dimension(y, "pad y")
        return self.add_arg("x", x).add_arg("y", y)

    def eval(self, when: When) -> "Pad":
        return self.add_arg("eval", When.parse(when))

    def aspect(self, numerator: int, denominator: int = 1) -> "Pad":
        """Pad to a display aspect ratio such as ``16/9``."""
        range_check(numerator, 0, 2147483647)
        range_check(denominator, 1, 2147483647)
        return self.add_arg("aspect", f"{numerator}/{denominator}")


class Flip(FilterFunction):
    """Mirror the input; ``vertical()`` renders ``vflip``, ``horizontal()`` ``hflip``."""

    def __init__(self, filter_name: str) -> None:
        super().__init__()
        self._filter_name = filter_name

    @classmethod
    def vertical(cls) -> "Flip":
        return cls("vflip")

    @classmethod
    def horizontal(cls) -> "Flip":
        return cls("hflip")

    def get_name(self) -> str:
        return self._filter_name


class Transpose(FilterFunction):
    """Rotate by 90 degrees, optionally flipping."""

    name = "transpose"

    class Direction(FilterEnum):
        CCLOCK_FLIP = auto()
        CLOCK = auto()
        CCLOCK = auto()
        CLOCK_FLIP = auto()

    class Passthrough(FilterEnum):
        NONE = auto()
        PORTRAIT = auto()
        LANDSCAPE = auto()

    @classmethod
    def direction(cls, direction: "Transpose.Direction") -> "Transpose":
        return cls().add_arg("dir", Transpose.Direction.parse(direction))

    def passthrough(self, mode: "Transpose.Passthrough") -> "Transpose":
        """Skip the transposition when the input already has this orientation."""
        return self.add_arg("passthrough", Transpose.Passthrough.parse(mode))


class Overlay(FilterFunction):
    """Draw the second input on top of the first at ``x:y``."""

    name = "overlay"

    class Format(FilterEnum):
        YUV420 = auto()
        YUV420P10 = auto()
        YUV422 = auto()
        YUV422P10 = auto()
        YUV444 = auto()
        RGB = auto()
        GBRP = auto()
        AUTO = auto()

    class Alpha(FilterEnum):
        STRAIGHT = auto()
        PREMULTIPLIED = auto()

    @classmethod
    def at(cls, x: Dimension, y: Dimension) -> "Overlay":
        overlay = cls()
        overlay.add_base_arg("x", _dimension(x, "overlay x"))
        overlay.add_base_arg("y", _dimension(y, "overlay y"))
        return overlay

    @classmethod
    def anchor(cls, position: Overlays, margin_x: int = 0, margin_y: Optional[int] = None) -> "Overlay":
        """Place the overlay at a named anchor, ``margin`` pixels from the edges.

        Example::

            Overlay.anchor(Overlays.RIGHT_BOTTOM, 10)
            # overlay=main_w-overlay_w-10:main_h-overlay_h-10
        """
        not_null(position, "The overlay position cannot be empty")
        range_check(margin_x, 0, 2147483647)
        if margin_y is None:
            margin_y = margin_x
        range_check(margin_y, 0, 2147483647)
        position = Overlays.parse(position)
        return cls.at(position.x(margin_x), position.y(margin_y))

    def eval(self, when: When) -> "Overlay":
        return self.add_arg("eval", When.parse(when))

    def eof_action(self, action: EofAction) -> "Overlay":
        return self.add_arg("eof_action", EofAction.parse(action))

    def shortest(self, state: bool = True) -> "Overlay":
        return self.status("shortest", state)

    def repeat_last(self, state: bool = True) -> "Overlay":
        return self.status("repeatlast", state)

    def format(self, pixel_format: "Overlay.Format") -> "Overlay":
        return self.add_arg("format", Overlay.Format.parse(pixel_format))

    def alpha(self, mode: "Overlay.Alpha") -> "Overlay":
        return self.add_arg("alpha", Overlay.Alpha.parse(mode))
