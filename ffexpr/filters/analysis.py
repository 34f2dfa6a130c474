"""Visualization filters for codec and histogram analysis."""

from enum import auto
from typing import Optional, Union

from ..core.constants import APPEND_SEPARATOR
from ..core.enums import Color, FilterEnum
from ..core.function import FilterFunction, color_text
from ..core.validate import not_empty, range_check


class CodecView(FilterFunction):
    """Visualize information exported by some codecs (motion vectors, QP, block types).

    The decoder must export the data, e.g. ``-flags2 +export_mvs``.
    """

    name = "codecview"

    class MotionVector(FilterEnum):
        PF = auto()  # forward predicted MVs of P-frames
        BF = auto()  # forward predicted MVs of B-frames
        BB = auto()  # backward predicted MVs of B-frames

    class MotionVectorType(FilterEnum):
        FP = auto()
        BP = auto()

    class FrameType(FilterEnum):
        IF = auto()
        PF = auto()
        BF = auto()

    @classmethod
    def of(cls) -> "CodecView":
        return cls()

    def block(self) -> "CodecView":
        """Display block partition structure."""
        return self.add_arg("block")

    def motion_vectors(self, *vectors: "CodecView.MotionVector") -> "CodecView":
        not_empty(list(vectors), "At least one motion vector kind is required")
        checked = [CodecView.MotionVector.parse(v) for v in vectors]
        return self.add_arg2("mv", APPEND_SEPARATOR, *checked)

    def motion_vector_types(self, *types: "CodecView.MotionVectorType") -> "CodecView":
        not_empty(list(types), "At least one motion vector type is required")
        checked = [CodecView.MotionVectorType.parse(t) for t in types]
        return self.add_arg2("mvt", APPEND_SEPARATOR, *checked)

    def frame_types(self, *types: "CodecView.FrameType") -> "CodecView":
        not_empty(list(types), "At least one frame type is required")
        checked = [CodecView.FrameType.parse(t) for t in types]
        return self.add_arg2("ft", APPEND_SEPARATOR, *checked)

    def qp(self, state: bool = True) -> "CodecView":
        return self.status("qp", state)


class Thistogram(FilterFunction):
    """Temporal color histogram of the video frames."""

    name = "thistogram"

    class DisplayMode(FilterEnum):
        STACK = auto()
        PARADE = auto()
        OVERLAY = auto()

    class LevelsMode(FilterEnum):
        LINEAR = auto()
        LOGARITHMIC = auto()

    class Slide(FilterEnum):
        FRAME = auto()
        REPLACE = auto()
        SCROLL = auto()
        RSCROLL = auto()
        PICTURE = auto()

    @classmethod
    def of(cls) -> "Thistogram":
        return cls()

    def width(self, width: int) -> "Thistogram":
        """Histogram width; 0 uses the input height."""
        range_check(width, 0, 8192)
        return self.add_arg("w", width)

    def display_mode(self, mode: "Thistogram.DisplayMode") -> "Thistogram":
        return self.add_arg("d", Thistogram.DisplayMode.parse(mode))

    def levels_mode(self, mode: "Thistogram.LevelsMode") -> "Thistogram":
        return self.add_arg("m", Thistogram.LevelsMode.parse(mode))

    def components(self, components: int) -> "Thistogram":
        """Bit mask of the components to display (1 to 15, default 7)."""
        range_check(components, 1, 15)
        return self.add_arg("c", components)

    def bgopacity(self, opacity: float) -> "Thistogram":
        range_check(opacity, 0.0, 1.0)
        return self.add_arg("b", opacity)

    def envelope(self, state: bool = True) -> "Thistogram":
        return self.status("e", state)

    def envelope_color(self, color: Union[Color, str], alpha: Optional[float] = 0) -> "Thistogram":
        return self.add_arg("ec", color_text(color, alpha or 0))

    def slide(self, slide: "Thistogram.Slide") -> "Thistogram":
        return self.add_arg("slide", Thistogram.Slide.parse(slide))
