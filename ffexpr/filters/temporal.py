"""Filters working across frames: fades, mixing and deinterlacing."""

from enum import auto
from typing import Union

from ..core.enums import Deinterlace, FilterEnum, Parity
from ..core.function import ColorMixin, FilterFunction
from ..core.validate import not_empty, range_check

Number = Union[int, float]


class Fade(ColorMixin, FilterFunction):
    """Fade the input in from or out to a color.

    Example::

        Fade.out().at(5, 1.5).color(Color.BLACK)
        # fade=t=out:st=5:d=1.5:color=Black
    """

    name = "fade"

    @classmethod
    def in_(cls) -> "Fade":
        return cls().add_arg("t", "in")

    @classmethod
    def out(cls) -> "Fade":
        return cls().add_arg("t", "out")

    def at(self, start_time: Number, duration: Number = 0) -> "Fade":
        """Start time and duration in seconds; a zero duration is left to ffmpeg."""
        range_check(start_time, 0, float("inf"))
        range_check(duration, 0, float("inf"))
        self.add_arg("st", start_time)
        if duration > 0:
            return self.add_arg("d", duration)
        return self.remove_arg("d")

    def frame(self, start_frame: int, frames: int = 25) -> "Fade":
        """Frame-based alternative to :meth:`at`."""
        range_check(start_frame, 0, 2147483647)
        range_check(frames, 1, 2147483647)
        return self.add_arg("s", start_frame).add_arg("n", frames)

    def alpha(self, state: bool = True) -> "Fade":
        """Fade only the alpha channel."""
        return self.status("alpha", state)


class Mix(FilterFunction):
    """Mix several video inputs into one, frame by frame."""

    name = "mix"

    class Duration(FilterEnum):
        LONGEST = auto()
        SHORTEST = auto()
        FIRST = auto()

    @classmethod
    def inputs(cls, inputs: int) -> "Mix":
        range_check(inputs, 2, 32767)
        return cls().add_arg("inputs", inputs)

    def weights(self, *weights: Number) -> "Mix":
        """Per-input weights; the last one is reused for any remaining inputs."""
        not_empty(list(weights), "At least one weight is required")
        return self.add_arg2("weights", " ", *weights)

    def scale(self, scale: Number) -> "Mix":
        """Divisor for the weighted sum; 0 uses the sum of the weights."""
        return self.add_arg("scale", scale)

    def planes(self, planes: int) -> "Mix":
        range_check(planes, 0, 15)
        return self.add_arg("planes", planes)

    def duration(self, duration: "Mix.Duration") -> "Mix":
        return self.add_arg("duration", Mix.Duration.parse(duration))


class Yadif(FilterFunction):
    """Yet another deinterlacing filter."""

    name = "yadif"

    class Mode(FilterEnum):
        SEND_FRAME = "0"
        SEND_FIELD = "1"
        SEND_FRAME_NOSPATIAL = "2"
        SEND_FIELD_NOSPATIAL = "3"

    @classmethod
    def of(cls) -> "Yadif":
        return cls()

    def mode(self, mode: "Yadif.Mode") -> "Yadif":
        return self.add_arg("mode", Yadif.Mode.parse(mode))

    def parity(self, parity: Parity) -> "Yadif":
        return self.add_arg("parity", Parity.parse(parity))

    def deint(self, deint: Deinterlace) -> "Yadif":
        return self.add_arg("deint", Deinterlace.parse(deint))


class Bwdif(FilterFunction):
    """Bob weaver deinterlacing filter."""

    name = "bwdif"

    class Mode(FilterEnum):
        SEND_FRAME = auto()
        SEND_FIELD = auto()

    @classmethod
    def of(cls) -> "Bwdif":
        return cls()

    def mode(self, mode: "Bwdif.Mode") -> "Bwdif":
        return self.add_arg("mode", Bwdif.Mode.parse(mode))

    def parity(self, parity: Parity) -> "Bwdif":
        return self.add_arg("parity", Parity.parse(parity))

    def deint(self, deint: Deinterlace) -> "Bwdif":
        return self.add_arg("deint", Deinterlace.parse(deint))
