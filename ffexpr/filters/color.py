"""Color correction, keying and pixel-format filters."""

import math
from enum import auto
from typing import Optional, Union

from ..core.constants import APPEND_SEPARATOR, LIST_SEPARATOR, PARAMETER_SEPARATOR
from ..core.enums import Color, FilterEnum, PixelFormat, PlaneComponent, When
from ..core.function import FilterFunction, number_or_expression
from ..core.sanitize import escape
from ..core.validate import check_extension, check_file, not_empty, range_check
from ..core.values import expand_all, to_value

Number = Union[int, float]


class Eq(FilterFunction):
    """Brightness, contrast, saturation and gamma.

    Every setter takes either a number, checked against ffmpeg's range, or an
    expression string that is passed through escaped.
    """

    name = "eq"

    @classmethod
    def of(cls) -> "Eq":
        return cls()

    def _set(self, key: str, value: Union[Number, str], minimum: float, maximum: float) -> "Eq":
        if isinstance(value, str):
            not_empty(value, f"The {key} expression cannot be empty")
            return self.add_arg(key, escape(value, quote=True))
        range_check(value, minimum, maximum)
        return self.add_arg(key, value)

    def contrast(self, value: Union[Number, str]) -> "Eq":
        return self._set("contrast", value, -1000.0, 1000.0)

    def brightness(self, value: Union[Number, str]) -> "Eq":
        return self._set("brightness", value, -1.0, 1.0)

    def saturation(self, value: Union[Number, str]) -> "Eq":
        return self._set("saturation", value, 0.0, 3.0)

    def gamma(self, value: Union[Number, str]) -> "Eq":
        return self._set("gamma", value, 0.1, 10.0)

    def gamma_red(self, value: Union[Number, str]) -> "Eq":
        return self._set("gamma_r", value, 0.1, 10.0)

    def gamma_green(self, value: Union[Number, str]) -> "Eq":
        return self._set("gamma_g", value, 0.1, 10.0)

    def gamma_blue(self, value: Union[Number, str]) -> "Eq":
        return self._set("gamma_b", value, 0.1, 10.0)

    def gamma_weight(self, value: Union[Number, str]) -> "Eq":
        return self._set("gamma_weight", value, 0.0, 1.0)

    def eval(self, when: When) -> "Eq":
        return self.add_arg("eval", When.parse(when))


class Hue(FilterFunction):
    """Hue rotation, saturation and brightness."""

    name = "hue"

    @classmethod
    def of(cls) -> "Hue":
        return cls()

    def angle(self, degrees: Union[Number, str]) -> "Hue":
        """Hue angle in degrees (``h``); mutually exclusive with :meth:`radians`."""
        return self.add_arg("h", number_or_expression(degrees, "hue angle"))

    def radians(self, value: Union[Number, str]) -> "Hue":
        return self.add_arg("H", number_or_expression(value, "hue angle"))

    def saturation(self, value: Union[Number, str]) -> "Hue":
        return self.add_arg("s", number_or_expression(value, "hue saturation", -10, 10))

    def brightness(self, value: Union[Number, str]) -> "Hue":
        return self.add_arg("b", number_or_expression(value, "hue brightness", -10, 10))


class Curves(FilterFunction):
    """Color adjustments with per-component key-point curves."""

    name = "curves"

    class ColorPreset(FilterEnum):
        NONE = auto()
        COLOR_NEGATIVE = auto()
        CROSS_PROCESS = auto()
        DARKER = auto()
        INCREASE_CONTRAST = auto()
        LIGHTER = auto()
        LINEAR_CONTRAST = auto()
        MEDIUM_CONTRAST = auto()
        NEGATIVE = auto()
        STRONG_CONTRAST = auto()
        VINTAGE = auto()

    @classmethod
    def of(cls) -> "Curves":
        return cls()

    def preset(self, preset: "Curves.ColorPreset") -> "Curves":
        return self.add_arg("preset", Curves.ColorPreset.parse(preset))

    def _points(self, key: str, key_points: str) -> "Curves":
        not_empty(key_points, "Curve key points cannot be empty")
        return self.add_arg(key, escape(key_points, quote=True))

    def master(self, key_points: str) -> "Curves":
        """Key points such as ``"0/0 0.5/0.6 1/1"`` applied after the per-channel curves."""
        return self._points("m", key_points)

    def red(self, key_points: str) -> "Curves":
        return self._points("r", key_points)

    def green(self, key_points: str) -> "Curves":
        return self._points("g", key_points)

    def blue(self, key_points: str) -> "Curves":
        return self._points("b", key_points)

    def all(self, key_points: str) -> "Curves":
        return self._points("all", key_points)

    def psfile(self, file_path: str) -> "Curves":
        """Photoshop ``.acv`` curves file."""
        check_extension(file_path, "acv")
        check_file(file_path)
        return self.add_arg("psfile", escape(file_path, quote=True))

    def plot(self, target: str) -> "Curves":
        """Write a gnuplot script of the curves to ``target``."""
        not_empty(target, "The plot target cannot be empty")
        return self.add_arg("plot", escape(target, quote=True))


class ColorKey(FilterFunction):
    """RGB color keying, rendered positionally as ``color:similarity:blend``."""

    name = "colorkey"

    def __init__(self, color: Union[Color, str]) -> None:
        super().__init__()
        self._color = color
        self._similarity = 0.01
        self._blend = 0.0

    @classmethod
    def of(
        cls,
        color: Union[Color, str],
        similarity: Optional[float] = None,
        blend: Optional[float] = None,
    ) -> "ColorKey":
        not_empty(to_value(color), "The key color cannot be empty")
        key = cls(color)
        if similarity is not None:
            key.similarity(similarity)
        if blend is not None:
            key.blend(blend)
        return key

    def similarity(self, similarity: float) -> "ColorKey":
        """Similarity to the key color; 0.01 matches only the exact color."""
        range_check(similarity, 0.01, 1.0)
        self._similarity = similarity
        return self

    def blend(self, blend: float) -> "ColorKey":
        """0 makes pixels fully transparent or not at all; higher values blend."""
        range_check(blend, 0.0, 1.0)
        self._blend = blend
        return self

    def get_tokens(self) -> list[str]:
        head = [to_value(self._color), to_value(float(self._similarity)), to_value(float(self._blend))]
        return head + super().get_tokens()


class ColorChannelMixer(FilterFunction):
    """Remix color channels; each output channel is a weighted sum of rr:rg:rb:ra.

    Rendered positionally in ffmpeg's option order: red, green, blue and alpha
    rows, then the optional preserve mode and amount.
    """

    name = "colorchannelmixer"

    class Mode(FilterEnum):
        NONE = auto()
        LUM = auto()
        MAX = auto()
        AVG = auto()
        SUM = auto()
        NRM = auto()
        PWR = auto()

    def __init__(self) -> None:
        super().__init__()
        self._rows: dict[str, tuple[float, float, float, float]] = {
            "r": (1, 0, 0, 0),
            "g": (0, 1, 0, 0),
            "b": (0, 0, 1, 0),
            "a": (0, 0, 0, 1),
        }
        self._mode: Optional[ColorChannelMixer.Mode] = None
        self._amount: Optional[float] = None

    @classmethod
    def the(cls) -> "ColorChannelMixer":
        return cls()

    def _adjust(self, row: str, red: float, green: float, blue: float, alpha: float) -> "ColorChannelMixer":
        for weight in (red, green, blue, alpha):
            range_check(weight, -2.0, 2.0)
        self._rows[row] = (red, green, blue, alpha)
        return self

    def red(self, red: float, green: float, blue: float, alpha: float) -> "ColorChannelMixer":
        return self._adjust("r", red, green, blue, alpha)

    def green(self, red: float, green: float, blue: float, alpha: float) -> "ColorChannelMixer":
        return self._adjust("g", red, green, blue, alpha)

    def blue(self, red: float, green: float, blue: float, alpha: float) -> "ColorChannelMixer":
        return self._adjust("b", red, green, blue, alpha)

    def alpha(self, red: float, green: float, blue: float, alpha: float) -> "ColorChannelMixer":
        return self._adjust("a", red, green, blue, alpha)

    def mode(self, mode: "ColorChannelMixer.Mode") -> "ColorChannelMixer":
        self._mode = ColorChannelMixer.Mode.parse(mode)
        return self

    def amount(self, amount: float) -> "ColorChannelMixer":
        range_check(amount, 0.0, 1.0)
        self._amount = amount
        return self

    def get_tokens(self) -> list[str]:
        tokens = [
            expand_all(PARAMETER_SEPARATOR, [float(w) for w in weights])
            for weights in self._rows.values()
        ]
        if self._mode is not None:
            tokens.append(to_value(self._mode))
            if self._amount is not None:
                tokens.append(to_value(float(self._amount)))
        return tokens + super().get_tokens()


class Negate(FilterFunction):
    """Negate (invert) the input."""

    name = "negate"

    @classmethod
    def of(cls) -> "Negate":
        return cls()

    def components(self, *components: PlaneComponent) -> "Negate":
        not_empty(list(components), "At least one component is required")
        checked = [PlaneComponent.parse(c) for c in components]
        return self.add_arg2("components", APPEND_SEPARATOR, *checked)

    def negate_alpha(self) -> "Negate":
        return self.enable("negate_alpha")


class Format(FilterFunction):
    """Convert to one of the listed pixel formats (``format=gray|yuv420p``)."""

    name = "format"

    @classmethod
    def of(cls, *formats: Union[PixelFormat, str]) -> "Format":
        not_empty(list(formats), "At least one pixel format is required")
        return cls().add_arg2(None, LIST_SEPARATOR, *formats)


class Vignette(FilterFunction):
    """Natural or reverse vignetting."""

    name = "vignette"

    class Mode(FilterEnum):
        FORWARD = auto()
        BACKWARD = auto()

    @classmethod
    def of(cls) -> "Vignette":
        return cls()

    def angle(self, value: Union[Number, str]) -> "Vignette":
        """Lens angle in radians, 0 to PI/2 (default PI/5), or an expression."""
        return self.add_arg("a", number_or_expression(value, "vignette angle", 0, math.pi / 2))

    def coordinates(self, x0: Union[Number, str], y0: Union[Number, str]) -> "Vignette":
        x0 = number_or_expression(x0, "vignette x0")
        y0 = number_or_expression(y0, "vignette y0")
        return self.add_arg("x0", x0).add_arg("y0", y0)

    def mode(self, mode: "Vignette.Mode") -> "Vignette":
        return self.add_arg("mode", Vignette.Mode.parse(mode))

    def eval(self, when: When) -> "Vignette":
        return self.add_arg("eval", When.parse(when))

    def dither(self, state: bool = True) -> "Vignette":
        return self.status("dither", state)

    def aspect(self, value: Union[Number, str]) -> "Vignette":
        return self.add_arg("aspect", number_or_expression(value, "vignette aspect", 0, 1))
