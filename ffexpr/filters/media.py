"""Filters that draw external media or text onto the video.

File-referencing setters check the file when they are called, so a typo in a
font or subtitle path fails while the graph is built rather than when ffmpeg
runs.
"""

from enum import auto
from typing import Optional, Union

from ..core.constants import APPEND_SEPARATOR, PART_SEPARATOR, VALUE_SEPARATOR
from ..core.enums import Color, FilterEnum
from ..core.function import FilterFunction, color_text, number_or_expression
from ..core.sanitize import escape, quote_expression, sanitize_text_param, single_quote
from ..core.validate import check_file, not_empty, range_check

Expression = Union[int, float, str]


class CoverRectangle(FilterFunction):
    """Cover a rectangular object (found by ``find_rect``) with an image or a blur."""

    name = "cover_rect"

    class Mode(FilterEnum):
        COVER = auto()
        BLUR = auto()

    @classmethod
    def cover(cls, file_path: str) -> "CoverRectangle":
        """Create the filter with the covering image, which must exist."""
        check_file(file_path)
        return cls().add_arg("cover", escape(file_path, quote=True))

    def mode(self, mode: "CoverRectangle.Mode") -> "CoverRectangle":
        return self.add_arg("mode", CoverRectangle.Mode.parse(mode))


class Subtitles(FilterFunction):
    """Burn subtitles into the video using libass."""

    name = "subtitles"

    @classmethod
    def of(cls, file_path: str) -> "Subtitles":
        check_file(file_path)
        return cls().add_arg("f", escape(file_path, quote=True))

    def original_size(self, width: int, height: int) -> "Subtitles":
        """Size of the video the ASS script was authored for."""
        range_check(width, 1, 65536)
        range_check(height, 1, 65536)
        return self.add_arg("original_size", f"{width}x{height}")

    def fonts_dir(self, directory: str) -> "Subtitles":
        check_file(directory, is_directory=True)
        return self.add_arg("fontsdir", escape(directory, quote=True))

    def encoding(self, charset: str) -> "Subtitles":
        not_empty(charset, "The subtitles charset cannot be empty")
        return self.add_arg("charenc", quote_expression(charset))

    def stream_index(self, index: int) -> "Subtitles":
        range_check(index, -1, 2147483647)
        return self.add_arg("si", index)

    def force_style(self, **styles: object) -> "Subtitles":
        """Override ASS style fields, e.g. ``force_style(FontName="Arial", FontSize=24)``.

        The couples are joined as ``KEY=VALUE,...`` and single-quoted.
        """
        not_empty(styles, "At least one style override is required")
        couples = PART_SEPARATOR.join(f"{key}{VALUE_SEPARATOR}{value}" for key, value in styles.items())
        return self.add_arg("force_style", single_quote(couples))


class DrawText(FilterFunction):
    """Draw a text string or text from a file with libfreetype.

    Example::

        DrawText.of().text("Hello: world").font_size(24).position(10, 10)
        # drawtext=text='Hello\\: world':fontsize=24:x=10:y=10
    """

    name = "drawtext"

    class Expansion(FilterEnum):
        NONE = auto()
        NORMAL = auto()
        STRFTIME = auto()

    class LoadFlag(FilterEnum):
        DEFAULT = auto()
        NO_SCALE = auto()
        NO_HINTING = auto()
        RENDER = auto()
        NO_BITMAP = auto()
        VERTICAL_LAYOUT = auto()
        FORCE_AUTOHINT = auto()
        CROP_BITMAP = auto()
        PEDANTIC = auto()
        IGNORE_GLOBAL_ADVANCE_WIDTH = auto()
        NO_RECURSE = auto()
        IGNORE_TRANSFORM = auto()
        MONOCHROME = auto()
        LINEAR_DESIGN = auto()
        NO_AUTOHINT = auto()

    @classmethod
    def of(cls) -> "DrawText":
        return cls()

    # ── Text ──────────────────────────────────────────────────────

    def text(self, text: str) -> "DrawText":
        not_empty(text, "The text to draw cannot be empty")
        return self.add_arg("text", single_quote(sanitize_text_param(text)))

    def text_file(self, file_path: str) -> "DrawText":
        check_file(file_path)
        return self.add_arg("textfile", escape(file_path, quote=True))

    def reload(self, interval: int) -> "DrawText":
        """Reload the text file every ``interval`` frames."""
        range_check(interval, 0, 2147483647)
        return self.add_arg("reload", interval)

    def text_shaping(self, state: bool = True) -> "DrawText":
        return self.status("text_shaping", state)

    def expansion(self, mode: "DrawText.Expansion") -> "DrawText":
        return self.add_arg("expansion", DrawText.Expansion.parse(mode))

    def tab_size(self, size: int) -> "DrawText":
        range_check(size, 0, 2147483647)
        return self.add_arg("tabsize", size)

    def line_spacing(self, spacing: int) -> "DrawText":
        return self.add_arg("line_spacing", spacing)

    # ── Font ──────────────────────────────────────────────────────

    def font(self, font_path: str) -> "DrawText":
        """Font file used to draw the text; must exist."""
        check_file(font_path)
        return self.add_arg("fontfile", escape(font_path, quote=True))

    def font_size(self, size: Expression) -> "DrawText":
        return self.add_arg("fontsize", number_or_expression(size, "font size", 1, 2147483647))

    def font_color(self, color: Union[Color, str], alpha: float = 0) -> "DrawText":
        return self.add_arg("fontcolor", color_text(color, alpha))

    def font_color_expr(self, expression: str) -> "DrawText":
        not_empty(expression, "The font color expression cannot be empty")
        return self.add_arg("fontcolor_expr", quote_expression(expression))

    def load_flags(self, *flags: "DrawText.LoadFlag") -> "DrawText":
        not_empty(list(flags), "At least one load flag is required")
        checked = [DrawText.LoadFlag.parse(f) for f in flags]
        return self.add_arg2("ft_load_flags", APPEND_SEPARATOR, *checked)

    # ── Placement ─────────────────────────────────────────────────

    def position(self, x: Expression, y: Expression) -> "DrawText":
        x = number_or_expression(x, "text x")
        y = number_or_expression(y, "text y")
        return self.add_arg("x", x).add_arg("y", y)

    def alpha(self, alpha: Union[float, str]) -> "DrawText":
        return self.add_arg("alpha", number_or_expression(alpha, "text alpha", 0.0, 1.0))

    def fix_bounds(self, state: bool = True) -> "DrawText":
        return self.status("fix_bounds", state)

    # ── Box, border and shadow ────────────────────────────────────

    def box(self, state: bool = True) -> "DrawText":
        return self.status("box", state)

    def box_border_width(self, width: int) -> "DrawText":
        range_check(width, 0, 2147483647)
        return self.add_arg("boxborderw", width)

    def box_color(self, color: Union[Color, str], alpha: float = 0) -> "DrawText":
        return self.add_arg("boxcolor", color_text(color, alpha))

    def border_width(self, width: int) -> "DrawText":
        range_check(width, 0, 2147483647)
        return self.add_arg("borderw", width)

    def border_color(self, color: Union[Color, str], alpha: float = 0) -> "DrawText":
        return self.add_arg("bordercolor", color_text(color, alpha))

    def shadow(self, color: Union[Color, str], x: int, y: int) -> "DrawText":
        text = color_text(color)
        return self.add_arg("shadowcolor", text).add_arg("shadowx", x).add_arg("shadowy", y)

    # ── Timecode ──────────────────────────────────────────────────

    def timecode(self, timecode: str, rate: Optional[int] = None) -> "DrawText":
        """Initial timecode in ``hh:mm:ss[:;.]ff`` form, optionally with its frame rate."""
        not_empty(timecode, "The timecode cannot be empty")
        if rate is not None:
            range_check(rate, 1, 2147483647)
        self.add_arg("timecode", escape(timecode, quote=True))
        if rate is not None:
            self.add_arg("r", rate)
        return self

    def rate(self, rate: int) -> "DrawText":
        range_check(rate, 1, 2147483647)
        return self.add_arg("r", rate)

    def tc24hmax(self, state: bool = True) -> "DrawText":
        return self.status("tc24hmax", state)

    def base_time(self, microseconds: int) -> "DrawText":
        return self.add_arg("base_time", microseconds)

    def start_number(self, number: int) -> "DrawText":
        range_check(number, 0, 2147483647)
        return self.add_arg("start_number", number)
