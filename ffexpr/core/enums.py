"""Enumerated option values shared by several filters.

Every member renders through :meth:`FilterEnum.command`. Members declared
with ``auto()`` render as their lowercased identifier; members given an
explicit string render that string instead, which lets a descriptive
identifier carry a short ffmpeg alias (``Parity.TOP_FIELD_FIRST`` -> ``tff``).
"""

from enum import Enum, auto

from .errors import InvalidArgument


class FilterEnum(str, Enum):
    """Base class for enumerations rendered into filter arguments."""

    def _generate_next_value_(name, start, count, last_values):
        return name.lower()

    def command(self) -> str:
        """Text written into the filter expression."""
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value):
        """Coerce a member, its rendered text or its identifier into a member.

        Raises:
            InvalidArgument: If ``value`` names no member.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        raise InvalidArgument(f"{value!r} is not a valid {cls.__name__}, expected one of {[m.value for m in cls]}")


class When(FilterEnum):
    """When expressions are evaluated."""
    INIT = auto()
    FRAME = auto()


class Parity(FilterEnum):
    """Assumed picture field parity of interlaced input."""
    AUTO = auto()
    TOP_FIELD_FIRST = "tff"
    BOTTOM_FIELD_FIRST = "bff"


class Deinterlace(FilterEnum):
    """Which frames a deinterlacer touches."""
    ALL = auto()
    INTERLACED = auto()


class AspectRatio(FilterEnum):
    """Modes of ``force_original_aspect_ratio``."""
    DISABLE = auto()
    DECREASE = auto()
    INCREASE = auto()


class EofAction(FilterEnum):
    """Action taken when the secondary input ends."""
    REPEAT = auto()
    END_ALL = "endall"
    PASS = auto()


class PlaneComponent(FilterEnum):
    Y = auto()
    U = auto()
    V = auto()
    A = auto()
    R = auto()
    G = auto()
    B = auto()


class PixelFormat(FilterEnum):
    """Frequently used pixel formats (``ffmpeg -pix_fmts`` lists them all)."""
    GRAY = auto()
    GRAY10LE = auto()
    YUV420P = auto()
    YUV422P = auto()
    YUV444P = auto()
    YUV411P = auto()
    YUVJ420P = auto()
    YUVA420P = auto()
    YUV420P10LE = auto()
    NV12 = auto()
    NV21 = auto()
    RGB24 = auto()
    BGR24 = auto()
    RGBA = auto()
    BGRA = auto()
    ARGB = auto()
    ABGR = auto()
    ZERO_RGB = "0rgb"
    RGB_ZERO = "rgb0"
    GBRP = auto()
    GBRAP = auto()


class VideoSize(FilterEnum):
    """Named frame sizes understood by ffmpeg's size parser."""
    FILM = auto()
    NTSC = auto()
    QNTSC = auto()
    SNTSC = auto()
    PAL = auto()
    QPAL = auto()
    SPAL = auto()
    CIF = auto()
    CIF4 = auto()
    CIF16 = auto()
    SQCIF = auto()
    QCIF = auto()
    NHD = auto()
    QHD = auto()
    HD480 = auto()
    HD720 = auto()
    HD1080 = auto()
    UHD2160 = auto()
    UHD4320 = auto()
    CGA = auto()
    EGA = auto()
    VGA = auto()
    QVGA = auto()
    HVGA = auto()
    SVGA = auto()
    WVGA = auto()
    QQVGA = auto()
    HQVGA = auto()
    WQVGA = auto()
    FWQVGA = auto()
    XGA = auto()
    SXGA = auto()
    WXGA = auto()
    UXGA = auto()
    WSXGA = auto()
    WUXGA = auto()
    QXGA = auto()
    QSXGA = auto()
    WOXGA = auto()
    WQSXGA = auto()
    WQUXGA = auto()
    HSXGA = auto()
    WHSXGA = auto()
    WHUXGA = auto()
    TWO_K = "2k"
    TWO_K_FLAT = "2kflat"
    TWO_K_SCOPE = "2kscope"
    TWO_K_DCI = "2kdci"
    FOUR_K = "4k"
    FOUR_K_FLAT = "4kflat"
    FOUR_K_SCOPE = "4kscope"
    FOUR_K_DCI = "4kdci"

    @property
    def dimensions(self) -> tuple[int, int]:
        """Width and height in pixels."""
        width, height = _VIDEO_SIZES[self.name].split("x")
        return int(width), int(height)


_VIDEO_SIZES = {
    "FILM": "352x240", "NTSC": "720x480", "QNTSC": "352x240", "SNTSC": "640x480",
    "PAL": "720x576", "QPAL": "352x288", "SPAL": "768x576",
    "CIF": "352x288", "CIF4": "704x576", "CIF16": "1408x1152", "SQCIF": "128x96", "QCIF": "176x144",
    "NHD": "640x360", "QHD": "960x540", "HD480": "852x480", "HD720": "1280x720", "HD1080": "1920x1080",
    "UHD2160": "3840x2160", "UHD4320": "7680x4320",
    "CGA": "320x200", "EGA": "640x350",
    "VGA": "640x480", "QVGA": "320x240", "HVGA": "480x320", "SVGA": "800x600", "WVGA": "852x480",
    "QQVGA": "160x120", "HQVGA": "240x160", "WQVGA": "400x240", "FWQVGA": "432x240",
    "XGA": "1024x768", "SXGA": "1280x1024", "WXGA": "1366x768", "UXGA": "1600x1200",
    "WSXGA": "1600x1024", "WUXGA": "1920x1200", "QXGA": "2048x1536", "QSXGA": "2560x2048",
    "WOXGA": "2560x1600", "WQSXGA": "3200x2048", "WQUXGA": "3840x2400",
    "HSXGA": "5120x4096", "WHSXGA": "6400x4096", "WHUXGA": "7680x4800",
    "TWO_K": "2048x1080", "TWO_K_FLAT": "1998x1080", "TWO_K_SCOPE": "2048x858", "TWO_K_DCI": "2048x1080",
    "FOUR_K": "4096x2160", "FOUR_K_FLAT": "3996x2160", "FOUR_K_SCOPE": "4096x1716", "FOUR_K_DCI": "4096x2160",
}


class Color(FilterEnum):
    """Named colors from ffmpeg's color table, rendered by their ffmpeg name."""
    RANDOM = "random"
    ALICE_BLUE = "AliceBlue"
    ANTIQUE_WHITE = "AntiqueWhite"
    AQUA = "Aqua"
    AQUA_MARINE = "AquaMarine"
    AZURE = "Azure"
    BEIGE = "Beige"
    BISQUE = "Bisque"
    BLACK = "Black"
    BLANCHED_ALMOND = "BlanchedAlmond"
    BLUE = "Blue"
    BLUE_VIOLET = "BlueViolet"
    BROWN = "Brown"
    BURLY_WOOD = "BurlyWood"
    CADET_BLUE = "CadetBlue"
    CHARTREUSE = "Chartreuse"
    CHOCOLATE = "Chocolate"
    CORAL = "Coral"
    CORNFLOWER_BLUE = "CornflowerBlue"
    CORNSILK = "Cornsilk"
    CRIMSON = "Crimson"
    CYAN = "Cyan"
    DARK_BLUE = "DarkBlue"
    DARK_CYAN = "DarkCyan"
    DARK_GOLDEN_ROD = "DarkGoldenRod"
    DARK_GRAY = "DarkGray"
    DARK_GREEN = "DarkGreen"
    DARK_KHAKI = "DarkKhaki"
    DARK_MAGENTA = "DarkMagenta"
    DARK_OLIVE_GREEN = "DarkOliveGreen"
    DARK_ORANGE = "DarkOrange"
    DARK_ORCHID = "DarkOrchid"
    DARK_RED = "DarkRed"
    DARK_SALMON = "DarkSalmon"
    DARK_SEA_GREEN = "DarkSeaGreen"
    DARK_SLATE_BLUE = "DarkSlateBlue"
    DARK_SLATE_GRAY = "DarkSlateGray"
    DARK_TURQUOISE = "DarkTurquoise"
    DARK_VIOLET = "DarkViolet"
    DEEP_PINK = "DeepPink"
    DEEP_SKY_BLUE = "DeepSkyBlue"
    DIM_GRAY = "DimGray"
    DODGER_BLUE = "DodgerBlue"
    FIRE_BRICK = "FireBrick"
    FLORAL_WHITE = "FloralWhite"
    FOREST_GREEN = "ForestGreen"
    FUCHSIA = "Fuchsia"
    GAINSBORO = "Gainsboro"
    GHOST_WHITE = "GhostWhite"
    GOLD = "Gold"
    GOLDEN_ROD = "GoldenRod"
    GRAY = "Gray"
    GREEN = "Green"
    GREEN_YELLOW = "GreenYellow"
    HONEY_DEW = "HoneyDew"
    HOT_PINK = "HotPink"
    INDIAN_RED = "IndianRed"
    INDIGO = "Indigo"
    IVORY = "Ivory"
    KHAKI = "Khaki"
    LAVENDER = "Lavender"
    LAVENDER_BLUSH = "LavenderBlush"
    LAWN_GREEN = "LawnGreen"
    LEMON_CHIFFON = "LemonChiffon"
    LIGHT_BLUE = "LightBlue"
    LIGHT_CORAL = "LightCoral"
    LIGHT_CYAN = "LightCyan"
    LIGHT_GOLDEN_ROD_YELLOW = "LightGoldenRodYellow"
    LIGHT_GREEN = "LightGreen"
    LIGHT_GREY = "LightGrey"
    LIGHT_PINK = "LightPink"
    LIGHT_SALMON = "LightSalmon"
    LIGHT_SEA_GREEN = "LightSeaGreen"
    LIGHT_SKY_BLUE = "LightSkyBlue"
    LIGHT_SLATE_GRAY = "LightSlateGray"
    LIGHT_STEEL_BLUE = "LightSteelBlue"
    LIGHT_YELLOW = "LightYellow"
    LIME = "Lime"
    LIME_GREEN = "LimeGreen"
    LINEN = "Linen"
    MAGENTA = "Magenta"
    MAROON = "Maroon"
    MEDIUM_AQUA_MARINE = "MediumAquaMarine"
    MEDIUM_BLUE = "MediumBlue"
    MEDIUM_ORCHID = "MediumOrchid"
    MEDIUM_PURPLE = "MediumPurple"
    MEDIUM_SEA_GREEN = "MediumSeaGreen"
    MEDIUM_SLATE_BLUE = "MediumSlateBlue"
    MEDIUM_SPRING_GREEN = "MediumSpringGreen"
    MEDIUM_TURQUOISE = "MediumTurquoise"
    MEDIUM_VIOLET_RED = "MediumVioletRed"
    MIDNIGHT_BLUE = "MidnightBlue"
    MINT_CREAM = "MintCream"
    MISTY_ROSE = "MistyRose"
    MOCCASIN = "Moccasin"
    NAVAJO_WHITE = "NavajoWhite"
    NAVY = "Navy"
    OLD_LACE = "OldLace"
    OLIVE = "Olive"
    OLIVE_DRAB = "OliveDrab"
    ORANGE = "Orange"
    ORANGERED = "OrangeRed"
    ORCHID = "Orchid"
    PALE_GOLDEN_ROD = "PaleGoldenRod"
    PALE_GREEN = "PaleGreen"
    PALE_TURQUOISE = "PaleTurquoise"
    PALE_VIOLET_RED = "PaleVioletRed"
    PAPAYA_WHIP = "PapayaWhip"
    PEACH_PUFF = "PeachPuff"
    PERU = "Peru"
    PINK = "Pink"
    PLUM = "Plum"
    POWDER_BLUE = "PowderBlue"
    PURPLE = "Purple"
    RED = "Red"
    ROSY_BROWN = "RosyBrown"
    ROYAL_BLUE = "RoyalBlue"
    SADDLE_BROWN = "SaddleBrown"
    SALMON = "Salmon"
    SANDY_BROWN = "SandyBrown"
    SEA_GREEN = "0x2E8B57"
    SEA_SHELL = "SeaShell"
    SIENNA = "Sienna"
    SILVER = "Silver"
    SKY_BLUE = "SkyBlue"
    SLATE_BLUE = "SlateBlue"
    SLATE_GRAY = "SlateGray"
    SNOW = "Snow"
    SPRING_GREEN = "SpringGreen"
    STEEL_BLUE = "SteelBlue"
    TAN = "Tan"
    TEAL = "Teal"
    THISTLE = "Thistle"
    TOMATO = "Tomato"
    TURQUOISE = "Turquoise"
    VIOLET = "Violet"
    WHEAT = "Wheat"
    WHITE = "White"
    WHITE_SMOKE = "WhiteSmoke"
    YELLOW = "Yellow"
    YELLOW_GREEN = "YellowGreen"


class Overlays(Enum):
    """Overlay anchor positions as ``(x, y)`` expression templates.

    ``%s`` slots are filled with the margin passed to :meth:`x` / :meth:`y`.
    """
    CENTER = ("(main_w-overlay_w)/2", "(main_h-overlay_h)/2")
    LEFT_TOP = ("%s", "%s")
    LEFT_CENTER = ("%s", "(main_h-overlay_h)/2")
    RIGHT_TOP = ("main_w-overlay_w-%s", "%s")
    RIGHT_CENTER = ("main_w-overlay_w-%s", "(main_h-overlay_h)/2")
    RIGHT_BOTTOM = ("main_w-overlay_w-%s", "main_h-overlay_h-%s")
    LEFT_BOTTOM = ("%s", "main_h-overlay_h-%s")

    @classmethod
    def parse(cls, value) -> "Overlays":
        """Coerce a member or its identifier (``"right_bottom"``) into a member."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        raise InvalidArgument(f"{value!r} is not a valid {cls.__name__}, expected one of {list(cls.__members__)}")

    def x(self, margin: object = 0) -> str:
        return _fill(self.value[0], margin)

    def y(self, margin: object = 0) -> str:
        return _fill(self.value[1], margin)


def _fill(template: str, margin: object) -> str:
    if "%s" not in template:
        return template
    from .values import to_value
    return template % to_value(margin)
