"""Tests for value rendering, escaping and enumerated constants."""

from decimal import Decimal

import pytest

from ffexpr.core.enums import (
    AspectRatio,
    Color,
    EofAction,
    Overlays,
    Parity,
    PixelFormat,
    VideoSize,
    When,
)
from ffexpr.core.errors import InvalidArgument
from ffexpr.core.sanitize import (
    escape,
    quote_expression,
    sanitize_text_param,
    single_quote,
    wrap_label,
)
from ffexpr.core.values import (
    expand_all,
    flatten,
    format_float,
    to_value,
)


class TestFormatFloat:
    """Tests for format_float."""

    @pytest.mark.parametrize("value, expected", [
        (10.0, "10"),
        (-1.0, "-1"),
        (0.5, "0.5"),
        (0.125, "0.125"),
        (3.14159, "3.142"),
        (0.0, "0"),
    ])
    def test_format(self, value, expected):
        assert format_float(value) == expected

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidArgument):
            format_float(value)


class TestToValue:
    """Tests for to_value."""

    def test_none(self):
        assert to_value(None) is None

    def test_booleans(self):
        assert to_value(True) == "true"
        assert to_value(False) == "false"

    def test_enum_uses_command(self):
        assert to_value(Parity.TOP_FIELD_FIRST) == "tff"
        assert to_value(When.FRAME) == "frame"

    def test_decimal_rounds_half_up(self):
        assert to_value(Decimal("1.005")) == "1.01"
        assert to_value(Decimal("2")) == "2.00"

    def test_int_and_string(self):
        assert to_value(5) == "5"
        assert to_value("iw/2") == "iw/2"

    def test_float(self):
        assert to_value(2.0) == "2"


class TestExpansion:
    """Tests for flatten and expand_all."""

    def test_flatten_one_level(self):
        assert flatten([1, [2, 3], (4,)]) == [1, 2, 3, 4]

    def test_expand_all_skips_none(self):
        assert expand_all(":", [1, None, 2.5]) == "1:2.5"

    def test_expand_all_with_handler(self):
        assert expand_all(",", ["a", "b"], handler=str.upper) == "A,B"


class TestEscaping:
    """Tests for core.sanitize."""

    def test_escape_reserved_characters(self):
        assert escape("a:b=c[d]") == r"a\:b\=c\[d\]"
        assert escape("C:\\fonts") == r"C\:\\fonts"

    def test_escape_with_quote(self):
        assert escape("00:01", quote=True) == r"'00\:01'"

    def test_escape_plain_text_unchanged(self):
        assert escape("0/0 0.5/0.6 1/1") == "0/0 0.5/0.6 1/1"

    def test_escape_apostrophe_with_quote(self):
        assert escape("it's", quote=True) == "'it\\'\\''s'"

    def test_single_quote(self):
        assert single_quote("iw/2") == "'iw/2'"
        assert single_quote("a'b") == "'a'\\''b'"

    def test_quote_expression_plain_text_unchanged(self):
        assert quote_expression("(in_w-out_w)/2") == "(in_w-out_w)/2"
        assert quote_expression("main_w-overlay_w-10") == "main_w-overlay_w-10"

    @pytest.mark.parametrize("expression, rendered", [
        ("min(iw,ih)", "'min(iw,ih)'"),
        ("if(gte(t,2),1,0)", "'if(gte(t,2),1,0)'"),
        ("a;b", "'a;b'"),
        ("st(0,1):x", "'st(0,1)\\:x'"),
    ])
    def test_quote_expression_protects_syntax(self, expression, rendered):
        assert quote_expression(expression) == rendered

    def test_wrap_label(self):
        assert wrap_label("0:v") == "[0:v]"
        assert wrap_label("[out]") == "[out]"
        assert wrap_label(1) == "[1]"
        assert wrap_label(None) == ""

    def test_sanitize_text_param(self):
        assert sanitize_text_param("Hello: 100%") == "Hello\\: 100%%"
        assert sanitize_text_param("it's") == "it\\'s"
        assert sanitize_text_param("") == ""


class TestEnums:
    """Every enumerated constant renders its lowercased identifier or its alias."""

    @pytest.mark.parametrize("enum_cls", [When, AspectRatio, PixelFormat, VideoSize])
    def test_command_matches_value(self, enum_cls):
        for member in enum_cls:
            assert member.command() == member.value
            assert str(member) == member.value

    def test_auto_members_are_lowercased(self):
        assert When.INIT.command() == "init"
        assert AspectRatio.DECREASE.command() == "decrease"
        assert VideoSize.HD720.command() == "hd720"

    def test_aliases(self):
        assert Parity.TOP_FIELD_FIRST.command() == "tff"
        assert Parity.BOTTOM_FIELD_FIRST.command() == "bff"
        assert EofAction.END_ALL.command() == "endall"
        assert PixelFormat.ZERO_RGB.command() == "0rgb"
        assert VideoSize.TWO_K.command() == "2k"
        assert Color.RED.command() == "Red"

    def test_video_size_dimensions(self):
        assert VideoSize.HD720.dimensions == (1280, 720)
        assert VideoSize.TWO_K.dimensions == (2048, 1080)

    def test_parse(self):
        assert Parity.parse(Parity.AUTO) is Parity.AUTO
        assert Parity.parse("tff") is Parity.TOP_FIELD_FIRST
        assert Parity.parse("bottom_field_first") is Parity.BOTTOM_FIELD_FIRST
        assert Color.parse("red") is Color.RED

    @pytest.mark.parametrize("value", ["sideways", None, 3])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(InvalidArgument, match="not a valid Parity"):
            Parity.parse(value)

    def test_overlay_anchors(self):
        assert Overlays.RIGHT_BOTTOM.x(10) == "main_w-overlay_w-10"
        assert Overlays.RIGHT_BOTTOM.y(5) == "main_h-overlay_h-5"
        assert Overlays.CENTER.x(10) == "(main_w-overlay_w)/2"
        assert Overlays.LEFT_TOP.x() == "0"
