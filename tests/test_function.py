"""Tests for the FilterFunction argument accumulator."""

import pytest

from ffexpr.core.enums import Color, When
from ffexpr.core.errors import InvalidArgument
from ffexpr.core.function import Custom, color_text, number_or_expression
from ffexpr.filters import Convolution


class TestAccumulator:
    """Ordering, replacement, flags and positional entries."""

    def test_named_arguments_in_call_order(self):
        f = Custom.define("fspp").add_arg("quality", 5).add_arg2("filter_params", "|", 1, 2)
        assert f.to_string() == "fspp=quality=5:filter_params=1|2"

    def test_replacing_keeps_first_position(self):
        f = Custom.define("x").add_arg("a", 1).add_arg("b", 2).add_arg("a", 3)
        assert f.to_string() == "x=a=3:b=2"
        assert len(f) == 2

    def test_several_values_use_part_separator(self):
        assert Custom.define("x").add_arg("w", 1, 2).to_string() == "x=w=1:2"

    def test_list_value_is_expanded(self):
        assert Custom.define("x").add_arg("w", [1, 2.5]).to_string() == "x=w=1:2.5"

    def test_named_none_renders_bare_key(self):
        assert Custom.define("codecview").add_arg("block").to_string() == "codecview=block"
        assert Custom.define("x").add_arg("k", None).to_string() == "x=k"

    def test_positional_none_is_skipped(self):
        f = Custom.define("x").add_value(None)
        assert f.to_string() == "x"

    def test_positional_values(self):
        f = Custom.define("hqdn3d").add_value(4).add_value(3.0)
        assert f.to_string() == "hqdn3d=4:3"
        assert Custom.define("x").add_values(1, 2, 3).to_string() == "x=1:2:3"

    def test_remove_arg(self):
        f = Custom.define("fade").add_arg("st", 1).add_arg("d", 2).remove_arg("d").remove_arg("missing")
        assert f.to_string() == "fade=st=1"

    def test_enable_disable(self):
        f = Custom.define("x").enable("a").disable("b").status("c", 1)
        assert f.to_string() == "x=a=true:b=false:c=true"

    def test_enum_value(self):
        assert Custom.define("eq").add_arg("eval", When.FRAME).to_string() == "eq=eval=frame"

    def test_base_args_render_first(self):
        f = Custom.define("crop").add_arg("exact", True).add_base_arg("w", 640).add_base_arg("h", 480)
        assert f.to_string() == "crop=640:480:exact=true"

    def test_introspection(self):
        f = Custom.define("x").add_arg("a", 1.0).add_arg("flag")
        assert f.get_arg("a") == "1"
        assert f.has_arg("flag")
        assert f.get_arg("flag") is None
        assert not f.has_arg("b")
        assert f.get_name() == "x"


class TestRendering:
    """Rendering edge cases."""

    def test_empty_buffer_renders_name(self):
        assert Custom.define("hflip").to_string() == "hflip"

    def test_no_name_renders_arguments_only(self):
        assert Custom.define(None).add_arg("a", 1).to_string() == "a=1"
        assert Custom.define(None).to_string() == ""

    def test_argument_wrapper(self):
        f = Convolution.define("0 -1 0 -1 5 -1 0 -1 0", "0 -1 0 -1 5 -1 0 -1 0")
        assert f.to_string() == "convolution='0 -1 0 -1 5 -1 0 -1 0:0 -1 0 -1 5 -1 0 -1 0'"

    def test_render_is_idempotent(self):
        f = Custom.define("x").add_base_arg("w", 1).add_arg("a", 2)
        first = f.to_string()
        size = len(f)
        assert f.to_string() == first
        assert str(f) == first
        assert len(f) == size

    def test_repr(self):
        assert repr(Custom.define("x").add_arg("a", 1)) == "<Custom 'x=a=1'>"


class TestColor:
    """Tests for the color option and color_text."""

    def test_named_color(self):
        assert Custom.define("x").color(Color.RED).to_string() == "x=color=Red"

    def test_color_with_alpha(self):
        assert Custom.define("x").color(Color.RED, 0.5).to_string() == "x=color=Red@0.5"
        assert color_text("0xFF0000", 1) == "0xFF0000@1"

    def test_missing_color_is_random(self):
        assert color_text(None) == "random"

    def test_alpha_out_of_range(self):
        f = Custom.define("x")
        with pytest.raises(InvalidArgument):
            f.color(Color.RED, 1.5)
        assert f.to_string() == "x"


class TestNumberOrExpression:
    """Tests for number_or_expression."""

    def test_number_checked(self):
        assert number_or_expression(5, "width", 0, 10) == 5
        with pytest.raises(InvalidArgument):
            number_or_expression(11, "width", 0, 10)

    def test_expression_quoted_when_needed(self):
        assert number_or_expression("iw/2", "width") == "iw/2"
        assert number_or_expression("max(1,iw)", "width") == "'max(1,iw)'"

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_empty_rejected(self, value):
        with pytest.raises(InvalidArgument, match="width"):
            number_or_expression(value, "width")
