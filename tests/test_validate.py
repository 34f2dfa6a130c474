"""Tests for core.validate argument guards."""

import pytest

from ffexpr.core.errors import FFExprError, FileNotFound, InvalidArgument
from ffexpr.core.validate import (
    check_choice,
    check_extension,
    check_file,
    is_false,
    is_true,
    not_empty,
    not_null,
    range_check,
)


class TestRangeCheck:
    """Tests for range_check."""

    def test_bounds_are_inclusive(self):
        range_check(1, 1, 63)
        range_check(63, 1, 63)
        range_check(0.0, 0.0, 1.0)
        range_check(1.0, 0.0, 1.0)

    def test_below_minimum_raises(self):
        with pytest.raises(InvalidArgument, match="out of range"):
            range_check(0, 1, 63)

    def test_above_maximum_raises(self):
        with pytest.raises(InvalidArgument, match="your value is 64"):
            range_check(64, 1, 63)

    def test_float_just_outside_raises(self):
        with pytest.raises(InvalidArgument):
            range_check(1.0001, 0.0, 1.0)

    def test_none_raises(self):
        with pytest.raises(InvalidArgument):
            range_check(None, 0, 1)

    def test_nan_raises(self):
        with pytest.raises(InvalidArgument, match="finite"):
            range_check(float("nan"), -1.0, 1.0)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf")])
    def test_infinity_raises_even_with_open_bounds(self, value):
        with pytest.raises(InvalidArgument, match="finite"):
            range_check(value, float("-inf"), float("inf"))

    def test_bool_is_not_a_number(self):
        with pytest.raises(InvalidArgument):
            range_check(True, 0, 1)

    def test_error_is_a_value_error(self):
        """Callers catching ValueError still see validation failures."""
        with pytest.raises(ValueError):
            range_check(-1, 0, 1)
        assert issubclass(InvalidArgument, FFExprError)


class TestSimpleGuards:
    """Tests for not_null, not_empty, is_true, is_false and check_choice."""

    def test_not_null(self):
        not_null(0, "zero is fine")
        with pytest.raises(InvalidArgument, match="missing"):
            not_null(None, "missing")

    @pytest.mark.parametrize("value", [None, "", "   ", [], (), {}])
    def test_not_empty_rejects(self, value):
        with pytest.raises(InvalidArgument):
            not_empty(value, "empty")

    @pytest.mark.parametrize("value", ["x", [0], 0])
    def test_not_empty_accepts(self, value):
        not_empty(value, "empty")

    def test_is_true_and_is_false(self):
        is_true(True, "never")
        is_false(False, "never")
        with pytest.raises(InvalidArgument, match="boom"):
            is_true(False, "boom")
        with pytest.raises(InvalidArgument, match="boom"):
            is_false(True, "boom")

    def test_check_choice(self):
        check_choice("in", ["in", "out"], "t")
        with pytest.raises(InvalidArgument, match="'t' must be one of"):
            check_choice("up", ["in", "out"], "t")


class TestCheckExtension:
    """Tests for check_extension."""

    def test_matching_extension(self):
        check_extension("subs/movie.srt", "srt")
        check_extension("subs/movie.SRT", ".srt")

    def test_other_extension_raises(self):
        with pytest.raises(InvalidArgument, match='must end with ".srt"'):
            check_extension("subs/movie.ass", "srt")

    def test_empty_path_raises(self):
        with pytest.raises(InvalidArgument, match="empty"):
            check_extension("", "srt")


class TestCheckFile:
    """Tests for check_file."""

    def test_existing_file_returns_path(self, media_file):
        assert check_file(str(media_file)) == media_file

    def test_missing_file_raises_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFound) as exc_info:
            check_file(tmp_path / "nope.ttf")
        assert isinstance(exc_info.value, InvalidArgument)
        assert isinstance(exc_info.value, FileNotFoundError)

    def test_missing_allowed(self, tmp_path):
        target = tmp_path / "later" / "out.txt"
        assert check_file(target, must_exist=False) == target
        # Nothing is created on disk
        assert not (tmp_path / "later").exists()

    def test_directory_where_file_expected(self, tmp_path):
        with pytest.raises(InvalidArgument, match="cannot be a folder"):
            check_file(tmp_path)

    def test_file_where_directory_expected(self, media_file):
        with pytest.raises(InvalidArgument, match="only be a folder"):
            check_file(media_file, is_directory=True)

    def test_directory_accepted(self, tmp_path):
        assert check_file(tmp_path, is_directory=True) == tmp_path

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_empty_path_raises(self, value):
        with pytest.raises(InvalidArgument, match="cannot be empty"):
            check_file(value)
