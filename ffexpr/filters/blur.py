"""Blur, sharpen and convolution filters."""

from typing import Optional, Union

from ..core.constants import QUOTE
from ..core.function import FilterFunction
from ..core.sanitize import escape
from ..core.validate import is_true, not_empty, range_check

Number = Union[int, float]


class Amplify(FilterFunction):
    """Amplify differences between the current pixel and pixels of adjacent frames."""

    name = "amplify"

    @classmethod
    def radius(cls, radius: int) -> "Amplify":
        """Create the filter with a frame radius (1 to 63, default 2).

        A radius of 3 averages 7 frames.
        """
        return cls()._init_radius(radius)

    def _init_radius(self, radius: int) -> "Amplify":
        range_check(radius, 1, 63)
        return self.add_arg("radius", radius)

    def factor(self, factor: int) -> "Amplify":
        """Factor to amplify the difference by (0 to 65535, default 2)."""
        range_check(factor, 0, 65535)
        return self.add_arg("factor", factor)

    def threshold(self, threshold: int) -> "Amplify":
        """Differences at or above this leave the source pixel alone (default 10)."""
        range_check(threshold, 0, 65535)
        return self.add_arg("threshold", threshold)

    def tolerance(self, tolerance: int) -> "Amplify":
        """Differences below this leave the source pixel alone (default 0)."""
        range_check(tolerance, 0, 65535)
        return self.add_arg("tolerance", tolerance)

    def low(self, low: int) -> "Amplify":
        range_check(low, 0, 65535)
        return self.add_arg("low", low)

    def high(self, high: int) -> "Amplify":
        range_check(high, 0, 65535)
        return self.add_arg("high", high)

    def planes(self, planes: int) -> "Amplify":
        range_check(planes, 0, 15)
        return self.add_arg("planes", planes)


class AvgBlur(FilterFunction):
    """Average blur."""

    name = "avgblur"

    @classmethod
    def the(cls) -> "AvgBlur":
        return cls()

    def size(self, radius_x: int, radius_y: Optional[int] = None) -> "AvgBlur":
        """Horizontal (1 to 1024) and vertical (0 to 1024) kernel radius.

        The vertical radius defaults to the horizontal one.
        """
        if radius_y is None:
            radius_y = radius_x
        range_check(radius_x, 1, 1024)
        range_check(radius_y, 0, 1024)
        return self.add_arg("sizeX", radius_x).add_arg("sizeY", radius_y)

    def planes(self, planes: int) -> "AvgBlur":
        range_check(planes, 0, 15)
        return self.add_arg("planes", planes)


class BoxBlur(FilterFunction):
    """Box blur. Radii accept a number or an expression over ``w``, ``h``, ``cw``, ``ch``."""

    name = "boxblur"

    @classmethod
    def the(cls) -> "BoxBlur":
        return cls()

    def _radius(self, key: str, radius: Union[Number, str]) -> "BoxBlur":
        if isinstance(radius, str):
            not_empty(radius, f"The {key} expression cannot be empty")
            return self.add_arg(key, escape(radius, quote=True))
        range_check(radius, 0, 1 << 16)
        return self.add_arg(key, radius)

    def luma_radius(self, radius: Union[Number, str]) -> "BoxBlur":
        return self._radius("lr", radius)  # luma_radius

    def chroma_radius(self, radius: Union[Number, str]) -> "BoxBlur":
        return self._radius("cr", radius)  # chroma_radius

    def alpha_radius(self, radius: Union[Number, str]) -> "BoxBlur":
        return self._radius("ar", radius)  # alpha_radius

    def luma_power(self, times: int) -> "BoxBlur":
        range_check(times, 0, 2147483647)
        return self.add_arg("lp", times)

    def chroma_power(self, times: int) -> "BoxBlur":
        range_check(times, -1, 2147483647)
        return self.add_arg("cp", times)

    def alpha_power(self, times: int) -> "BoxBlur":
        range_check(times, -1, 2147483647)
        return self.add_arg("ap", times)


class GBlur(FilterFunction):
    """Gaussian blur."""

    name = "gblur"

    @classmethod
    def sigma(cls, sigma: float) -> "GBlur":
        """Create the filter with a horizontal sigma (0 to 1024, default 0.5)."""
        return cls()._init_sigma(sigma)

    def _init_sigma(self, sigma: float) -> "GBlur":
        range_check(sigma, 0.0, 1024.0)
        return self.add_arg("sigma", sigma)

    def steps(self, steps: int) -> "GBlur":
        """Number of gaussian approximation steps (1 to 6, default 1)."""
        range_check(steps, 1, 6)
        return self.add_arg("steps", steps)

    def planes(self, planes: int) -> "GBlur":
        range_check(planes, 0, 15)
        return self.add_arg("planes", planes)

    def sigma_vertical(self, sigma: float) -> "GBlur":
        """Vertical sigma; -1 reuses the horizontal one."""
        range_check(sigma, -1.0, 1024.0)
        return self.add_arg("sigmaV", sigma)


class Unsharp(FilterFunction):
    """Sharpen or blur with an unsharp mask; negative amounts blur."""

    name = "unsharp"

    @classmethod
    def of(cls) -> "Unsharp":
        return cls()

    def _matrix(self, key: str, value: int) -> "Unsharp":
        range_check(value, 3, 23)
        is_true(value % 2 == 1, f"Matrix size must be odd, got {value}")
        return self.add_arg(key, value)

    def _amount(self, key: str, value: float) -> "Unsharp":
        range_check(value, -2.0, 5.0)
        return self.add_arg(key, value)

    def luma_matrix_size_x(self, value: int) -> "Unsharp":
        return self._matrix("lx", value)

    def luma_matrix_size_y(self, value: int) -> "Unsharp":
        return self._matrix("ly", value)

    def luma_amount(self, value: float) -> "Unsharp":
        return self._amount("la", value)

    def chroma_matrix_size_x(self, value: int) -> "Unsharp":
        return self._matrix("cx", value)

    def chroma_matrix_size_y(self, value: int) -> "Unsharp":
        return self._matrix("cy", value)

    def chroma_amount(self, value: float) -> "Unsharp":
        return self._amount("ca", value)

    def alpha_matrix_size_x(self, value: int) -> "Unsharp":
        return self._matrix("ax", value)

    def alpha_matrix_size_y(self, value: int) -> "Unsharp":
        return self._matrix("ay", value)

    def alpha_amount(self, value: float) -> "Unsharp":
        return self._amount("aa", value)


class Convolution(FilterFunction):
    """3x3, 5x5, 7x7 or row/column convolution, given as positional matrices.

    The whole argument list is single-quoted so the space separated matrices
    survive the filter-graph parser.
    """

    name = "convolution"
    arg_wrapper = (QUOTE, QUOTE)

    @classmethod
    def define(cls, *matrices: Union[str, Number]) -> "Convolution":
        not_empty(list(matrices), "At least one convolution matrix is required")
        return cls().add_values(*matrices)
