"""
The canonical color value.

A :class:`Color` keeps red, green and blue as unrounded reals in [0, 255] plus
alpha in [0, 1], whatever notation it came from. It also remembers that
notation as a :class:`ColorFormat`, which only picks the default output form.
"""
from __future__ import annotations
from typing import Tuple

from ..conversions import hsl_to_rgb_exact, rgb_to_hsl
from ..formatting import format_hex, format_hsl, format_rgb
from ..types.format_type import ALPHA_MAX, ColorFormat
from ..utils.num_utils import round_half_away
from .color_base import Frozen
from .hsl import HslColor
from .rgb import RgbColor


class Color(Frozen):
    __slots__ = ('_rgb', '_format')

    def __init__(self, rgb: RgbColor, format: ColorFormat = ColorFormat.RGB) -> None:
        if not isinstance(rgb, RgbColor):
            rgb = RgbColor(rgb)
        self._rgb = rgb
        self._format = ColorFormat(format)
        self._freeze()

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float, alpha: float = ALPHA_MAX) -> Color:
        return cls(RgbColor((red, green, blue, alpha)), ColorFormat.RGB)

    @classmethod
    def from_rgb_color(cls, rgb: RgbColor) -> Color:
        return cls(rgb, ColorFormat.RGB)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, luminosity: float, alpha: float = ALPHA_MAX) -> Color:
        return cls.from_hsl_color(HslColor((hue, saturation, luminosity, alpha)))

    @classmethod
    def from_hsl_color(cls, hsl: HslColor) -> Color:
        """Build from HSL without rounding the channels, so later queries stay exact."""
        red, green, blue = hsl_to_rgb_exact(hsl.hue, hsl.saturation, hsl.luminosity)
        return cls(RgbColor((red, green, blue, hsl.alpha)), ColorFormat.HSL)

    @classmethod
    def from_hex_channels(cls, red: int, green: int, blue: int, alpha: float = ALPHA_MAX) -> Color:
        return cls(RgbColor((red, green, blue, alpha)), ColorFormat.HEX)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``."""
        from ..parsing.hex import parse_hex  # local import to avoid cycles
        return parse_hex(text)

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse an ``hsl()``, ``hsla()``, ``rgb()`` or ``rgba()`` expression."""
        from ..parsing.grammar import parse_color  # local import to avoid cycles
        return parse_color(text)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def format(self) -> ColorFormat:
        return self._format

    @property
    def red(self) -> float:
        return float(self._rgb.red)

    @property
    def green(self) -> float:
        return float(self._rgb.green)

    @property
    def blue(self) -> float:
        return float(self._rgb.blue)

    @property
    def alpha(self) -> float:
        return float(self._rgb.alpha)

    def with_format(self, format: ColorFormat) -> Color:
        return self.__class__(self._rgb, format)

    def with_alpha(self, alpha: float) -> Color:
        return self.__class__(self._rgb.with_alpha(alpha), self._format)

    # ------------------ VIEWS ------------------
    def rgb(self) -> Tuple[float, float, float, float]:
        """(red, green, blue, alpha) with each channel rounded to a whole number."""
        red, green, blue, alpha = self._rgb.value
        return (
            round_half_away(red),
            round_half_away(green),
            round_half_away(blue),
            float(alpha),
        )

    def hsl(self) -> Tuple[float, float, float, float]:
        """(hue, saturation, luminosity, alpha), rounded to one decimal place."""
        red, green, blue, alpha = self._rgb.value
        hue, saturation, luminosity = rgb_to_hsl(red, green, blue)
        return hue, saturation, luminosity, float(alpha)

    def rgb_color(self) -> RgbColor:
        return RgbColor(self.rgb())

    def hsl_color(self) -> HslColor:
        return HslColor(self.hsl())

    # ------------------ OUTPUT ------------------
    def rgb_string(self) -> str:
        return format_rgb(*self.rgb())

    def hsl_string(self) -> str:
        return format_hsl(*self.hsl())

    def hex_string(self) -> str:
        return format_hex(*self._rgb.value)

    def __str__(self) -> str:
        if self._format == ColorFormat.HEX:
            return self.hex_string()
        if self._format == ColorFormat.HSL:
            return self.hsl_string()
        return self.rgb_string()

    def __repr__(self) -> str:
        red, green, blue, alpha = (float(v) for v in self._rgb.value)
        return f"Color(red={red!r}, green={green!r}, blue={blue!r}, alpha={alpha!r}, format={self._format.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._format == other._format and self._rgb == other._rgb

    def __hash__(self) -> int:
        return hash((self._format, self._rgb))
