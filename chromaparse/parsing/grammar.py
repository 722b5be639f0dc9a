"""
Parsers for the ``hsl()``/``hsla()`` and ``rgb()``/``rgba()`` color functions.

Both functions accept the legacy comma syntax, ``rgb(10, 20, 30, 0.5)``, and the
space syntax with a slash before alpha, ``rgb(10 20 30 / 50%)``. The two are
tried as separate alternatives, so one call can never mix them.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import partial
from typing import Optional, Tuple

from ..colors.color import Color
from ..colors.hsl import HslColor
from ..colors.rgb import RgbColor
from ..types.format_type import ALPHA_MAX, CHANNEL_MAX, PERCENT_MAX
from .errors import InvalidColor
from .primitives import (
    SEPARATOR_STYLES,
    Angle,
    SeparatorStyle,
    alternative,
    angle,
    literal,
    number,
    one_of_words,
    optional_alpha,
    percentage,
    percentage_or_number,
    separator,
    skip_whitespace,
)


@dataclass(frozen=True)
class HslArguments:
    hue: Angle
    saturation: float
    luminosity: float
    alpha: Optional[float]
    style: SeparatorStyle


@dataclass(frozen=True)
class RgbArguments:
    red: float
    green: float
    blue: float
    alpha: Optional[float]
    style: SeparatorStyle
    percentages: bool


def _hsl_arguments(text: str, pos: int, style: SeparatorStyle) -> Tuple[HslArguments, int]:
    pos = skip_whitespace(text, pos)
    hue, pos = angle(text, pos)
    pos = separator(text, pos, style)
    saturation, pos = percentage_or_number(text, pos)
    pos = separator(text, pos, style)
    luminosity, pos = percentage_or_number(text, pos)
    alpha, pos = optional_alpha(text, pos, style)
    pos = skip_whitespace(text, pos)
    return HslArguments(hue, saturation, luminosity, alpha, style), pos


def hsl_arguments(text: str, pos: int = 0) -> Tuple[HslArguments, int]:
    """The argument list of an HSL function, without the parentheses."""
    return alternative(text, pos, (partial(_hsl_arguments, style=style) for style in SEPARATOR_STYLES))


def _rgb_channels(text: str, pos: int, style: SeparatorStyle, percentages: bool) -> Tuple[Tuple[float, float, float], int]:
    channel = percentage if percentages else number
    red, pos = channel(text, pos)
    pos = separator(text, pos, style)
    green, pos = channel(text, pos)
    pos = separator(text, pos, style)
    blue, pos = channel(text, pos)
    if percentages:
        red, green, blue = (value / PERCENT_MAX * CHANNEL_MAX for value in (red, green, blue))
    return (red, green, blue), pos


def _rgb_arguments(text: str, pos: int, style: SeparatorStyle, percentages: bool) -> Tuple[RgbArguments, int]:
    pos = skip_whitespace(text, pos)
    (red, green, blue), pos = _rgb_channels(text, pos, style, percentages)
    alpha, pos = optional_alpha(text, pos, style)
    pos = skip_whitespace(text, pos)
    return RgbArguments(red, green, blue, alpha, style, percentages), pos


def rgb_arguments(text: str, pos: int = 0) -> Tuple[RgbArguments, int]:
    """The argument list of an RGB function: all-percentage or all-number channels."""
    return alternative(
        text,
        pos,
        (
            partial(_rgb_arguments, style=style, percentages=percentages)
            for style in SEPARATOR_STYLES
            for percentages in (True, False)
        ),
    )


def hsl_color(text: str, pos: int = 0) -> Tuple[HslColor, int]:
    """``hsl(...)`` or ``hsla(...)``; alpha defaults to 1 when absent."""
    _, pos = one_of_words(text, pos, ("hsla", "hsl"))
    _, pos = literal(text, pos, "(")
    args, pos = hsl_arguments(text, pos)
    _, pos = literal(text, pos, ")")
    alpha = ALPHA_MAX if args.alpha is None else args.alpha
    return HslColor((args.hue.to_degrees(), args.saturation, args.luminosity, alpha)), pos


def rgb_color(text: str, pos: int = 0) -> Tuple[RgbColor, int]:
    """``rgb(...)`` or ``rgba(...)``; alpha defaults to 1 when absent."""
    _, pos = one_of_words(text, pos, ("rgba", "rgb"))
    _, pos = literal(text, pos, "(")
    args, pos = rgb_arguments(text, pos)
    _, pos = literal(text, pos, ")")
    alpha = ALPHA_MAX if args.alpha is None else args.alpha
    return RgbColor((args.red, args.green, args.blue, alpha)), pos


def _hsl_function(text: str, pos: int) -> Tuple[Color, int]:
    hsl, pos = hsl_color(text, pos)
    return Color.from_hsl_color(hsl), pos


def _rgb_function(text: str, pos: int) -> Tuple[Color, int]:
    rgb, pos = rgb_color(text, pos)
    return Color.from_rgb_color(rgb), pos


def color(text: str, pos: int = 0) -> Tuple[Color, int]:
    """Any supported color function starting at ``pos``."""
    if text.startswith("hsl", pos):
        return _hsl_function(text, pos)
    if text.startswith("rgb", pos):
        return _rgb_function(text, pos)
    raise InvalidColor(text, pos, "unknown color function")


def parse_color(text: str) -> Color:
    """
    Parse a whole string as one color function.

    Raises:
        InvalidColor: if ``text`` is not exactly one valid ``hsl``, ``hsla``,
            ``rgb`` or ``rgba`` expression.
        NotImplementedError: if the hue is given in gradians.
    """
    value, pos = color(text, 0)
    if pos != len(text):
        raise InvalidColor(text, pos, "unexpected trailing input")
    return value
