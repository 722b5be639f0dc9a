from .errors import InvalidColor
from .primitives import (
    Angle,
    AngleUnit,
    SeparatorStyle,
    alpha_separator,
    alpha_value,
    angle,
    number,
    percentage,
    percentage_or_number,
    separator,
)
from .grammar import (
    HslArguments,
    RgbArguments,
    color,
    hsl_arguments,
    hsl_color,
    parse_color,
    rgb_arguments,
    rgb_color,
)
from .hex import parse_hex

__all__ = [
    "InvalidColor",
    # primitives
    "Angle",
    "AngleUnit",
    "SeparatorStyle",
    "alpha_separator",
    "alpha_value",
    "angle",
    "number",
    "percentage",
    "percentage_or_number",
    "separator",
    # color functions
    "HslArguments",
    "RgbArguments",
    "color",
    "hsl_arguments",
    "hsl_color",
    "parse_color",
    "rgb_arguments",
    "rgb_color",
    "parse_hex",
]
