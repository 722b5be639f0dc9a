"""
chromaparse - Color String Parsing and Conversion
=================================================

Parses CSS style color functions and converts between the RGB and HSL color
models.

Key Features
------------
- ``hsl()``, ``hsla()``, ``rgb()`` and ``rgba()`` in both the comma and the
  space/slash syntax
- Hue angles in ``deg``, ``rad`` and ``turn``
- Hex colors (``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``)
- RGB <-> HSL conversion with scalar and vectorized (numpy) functions
- Immutable, range-clamped color values

Quick Start
-----------
>>> from chromaparse import Color
>>> color = Color.parse("hsla(212 12% 24.2% / 30%)")
>>> color.alpha
0.3
>>> Color.parse("rgb(23, 11, 33)").hsl_string()
'hsl(273 50% 8.6%)'

Modules
-------
- parsing: grammar primitives and the color function parsers
- conversions: RGB <-> HSL conversion functions
- colors: RgbColor, HslColor and the canonical Color
- formatting: output strings
- cli: command-line entry point
"""

__version__ = "1.0.0"

from .colors import Color, ColorBase, HslColor, RgbColor
from .conversions import (
    convert,
    np_convert,
    rgb_to_hsl,
    np_rgb_to_hsl,
    hsl_to_rgb,
    hsl_to_rgb_exact,
    np_hsl_to_rgb,
)
from .parsing import InvalidColor, parse_color, parse_hex
from .types.format_type import ColorFormat

__all__ = [
    # Color classes
    "Color",
    "ColorBase",
    "HslColor",
    "RgbColor",
    "ColorFormat",

    # Parsing
    "InvalidColor",
    "parse_color",
    "parse_hex",

    # Conversions
    "convert",
    "np_convert",
    "rgb_to_hsl",
    "np_rgb_to_hsl",
    "hsl_to_rgb",
    "hsl_to_rgb_exact",
    "np_hsl_to_rgb",

    # Version
    "__version__",
]
