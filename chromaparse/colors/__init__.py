"""
Color Classes
=============

Immutable color values for the RGB and HSL color models.

Features
--------
- Immutable instances (frozen after initialization)
- Value clamping to valid ranges on construction
- Alpha channel on every value, opaque by default
- Conversion between color models

Usage
-----
>>> from chromaparse.colors import Color, RgbColor
>>> RgbColor((300, 128, -4)).value
(255.0, 128.0, 0.0, 1.0)
>>> Color.from_rgb(23, 11, 33).hsl()
(273.0, 50.0, 8.6, 1.0)
>>> Color.from_hsl(122, 33, 12, 0.4).rgb()
(21.0, 41.0, 21.0, 0.4)

Color Classes
-------------
    - RgbColor: red, green, blue in [0, 255], alpha in [0, 1]
    - HslColor: hue in [0, 360], saturation and luminosity in [0, 100], alpha in [0, 1]
    - Color: canonical value stored as RGB, with the notation it came from

Notes
-----
- Three channel input gets alpha 1.0
- Hue is clamped rather than wrapped unless ``HslColor.hue_bound`` says otherwise
"""

from .color_base import ColorBase
from .rgb import RgbColor
from .hsl import HslColor
from .convert import color_convert, get_color_class, space_to_class
from .color import Color


__all__ = ['Color', 'ColorBase', 'HslColor', 'RgbColor', 'color_convert', 'get_color_class', 'space_to_class']
