"""
Color Space Conversions
=======================

RGB <-> HSL conversion with scalar and vectorized (numpy) implementations.

Conversion Functions
--------------------

RGB -> HSL:
    rgb_to_hsl(r, g, b)
        Scalar conversion; channels in [0, 255], result rounded to one decimal
    np_rgb_to_hsl(r, g, b)
        Vectorized conversion

HSL -> RGB:
    hsl_to_rgb(h, s, l)
        Scalar conversion; result rounded to whole channel values
    hsl_to_rgb_exact(h, s, l)
        Scalar conversion without rounding
    np_hsl_to_rgb(h, s, l), np_hsl_to_rgb_exact(h, s, l)
        Vectorized conversions

High-Level API
--------------
    convert(color, from_space, to_space)
        Tuple converter between "rgb", "rgba", "hsl", "hsla"
    np_convert(color, from_space, to_space)
        Vectorized converter

Examples
--------
>>> from chromaparse.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(23, 11, 33)
(273.0, 50.0, 8.6)
>>> hsl_to_rgb(273.0, 50.0, 8.6)
(23.0, 11.0, 33.0)
"""

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_rgb, hsl_to_rgb_exact, np_hsl_to_rgb, np_hsl_to_rgb_exact
from .wrapper import convert, np_convert
from .numbers import Alpha, Channel, Degrees, Percent, bound_hue

__all__ = [
    # RGB -> HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',

    # HSL -> RGB
    'hsl_to_rgb',
    'hsl_to_rgb_exact',
    'np_hsl_to_rgb',
    'np_hsl_to_rgb_exact',

    # High-level API
    'convert',
    'np_convert',

    # Bounded numbers
    'Alpha',
    'Channel',
    'Degrees',
    'Percent',
    'bound_hue',
]
