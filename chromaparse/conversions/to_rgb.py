import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..types.format_type import CHANNEL_MAX, PERCENT_MAX
from ..utils.num_utils import round_half_away, np_round_half_away


def hue_sextant(h: float) -> int:
    """Index of the 60 degree hue range holding ``h``; 360 stays in the last one."""
    return min(int(math.floor(h / 60.0)), 5)


## HSL to RGB conversions

def hsl_to_rgb_exact(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB without rounding the result.

    Args:
        h: Hue in degrees [0, 360]
        s: Saturation in [0, 100]
        l: Luminosity in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255]
    """
    s = s / PERCENT_MAX
    l = l / PERCENT_MAX

    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    x = chroma * (1.0 - abs(math.fmod(h / 60.0, 2.0) - 1.0))
    m = l - chroma / 2.0

    sextant = hue_sextant(h)
    if sextant == 0:
        r, g, b = chroma, x, 0.0
    elif sextant == 1:
        r, g, b = x, chroma, 0.0
    elif sextant == 2:
        r, g, b = 0.0, chroma, x
    elif sextant == 3:
        r, g, b = 0.0, x, chroma
    elif sextant == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return (r + m) * CHANNEL_MAX, (g + m) * CHANNEL_MAX, (b + m) * CHANNEL_MAX


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB, rounding each channel to the nearest integer.

    Args:
        h: Hue in degrees [0, 360]
        s: Saturation in [0, 100]
        l: Luminosity in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b), whole numbers in [0, 255]
    """
    return tuple(
        min(max(round_half_away(channel), 0.0), CHANNEL_MAX)
        for channel in hsl_to_rgb_exact(h, s, l)
    )  # type: ignore[return-value]


def np_hsl_to_rgb_exact(h: ArrayLike, s: ArrayLike, l: ArrayLike) -> NDArray:
    """
    Vectorized: Convert HSL to RGB without rounding.

    Args:
        h: array-like or scalar, hue in degrees [0, 360]
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, luminosity in [0, 100]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float) / PERCENT_MAX,
        np.asarray(l, dtype=float) / PERCENT_MAX,
    )

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    x = chroma * (1.0 - np.abs(np.fmod(h / 60.0, 2.0) - 1.0))
    m = l - chroma / 2.0
    zero = np.zeros_like(chroma)

    sextant = np.minimum(np.floor(h / 60.0), 5).astype(int)
    masks = [sextant == i for i in range(5)]

    r = np.select(masks, [chroma, x, zero, zero, x], default=chroma)
    g = np.select(masks, [x, chroma, chroma, x, zero], default=zero)
    b = np.select(masks, [zero, zero, x, chroma, chroma], default=x)

    return np.stack([r + m, g + m, b + m], axis=-1) * CHANNEL_MAX


def np_hsl_to_rgb(h: ArrayLike, s: ArrayLike, l: ArrayLike) -> NDArray:
    """
    Vectorized: Convert HSL to RGB, rounding to whole channel values.

    Args:
        h: array-like or scalar, hue in degrees [0, 360]
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, luminosity in [0, 100]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    return np.clip(np_round_half_away(np_hsl_to_rgb_exact(h, s, l)), 0.0, CHANNEL_MAX)

