import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..types.format_type import CHANNEL_MAX, PERCENT_MAX
from ..utils.num_utils import round_half_away, round_to_one_decimal, np_round_half_away


## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    The hue branch is chosen from the index of the channel that produced the
    maximum, never by comparing floats for equality. On a tie the first of
    red, green, blue wins.

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], luminosity [0,100]),
        each rounded to one decimal place; hue is a whole number of degrees.
    """
    channels = (r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)
    r, g, b = channels

    max_index = max(range(3), key=channels.__getitem__)
    max_c = channels[max_index]
    min_c = min(channels)
    delta = max_c - min_c

    # Hue
    if delta == 0:
        hue = 0.0
    elif max_index == 0:
        hue = math.fmod((g - b) / delta, 6.0)
    elif max_index == 1:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0

    hue = round_half_away(hue * 60.0)
    if hue < 0:
        hue += 360.0
    hue += 0.0  # drop a negative zero

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation
    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1.0 - abs(2.0 * lightness - 1.0))

    return (
        round_to_one_decimal(hue),
        round_to_one_decimal(saturation * PERCENT_MAX),
        round_to_one_decimal(lightness * PERCENT_MAX),
    )


def np_rgb_to_hsl(r: ArrayLike, g: ArrayLike, b: ArrayLike) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], luminosity [0,100])
    """
    r = np.asarray(r, dtype=float) / CHANNEL_MAX
    g = np.asarray(g, dtype=float) / CHANNEL_MAX
    b = np.asarray(b, dtype=float) / CHANNEL_MAX

    stacked = np.stack(np.broadcast_arrays(r, g, b), axis=-1)
    r, g, b = stacked[..., 0], stacked[..., 1], stacked[..., 2]

    # argmax returns the first maximum, matching the scalar tie order
    max_index = np.argmax(stacked, axis=-1)
    max_c = np.max(stacked, axis=-1)
    min_c = np.min(stacked, axis=-1)
    delta = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)

    # Saturation
    denominator = np.where(chromatic, 1.0 - np.abs(2.0 * lightness - 1.0), 1.0)
    saturation = np.where(chromatic, delta / denominator, 0.0)

    # Hue
    hue = np.select(
        [~chromatic, max_index == 0, max_index == 1],
        [
            0.0,
            np.fmod((g - b) / safe_delta, 6.0),
            (b - r) / safe_delta + 2.0,
        ],
        default=(r - g) / safe_delta + 4.0,
    )
    hue = np_round_half_away(hue * 60.0)
    hue = np.where(hue < 0, hue + 360.0, hue) + 0.0

    hsl = np.stack([hue, saturation * PERCENT_MAX, lightness * PERCENT_MAX], axis=-1)
    return np_round_half_away(hsl * 10.0) / 10.0
