import numpy as np
from typing import Callable, cast

from .to_rgb import np_hsl_to_rgb
from .to_hsl import np_rgb_to_hsl

from ..types.format_type import ALPHA_MAX
from ..types.color_types import COLOR_SPACES, ColorElement, ColorSpace, element_to_array

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsl"): np_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_rgb,
}


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space


def _convert_core(color: np.ndarray, from_space: str, to_space: str) -> np.ndarray:
    has_alpha_in  = from_space.endswith("a")
    has_alpha_out = to_space.endswith("a")

    expected = 4 if has_alpha_in else 3
    if color.shape[-1] != expected:
        raise ValueError(
            f"{from_space} expects last dimension to be {expected}, got shape {color.shape}"
        )

    if has_alpha_in:
        base = color[..., :3]
        alpha = color[..., 3]
    else:
        base = color
        alpha = None

    fs, ts = from_space[:3], to_space[:3]

    if fs == ts:
        converted = base
    else:
        converted = CONVERT_NUMPY[(fs, ts)](base[..., 0], base[..., 1], base[..., 2])

    if not has_alpha_out:
        return converted

    if alpha is None:
        alpha = np.full(converted.shape[:-1], ALPHA_MAX)
    return np.concatenate([converted, alpha[..., None]], axis=-1)


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorElement:
    """
    Convert a single color tuple between color spaces.

    Alpha passes through unchanged, is dropped when ``to_space`` has none and
    defaults to 1.0 when ``from_space`` has none.

    Args:
        color: Channel tuple in ``from_space`` ranges
        from_space: One of "rgb", "rgba", "hsl", "hsla"
        to_space: One of "rgb", "rgba", "hsl", "hsla"

    Returns:
        Channel tuple in ``to_space`` ranges
    """
    from_space = _check_space(from_space)
    to_space = _check_space(to_space)
    if from_space == to_space:
        return color  # No conversion needed
    result = _convert_core(element_to_array(color), from_space, to_space)
    return cast(ColorElement, tuple(float(v) for v in result.flat))


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """Vectorized :func:`convert` for arrays whose last axis holds the channels."""
    from_space = _check_space(from_space)
    to_space = _check_space(to_space)
    if from_space == to_space:
        return color  # No conversion needed
    return _convert_core(np.asarray(color, dtype=float), from_space, to_space)
