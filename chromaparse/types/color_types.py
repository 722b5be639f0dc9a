from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
RGBTuple = Tuple[float, float, float]
RGBATuple = Tuple[float, float, float, float]
ColorElement = Union[RGBTuple, RGBATuple]
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla"]
COLOR_SPACES = {"rgb", "rgba", "hsl", "hsla"}


def element_to_array(element: Union[ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple of channel values or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)
