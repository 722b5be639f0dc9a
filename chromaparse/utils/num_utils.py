import math

import numpy as np
from numpy.typing import ArrayLike, NDArray


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero (``2.5 -> 3``, ``-2.5 -> -3``)."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_to_one_decimal(value: float) -> float:
    """Round to one decimal place, ties away from zero."""
    return round_half_away(value * 10.0) / 10.0


def np_round_half_away(values: ArrayLike) -> NDArray[np.floating]:
    """Vectorized: :func:`round_half_away` for arrays."""
    values = np.asarray(values, dtype=float)
    return np.copysign(np.floor(np.abs(values) + 0.5), values)


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol
