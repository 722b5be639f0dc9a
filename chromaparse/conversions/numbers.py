from __future__ import annotations
from typing import ClassVar
import warnings

from boundednumbers import BoundType, UnitFloat, boundtype_to_function, clamp

from ..types.format_type import CHANNEL_MAX, HUE_MAX, PERCENT_MAX


class BoundedFloat(float):
    """A floating-point number clamped to the inclusive range ``[0, upper]``.

    NaN collapses to ``0.0`` so that no instance can sit outside its range.
    """

    upper: ClassVar[float] = 1.0

    def __new__(cls, value):
        value = float(value)
        if value != value:
            value = 0.0
        elif not 0.0 <= value <= cls.upper:
            value = clamp(value, 0.0, cls.upper)
        return super().__new__(cls, value)

    __repr__ = float.__repr__


class Channel(BoundedFloat):
    """RGB channel in ``[0, 255]``."""
    upper: ClassVar[float] = CHANNEL_MAX


class Percent(BoundedFloat):
    """Saturation or luminosity in ``[0, 100]``."""
    upper: ClassVar[float] = PERCENT_MAX


class Degrees(BoundedFloat):
    """Hue in ``[0, 360]``."""
    upper: ClassVar[float] = HUE_MAX


class Alpha(UnitFloat):
    """Opacity in ``[0, 1]``."""

    def __new__(cls, value):
        value = float(value)
        return super().__new__(cls, 0.0 if value != value else value)

    __repr__ = float.__repr__


def bound_hue(value: float, bound: BoundType = BoundType.CLAMP) -> Degrees:
    """
    Bring a hue into ``[0, 360]`` according to a bound policy.

    ``BoundType.CLAMP`` pins out-of-range hues to the nearest end, so 720
    becomes 360. ``BoundType.CYCLIC`` wraps them instead, so 720 becomes 0.

    Args:
        value: Hue in degrees, possibly out of range
        bound: Policy to apply

    Returns:
        Degrees: hue inside ``[0, 360]``
    """
    bound_fn = boundtype_to_function.get(bound)
    if bound_fn is None:
        warnings.warn(f"Unknown hue bound behavior: {bound}, defaulting to CLAMP")
        bound_fn = clamp
    return Degrees(bound_fn(float(value), 0.0, HUE_MAX))
