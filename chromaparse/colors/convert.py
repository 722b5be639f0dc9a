from __future__ import annotations
from .color_base import ColorBase, build_registry
from .hsl import HslColor
from .rgb import RgbColor
from ..types.color_types import ColorSpace

space_to_class: dict[str, type[ColorBase]] = build_registry(RgbColor, HslColor)


def get_color_class(color_space: str) -> type[ColorBase]:
    color_space = color_space.lower()
    color_class = space_to_class.get(color_space) or space_to_class.get(color_space + "a")
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Args:
        to_space: Target color space ("rgb", "rgba", "hsl", "hsla").
            Defaults to the current space.

    Returns:
        New ColorBase instance in the target space
    """
    cls = get_color_class(to_space or self.mode)
    if cls is type(self):
        return self
    return cls(self)


ColorBase.convert = color_convert
