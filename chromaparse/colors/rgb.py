from typing import ClassVar, Tuple
from ..conversions.numbers import Alpha, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha


class RgbColor(ColorBase, WithAlpha):
    """Red, green and blue in [0, 255] plus alpha in [0, 1]."""
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "rgba"
    channel_types: ClassVar[Tuple[type, ...]] = (Channel, Channel, Channel, Alpha)

    @property
    def red(self) -> float:
        return self.value[0]

    @property
    def green(self) -> float:
        return self.value[1]

    @property
    def blue(self) -> float:
        return self.value[2]

    def to_hsl(self):
        return self.convert("hsla")
