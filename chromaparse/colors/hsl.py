from typing import ClassVar, Tuple

from boundednumbers import BoundType

from ..conversions.numbers import Alpha, Degrees, Percent, bound_hue
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase, WithAlpha


class HslColor(ColorBase, WithAlpha):
    """
    Hue in degrees [0, 360], saturation and luminosity in percent [0, 100],
    alpha in [0, 1].

    Hue is clamped by default, so ``720`` becomes ``360``. Subclasses can set
    ``hue_bound = BoundType.CYCLIC`` to wrap it instead.
    """
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "hsla"
    channel_types: ClassVar[Tuple[type, ...]] = (Degrees, Percent, Percent, Alpha)
    hue_bound: ClassVar[BoundType] = BoundType.CLAMP

    def _bound(self, values: Tuple[Scalar, ...]) -> Tuple[float, ...]:
        hue, *rest = values
        return (bound_hue(hue, self.hue_bound), *super()._bound((0.0, *rest))[1:])

    @property
    def hue(self) -> float:
        return self.value[0]

    @property
    def saturation(self) -> float:
        return self.value[1]

    @property
    def luminosity(self) -> float:
        return self.value[2]

    def to_rgb(self):
        return self.convert("rgba")
