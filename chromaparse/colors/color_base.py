from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple
from abc import ABC

from ..conversions import convert
from ..types.color_types import ColorSpace, Scalar
from ..types.format_type import ALPHA_MAX


class Frozen:
    __slots__ = ('_is_frozen',)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)


class ColorBase(Frozen):
    """
    Immutable four channel color value.

    The last channel is always alpha. Three channel input gets an opaque alpha,
    and every channel is clamped into range by its ``channel_types`` entry.
    """
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    mode:          ClassVar[ColorSpace]
    channel_types: ClassVar[Tuple[Callable[[Any], float], ...]]
    # def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __init__(self, value: Any) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = convert(value.value, value.mode, self.mode)

        values = tuple(value)
        num_channels = len(self.channel_types)
        if len(values) == num_channels - 1:
            values += (ALPHA_MAX,)
        elif len(values) != num_channels:
            raise ValueError(
                f"{self.mode} expects {num_channels - 1} or {num_channels} channels, got {len(values)}"
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = self._bound(values)

        # freeze instance, no more writes allowed
        self._freeze()

    def _bound(self, values: Tuple[Scalar, ...]) -> Tuple[float, ...]:
        return tuple(channel(v) for channel, v in zip(self.channel_types, values))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, ...]:
        return self._value

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({tuple(float(v) for v in self._value)!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    value: Tuple[float, ...]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> float:
        return self.value[self.alpha_index]

    @property
    def is_opaque(self) -> bool:
        return self.alpha == ALPHA_MAX

    def with_alpha(self, alpha: Scalar):
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped to [0, 1].

        Returns:
            New color instance with updated alpha.
        """
        return self.__class__(self.value[:-1] + (alpha,))  # type: ignore[call-arg]


def build_registry(*classes: type[ColorBase]) -> dict[str, type[ColorBase]]:
    return {
        cls.mode: cls
        for cls in classes
    }
