"""
Grammar primitives shared by the color function parsers.

Every parser takes ``(text, pos)`` and returns ``(value, new_pos)``, or raises
:class:`InvalidColor` without consuming anything.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Tuple, TypeVar
import math
import re

from .errors import InvalidColor

T = TypeVar("T")
Parser = Callable[[str, int], Tuple[T, int]]

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
ANGLE_UNIT_RE = re.compile(r"deg|grad|rad|turn")
LETTER_RE = re.compile(r"[A-Za-z]")
WHITESPACE_RE = re.compile(r"\s*", re.ASCII)


class AngleUnit(str, Enum):
    DEGREES = "deg"
    RADIANS = "rad"
    GRADIANS = "grad"
    TURNS = "turn"


@dataclass(frozen=True)
class Angle:
    """A hue angle as written, before conversion to degrees."""
    value: float
    unit: AngleUnit = AngleUnit.DEGREES

    def to_degrees(self) -> float:
        if self.unit is AngleUnit.DEGREES:
            return self.value
        if self.unit is AngleUnit.RADIANS:
            return math.degrees(self.value)
        if self.unit is AngleUnit.TURNS:
            return self.value * 360.0
        raise NotImplementedError(f"conversion of {self.unit.value} angles to degrees is not implemented")


class SeparatorStyle(str, Enum):
    """How the fields of one color function are delimited.

    COMMA: ``hsl(10, 20%, 30%, 0.5)``; SPACE: ``hsl(10 20% 30% / 0.5)``.
    """
    COMMA = "comma"
    SPACE = "space"


# Comma style is tried first; on input with a single field both agree.
SEPARATOR_STYLES = (SeparatorStyle.COMMA, SeparatorStyle.SPACE)

_SEPARATORS = {
    SeparatorStyle.COMMA: re.compile(r"\s*,\s*", re.ASCII),
    SeparatorStyle.SPACE: re.compile(r"\s+", re.ASCII),
}

_ALPHA_SEPARATORS = {
    SeparatorStyle.COMMA: re.compile(r"\s*,\s*", re.ASCII),
    SeparatorStyle.SPACE: re.compile(r"\s*/\s*", re.ASCII),
}


def _match(pattern: re.Pattern, text: str, pos: int, expected: str) -> Tuple[str, int]:
    match = pattern.match(text, pos)
    if match is None:
        raise InvalidColor(text, pos, f"expected {expected}")
    return match.group(), match.end()


def literal(text: str, pos: int, word: str) -> Tuple[str, int]:
    if not text.startswith(word, pos):
        raise InvalidColor(text, pos, f"expected {word!r}")
    return word, pos + len(word)


def one_of_words(text: str, pos: int, words: Iterable[str]) -> Tuple[str, int]:
    """Match the first of ``words`` found at ``pos``; list longer words first."""
    words = tuple(words)
    for word in words:
        if text.startswith(word, pos):
            return word, pos + len(word)
    raise InvalidColor(text, pos, f"expected one of {', '.join(words)}")


def skip_whitespace(text: str, pos: int) -> int:
    return WHITESPACE_RE.match(text, pos).end()  # type: ignore[union-attr]


def number(text: str, pos: int) -> Tuple[float, int]:
    """Decimal float literal: sign, integer part, fraction and exponent."""
    token, end = _match(NUMBER_RE, text, pos, "a number")
    return float(token), end


def percentage(text: str, pos: int) -> Tuple[float, int]:
    """``number`` directly followed by ``%``; the value is not scaled."""
    value, end = number(text, pos)
    _, end = literal(text, end, "%")
    return value, end


def percentage_or_number(text: str, pos: int) -> Tuple[float, int]:
    return alternative(text, pos, (percentage, number))


def alpha_value(text: str, pos: int) -> Tuple[float, int]:
    """Opacity as a percentage (scaled to 0-1) or a bare 0-1 number."""
    try:
        value, end = percentage(text, pos)
    except InvalidColor:
        return number(text, pos)
    return value / 100.0, end


def angle(text: str, pos: int) -> Tuple[Angle, int]:
    """``number`` with an optional ``deg``, ``rad``, ``grad`` or ``turn`` suffix."""
    value, end = number(text, pos)
    unit_match = ANGLE_UNIT_RE.match(text, end)
    if unit_match is not None:
        return Angle(value, AngleUnit(unit_match.group())), unit_match.end()
    if LETTER_RE.match(text, end):
        raise InvalidColor(text, end, "unknown angle unit")
    return Angle(value), end


def separator(text: str, pos: int, style: SeparatorStyle) -> int:
    _, end = _match(_SEPARATORS[style], text, pos, f"a {style.value} separator")
    return end


def alpha_separator(text: str, pos: int, style: SeparatorStyle) -> int:
    expected = "','" if style is SeparatorStyle.COMMA else "'/'"
    _, end = _match(_ALPHA_SEPARATORS[style], text, pos, expected)
    return end


def optional_alpha(text: str, pos: int, style: SeparatorStyle) -> Tuple[Optional[float], int]:
    """An alpha field introduced by the separator that belongs to ``style``."""
    try:
        end = alpha_separator(text, pos, style)
        return alpha_value(text, end)
    except InvalidColor:
        return None, pos


def alternative(text: str, pos: int, parsers: Iterable[Parser[T]]) -> Tuple[T, int]:
    """
    Return the result of the first parser that succeeds at ``pos``.

    When all of them fail, the error from the parser that got furthest into
    the input is raised.
    """
    furthest: Optional[InvalidColor] = None
    for parse in parsers:
        try:
            return parse(text, pos)
        except InvalidColor as exc:
            if furthest is None or exc.position > furthest.position:
                furthest = exc
    if furthest is None:
        raise InvalidColor(text, pos)
    raise furthest
