from __future__ import annotations
import re

from ..colors.color import Color
from ..types.format_type import CHANNEL_MAX
from .errors import InvalidColor

HEX_RE = re.compile(r"#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


def parse_hex(text: str) -> Color:
    """
    Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``.

    Short forms repeat each digit, so ``#f80`` is ``#ff8800``.
    """
    if HEX_RE.fullmatch(text) is None:
        raise InvalidColor(text, 0, "expected a hex color")
    digits = text[1:]
    width = 1 if len(digits) in (3, 4) else 2
    groups = [digits[i:i + width] * (2 // width) for i in range(0, len(digits), width)]
    red, green, blue, *alpha = (int(group, 16) for group in groups)
    return Color.from_hex_channels(red, green, blue, alpha[0] / CHANNEL_MAX if alpha else 1.0)
