from .types.format_type import ALPHA_MAX, CHANNEL_MAX, ColorFormat
from .utils.num_utils import is_close_to_int, round_half_away


def format_number(value: float, places: int = 1) -> str:
    """Shortest decimal form of ``value`` rounded to ``places``: ``8.60 -> '8.6'``, ``50.0 -> '50'``."""
    scale = 10 ** places
    value = round_half_away(value * scale) / scale
    if is_close_to_int(value):
        return str(int(value))
    return f"{value:.{places}f}".rstrip("0")


def _alpha_suffix(alpha: float) -> str:
    """Alpha printed to three places; omitted when that reads as fully opaque."""
    text = format_number(alpha, 3)
    if text == "1":
        return ""
    return f" / {text}"


def format_rgb(r: float, g: float, b: float, a: float = ALPHA_MAX) -> str:
    return f"rgb({format_number(r, 0)} {format_number(g, 0)} {format_number(b, 0)}{_alpha_suffix(a)})"


def format_hsl(h: float, s: float, l: float, a: float = ALPHA_MAX) -> str:
    return f"hsl({format_number(h)} {format_number(s)}% {format_number(l)}%{_alpha_suffix(a)})"


def format_hex(r: float, g: float, b: float, a: float = ALPHA_MAX) -> str:
    channels = [int(round_half_away(c)) for c in (r, g, b, a * CHANNEL_MAX)]
    if channels[-1] == CHANNEL_MAX:
        channels.pop()
    return "#" + "".join(f"{c:02X}" for c in channels)


def format_colorspace(fmt: ColorFormat, *args: float) -> str:
    if fmt == ColorFormat.RGB:
        return format_rgb(*args)
    elif fmt == ColorFormat.HSL:
        return format_hsl(*args)
    elif fmt == ColorFormat.HEX:
        return format_hex(*args)

    raise ValueError(f"Unknown color format: {fmt}")
