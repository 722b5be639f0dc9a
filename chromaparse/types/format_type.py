from enum import Enum


class ColorFormat(str, Enum):
    """Representation a color was parsed or constructed as."""
    HSL = "hsl"
    RGB = "rgb"
    HEX = "hex"


HUE_MAX = 360.0
PERCENT_MAX = 100.0
CHANNEL_MAX = 255.0
ALPHA_MAX = 1.0
