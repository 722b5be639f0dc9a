import pytest

from chromaparse.colors import Color, HslColor, RgbColor
from chromaparse.types.format_type import ColorFormat


def test_rgb_fixture_to_hsl():
    assert Color.from_rgb(23, 11, 33, 1.0).hsl() == (273.0, 50.0, 8.6, 1.0)


def test_hsl_fixture_to_rgb():
    assert Color.from_hsl(122, 33, 12, 0.4).rgb() == (21.0, 41.0, 21.0, 0.4)


def test_hsl_fixture_round_trip():
    assert Color.from_hsl(122, 33, 12, 0.4).hsl() == (122.0, 33.0, 12.0, 0.4)


def test_from_hsl_stores_unrounded_rgb():
    color = Color.from_hsl(122, 33, 12)
    assert color.red == pytest.approx(20.502)
    assert color.green == pytest.approx(40.698)
    assert color.blue == pytest.approx(21.1752)


def test_hsl_round_trip_grid():
    for hue in range(0, 360, 7):
        for saturation in (12.5, 40, 100):
            for luminosity in (8.6, 35, 50, 91.2):
                color = Color.from_hsl(hue, saturation, luminosity)
                assert color.hsl() == (float(hue), float(saturation), float(luminosity), 1.0)


def test_constructors_record_format():
    assert Color.from_rgb(1, 2, 3).format is ColorFormat.RGB
    assert Color.from_hsl(1, 2, 3).format is ColorFormat.HSL
    assert Color.from_hex_channels(1, 2, 3).format is ColorFormat.HEX
    assert Color.from_rgb_color(RgbColor((1, 2, 3))).format is ColorFormat.RGB
    assert Color.from_hsl_color(HslColor((1, 2, 3))).format is ColorFormat.HSL


def test_constructor_accepts_plain_tuples():
    assert Color((1, 2, 3)) == Color.from_rgb(1, 2, 3)


def test_parse():
    color = Color.parse("rgb(23, 11, 33)")
    assert color.hsl_string() == "hsl(273 50% 8.6%)"
    assert Color.parse("hsla(212 12% 24.2% / 30%)").alpha == 0.3


def test_string_outputs():
    color = Color.from_rgb(23, 11, 33)
    assert color.rgb_string() == "rgb(23 11 33)"
    assert color.hsl_string() == "hsl(273 50% 8.6%)"
    assert color.hex_string() == "#170B21"
    faded = color.with_alpha(0.4)
    assert faded.rgb_string() == "rgb(23 11 33 / 0.4)"
    assert faded.hsl_string() == "hsl(273 50% 8.6% / 0.4)"
    assert faded.hex_string() == "#170B2166"


def test_str_follows_format():
    color = Color.from_rgb(23, 11, 33)
    assert str(color) == "rgb(23 11 33)"
    assert str(color.with_format(ColorFormat.HSL)) == "hsl(273 50% 8.6%)"
    assert str(color.with_format(ColorFormat.HEX)) == "#170B21"
    assert str(Color.from_hsl(122, 33, 12)) == "hsl(122 33% 12%)"


def test_with_alpha_keeps_format():
    color = Color.from_hsl(122, 33, 12).with_alpha(0.5)
    assert color.alpha == 0.5
    assert color.format is ColorFormat.HSL


def test_views_as_color_values():
    color = Color.from_hsl(122, 33, 12, 0.4)
    assert color.rgb_color() == RgbColor((21, 41, 21, 0.4))
    assert color.hsl_color() == HslColor((122, 33, 12, 0.4))


def test_channel_accessors_are_plain_floats():
    color = Color.from_rgb(300, 2, 3, 0.5)
    assert type(color.red) is float
    assert type(color.alpha) is float
    assert color.red == 255.0


def test_equality():
    assert Color.from_rgb(1, 2, 3) == Color.from_rgb(1, 2, 3)
    assert hash(Color.from_rgb(1, 2, 3)) == hash(Color.from_rgb(1, 2, 3))
    assert Color.from_rgb(1, 2, 3) != Color.from_rgb(1, 2, 3).with_format(ColorFormat.HEX)
    assert Color.from_rgb(1, 2, 3) != Color.from_rgb(1, 2, 4)


def test_immutable():
    color = Color.from_rgb(1, 2, 3)
    with pytest.raises(AttributeError):
        color._rgb = RgbColor((0, 0, 0))


def test_repr():
    assert repr(Color.from_rgb(1, 2, 3)) == (
        "Color(red=1.0, green=2.0, blue=3.0, alpha=1.0, format='rgb')"
    )
