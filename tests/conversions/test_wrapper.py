import numpy as np
import pytest

from chromaparse.conversions import convert, np_convert


def test_convert_rgb_to_hsl():
    assert convert((23, 11, 33), "rgb", "hsl") == (273.0, 50.0, 8.6)


def test_convert_hsl_to_rgb():
    assert convert((122, 33, 12), "hsl", "rgb") == (21.0, 41.0, 21.0)


def test_convert_alpha_passes_through():
    assert convert((23, 11, 33, 0.4), "rgba", "hsla") == (273.0, 50.0, 8.6, 0.4)
    assert convert((122, 33, 12, 0.25), "hsla", "rgba") == (21.0, 41.0, 21.0, 0.25)


def test_convert_alpha_defaults_and_drops():
    assert convert((23, 11, 33), "rgb", "hsla") == (273.0, 50.0, 8.6, 1.0)
    assert convert((122, 33, 12, 0.25), "hsla", "rgb") == (21.0, 41.0, 21.0)


def test_convert_same_space_is_identity():
    color = (1, 2, 3)
    assert convert(color, "rgb", "RGB") is color


def test_convert_same_model_adds_alpha():
    assert convert((1, 2, 3), "rgb", "rgba") == (1.0, 2.0, 3.0, 1.0)


def test_convert_rejects_unknown_space():
    with pytest.raises(ValueError):
        convert((1, 2, 3), "hsv", "rgb")  # type: ignore[arg-type]


def test_convert_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        convert((1, 2, 3), "rgba", "hsla")


def test_np_convert():
    colors = np.array([
        [23, 11, 33, 0.4],
        [255, 0, 0, 1.0],
    ])
    result = np_convert(colors, "rgba", "hsla")
    assert result.shape == (2, 4)
    assert np.allclose(result, [[273.0, 50.0, 8.6, 0.4], [0.0, 100.0, 50.0, 1.0]])


def test_np_convert_nested_shape():
    colors = np.zeros((4, 5, 3))
    colors[..., 1] = 100
    colors[..., 2] = 50
    result = np_convert(colors, "hsl", "rgb")
    assert result.shape == (4, 5, 3)
    assert np.all(result == [255.0, 0.0, 0.0])
