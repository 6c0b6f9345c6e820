import numpy as np
import pytest
from colorstate.conversions import convert, np_convert, FormatType

def test_convert_returns_tuple():
    result = convert((255, 128, 64), "rgb", "hsl", output_type=FormatType.FLOAT)
    assert isinstance(result, tuple)
    assert len(result) == 3

def test_convert_rgb_int_to_hsl_formats():
    assert convert((255, 0, 0), "rgb", "hsl", FormatType.INT, FormatType.FLOAT) == (0.0, 1.0, 0.5)
    assert convert((0, 255, 0), "rgb", "hsl", FormatType.INT, FormatType.PERCENTAGE) == (120.0, 100.0, 50.0)
    assert convert((0, 0, 255), "rgb", "hsl", FormatType.INT, FormatType.INT) == (240, 255, 128)

def test_convert_hsl_to_rgb():
    assert convert((120.0, 100.0, 50.0), "hsl", "rgb", FormatType.PERCENTAGE, FormatType.INT) == (0, 255, 0)
    assert convert((240.0, 1.0, 0.5), "hsl", "rgb", FormatType.FLOAT, FormatType.FLOAT) == (0.0, 0.0, 1.0)

def test_convert_int_output_is_python_int():
    result = convert((240.0, 1.0, 0.5), "hsl", "rgb", FormatType.FLOAT, FormatType.INT)
    assert all(type(v) is int for v in result)

def test_convert_rescales_within_space():
    color = (1.0, 0.5, 0.25)
    assert convert(color, "rgb", "rgb", FormatType.FLOAT, FormatType.INT) == (255, 128, 64)
    assert convert(color, "rgb", "rgb", FormatType.FLOAT, FormatType.PERCENTAGE) == (100.0, 50.0, 25.0)

def test_convert_same_space_and_format_is_identity():
    color = (12, 34, 56)
    assert convert(color, "rgb", "rgb") is color
    assert convert(color, "RGB", "rgb") is color

def test_unknown_space_raises():
    with pytest.raises(ValueError):
        convert((0, 0, 0), "hsv", "rgb")
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 3)), "rgb", "lab")

def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        convert((0, 0, 0, 255), "rgb", "hsl")

def test_np_convert_shape_and_values():
    colors = np.array([
        [[255, 0, 0], [0, 255, 0]],
        [[0, 0, 255], [255, 255, 255]],
    ])
    result = np_convert(colors, "rgb", "hsl", FormatType.INT, FormatType.FLOAT)
    assert result.shape == (2, 2, 3)
    expected = np.array([
        [[0.0, 1.0, 0.5], [120.0, 1.0, 0.5]],
        [[240.0, 1.0, 0.5], [0.0, 0.0, 1.0]],
    ])
    assert np.allclose(result, expected)

    back = np_convert(result, "hsl", "rgb", FormatType.FLOAT, FormatType.INT)
    assert np.array_equal(back, colors)

def test_int_hsl_hue_wraps_below_360():
    # hue 359.76 rounds to 360, which is the same angle as 0
    assert convert((255, 0, 1), "rgb", "hsl") == (0, 255, 128)
    assert convert((359.6, 1.0, 0.5), "hsl", "hsl", FormatType.FLOAT, FormatType.INT) == (0, 255, 128)

    result = np_convert(np.array([[255, 0, 1], [255, 0, 5]]), "rgb", "hsl")
    assert result[..., 0].tolist() == [0, 359]
    assert ((result[..., 0] >= 0) & (result[..., 0] < 360)).all()
