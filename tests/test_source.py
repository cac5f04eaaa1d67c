import numpy as np
import pytest
from PIL import Image

from boxpic.colour import Colour
from boxpic.source import ArraySource, ImageSource, open_source


def test_grayscale_array():
    source = ArraySource(np.array([[0, 50, 100], [150, 200, 250]], dtype=np.uint8))
    assert (source.width, source.height) == (3, 2)
    assert source.get_pixel(2, 1) == Colour(250, 250, 250, 255)


def test_rgb_array_gets_opaque_alpha():
    source = ArraySource(np.array([[[1, 2, 3]]], dtype=np.uint8))
    assert source.get_pixel(0, 0) == Colour(1, 2, 3, 255)


def test_rgba_array_keeps_alpha():
    source = ArraySource(np.array([[[1, 2, 3, 4], [5, 6, 7, 8]]], dtype=np.uint8))
    assert source.get_pixel(1, 0) == Colour(5, 6, 7, 8)


def test_pixels_are_plain_ints():
    source = ArraySource(np.full((1, 1, 3), 9, dtype=np.uint8))
    assert all(type(channel) is int for channel in source.get_pixel(0, 0))


def test_empty_array():
    source = ArraySource(np.zeros((0, 0, 4), dtype=np.uint8))
    assert (source.width, source.height) == (0, 0)


@pytest.mark.parametrize("shape", [(4,), (2, 2, 2), (2, 2, 5), (1, 1, 1, 3)])
def test_unsupported_shapes_fail(shape):
    with pytest.raises(ValueError, match="Expected an"):
        ArraySource(np.zeros(shape, dtype=np.uint8))


def test_image_source_converts_mode():
    source = ImageSource(Image.new("L", (4, 2), 100))
    assert (source.width, source.height) == (4, 2)
    assert source.get_pixel(3, 1) == Colour(100, 100, 100, 255)


def test_image_source_keeps_transparency():
    source = ImageSource(Image.new("RGBA", (1, 1), (1, 2, 3, 4)))
    assert source.get_pixel(0, 0) == Colour(1, 2, 3, 4)


def test_open_source_accepts_path(tmp_path):
    path = tmp_path / "test.png"
    Image.new("RGB", (3, 5), (10, 20, 30)).save(path)
    for image in (path, str(path)):
        source = open_source(image)
        assert (source.width, source.height) == (3, 5)
        assert source.get_pixel(0, 4) == Colour(10, 20, 30, 255)


@pytest.mark.parametrize("values", [[[300, 256]], [[-1, 0]]])
def test_out_of_range_values_fail(values):
    with pytest.raises(ValueError, match=r"in \[0, 255\], got range"):
        ArraySource(np.array(values))


def test_float_arrays_fail():
    with pytest.raises(ValueError, match="got dtype float64"):
        ArraySource(np.array([[1.0, 0.9]]))


def test_wide_integer_dtype_in_range_is_accepted():
    source = ArraySource(np.array([[0, 255]], dtype=np.int64))
    assert source.get_pixel(1, 0) == Colour(255, 255, 255, 255)


def test_zero_width_array():
    source = ArraySource(np.zeros((4, 0, 3), dtype=np.uint8))
    assert (source.width, source.height) == (0, 4)
