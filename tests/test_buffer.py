import numpy as np
import pytest

from pixlab.core.buffer import PixelBuffer, quantize

from helpers import make_buffer


def test_length_mismatch_fails_fast():
    with pytest.raises(ValueError):
        PixelBuffer(2, 2, bytes(15))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        PixelBuffer(-1, 2, b"")


def test_array_view_is_read_only(white_2x2):
    arr = white_2x2.array()
    assert arr.shape == (2, 2, 4)
    with pytest.raises(ValueError):
        arr[0, 0, 0] = 1


def test_pixel_lookup_and_bounds():
    buf = make_buffer([[(1, 2, 3, 4), (5, 6, 7, 8)]])
    assert buf.pixel(1, 0) == (5, 6, 7, 8)
    with pytest.raises(IndexError):
        buf.pixel(2, 0)


def test_has_transparency(white_2x2, translucent_buffer):
    assert not white_2x2.has_transparency()
    assert translucent_buffer.has_transparency()


def test_quantize_rounds_half_up_and_clamps():
    out = quantize(np.array([-3.0, 0.5, 1.49, 127.5, 254.5, 300.0]))
    assert out.tolist() == [0, 1, 1, 128, 255, 255]


def test_from_array_requires_four_channels():
    with pytest.raises(ValueError):
        PixelBuffer.from_array(np.zeros((2, 2, 3), dtype=np.uint8))
