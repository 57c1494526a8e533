import numpy as np

from pixlab.core.buffer import PixelBuffer


def make_buffer(pixels) -> PixelBuffer:
    """Buffer from a nested list / array of RGBA rows."""
    return PixelBuffer.from_array(np.array(pixels, dtype=np.uint8))


def solid(width, height, rgba=(255, 255, 255, 255)) -> PixelBuffer:
    return PixelBuffer.filled(width, height, rgba)
