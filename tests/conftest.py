"""Shared fixtures: small synthetic RGBA buffers built with numpy."""

import numpy as np
import pytest

from pixlab.core.buffer import PixelBuffer

from helpers import make_buffer, solid


@pytest.fixture
def white_2x2() -> PixelBuffer:
    return solid(2, 2)


@pytest.fixture
def checker_2x2() -> PixelBuffer:
    black = (0, 0, 0, 255)
    white = (255, 255, 255, 255)
    return make_buffer([[black, white], [white, black]])


@pytest.fixture
def random_buffer() -> PixelBuffer:
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(9, 13, 4), dtype=np.uint8)
    return PixelBuffer.from_array(arr)


@pytest.fixture
def translucent_buffer() -> PixelBuffer:
    """4x1 strip with alpha 0, 100, 200, 255."""
    return make_buffer([[
        (10, 20, 30, 0),
        (40, 50, 60, 100),
        (70, 80, 90, 200),
        (100, 110, 120, 255),
    ]])
