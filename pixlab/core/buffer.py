#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/buffer.py

from dataclasses import dataclass
from typing import Tuple

import numpy as np

CHANNELS = 4


def quantize(values: np.ndarray) -> np.ndarray:
    """Clamp to [0, 255] and round half up to uint8."""
    return np.floor(np.clip(values, 0.0, 255.0) + 0.5).astype(np.uint8)


@dataclass(frozen=True)
class PixelBuffer:
    """
    Row-major RGBA image, 4 bytes per pixel.

    Buffers are immutable: every transformation allocates a new one and
    the arrays returned by `array` are read-only views.
    """

    width: int
    height: int
    pixels: bytes

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"negative buffer size: {self.width}x{self.height}")
        if not isinstance(self.pixels, bytes):
            object.__setattr__(self, "pixels", bytes(self.pixels))
        expected = self.width * self.height * CHANNELS
        if len(self.pixels) != expected:
            raise ValueError(
                f"pixel data length {len(self.pixels)} does not match "
                f"{self.width}x{self.height}x{CHANNELS} = {expected}"
            )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "PixelBuffer":
        """Build a buffer from an (H, W, 4) array; values are clipped to 0-255."""
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] != CHANNELS:
            raise ValueError(f"expected an (H, W, 4) array, got shape {arr.shape}")
        if arr.dtype != np.uint8:
            arr = np.clip(arr, 0, 255).astype(np.uint8)
        height, width = arr.shape[:2]
        return cls(width, height, np.ascontiguousarray(arr).tobytes())

    @classmethod
    def filled(cls, width: int, height: int, rgba: Tuple[int, int, int, int] = (0, 0, 0, 0)) -> "PixelBuffer":
        return cls(width, height, bytes(rgba) * (width * height))

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def array(self) -> np.ndarray:
        """Read-only (H, W, 4) uint8 view of the pixel data."""
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(self.height, self.width, CHANNELS)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        i = (y * self.width + x) * CHANNELS
        r, g, b, a = self.pixels[i:i + CHANNELS]
        return r, g, b, a

    def has_transparency(self) -> bool:
        return bool((self.array()[..., 3] < 255).any())

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height})"
