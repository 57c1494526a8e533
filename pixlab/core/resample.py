#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/resample.py
"""
Nearest-neighbour, bilinear and bicubic resizing of RGBA buffers.

All three share the pixel-centre mapping

    src = (dst + 0.5) * src_dim / dst_dim - 0.5

and clamp every out-of-range source index to the nearest edge. Channels,
alpha included, are interpolated independently (no premultiplication).
Results are clamped to [0, 255] and rounded half up.
"""

import math
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Callable, Optional, Tuple, Union

import numpy as np

from . import config as c
from .buffer import PixelBuffer, quantize


class Interpolation(Enum):
    NEAREST = "nearest"
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"

    @classmethod
    def parse(cls, value: Union["Interpolation", str]) -> "Interpolation":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        aliases = {
            "nearest_neighbor": "nearest",
            "nearest_neighbour": "nearest",
            "nn": "nearest",
            "linear": "bilinear",
            "cubic": "bicubic",
        }
        key = aliases.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown interpolation algorithm: '{value}'") from None


def source_coords(dst_len: int, src_len: int) -> np.ndarray:
    """Source-space coordinate of every destination pixel centre."""
    return (np.arange(dst_len, dtype=np.float64) + 0.5) * src_len / dst_len - 0.5


def keys_kernel(t: np.ndarray) -> np.ndarray:
    """Keys cubic convolution kernel with a = -0.5."""
    a = c.BICUBIC_A
    t = np.abs(t)
    t2 = t * t
    t3 = t2 * t
    near = (a + 2) * t3 - (a + 3) * t2 + 1
    far = a * t3 - 5 * a * t2 + 8 * a * t - 4 * a
    return np.where(t <= 1, near, np.where(t <= 2, far, 0.0))


def _nearest_rows(src: np.ndarray, gx: np.ndarray, gy: np.ndarray) -> np.ndarray:
    h, w = src.shape[:2]
    xi = np.clip(np.floor(gx + 0.5).astype(np.int64), 0, w - 1)
    yi = np.clip(np.floor(gy + 0.5).astype(np.int64), 0, h - 1)
    return src[yi[:, None], xi[None, :]]


def _bilinear_rows(src: np.ndarray, gx: np.ndarray, gy: np.ndarray) -> np.ndarray:
    h, w = src.shape[:2]
    x0 = np.floor(gx)
    y0 = np.floor(gy)
    fx = (gx - x0)[None, :, None]
    fy = (gy - y0)[:, None, None]

    x0 = x0.astype(np.int64)
    y0 = y0.astype(np.int64)
    x1 = np.clip(x0, 0, w - 1)
    x2 = np.clip(x0 + 1, 0, w - 1)
    y1 = np.clip(y0, 0, h - 1)[:, None]
    y2 = np.clip(y0 + 1, 0, h - 1)[:, None]

    f = src.astype(np.float64)
    a = f[y1, x1[None, :]]
    b = f[y1, x2[None, :]]
    cc = f[y2, x1[None, :]]
    d = f[y2, x2[None, :]]

    value = (a * (1 - fx) * (1 - fy)
             + b * fx * (1 - fy)
             + cc * (1 - fx) * fy
             + d * fx * fy)
    return quantize(value)


def _bicubic_rows(src: np.ndarray, gx: np.ndarray, gy: np.ndarray) -> np.ndarray:
    h, w = src.shape[:2]
    x0 = np.floor(gx).astype(np.int64)
    y0 = np.floor(gy).astype(np.int64)
    f = src.astype(np.float64)

    total = np.zeros((gy.size, gx.size, 4), dtype=np.float64)
    weight_sum = np.zeros((gy.size, gx.size, 1), dtype=np.float64)

    # Weights use the unclamped tap position; only the pixel lookup is clamped.
    x_taps = [(np.clip(x0 + i, 0, w - 1), keys_kernel(gx - (x0 + i))) for i in c.BICUBIC_TAPS]
    y_taps = [(np.clip(y0 + j, 0, h - 1), keys_kernel(gy - (y0 + j))) for j in c.BICUBIC_TAPS]

    for yi, wy in y_taps:
        rows = f[yi]
        for xi, wx in x_taps:
            weight = (wy[:, None] * wx[None, :])[..., None]
            total += rows[:, xi] * weight
            weight_sum += np.abs(weight)

    result = np.divide(total, weight_sum, out=np.zeros_like(total), where=weight_sum > 0)
    return quantize(result)


_KERNELS = {
    Interpolation.NEAREST: _nearest_rows,
    Interpolation.BILINEAR: _bilinear_rows,
    Interpolation.BICUBIC: _bicubic_rows,
}


def _run_bands(kernel: Callable, src: np.ndarray, gx: np.ndarray, gy: np.ndarray,
               workers: int) -> np.ndarray:
    """Evaluate `kernel` over horizontal bands of destination rows in parallel."""
    bands = np.array_split(np.arange(gy.size), workers)
    bands = [b for b in bands if b.size]
    with ThreadPoolExecutor(max_workers=len(bands)) as pool:
        parts = list(pool.map(lambda rows: kernel(src, gx, gy[rows]), bands))
    return np.concatenate(parts, axis=0)


def resample(
    src: PixelBuffer,
    new_width: int,
    new_height: int,
    algorithm: Union[Interpolation, str] = Interpolation.BILINEAR,
    workers: Optional[int] = None,
) -> PixelBuffer:
    """
    Resize `src` to new_width x new_height.

    `workers` controls row-band parallelism; by default large outputs use
    up to config.MAX_WORKERS threads. The result does not depend on it.
    """
    algo = Interpolation.parse(algorithm)
    new_width, new_height = int(new_width), int(new_height)
    if new_width < c.MIN_DIMENSION or new_height < c.MIN_DIMENSION:
        raise ValueError(f"target size must be positive, got {new_width}x{new_height}")
    if src.is_empty:
        raise ValueError("cannot resample an empty buffer")

    arr = src.array()
    gx = source_coords(new_width, src.width)
    gy = source_coords(new_height, src.height)
    kernel = _KERNELS[algo]

    if workers is None:
        workers = c.MAX_WORKERS if new_width * new_height >= c.PARALLEL_MIN_PIXELS else 1
    workers = max(1, min(int(workers), new_height))

    if workers > 1:
        out = _run_bands(kernel, arr, gx, gy, workers)
    else:
        out = kernel(arr, gx, gy)
    return PixelBuffer.from_array(out)


def nearest_neighbor(src: PixelBuffer, new_width: int, new_height: int) -> PixelBuffer:
    return resample(src, new_width, new_height, Interpolation.NEAREST)


def bilinear(src: PixelBuffer, new_width: int, new_height: int) -> PixelBuffer:
    return resample(src, new_width, new_height, Interpolation.BILINEAR)


def bicubic(src: PixelBuffer, new_width: int, new_height: int) -> PixelBuffer:
    return resample(src, new_width, new_height, Interpolation.BICUBIC)


def target_size(
    width: int,
    height: int,
    value_w: Optional[float] = None,
    value_h: Optional[float] = None,
    mode: str = "pixels",
    keep_aspect: bool = True,
) -> Tuple[int, int]:
    """
    Work out the output size for a resize request.

    mode is "pixels" or "percent". With keep_aspect, a missing side (or,
    when both are given, the height) follows the width's scale.
    """
    if width <= 0 or height <= 0:
        raise ValueError("source size must be positive")
    if value_w is None and value_h is None:
        raise ValueError("at least one of width or height is required")

    if mode == "percent":
        for v in (value_w, value_h):
            if v is not None and not (c.MIN_PERCENT <= v <= c.MAX_PERCENT):
                raise ValueError(f"percentage must be between {c.MIN_PERCENT}% and {c.MAX_PERCENT}%")
        pw = value_w if value_w is not None else value_h
        ph = value_h if value_h is not None else value_w
        if keep_aspect:
            ph = pw
        new_w = width * pw / c.PERCENT_TO_FACTOR
        new_h = height * ph / c.PERCENT_TO_FACTOR
    elif mode == "pixels":
        ratio = width / height
        if keep_aspect:
            if value_w is not None:
                new_w, new_h = value_w, value_w / ratio
            else:
                new_w, new_h = value_h * ratio, value_h
        else:
            new_w = value_w if value_w is not None else width
            new_h = value_h if value_h is not None else height
    else:
        raise ValueError(f"unknown resize mode: '{mode}'")

    new_w = max(c.MIN_DIMENSION, int(math.floor(new_w + 0.5)))
    new_h = max(c.MIN_DIMENSION, int(math.floor(new_h + 0.5)))
    if new_w > c.MAX_DIMENSION or new_h > c.MAX_DIMENSION:
        raise ValueError(f"maximum size is {c.MAX_DIMENSION} pixels per side")
    return new_w, new_h
