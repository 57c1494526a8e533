#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/compositor.py
"""
Flatten a LayerStack into a single RGBA buffer.

Layers are drawn bottom-to-top. Image layers are fitted into the output
(uniform scale, centred) and then shifted by their position; color
layers cover the whole output; empty layers draw nothing. Hidden layers
and layers at opacity 0 are skipped outright.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from . import config as c
from .blending import composite_over
from .buffer import PixelBuffer, quantize
from .layers import ColorContent, ImageContent, Layer, LayerStack
from .resample import resample


@dataclass
class _Placed:
    """A layer rendered into output space."""

    layer: Layer
    rgba: np.ndarray          # (H, W, 4) float, effective alpha applied
    footprint: np.ndarray     # (H, W) bool, pixels the layer draws on
    origin: Tuple[int, int]   # top-left of the drawn rectangle


def _half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def fit_rect(src_w: int, src_h: int, out_w: int, out_h: int) -> Tuple[int, int, int, int]:
    """Contain-fit of src into out, centred: (x, y, width, height)."""
    scale = min(out_w / src_w, out_h / src_h)
    w = max(1, _half_up(src_w * scale))
    h = max(1, _half_up(src_h * scale))
    return _half_up((out_w - w) / 2), _half_up((out_h - h) / 2), w, h


def _image_pixels(layer: Layer) -> PixelBuffer:
    buffer = layer.content.buffer
    channel = layer.alpha_channel
    if channel is not None and not channel.visible:
        arr = np.array(buffer.array())
        arr[..., 3] = 255
        buffer = PixelBuffer.from_array(arr)
    return buffer


def _place_image(layer: Layer, out_w: int, out_h: int) -> Optional[Tuple[np.ndarray, np.ndarray, Tuple[int, int]]]:
    buffer = _image_pixels(layer)
    if buffer.is_empty:
        return None

    x, y, w, h = fit_rect(buffer.width, buffer.height, out_w, out_h)
    if (w, h) != buffer.size:
        buffer = resample(buffer, w, h, c.FIT_INTERPOLATION)
    x += layer.position.x
    y += layer.position.y

    canvas = np.zeros((out_h, out_w, 4), dtype=np.float64)
    footprint = np.zeros((out_h, out_w), dtype=bool)

    # clip the drawn rectangle to the output
    x0, y0 = max(x, 0), max(y, 0)
    x1, y1 = min(x + w, out_w), min(y + h, out_h)
    if x0 >= x1 or y0 >= y1:
        return canvas, footprint, (x, y)

    src = buffer.array()[y0 - y:y1 - y, x0 - x:x1 - x]
    canvas[y0:y1, x0:x1] = src / c.RGB_MAX
    footprint[y0:y1, x0:x1] = True
    return canvas, footprint, (x, y)


def _place_color(layer: Layer, out_w: int, out_h: int) -> Tuple[np.ndarray, np.ndarray, Tuple[int, int]]:
    canvas = np.empty((out_h, out_w, 4), dtype=np.float64)
    canvas[...] = np.array(layer.content.rgba, dtype=np.float64) / c.RGB_MAX
    return canvas, np.ones((out_h, out_w), dtype=bool), (0, 0)


def _is_rgba(value) -> bool:
    if not isinstance(value, (tuple, list)) or len(value) != 4:
        return False
    return all(isinstance(v, (int, np.integer)) and not isinstance(v, bool) and 0 <= v <= 255
               for v in value)


def place_layer(layer: Layer, out_w: int, out_h: int) -> Optional[_Placed]:
    """
    Render one layer into output space, or None if it draws nothing.

    Content that cannot be drawn (a missing buffer, a malformed color) is
    treated like an empty layer.
    """
    content = layer.content
    if isinstance(content, ImageContent) and isinstance(content.buffer, PixelBuffer):
        placed = _place_image(layer, out_w, out_h)
    elif isinstance(content, ColorContent) and _is_rgba(content.rgba):
        placed = _place_color(layer, out_w, out_h)
    else:
        return None
    if placed is None:
        return None

    rgba, footprint, origin = placed
    rgba[..., 3] *= layer.opacity / c.PERCENT_TO_FACTOR
    return _Placed(layer, rgba, footprint, origin)


def checkerboard(width: int, height: int, origin: Tuple[int, int] = (0, 0),
                 size: int = c.CHECKER_SIZE) -> np.ndarray:
    """Opaque (H, W, 4) float checkerboard whose first square starts at `origin`."""
    ys = (np.arange(height) - origin[1]) // size
    xs = (np.arange(width) - origin[0]) // size
    light = ((ys[:, None] + xs[None, :]) % 2) == 0

    out = np.empty((height, width, 4), dtype=np.float64)
    out[..., :3] = np.where(
        light[..., None],
        np.array(c.CHECKER_LIGHT, dtype=np.float64) / c.RGB_MAX,
        np.array(c.CHECKER_DARK, dtype=np.float64) / c.RGB_MAX,
    )
    out[..., 3] = 1.0
    return out


def _background(placed: List[_Placed], out_w: int, out_h: int) -> np.ndarray:
    """
    Checkerboard under every translucent layer footprint that has no
    opaque pixel beneath it; transparent everywhere else.
    """
    background = np.zeros((out_h, out_w, 4), dtype=np.float64)
    covered = np.zeros((out_h, out_w), dtype=bool)

    for item in placed:
        alpha = item.rgba[..., 3]
        if (alpha[item.footprint] < 1.0).any():
            region = item.footprint & ~covered
            if region.any():
                board = checkerboard(out_w, out_h, item.origin)
                background[region] = board[region]
        covered |= item.footprint & (alpha >= 1.0)

    return background


def composite(stack: LayerStack, out_w: int, out_h: int,
              transparency_background: bool = True) -> PixelBuffer:
    """
    Flatten `stack` into an out_w x out_h buffer.

    Never modifies the stack or any buffer it references.
    """
    out_w, out_h = int(out_w), int(out_h)
    if out_w < 0 or out_h < 0:
        raise ValueError(f"negative output size: {out_w}x{out_h}")
    if out_w == 0 or out_h == 0:
        return PixelBuffer(out_w, out_h, b"")

    placed = []
    for layer in stack.bottom_to_top():
        if not layer.visible or layer.opacity <= 0:
            continue
        item = place_layer(layer, out_w, out_h)
        if item is not None:
            placed.append(item)

    if transparency_background:
        acc = _background(placed, out_w, out_h)
    else:
        acc = np.zeros((out_h, out_w, 4), dtype=np.float64)

    for item in placed:
        acc = composite_over(acc, item.rgba, item.layer.blend_mode)

    return PixelBuffer.from_array(quantize(acc * c.RGB_MAX))
