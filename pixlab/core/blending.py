#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/blending.py
"""
Separable blend modes and source-over compositing on straight alpha.

Formulas follow W3C Compositing and Blending Level 1. Colors are
floats in [0, 1]; Cb is the backdrop, Cs the source.
"""

from enum import Enum
from typing import Union

import numpy as np

from . import config as c


class BlendMode(Enum):
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"

    @classmethod
    def from_name(cls, value: Union["BlendMode", str]) -> "BlendMode":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key == "source-over":
            key = "normal"
        try:
            return cls(key)
        except ValueError:
            names = ", ".join(m.value for m in cls)
            raise ValueError(f"unknown blend mode: '{value}' (expected one of: {names})") from None


def _multiply(cb: np.ndarray, cs: np.ndarray) -> np.ndarray:
    return cb * cs


def _screen(cb: np.ndarray, cs: np.ndarray) -> np.ndarray:
    return cb + cs - cb * cs


def _hard_light(cb: np.ndarray, cs: np.ndarray) -> np.ndarray:
    return np.where(
        cs <= c.BLEND_MIDPOINT,
        _multiply(cb, 2.0 * cs),
        _screen(cb, 2.0 * cs - 1.0),
    )


def blend(mode: BlendMode, cb: np.ndarray, cs: np.ndarray) -> np.ndarray:
    """B(Cb, Cs) for one blend mode."""
    if mode is BlendMode.NORMAL:
        return cs
    elif mode is BlendMode.MULTIPLY:
        return _multiply(cb, cs)
    elif mode is BlendMode.SCREEN:
        return _screen(cb, cs)
    elif mode is BlendMode.OVERLAY:
        # overlay is hard-light with the layers swapped
        return _hard_light(cs, cb)
    raise ValueError(f"unhandled blend mode: {mode!r}")


def composite_over(dst: np.ndarray, src: np.ndarray, mode: BlendMode) -> np.ndarray:
    """
    Blend `src` onto `dst` and return the new accumulator.

    Both are (H, W, 4) float arrays in [0, 1] with straight (not
    premultiplied) alpha. The source color is first mixed with the blend
    result by the backdrop alpha, then composited source-over.
    """
    cb, ab = dst[..., :3], dst[..., 3:4]
    cs, a_s = src[..., :3], src[..., 3:4]

    mixed = (1.0 - ab) * cs + ab * blend(mode, cb, cs)

    a_out = a_s + ab * (1.0 - a_s)
    premul = a_s * mixed + ab * cb * (1.0 - a_s)
    color = np.divide(premul, a_out, out=np.zeros_like(premul), where=a_out > c.EPS)

    return np.concatenate([color, a_out], axis=-1)
