#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/luminance.py

from . import config as c
from pixlab.shared.clamping import _clamp01


def _wcag_linear(color_comp: int) -> float:
    """sRGB gamma expansion with the WCAG reference threshold (0.03928)."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.WCAG_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: int, g: int, b: int) -> float:
    return (
        c.LUMA_R * _wcag_linear(r) +
        c.LUMA_G * _wcag_linear(g) +
        c.LUMA_B * _wcag_linear(b)
    )
