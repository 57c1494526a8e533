#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c
from pixlab.shared.clamping import _clamp01


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to hex string."""
    r_clamped = max(0, min(int(c.RGB_MAX), int(math.floor(r + 0.5))))
    g_clamped = max(0, min(int(c.RGB_MAX), int(math.floor(g + 0.5))))
    b_clamped = max(0, min(int(c.RGB_MAX), int(math.floor(b + 0.5))))
    return f"{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert a 6-digit hex string (with or without '#') to an RGB tuple."""
    h = hex_code.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    if len(h) != 6:
        raise ValueError(f"invalid hex color: '{hex_code}'")
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def srgb_to_linear(color_comp: float) -> float:
    """Linearize an 8-bit sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def rgb_to_linear(r: int, g: int, b: int) -> Tuple[float, float, float]:
    return srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)


def linear_rgb_to_xyz(r_lin: float, g_lin: float, b_lin: float) -> Tuple[float, float, float]:
    """Convert linear RGB to CIE XYZ (D65), scaled to 0-100."""
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to CIE XYZ."""
    return linear_rgb_to_xyz(*rgb_to_linear(r, g, b))


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ to CIE LAB."""
    x_r = x / c.D65_X
    y_r = y / c.D65_Y
    z_r = z / c.D65_Z
    fx, fy, fz = _xyz_f(x_r), _xyz_f(y_r), _xyz_f(z_r)
    if y_r > c.LAB_E:
        L = (c.LAB_L_MULT * fy) - c.LAB_L_SUB
    else:
        # 116 * (k*t + 16/116) - 16 with the offsets cancelled, so black is exactly 0
        L = c.LAB_L_MULT * c.LAB_K * y_r
    a = c.LAB_A_MULT * (fx - fy)
    b = c.LAB_B_MULT * (fy - fz)
    return L, a, b


def rgb_to_lab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Direct RGB to LAB conversion."""
    x, y, z = rgb_to_xyz(r, g, b)
    return xyz_to_lab(x, y, z)


def _signed_cbrt(v: float) -> float:
    root = abs(v) ** c.OKLAB_CUBE_ROOT_EXP
    return root if v >= 0 else -root


def linear_rgb_to_oklab(r_lin: float, g_lin: float, b_lin: float) -> Tuple[float, float, float]:
    """Convert linear RGB to OKLab."""
    m1 = c.M1_OKLAB
    l_val = m1[0][0] * r_lin + m1[0][1] * g_lin + m1[0][2] * b_lin
    m_val = m1[1][0] * r_lin + m1[1][1] * g_lin + m1[1][2] * b_lin
    s_val = m1[2][0] * r_lin + m1[2][1] * g_lin + m1[2][2] * b_lin

    l_ = _signed_cbrt(l_val)
    m_ = _signed_cbrt(m_val)
    s_ = _signed_cbrt(s_val)

    m2 = c.M2_OKLAB
    ok_l = m2[0][0] * l_ + m2[0][1] * m_ + m2[0][2] * s_
    ok_a = m2[1][0] * l_ + m2[1][1] * m_ + m2[1][2] * s_
    ok_b = m2[2][0] * l_ + m2[2][1] * m_ + m2[2][2] * s_
    return ok_l, ok_a, ok_b


def rgb_to_oklab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to OKLab."""
    return linear_rgb_to_oklab(*rgb_to_linear(r, g, b))


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    if hue >= c.HUE_MAX:
        hue = 0.0
    return L, chroma, hue


def rgb_to_oklch(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Direct RGB to OKLCH conversion."""
    L, a_val, b_val = rgb_to_oklab(r, g, b)
    return oklab_to_oklch(L, a_val, b_val)


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__ and not _name.startswith("_"):
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
