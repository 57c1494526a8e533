#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/sanitizer.py

import argparse
import re
from typing import Tuple

from pixlab.core import config as c
from pixlab.core.blending import BlendMode
from pixlab.core.resample import Interpolation


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes a hex color into 6 uppercase characters.
    Shorthand 'ABC' becomes 'AABBCC'; anything else of the wrong length is rejected.
    """
    if value is None:
        return ""
    s = str(value).replace("#", "").replace(" ", "").upper()
    if not re.fullmatch(r"[0-9A-F]+", s):
        return ""
    if len(s) == 3:
        return "".join(ch * 2 for ch in s)
    if len(s) == 6:
        return s
    return ""


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string, so '120px' reads as 120.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")
    digits_only = "".join(re.findall(r"[0-9]", s))

    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    keeping only the first decimal point, so '50%' reads as 50.0.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if dot_seen:
                continue
            dot_seen = True
        clean_str += char

    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color(v: str) -> Tuple[int, int, int]:
    """Validator for colors given as hex ('#FF8800', 'f80') or 'r,g,b'."""
    raw = _sanitize_for_log(v)
    if "," in str(v):
        parts = [p.strip() for p in str(v).split(",")]
        if len(parts) != 3 or not all(re.fullmatch(r"\d{1,3}", p) for p in parts):
            raise argparse.ArgumentTypeError(f"invalid rgb value: '{raw}'")
        rgb = tuple(int(p) for p in parts)
        if any(x > 255 for x in rgb):
            raise argparse.ArgumentTypeError(f"rgb components must be 0-255: '{raw}'")
        return rgb

    cleaned = normalize_hex(v)
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid color value: '{raw}'")
    return tuple(int(cleaned[i:i + 2], 16) for i in (0, 2, 4))


def handle_blend_mode(v: str) -> BlendMode:
    try:
        return BlendMode.from_name(v)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def handle_algorithm(v: str) -> Interpolation:
    try:
        return Interpolation.parse(v)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_coordinate(v: str) -> int:
    """Validator for pixel coordinates; must be a plain non-negative integer."""
    s = str(v).strip()
    if not re.fullmatch(r"\d+", s):
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid coordinate: '{raw}'")
    return int(s)


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# Maps custom CLI argument types to their parsing functions.
INPUT_HANDLERS = {
    "color": handle_color,
    "blend_mode": handle_blend_mode,
    "algorithm": handle_algorithm,
    "coordinate": handle_coordinate,

    "dimension": handle_int_range(c.MIN_DIMENSION, c.MAX_DIMENSION),
    "percent": handle_float_range(c.MIN_PERCENT, c.MAX_PERCENT),
    "opacity": handle_int_range(c.OPACITY_MIN, c.OPACITY_MAX),
    "offset": handle_int_range(-c.MAX_DIMENSION, c.MAX_DIMENSION),
}
