#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/depth.py
"""
Heuristic colour-depth estimation.

The estimate counts distinct values per channel in a (possibly
downscaled) sample and maps the count to the smallest bit width that
could hold it. It describes how many levels the image actually uses,
not the bit depth of the file it came from: a 16-bit PNG with few
colours reports low, an 8-bit photo reports 8.
"""

from dataclasses import dataclass, field
from typing import Dict, Union

import numpy as np

from . import config as c
from .buffer import PixelBuffer
from .resample import Interpolation, resample

CHANNEL_NAMES = ("red", "green", "blue", "alpha")


@dataclass(frozen=True)
class ChannelStats:
    unique_values: int
    estimated_bits: int


@dataclass(frozen=True)
class DepthReport:
    bits_per_channel: int
    total_bits: int
    alpha_bits: int
    has_alpha: bool
    has_partial_alpha: bool
    description: str
    detailed_description: str
    channel_stats: Dict[str, ChannelStats] = field(default_factory=dict)


def estimate_bits(unique_count: int) -> int:
    """Smallest bit width from the threshold table that covers `unique_count` levels."""
    for limit, bits in c.DEPTH_BIT_THRESHOLDS:
        if unique_count <= limit:
            return bits
    return c.DEPTH_MAX_BITS


def describe_depth(bits_per_channel: int, has_alpha: bool) -> str:
    total = bits_per_channel * 4 if has_alpha else bits_per_channel * 3
    alpha_tag = "A" if has_alpha else ""

    if bits_per_channel <= 1:
        return f"{total}-bit Monochrome{alpha_tag}"
    if bits_per_channel <= 4:
        return f"{total}-bit Indexed{alpha_tag}"
    if bits_per_channel == 5:
        return "20-bit RGBA" if has_alpha else "15-bit RGB"
    if bits_per_channel == 6:
        return "24-bit RGBA" if has_alpha else "18-bit RGB"
    if bits_per_channel == 8:
        return "32-bit RGBA" if has_alpha else "24-bit RGB"
    return f"{total}-bit RGB{alpha_tag}"


def _sample_pixels(source: Union[PixelBuffer, bytes, bytearray, memoryview]) -> np.ndarray:
    if isinstance(source, PixelBuffer):
        if source.width > c.DEPTH_SAMPLE_MAX or source.height > c.DEPTH_SAMPLE_MAX:
            source = resample(
                source,
                min(source.width, c.DEPTH_SAMPLE_MAX),
                min(source.height, c.DEPTH_SAMPLE_MAX),
                Interpolation.NEAREST,
            )
        return source.array().reshape(-1, 4)

    raw = np.frombuffer(bytes(source), dtype=np.uint8)
    if raw.size % 4:
        raise ValueError(f"RGBA sample length must be a multiple of 4, got {raw.size}")
    return raw.reshape(-1, 4)


def analyze_depth(source: Union[PixelBuffer, bytes, bytearray, memoryview]) -> DepthReport:
    """Estimate bits per channel and alpha usage of an image or raw RGBA sample."""
    px = _sample_pixels(source)

    counts = [int(np.unique(px[:, i]).size) for i in range(4)]
    alpha = px[:, 3]
    has_alpha = bool((alpha < 255).any())
    has_partial_alpha = bool(((alpha > 0) & (alpha < 255)).any())

    bits = [estimate_bits(n) for n in counts[:3]]
    alpha_bits = estimate_bits(counts[3]) if has_alpha else 0
    bpc = max(bits)
    total_bits = bpc * 3 + alpha_bits

    detailed = f"{bpc} bits per channel (RGB)"
    if has_alpha:
        detailed += f" + {alpha_bits} bits alpha"

    stats = {
        name: ChannelStats(n, b)
        for name, n, b in zip(CHANNEL_NAMES, counts, bits + [alpha_bits])
    }

    return DepthReport(
        bits_per_channel=bpc,
        total_bits=total_bits,
        alpha_bits=alpha_bits,
        has_alpha=has_alpha,
        has_partial_alpha=has_partial_alpha,
        description=describe_depth(bpc, has_alpha),
        detailed_description=detailed,
        channel_stats=stats,
    )
