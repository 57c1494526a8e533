#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/sample.py

from dataclasses import dataclass
from functools import cached_property
from typing import Tuple

from . import conversions as conv
from .buffer import PixelBuffer
from .contrast import ContrastResult, contrast
from .luminance import get_luminance


@dataclass(frozen=True)
class ColorSample:
    """An RGB triple whose derived color-space values are computed on first use."""

    r: int
    g: int
    b: int

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    @cached_property
    def hex(self) -> str:
        return conv.rgb_to_hex(self.r, self.g, self.b)

    @cached_property
    def linear(self) -> Tuple[float, float, float]:
        return conv.rgb_to_linear(self.r, self.g, self.b)

    @cached_property
    def xyz(self) -> Tuple[float, float, float]:
        return conv.linear_rgb_to_xyz(*self.linear)

    @cached_property
    def lab(self) -> Tuple[float, float, float]:
        return conv.xyz_to_lab(*self.xyz)

    @cached_property
    def oklab(self) -> Tuple[float, float, float]:
        return conv.linear_rgb_to_oklab(*self.linear)

    @cached_property
    def oklch(self) -> Tuple[float, float, float]:
        return conv.oklab_to_oklch(*self.oklab)

    @cached_property
    def luminance(self) -> float:
        return get_luminance(self.r, self.g, self.b)

    def contrast_with(self, other: "ColorSample") -> ContrastResult:
        return contrast(self.rgb, other.rgb)


def sample_at(buffer: PixelBuffer, x: int, y: int) -> ColorSample:
    r, g, b, _ = buffer.pixel(x, y)
    return ColorSample(r, g, b)
