#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/contrast.py

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from . import config as c
from .luminance import get_luminance


class ContrastRating(Enum):
    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA large text"
    INSUFFICIENT = "insufficient"

    @property
    def passes(self) -> bool:
        return self is not ContrastRating.INSUFFICIENT


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    rating: ContrastRating

    def __str__(self):
        return f"{self.ratio:.2f}:1 ({self.rating.value})"


def rate_contrast(ratio: float) -> ContrastRating:
    if ratio >= c.WCAG_AAA:
        return ContrastRating.AAA
    if ratio >= c.WCAG_AA:
        return ContrastRating.AA
    if ratio >= c.WCAG_AA_LARGE:
        return ContrastRating.AA_LARGE
    return ContrastRating.INSUFFICIENT


def get_contrast_ratio_rgb(c1: Sequence[int], c2: Sequence[int]) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two specific RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = get_luminance(*c1[:3])
    y2 = get_luminance(*c2[:3])

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def contrast(c1: Sequence[int], c2: Sequence[int]) -> ContrastResult:
    ratio = get_contrast_ratio_rgb(c1, c2)
    return ContrastResult(ratio, rate_contrast(ratio))
