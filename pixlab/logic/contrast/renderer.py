#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/contrast/renderer.py

from typing import Sequence

from pixlab.core import config as c
from pixlab.core.contrast import ContrastResult
from pixlab.shared.preview import print_row


def render_contrast(result: ContrastResult) -> None:
    level = "success" if result.rating.passes else "error"
    ratio = f"{c.BOLD_WHITE}{result.ratio:.2f}:1{c.RESET}"
    rating = f"{c.MSG_BOLD_COLORS[level]}{result.rating.value}{c.RESET}"
    print_row("contrast", f"{ratio}  {rating}")


def render_thresholds(ratio: float, thresholds: Sequence = (
        ("AAA", c.WCAG_AAA), ("AA", c.WCAG_AA), ("AA large", c.WCAG_AA_LARGE))) -> None:
    for label, limit in thresholds:
        ok = ratio >= limit
        mark = f"{c.MSG_COLORS['success']}pass{c.RESET}" if ok else f"{c.MSG_COLORS['error']}fail{c.RESET}"
        print_row(f"  {label} ({limit:g}:1)", mark)
