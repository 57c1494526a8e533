#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/pick/renderer.py

from typing import Optional

from pixlab.core import config as c
from pixlab.core.sample import ColorSample
from pixlab.shared.formatting import format_colorspace
from pixlab.shared.preview import print_color_block, print_row


def render_sample(sample: ColorSample, title: str, alpha: int,
                  gray7: Optional[int] = None, verbose: bool = False) -> None:
    print_color_block(sample.rgb, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print_row("rgb", format_colorspace("rgb", *sample.rgb))
    print_row("alpha", str(alpha))
    if gray7 is not None:
        print_row("gray", format_colorspace("gray7", gray7))
    if verbose:
        print_row("linear rgb", format_colorspace("linear", *sample.linear))
    print_row("xyz", format_colorspace("xyz", *sample.xyz))
    print_row("lab", format_colorspace("lab", *sample.lab))
    if verbose:
        print_row("oklab", format_colorspace("oklab", *sample.oklab))
    print_row("oklch", format_colorspace("oklch", *sample.oklch))
    print_row("luminance", f"{sample.luminance:.4f}")
