#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/preview.py

import re
from typing import Sequence

from pixlab.core import config as c
from pixlab.core.conversions import rgb_to_hex
from .truecolor import swatches_enabled

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def print_row(title: str, value: str) -> None:
    """One aligned `title : value` line."""
    padding = " " * max(0, c.PREVIEW_LABEL_WIDTH - get_visible_len(title))
    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {value}")


def print_color_block(rgb: Sequence[int], title: str = "color", end: str = "\n") -> None:
    r, g, b = (int(v) for v in rgb[:3])
    hex_code = rgb_to_hex(r, g, b)
    padding = " " * max(0, c.PREVIEW_LABEL_WIDTH - get_visible_len(title))
    swatch = f"\033[48;2;{r};{g};{b}m                {c.RESET}  " if swatches_enabled() else ""

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch}{c.BOLD_WHITE}#{hex_code}{c.RESET}", end=end)
