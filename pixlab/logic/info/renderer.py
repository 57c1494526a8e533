#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/info/renderer.py

from pixlab.core import config as c
from pixlab.core.loader import LoadedImage
from pixlab.shared.formatting import format_dimensions, format_size
from pixlab.shared.preview import print_row


def render_image_info(image: LoadedImage) -> None:
    print_row("file", image.filename or "-")
    print_row("format", f"{c.BOLD_WHITE}{image.format_name}{c.RESET}")
    print_row("dimensions", format_dimensions(image.width, image.height))
    print_row("file size", format_size(image.size))
    print_row("color depth", image.color_depth)

    meta = image.metadata
    if meta is not None:
        print_row("signature", meta.signature.hex(" ").upper())
        print_row("version", str(meta.version))
        print_row("mask", "yes" if meta.has_mask else "no")
        print_row("payload", f"{meta.payload_size} bytes")
