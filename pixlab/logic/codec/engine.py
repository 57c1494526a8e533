#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/codec/engine.py

import argparse

from pixlab.core import config as c
from pixlab.core.graybit7 import encode
from pixlab.core.loader import export_format
from pixlab.shared.files import load_or_exit, save_or_exit
from pixlab.shared.logger import fail, log


def run_encode(args: argparse.Namespace) -> None:
    """Convert any loadable image to GrayBit-7."""
    if not args.output.lower().endswith("." + c.GB7_EXTENSION):
        log("warning", f"output does not end in '.{c.GB7_EXTENSION}', writing GrayBit-7 anyway")

    image = load_or_exit(args.input)
    buffer = image.buffer
    if buffer.width > c.GB7_MAX_DIMENSION or buffer.height > c.GB7_MAX_DIMENSION:
        fail(f"{buffer.width}x{buffer.height} exceeds the GrayBit-7 limit of "
             f"{c.GB7_MAX_DIMENSION} pixels per side")

    include_mask = args.mask
    if include_mask is None:
        include_mask = buffer.has_transparency()
    if include_mask and buffer.has_transparency():
        log("info", "alpha reduced to a 1-bit mask (opaque above 127)")
    if not image.is_graybit7:
        log("info", "colors reduced to 7-bit grayscale")

    data = encode(buffer, include_mask)
    try:
        with open(args.output, "wb") as f:
            f.write(data)
    except OSError as e:
        fail(f"cannot write '{args.output}': {e.strerror or e}")
    log("success", f"saved {buffer.width}x{buffer.height} GrayBit-7 image "
                   f"({len(data)} bytes, mask {'on' if include_mask else 'off'}) to '{args.output}'")


def run_decode(args: argparse.Namespace) -> None:
    """Write a loaded image (GrayBit-7 or otherwise) out in a platform format."""
    try:
        fmt = export_format(args.output)
    except ValueError as e:
        fail(str(e), 2)
    if fmt == c.GB7_FORMAT_NAME:
        fail("use 'pixlab encode' to write GrayBit-7", 2)

    image = load_or_exit(args.input)
    if fmt == "JPEG" and image.buffer.has_transparency():
        log("warning", "JPEG has no alpha channel; transparency is dropped")
    save_or_exit(image.buffer, args.output)
