#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/pick/engine.py

import argparse

from pixlab.core.graybit7 import gray7_of
from pixlab.core.loader import LoadedImage
from pixlab.core.sample import sample_at
from pixlab.logic.contrast.renderer import render_contrast
from pixlab.shared.files import load_or_exit
from pixlab.shared.logger import fail
from .renderer import render_sample


def _pick(image: LoadedImage, x: int, y: int, title: str, verbose: bool):
    buffer = image.buffer
    if not (0 <= x < buffer.width and 0 <= y < buffer.height):
        fail(f"({x}, {y}) is outside the {buffer.width}x{buffer.height} image", 2)

    sample = sample_at(buffer, x, y)
    alpha = buffer.pixel(x, y)[3]
    gray7 = gray7_of(sample.r) if image.is_graybit7 else None
    render_sample(sample, title, alpha, gray7, verbose)
    return sample


def run(args: argparse.Namespace) -> None:
    image = load_or_exit(args.file)

    print()
    first = _pick(image, args.x, args.y, f"({args.x}, {args.y})", args.verbose)
    if args.compare:
        cx, cy = args.compare
        print()
        second = _pick(image, cx, cy, f"({cx}, {cy})", args.verbose)
        print()
        render_contrast(first.contrast_with(second))
    print()
