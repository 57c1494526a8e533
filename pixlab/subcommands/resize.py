#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/resize.py

import argparse
import sys
from pixlab.core import config as c
from pixlab.core.resample import Interpolation
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.sanitizer import INPUT_HANDLERS
from pixlab.shared.truecolor import ensure_truecolor
from pixlab.logic.resize import engine

def get_resize_parser() -> argparse.ArgumentParser:
    """Create argument parser for resize command."""
    parser = PixlabArgumentParser(
        prog="pixlab resize",
        description="pixlab resize: resample an image with nearest, bilinear or bicubic interpolation",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="source image")
    parser.add_argument("output", help="destination file, format from extension")

    size_group = parser.add_argument_group("target size")
    size_group.add_argument(
        "-W",
        "--width",
        type=INPUT_HANDLERS["dimension"],
        help=f"target width in pixels ({c.MIN_DIMENSION}-{c.MAX_DIMENSION})",
    )
    size_group.add_argument(
        "-H",
        "--height",
        type=INPUT_HANDLERS["dimension"],
        help=f"target height in pixels ({c.MIN_DIMENSION}-{c.MAX_DIMENSION})",
    )
    size_group.add_argument(
        "-p",
        "--percent",
        type=INPUT_HANDLERS["percent"],
        help=f"uniform scale in percent ({c.MIN_PERCENT}-{c.MAX_PERCENT})",
    )
    size_group.add_argument(
        "-k",
        "--keep-aspect",
        action="store_true",
        help="derive the height from the width (or the width from the height)",
    )

    parser.add_argument(
        "-a",
        "--algorithm",
        type=INPUT_HANDLERS["algorithm"],
        default=Interpolation.BILINEAR,
        help="nearest, bilinear or bicubic (default: bilinear)",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="show the size change and timing",
    )
    return parser

def main() -> None:
    """Main entry point for resize command."""
    parser = get_resize_parser()
    args = parser.parse_args(sys.argv[1:])
    if args.percent is not None and (args.width is not None or args.height is not None):
        parser.error("--percent cannot be combined with --width/--height")
    ensure_truecolor()
    engine.run(args)

if __name__ == "__main__":
    main()
