#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/composite.py

import argparse
import sys
from pixlab.core import config as c
from pixlab.core.blending import BlendMode
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.sanitizer import INPUT_HANDLERS
from pixlab.shared.truecolor import ensure_truecolor
from pixlab.logic.composite import engine

def get_composite_parser() -> argparse.ArgumentParser:
    """Create argument parser for composite command."""
    modes = ", ".join(m.value for m in BlendMode)
    parser = PixlabArgumentParser(
        prog="pixlab composite",
        description="pixlab composite: put a second layer over an image and flatten the result",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("base", help="base image (bottom layer)")
    parser.add_argument("output", help="destination file, format from extension")

    content_group = parser.add_mutually_exclusive_group()
    content_group.add_argument(
        "-o",
        "--overlay",
        help="image for the second layer",
    )
    content_group.add_argument(
        "-f",
        "--fill",
        type=INPUT_HANDLERS["color"],
        help="fill the second layer with a color (hex or r,g,b)",
    )

    layer_group = parser.add_argument_group("layer options")
    layer_group.add_argument(
        "-O",
        "--opacity",
        type=INPUT_HANDLERS["opacity"],
        default=c.OPACITY_MAX,
        help=f"opacity of the second layer in percent (default: {c.OPACITY_MAX})",
    )
    layer_group.add_argument(
        "-b",
        "--blend",
        type=INPUT_HANDLERS["blend_mode"],
        default=BlendMode.NORMAL,
        help=f"blend mode: {modes} (default: normal)",
    )
    layer_group.add_argument(
        "--offset",
        nargs=2,
        type=INPUT_HANDLERS["offset"],
        metavar=("X", "Y"),
        help="shift the second layer by X, Y pixels",
    )
    layer_group.add_argument(
        "--below",
        action="store_true",
        help="place the second layer under the base image",
    )
    layer_group.add_argument(
        "--hide-alpha",
        action="store_true",
        help="ignore the overlay's transparency",
    )

    out_group = parser.add_argument_group("output")
    out_group.add_argument(
        "-s",
        "--size",
        nargs=2,
        type=INPUT_HANDLERS["dimension"],
        metavar=("W", "H"),
        help="output size (default: base image size)",
    )
    out_group.add_argument(
        "--no-checker",
        action="store_true",
        help="leave transparent areas transparent instead of drawing a checkerboard",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the layer stack",
    )
    return parser

def main() -> None:
    """Main entry point for composite command."""
    parser = get_composite_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)

if __name__ == "__main__":
    main()
