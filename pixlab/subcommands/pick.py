#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/pick.py

import argparse
import sys
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.sanitizer import INPUT_HANDLERS
from pixlab.shared.truecolor import ensure_truecolor
from pixlab.logic.pick import engine

def get_pick_parser() -> argparse.ArgumentParser:
    """Create argument parser for pick command."""
    parser = PixlabArgumentParser(
        prog="pixlab pick",
        description="pixlab pick: read the color under a pixel in several color spaces",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("file", help="image file")
    parser.add_argument("-x", type=INPUT_HANDLERS["coordinate"], required=True, help="column")
    parser.add_argument("-y", type=INPUT_HANDLERS["coordinate"], required=True, help="row")
    parser.add_argument(
        "-c",
        "--compare",
        nargs=2,
        type=INPUT_HANDLERS["coordinate"],
        metavar=("X", "Y"),
        help="second pixel; prints the WCAG contrast between the two",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="also show linear RGB and OKLab",
    )
    return parser

def main() -> None:
    """Main entry point for pick command."""
    parser = get_pick_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)

if __name__ == "__main__":
    main()
