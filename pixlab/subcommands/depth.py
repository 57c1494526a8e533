#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/depth.py

import argparse
import sys
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.truecolor import ensure_truecolor
from pixlab.logic.depth import engine

def get_depth_parser() -> argparse.ArgumentParser:
    """Create argument parser for depth command."""
    parser = PixlabArgumentParser(
        prog="pixlab depth",
        description="pixlab depth: estimate the effective bits per channel of an image",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("file", help="image file")
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="show distinct value counts per channel",
    )
    return parser

def main() -> None:
    """Main entry point for depth command."""
    parser = get_depth_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)

if __name__ == "__main__":
    main()
