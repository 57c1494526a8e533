#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/contrast.py

import argparse
import sys
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.sanitizer import INPUT_HANDLERS
from pixlab.shared.truecolor import ensure_truecolor
from pixlab.logic.contrast import engine

def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = PixlabArgumentParser(
        prog="pixlab contrast",
        description="pixlab contrast: WCAG 2.1 contrast ratio between two colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("first", type=INPUT_HANDLERS["color"], help="hex (FF8800, #f80) or r,g,b")
    parser.add_argument("second", type=INPUT_HANDLERS["color"], help="hex (FF8800, #f80) or r,g,b")
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="list which WCAG levels pass",
    )
    return parser

def main() -> None:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)

if __name__ == "__main__":
    main()
