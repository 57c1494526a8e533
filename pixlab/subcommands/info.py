#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/info.py

import argparse
import sys
from pixlab.core import config as c
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.truecolor import ensure_truecolor
from pixlab.logic.info import engine

def get_info_parser() -> argparse.ArgumentParser:
    """Create argument parser for info command."""
    parser = PixlabArgumentParser(
        prog="pixlab info",
        description="pixlab info: show format, size and color depth of an image",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("file", help="image file (GrayBit-7, PNG, JPEG, ...)")
    parser.add_argument(
        "--state-file",
        default=c.STATE_FILE,
        help=f"where the last GrayBit-7 metadata is kept (default: {c.STATE_FILE})",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="show per-channel statistics and the previously loaded file",
    )
    return parser

def main() -> None:
    """Main entry point for info command."""
    parser = get_info_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)

if __name__ == "__main__":
    main()
