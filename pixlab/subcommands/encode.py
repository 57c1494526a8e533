#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/encode.py

import argparse
import sys
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.truecolor import ensure_truecolor
from pixlab.logic.codec.engine import run_encode

def get_encode_parser() -> argparse.ArgumentParser:
    """Create argument parser for encode command."""
    parser = PixlabArgumentParser(
        prog="pixlab encode",
        description="pixlab encode: convert an image to GrayBit-7 (7-bit gray + 1-bit mask)",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="source image")
    parser.add_argument("output", help="destination .gb7 file")

    mask_group = parser.add_mutually_exclusive_group()
    mask_group.add_argument(
        "-m",
        "--mask",
        dest="mask",
        action="store_const",
        const=True,
        default=None,
        help="always store the 1-bit mask",
    )
    mask_group.add_argument(
        "-M",
        "--no-mask",
        dest="mask",
        action="store_const",
        const=False,
        help="never store the mask (default: only when the image has transparency)",
    )
    return parser

def main() -> None:
    """Main entry point for encode command."""
    parser = get_encode_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run_encode(args)

if __name__ == "__main__":
    main()
