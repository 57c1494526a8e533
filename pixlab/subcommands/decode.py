#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/decode.py

import argparse
import sys
from pixlab.core import config as c
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.truecolor import ensure_truecolor
from pixlab.logic.codec.engine import run_decode

def get_decode_parser() -> argparse.ArgumentParser:
    """Create argument parser for decode command."""
    formats = ", ".join(sorted(c.EXPORT_FORMATS))
    parser = PixlabArgumentParser(
        prog="pixlab decode",
        description="pixlab decode: write a GrayBit-7 (or any loadable) image as a standard format",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="source image")
    parser.add_argument("output", help=f"destination file, format from extension ({formats})")
    return parser

def main() -> None:
    """Main entry point for decode command."""
    parser = get_decode_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run_decode(args)

if __name__ == "__main__":
    main()
