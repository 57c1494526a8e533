#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/depth/engine.py

import argparse

from pixlab.core.depth import analyze_depth
from pixlab.shared.files import load_or_exit
from pixlab.shared.logger import log
from .renderer import render_depth_report


def run(args: argparse.Namespace) -> None:
    image = load_or_exit(args.file)
    report = analyze_depth(image.buffer)

    print()
    render_depth_report(report, verbose=args.verbose)
    print()
    log("info", "estimated from the distinct values in use, not read from the file header")
