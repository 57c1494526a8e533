#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/contrast/engine.py

import argparse

from pixlab.core.contrast import contrast
from pixlab.shared.preview import print_color_block
from .renderer import render_contrast, render_thresholds


def run(args: argparse.Namespace) -> None:
    result = contrast(args.first, args.second)

    print()
    print_color_block(args.first, "first")
    print_color_block(args.second, "second")
    print()
    render_contrast(result)
    if args.verbose:
        render_thresholds(result.ratio)
    print()
