#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/info/engine.py

import argparse

from pixlab.core.depth import analyze_depth
from pixlab.logic.depth.renderer import render_depth_report
from pixlab.shared.files import load_or_exit
from pixlab.shared.storage import StateStore, recall_metadata, remember_metadata
from .renderer import render_image_info


def run(args: argparse.Namespace) -> None:
    store = StateStore(args.state_file)
    previous = recall_metadata(store)

    image = load_or_exit(args.file)

    print()
    render_image_info(image)
    if not image.is_graybit7:
        print()
        render_depth_report(analyze_depth(image.buffer), verbose=args.verbose)
    if args.verbose and previous is not None:
        print()
        print(f"previous GrayBit-7 file: {previous.width}x{previous.height}, "
              f"mask {'on' if previous.has_mask else 'off'}")
    print()

    remember_metadata(store, image.metadata)
