#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/resize/engine.py

import argparse
import time

from pixlab.core.resample import resample, target_size
from pixlab.shared.files import load_or_exit, save_or_exit
from pixlab.shared.logger import fail, log


def resolve_target_size(args: argparse.Namespace, width: int, height: int):
    if args.percent is not None:
        return target_size(width, height, args.percent, None, mode="percent", keep_aspect=True)
    if args.width is None and args.height is None:
        fail("one of --width, --height or --percent is required", 2)
    return target_size(width, height, args.width, args.height,
                       mode="pixels", keep_aspect=args.keep_aspect)


def run(args: argparse.Namespace) -> None:
    image = load_or_exit(args.input)
    src = image.buffer

    try:
        new_w, new_h = resolve_target_size(args, src.width, src.height)
    except ValueError as e:
        fail(str(e), 2)

    start = time.perf_counter()
    out = resample(src, new_w, new_h, args.algorithm)
    elapsed = (time.perf_counter() - start) * 1000

    if args.verbose:
        log("info", f"{src.width}x{src.height} -> {new_w}x{new_h} "
                    f"({args.algorithm.value}, {elapsed:.1f} ms)")
    save_or_exit(out, args.output)
