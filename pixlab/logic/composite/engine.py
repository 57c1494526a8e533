#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/composite/engine.py

import argparse

from pixlab.core.errors import LayerLimitError
from pixlab.core.session import EditorSession
from pixlab.shared.files import load_or_exit, save_or_exit
from pixlab.shared.logger import fail
from .renderer import render_stack


def build_session(args: argparse.Namespace) -> EditorSession:
    """Open the base image and stack the requested overlay layer on it."""
    session = EditorSession(load_or_exit(args.base))

    if args.overlay is None and args.fill is None:
        return session

    try:
        layer = session.edit("add_layer")
    except LayerLimitError as e:
        fail(str(e))

    if args.overlay is not None:
        overlay = load_or_exit(args.overlay)
        layer = session.edit("load_image", layer.id, overlay.buffer, overlay.filename)
        if args.hide_alpha and layer.alpha_channel is not None:
            session.edit("toggle_alpha_visibility", layer.id)
    else:
        session.edit("fill_color", layer.id, args.fill)

    session.edit("set_property", layer.id, "opacity", args.opacity)
    session.edit("set_property", layer.id, "blend_mode", args.blend)
    if args.offset:
        session.edit("set_property", layer.id, "position", tuple(args.offset))
    if args.below:
        session.edit("move_to", layer.id, len(session.stack) - 1)
    return session


def run(args: argparse.Namespace) -> None:
    session = build_session(args)

    width, height = args.size if args.size else session.size
    out = session.render(width, height, transparency_background=not args.no_checker)

    if args.verbose:
        print()
        render_stack(session.stack)
        print()
    save_or_exit(out, args.output)
