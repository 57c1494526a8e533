#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/composite/renderer.py

from pixlab.core import config as c
from pixlab.core.layers import LayerStack


def render_stack(stack: LayerStack) -> None:
    summary = stack.to_summary()
    print(f"{c.BOLD_WHITE}layers{c.RESET} ({len(summary['layers'])}/{summary['max_layers']}, top first)")
    for row in summary["layers"]:
        marker = f"{c.MSG_BOLD_COLORS['info']}*{c.RESET}" if row["active"] else " "
        state = "visible" if row["visible"] else "hidden"
        extra = ""
        if row["alpha_channel"] is not None:
            extra = f", alpha {row['alpha_channel']}"
        x, y = row["position"]
        print(f"  {marker} {row['name']:<16} {row['kind']:<6} {state}, "
              f"{row['opacity']}%, {row['blend_mode']}, offset ({x}, {y}){extra}")
