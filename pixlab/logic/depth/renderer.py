#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/depth/renderer.py

from pixlab.core import config as c
from pixlab.core.depth import DepthReport
from pixlab.shared.preview import print_row


def render_depth_report(report: DepthReport, verbose: bool = False) -> None:
    print_row("color depth", f"{c.BOLD_WHITE}{report.description}{c.RESET}")
    print_row("detail", report.detailed_description)
    print_row("total bits", str(report.total_bits))

    if report.has_partial_alpha:
        alpha = "partial (semi-transparent pixels)"
    elif report.has_alpha:
        alpha = "binary"
    else:
        alpha = "none"
    print_row("alpha", alpha)

    if verbose:
        for name, stats in report.channel_stats.items():
            print_row(
                f"  {name}",
                f"{stats.unique_values} distinct values, ~{stats.estimated_bits} bits",
            )
