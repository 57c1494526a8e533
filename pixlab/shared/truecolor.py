#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """Advertise 24-bit color unless the user opted out with NO_COLOR."""
    if sys.platform == "win32" or "NO_COLOR" in os.environ:
        return
    os.environ.setdefault("COLORTERM", "truecolor")


def swatches_enabled() -> bool:
    """Color swatches are drawn only for a truecolor terminal."""
    if "NO_COLOR" in os.environ:
        return False
    return os.environ.get("COLORTERM") in ("truecolor", "24bit")
