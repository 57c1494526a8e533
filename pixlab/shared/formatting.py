#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/formatting.py


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'rgba':
        return f"rgba({args[0]}, {args[1]}, {args[2]}, {args[3]})"
    elif fmt == 'linear':
        return f"linear({args[0]:.4f}, {args[1]:.4f}, {args[2]:.4f})"
    elif fmt == 'xyz':
        return f"xyz({args[0]:.4f}, {args[1]:.4f}, {args[2]:.4f})"
    elif fmt == 'lab':
        return f"lab({args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"
    elif fmt == 'oklab':
        return f"oklab({args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"
    elif fmt == 'oklch':
        return f"oklch({args[0]:.4f} {args[1]:.4f} {args[2]:.4f}deg)"
    elif fmt == 'gray7':
        return f"{args[0]}/127"

    return ""


def format_size(num_bytes: int) -> str:
    """Human readable byte count, 1024-based."""
    size = float(num_bytes)
    for unit in ("B", "KB", "MB"):
        if size < 1024 or unit == "MB":
            return f"{int(size)} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} MB"


def format_dimensions(width: int, height: int) -> str:
    return f"{width} x {height} px"
