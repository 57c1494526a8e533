#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/files.py

from typing import Optional

from pixlab.core.buffer import PixelBuffer
from pixlab.core.errors import PixlabError
from pixlab.core.loader import LoadedImage, load_file, save_image
from .logger import fail, log


def load_or_exit(path: str) -> LoadedImage:
    """Load an image for a subcommand, exiting with status 1 on failure."""
    try:
        image = load_file(path)
    except FileNotFoundError:
        fail(f"file not found: '{path}'")
    except PixlabError as e:
        fail(f"failed to load '{path}': {e}")
    except OSError as e:
        fail(f"cannot read '{path}': {e.strerror or e}")
    return image


def save_or_exit(buffer: PixelBuffer, path: str, include_mask: Optional[bool] = None) -> str:
    try:
        fmt = save_image(buffer, path, include_mask)
    except ValueError as e:
        fail(str(e), 2)
    except OSError as e:
        fail(f"cannot write '{path}': {e.strerror or e}")
    log("success", f"saved {buffer.width}x{buffer.height} {fmt} image to '{path}'")
    return fmt
