#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/loader.py
"""
Format sniffing on load and format selection on save.

GrayBit-7 is tried first; a bad signature means "not this format" and
the bytes are handed to Pillow, which plays the platform decoder.
"""

import io
import os
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError

from . import config as c
from . import graybit7
from .buffer import PixelBuffer
from .depth import analyze_depth
from .errors import BadSignatureError, DecodeError
from .graybit7 import FormatMetadata


@dataclass(frozen=True)
class LoadedImage:
    buffer: PixelBuffer
    format_name: str
    color_depth: str
    size: int
    metadata: Optional[FormatMetadata] = None
    filename: Optional[str] = None

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    @property
    def is_graybit7(self) -> bool:
        return self.format_name == c.GB7_FORMAT_NAME


def graybit7_depth_label(metadata: FormatMetadata) -> str:
    return "8-bit Grayscale+A" if metadata.has_mask else "7-bit Grayscale"


def decode_platform(data: bytes) -> Tuple[PixelBuffer, str]:
    """Decode a standard image file with Pillow into RGBA."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            fmt = c.PLATFORM_FORMAT_NAMES.get(img.format or "", img.format or "unknown")
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeError(f"unable to decode image: {e}") from e
    return PixelBuffer(rgba.width, rgba.height, rgba.tobytes()), fmt


def load_image(data: bytes, filename: Optional[str] = None) -> LoadedImage:
    """
    Decode an in-memory image file.

    Raises FormatError subclasses for damaged GrayBit-7 files and
    DecodeError when no decoder recognises the data.
    """
    data = bytes(data)
    try:
        decoded = graybit7.decode(data)
    except BadSignatureError:
        pass
    else:
        return LoadedImage(
            buffer=decoded.buffer,
            format_name=c.GB7_FORMAT_NAME,
            color_depth=graybit7_depth_label(decoded.metadata),
            size=len(data),
            metadata=decoded.metadata,
            filename=filename,
        )

    buffer, fmt = decode_platform(data)
    return LoadedImage(
        buffer=buffer,
        format_name=fmt,
        color_depth=analyze_depth(buffer).description,
        size=len(data),
        filename=filename,
    )


def load_file(path: Union[str, os.PathLike]) -> LoadedImage:
    with open(path, "rb") as f:
        data = f.read()
    return load_image(data, os.path.basename(os.fspath(path)))


def export_format(path: Union[str, os.PathLike]) -> str:
    """Output format implied by the file extension."""
    ext = os.path.splitext(os.fspath(path))[1].lower().lstrip(".")
    if ext == c.GB7_EXTENSION:
        return c.GB7_FORMAT_NAME
    try:
        return c.EXPORT_FORMATS[ext]
    except KeyError:
        supported = ", ".join([c.GB7_EXTENSION] + sorted(c.EXPORT_FORMATS))
        raise ValueError(f"unsupported output extension '.{ext}' (supported: {supported})") from None


def encode_image(buffer: PixelBuffer, fmt: str, include_mask: Optional[bool] = None,
                 quality: int = 90) -> bytes:
    """
    Serialise `buffer` in `fmt`.

    For GrayBit-7 the mask is included when the image has any
    transparency unless include_mask says otherwise.
    """
    if fmt == c.GB7_FORMAT_NAME:
        if include_mask is None:
            include_mask = buffer.has_transparency()
        return graybit7.encode(buffer, include_mask)

    img = Image.frombytes("RGBA", buffer.size, buffer.pixels)
    if fmt == "JPEG":
        img = img.convert("RGB")
    out = io.BytesIO()
    if fmt in ("JPEG", "WEBP"):
        img.save(out, format=fmt, quality=quality)
    else:
        img.save(out, format=fmt)
    return out.getvalue()


def save_image(buffer: PixelBuffer, path: Union[str, os.PathLike],
               include_mask: Optional[bool] = None) -> str:
    """Write `buffer` to `path`, choosing the format from the extension. Returns the format name."""
    fmt = export_format(path)
    data = encode_image(buffer, fmt, include_mask)
    with open(path, "wb") as f:
        f.write(data)
    return fmt
