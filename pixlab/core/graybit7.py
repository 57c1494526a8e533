#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/graybit7.py
"""
GrayBit-7: uncompressed grayscale raster with an optional 1-bit mask.

Layout (big-endian):

    offset  size  field
    0       4     signature 47 42 37 1D
    4       1     version (0x01)
    5       1     flags, bit 0 = mask present
    6       2     width
    8       2     height
    10      2     reserved, written as 0
    12      w*h   payload, one byte per pixel

Payload bits 0-6 hold the gray sample (0-127), bit 7 the mask bit.
Encoding is lossy: gray is averaged from RGB and quantised to 7 bits,
alpha is thresholded to a single bit.
"""

import math
import struct
from dataclasses import asdict, dataclass
from typing import Optional

import numpy as np

from . import config as c
from .buffer import PixelBuffer
from .errors import BadSignatureError, TruncatedDataError, UnsupportedVersionError


@dataclass(frozen=True)
class FormatMetadata:
    signature: bytes
    version: int
    has_mask: bool
    width: int
    height: int
    reserved: int = 0
    original_size: Optional[int] = None
    format: str = c.GB7_FORMAT_NAME

    @property
    def payload_size(self) -> int:
        return self.width * self.height

    def to_dict(self) -> dict:
        """Plain JSON-friendly form, used when the metadata is persisted."""
        d = asdict(self)
        d["signature"] = self.signature.hex()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "FormatMetadata":
        d = dict(d)
        d["signature"] = bytes.fromhex(d["signature"])
        return cls(**d)


@dataclass(frozen=True)
class DecodedImage:
    buffer: PixelBuffer
    metadata: FormatMetadata


def _half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


# 7-bit -> 8-bit expansion: round(g * 255 / 127)
_EXPAND = np.array(
    [_half_up(g / c.GB7_GRAY_MAX * c.RGB_MAX) for g in range(c.GB7_GRAY_MAX + 1)],
    dtype=np.uint8,
)
# 8-bit -> 7-bit reduction: round(g * 127 / 255)
_REDUCE = np.array(
    [_half_up(g / c.RGB_MAX * c.GB7_GRAY_MAX) for g in range(256)],
    dtype=np.uint8,
)


def is_graybit7(data: bytes) -> bool:
    return len(data) >= c.GB7_HEADER_SIZE and bytes(data[:4]) == c.GB7_SIGNATURE


def read_header(data: bytes) -> FormatMetadata:
    """Parse and validate the header without touching the payload."""
    if not is_graybit7(data):
        raise BadSignatureError("not a GrayBit-7 file")

    signature, version, flags, width, height, reserved = struct.unpack_from(
        c.GB7_HEADER_STRUCT, data, 0
    )
    if version != c.GB7_VERSION:
        raise UnsupportedVersionError(version)

    return FormatMetadata(
        signature=signature,
        version=version,
        has_mask=bool(flags & c.GB7_FLAG_MASK),
        width=width,
        height=height,
        reserved=reserved,
        original_size=len(data),
    )


def decode(data: bytes) -> DecodedImage:
    """Decode a GrayBit-7 file into an RGBA buffer plus its header metadata."""
    meta = read_header(data)

    count = meta.payload_size
    available = len(data) - c.GB7_HEADER_SIZE
    if available < count:
        raise TruncatedDataError(count, available)

    if count:
        payload = np.frombuffer(data, dtype=np.uint8, count=count, offset=c.GB7_HEADER_SIZE)
    else:
        payload = np.zeros(0, dtype=np.uint8)
    gray = _EXPAND[payload & c.GB7_GRAY_BITS]

    out = np.empty((count, 4), dtype=np.uint8)
    out[:, 0] = gray
    out[:, 1] = gray
    out[:, 2] = gray
    if meta.has_mask:
        out[:, 3] = np.where(payload & c.GB7_MASK_BIT, 255, 0)
    else:
        out[:, 3] = 255

    buffer = PixelBuffer(meta.width, meta.height, out.tobytes())
    return DecodedImage(buffer, meta)


def encode(buffer: PixelBuffer, include_mask: bool = False) -> bytes:
    """
    Encode an RGBA buffer as GrayBit-7.

    gray8 = round((R + G + B) / 3), gray7 = round(gray8 * 127 / 255).
    With include_mask, bit 7 is set when A > 127.
    """
    if buffer.width > c.GB7_MAX_DIMENSION or buffer.height > c.GB7_MAX_DIMENSION:
        raise ValueError(
            f"{buffer.width}x{buffer.height} exceeds the GrayBit-7 limit of "
            f"{c.GB7_MAX_DIMENSION} pixels per side"
        )

    header = struct.pack(
        c.GB7_HEADER_STRUCT,
        c.GB7_SIGNATURE,
        c.GB7_VERSION,
        c.GB7_FLAG_MASK if include_mask else 0x00,
        buffer.width,
        buffer.height,
        0,
    )

    px = buffer.array().reshape(-1, 4).astype(np.int32)
    # R+G+B is an integer, so sum/3 never lands exactly on .5
    gray8 = (2 * px[:, :3].sum(axis=1) + 3) // 6
    payload = _REDUCE[gray8] & c.GB7_GRAY_BITS
    if include_mask:
        payload = payload | np.where(px[:, 3] > c.GB7_ALPHA_THRESHOLD, c.GB7_MASK_BIT, 0).astype(np.uint8)

    return header + payload.astype(np.uint8).tobytes()


def gray7_of(value: int) -> int:
    """The 7-bit sample an 8-bit gray value corresponds to."""
    return int(_REDUCE[max(0, min(255, int(value)))])
