#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/__init__.py

__version__ = "0.1.0"

from pixlab.core.buffer import PixelBuffer
from pixlab.core.graybit7 import FormatMetadata, decode, encode
from pixlab.core.resample import Interpolation, resample
from pixlab.core.conversions import rgb_to_lab, rgb_to_oklab, rgb_to_oklch, rgb_to_xyz
from pixlab.core.contrast import ContrastRating, ContrastResult, contrast
from pixlab.core.depth import DepthReport, analyze_depth
from pixlab.core.blending import BlendMode
from pixlab.core.layers import Layer, LayerStack, extract_alpha_channel
from pixlab.core.compositor import composite
from pixlab.core.loader import LoadedImage, load_image, save_image
from pixlab.core.session import EditorSession
from pixlab.core.errors import (
    PixlabError,
    FormatError,
    BadSignatureError,
    UnsupportedVersionError,
    TruncatedDataError,
    DecodeError,
    LayerLimitError,
)
