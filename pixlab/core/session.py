#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/session.py

from typing import Optional, Tuple

from . import config as c
from .buffer import PixelBuffer
from .compositor import composite
from .graybit7 import FormatMetadata
from .layers import LayerStack
from .loader import LoadedImage, load_image
from .resample import Interpolation, resample
from .sample import ColorSample, sample_at


class EditorSession:
    """
    One open document: the layer stack, the format metadata it was
    loaded with, and a dirty flag for whoever renders it.

    The session is the only owner of its stack. Anything that changes
    the stack through the session marks it dirty; callers that edit
    `session.stack` directly call `mark_dirty` themselves.
    """

    def __init__(self, image: LoadedImage, metadata: Optional[FormatMetadata] = None,
                 max_layers: int = c.MAX_LAYERS):
        self.image = image
        self.metadata = metadata if metadata is not None else image.metadata
        self.stack = LayerStack.from_image(image.buffer, max_layers=max_layers)
        self.needs_redraw = True
        self._rendered: Optional[PixelBuffer] = None
        self._render_key: Optional[Tuple[int, int, bool]] = None

    @classmethod
    def open(cls, data: bytes, filename: Optional[str] = None,
             metadata: Optional[FormatMetadata] = None) -> "EditorSession":
        return cls(load_image(data, filename), metadata)

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.buffer.size

    def mark_dirty(self) -> None:
        self.needs_redraw = True

    def edit(self, command: str, *args, **kwargs):
        """Run a LayerStack command by name and mark the session dirty."""
        method = getattr(self.stack, command, None)
        if command.startswith("_") or not callable(method):
            raise AttributeError(f"unknown layer command: '{command}'")
        result = method(*args, **kwargs)
        self.mark_dirty()
        return result

    def render(self, width: Optional[int] = None, height: Optional[int] = None,
               transparency_background: bool = True) -> PixelBuffer:
        """Composite the stack, reusing the last result while nothing changed."""
        width = self.size[0] if width is None else width
        height = self.size[1] if height is None else height
        key = (width, height, transparency_background)
        if self.needs_redraw or self._rendered is None or self._render_key != key:
            self._rendered = composite(self.stack, width, height, transparency_background)
            self._render_key = key
            self.needs_redraw = False
        return self._rendered

    def flatten(self) -> PixelBuffer:
        """Composite at the document size without the checkerboard, as exported."""
        return composite(self.stack, self.size[0], self.size[1], transparency_background=False)

    def resize(self, width: int, height: int,
               algorithm: Interpolation = Interpolation.BILINEAR) -> PixelBuffer:
        """Resample the document and restart the stack from the result."""
        resized = resample(self.flatten(), width, height, algorithm)
        # the header no longer describes the document once its size changes
        metadata = self.image.metadata
        if metadata is not None and (metadata.width, metadata.height) != resized.size:
            metadata = None
        self.image = LoadedImage(
            buffer=resized,
            format_name=self.image.format_name,
            color_depth=self.image.color_depth,
            size=len(resized.pixels),
            metadata=metadata,
            filename=self.image.filename,
        )
        self.metadata = metadata
        self.stack = LayerStack.from_image(resized, max_layers=self.stack.max_layers)
        self.mark_dirty()
        return resized

    def pick(self, x: int, y: int) -> ColorSample:
        """Color under (x, y) in the flattened document."""
        return sample_at(self.flatten(), x, y)
