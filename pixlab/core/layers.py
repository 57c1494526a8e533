#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/layers.py
"""
Layer model and the command-style LayerStack.

Index 0 of the stack is the topmost layer; compositing walks the list in
reverse. Layers themselves are frozen: every command replaces the layer
with an updated copy, so buffers referenced by a layer are never touched.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from . import config as c
from .blending import BlendMode
from .buffer import PixelBuffer
from .conversions import rgb_to_hex
from .errors import LayerLimitError
from pixlab.shared.clamping import _clamp_int


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class AlphaChannel:
    """A layer's transparency as a viewable gray mask, plus a show/hide toggle."""

    visible: bool = True
    mask: Optional[PixelBuffer] = None


@dataclass(frozen=True)
class EmptyContent:
    kind = "empty"


@dataclass(frozen=True)
class ImageContent:
    buffer: PixelBuffer
    kind = "image"


@dataclass(frozen=True)
class ColorContent:
    rgba: Tuple[int, int, int, int]
    kind = "color"

    @property
    def hex(self) -> str:
        return "#" + rgb_to_hex(*self.rgba[:3])


Content = Union[EmptyContent, ImageContent, ColorContent]


@dataclass(frozen=True)
class SavedState:
    """What a layer looked like before it was filled with a color."""

    content: Content
    name: str
    alpha_channel: Optional[AlphaChannel]


@dataclass(frozen=True)
class Layer:
    id: str
    name: str
    visible: bool = True
    opacity: int = c.OPACITY_MAX
    blend_mode: BlendMode = BlendMode.NORMAL
    content: Content = field(default_factory=EmptyContent)
    position: Position = field(default_factory=Position)
    alpha_channel: Optional[AlphaChannel] = None
    original_state: Optional[SavedState] = None


@dataclass(frozen=True)
class LayerStackInfo:
    total_layers: int
    visible_layers: int
    active_layer: Optional[Layer]
    has_alpha_channels: bool


def extract_alpha_channel(buffer: PixelBuffer) -> Optional[PixelBuffer]:
    """
    Gray visualisation of the alpha channel: R=G=B=A, A=255.

    Returns None for a fully opaque image, which has no alpha to show.
    """
    if buffer.is_empty or not buffer.has_transparency():
        return None
    alpha = buffer.array()[..., 3]
    out = np.empty(alpha.shape + (4,), dtype=np.uint8)
    out[..., 0] = alpha
    out[..., 1] = alpha
    out[..., 2] = alpha
    out[..., 3] = 255
    return PixelBuffer.from_array(out)


def _parse_color(color: Union[str, Sequence[int]]) -> Tuple[int, int, int, int]:
    if isinstance(color, str):
        h = color.strip().lstrip("#")
        if len(h) == 3:
            h = "".join(ch * 2 for ch in h)
        if len(h) not in (6, 8):
            raise ValueError(f"invalid color: '{color}'")
        try:
            values = [int(h[i:i + 2], 16) for i in range(0, len(h), 2)]
        except ValueError:
            raise ValueError(f"invalid color: '{color}'") from None
    else:
        values = [int(v) for v in color]
        if len(values) not in (3, 4):
            raise ValueError(f"expected 3 or 4 components, got {len(values)}")
    if len(values) == 3:
        values.append(255)
    r, g, b, a = (_clamp_int(v, 0, 255) for v in values)
    return r, g, b, a


class LayerStack:
    """
    Ordered, never-empty collection of layers with one active layer.

    All commands mutate the stack in place and address layers by id.
    """

    def __init__(self, layers: Sequence[Layer], active_id: Optional[str] = None,
                 max_layers: int = c.MAX_LAYERS):
        if not layers:
            raise ValueError("a layer stack needs at least one layer")
        self._layers: List[Layer] = list(layers)
        self.max_layers = max_layers
        self._counter = len(self._layers)
        self.active_id = active_id if active_id is not None else self._layers[0].id
        self._index(self.active_id)

    @classmethod
    def from_image(cls, buffer: PixelBuffer, max_layers: int = c.MAX_LAYERS) -> "LayerStack":
        base = Layer(
            id=c.BASE_LAYER_ID,
            name=c.BASE_LAYER_NAME,
            content=ImageContent(buffer),
        )
        return cls([base], max_layers=max_layers)

    # ---- queries ----

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return tuple(self._layers)

    def __len__(self):
        return len(self._layers)

    def __iter__(self):
        return iter(self._layers)

    def _index(self, layer_id: str) -> int:
        for i, layer in enumerate(self._layers):
            if layer.id == layer_id:
                return i
        raise KeyError(f"no layer with id '{layer_id}'")

    def get(self, layer_id: str) -> Layer:
        return self._layers[self._index(layer_id)]

    @property
    def active(self) -> Layer:
        return self.get(self.active_id)

    def bottom_to_top(self) -> List[Layer]:
        return list(reversed(self._layers))

    def info(self) -> LayerStackInfo:
        return LayerStackInfo(
            total_layers=len(self._layers),
            visible_layers=sum(1 for layer in self._layers if layer.visible),
            active_layer=self.active,
            has_alpha_channels=any(layer.alpha_channel is not None for layer in self._layers),
        )

    # ---- structure ----

    def _update(self, layer_id: str, **changes: Any) -> Layer:
        i = self._index(layer_id)
        self._layers[i] = replace(self._layers[i], **changes)
        return self._layers[i]

    def add_layer(self, name: Optional[str] = None) -> Layer:
        """Insert an empty layer on top and make it active."""
        if len(self._layers) >= self.max_layers:
            raise LayerLimitError(self.max_layers)
        taken = {layer.id for layer in self._layers}
        self._counter += 1
        while f"layer-{self._counter}" in taken:
            self._counter += 1
        layer = Layer(
            id=f"layer-{self._counter}",
            name=name or c.LAYER_NAME_TEMPLATE.format(index=len(self._layers) + 1),
        )
        self._layers.insert(0, layer)
        self.active_id = layer.id
        return layer

    def delete_layer(self, layer_id: str) -> bool:
        """Remove a layer. The last remaining layer is kept and False is returned."""
        i = self._index(layer_id)
        if len(self._layers) <= 1:
            return False
        del self._layers[i]
        if self.active_id == layer_id:
            self.active_id = self._layers[0].id
        return True

    def reorder(self, dragged_id: str, target_id: str) -> None:
        """Move the dragged layer into the target layer's slot."""
        if dragged_id == target_id:
            return
        self.move_to(dragged_id, self._index(target_id))

    def move_to(self, layer_id: str, index: int) -> None:
        i = self._index(layer_id)
        layer = self._layers.pop(i)
        index = _clamp_int(index, 0, len(self._layers))
        self._layers.insert(index, layer)

    def set_active(self, layer_id: str) -> None:
        self._index(layer_id)
        self.active_id = layer_id

    # ---- properties ----

    def set_property(self, layer_id: str, prop: str, value: Any) -> Layer:
        if prop == "opacity":
            value = _clamp_int(math.floor(float(value) + 0.5), c.OPACITY_MIN, c.OPACITY_MAX)
        elif prop == "blend_mode":
            value = BlendMode.from_name(value)
        elif prop == "visible":
            value = bool(value)
        elif prop == "name":
            value = str(value)
        elif prop == "position":
            if not isinstance(value, Position):
                x, y = value
                value = Position(int(x), int(y))
        else:
            raise ValueError(f"unknown layer property: '{prop}'")
        return self._update(layer_id, **{prop: value})

    def toggle_visibility(self, layer_id: str) -> Layer:
        return self._update(layer_id, visible=not self.get(layer_id).visible)

    # ---- content ----

    def load_image(self, layer_id: str, buffer: PixelBuffer, name: Optional[str] = None) -> Layer:
        mask = extract_alpha_channel(buffer)
        layer = self.get(layer_id)
        return self._update(
            layer_id,
            content=ImageContent(buffer),
            name=name or layer.name,
            alpha_channel=AlphaChannel(True, mask) if mask is not None else None,
        )

    def fill_color(self, layer_id: str, color: Union[str, Sequence[int]]) -> Layer:
        """Fill a layer with a solid color, remembering the pre-fill state once."""
        rgba = _parse_color(color)
        layer = self.get(layer_id)
        saved = layer.original_state
        if not isinstance(layer.content, ColorContent):
            saved = SavedState(layer.content, layer.name, layer.alpha_channel)
        content = ColorContent(rgba)
        return self._update(
            layer_id,
            content=content,
            name=c.COLOR_LAYER_NAME_TEMPLATE.format(hex=content.hex),
            original_state=saved,
        )

    def reset_layer(self, layer_id: str) -> Layer:
        """Undo a color fill; without a saved state the layer becomes empty."""
        layer = self.get(layer_id)
        saved = layer.original_state
        if saved is None:
            name = layer.name
            if c.LAYER_NAME_PREFIX not in name:
                name = c.LAYER_NAME_TEMPLATE.format(index=layer.id)
            saved = SavedState(EmptyContent(), name, None)
        return self._update(
            layer_id,
            content=saved.content,
            name=saved.name,
            alpha_channel=saved.alpha_channel,
            original_state=None,
        )

    # ---- alpha channel ----

    def toggle_alpha_channel(self, layer_id: str) -> Layer:
        """Create the alpha channel if the layer has none, otherwise drop it."""
        layer = self.get(layer_id)
        if layer.alpha_channel is not None:
            return self._update(layer_id, alpha_channel=None)
        mask = None
        if isinstance(layer.content, ImageContent):
            mask = extract_alpha_channel(layer.content.buffer)
        return self._update(layer_id, alpha_channel=AlphaChannel(True, mask))

    def toggle_alpha_visibility(self, layer_id: str) -> Layer:
        layer = self.get(layer_id)
        if layer.alpha_channel is None:
            return layer
        channel = replace(layer.alpha_channel, visible=not layer.alpha_channel.visible)
        return self._update(layer_id, alpha_channel=channel)

    def delete_alpha_channel(self, layer_id: str) -> Layer:
        return self._update(layer_id, alpha_channel=None)

    def to_summary(self) -> Dict[str, Any]:
        """Plain description of the stack, top layer first."""
        rows = []
        for layer in self._layers:
            rows.append({
                "id": layer.id,
                "name": layer.name,
                "kind": layer.content.kind,
                "visible": layer.visible,
                "opacity": layer.opacity,
                "blend_mode": layer.blend_mode.value,
                "position": (layer.position.x, layer.position.y),
                "alpha_channel": None if layer.alpha_channel is None
                else ("visible" if layer.alpha_channel.visible else "hidden"),
                "active": layer.id == self.active_id,
            })
        return {"layers": rows, "max_layers": self.max_layers}
