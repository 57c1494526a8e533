"""Layer compositing: order, opacity, blend modes, fitting and the checkerboard."""

import numpy as np
import pytest

from pixlab.core import config as c
from pixlab.core.blending import BlendMode, blend, composite_over
from pixlab.core.compositor import checkerboard, composite, fit_rect
from pixlab.core.layers import ColorContent, ImageContent, Layer, LayerStack

from helpers import make_buffer, solid


def _stack_with_color(base, color, opacity=100, mode="normal"):
    stack = LayerStack.from_image(base)
    layer = stack.add_layer()
    stack.fill_color(layer.id, color)
    stack.set_property(layer.id, "opacity", opacity)
    stack.set_property(layer.id, "blend_mode", mode)
    return stack, layer


@pytest.mark.parametrize("size", [(1, 1), (7, 5), (2, 9)])
def test_output_has_requested_size(white_2x2, size):
    out = composite(LayerStack.from_image(white_2x2), *size)
    assert out.size == size
    assert len(out.pixels) == size[0] * size[1] * 4


def test_zero_size_output(white_2x2):
    assert composite(LayerStack.from_image(white_2x2), 0, 0).size == (0, 0)


def test_single_opaque_layer_is_reproduced(random_buffer):
    opaque = np.array(random_buffer.array())
    opaque[..., 3] = 255
    base = make_buffer(opaque)
    out = composite(LayerStack.from_image(base), base.width, base.height)
    assert out == base


def test_opacity_zero_matches_hidden(random_buffer, translucent_buffer):
    a = LayerStack.from_image(random_buffer)
    top = a.add_layer()
    a.load_image(top.id, translucent_buffer)
    a.set_property(top.id, "opacity", 0)

    b = LayerStack.from_image(random_buffer)
    top_b = b.add_layer()
    b.load_image(top_b.id, translucent_buffer)
    b.toggle_visibility(top_b.id)

    for checker in (True, False):
        assert composite(a, 13, 9, checker) == composite(b, 13, 9, checker)


def test_layers_are_drawn_bottom_to_top():
    base = solid(3, 3, (255, 255, 255, 255))
    stack, layer = _stack_with_color(base, (255, 0, 0))
    assert composite(stack, 3, 3).pixel(1, 1) == (255, 0, 0, 255)

    stack.reorder(c.BASE_LAYER_ID, layer.id)
    assert composite(stack, 3, 3).pixel(1, 1) == (255, 255, 255, 255)


def test_half_opacity_normal():
    stack, _ = _stack_with_color(solid(2, 2, (0, 0, 0, 255)), (255, 255, 255), opacity=50)
    assert composite(stack, 2, 2).pixel(0, 0) == (128, 128, 128, 255)


def test_multiply():
    stack, _ = _stack_with_color(solid(2, 2, (200, 100, 50, 255)), (128, 128, 128), mode="multiply")
    assert composite(stack, 2, 2).pixel(0, 0) == (100, 50, 25, 255)


def test_screen():
    stack, _ = _stack_with_color(solid(2, 2, (200, 100, 50, 255)), (128, 128, 128), mode="screen")
    assert composite(stack, 2, 2).pixel(0, 0) == (228, 178, 153, 255)


def test_overlay_with_black_source():
    stack, _ = _stack_with_color(solid(2, 2, (200, 100, 50, 255)), (0, 0, 0), mode="overlay")
    assert composite(stack, 2, 2).pixel(0, 0) == (145, 0, 0, 255)


def test_blend_over_transparent_backdrop_is_plain_source():
    dst = np.zeros((1, 1, 4))
    src = np.array([[[0.2, 0.4, 0.6, 0.5]]])
    for mode in BlendMode:
        assert composite_over(dst, src, mode) == pytest.approx(src)


def test_blend_formulas():
    cb = np.array([0.25, 0.75])
    cs = np.array([0.5, 0.5])
    assert blend(BlendMode.NORMAL, cb, cs) == pytest.approx(cs)
    assert blend(BlendMode.MULTIPLY, cb, cs) == pytest.approx([0.125, 0.375])
    assert blend(BlendMode.SCREEN, cb, cs) == pytest.approx([0.625, 0.875])
    assert blend(BlendMode.OVERLAY, cb, cs) == pytest.approx([0.25, 0.75])


def test_blend_mode_names():
    assert BlendMode.from_name("Multiply") is BlendMode.MULTIPLY
    assert BlendMode.from_name("source-over") is BlendMode.NORMAL
    with pytest.raises(ValueError):
        BlendMode.from_name("darken")


def test_translucent_over_opaque_has_no_checkerboard():
    stack, _ = _stack_with_color(solid(20, 20, (255, 0, 0, 255)), (0, 0, 255), opacity=50)
    out = composite(stack, 20, 20)
    assert out.pixel(0, 0) == (128, 0, 128, 255)
    assert out.pixel(15, 5) == (128, 0, 128, 255)


def test_checkerboard_behind_transparent_layer():
    stack = LayerStack.from_image(solid(20, 20, (0, 0, 0, 0)))
    out = composite(stack, 20, 20)
    assert out.pixel(0, 0) == (255, 255, 255, 255)
    assert out.pixel(10, 0) == (224, 224, 224, 255)
    assert out.pixel(10, 10) == (255, 255, 255, 255)
    assert out.pixel(5, 15) == (224, 224, 224, 255)


def test_checkerboard_can_be_disabled():
    stack = LayerStack.from_image(solid(20, 20, (0, 0, 0, 0)))
    out = composite(stack, 20, 20, transparency_background=False)
    assert not out.array()[..., 3].any()


def test_checkerboard_pattern():
    board = checkerboard(20, 10, origin=(5, 0))
    assert board[0, 0, 0] == pytest.approx(224 / 255)
    assert board[0, 5, 0] == pytest.approx(1.0)
    assert (board[..., 3] == 1.0).all()


def test_hidden_alpha_channel_flattens_alpha(translucent_buffer):
    stack = LayerStack.from_image(solid(4, 1, (0, 0, 0, 0)))
    stack.load_image(c.BASE_LAYER_ID, translucent_buffer)
    stack.toggle_alpha_visibility(c.BASE_LAYER_ID)
    out = composite(stack, 4, 1, transparency_background=False)
    expected = np.array(translucent_buffer.array())
    expected[..., 3] = 255
    assert (out.array() == expected).all()


def test_image_is_fitted_and_centred(white_2x2):
    out = composite(LayerStack.from_image(white_2x2), 4, 2)
    alpha = out.array()[0, :, 3].tolist()
    assert alpha == [0, 255, 255, 0]


def test_image_is_scaled_to_fit():
    out = composite(LayerStack.from_image(solid(2, 2, (10, 20, 30, 255))), 6, 6)
    assert (out.array() == (10, 20, 30, 255)).all()


def test_position_offsets_and_clips():
    stack = LayerStack.from_image(solid(4, 4))
    stack.set_property(c.BASE_LAYER_ID, "position", (2, 0))
    out = composite(stack, 4, 4, transparency_background=False)
    assert out.array()[0, :, 3].tolist() == [0, 0, 255, 255]


def test_layer_pushed_off_canvas_draws_nothing():
    stack = LayerStack.from_image(solid(4, 4))
    stack.set_property(c.BASE_LAYER_ID, "position", (100, 0))
    out = composite(stack, 4, 4)
    assert not out.array()[..., 3].any()


def test_empty_layer_contributes_nothing(random_buffer):
    plain = LayerStack.from_image(random_buffer)
    with_empty = LayerStack.from_image(random_buffer)
    with_empty.add_layer()
    assert composite(plain, 8, 8) == composite(with_empty, 8, 8)


@pytest.mark.parametrize("content", [
    ImageContent(None),
    ColorContent((255, 0, 0)),
    ColorContent(None),
    ColorContent((255, 0, 0, 300)),
])
def test_undrawable_content_is_treated_as_empty(content):
    base = Layer(id=c.BASE_LAYER_ID, name="Layer 1",
                 content=ImageContent(solid(2, 2, (10, 20, 30, 255))))
    broken = Layer(id="layer-2", name="Layer 2", content=content)
    expected = composite(LayerStack([base]), 2, 2)
    assert composite(LayerStack([broken, base]), 2, 2) == expected
    assert expected.pixel(1, 1) == (10, 20, 30, 255)


def test_stack_content_is_not_modified(translucent_buffer):
    stack = LayerStack.from_image(translucent_buffer)
    stack.toggle_alpha_visibility(c.BASE_LAYER_ID)
    before = translucent_buffer.pixels
    composite(stack, 10, 3)
    assert translucent_buffer.pixels == before
    assert stack.active.content.buffer is translucent_buffer


def test_fit_rect():
    assert fit_rect(2, 2, 4, 2) == (1, 0, 2, 2)
    assert fit_rect(100, 50, 10, 10) == (0, 3, 10, 5)
