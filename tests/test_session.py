"""EditorSession: dirty tracking, render caching, resize and picking."""

import pytest

from pixlab.core import config as c
from pixlab.core import graybit7
from pixlab.core.errors import LayerLimitError
from pixlab.core.loader import LoadedImage
from pixlab.core.resample import Interpolation
from pixlab.core.session import EditorSession

from helpers import solid


def _session(buffer):
    return EditorSession(LoadedImage(buffer, "PNG", "24-bit", 0))


def test_new_session_needs_redraw(white_2x2):
    session = _session(white_2x2)
    assert session.needs_redraw
    assert session.size == (2, 2)
    assert len(session.stack) == 1


def test_render_clears_dirty_flag_and_caches(white_2x2):
    session = _session(white_2x2)
    first = session.render()
    assert not session.needs_redraw
    assert session.render() is first
    assert session.render(4, 4) is not first


def test_edit_marks_dirty(white_2x2):
    session = _session(white_2x2)
    session.render()
    layer = session.edit("add_layer")
    assert session.needs_redraw
    session.edit("fill_color", layer.id, "#000000")
    assert session.render().pixel(0, 0) == (0, 0, 0, 255)


def test_edit_rejects_unknown_and_private_commands(white_2x2):
    session = _session(white_2x2)
    with pytest.raises(AttributeError):
        session.edit("explode")
    with pytest.raises(AttributeError):
        session.edit("_update", c.BASE_LAYER_ID)


def test_edit_propagates_stack_errors(white_2x2):
    session = _session(white_2x2)
    session.edit("add_layer")
    with pytest.raises(LayerLimitError):
        session.edit("add_layer")


def test_open_keeps_graybit7_metadata():
    data = graybit7.encode(solid(3, 2))
    session = EditorSession.open(data, "a.gb7")
    assert session.metadata.width == 3
    assert session.image.is_graybit7


def test_flatten_has_no_checkerboard():
    session = _session(solid(20, 20, (0, 0, 0, 0)))
    assert session.flatten().pixel(0, 0) == (0, 0, 0, 0)
    assert session.render().pixel(0, 0) == (255, 255, 255, 255)


def test_resize_rebuilds_stack(white_2x2):
    session = _session(white_2x2)
    session.edit("add_layer")
    session.render()
    resized = session.resize(6, 4, Interpolation.NEAREST)
    assert resized.size == (6, 4)
    assert session.size == (6, 4)
    assert len(session.stack) == 1
    assert session.needs_redraw


def test_pick(checker_2x2):
    session = _session(checker_2x2)
    assert session.pick(0, 0).rgb == (0, 0, 0)
    assert session.pick(1, 0).hex == "FFFFFF"
    with pytest.raises(IndexError):
        session.pick(2, 0)


def test_resize_drops_stale_graybit7_metadata():
    session = EditorSession.open(graybit7.encode(solid(3, 2)), "a.gb7")
    session.resize(6, 4)
    assert session.metadata is None
    assert session.image.metadata is None
    assert session.image.size == 6 * 4 * 4
    assert (session.image.width, session.image.height) == (6, 4)


def test_resize_to_same_size_keeps_metadata():
    session = EditorSession.open(graybit7.encode(solid(3, 2)), "a.gb7")
    session.resize(3, 2)
    assert session.metadata.width == 3
