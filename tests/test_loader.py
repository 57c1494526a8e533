"""Format sniffing on load and format selection on save."""

import io

import pytest
from PIL import Image

from pixlab.core import graybit7
from pixlab.core.errors import DecodeError, TruncatedDataError
from pixlab.core.loader import (
    decode_platform,
    encode_image,
    export_format,
    load_file,
    load_image,
    save_image,
)

from helpers import solid


def _png_bytes(buffer):
    out = io.BytesIO()
    Image.frombytes("RGBA", buffer.size, buffer.pixels).save(out, format="PNG")
    return out.getvalue()


def test_png_goes_through_pillow(random_buffer):
    loaded = load_image(_png_bytes(random_buffer), "noise.png")
    assert loaded.format_name == "PNG"
    assert loaded.buffer == random_buffer
    assert loaded.metadata is None
    assert not loaded.is_graybit7
    assert (loaded.width, loaded.height) == (13, 9)
    assert loaded.filename == "noise.png"


def test_opaque_png_depth_label():
    loaded = load_image(_png_bytes(solid(3, 3, (10, 20, 30, 255))))
    assert loaded.color_depth == "3-bit Monochrome"


def test_graybit7_is_sniffed_first():
    data = graybit7.encode(solid(2, 1, (255, 255, 255, 255)))
    loaded = load_image(data, "white.gb7")
    assert loaded.is_graybit7
    assert loaded.color_depth == "7-bit Grayscale"
    assert loaded.metadata.width == 2
    assert loaded.size == len(data)


def test_graybit7_with_mask_label(translucent_buffer):
    loaded = load_image(graybit7.encode(translucent_buffer, include_mask=True))
    assert loaded.color_depth == "8-bit Grayscale+A"
    assert loaded.metadata.has_mask


def test_damaged_graybit7_is_not_passed_to_pillow():
    data = graybit7.encode(solid(4, 4))[:-3]
    with pytest.raises(TruncatedDataError):
        load_image(data)


def test_garbage_is_a_decode_error():
    with pytest.raises(DecodeError):
        load_image(b"definitely not an image")
    with pytest.raises(DecodeError):
        decode_platform(b"")


@pytest.mark.parametrize("path, fmt", [
    ("a.gb7", "GrayBit-7"),
    ("a.GB7", "GrayBit-7"),
    ("a.png", "PNG"),
    ("dir/a.jpeg", "JPEG"),
    ("a.jpg", "JPEG"),
    ("a.webp", "WEBP"),
    ("a.bmp", "BMP"),
])
def test_export_format(path, fmt):
    assert export_format(path) == fmt


def test_export_format_rejects_unknown_extension():
    with pytest.raises(ValueError, match="unsupported"):
        export_format("a.tiff")


def test_graybit7_export_includes_mask_when_transparent(translucent_buffer):
    data = encode_image(translucent_buffer, "GrayBit-7")
    assert graybit7.read_header(data).has_mask
    opaque = encode_image(solid(2, 2), "GrayBit-7")
    assert not graybit7.read_header(opaque).has_mask
    forced = encode_image(translucent_buffer, "GrayBit-7", include_mask=False)
    assert not graybit7.read_header(forced).has_mask


def test_jpeg_export_drops_alpha(translucent_buffer):
    data = encode_image(translucent_buffer, "JPEG")
    with Image.open(io.BytesIO(data)) as img:
        assert img.format == "JPEG"
        assert img.mode == "RGB"


def test_save_and_load_file(tmp_path, random_buffer):
    path = tmp_path / "out.png"
    assert save_image(random_buffer, path) == "PNG"
    loaded = load_file(path)
    assert loaded.buffer == random_buffer
    assert loaded.filename == "out.png"


def test_save_graybit7_file(tmp_path, checker_2x2):
    path = tmp_path / "out.gb7"
    assert save_image(checker_2x2, str(path)) == "GrayBit-7"
    assert load_file(path).buffer == checker_2x2
