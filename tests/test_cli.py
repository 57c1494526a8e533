"""End-to-end runs of the pixlab command line."""

import sys

import pytest

from pixlab import main as cli
from pixlab.core import graybit7
from pixlab.core.loader import load_file, save_image

from helpers import solid


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["pixlab", *map(str, argv)])
    with pytest.raises(SystemExit) as exc:
        cli.main()
    return exc.value.code


@pytest.fixture
def png(tmp_path, random_buffer):
    path = tmp_path / "in.png"
    save_image(random_buffer, path)
    return path


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


def test_no_arguments_prints_help(monkeypatch, capsys):
    assert run_cli(monkeypatch) == 0
    assert "commands:" in capsys.readouterr().out


def test_unknown_command(monkeypatch, capsys):
    assert run_cli(monkeypatch, "explode") == 2
    assert "unrecognized command" in capsys.readouterr().err


def test_version(monkeypatch, capsys):
    assert run_cli(monkeypatch, "--version") == 0
    assert "pixlab" in capsys.readouterr().out


def test_encode_then_decode(monkeypatch, tmp_path, png):
    gb7 = tmp_path / "out.gb7"
    assert run_cli(monkeypatch, "encode", png, gb7) == 0
    data = gb7.read_bytes()
    assert graybit7.is_graybit7(data)
    # random alpha means the mask is stored by default
    assert graybit7.read_header(data).has_mask

    back = tmp_path / "back.png"
    assert run_cli(monkeypatch, "decode", gb7, back) == 0
    assert load_file(back).buffer == graybit7.decode(data).buffer


def test_encode_without_mask(monkeypatch, tmp_path, png):
    gb7 = tmp_path / "out.gb7"
    assert run_cli(monkeypatch, "encode", png, gb7, "--no-mask") == 0
    assert not graybit7.read_header(gb7.read_bytes()).has_mask


def test_decode_refuses_graybit7_output(monkeypatch, tmp_path, png):
    assert run_cli(monkeypatch, "decode", png, tmp_path / "x.gb7") == 2


def test_missing_input_exits_1(monkeypatch, tmp_path, capsys):
    assert run_cli(monkeypatch, "depth", tmp_path / "nope.png") == 1
    assert "file not found" in capsys.readouterr().err


def test_info_remembers_graybit7_metadata(monkeypatch, tmp_path, capsys):
    gb7 = tmp_path / "a.gb7"
    gb7.write_bytes(graybit7.encode(solid(3, 2)))
    state = tmp_path / "state.json"

    assert run_cli(monkeypatch, "info", gb7, "--state-file", state) == 0
    out = capsys.readouterr().out
    assert "GrayBit-7" in out
    assert "7-bit Grayscale" in out
    assert state.exists()


def test_info_on_png_shows_depth(monkeypatch, tmp_path, png, capsys):
    assert run_cli(monkeypatch, "info", png, "--state-file", tmp_path / "s.json") == 0
    out = capsys.readouterr().out
    assert "PNG" in out
    assert "bits per channel" in out


def test_resize_by_width_keeping_aspect(monkeypatch, tmp_path, png):
    out = tmp_path / "small.png"
    assert run_cli(monkeypatch, "resize", png, out, "-W", "26", "-k", "-a", "bicubic") == 0
    assert load_file(out).buffer.size == (26, 18)


def test_resize_by_percent(monkeypatch, tmp_path, png):
    out = tmp_path / "half.png"
    assert run_cli(monkeypatch, "resize", png, out, "-p", "200") == 0
    assert load_file(out).buffer.size == (26, 18)


def test_resize_rejects_mixed_modes(monkeypatch, tmp_path, png):
    assert run_cli(monkeypatch, "resize", png, tmp_path / "o.png", "-p", "50", "-W", "5") == 2


def test_resize_needs_a_size(monkeypatch, tmp_path, png):
    assert run_cli(monkeypatch, "resize", png, tmp_path / "o.png") == 2


def test_contrast(monkeypatch, capsys):
    assert run_cli(monkeypatch, "contrast", "000", "#ffffff", "-V") == 0
    out = capsys.readouterr().out
    assert "21.00:1" in out
    assert "AAA" in out


def test_contrast_rejects_bad_color(monkeypatch):
    assert run_cli(monkeypatch, "contrast", "nothex", "fff") == 2


def test_pick(monkeypatch, tmp_path, checker_2x2, capsys):
    path = tmp_path / "c.png"
    save_image(checker_2x2, path)
    assert run_cli(monkeypatch, "pick", path, "-x", "1", "-y", "0", "-c", "0", "0") == 0
    out = capsys.readouterr().out
    assert "FFFFFF" in out
    assert "21.00:1" in out


def test_pick_outside_image(monkeypatch, tmp_path, checker_2x2):
    path = tmp_path / "c.png"
    save_image(checker_2x2, path)
    assert run_cli(monkeypatch, "pick", path, "-x", "5", "-y", "0") == 2


def test_depth(monkeypatch, tmp_path, capsys):
    path = tmp_path / "flat.png"
    save_image(solid(4, 4, (1, 2, 3, 255)), path)
    assert run_cli(monkeypatch, "depth", path) == 0
    assert "3-bit Monochrome" in capsys.readouterr().out


def test_composite_fill_multiply(monkeypatch, tmp_path):
    base = tmp_path / "base.png"
    save_image(solid(4, 4, (200, 100, 50, 255)), base)
    out = tmp_path / "out.png"
    code = run_cli(monkeypatch, "composite", base, out, "-f", "808080", "-b", "multiply")
    assert code == 0
    assert load_file(out).buffer.pixel(0, 0) == (100, 50, 25, 255)


def test_composite_overlay_below_and_size(monkeypatch, tmp_path, capsys):
    base = tmp_path / "base.png"
    top = tmp_path / "top.png"
    save_image(solid(4, 4, (255, 0, 0, 255)), base)
    save_image(solid(2, 2, (0, 0, 255, 255)), top)
    out = tmp_path / "out.png"
    code = run_cli(monkeypatch, "composite", base, out, "-o", top, "--below",
                   "-s", "8", "8", "-V")
    assert code == 0
    result = load_file(out).buffer
    assert result.size == (8, 8)
    assert result.pixel(3, 3) == (255, 0, 0, 255)
    assert "layers" in capsys.readouterr().out


def test_composite_bad_blend_mode(monkeypatch, tmp_path, png):
    assert run_cli(monkeypatch, "composite", png, tmp_path / "o.png", "-f", "fff", "-b", "darken") == 2
