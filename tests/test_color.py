"""Color-space pipeline and WCAG contrast.

Known values (D65, 2 degree observer):
    - RGB(255, 255, 255) -> Lab(100, 0, 0)
    - RGB(0, 0, 0)       -> Lab(0, 0, 0) exactly
    - RGB(255, 0, 0)     -> Lab(53.24, 80.09, 67.20), OKLab(0.628, 0.225, 0.126)
"""

import pytest

from pixlab.core import conversions as conv
from pixlab.core.contrast import ContrastRating, contrast, get_contrast_ratio_rgb, rate_contrast
from pixlab.core.luminance import get_luminance
from pixlab.core.sample import ColorSample, sample_at

from helpers import make_buffer


def test_white_lab():
    L, a, b = conv.rgb_to_lab(255, 255, 255)
    assert L == pytest.approx(100.0, abs=0.5)
    assert a == pytest.approx(0.0, abs=0.5)
    assert b == pytest.approx(0.0, abs=0.5)


def test_black_lab_is_exactly_zero():
    assert conv.rgb_to_lab(0, 0, 0) == (0.0, 0.0, 0.0)


def test_red_lab():
    L, a, b = conv.rgb_to_lab(255, 0, 0)
    assert L == pytest.approx(53.24, abs=0.5)
    assert a == pytest.approx(80.09, abs=0.5)
    assert b == pytest.approx(67.20, abs=0.5)


def test_white_xyz_is_d65():
    x, y, z = conv.rgb_to_xyz(255, 255, 255)
    assert (x, y, z) == pytest.approx((95.047, 100.0, 108.883), abs=1e-3)


def test_srgb_transfer_segments():
    assert conv.srgb_to_linear(0) == 0.0
    assert conv.srgb_to_linear(255) == pytest.approx(1.0)
    # 10/255 is below the 0.04045 threshold, so the linear segment applies
    assert conv.srgb_to_linear(10) == pytest.approx(10 / 255 / 12.92)


def test_red_oklab_and_oklch():
    L, a, b = conv.rgb_to_oklab(255, 0, 0)
    assert (L, a, b) == pytest.approx((0.628, 0.2249, 0.1258), abs=1e-3)
    L2, C, h = conv.rgb_to_oklch(255, 0, 0)
    assert L2 == pytest.approx(L)
    assert C == pytest.approx(0.2577, abs=1e-3)
    assert h == pytest.approx(29.23, abs=0.5)


def test_white_oklch_is_achromatic():
    L, C, h = conv.rgb_to_oklch(255, 255, 255)
    assert L == pytest.approx(1.0, abs=1e-3)
    assert C < 1e-3
    assert 0.0 <= h < 360.0


@pytest.mark.parametrize("rgb", [(0, 0, 255), (255, 0, 255), (10, 200, 30), (128, 128, 128)])
def test_oklch_hue_range(rgb):
    _, _, h = conv.rgb_to_oklch(*rgb)
    assert 0.0 <= h < 360.0


def test_oklab_to_oklch_wraps_negative_angles():
    _, _, h = conv.oklab_to_oklch(0.5, 0.0, -0.1)
    assert h == pytest.approx(270.0)


def test_hex_helpers():
    assert conv.rgb_to_hex(255, 136, 0) == "FF8800"
    assert conv.rgb_to_hex(127.5, 0, 0) == "800000"
    assert conv.hex_to_rgb("#f80") == (255, 136, 0)
    with pytest.raises(ValueError):
        conv.hex_to_rgb("12345")


def test_luminance_extremes():
    assert get_luminance(0, 0, 0) == 0.0
    assert get_luminance(255, 255, 255) == pytest.approx(1.0)


def test_black_on_white_is_21():
    result = contrast((0, 0, 0), (255, 255, 255))
    assert result.ratio == pytest.approx(21.0)
    assert result.rating is ContrastRating.AAA
    assert str(result) == "21.00:1 (AAA)"


@pytest.mark.parametrize("c1, c2", [
    ((0, 0, 0), (255, 255, 255)),
    ((118, 118, 118), (255, 255, 255)),
    ((12, 200, 99), (240, 10, 77)),
])
def test_contrast_is_symmetric(c1, c2):
    assert contrast(c1, c2) == contrast(c2, c1)


def test_contrast_with_itself():
    result = contrast((90, 120, 33), (90, 120, 33))
    assert result.ratio == 1.0
    assert result.rating is ContrastRating.INSUFFICIENT
    assert not result.rating.passes


def test_gray_118_on_white_passes_aa():
    ratio = get_contrast_ratio_rgb((118, 118, 118), (255, 255, 255))
    assert ratio == pytest.approx(4.54, abs=0.01)
    assert rate_contrast(ratio) is ContrastRating.AA


@pytest.mark.parametrize("ratio, rating", [
    (7.0, ContrastRating.AAA),
    (6.99, ContrastRating.AA),
    (4.5, ContrastRating.AA),
    (4.49, ContrastRating.AA_LARGE),
    (3.0, ContrastRating.AA_LARGE),
    (2.99, ContrastRating.INSUFFICIENT),
])
def test_rating_thresholds(ratio, rating):
    assert rate_contrast(ratio) is rating


def test_color_sample_derives_lazily():
    sample = ColorSample(255, 0, 0)
    assert sample.hex == "FF0000"
    assert sample.lab == conv.rgb_to_lab(255, 0, 0)
    assert sample.oklch == pytest.approx(conv.rgb_to_oklch(255, 0, 0))
    assert "lab" in sample.__dict__


def test_sample_at_reads_buffer():
    buf = make_buffer([[(1, 2, 3, 255), (200, 100, 50, 0)]])
    sample = sample_at(buf, 1, 0)
    assert sample.rgb == (200, 100, 50)
    assert sample.contrast_with(sample).ratio == 1.0
