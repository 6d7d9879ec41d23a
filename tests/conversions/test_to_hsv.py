import pytest

from chromascheme.conversions import hex_to_hsv, hsv_to_rgb, rgb_to_hex, rgb_to_hsv
from chromascheme.samples.colors import samples_hsv_rgb


def test_rgb_to_hsv_samples():
    for (h_exp, s_exp, v_exp), rgb in samples_hsv_rgb.items():
        h, s, v = rgb_to_hsv(*rgb)
        if s_exp > 0 and v_exp > 0:
            assert abs(h - h_exp) < 1.5
        assert abs(s - s_exp) < 1 / 255 * 2
        assert abs(v - v_exp) < 1 / 255


def test_achromatic_hue_is_zero():
    assert rgb_to_hsv(128, 128, 128) == (0.0, 0.0, pytest.approx(128 / 255))
    assert rgb_to_hsv(0, 0, 0) == (0.0, 0.0, 0.0)


def test_hue_round_trip_through_hex():
    for h in range(0, 360):
        hex_code = rgb_to_hex(hsv_to_rgb(h, 1.0, 1.0))
        recovered, _, _ = hex_to_hsv(hex_code)
        diff = abs((recovered - h + 180) % 360 - 180)
        assert diff < 0.5, f"hue {h} came back as {recovered}"


def test_channels_are_clamped():
    assert rgb_to_hsv(300, -5, 0) == rgb_to_hsv(255, 0, 0)
