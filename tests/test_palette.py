import numpy as np
import pytest

from chromascheme.config import PaletteConfig
from chromascheme.conversions import hex_to_hsv, hex_to_rgb
from chromascheme.palette import Palette, base_colors, generate, generate_color_set, generate_colors
from chromascheme.schemes import available_schemes
from chromascheme.types.color_types import WEB_SAFE_LEVELS
from chromascheme.variations import available_presets

HEX_CHARS = set("0123456789abcdef")


def flatten(color_set):
    return tuple(code for group in color_set for code in group)


@pytest.mark.parametrize("scheme", available_schemes())
@pytest.mark.parametrize("count", [2, 3, 7, 16])
def test_views_are_consistent(scheme, count):
    palette = generate(PaletteConfig(hue=123, scheme=scheme, count=count))
    assert len(palette.colors) == count * 4
    assert len(palette) == count * 4
    assert len(palette.color_set) == count
    assert all(len(group) == 4 for group in palette.color_set)
    assert flatten(palette.color_set) == palette.colors
    for code in palette.colors:
        assert len(code) == 6 and set(code) <= HEX_CHARS


@pytest.mark.parametrize("variation", available_presets())
def test_every_preset_runs(variation):
    palette = generate(PaletteConfig(scheme="tetrade", variation=variation))
    assert palette.rgb.shape == (4, 4, 3)
    assert palette.hsv.shape == (4, 4, 3)


def test_square_literal_hues():
    palette = generate(PaletteConfig(hue=0, scheme="square", count=4, distance=0))
    hues = [hex_to_hsv(group[0])[0] for group in palette.color_set]
    for hue, expected in zip(hues, [0, 90, 180, 270]):
        assert abs((hue - expected + 180) % 360 - 180) < 0.5


def test_contrast_literal_hue():
    palette = generate(PaletteConfig(hue=120, scheme="contrast", count=2))
    assert palette.hsv[1, 0, 0] == pytest.approx(300.0)
    assert abs(hex_to_hsv(palette.color_set[1][0])[0] - 300) < 0.5


def test_red_base_default_preset():
    palette = generate(PaletteConfig(hue=0, scheme="contrast", count=2))
    base, darker, lighter, muted = palette.color_set[0]
    assert (base, lighter, muted) == ("ff0000", "ff4d4d", "e67373")
    r, g, b = hex_to_rgb(darker)
    assert abs(r - 179) <= 1 and (g, b) == (0, 0)
    assert palette.color_set[1][0] == "00ffff"


@pytest.mark.parametrize("scheme", ["mono", "monochromatic"])
def test_mono_keeps_hue(scheme):
    palette = generate(PaletteConfig(hue=210, scheme=scheme, count=5))
    assert np.all(palette.hsv[..., 0] == 210.0)
    for group in palette.color_set:
        for code in group:
            h, s, _ = hex_to_hsv(code)
            if s > 0.05:
                assert abs(h - 210) < 3


@pytest.mark.parametrize("scheme", ["phi", "chaos", "gradient", "seasons"])
def test_web_safe(scheme):
    palette = generate(PaletteConfig(hue=17, scheme=scheme, count=9, web_safe=True))
    assert set(np.unique(palette.rgb)) <= set(WEB_SAFE_LEVELS)
    for code in palette.colors:
        assert all(channel in WEB_SAFE_LEVELS for channel in hex_to_rgb(code))


@pytest.mark.parametrize("scheme", ["chaos", "perlin"])
def test_noise_schemes_reproducible(scheme):
    config = PaletteConfig(hue=45, scheme=scheme, count=8, distance=0.8, seed=31337)
    assert generate(config).colors == generate(config).colors
    other = PaletteConfig(hue=45, scheme=scheme, count=8, distance=0.8, seed=31338)
    assert generate(config).colors != generate(other).colors


def test_saturation_adjustment_applied_before_variations():
    plain = PaletteConfig(hue=90, saturation=0.6, scheme="triade", count=3)
    boosted = PaletteConfig(hue=90, saturation=0.6, scheme="triade", count=3, saturation_adjustment=0.3)
    washed = PaletteConfig(hue=90, saturation=0.6, scheme="triade", count=3, saturation_adjustment=-2)
    assert np.allclose(generate(boosted).hsv[:, 0, 1], 0.9)
    assert np.allclose(generate(plain).hsv[:, 0, 1], 0.6)
    assert np.all(generate(washed).hsv[..., 1] == 0.0)
    # darker slot keeps the preset delta relative to the adjusted base
    assert np.allclose(generate(boosted).hsv[:, 1, 1], 0.9)


def test_analogic_complement_in_pipeline():
    config = PaletteConfig(hue=40, scheme="analogic", count=4, add_complement=True)
    assert base_colors(config)[-1].hue == pytest.approx(220.0)
    assert generate(config).hsv[-1, 0, 0] == pytest.approx(220.0)


def test_add_complement_ignored_elsewhere():
    with_flag = PaletteConfig(hue=40, scheme="triade", count=3, add_complement=True)
    without = PaletteConfig(hue=40, scheme="triade", count=3)
    assert generate(with_flag).colors == generate(without).colors


def test_shortcuts_match_generate(config):
    palette = generate(config)
    assert generate_colors(config) == palette.colors
    assert generate_color_set(config) == palette.color_set
    assert palette.get_colors() == palette.colors
    assert palette.get_color_set() == palette.color_set


def test_numeric_views_are_copies(config):
    palette = generate(config)
    palette.rgb[...] = 0
    assert palette.rgb.any()
    assert isinstance(palette, Palette)
    assert list(palette) == list(palette.colors)
