import pytest

from chromascheme.colors.hsv import HSVColor
from chromascheme.schemes import angular
from chromascheme.schemes.angular import GOLDEN_ANGLE, ring_offsets
from chromascheme.schemes.base import SchemeContext


def hues(colors):
    return [round(c.hue, 6) for c in colors]


def test_square_distance_zero():
    colors = angular.square(HSVColor(0), 4, 0.0, SchemeContext())
    assert hues(colors) == [0, 90, 180, 270]


def test_square_ignores_distance():
    assert angular.square(HSVColor(0), 4, 1.0, SchemeContext()) == angular.square(HSVColor(0), 4, 0.0, SchemeContext())


def test_tetrade_distance_zero_is_square():
    colors = angular.tetrade(HSVColor(0), 4, 0.0, SchemeContext())
    assert sorted(hues(colors)) == [0, 90, 180, 270]


def test_tetrade_distance_makes_rectangle():
    colors = angular.tetrade(HSVColor(0), 4, 1.0, SchemeContext())
    assert hues(colors) == [0, 45, 180, 225]


def test_triade_symmetry_and_bias():
    assert hues(angular.triade(HSVColor(10), 3, 0.0, SchemeContext())) == [10, 130, 250]
    assert hues(angular.triade(HSVColor(10), 3, 1.0, SchemeContext())) == [10, 160, 220]


def test_contrast_complement():
    colors = angular.contrast(HSVColor(120), 2, 0.5, SchemeContext())
    assert hues(colors) == [120, 300]


def test_split_complement():
    assert hues(angular.split_complement(HSVColor(0), 3, 0.0, SchemeContext())) == [0, 150, 210]
    assert hues(angular.split_complement(HSVColor(0), 3, 1.0, SchemeContext())) == [0, 120, 240]


def test_ring_offsets_fill_between_anchors():
    assert ring_offsets((0.0, 180.0), 4) == [0.0, 180.0, 90.0, 270.0]
    assert ring_offsets((0.0, 90.0, 180.0, 270.0), 8) == [0, 90, 180, 270, 45, 135, 225, 315]
    assert ring_offsets((0.0, 180.0), 3) == [0.0, 180.0, 90.0]


def test_square_rings_are_distinct():
    colors = angular.square(HSVColor(33), 16, 0.5, SchemeContext())
    assert len(set(hues(colors))) == 16


def test_analogic_alternates_and_scales():
    narrow = angular.analogic(HSVColor(180), 5, 0.0, SchemeContext())
    wide = angular.analogic(HSVColor(180), 5, 1.0, SchemeContext())
    assert hues(narrow) == [180, 190, 170, 200, 160]
    assert hues(wide) == [180, 240, 120, 300, 60]


def test_analogic_add_complement():
    context = SchemeContext(add_complement=True)
    colors = angular.analogic(HSVColor(40), 4, 0.5, context)
    assert len(colors) == 4
    assert hues(colors) == [40, 75, 5, 220]


def test_phi_golden_angle_steps():
    colors = angular.phi(HSVColor(0), 4, 0.9, SchemeContext())
    assert GOLDEN_ANGLE == pytest.approx(137.50776405)
    assert hues(colors) == [round((i * GOLDEN_ANGLE) % 360, 6) for i in range(4)]
    assert angular.phi(HSVColor(0), 4, 0.1, SchemeContext()) == colors


def test_rainbow_even_spacing():
    assert hues(angular.rainbow(HSVColor(15), 6, 0.5, SchemeContext())) == [15, 75, 135, 195, 255, 315]


def test_angular_schemes_keep_tone():
    base = HSVColor(0, 0.4, 0.6)
    for scheme in (angular.contrast, angular.triade, angular.tetrade, angular.analogic, angular.phi):
        for c in scheme(base, 6, 0.5, SchemeContext()):
            assert (c.saturation, c.value) == (0.4, 0.6)
