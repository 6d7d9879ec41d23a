import numpy as np
import pytest

from chromascheme.conversions import hex_to_rgb, normalize_hex, np_rgb_to_hex, rgb_to_hex
from chromascheme.errors import ConfigurationError
from chromascheme.samples.colors import samples_hex_rgb


def test_rgb_to_hex_samples():
    for hex_code, rgb in samples_hex_rgb.items():
        assert rgb_to_hex(rgb) == hex_code
        assert hex_to_rgb(hex_code) == rgb


def test_rgb_to_hex_is_zero_padded_lowercase():
    assert rgb_to_hex((1, 2, 171)) == "0102ab"
    assert rgb_to_hex((300, -4, 15)) == "ff000f"


@pytest.mark.parametrize("text, expected", [
    ("FF8800", "ff8800"),
    ("#ff8800", "ff8800"),
    ("  #AbCdEf ", "abcdef"),
])
def test_normalize_hex_accepts(text, expected):
    assert normalize_hex(text) == expected


@pytest.mark.parametrize("text", ["", "#fff", "ff88", "ff88001", "gg0000", "##ff0000", "ff 000"])
def test_normalize_hex_rejects(text):
    with pytest.raises(ConfigurationError):
        normalize_hex(text)


def test_normalize_hex_rejects_non_strings():
    with pytest.raises(ConfigurationError):
        normalize_hex(0xff0000)


def test_np_rgb_to_hex():
    rgb = np.array([[[255, 0, 0], [0, 255, 0]], [[0, 0, 255], [10, 11, 12]]])
    result = np_rgb_to_hex(rgb)
    assert result.shape == (2, 2)
    assert result.tolist() == [["ff0000", "00ff00"], ["0000ff", "0a0b0c"]]


def test_np_rgb_to_hex_rejects_wrong_shape():
    with pytest.raises(ValueError):
        np_rgb_to_hex(np.zeros((2, 4)))
