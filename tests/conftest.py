import pytest

from chromascheme.colors.hsv import HSVColor
from chromascheme.config import PaletteConfig
from chromascheme.noise.seeded import SeededNoise
from chromascheme.schemes.base import SchemeContext


@pytest.fixture
def base_color():
    return HSVColor(200.0, 0.8, 0.9)


@pytest.fixture
def noise():
    return SeededNoise(2024)


@pytest.fixture
def context(noise):
    return SchemeContext(noise=noise)


@pytest.fixture
def config():
    return PaletteConfig(hue=30.0, scheme="triade", count=3)
