"""
Chromascheme - Color Harmony Palettes
=====================================

Generate harmonious palettes from a single base color. A scheme spreads base
colors over the hue wheel (geometric rules or seeded noise), each base color
is expanded into four variations by a preset, and everything comes out as
6-digit lowercase hex, optionally snapped to the web-safe cube.

Quick Start
-----------
>>> from chromascheme import ColorScheme
>>> scheme = ColorScheme().from_hex("#3a7bd5").with_scheme("triade").with_count(3)
>>> palette = scheme.generate()
>>> len(palette.colors)
12
>>> len(palette.color_set)
3

Modules
-------
- conversions: HSV ↔ RGB ↔ hex conversion and web-safe snapping
- colors: the immutable HSVColor value
- noise: seeded, reproducible noise for the chaos and perlin schemes
- variations: the eight variation presets
- schemes: the sixteen hue distribution schemes
- config / palette / scheme: configuration record, pipeline and fluent surface
"""
from .errors import ChromaSchemeError, ConfigurationError
from .colors.hsv import HSVColor
from .conversions import (
    hsv_to_rgb,
    np_hsv_to_rgb,
    rgb_to_hsv,
    rgb_to_hex,
    hex_to_rgb,
    hex_to_hsv,
    snap_web_safe,
)
from .noise.seeded import SeededNoise, DEFAULT_SEED
from .variations.presets import PRESETS, VariationPreset, available_presets, expand_variations
from .schemes.registry import SCHEMES, available_schemes, get_scheme
from .config import PaletteConfig, DEFAULT_CONFIG
from .palette import Palette, generate, generate_colors, generate_color_set
from .scheme import ColorScheme

__version__ = "1.0.0"

__all__ = [
    # errors
    "ChromaSchemeError",
    "ConfigurationError",
    # colors and conversions
    "HSVColor",
    "hsv_to_rgb",
    "np_hsv_to_rgb",
    "rgb_to_hsv",
    "rgb_to_hex",
    "hex_to_rgb",
    "hex_to_hsv",
    "snap_web_safe",
    # engine
    "SeededNoise",
    "DEFAULT_SEED",
    "PRESETS",
    "VariationPreset",
    "available_presets",
    "expand_variations",
    "SCHEMES",
    "available_schemes",
    "get_scheme",
    # pipeline
    "PaletteConfig",
    "DEFAULT_CONFIG",
    "Palette",
    "generate",
    "generate_colors",
    "generate_color_set",
    "ColorScheme",
    "__version__",
]
