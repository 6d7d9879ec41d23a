"""
Chromascheme Color Conversions
==============================

Scalar and vectorized (numpy) conversions between HSV, integer RGB and hex.

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)        floats in [0, 1]
    hsv_to_rgb(h, s, v)             ints in [0, 255]
    np_hsv_to_unit_rgb(h, s, v)     vectorized, (..., 3) floats
    np_hsv_to_rgb(h, s, v)          vectorized, (..., 3) ints

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
    rgb_to_hsv(r, g, b)

Hex:
    normalize_hex(text), hex_to_rgb(text), hex_to_hsv(text)
    rgb_to_hex(rgb), np_rgb_to_hex(array)

Web-safe:
    snap_web_safe(rgb), np_snap_web_safe(array)

Out-of-range numbers are normalized (hue wrapped, channels clamped); only
malformed hex strings raise.
"""

from .to_rgb import (
    hsv_to_unit_rgb,
    hsv_to_rgb,
    np_hsv_to_unit_rgb,
    np_hsv_to_rgb,
    unit_to_channel,
)
from .to_hsv import unit_rgb_to_hsv, rgb_to_hsv
from .hex_codes import normalize_hex, hex_to_rgb, hex_to_hsv, rgb_to_hex, np_rgb_to_hex
from .web_safe import snap_channel, snap_web_safe, np_snap_web_safe

__all__ = [
    # HSV → RGB
    'hsv_to_unit_rgb',
    'hsv_to_rgb',
    'np_hsv_to_unit_rgb',
    'np_hsv_to_rgb',
    'unit_to_channel',

    # RGB → HSV
    'unit_rgb_to_hsv',
    'rgb_to_hsv',

    # Hex
    'normalize_hex',
    'hex_to_rgb',
    'hex_to_hsv',
    'rgb_to_hex',
    'np_rgb_to_hex',

    # Web-safe
    'snap_channel',
    'snap_web_safe',
    'np_snap_web_safe',
]
