from typing import Tuple
from boundednumbers import clamp, clamp01

from ..types.color_types import CHANNEL_MAX, HSVTuple


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSVTuple:
    """
    Analytical RGB to HSV.

    Input:
        r, g, b ∈ [0, 1] (clamped)

    Output:
        h ∈ [0, 360), s ∈ [0, 1], v ∈ [0, 1]
    """
    r, g, b = clamp01(r), clamp01(g), clamp01(b)
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    if delta == 0:
        h = 0.0
    elif mx == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif mx == g:
        h = 60.0 * ((b - r) / delta + 2)
    else:
        h = 60.0 * ((r - g) / delta + 4)

    s = 0.0 if mx == 0 else delta / mx
    return float(h), float(s), float(mx)


def rgb_to_hsv(r: int, g: int, b: int) -> HSVTuple:
    """Integer (0-255) RGB to HSV."""
    channels: Tuple[float, ...] = tuple(
        clamp(c, 0, CHANNEL_MAX) / CHANNEL_MAX for c in (r, g, b)
    )
    return unit_rgb_to_hsv(*channels)
