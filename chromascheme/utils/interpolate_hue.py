"""
Hue interpolation on the color wheel.

Hue is cyclic, so a straight lerp between two angles picks an arbitrary arc.
``hue_lerp`` makes the arc explicit through ``HueMode``.
"""

import numpy as np
from numpy import ndarray as NDArray
from enum import IntEnum
from typing import Optional, Union

from ..errors import ConfigurationError
from ..types.color_types import HUE_360, HUE_DIRECTION_ALIASES


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color space.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (≤180° arc) - most common
    LONGEST:  Longest path (≥180° arc)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


_NAME_TO_MODE = {
    "cw": HueMode.CW,
    "ccw": HueMode.CCW,
    "shortest": HueMode.SHORTEST,
    "longest": HueMode.LONGEST,
}


def canonical_direction(direction: Optional[str]) -> str:
    """Resolve a direction name or alias to one of cw/ccw/shortest/longest."""
    if direction is None:
        return "shortest"
    key = str(direction).lower()
    if key not in HUE_DIRECTION_ALIASES:
        raise ConfigurationError(
            f"Invalid hue direction: {direction!r}; expected one of {sorted(HUE_DIRECTION_ALIASES)}"
        )
    return HUE_DIRECTION_ALIASES[key]


def direction_to_mode(direction: Union[str, HueMode, None]) -> HueMode:
    if isinstance(direction, HueMode):
        return direction
    return _NAME_TO_MODE[canonical_direction(direction)]


def hue_arc(h0: float, h1: float, mode: HueMode) -> float:
    """Signed angular distance travelled from ``h0`` to ``h1`` under ``mode``."""
    cw = (h1 - h0) % HUE_360
    if mode == HueMode.CW:
        return cw
    if mode == HueMode.CCW:
        return cw - HUE_360 if cw > 0 else 0.0
    if mode == HueMode.SHORTEST:
        return cw if cw <= 180.0 else cw - HUE_360
    # LONGEST
    if cw == 0:
        return 0.0
    return cw if cw > 180.0 else cw - HUE_360


def hue_lerp(
    h0: float,
    h1: float,
    u: NDArray,
    direction: Union[str, HueMode, None] = HueMode.SHORTEST,
) -> NDArray:
    """
    Interpolate between two hues.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        u: Interpolation coefficients, 0 → h0, 1 → h1
        direction: HueMode or one of 'cw', 'ccw', 'shortest', 'longest'

    Returns:
        Interpolated hue values wrapped into [0, 360)
    """
    mode = direction_to_mode(direction)
    u = np.asarray(u, dtype=np.float64)
    arc = hue_arc(float(h0), float(h1), mode)
    hues = np.mod(h0 + arc * u, HUE_360)
    return np.where(hues >= HUE_360, 0.0, hues)
