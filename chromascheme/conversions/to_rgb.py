import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
from boundednumbers import clamp01

from ..types.color_types import CHANNEL_MAX, HUE_360, RGBTuple
from ..utils.num_utils import wrap_hue


def unit_to_channel(c: float) -> int:
    """Quantize a unit float to a 0-255 channel, rounding halves up."""
    return int(math.floor(clamp01(c) * CHANNEL_MAX + 0.5))


def np_unit_to_channel(c: NDArray) -> NDArray:
    """Vectorized: quantize unit floats to 0-255 channels, rounding halves up."""
    return np.floor(np.clip(c, 0.0, 1.0) * CHANNEL_MAX + 0.5).astype(np.int64)


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Sector-based HSV to RGB conversion.

    Input:
        h: hue in degrees, wrapped into [0, 360)
        s, v: clamped into [0, 1]

    Output:
        r, g, b ∈ [0, 1]
    """
    h = wrap_hue(h)
    s = clamp01(s)
    v = clamp01(v)

    c = v * s
    hp = h / 60.0
    x = c * (1 - abs(hp % 2 - 1))
    m = v - c

    sector = int(hp) % 6
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m


def hsv_to_rgb(h: float, s: float, v: float) -> RGBTuple:
    """Convert HSV (degrees, unit, unit) to an integer RGB triple."""
    r, g, b = hsv_to_unit_rgb(h, s, v)
    return unit_to_channel(r), unit_to_channel(g), unit_to_channel(b)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB conversion.

    Args:
        h: array-like or scalar, hue in degrees (wrapped)
        s: array-like or scalar, saturation (clamped to [0, 1])
        v: array-like or scalar, value (clamped to [0, 1])

    Returns:
        rgb: array of shape (..., 3) with channels in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.clip(np.broadcast_to(s, out_shape), 0.0, 1.0)
    v = np.clip(np.broadcast_to(v, out_shape), 0.0, 1.0)

    h = np.mod(h, HUE_360)
    h = np.where(h >= HUE_360, 0.0, h)

    c = v * s
    hp = h / 60.0
    x = c * (1 - np.abs(np.mod(hp, 2) - 1))
    m = v - c
    zeros = np.zeros_like(c)

    sector = np.floor(hp).astype(np.int64) % 6
    r = np.choose(sector, [c, x, zeros, zeros, x, c])
    g = np.choose(sector, [x, c, c, x, zeros, zeros])
    b = np.choose(sector, [zeros, zeros, x, c, c, x])

    return np.stack([r + m, g + m, b + m], axis=-1)


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized HSV to integer RGB; returns an int array of shape (..., 3)."""
    return np_unit_to_channel(np_hsv_to_unit_rgb(h, s, v))
