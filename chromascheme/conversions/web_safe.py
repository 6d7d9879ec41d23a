import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Sequence
from boundednumbers import clamp

from ..types.color_types import CHANNEL_MAX, RGBTuple, WEB_SAFE_STEP


def snap_channel(c: int) -> int:
    """Round a 0-255 channel to the nearest multiple of 51."""
    c = clamp(c, 0, CHANNEL_MAX)
    return int(math.floor(c / WEB_SAFE_STEP + 0.5)) * WEB_SAFE_STEP


def snap_web_safe(rgb: Sequence[int]) -> RGBTuple:
    r, g, b = rgb
    return snap_channel(r), snap_channel(g), snap_channel(b)


def np_snap_web_safe(rgb: NDArray) -> NDArray:
    """Vectorized: snap every channel of an (..., 3) array onto the web-safe cube."""
    arr = np.clip(np.asarray(rgb, dtype=float), 0, CHANNEL_MAX)
    return (np.floor(arr / WEB_SAFE_STEP + 0.5) * WEB_SAFE_STEP).astype(np.int64)
