from __future__ import annotations
from typing import Literal, Tuple

HSVTuple = Tuple[float, float, float]
RGBTuple = Tuple[int, int, int]
HueDirection = Literal["cw", "ccw", "shortest", "longest"]

HUE_360 = 360.0
CHANNEL_MAX = 255
WEB_SAFE_STEP = 51
WEB_SAFE_LEVELS = (0, 51, 102, 153, 204, 255)

VARIATIONS_PER_COLOR = 4
MIN_COLORS = 2
MAX_COLORS = 16

HUE_DIRECTION_ALIASES = {
    "cw": "cw",
    "clockwise": "cw",
    "ccw": "ccw",
    "counterclockwise": "ccw",
    "shortest": "shortest",
    "longest": "longest",
}
