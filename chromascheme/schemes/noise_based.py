from __future__ import annotations
from typing import List

from ..colors.hsv import HSVColor
from .base import SchemeContext, rotated

PERLIN_STEP = 0.35


def _offset(sample: float, distance: float) -> float:
    """Map a [0, 1) sample to a hue offset in [-180d, 180d)."""
    return (sample * 2.0 - 1.0) * 180.0 * distance


def chaos(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    noise = context.noise
    return rotated(base, [_offset(noise.next(), distance) for _ in range(count)])


def perlin(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    noise = context.noise
    return rotated(base, [_offset(noise.smooth(i * PERLIN_STEP), distance) for i in range(count)])
