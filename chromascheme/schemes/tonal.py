"""Schemes that keep the hue fixed or walk it along a path: mono, shades, tints, gradient, seasons."""
from __future__ import annotations
import math
from typing import List, NamedTuple

from ..colors.hsv import HSVColor
from ..utils.interpolate_hue import hue_lerp
from ..utils.num_utils import shortest_hue_delta
from .base import SchemeContext, unit_steps

MONO_SATURATION_SPAN = 0.6
SHADE_DEPTH = 0.75
TINT_DEPTH = 0.8


class Season(NamedTuple):
    name: str
    hue: float
    saturation: float
    value: float


SEASONS = (
    Season("spring", 0.0, -0.30, 0.00),
    Season("summer", 90.0, 0.00, 0.00),
    Season("autumn", 180.0, -0.10, -0.25),
    Season("winter", 270.0, -0.45, -0.10),
)


def mono(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    return [base.shift(saturation=-MONO_SATURATION_SPAN * i / count) for i in range(count)]


def shades(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    return [
        HSVColor(base.hue, base.saturation, base.value * (1.0 - SHADE_DEPTH * t))
        for t in unit_steps(count)
    ]


def tints(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    s, v = base.saturation, base.value
    return [
        HSVColor(base.hue, s * (1.0 - TINT_DEPTH * t), v + (1.0 - v) * t)
        for t in unit_steps(count)
    ]


def gradient(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    """
    Interpolate from the base to ``context.gradient_end``.

    Without an explicit end color the base rotated by ``180 * distance`` is
    used. Hue follows ``context.hue_direction``; saturation and value are
    linear.
    """
    end = context.gradient_end
    if end is None:
        end = base.rotate(180.0 * distance)
    u = unit_steps(count)
    hues = hue_lerp(base.hue, end.hue, u, context.hue_direction)
    sats = base.saturation + (end.saturation - base.saturation) * u
    vals = base.value + (end.value - base.value) * u
    return [HSVColor(h, s, v) for h, s, v in zip(hues, sats, vals)]


def seasons(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    """Cycle spring → summer → autumn → winter, interpolating when count is not 4."""
    n = len(SEASONS)
    colors = []
    for i in range(count):
        position = i * n / count
        k = int(math.floor(position))
        f = position - k
        a, b = SEASONS[k % n], SEASONS[(k + 1) % n]
        hue = a.hue + shortest_hue_delta(a.hue, b.hue) * f
        ds = a.saturation + (b.saturation - a.saturation) * f
        dv = a.value + (b.value - a.value) * f
        colors.append(HSVColor(base.hue + hue, base.saturation + ds, base.value + dv))
    return colors
