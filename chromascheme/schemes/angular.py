"""
Angular schemes: fixed or distance-parameterized offsets around the wheel.

Anchored schemes (contrast, triade, tetrade, square, splitComplement) repeat
their anchors in rings when more colors are asked for than there are anchors.
Each ring is turned by a fraction of the anchor spacing so the extra colors
fall between the existing ones instead of on top of them.
"""
from __future__ import annotations
import math
from typing import List, Sequence

from ..colors.hsv import HSVColor
from .base import SchemeContext, rotated

GOLDEN_ANGLE = 180.0 * (3.0 - math.sqrt(5.0))  # ≈ 137.5078°


def ring_offsets(anchors: Sequence[float], count: int) -> List[float]:
    n = len(anchors)
    rings = math.ceil(count / n)
    step = (360.0 / n) / rings
    return [anchors[i % n] + (i // n) * step for i in range(count)]


def contrast(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    return rotated(base, ring_offsets((0.0, 180.0), count))


def triade(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    # distance 0 is a perfect triad; 1 pulls both partners 30° toward the complement
    bias = 30.0 * distance
    return rotated(base, ring_offsets((0.0, 120.0 + bias, 240.0 - bias), count))


def tetrade(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    # distance 0 is a square; larger distances flatten it into a rectangle
    bias = 45.0 * distance
    return rotated(base, ring_offsets((0.0, 90.0 - bias, 180.0, 270.0 - bias), count))


def square(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    return rotated(base, ring_offsets((0.0, 90.0, 180.0, 270.0), count))


def split_complement(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    spread = 30.0 + 30.0 * distance
    return rotated(base, ring_offsets((0.0, 180.0 - spread, 180.0 + spread), count))


def analogic(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    """
    Neighbours alternating either side of the base: 0, +s, -s, +2s, -2s, ...

    With ``add_complement`` the last slot holds the base's complement instead of
    being appended, so the palette keeps its configured size at the cost of one
    neighbour: ``count=4`` yields the base, two neighbours and the complement.
    """
    step = 10.0 + 50.0 * distance
    neighbours = count - 1 if context.add_complement else count
    offsets = []
    for i in range(neighbours):
        k = (i + 1) // 2
        offsets.append(k * step if i % 2 else -k * step)
    colors = rotated(base, offsets)
    if context.add_complement:
        colors.append(base.complement())
    return colors


def phi(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    return rotated(base, (i * GOLDEN_ANGLE for i in range(count)))


def rainbow(base: HSVColor, count: int, distance: float, context: SchemeContext) -> List[HSVColor]:
    return rotated(base, (i * 360.0 / count for i in range(count)))
