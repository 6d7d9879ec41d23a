from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsv import HSVColor
from ..noise.seeded import SeededNoise


@dataclass
class SchemeContext:
    """Inputs that only some schemes read."""
    noise: SeededNoise = field(default_factory=SeededNoise)
    add_complement: bool = False
    gradient_end: Optional[HSVColor] = None
    hue_direction: str = "shortest"


SchemeFunction = Callable[[HSVColor, int, float, SchemeContext], List[HSVColor]]


def unit_steps(count: int) -> NDArray:
    """``count`` evenly spaced parameters from 0 to 1 inclusive."""
    if count <= 1:
        return np.zeros(count, dtype=float)
    return np.linspace(0.0, 1.0, count)


def rotated(base: HSVColor, offsets) -> List[HSVColor]:
    return [base.rotate(float(offset)) for offset in offsets]
