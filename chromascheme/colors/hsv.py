from __future__ import annotations
import math
from typing import Iterable
from boundednumbers import clamp01
import numpy as np
from numpy import ndarray

from ..conversions import hsv_to_rgb, hex_to_hsv, rgb_to_hex
from ..errors import ConfigurationError
from ..types.color_types import HSVTuple, RGBTuple
from ..utils.num_utils import wrap_hue


class HSVColor:
    """
    Immutable HSV color: hue in degrees ``[0, 360)``, saturation and value in
    ``[0, 1]``.

    Finite numeric input is always accepted: hue wraps around the wheel and
    saturation/value are clamped. Infinite or NaN components raise
    ``ConfigurationError``. Every derived color goes through the
    constructor again, so the invariant holds after any arithmetic.
    """
    __slots__ = ('_hue', '_saturation', '_value', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, hue: float, saturation: float = 1.0, value: float = 1.0) -> None:
        if not all(math.isfinite(c) for c in (hue, saturation, value)):
            raise ConfigurationError(f"HSV components must be finite, got {(hue, saturation, value)}")
        self._hue = wrap_hue(float(hue))
        self._saturation = float(clamp01(float(saturation)))
        self._value = float(clamp01(float(value)))
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_tuple(cls, hsv: Iterable[float]) -> HSVColor:
        h, s, v = hsv
        return cls(h, s, v)

    @classmethod
    def from_hex(cls, text: str) -> HSVColor:
        """Parse ``rrggbb`` / ``#rrggbb``; raises ``ConfigurationError`` when malformed."""
        return cls.from_tuple(hex_to_hsv(text))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def hue(self) -> float:
        return self._hue

    @property
    def saturation(self) -> float:
        return self._saturation

    @property
    def value(self) -> float:
        return self._value

    def as_tuple(self) -> HSVTuple:
        return self._hue, self._saturation, self._value

    # ------------------ DERIVED COLORS ------------------
    def rotate(self, degrees: float) -> HSVColor:
        """Return this color with the hue turned by ``degrees`` (wrapped)."""
        return HSVColor(self._hue + degrees, self._saturation, self._value)

    def shift(self, saturation: float = 0.0, value: float = 0.0) -> HSVColor:
        """Return this color with additive saturation/value deltas (clamped)."""
        return HSVColor(self._hue, self._saturation + saturation, self._value + value)

    def with_hue(self, hue: float) -> HSVColor:
        return HSVColor(hue, self._saturation, self._value)

    def complement(self) -> HSVColor:
        return self.rotate(180.0)

    def to_rgb(self) -> RGBTuple:
        return hsv_to_rgb(*self.as_tuple())

    def to_hex(self) -> str:
        return rgb_to_hex(self.to_rgb())

    # ------------------ DUNDER ------------------
    def __iter__(self):
        return iter(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HSVColor):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"HSVColor(hue={self._hue:.2f}, saturation={self._saturation:.3f}, value={self._value:.3f})"


def build_hsv_array(colors: Iterable[Iterable[HSVColor]]) -> ndarray:
    """Stack rows of HSVColor into a float array of shape (rows, cols, 3)."""
    return np.array([[c.as_tuple() for c in row] for row in colors], dtype=float)
