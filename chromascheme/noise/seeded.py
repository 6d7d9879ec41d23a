"""
Deterministic noise for the ``chaos`` and ``perlin`` schemes.

Both streams are driven by numpy's PCG64 bit generator, whose output for a
given seed is fixed across platforms and numpy releases, so identical seeds
reproduce identical palettes.
"""
from __future__ import annotations

import logging
import math
from typing import List

import numpy as np
from numpy import ndarray as NDArray

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SEED = 1337
_SEED_MASK = (1 << 64) - 1
_LATTICE_STREAM = 1


def validate_seed(seed: object) -> int:
    """Return ``seed`` folded into the unsigned 64-bit range; reject non-integers."""
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ConfigurationError(f"Seed must be an integer, got {type(seed).__name__}")
    return int(seed) & _SEED_MASK


class SeededNoise:
    """
    Seeded source of pseudo-random reals in ``[0, 1)``.

    ``next`` walks a uniform stream, for jagged "controlled randomness".
    ``smooth`` reads a separate lattice stream and cosine-interpolates between
    neighbouring lattice points, so nearby positions give nearby values.
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.reseed(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reseed(self, seed: int) -> None:
        """Reset both streams; everything afterwards depends on ``seed`` only."""
        self._seed = validate_seed(seed)
        self._rng = np.random.Generator(np.random.PCG64(self._seed))
        self._lattice_rng = np.random.Generator(np.random.PCG64([self._seed, _LATTICE_STREAM]))
        self._lattice: List[float] = []
        logger.debug("Noise source reseeded with %d", self._seed)

    def next(self) -> float:
        return float(self._rng.random())

    def sample(self, n: int) -> NDArray:
        """Draw ``n`` successive values of the uniform stream."""
        return self._rng.random(n)

    def _lattice_point(self, index: int) -> float:
        while len(self._lattice) <= index:
            self._lattice.append(float(self._lattice_rng.random()))
        return self._lattice[index]

    def smooth(self, position: float) -> float:
        """Cosine-interpolated lattice noise at a non-negative ``position``."""
        if position < 0:
            raise ValueError(f"Noise position must be non-negative, got {position}")
        i = int(math.floor(position))
        frac = position - i
        a = self._lattice_point(i)
        b = self._lattice_point(i + 1)
        t = (1.0 - math.cos(math.pi * frac)) / 2.0
        return a * (1.0 - t) + b * t
