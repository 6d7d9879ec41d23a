"""
Palette pipeline: base color → scheme → saturation adjustment → variations →
RGB/hex (optionally web-safe).

The palette is computed once per ``generate`` call. ``Palette.colors`` and
``Palette.color_set`` both read the same stored groups, so the flat and the
grouped views cannot drift apart.
"""
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from .colors.hsv import HSVColor, build_hsv_array
from .config import PaletteConfig
from .conversions import np_hsv_to_rgb, np_rgb_to_hex, np_snap_web_safe
from .noise.seeded import SeededNoise
from .schemes.base import SchemeContext
from .schemes.registry import get_scheme
from .types.color_types import VARIATIONS_PER_COLOR
from .variations.presets import expand_variations, get_preset

logger = logging.getLogger(__name__)

HexGroup = Tuple[str, str, str, str]


class Palette:
    """Result of one generation: HSV, RGB and hex views of the same colors."""
    __slots__ = ('_config', '_hsv', '_rgb', '_groups')

    def __init__(self, config: PaletteConfig, hsv: NDArray, rgb: NDArray, hex_codes: NDArray) -> None:
        self._config = config
        self._hsv = hsv
        self._rgb = rgb
        self._groups: Tuple[HexGroup, ...] = tuple(tuple(row) for row in hex_codes.tolist())

    @property
    def config(self) -> PaletteConfig:
        return self._config

    @property
    def color_set(self) -> Tuple[HexGroup, ...]:
        """One ``(base, darker, lighter, muted)`` group per base color."""
        return self._groups

    @property
    def colors(self) -> Tuple[str, ...]:
        """Every hex color, group after group."""
        return tuple(code for group in self._groups for code in group)

    @property
    def hsv(self) -> NDArray:
        """HSV values before RGB quantization, shape (count, 4, 3)."""
        return self._hsv.copy()

    @property
    def rgb(self) -> NDArray:
        """Integer RGB after optional web-safe snapping, shape (count, 4, 3)."""
        return self._rgb.copy()

    def get_colors(self) -> Tuple[str, ...]:
        return self.colors

    def get_color_set(self) -> Tuple[HexGroup, ...]:
        return self.color_set

    def __len__(self) -> int:
        return len(self._groups) * VARIATIONS_PER_COLOR

    def __iter__(self):
        return iter(self.colors)

    def __repr__(self) -> str:
        return f"Palette(scheme={self._config.scheme!r}, colors={list(self.colors)!r})"


def base_colors(config: PaletteConfig) -> list[HSVColor]:
    """Run the configured scheme and apply the saturation adjustment."""
    scheme = get_scheme(config.scheme)
    context = SchemeContext(
        noise=SeededNoise(config.seed),
        add_complement=config.add_complement,
        gradient_end=config.gradient_end_color,
        hue_direction=config.hue_direction,
    )
    colors = scheme(config.base_color, config.count, config.distance, context)
    if len(colors) != config.count:
        raise RuntimeError(
            f"Scheme {config.scheme!r} produced {len(colors)} colors, expected {config.count}"
        )
    if config.saturation_adjustment:
        colors = [c.shift(saturation=config.saturation_adjustment) for c in colors]
    return colors


def generate(config: PaletteConfig) -> Palette:
    logger.debug(
        "Generating %r palette: hue=%.2f count=%d distance=%.2f variation=%r",
        config.scheme, config.hue, config.count, config.distance, config.variation,
    )
    preset = get_preset(config.variation)
    groups = [expand_variations(color, preset) for color in base_colors(config)]

    hsv = build_hsv_array(groups)
    rgb = np_hsv_to_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    if config.web_safe:
        rgb = np_snap_web_safe(rgb)
    return Palette(config, hsv, rgb, np_rgb_to_hex(rgb))


def generate_colors(config: PaletteConfig) -> Tuple[str, ...]:
    return generate(config).colors


def generate_color_set(config: PaletteConfig) -> Tuple[HexGroup, ...]:
    return generate(config).color_set
