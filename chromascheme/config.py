"""
Palette configuration record.

``PaletteConfig`` is a frozen dataclass: options are changed with
``dataclasses.replace`` (or the fluent ``ColorScheme`` wrapper), which runs
validation again, so a structurally invalid option fails at the moment it is
set. Out-of-range numbers are normalized rather than rejected.
"""
from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional

import numpy as np
from boundednumbers import clamp01

from .colors.hsv import HSVColor
from .errors import ConfigurationError
from .noise.seeded import DEFAULT_SEED, validate_seed
from .schemes.registry import COMPLEMENT_SCHEMES, get_scheme
from .types.color_types import HSVTuple, HueDirection, MAX_COLORS, MIN_COLORS
from .utils.interpolate_hue import canonical_direction
from .utils.num_utils import wrap_hue
from .variations.presets import get_preset

logger = logging.getLogger(__name__)


def validate_count(count: object) -> int:
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise ConfigurationError(f"Color count must be an integer, got {type(count).__name__}")
    if not MIN_COLORS <= count <= MAX_COLORS:
        raise ConfigurationError(
            f"Color count must be between {MIN_COLORS} and {MAX_COLORS}, got {count}"
        )
    return int(count)


def _real(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ConfigurationError(f"{name} must be a real number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value}")
    return float(value)


@dataclass(frozen=True)
class PaletteConfig:
    hue: float = 0.0
    saturation: float = 1.0
    value: float = 1.0
    scheme: str = "mono"
    count: int = 4
    distance: float = 0.5
    variation: str = "default"
    seed: int = DEFAULT_SEED
    saturation_adjustment: float = 0.0
    web_safe: bool = False
    add_complement: bool = False
    gradient_end: Optional[HSVTuple] = None
    hue_direction: HueDirection = "shortest"

    def __post_init__(self) -> None:
        def set_(name: str, value: Any) -> None:
            object.__setattr__(self, name, value)

        # structural checks raise
        get_scheme(self.scheme)
        get_preset(self.variation)
        set_("count", validate_count(self.count))
        set_("seed", validate_seed(self.seed))
        set_("hue_direction", canonical_direction(self.hue_direction))

        # numeric values are normalized
        set_("hue", wrap_hue(_real("hue", self.hue)))
        set_("saturation", float(clamp01(_real("saturation", self.saturation))))
        set_("value", float(clamp01(_real("value", self.value))))
        set_("distance", float(clamp01(_real("distance", self.distance))))
        set_("saturation_adjustment", _real("saturation_adjustment", self.saturation_adjustment))
        set_("web_safe", bool(self.web_safe))
        set_("add_complement", bool(self.add_complement))
        if self.gradient_end is not None:
            end = self.gradient_end
            if isinstance(end, str):
                end = HSVColor.from_hex(end)
            elif not isinstance(end, HSVColor):
                end = HSVColor.from_tuple(_real("gradient_end", c) for c in end)
            set_("gradient_end", end.as_tuple())

        if self.add_complement and self.scheme not in COMPLEMENT_SCHEMES:
            logger.debug("add_complement has no effect on scheme %r", self.scheme)

    @property
    def base_color(self) -> HSVColor:
        return HSVColor(self.hue, self.saturation, self.value)

    @property
    def gradient_end_color(self) -> Optional[HSVColor]:
        if self.gradient_end is None:
            return None
        return HSVColor.from_tuple(self.gradient_end)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> PaletteConfig:
        """Build a config from a plain mapping; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(f"Unknown palette option(s): {', '.join(unknown)}")
        return cls(**dict(options))

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_CONFIG = PaletteConfig()
