from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from ..colors.hsv import HSVColor
from ..errors import ConfigurationError

Delta = Tuple[float, float]  # (saturation, value)


@dataclass(frozen=True)
class VariationPreset:
    """Additive (saturation, value) deltas for the darker, lighter and muted slots."""
    name: str
    darker: Delta
    lighter: Delta
    muted: Delta

    @property
    def deltas(self) -> Tuple[Delta, Delta, Delta]:
        return self.darker, self.lighter, self.muted


def _preset(name: str, darker: Delta, lighter: Delta, muted: Delta) -> VariationPreset:
    return VariationPreset(name, darker, lighter, muted)


PRESETS: Dict[str, VariationPreset] = {
    p.name: p
    for p in (
        _preset("default", (0.00, -0.30), (-0.30, 0.15), (-0.50, -0.10)),
        _preset("pastel",  (-0.30, -0.10), (-0.55, 0.20), (-0.65, 0.00)),
        _preset("soft",    (-0.15, -0.20), (-0.35, 0.10), (-0.45, -0.15)),
        _preset("light",   (-0.10, -0.15), (-0.45, 0.30), (-0.40, 0.15)),
        _preset("hard",    (0.10, -0.45),  (0.10, 0.20),  (-0.25, -0.25)),
        _preset("pale",    (-0.40, -0.10), (-0.70, 0.25), (-0.75, 0.05)),
        _preset("vibrant", (0.20, -0.25),  (0.20, 0.15),  (-0.20, -0.05)),
        _preset("muted",   (-0.35, -0.35), (-0.40, 0.00), (-0.60, -0.20)),
    )
}


def available_presets() -> Tuple[str, ...]:
    return tuple(PRESETS)


def get_preset(name: str) -> VariationPreset:
    try:
        return PRESETS[name]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unknown variation preset {name!r}; expected one of {', '.join(PRESETS)}"
        ) from None


def expand_variations(base: HSVColor, preset: VariationPreset) -> Tuple[HSVColor, HSVColor, HSVColor, HSVColor]:
    """
    Expand one base color into ``(base, darker, lighter, muted)``.

    Hue is never touched; the deltas are added to saturation and value and the
    results clamped to [0, 1].
    """
    darker, lighter, muted = (base.shift(saturation=ds, value=dv) for ds, dv in preset.deltas)
    return base, darker, lighter, muted
