from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple, Union

from .colors.hsv import HSVColor
from .config import DEFAULT_CONFIG, PaletteConfig
from .palette import HexGroup, Palette, generate
from .types.color_types import HSVTuple, HueDirection
from .utils.default import value_or_default

EndColor = Union[float, str, HSVColor, HSVTuple]


class ColorScheme:
    """
    Fluent, immutable front end over ``PaletteConfig``.

    Every setter returns a new ``ColorScheme``; the receiver is left untouched.
    Invalid options raise ``ConfigurationError`` from the setter itself.

    Example:
        ColorScheme().from_hue(210).with_scheme("triade").with_variation("pastel").get_colors()
    """
    __slots__ = ('_config',)

    def __init__(self, config: Optional[PaletteConfig] = None) -> None:
        self._config = value_or_default(config, DEFAULT_CONFIG)

    def _with(self, **changes) -> ColorScheme:
        return ColorScheme(replace(self._config, **changes))

    # ------------------ SETTERS ------------------
    def from_hue(self, hue: float) -> ColorScheme:
        return self._with(hue=hue)

    def from_hex(self, text: str, keep_tone: bool = False) -> ColorScheme:
        """
        Take the base hue from a hex color.

        Saturation and value stay at their configured values unless
        ``keep_tone`` is set, in which case they are taken from the hex too.
        """
        color = HSVColor.from_hex(text)
        if keep_tone:
            return self._with(hue=color.hue, saturation=color.saturation, value=color.value)
        return self._with(hue=color.hue)

    def with_tone(self, saturation: Optional[float] = None, value: Optional[float] = None) -> ColorScheme:
        return self._with(
            saturation=value_or_default(saturation, self._config.saturation),
            value=value_or_default(value, self._config.value),
        )

    def with_scheme(self, name: str) -> ColorScheme:
        return self._with(scheme=name)

    def with_count(self, count: int) -> ColorScheme:
        return self._with(count=count)

    def with_distance(self, distance: float) -> ColorScheme:
        return self._with(distance=distance)

    def with_variation(self, name: str) -> ColorScheme:
        return self._with(variation=name)

    def with_seed(self, seed: int) -> ColorScheme:
        return self._with(seed=seed)

    def with_web_safe(self, enabled: bool = True) -> ColorScheme:
        return self._with(web_safe=enabled)

    def with_complement(self, enabled: bool = True) -> ColorScheme:
        return self._with(add_complement=enabled)

    def with_gradient_end(self, end: Optional[EndColor]) -> ColorScheme:
        """Set the gradient end from a hue, a hex string, an ``HSVColor`` or an HSV tuple."""
        if isinstance(end, (int, float)) and not isinstance(end, bool):
            end = self._config.base_color.with_hue(end)
        return self._with(gradient_end=end)

    def with_hue_direction(self, direction: str) -> ColorScheme:
        return self._with(hue_direction=direction)

    def adjust_saturation(self, amount: float) -> ColorScheme:
        """Accumulate an additive saturation change applied to every base color."""
        return self._with(saturation_adjustment=self._config.saturation_adjustment + amount)

    def saturate(self, amount: float = 0.1) -> ColorScheme:
        return self.adjust_saturation(abs(amount))

    def desaturate(self, amount: float = 0.1) -> ColorScheme:
        return self.adjust_saturation(-abs(amount))

    # ------------------ GETTERS ------------------
    @property
    def config(self) -> PaletteConfig:
        return self._config

    @property
    def hue(self) -> float:
        return self._config.hue

    @property
    def saturation(self) -> float:
        return self._config.saturation

    @property
    def value(self) -> float:
        return self._config.value

    @property
    def scheme(self) -> str:
        return self._config.scheme

    @property
    def count(self) -> int:
        return self._config.count

    @property
    def distance(self) -> float:
        return self._config.distance

    @property
    def variation(self) -> str:
        return self._config.variation

    @property
    def seed(self) -> int:
        return self._config.seed

    @property
    def web_safe(self) -> bool:
        return self._config.web_safe

    @property
    def saturation_adjustment(self) -> float:
        return self._config.saturation_adjustment

    @property
    def add_complement(self) -> bool:
        return self._config.add_complement

    @property
    def gradient_end(self) -> Optional[HSVTuple]:
        return self._config.gradient_end

    @property
    def hue_direction(self) -> HueDirection:
        return self._config.hue_direction

    # ------------------ OUTPUT ------------------
    def generate(self) -> Palette:
        return generate(self._config)

    def get_colors(self) -> Tuple[str, ...]:
        return self.generate().colors

    def get_color_set(self) -> Tuple[HexGroup, ...]:
        return self.generate().color_set

    def __repr__(self) -> str:
        return f"ColorScheme({self._config!r})"
