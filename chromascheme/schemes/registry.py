from __future__ import annotations
from typing import Dict, Tuple

from ..errors import ConfigurationError
from . import angular, noise_based, tonal
from .base import SchemeFunction

SCHEMES: Dict[str, SchemeFunction] = {
    "mono": tonal.mono,
    "monochromatic": tonal.mono,
    "contrast": angular.contrast,
    "triade": angular.triade,
    "tetrade": angular.tetrade,
    "square": angular.square,
    "analogic": angular.analogic,
    "splitComplement": angular.split_complement,
    "phi": angular.phi,
    "rainbow": angular.rainbow,
    "shades": tonal.shades,
    "tints": tonal.tints,
    "gradient": tonal.gradient,
    "seasons": tonal.seasons,
    "chaos": noise_based.chaos,
    "perlin": noise_based.perlin,
}

# schemes that read add_complement
COMPLEMENT_SCHEMES = frozenset({"analogic"})


def available_schemes() -> Tuple[str, ...]:
    return tuple(SCHEMES)


def get_scheme(name: str) -> SchemeFunction:
    try:
        return SCHEMES[name]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unknown scheme {name!r}; expected one of {', '.join(SCHEMES)}"
        ) from None
