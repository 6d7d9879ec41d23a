import math

from boundednumbers.functions import cyclic_wrap_float
from ..errors import ConfigurationError
from ..types.color_types import HUE_360


def wrap_hue(hue: float) -> float:
    """Wrap a hue angle into ``[0, 360)``; non-finite angles raise ``ConfigurationError``."""
    if not math.isfinite(hue):
        raise ConfigurationError(f"Hue must be finite, got {hue}")
    wrapped = float(cyclic_wrap_float(hue, 0.0, HUE_360))
    # float modulo can land exactly on the upper bound for tiny negatives
    return 0.0 if wrapped >= HUE_360 else wrapped


def shortest_hue_delta(start: float, end: float) -> float:
    """Signed angle in ``[-180, 180)`` that takes ``start`` to ``end`` the short way."""
    return (end - start + 180.0) % HUE_360 - 180.0
