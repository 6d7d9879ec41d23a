import re
import numpy as np
from numpy import ndarray as NDArray
from typing import Sequence
from boundednumbers import clamp

from ..errors import ConfigurationError
from ..types.color_types import CHANNEL_MAX, HSVTuple, RGBTuple
from .to_hsv import rgb_to_hsv

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


def normalize_hex(text: str) -> str:
    """
    Validate a hex color and return it as 6 lowercase digits without ``#``.

    Raises:
        ConfigurationError: if ``text`` is not an optional ``#`` followed by
            exactly 6 hex digits.
    """
    if not isinstance(text, str):
        raise ConfigurationError(f"Hex color must be a string, got {type(text).__name__}")
    match = HEX_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ConfigurationError(f"Malformed hex color {text!r}: expected 6 hex digits")
    return match.group(1).lower()


def hex_to_rgb(text: str) -> RGBTuple:
    digits = normalize_hex(text)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def hex_to_hsv(text: str) -> HSVTuple:
    return rgb_to_hsv(*hex_to_rgb(text))


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Concatenate three channels as zero-padded lowercase hex."""
    r, g, b = (int(clamp(int(c), 0, CHANNEL_MAX)) for c in rgb)
    return f"{r:02x}{g:02x}{b:02x}"


def np_rgb_to_hex(rgb: NDArray) -> NDArray:
    """
    Vectorized: integer RGB array of shape (..., 3) to an array of hex strings
    of shape (...).
    """
    arr = np.clip(np.asarray(rgb), 0, CHANNEL_MAX).astype(np.int64)
    if arr.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {arr.shape}")
    flat = arr.reshape(-1, 3).tolist()
    codes = [f"{r:02x}{g:02x}{b:02x}" for r, g, b in flat]
    return np.array(codes, dtype="<U6").reshape(arr.shape[:-1])
