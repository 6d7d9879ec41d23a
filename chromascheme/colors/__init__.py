from .hsv import HSVColor, build_hsv_array

__all__ = ["HSVColor", "build_hsv_array"]
