from .presets import VariationPreset, PRESETS, get_preset, available_presets, expand_variations

__all__ = ["VariationPreset", "PRESETS", "get_preset", "available_presets", "expand_variations"]
