from .num_utils import wrap_hue, shortest_hue_delta
from .default import value_or_default

__all__ = ["wrap_hue", "shortest_hue_delta", "value_or_default"]
