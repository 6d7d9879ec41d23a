from .base import SchemeContext, SchemeFunction
from .registry import SCHEMES, COMPLEMENT_SCHEMES, available_schemes, get_scheme

__all__ = [
    "SchemeContext",
    "SchemeFunction",
    "SCHEMES",
    "COMPLEMENT_SCHEMES",
    "available_schemes",
    "get_scheme",
]
