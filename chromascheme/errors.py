class ChromaSchemeError(Exception):
    """Base class for every error raised by chromascheme."""


class ConfigurationError(ChromaSchemeError, ValueError):
    """
    A palette option is structurally invalid.

    Raised when the option is set (unknown scheme or preset name, color count
    outside the supported range, malformed hex input), never deferred to
    generation. Numeric values that are merely out of range are normalized
    instead.
    """
