from .seeded import SeededNoise, DEFAULT_SEED

__all__ = ["SeededNoise", "DEFAULT_SEED"]
