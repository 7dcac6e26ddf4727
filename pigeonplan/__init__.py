"""Random pigeon release planning data, Mercator projection and coordinate-system plotting."""

__version__ = "0.1.0"
__all__ = ["__version__"]