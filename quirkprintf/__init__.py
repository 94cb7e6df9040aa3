"""A printf-style formatter with its own conversions and flag rules."""

__version__ = "0.1.0"
__all__ = ["__version__"]