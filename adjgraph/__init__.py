"""Weighted graphs kept as an adjacency matrix, with a scripted demo."""

__version__ = "0.1.0"
__all__ = ["__version__"]