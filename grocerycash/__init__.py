"""Grocery items with stock and discount tracking, and simple multi-currency money values."""

__version__ = "0.1.0"
__all__ = ["currency", "items"]