"""BookTable - restaurant search and table booking."""

__version__ = "0.1.0"
