"""Daily GitHub notifications digest."""

__version__ = "0.1.0"
