"""Dining philosophers simulation: argument validation, settings, a threaded table and a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]