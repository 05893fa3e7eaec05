"""A small line-oriented terminal text editor with in-memory line storage."""

__version__ = "0.1.0"
__all__ = ["__version__"]