"""Data models, Flask handlers and authentication middleware for a URL analysis service."""

__version__ = "0.1.0"