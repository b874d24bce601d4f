"""Data access layer for Account records."""

__version__ = "0.1.0"
